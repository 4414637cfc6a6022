"""Command line interface for prdigest."""
