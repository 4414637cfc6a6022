"""Azure DevOps access for prdigest."""

from prdigest.client.azure_devops import AzureDevOpsClient, read_personal_access_token

__all__ = [
    "AzureDevOpsClient",
    "read_personal_access_token",
]
