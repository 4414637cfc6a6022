"""Retry utilities for handling transient HTTP failures."""

import time
import logging
from typing import TypeVar, Callable, Optional, Tuple

T = TypeVar("T")
logger = logging.getLogger(__name__)


class RetryHandler:
    """Runs a callable again with exponential backoff when it fails transiently."""

    def __init__(
        self,
        max_attempts: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 30.0,
        on_retry: Optional[Callable[[int, Exception], None]] = None,
        exceptions: Tuple[type, ...] = (Exception,),
        should_retry: Optional[Callable[[Exception], bool]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the retry handler.

        Args:
            max_attempts: Maximum number of attempts, the first one included
            base_delay: Initial delay between retries in seconds
            max_delay: Maximum delay between retries
            on_retry: Optional callback called on each retry
            exceptions: Tuple of exception types to catch
            should_retry: Optional predicate; a caught exception it rejects
                is raised immediately
            sleep: Function used to wait between attempts
        """
        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.on_retry = on_retry
        self.exceptions = exceptions
        self.should_retry = should_retry
        self._sleep = sleep

    def delay_for(self, attempt: int) -> float:
        """Backoff delay after the given zero-based attempt."""
        return min(self.base_delay * (2**attempt), self.max_delay)

    def execute(self, func: Callable[..., T], *args, **kwargs) -> T:
        """Execute function with retry logic.

        Args:
            func: Function to execute
            *args: Positional arguments for the function
            **kwargs: Keyword arguments for the function

        Returns:
            Function result

        Raises:
            The last exception if all attempts fail, or the first one
            ``should_retry`` rejects
        """
        last_exception: Optional[Exception] = None

        for attempt in range(self.max_attempts):
            try:
                return func(*args, **kwargs)
            except self.exceptions as e:
                if self.should_retry is not None and not self.should_retry(e):
                    raise
                last_exception = e
                if attempt < self.max_attempts - 1:
                    delay = self.delay_for(attempt)

                    if self.on_retry:
                        self.on_retry(attempt, e)
                    else:
                        logger.warning(
                            f"Attempt {attempt + 1} failed: {e}. "
                            f"Retrying in {delay:.1f}s..."
                        )

                    self._sleep(delay)

        raise last_exception  # type: ignore
