import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from requests.exceptions import HTTPError

from jira_cli.exceptions import JiraCLIAuthenticationError

logger = logging.getLogger("jira-cli.utils")

F = TypeVar("F", bound=Callable[..., Any])


def handle_auth_errors(service_name: str = "Jira API") -> Callable[[F], F]:
    """
    Decorator to turn 401/403 responses into JiraCLIAuthenticationError.

    Every other exception, including other HTTP errors, is re-raised unchanged.

    Args:
        service_name: Name of the service for error messages (e.g., "Jira API").
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            try:
                return func(self, *args, **kwargs)
            except HTTPError as http_err:
                if http_err.response is not None and http_err.response.status_code in [
                    401,
                    403,
                ]:
                    error_msg = (
                        f"Authentication failed for {service_name} "
                        f"({http_err.response.status_code}). "
                        "Token may be expired or invalid. Please verify credentials."
                    )
                    logger.error(error_msg)
                    raise JiraCLIAuthenticationError(error_msg) from http_err
                operation_name = getattr(func, "__name__", "API operation")
                logger.error(
                    f"HTTP error during {operation_name}: {http_err}",
                    exc_info=False,
                )
                raise

        return wrapper  # type: ignore[return-value]

    return decorator
