"""
Router error handling utilities.

Decorator translating domain exceptions into HTTPExceptions so every
endpoint maps errors the same way:

- ValidationError / ContentParseError -> 400
- NotFoundError subclasses            -> 404
- anything else                       -> 500
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from mindmenu.core.exceptions import MindMenuException, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_service_errors(action: str) -> Callable[[F], F]:
    """
    Build a decorator mapping service exceptions to HTTP responses.

    Args:
        action: Short description used in 500 detail messages
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except HTTPException:
                raise

            except NotFoundError as e:
                logger.warning(f"{action}: not found", extra={"error": e.message, "details": e.details})
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

            except ValidationError as e:
                logger.warning(f"{action}: invalid request", extra={"error": e.message, "details": e.details})
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

            except MindMenuException as e:
                logger.exception(f"{action} failed", extra={"error": e.message})
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=f"{action} failed: {e.message}",
                )

            except Exception as e:
                logger.exception(f"{action} failed", extra={"error": str(e)})
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=f"{action} failed: {str(e)}",
                )

        return wrapper  # type: ignore[return-value]

    return decorator
