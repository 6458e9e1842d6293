"""
Conversation error handling utilities.

Decorator mapping domain exceptions onto HTTP responses consistently across
chat and relationship endpoints.

Dependencies: fastapi, talkthrough.core.exceptions
System role: Domain error to HTTP status translation
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError as PydanticValidationError

from talkthrough.core.exceptions import (
    InvalidCategoryError,
    SessionNotFoundError,
    ValidationError,
)
from talkthrough.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_conversation_errors(func: F) -> F:
    """
    Decorator to transform domain errors into HTTPExceptions.

    - InvalidCategoryError -> 400 with the list of valid types
    - ValidationError -> 400
    - SessionNotFoundError -> 404 with code SESSION_NOT_FOUND
    - pydantic ValidationError -> 422
    - anything else -> 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except InvalidCategoryError as e:
            logger.warning("Invalid relationship type", extra={"category": str(e.category)})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={
                    "error": e.message,
                    "code": "INVALID_RELATIONSHIP_TYPE",
                    "validTypes": e.valid_categories,
                },
            )

        except ValidationError as e:
            logger.warning("Invalid request", extra={"field": e.field, "error": e.message})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"error": e.message, "code": "VALIDATION_ERROR", "field": e.field},
            )

        except SessionNotFoundError as e:
            logger.warning("Session not found", extra={"session_id": e.session_id})
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail={"error": "Session not found", "code": "SESSION_NOT_FOUND"},
            )

        except PydanticValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.errors(),
            )

        except Exception as e:
            log_exception_with_context(
                logger,
                "Unexpected failure in conversation operation",
                e,
                operation=func.__name__,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail={"error": f"Failed to {func.__name__.replace('_', ' ')}", "code": "INTERNAL_ERROR"},
            )

    return wrapper  # type: ignore
