"""Turn unexpected exceptions into a category and a user-facing message.

Route handlers never leak raw exception text; they log through
``handle_error`` and answer with a fixed 500 message. The returned
category and message only feed the log line.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class ErrorCategory(str, Enum):
    DATABASE = "database"
    AUTH = "auth"
    NETWORK = "network"
    VALIDATION = "validation"
    GENERIC = "generic"


@dataclass
class ErrorDetails:
    category: ErrorCategory
    message: str
    details: str
    context: Optional[str] = None

    @property
    def title(self) -> str:
        if self.context:
            return f"{self.message} ({self.context})"
        return self.message


DATABASE_MARKERS = ("database", "sql", "psycopg", "sqlalchemy", "integrity")
AUTH_MARKERS = ("auth", "login", "password")
NETWORK_MARKERS = ("network", "fetch", "connection")
VALIDATION_MARKERS = ("validation", "invalid", "required")


def _contains_any(message: str, markers) -> bool:
    return any(marker in message for marker in markers)


def categorize(error: BaseException) -> ErrorCategory:
    message = f"{type(error).__name__} {error}".lower()

    if _contains_any(message, DATABASE_MARKERS):
        return ErrorCategory.DATABASE
    if _contains_any(message, AUTH_MARKERS):
        return ErrorCategory.AUTH
    if _contains_any(message, NETWORK_MARKERS):
        return ErrorCategory.NETWORK
    if _contains_any(message, VALIDATION_MARKERS):
        return ErrorCategory.VALIDATION
    return ErrorCategory.GENERIC


def database_error(error: BaseException, context: Optional[str] = None) -> ErrorDetails:
    message = str(error).lower()

    if "connection" in message:
        return ErrorDetails(ErrorCategory.DATABASE, "Database connection failed",
                            "Unable to connect to the database. Please check your connection.", context)
    if "timeout" in message:
        return ErrorDetails(ErrorCategory.DATABASE, "Request timeout",
                            "The request took too long to complete. Please try again.", context)
    if "constraint" in message or "unique" in message:
        return ErrorDetails(ErrorCategory.DATABASE, "Data validation error",
                            "The data provided violates database constraints.", context)
    if "not found" in message:
        return ErrorDetails(ErrorCategory.DATABASE, "Resource not found",
                            "The requested resource could not be found.", context)
    return ErrorDetails(ErrorCategory.DATABASE, "A database error occurred",
                        "Please try again later", context)


def auth_error(error: BaseException, context: Optional[str] = None) -> ErrorDetails:
    message = str(error).lower()

    if "invalid credentials" in message:
        return ErrorDetails(ErrorCategory.AUTH, "Invalid credentials",
                            "The email or password you entered is incorrect", context)
    if "user not found" in message:
        return ErrorDetails(ErrorCategory.AUTH, "User not found",
                            "No account found with this email address", context)
    return ErrorDetails(ErrorCategory.AUTH, "Authentication failed",
                        "Please check your credentials and try again", context)


def network_error(error: BaseException, context: Optional[str] = None) -> ErrorDetails:
    message = str(error).lower()

    if "timeout" in message:
        return ErrorDetails(ErrorCategory.NETWORK, "Request timeout",
                            "The request took too long to complete", context)
    if "fetch" in message or "connection" in message:
        return ErrorDetails(ErrorCategory.NETWORK, "Connection failed",
                            "Unable to connect to the server. Please check your internet connection", context)
    return ErrorDetails(ErrorCategory.NETWORK, "Network error",
                        "Please check your internet connection and try again", context)


def validation_error(error: BaseException, context: Optional[str] = None) -> ErrorDetails:
    return ErrorDetails(ErrorCategory.VALIDATION, str(error) or "Validation error",
                        "Please correct the highlighted fields", context)


def generic_error(error: BaseException, context: Optional[str] = None) -> ErrorDetails:
    return ErrorDetails(ErrorCategory.GENERIC, str(error) or "An unexpected error occurred",
                        "Please try again or contact support if the problem persists", context)


HANDLERS = {
    ErrorCategory.DATABASE: database_error,
    ErrorCategory.AUTH: auth_error,
    ErrorCategory.NETWORK: network_error,
    ErrorCategory.VALIDATION: validation_error,
    ErrorCategory.GENERIC: generic_error,
}


def handle_error(error: BaseException, context: Optional[str] = None) -> ErrorDetails:
    """Categorize ``error`` and log it with its user-facing title."""
    details = HANDLERS[categorize(error)](error, context)
    logger.error("%s error: %s - %s", details.category.value, details.title,
                 details.details, exc_info=error)
    return details
