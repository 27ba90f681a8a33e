"""Exception classes for the Jira notification pipeline."""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification."""
    CONFIGURATION = "configuration"
    DIRECTORY = "directory"
    DELIVERY = "delivery"
    CHAT_API = "chat_api"
    NETWORK = "network"
    SYSTEM = "system"


class NotifierError(Exception):
    """Base exception for the notifier."""

    def __init__(self,
                 message: str,
                 severity: ErrorSeverity = ErrorSeverity.MEDIUM,
                 category: ErrorCategory = ErrorCategory.SYSTEM,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.severity = severity
        self.category = category
        self.context = context or {}
        self.recoverable = True

    def to_dict(self) -> Dict[str, Any]:
        """Error details for log records."""
        return {
            "message": str(self),
            "category": self.category.value,
            "severity": self.severity.value,
            "recoverable": self.recoverable,
            "context": self.context,
        }


class ConfigurationError(NotifierError):
    """Raised when a setting cannot be read or has an unusable value."""

    def __init__(self,
                 message: str,
                 config_key: Optional[str] = None,
                 expected_type: Optional[str] = None):
        super().__init__(
            message,
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.CONFIGURATION
        )
        self.config_key = config_key
        self.expected_type = expected_type


class DirectoryLookupError(NotifierError):
    """Raised when the user directory cannot answer a lookup."""

    def __init__(self,
                 message: str,
                 username: Optional[str] = None,
                 original_error: Optional[Exception] = None):
        super().__init__(
            message,
            severity=ErrorSeverity.MEDIUM,
            category=ErrorCategory.DIRECTORY,
            context={"username": username}
        )
        self.username = username
        self.original_error = original_error


class DeliveryError(NotifierError):
    """Raised when a direct message cannot be delivered."""

    def __init__(self,
                 message: str,
                 username: Optional[str] = None,
                 conversation_id: Optional[str] = None,
                 original_error: Optional[Exception] = None):
        super().__init__(
            message,
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.DELIVERY,
            context={"username": username, "conversation_id": conversation_id}
        )
        self.username = username
        self.conversation_id = conversation_id
        self.original_error = original_error


class RocketChatClientError(NotifierError):
    """Base exception for Rocket.Chat client errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(
            message,
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.NETWORK
        )
        self.original_error = original_error


class RocketChatAPIError(RocketChatClientError):
    """Raised when the Rocket.Chat REST API returns an error."""

    def __init__(self,
                 error: str,
                 status_code: Optional[int] = None,
                 error_type: Optional[str] = None,
                 response: Optional[Dict[str, Any]] = None):
        super().__init__(f"Rocket.Chat API Error: {error}")
        self.category = ErrorCategory.CHAT_API
        self.error = error
        self.status_code = status_code
        self.error_type = error_type
        self.response = response
        self.recoverable = status_code != 401 if status_code else True


def describe_error(error: Exception) -> str:
    """One-line description of an error, with category and severity for notifier errors."""
    if not isinstance(error, NotifierError):
        return f"{type(error).__name__}: {error}"
    details = error.to_dict()
    return (
        f"{details['message']} [category={details['category']}, severity={details['severity']}, "
        f"recoverable={details['recoverable']}, context={details['context']}]"
    )
