from typing import Any


class AppException(Exception):
    """Base application exception."""

    error_code: str = "APP_ERROR"
    message: str = "An application error occurred"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.__class__.message
        self.error_code = error_code or self.__class__.error_code
        self.details = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(error_code={self.error_code!r}, message={self.message!r})"


class ConfigurationError(AppException):
    """Account configuration is missing or invalid."""

    error_code = "CONFIGURATION_ERROR"
    message = "Payment gateway is not configured"


class UndefinedAccountParameterError(ConfigurationError):
    """A required account parameter has no value."""

    error_code = "UNDEFINED_ACCOUNT_PARAMETER"

    def __init__(self, parameter: str, message: str | None = None) -> None:
        self.parameter = parameter
        super().__init__(
            message=message or f"Account parameter {parameter!r} must be defined",
            details={"parameter": parameter},
        )


class SigningError(AppException):
    """Signature could not be produced."""

    error_code = "SIGNING_ERROR"
    message = "Failed to sign payment data"


class InvalidSignature(AppException):
    """Notification signature does not match its body."""

    error_code = "INVALID_SIGNATURE"
    message = "Invalid notification signature"


class NotificationError(AppException):
    """Authentic notification body that is not a valid IPN document."""

    error_code = "INVALID_NOTIFICATION"
    message = "Malformed payment notification"
