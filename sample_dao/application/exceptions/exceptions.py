"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class PersonNotFoundError(ApplicationError):
    """Raised when a person is not found."""

    def __init__(self, message: str = "Person not found"):
        super().__init__(message, error_code="PERSON_NOT_FOUND")
