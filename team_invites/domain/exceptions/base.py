class DomainError(Exception):
    """Base class for every error raised by the domain layer."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
