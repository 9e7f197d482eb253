"""Exception types raised by revdiff."""


class RevDiffError(Exception):
    """Base class for fatal revdiff errors."""


class ExternalToolError(RevDiffError):
    """Raised when git cannot be invoked or exits with a failure."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"{operation} failed: {message}")


class ParseError(RevDiffError):
    """Raised when git output does not match the expected format."""


class ReportWriteError(RevDiffError):
    """Raised when the report file cannot be created or written."""

    def __init__(self, path, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f"Could not write report {path}: {error}")


class UnknownModeError(RevDiffError):
    """Raised when the requested stat mode does not exist."""
