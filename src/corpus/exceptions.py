"""Custom exceptions for corpus operations."""

from typing import Optional


class CorpusError(Exception):
    """Base exception for corpus operations."""

    pass


class NoHomeDirError(CorpusError):
    """Raised when the home directory cannot be determined."""

    def __init__(self, message: str = "There is no home directory"):
        self.message = message
        super().__init__(self.message)


class InvalidCurrentDirError(CorpusError):
    """Raised when a relative path needs the current directory and it is unavailable."""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.message = "Current directory does not exist or insufficient permissions"
        if path is not None:
            self.message = f"{self.message} (while resolving '{path}')"
        super().__init__(self.message)


class PathOperationError(CorpusError):
    """Raised when creating or touching a corpus path fails."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"Failed to {operation}: {message}")
