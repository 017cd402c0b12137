class RenamerError(Exception):
    """Base error for the project."""

class UsageError(RenamerError):
    pass

class InvalidPathError(RenamerError):
    pass
