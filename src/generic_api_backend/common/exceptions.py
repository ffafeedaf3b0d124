"""
This file contains custom, application-specific exceptions.
"""

class InvalidArgumentError(ValueError):
    """Raised when a caller passes an empty, missing or out-of-range argument."""
    pass

class ConfigurationError(Exception):
    """
    Raised when a required configuration value is missing.
    Carries the composite key that was looked up so it can be fixed directly.
    """
    def __init__(self, message: str, section: str, name: str):
        super().__init__(message)
        self.section = section
        self.name = name

    @property
    def key(self) -> str:
        return f"{self.section}:{self.name}"

class OperationFailedError(RuntimeError):
    """Raised when an underlying primitive (e.g. the hashing backend) fails unexpectedly."""
    pass
