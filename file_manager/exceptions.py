"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class InvalidInputError(BaseAppError):
    """Exception raised for unknown commands, bad arity or unrecognized flags."""

    pass


class OperationFailedError(BaseAppError):
    """Exception raised when a command could not be carried out."""

    pass


class StorageError(OperationFailedError):
    """Exception raised for storage (filesystem) errors."""

    pass


class StreamPipelineError(OperationFailedError):
    """Exception raised when any stage of a stream pipeline fails."""

    pass


class CodecError(OperationFailedError):
    """Exception raised when a codec stage rejects its input."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
