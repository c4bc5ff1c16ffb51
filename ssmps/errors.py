class SsmpsError(Exception):
    """Base class for errors that abort a lookup."""

class BackendError(SsmpsError):
    """Parameter Store answered with an error code."""

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.code = code

class UnknownError(SsmpsError):
    """The client failed without a service error code (transport, config, ...)."""

class InvalidArgument(SsmpsError, ValueError):
    pass
