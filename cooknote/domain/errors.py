"""Error taxonomy shared by the data layer, the AI client and the API."""


class CookNoteError(Exception):
    """Base class for every error raised by cooknote."""


class PersistenceReadError(CookNoteError):
    """The store could not be read or held corrupt data."""


class PersistenceWriteError(CookNoteError):
    """The store rejected a write."""


class ValidationError(CookNoteError):
    """A recipe or member failed its save-time checks."""


class AIServiceError(CookNoteError):
    """The analysis collaborator failed."""


class AIServiceUnavailableError(AIServiceError):
    """Network failure, timeout or non-2xx answer from the analysis service."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AIMalformedResponseError(AIServiceError):
    """The analysis service answered 2xx with a body that is not a recipe draft."""
