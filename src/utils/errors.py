class RockFunError(Exception):
    """Base class for failures that are surfaced to the user."""


class PermissionDeniedError(RockFunError):
    """Location (or camera) access was refused, timed out or is unavailable."""


class UploadFailureError(RockFunError):
    """The photo could not be written to object storage."""


class InsertFailureError(RockFunError):
    """The find record could not be inserted."""


class AuthFailureError(RockFunError):
    """A sign-in attempt was rejected."""
