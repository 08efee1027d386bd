"""Error hierarchy for location capture and local storage."""


class LocationBaseError(Exception):
    """Base for all My Location BASE errors."""


class CaptureError(LocationBaseError):
    """Raised when a capture workflow ends without a stored point."""


class PermissionDenied(CaptureError):
    """The user (or platform) refused foreground location access."""


class PositionUnavailable(CaptureError):
    """No usable position fix could be obtained."""


class StorageError(LocationBaseError):
    """Base for failures of the local database or preferences file."""


class StorageWriteError(StorageError, CaptureError):
    """A write (insert or preference save) did not complete."""


class StorageReadError(StorageError):
    """A read from local storage failed."""
