"""Exception hierarchy for bucket-tester."""


class BucketTesterError(Exception):
    """Base exception for all bucket-tester errors."""

    pass


class ClientConstructionError(BucketTesterError):
    """Raised when the storage client cannot be built."""

    pass


class LocalIOError(BucketTesterError):
    """Raised when a local file cannot be created, written or deleted."""

    pass


class RemoteCallError(BucketTesterError):
    """Raised when a call to the object storage service fails."""

    pass
