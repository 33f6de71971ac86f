class StorageError(Exception):
    """The task store failed: connectivity, constraint, timeout or a bad row."""


class TaskIdUnavailable(StorageError):
    """The task row was written but its generated id could not be read back."""
