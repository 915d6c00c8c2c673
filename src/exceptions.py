import enum


class IOErrorKind(enum.Enum):
    NOT_FOUND = "File not found"
    PERMISSION_DENIED = "Permission denied"
    OTHER = "Unknown Error"

    @classmethod
    def from_exception(cls, error):
        if isinstance(error, FileNotFoundError):
            return cls.NOT_FOUND
        if isinstance(error, PermissionError):
            return cls.PERMISSION_DENIED
        return cls.OTHER


class RainbowTableError(Exception):
    """Base class for every error raised while building or reading a table."""


class TableIOError(RainbowTableError):
    """Opening, reading or writing a word list or table file failed.

    ``operation`` is ``"open"``, ``"read"`` or ``"write"``; ``kind`` tells a missing file
    apart from a permission problem so callers can render it directly.
    """

    def __init__(self, path, kind, operation="open", detail=None):
        self.path = str(path)
        self.kind = kind
        self.operation = operation
        self.detail = detail
        if operation == "write":
            prefix = "Error while writing table file"
        elif operation == "read":
            prefix = "Error while reading from file"
        else:
            prefix = "Error opening file for reading"
        message = f"{prefix}: {kind.value} ({self.path})"
        if detail:
            message += f": {detail}"
        super().__init__(message)

    @classmethod
    def from_os_error(cls, path, error, operation="open"):
        detail = None
        if IOErrorKind.from_exception(error) is IOErrorKind.OTHER:
            detail = str(error)
        return cls(path, IOErrorKind.from_exception(error), operation, detail)


class MalformedRecordError(RainbowTableError):
    """A serialized line did not split into exactly one word and one digest."""

    def __init__(self, line, line_number=None):
        self.line = line
        self.line_number = line_number
        if line_number is None:
            message = f"Invalid serialized hash, got: {line!r}"
        else:
            message = f"Invalid serialized hash on line {line_number}, got: {line!r}"
        super().__init__(message)


class InvalidWorkerCountError(RainbowTableError, ValueError):
    def __init__(self, worker_count, maximum):
        self.worker_count = worker_count
        self.maximum = maximum
        super().__init__(f"Worker count must be between 1 and {maximum}, got: {worker_count}")


class UnknownAlgorithmError(RainbowTableError, ValueError):
    def __init__(self, algorithm_name):
        self.algorithm_name = algorithm_name
        super().__init__(f"Unknown hash algorithm: {algorithm_name}")
