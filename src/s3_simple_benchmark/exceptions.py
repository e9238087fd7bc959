class BenchmarkError(Exception):
    """Base class for conditions that abort a benchmark run."""


class ConfigurationError(BenchmarkError):
    """A required parameter is missing or out of range."""


class TransportError(BenchmarkError):
    """A put or get against the storage backend failed."""

    def __init__(self, message: str, *, bucket: str, key: str):
        super().__init__(message)
        self.bucket = bucket
        self.key = key


class IntegrityError(BenchmarkError):
    """A downloaded object does not have the expected size."""

    def __init__(self, *, key: str, expected: int, actual: int):
        super().__init__(
            f"Unmatched sizes for {key}: actual={actual}, expected={expected}"
        )
        self.key = key
        self.expected = expected
        self.actual = actual


class ZeroDurationError(BenchmarkError):
    """The backend reported a non-positive elapsed time for a transfer."""


class EmptySeriesError(ValueError):
    """Statistics were requested for an empty sample series."""
