from typing import NamedTuple

from s3_simple_benchmark.exceptions import ConfigurationError


class TrialConfig(NamedTuple):
    file_size_bytes: int
    trial_count: int
    bucket_name: str

    def validate(self) -> "TrialConfig":
        """
        Check the run parameters.

        Returns:
            self for method chaining

        Raises:
            ConfigurationError: If any parameter is out of range
        """
        if self.file_size_bytes <= 0:
            raise ConfigurationError(
                f"File size must be positive, got {self.file_size_bytes} bytes"
            )
        if self.trial_count <= 0:
            raise ConfigurationError(
                f"Trial count must be positive, got {self.trial_count}"
            )
        if not self.bucket_name:
            raise ConfigurationError("Bucket name must not be empty")
        return self


class Sample(NamedTuple):
    duration_ns: int
    speed_mbps: float


# Samples of one operation kind, in trial order
SampleSeries = tuple[Sample, ...]


class Report(NamedTuple):
    avg_upload_time_ns: int
    avg_download_time_ns: int
    p90_upload_time_ns: int
    p90_upload_speed_mbps: float
    p90_download_time_ns: int
    p90_download_speed_mbps: float
