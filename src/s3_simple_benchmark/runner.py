"""
S3 Simple Benchmark

Measures single-stream upload and download latency against an S3-compatible
endpoint. Trials run strictly one after another: every upload first, then a
download of each uploaded object.
"""

from collections.abc import Callable

from s3_simple_benchmark.backend import StorageBackend
from s3_simple_benchmark.exceptions import IntegrityError
from s3_simple_benchmark.stats import build_report
from s3_simple_benchmark.structs import Report, Sample, SampleSeries, TrialConfig
from s3_simple_benchmark.utils import (
    calculate_speed,
    format_duration,
    generate_content,
    trial_key,
)


def print_trial(trial: int, sample: Sample):
    print(
        f" - Trial: {trial},\ttime={format_duration(sample.duration_ns)}, "
        f"speed={sample.speed_mbps:.2f} MB/s"
    )


async def run_upload_trials(
    backend: StorageBackend,
    config: TrialConfig,
    payload_source: Callable[[int], bytes] = generate_content,
) -> SampleSeries:
    """
    Upload a fresh random payload once per trial.

    Args:
        backend: Storage backend to upload to
        config: Run parameters
        payload_source: Callable returning the payload for a given size

    Returns:
        Upload samples in trial order

    Raises:
        TransportError: If an upload fails
        ZeroDurationError: If the backend reports a non-positive duration
        ValueError: If ``payload_source`` returns the wrong number of bytes
    """
    samples = []
    for trial in range(1, config.trial_count + 1):
        payload = payload_source(config.file_size_bytes)
        key = trial_key(trial)
        if len(payload) != config.file_size_bytes:
            raise ValueError(
                f"Payload for {key} has {len(payload)} bytes, "
                f"expected {config.file_size_bytes}"
            )

        duration_ns = await backend.put(config.bucket_name, key, payload)
        sample = Sample(
            duration_ns=duration_ns,
            speed_mbps=calculate_speed(config.file_size_bytes, duration_ns, key=key),
        )
        samples.append(sample)
        print_trial(trial, sample)

    return tuple(samples)


async def run_download_trials(
    backend: StorageBackend,
    config: TrialConfig,
    expected_size_bytes: int,
) -> SampleSeries:
    """
    Download the object written by each upload trial and verify its size.

    Args:
        backend: Storage backend to download from
        config: Run parameters
        expected_size_bytes: Size every object must have

    Returns:
        Download samples in trial order

    Raises:
        TransportError: If a download fails
        IntegrityError: If an object's size differs from the expected size
        ZeroDurationError: If the backend reports a non-positive duration
    """
    samples = []
    for trial in range(1, config.trial_count + 1):
        key = trial_key(trial)

        received, duration_ns = await backend.get(config.bucket_name, key)
        if received != expected_size_bytes:
            raise IntegrityError(
                key=key, expected=expected_size_bytes, actual=received
            )

        sample = Sample(
            duration_ns=duration_ns,
            speed_mbps=calculate_speed(received, duration_ns, key=key),
        )
        samples.append(sample)
        print_trial(trial, sample)

    return tuple(samples)


async def run_benchmark(
    backend: StorageBackend,
    config: TrialConfig,
    payload_source: Callable[[int], bytes] = generate_content,
) -> Report:
    """
    Run all upload trials, then all download trials, and build the report.

    Args:
        backend: Storage backend under test
        config: Run parameters
        payload_source: Callable returning the payload for a given size

    Returns:
        Report for the run
    """
    print("Upload:")
    uploads = await run_upload_trials(backend, config, payload_source)
    print("Download:")
    downloads = await run_download_trials(backend, config, config.file_size_bytes)

    return build_report(uploads, downloads)


def format_report(report: Report) -> str:
    return (
        f" Upload P90  : time={format_duration(report.p90_upload_time_ns)} "
        f"speed={report.p90_upload_speed_mbps:.2f} MB/s\n"
        f" Download P90: time={format_duration(report.p90_download_time_ns)} "
        f"speed={report.p90_download_speed_mbps:.2f} MB/s\n"
        f" Average     : upload.time={format_duration(report.avg_upload_time_ns)} "
        f"download.time={format_duration(report.avg_download_time_ns)}\n"
    )


def print_report(report: Report):
    """
    Print the run report.

    Args:
        report: Report returned by run_benchmark
    """
    print(f"\nReport:\n{format_report(report)}")
