"""Aggregation of trial samples into the run report.

Percentiles use the nearest-rank-floor convention: the input is copied and
sorted ascending, and the element at index ``count * percent // 100`` is
selected. No interpolation happens, so the result is always one of the
measured values. For P90 with ten samples this is the maximum.
"""

from typing import Sequence, TypeVar

from s3_simple_benchmark.constants import P90_PERCENT
from s3_simple_benchmark.exceptions import EmptySeriesError
from s3_simple_benchmark.structs import Report, SampleSeries

# Durations are integer nanoseconds, speeds are float MB/s
Number = TypeVar("Number", int, float)


def average(durations: Sequence[int]) -> int:
    """
    Average of integer nanosecond durations.

    The division truncates toward zero, so the result is exact whenever the
    total is divisible by the count.

    Raises:
        EmptySeriesError: If ``durations`` is empty
    """
    if not durations:
        raise EmptySeriesError("Cannot average an empty series")
    return sum(durations) // len(durations)


def percentile(values: Sequence[Number], percent: int) -> Number:
    """
    Select the nearest-rank-floor percentile of ``values``.

    Args:
        values: Non-empty sequence of comparable numbers; not modified
        percent: Percentile between 0 and 100

    Returns:
        The element of ``values`` at the percentile rank

    Raises:
        EmptySeriesError: If ``values`` is empty
    """
    if not values:
        raise EmptySeriesError(f"Cannot compute P{percent} of an empty series")
    if not 0 <= percent <= 100:
        raise ValueError(f"Percent must be between 0 and 100, got {percent}")

    ordered = sorted(values)
    index = min(len(ordered) * percent // 100, len(ordered) - 1)
    return ordered[index]


def p90(values: Sequence[Number]) -> Number:
    return percentile(values, P90_PERCENT)


def durations(series: SampleSeries) -> list[int]:
    return [sample.duration_ns for sample in series]


def speeds(series: SampleSeries) -> list[float]:
    return [sample.speed_mbps for sample in series]


def build_report(uploads: SampleSeries, downloads: SampleSeries) -> Report:
    """
    Reduce the upload and download series of a run to its report.

    Args:
        uploads: Upload samples in trial order
        downloads: Download samples in trial order

    Returns:
        Report with averages and P90 values

    Raises:
        EmptySeriesError: If either series is empty
    """
    upload_times = durations(uploads)
    download_times = durations(downloads)

    return Report(
        avg_upload_time_ns=average(upload_times),
        avg_download_time_ns=average(download_times),
        p90_upload_time_ns=p90(upload_times),
        p90_upload_speed_mbps=p90(speeds(uploads)),
        p90_download_time_ns=p90(download_times),
        p90_download_speed_mbps=p90(speeds(downloads)),
    )
