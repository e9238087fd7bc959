"""
Tests for the run configuration value type.
"""

import pytest

from s3_simple_benchmark.exceptions import ConfigurationError
from s3_simple_benchmark.structs import TrialConfig


def test_validate_returns_valid_config_unchanged():
    config = TrialConfig(file_size_bytes=1024, trial_count=3, bucket_name="bench")

    assert config.validate() is config
    assert config == TrialConfig(1024, 3, "bench")


@pytest.mark.parametrize(
    "file_size_bytes, trial_count, bucket_name, message",
    [
        (0, 3, "bench", "File size"),
        (-1, 3, "bench", "File size"),
        (1024, 0, "bench", "Trial count"),
        (1024, -2, "bench", "Trial count"),
        (1024, 3, "", "Bucket name"),
    ],
)
def test_validate_rejects_invalid_parameters(
    file_size_bytes, trial_count, bucket_name, message
):
    config = TrialConfig(file_size_bytes, trial_count, bucket_name)

    with pytest.raises(ConfigurationError, match=message):
        config.validate()
