"""
Tests for the command-line surface.
"""

import pytest

from s3_simple_benchmark.parsing import parse_arguments


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("S3_ACCESS_KEY", "S3_SECRET_KEY", "S3_SESSION_TOKEN"):
        monkeypatch.delenv(name, raising=False)


def test_original_flag_spelling():
    args = parse_arguments(
        [
            "-endpoint", "s3.example.com",
            "-accessKey", "AK",
            "-secretKey", "SK",
            "-bucketName", "bench",
            "-fileSize", "2",
            "-trials", "4",
        ]
    )

    assert args.endpoint == "s3.example.com"
    assert args.credentials.access_key == "AK"
    assert args.credentials.secret_key == "SK"
    assert args.bucket_name == "bench"
    assert args.file_size_bytes == 2 * 1024 * 1024
    assert args.trials == 4


def test_defaults():
    args = parse_arguments(
        ["--endpoint", "s3.example.com", "--access-key", "AK",
         "--secret-key", "SK", "--bucket-name", "bench"]
    )

    assert args.file_size_bytes == 10 * 1024 * 1024
    assert args.trials == 10
    assert args.protocol == "https"
    assert args.region == "us-east-1"
    assert not args.use_path_style
    assert not args.debug


def test_credentials_from_environment(monkeypatch):
    monkeypatch.setenv("S3_ACCESS_KEY", "env-access")
    monkeypatch.setenv("S3_SECRET_KEY", "env-secret")

    args = parse_arguments(["-endpoint", "s3.example.com", "-bucketName", "bench"])

    assert args.credentials.access_key == "env-access"
    assert args.credentials.secret_key == "env-secret"


def test_file_size_with_suffix():
    args = parse_arguments(
        ["-endpoint", "h", "-accessKey", "a", "-secretKey", "s",
         "-bucketName", "b", "-fileSize", "512KB"]
    )

    assert args.file_size_bytes == 512 * 1024


@pytest.mark.parametrize(
    "missing",
    ["-endpoint", "-accessKey", "-secretKey", "-bucketName"],
)
def test_missing_required_parameter_exits(missing, capsys):
    values = {
        "-endpoint": "s3.example.com",
        "-accessKey": "AK",
        "-secretKey": "SK",
        "-bucketName": "bench",
    }
    del values[missing]
    argv = [item for pair in values.items() for item in pair]

    with pytest.raises(SystemExit) as exc_info:
        parse_arguments(argv)

    assert exc_info.value.code != 0
    assert "usage:" in capsys.readouterr().err


@pytest.mark.parametrize(
    "extra",
    [["-trials", "0"], ["-fileSize", "0"], ["-fileSize", "lots"]],
)
def test_invalid_trial_parameters_exit(extra):
    argv = ["-endpoint", "h", "-accessKey", "a", "-secretKey", "s", "-bucketName", "b"]

    with pytest.raises(SystemExit) as exc_info:
        parse_arguments(argv + extra)

    assert exc_info.value.code != 0
