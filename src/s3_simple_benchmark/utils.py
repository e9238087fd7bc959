import logging
import os
import re
import boto3
from botocore.config import Config
from s3_simple_benchmark.constants import (
    ACCESS_KEY_ENV_VAR,
    BYTES_PER_MB,
    NANOSECONDS_PER_SECOND,
    PRESIGNED_URL_EXPIRATION,
    SECRET_KEY_ENV_VAR,
    SESSION_TOKEN_ENV_VAR,
)
from s3_simple_benchmark.exceptions import ZeroDurationError

logger = logging.getLogger(__name__)


class CredentialManager:
    """Handle S3 credentials collection and management."""

    def __init__(self):
        self.access_key = None
        self.secret_key = None
        self.session_token = None

    def collect_credentials(self, access_key=None, secret_key=None, session_token=None):
        """
        Take credentials from the command line, falling back to the environment.

        Args:
            access_key: Access key given on the command line, may be empty
            secret_key: Secret key given on the command line, may be empty
            session_token: Optional session token

        Returns:
            self for method chaining
        """
        self.access_key = access_key or os.environ.get(ACCESS_KEY_ENV_VAR, "")
        self.secret_key = secret_key or os.environ.get(SECRET_KEY_ENV_VAR, "")
        self.session_token = session_token or os.environ.get(SESSION_TOKEN_ENV_VAR)

        return self

    @property
    def complete(self) -> bool:
        return bool(self.access_key and self.secret_key)

    def get_boto_session(self):
        """
        Create and return a boto3 session with the collected credentials.

        Returns:
            boto3.Session: Configured boto3 session
        """
        session_kwargs = {
            "aws_access_key_id": self.access_key,
            "aws_secret_access_key": self.secret_key,
        }
        if self.session_token:
            session_kwargs["aws_session_token"] = self.session_token

        return boto3.Session(**session_kwargs)


def get_s3_client(
    boto_session,
    endpoint,
    protocol="https",
    region="us-east-1",
    use_path_style=False,
) -> boto3.client:
    """
    Create and return a boto3 S3 client for an S3-compatible endpoint.

    Args:
        boto_session: boto3.Session object
        endpoint: S3 server hostname, optionally with port
        protocol: Protocol to use (http or https)
        region: AWS region or custom region for S3-compatible server
        use_path_style: Whether to use path-style addressing

    Returns:
        boto3 S3 client
    """
    endpoint_url = f"{protocol}://{endpoint}"
    logger.debug(
        "Using endpoint %s (region %s, path-style addressing %s)",
        endpoint_url,
        region,
        use_path_style,
    )

    s3_client = boto_session.client(
        "s3",
        endpoint_url=endpoint_url,
        region_name=region,
        config=Config(s3={"addressing_style": "path" if use_path_style else "auto"}),
    )

    return s3_client


class PresignedUrlGenerator:
    """Generate pre-signed URLs for whole-object uploads and downloads."""

    def __init__(self, s3_client: boto3.client, expiration: int = PRESIGNED_URL_EXPIRATION):
        """
        Initialize with a boto3 client.

        Args:
            s3_client: boto3.client object
            expiration: URL expiration time in seconds
        """
        self.s3_client = s3_client
        self.expiration = expiration

    def generate_upload_url(self, bucket: str, key: str) -> str:
        url = self.s3_client.generate_presigned_url(
            "put_object",
            Params={"Bucket": bucket, "Key": key},
            ExpiresIn=self.expiration,
        )
        logger.debug("Presigned upload URL for s3://%s/%s", bucket, key)
        return url

    def generate_download_url(self, bucket: str, key: str) -> str:
        url = self.s3_client.generate_presigned_url(
            "get_object",
            Params={"Bucket": bucket, "Key": key},
            ExpiresIn=self.expiration,
        )
        logger.debug("Presigned download URL for s3://%s/%s", bucket, key)
        return url


def generate_content(size: int) -> bytes:
    """
    Generate cryptographically random content.

    Every call returns fresh bytes so the backend cannot deduplicate or
    compress payloads across trials.

    Args:
        size: Number of bytes to generate

    Returns:
        Bytes object containing the generated content
    """
    return os.urandom(size)


def trial_key(trial: int) -> str:
    """Object key shared by the upload and download of a trial."""
    return f"file-{trial}.dat"


def calculate_speed(size: int, duration_ns: int, key: str | None = None) -> float:
    """
    Calculate transfer speed in MB/s (1 MB = 1024 * 1024 bytes).

    Args:
        size: Number of bytes transferred
        duration_ns: Elapsed time in nanoseconds
        key: Object key named in the error message

    Returns:
        Speed in megabytes per second

    Raises:
        ZeroDurationError: If the duration is not positive
    """
    if duration_ns <= 0:
        target = f" of {key}" if key else ""
        raise ZeroDurationError(
            f"Transfer{target} ({size} bytes) reported a non-positive duration ({duration_ns} ns)"
        )
    seconds = duration_ns / NANOSECONDS_PER_SECOND
    return size / seconds / BYTES_PER_MB


def format_size(size: int) -> str:
    """
    Format size in bytes to human-readable format.

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    units = ["B", "KB", "MB", "GB", "TB"]
    unit_index = 0

    while size >= 1024 and unit_index < len(units) - 1:
        size /= 1024
        unit_index += 1

    return f"{size:.2f} {units[unit_index]}"


def format_duration(duration_ns: int) -> str:
    """
    Format a duration in nanoseconds to human-readable format.

    Args:
        duration_ns: Duration in nanoseconds

    Returns:
        Formatted duration string
    """
    if duration_ns < 1_000:
        return f"{duration_ns} ns"

    units = [("µs", 1_000), ("ms", 1_000_000), ("s", NANOSECONDS_PER_SECOND)]
    label, divisor = units[0]
    for unit_label, unit_divisor in units:
        if duration_ns >= unit_divisor:
            label, divisor = unit_label, unit_divisor

    return f"{duration_ns / divisor:.2f} {label}"


def parse_size(size_str: str, default_unit: str = "MB") -> int:
    """
    Parse a size string with optional suffix (B, KB, MB, GB) to bytes.

    Args:
        size_str: Size string (e.g., "10", "5MB", "10KB", "1GB")
        default_unit: Unit applied when no suffix is given

    Returns:
        Size in bytes
    """
    match = re.match(r"^(\d+)\s*([KMG]?B)?$", size_str.strip(), re.IGNORECASE)
    if not match:
        raise ValueError(
            f"Invalid size format: {size_str}. Expected format: NUMBER[B|KB|MB|GB]"
        )

    value, unit = match.groups()
    value = int(value)

    unit = (unit or default_unit).upper()
    if unit == "KB":
        value *= 1024
    elif unit == "MB":
        value *= 1024**2
    elif unit == "GB":
        value *= 1024**3

    return value
