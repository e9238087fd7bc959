import argparse
from s3_simple_benchmark.constants import (
    ACCESS_KEY_ENV_VAR,
    DEFAULT_FILE_SIZE,
    DEFAULT_PROTOCOL,
    DEFAULT_REGION,
    DEFAULT_TRIALS,
    SECRET_KEY_ENV_VAR,
)
from s3_simple_benchmark.utils import CredentialManager, parse_size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Benchmark upload and download latency against an S3-compatible endpoint."
    )

    # Connection arguments
    connection_group = parser.add_argument_group("Connection arguments")
    connection_group.add_argument(
        "--endpoint", "-endpoint", help="S3 endpoint hostname, optionally with port"
    )
    connection_group.add_argument(
        "--access-key",
        "-accessKey",
        dest="access_key",
        default="",
        help=f"S3 access key (or through ${ACCESS_KEY_ENV_VAR})",
    )
    connection_group.add_argument(
        "--secret-key",
        "-secretKey",
        dest="secret_key",
        default="",
        help=f"S3 secret key (or through ${SECRET_KEY_ENV_VAR})",
    )
    connection_group.add_argument(
        "--session-token", type=str, help="Session token for temporary credentials"
    )
    connection_group.add_argument(
        "--protocol",
        type=str,
        default=DEFAULT_PROTOCOL,
        choices=["http", "https"],
        help=f"Protocol to use with the endpoint (default: {DEFAULT_PROTOCOL})",
    )
    connection_group.add_argument(
        "--region",
        type=str,
        default=DEFAULT_REGION,
        help=f"Region of the S3-compatible server (default: {DEFAULT_REGION})",
    )
    connection_group.add_argument(
        "--use-path-style",
        action="store_true",
        help="Use path-style addressing instead of virtual-hosted style",
    )

    # Trial arguments
    trial_group = parser.add_argument_group("Trial arguments")
    trial_group.add_argument(
        "--bucket-name", "-bucketName", dest="bucket_name", help="S3 bucket name"
    )
    trial_group.add_argument(
        "--file-size",
        "-fileSize",
        dest="file_size",
        type=str,
        default=DEFAULT_FILE_SIZE,
        help="Size of the random file to upload in each trial, in MB unless a "
        f"KB, MB or GB suffix is given (default: {DEFAULT_FILE_SIZE})",
    )
    trial_group.add_argument(
        "--trials",
        "-trials",
        type=int,
        default=DEFAULT_TRIALS,
        help=f"Number of uploads and downloads (default: {DEFAULT_TRIALS})",
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug output")

    return parser


def parse_arguments(argv=None):
    """Parse command line arguments and resolve credentials."""
    parser = build_parser()
    args = parser.parse_args(argv)

    credentials = CredentialManager().collect_credentials(
        args.access_key, args.secret_key, args.session_token
    )
    args.credentials = credentials

    if not (args.endpoint and credentials.complete and args.bucket_name):
        parser.error(
            "either endpoint, access key, secret key or bucket name is missing"
        )

    if args.trials <= 0:
        parser.error(f"--trials must be positive, got {args.trials}")

    # Convert file size to bytes
    try:
        args.file_size_bytes = parse_size(args.file_size)
    except ValueError as e:
        parser.error(str(e))
    if args.file_size_bytes <= 0:
        parser.error(f"--file-size must be positive, got {args.file_size}")

    return args
