import logging
from s3_simple_benchmark.backend import S3Backend
from s3_simple_benchmark.runner import print_report, run_benchmark
from s3_simple_benchmark.parsing import parse_arguments
from s3_simple_benchmark.structs import TrialConfig
from s3_simple_benchmark.utils import format_size, get_s3_client


async def cli(argv=None):
    """Main entry point for the benchmark tool."""
    # Parse command line arguments
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = TrialConfig(
        file_size_bytes=args.file_size_bytes,
        trial_count=args.trials,
        bucket_name=args.bucket_name,
    ).validate()

    session = args.credentials.get_boto_session()
    s3_client = get_s3_client(
        session, args.endpoint, args.protocol, args.region, args.use_path_style
    )

    print(
        f"Preparing to upload {config.trial_count} x {format_size(config.file_size_bytes)} "
        f"to s3://{config.bucket_name} at {args.endpoint}"
    )

    async with S3Backend(s3_client) as backend:
        report = await run_benchmark(backend, config)

    print_report(report)
    return report
