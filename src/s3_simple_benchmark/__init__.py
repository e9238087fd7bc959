"""S3 upload/download latency benchmark."""

import asyncio
import sys

from s3_simple_benchmark.cli import cli


def main():
    try:
        asyncio.run(cli())
    except KeyboardInterrupt:
        print("\nBenchmark interrupted by user.")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)
