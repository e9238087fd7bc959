import logging
import time
import httpx

from s3_simple_benchmark.constants import DOWNLOAD_CHUNK_SIZE
from s3_simple_benchmark.exceptions import TransportError
from s3_simple_benchmark.utils import PresignedUrlGenerator

logger = logging.getLogger(__name__)


class AsyncDownloader:
    """Download whole objects through pre-signed URLs using httpx."""

    def __init__(
        self,
        *,
        client: httpx.AsyncClient,
        url_generator: PresignedUrlGenerator,
        chunk_size: int = DOWNLOAD_CHUNK_SIZE,
    ):
        self.client = client
        self.url_generator = url_generator
        self.chunk_size = chunk_size

    async def get(self, bucket: str, key: str) -> tuple[int, int]:
        """
        Download an object, draining and discarding its content.

        Args:
            bucket: S3 bucket name
            key: S3 object key

        Returns:
            Tuple of (bytes received, elapsed time in nanoseconds)

        Raises:
            TransportError: If the request fails or the body cannot be read
        """
        url = self.url_generator.generate_download_url(bucket, key)

        start_time = time.perf_counter_ns()
        total_bytes = 0
        try:
            async with self.client.stream("GET", url) as response:
                if response.is_error:
                    await response.aread()
                response.raise_for_status()

                async for chunk in response.aiter_bytes(chunk_size=self.chunk_size):
                    total_bytes += len(chunk)

        except httpx.HTTPError as exc:
            error_msg = f"Unable to download {key} from {bucket}: {exc}"
            if isinstance(exc, httpx.HTTPStatusError):
                error_msg += f"\nStatus code: {exc.response.status_code}"
                error_msg += f"\nResponse body: {exc.response.text}"
            raise TransportError(error_msg, bucket=bucket, key=key) from exc
        end_time = time.perf_counter_ns()

        logger.debug("Downloaded %d bytes from s3://%s/%s", total_bytes, bucket, key)
        return total_bytes, end_time - start_time
