import logging
import time
import httpx
from s3_simple_benchmark.exceptions import TransportError
from s3_simple_benchmark.utils import PresignedUrlGenerator

logger = logging.getLogger(__name__)


class AsyncUploader:
    """Upload whole objects through pre-signed URLs using httpx."""

    def __init__(
        self,
        *,
        client: httpx.AsyncClient,
        url_generator: PresignedUrlGenerator,
    ):
        """
        Initialize with a shared HTTP client.

        Args:
            client: httpx.AsyncClient used for the transfers
            url_generator: PresignedUrlGenerator signing the PUT requests
        """
        self.client = client
        self.url_generator = url_generator

    async def put(self, bucket: str, key: str, payload: bytes) -> int:
        """
        Upload a payload as a single object.

        Args:
            bucket: S3 bucket name
            key: S3 object key
            payload: Object content

        Returns:
            Elapsed time of the transfer in nanoseconds

        Raises:
            TransportError: If the request fails or is rejected
        """
        url = self.url_generator.generate_upload_url(bucket, key)
        headers = {"Content-Length": str(len(payload))}

        start_time = time.perf_counter_ns()
        try:
            response = await self.client.put(url, headers=headers, content=payload)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            error_msg = f"Unable to upload {key} to {bucket}: {exc}"
            if isinstance(exc, httpx.HTTPStatusError):
                error_msg += f"\nResponse body: {exc.response.text}"
            raise TransportError(error_msg, bucket=bucket, key=key) from exc
        end_time = time.perf_counter_ns()

        logger.debug(
            "Uploaded %d bytes to s3://%s/%s (ETag %s)",
            len(payload),
            bucket,
            key,
            response.headers.get("ETag", "").strip('"'),
        )
        return end_time - start_time
