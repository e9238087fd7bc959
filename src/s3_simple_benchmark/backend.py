"""Storage backends the trial runner transfers objects through."""

from typing import Protocol

import httpx

from s3_simple_benchmark.download import AsyncDownloader
from s3_simple_benchmark.upload import AsyncUploader
from s3_simple_benchmark.utils import PresignedUrlGenerator


class StorageBackend(Protocol):
    async def put(self, bucket: str, key: str, payload: bytes) -> int:
        """Store ``payload`` and return the elapsed time in nanoseconds."""
        ...

    async def get(self, bucket: str, key: str) -> tuple[int, int]:
        """Fetch an object and return ``(bytes_received, elapsed_ns)``."""
        ...


class S3Backend:
    """S3-compatible backend signing requests with boto3 and sending them with httpx."""

    def __init__(self, s3_client, http_client: httpx.AsyncClient | None = None):
        """
        Args:
            s3_client: boto3 S3 client used only for presigning
            http_client: Optional pre-built client; one without timeouts is
                created when omitted
        """
        self.client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(None), follow_redirects=True
        )
        url_generator = PresignedUrlGenerator(s3_client)
        self.uploader = AsyncUploader(client=self.client, url_generator=url_generator)
        self.downloader = AsyncDownloader(
            client=self.client, url_generator=url_generator
        )

    async def __aenter__(self):
        await self.client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.client.__aexit__(exc_type, exc_val, exc_tb)

    async def put(self, bucket: str, key: str, payload: bytes) -> int:
        return await self.uploader.put(bucket, key, payload)

    async def get(self, bucket: str, key: str) -> tuple[int, int]:
        return await self.downloader.get(bucket, key)
