"""Cloudinary implementation of the ObjectStorage collaborator, over its REST upload API."""

import hashlib
import logging
import time
from typing import Any

import httpx

from storefront.app.services.object_storage import ObjectStorage, StorageError, StoredFile

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.cloudinary.com/v1_1"


def sign_params(params: dict[str, Any], api_secret: str) -> str:
    """Cloudinary request signature: SHA-1 of the sorted params followed by the secret"""
    to_sign = "&".join(
        f"{key}={value}" for key, value in sorted(params.items())
    )
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


class CloudinaryStorage(ObjectStorage):
    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.timeout = timeout
        self.transport = transport

    def _signed(self, params: dict[str, Any]) -> dict[str, Any]:
        params = {**params, "timestamp": int(time.time())}
        return {
            **params,
            "api_key": self.api_key,
            "signature": sign_params(params, self.api_secret),
        }

    async def _post(self, path: str, data: dict[str, Any]) -> dict[str, Any]:
        if not self.cloud_name or not self.api_key or not self.api_secret:
            raise StorageError("Cloudinary is not configured")

        url = f"{API_BASE_URL}/{self.cloud_name}/{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(url, data=data)
        except httpx.HTTPError as e:
            raise StorageError(f"Cloudinary request failed: {e}") from e

        if response.status_code >= 400:
            raise StorageError(
                f"Cloudinary returned {response.status_code}: {response.text[:200]}"
            )
        return response.json()

    async def upload(self, file: str, folder: str = "") -> StoredFile:
        if not file:
            raise StorageError("No file provided")

        params = {"folder": folder} if folder else {}
        body = await self._post("auto/upload", {"file": file, **self._signed(params)})
        logger.info(f"Uploaded file {body.get('public_id')}")
        return StoredFile(public_id=body["public_id"], url=body["url"])

    async def delete(self, public_id: str) -> None:
        if not public_id:
            raise StorageError("No file provided to delete")

        body = await self._post("image/destroy", self._signed({"public_id": public_id}))
        if body.get("result") != "ok":
            raise StorageError(f"Failed to delete file {public_id}: {body.get('result')}")
