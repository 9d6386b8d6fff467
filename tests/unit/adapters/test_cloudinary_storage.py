"""
Unit tests for CloudinaryStorage, run against an httpx mock transport
"""
import hashlib
from urllib.parse import parse_qs

import httpx
import pytest

from storefront.adapter.services.cloudinary_storage import CloudinaryStorage, sign_params
from storefront.app.services.object_storage import StorageError


def make_storage(handler, **kwargs):
    settings = {"cloud_name": "demo", "api_key": "key", "api_secret": "secret"}
    settings.update(kwargs)
    return CloudinaryStorage(transport=httpx.MockTransport(handler), **settings)


def form(request: httpx.Request) -> dict:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


def test_sign_params_sorts_keys():
    signature = sign_params({"timestamp": 1, "folder": "avatars"}, "secret")

    assert signature == hashlib.sha1(b"folder=avatars&timestamp=1secret").hexdigest()


@pytest.mark.asyncio
async def test_upload_posts_signed_form():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["form"] = form(request)
        return httpx.Response(200, json={"public_id": "avatars/abc", "url": "https://res.test/abc.png"})

    stored = await make_storage(handler).upload("data:image/png;base64,AAAA", "avatars")

    assert stored.public_id == "avatars/abc"
    assert stored.url == "https://res.test/abc.png"
    assert seen["url"] == "https://api.cloudinary.com/v1_1/demo/auto/upload"
    sent = seen["form"]
    assert sent["folder"] == "avatars"
    assert sent["api_key"] == "key"
    assert sent["signature"] == sign_params(
        {"folder": "avatars", "timestamp": sent["timestamp"]}, "secret"
    )


@pytest.mark.asyncio
async def test_upload_without_folder_omits_it():
    seen = {}

    def handler(request):
        seen["form"] = form(request)
        return httpx.Response(200, json={"public_id": "abc", "url": "https://res.test/abc.png"})

    await make_storage(handler).upload("data:image/png;base64,AAAA")

    assert "folder" not in seen["form"]


@pytest.mark.asyncio
async def test_upload_rejected_by_service():
    def handler(request):
        return httpx.Response(401, json={"error": {"message": "Invalid Signature"}})

    with pytest.raises(StorageError):
        await make_storage(handler).upload("data:image/png;base64,AAAA", "avatars")


@pytest.mark.asyncio
async def test_network_failure_is_storage_error():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(StorageError):
        await make_storage(handler).upload("data:image/png;base64,AAAA", "avatars")


@pytest.mark.asyncio
async def test_unconfigured_storage():
    def handler(request):
        raise AssertionError("no request expected")

    with pytest.raises(StorageError):
        await make_storage(handler, cloud_name="").upload("data:image/png;base64,AAAA")


@pytest.mark.asyncio
async def test_delete():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["form"] = form(request)
        return httpx.Response(200, json={"result": "ok"})

    await make_storage(handler).delete("avatars/abc")

    assert seen["url"] == "https://api.cloudinary.com/v1_1/demo/image/destroy"
    assert seen["form"]["public_id"] == "avatars/abc"


@pytest.mark.asyncio
async def test_delete_not_found():
    def handler(request):
        return httpx.Response(200, json={"result": "not found"})

    with pytest.raises(StorageError):
        await make_storage(handler).delete("avatars/missing")
