import re

import pytest

from storefront.config import Settings


pytestmark = pytest.mark.asyncio

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
MAX_BYTES = 1024


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def settings(upload_dir):
    """Uploads land in a per-test directory with a small size cap."""
    return Settings(auth_store="memory", upload_dir=str(upload_dir), upload_max_bytes=MAX_BYTES)


async def _upload(client, content=PNG_BYTES, name="photo.PNG", content_type="image/png"):
    return await client.post("/api/upload/image", files={"image": (name, content, content_type)})


async def test_upload_stores_and_serves_image(client, upload_dir):
    resp = await _upload(client)
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert re.fullmatch(r"image-\d+-\d+\.png", body["filename"])
    assert body["url"] == f"/uploads/{body['filename']}"
    assert body["size"] == len(PNG_BYTES)
    assert (upload_dir / body["filename"]).read_bytes() == PNG_BYTES

    served = await client.get(body["url"])
    assert served.status_code == 200
    assert served.content == PNG_BYTES


async def test_two_uploads_get_distinct_names(client):
    first = (await _upload(client)).json()["filename"]
    second = (await _upload(client)).json()["filename"]
    assert first != second


@pytest.mark.parametrize("content_type", ["text/plain", "application/pdf", "image/svg+xml"])
async def test_non_image_is_rejected(client, upload_dir, content_type):
    resp = await _upload(client, content=b"hello", name="note.txt", content_type=content_type)
    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert not upload_dir.exists() or not any(upload_dir.iterdir())


async def test_size_cap(client, upload_dir):
    at_limit = await _upload(client, content=b"x" * MAX_BYTES)
    assert at_limit.status_code == 200

    too_big = await _upload(client, content=b"x" * (MAX_BYTES + 1))
    assert too_big.status_code == 400
    assert len(list(upload_dir.iterdir())) == 1


async def test_missing_file_is_rejected(client):
    resp = await client.post("/api/upload/image")
    assert resp.status_code == 400
    assert resp.json()["success"] is False


async def test_delete_image(client, upload_dir):
    filename = (await _upload(client)).json()["filename"]

    resp = await client.delete(f"/api/upload/image/{filename}")
    assert resp.status_code == 200
    assert resp.json()["success"] is True
    assert not (upload_dir / filename).exists()

    again = await client.delete(f"/api/upload/image/{filename}")
    assert again.status_code == 404
    assert again.json()["success"] is False


async def test_delete_unknown_file_is_404(client):
    resp = await client.delete("/api/upload/image/missing.png")
    assert resp.status_code == 404
