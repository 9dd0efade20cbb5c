"""Shared fixtures: settings isolation and small media trees built with Pillow."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from PIL import Image

from mg_app.core.config import Settings, get_settings
from mg_app.core.file_types import get_file_types


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for var in ("MG_MEDIA_ROOT", "MG_PREVIEW_ROOT", "MG_EXTRA_MIME_TYPES", "MG_PREVIEW_SIZE"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    get_file_types.cache_clear()
    yield
    get_settings.cache_clear()
    get_file_types.cache_clear()


def save_image(path: Path, fmt: str, size=(64, 48), mode: str = "RGB", color=(200, 30, 30)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if mode == "RGBA":
        color = (*color, 128)
    Image.new(mode, size, color).save(path, format=fmt)
    return path


def jpeg_bytes(size=(32, 32)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, (10, 120, 200)).save(buf, format="JPEG")
    return buf.getvalue()


def iptc_datasets(fields: dict[tuple[int, int], bytes | list[bytes]]) -> bytes:
    data = b""
    for (record, dataset), values in fields.items():
        for value in values if isinstance(values, list) else [values]:
            data += b"\x1c" + bytes([record, dataset]) + len(value).to_bytes(2, "big") + value
    return data


def with_iptc(jpeg: bytes, iptc: bytes) -> bytes:
    """Insert a Photoshop APP13 segment carrying an IPTC-NAA resource after SOI."""
    resource = b"8BIM" + (0x0404).to_bytes(2, "big") + b"\x00\x00"
    resource += len(iptc).to_bytes(4, "big") + iptc
    if len(iptc) % 2:
        resource += b"\x00"
    payload = b"Photoshop 3.0\x00" + resource
    segment = b"\xff\xed" + (len(payload) + 2).to_bytes(2, "big") + payload
    return jpeg[:2] + segment + jpeg[2:]


@pytest.fixture
def media_root(tmp_path: Path) -> Path:
    """
    media/
      a.png (RGBA, 800x600)   b.jpg   c.tiff   clip.mp4   notes.txt
      album/f.gif   album/g.bmp   album/song.mp3   album/broken.png
    """
    root = tmp_path / "media"
    save_image(root / "a.png", "PNG", size=(800, 600), mode="RGBA")
    save_image(root / "b.jpg", "JPEG")
    save_image(root / "c.tiff", "TIFF")
    (root / "clip.mp4").write_bytes(b"\x00\x00\x00\x18ftypmp42")
    (root / "notes.txt").write_text("not media")
    save_image(root / "album" / "f.gif", "GIF", mode="P")
    save_image(root / "album" / "g.bmp", "BMP")
    (root / "album" / "song.mp3").write_bytes(b"ID3\x03\x00")
    (root / "album" / "broken.png").write_bytes(b"definitely not a png")
    return root


@pytest.fixture
def preview_root(tmp_path: Path) -> Path:
    return tmp_path / "previews"


@pytest.fixture
def settings(media_root: Path, preview_root: Path) -> Settings:
    return Settings(
        MEDIA_ROOT=media_root,
        PREVIEW_ROOT=preview_root,
        PREVIEW_SIZE="200x100",
        PREVIEW_QUALITY=80,
        DRY_RUN_DEFAULT=False,
    )
