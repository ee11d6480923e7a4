"""File helpers: creation, hashing, jar extraction and image encoding."""

from __future__ import annotations

import base64
import hashlib
import io
import os
import shutil
import zipfile

from PIL import Image


def create_file(file_path: str, data: bytes) -> None:
    """Write ``data`` to ``file_path``, replacing any existing content."""
    with open(file_path, "wb") as fh:
        fh.write(data)


def file_exists(path: str) -> bool:
    """True if a file or directory exists at ``path``."""
    return os.path.exists(path)


def calculate_sha1(file_path: str) -> str:
    """Hex SHA-1 digest of a file."""
    digest = hashlib.sha1()
    with open(file_path, "rb") as fh:
        for chunk in iter(lambda: fh.read(65536), b""):
            digest.update(chunk)
    return digest.hexdigest()


def unzip_spec_entity(src: str, spec_path: str, dest: str) -> None:
    """Extract the archive members whose names start with ``spec_path`` into ``dest``."""
    with zipfile.ZipFile(src) as archive:
        for info in archive.infolist():
            if not info.filename.startswith(spec_path):
                continue
            relative = info.filename[len(spec_path):].lstrip("/")
            target = os.path.join(dest, relative) if relative else dest
            if info.is_dir():
                os.makedirs(target, exist_ok=True)
                continue
            os.makedirs(os.path.dirname(target) or ".", exist_ok=True)
            with archive.open(info) as source, open(target, "wb") as out:
                shutil.copyfileobj(source, out)


def image_to_base64(img: Image.Image) -> str:
    """Encode an image as a PNG data URL."""
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")