import base64
import hashlib
import io
import zipfile

from PIL import Image

from mcviewgen.fileutil import (
    calculate_sha1,
    create_file,
    file_exists,
    image_to_base64,
    unzip_spec_entity,
)


def test_create_and_hash(tmp_path):
    path = tmp_path / "f.bin"
    create_file(str(path), b"hello")
    assert path.read_bytes() == b"hello"
    assert calculate_sha1(str(path)) == hashlib.sha1(b"hello").hexdigest()


def test_file_exists(tmp_path):
    assert file_exists(str(tmp_path))
    assert not file_exists(str(tmp_path / "missing"))


def test_unzip_only_prefix(tmp_path):
    jar = tmp_path / "client.jar"
    with zipfile.ZipFile(jar, "w") as zf:
        zf.writestr("assets/minecraft/lang/en_us.json", "{}")
        zf.writestr("net/Main.class", "x")
    dest = tmp_path / "out"
    unzip_spec_entity(str(jar), "assets", str(dest))
    assert (dest / "minecraft/lang/en_us.json").read_text() == "{}"
    assert not (dest / "net").exists()


def test_image_to_base64_round_trip():
    img = Image.new("RGBA", (3, 2), (10, 20, 30, 255))
    url = image_to_base64(img)
    prefix = "data:image/png;base64,"
    assert url.startswith(prefix)
    back = Image.open(io.BytesIO(base64.b64decode(url[len(prefix):])))
    assert back.size == (3, 2)
    assert back.convert("RGBA").getpixel((1, 1)) == (10, 20, 30, 255)