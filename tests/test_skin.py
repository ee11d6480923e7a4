import pytest
from PIL import Image

from mcviewgen.skin import Skin


def _make_skin(path):
    img = Image.new("RGBA", (64, 64), (0, 0, 0, 0))
    for x in range(8, 16):
        for y in range(8, 16):
            img.putpixel((x, y), (10, 20, 30, 255))
    img.putpixel((40, 8), (255, 255, 0, 255))
    img.save(path)


def test_skin_face(tmp_path):
    path = tmp_path / "ori-skin.png"
    _make_skin(path)
    skin = Skin.from_file(str(path), True)
    assert skin.slim is True
    face = skin.get_face()
    assert face.size == (16, 16)
    assert face.getpixel((0, 0)) == (255, 255, 0, 255)
    assert face.getpixel((1, 1)) == (255, 255, 0, 255)
    assert face.getpixel((5, 5)) == (10, 20, 30, 255)


def test_skin_missing_file(tmp_path):
    with pytest.raises(OSError):
        Skin.from_file(str(tmp_path / "missing.png"), False)