"""Player skin images and face rendering."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from mcviewgen.imaging import read_image

_FACE_SCALE = 2


@dataclass
class Skin:
    image: Image.Image
    slim: bool = False

    @classmethod
    def from_file(cls, file_path: str, slim: bool) -> "Skin":
        """Load a skin texture from a PNG file."""
        return cls(read_image(file_path).convert("RGBA"), slim)

    def get_face(self) -> Image.Image:
        """The front of the head with its overlay, at 2 pixels per texel."""
        face = self.image.crop((8, 8, 16, 16))
        if self.image.width >= 48 and self.image.height >= 16:
            face.alpha_composite(self.image.crop((40, 8, 48, 16)))
        return face.resize((8 * _FACE_SCALE, 8 * _FACE_SCALE), Image.Resampling.NEAREST)