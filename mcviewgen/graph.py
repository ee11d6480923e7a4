"""Block model JSON loading."""

from __future__ import annotations

import json
from dataclasses import dataclass, field


@dataclass
class Face:
    uv: list[float] = field(default_factory=lambda: [0.0] * 4)
    texture: str = ""
    cullface: str = ""


@dataclass
class Element:
    from_: list[float] = field(default_factory=lambda: [0.0] * 3)
    to: list[float] = field(default_factory=lambda: [0.0] * 3)
    faces: dict[str, Face] = field(default_factory=dict)


@dataclass
class BlockModel:
    parent: str = ""
    textures: dict[str, str] = field(default_factory=dict)
    elements: list[Element] = field(default_factory=list)


def _vector(values, size: int) -> list[float]:
    vec = [float(v) for v in (values or [])][:size]
    return vec + [0.0] * (size - len(vec))


def load_model(path: str) -> BlockModel:
    """Read a block model definition from a JSON file."""
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError("block model must be a JSON object")
    elements = [
        Element(
            from_=_vector(el.get("from"), 3),
            to=_vector(el.get("to"), 3),
            faces={
                name: Face(
                    uv=_vector(face.get("uv"), 4),
                    texture=face.get("texture") or "",
                    cullface=face.get("cullface") or "",
                )
                for name, face in (el.get("faces") or {}).items()
            },
        )
        for el in data.get("elements") or []
    ]
    return BlockModel(
        parent=data.get("parent") or "",
        textures=dict(data.get("textures") or {}),
        elements=elements,
    )