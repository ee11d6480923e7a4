"""Parsing of section-sign formatted chat text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

TEXT_TAG = "§"

RGBA = tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)
GRAY: RGBA = (170, 170, 170, 255)
DARK_GRAY: RGBA = (85, 85, 85, 255)
WHITE: RGBA = (255, 255, 255, 255)
DEFAULT_COLOR = WHITE


class CharType(Enum):
    DEFAULT = "Default"
    OBFUSCATED = "Obfuscated"
    BOLD = "Bold"
    STRIKE_THROUGH = "StrikeThrough"
    UNDERLINE = "Underline"
    ITALIC = "Italic"
    RESET = "Reset"


COLOR_MAPPING: dict[str, RGBA] = {
    "0": BLACK,
    "1": (0, 0, 170, 255),
    "2": (0, 170, 0, 255),
    "3": (0, 170, 170, 255),
    "4": (170, 0, 0, 255),
    "5": (170, 0, 170, 255),
    "6": (255, 170, 0, 255),
    "7": GRAY,
    "8": DARK_GRAY,
    "9": (85, 85, 255, 255),
    "a": (85, 255, 85, 255),
    "b": (85, 255, 255, 255),
    "c": (255, 85, 85, 255),
    "d": (255, 85, 255, 255),
    "e": (255, 255, 85, 255),
    "f": WHITE,
}

FORMAT_MAPPING: dict[str, CharType] = {
    "k": CharType.OBFUSCATED,
    "l": CharType.BOLD,
    "m": CharType.STRIKE_THROUGH,
    "n": CharType.UNDERLINE,
    "o": CharType.ITALIC,
    "r": CharType.RESET,
}


@dataclass(frozen=True)
class Char:
    type: CharType
    color: RGBA
    content: str


class Component:
    """A line of formatted text, parsed lazily into styled characters."""

    def __init__(self, origin: str) -> None:
        self.origin = origin
        self._chars: list[Char] | None = None

    def parse(self) -> list[Char]:
        """Return the styled characters, parsing on first use."""
        if self._chars is not None:
            return self._chars
        chars: list[Char] = []
        code_tag = False
        color = DEFAULT_COLOR
        char_type = CharType.DEFAULT
        for ch in self.origin:
            if ch == TEXT_TAG:
                code_tag = True
                continue
            if not code_tag:
                chars.append(Char(char_type, color, ch))
                continue
            code_tag = False
            if ch in COLOR_MAPPING:
                color = COLOR_MAPPING[ch]
            elif ch in FORMAT_MAPPING:
                new_type = FORMAT_MAPPING[ch]
                char_type = CharType.DEFAULT if new_type is CharType.RESET else new_type
        self._chars = chars
        return chars

    def compute(
        self, measure: Callable[[str], tuple[float, float]], bold_offset: float
    ) -> tuple[float, float]:
        """Return (total width, max height) using ``measure`` for each character."""
        width = 0.0
        max_height = 0.0
        for char in self.parse():
            w, h = measure(char.content)
            width += w
            max_height = max(h, max_height)
            if char.type is CharType.BOLD:
                width += bold_offset
            elif char.type is CharType.ITALIC:
                width += 2
        return width, max_height