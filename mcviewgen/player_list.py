"""Rendering of the online player list image."""

from __future__ import annotations

import logging
import math

from PIL import Image

from mcviewgen.component import Component
from mcviewgen.draw import (
    Canvas,
    covey_image,
    default_font_options,
    get_font_face,
    new_image_with_background,
    print_char,
)
from mcviewgen.model import PlayerListRequest, PlayerListRequestEntry
from mcviewgen.skins import load_skin_by_name
from mcviewgen.state import AppState
from mcviewgen.texture import Asset121, get_asset_manager

log = logging.getLogger(__name__)

FONT_SIZE = 16
OFFSET_Y = 1.0
PADDING = 2
LINE_SPACE = 1

PLAYER_ROW_COLOR = (91, 94, 91, 168)
BACKGROUND_COLOR = (68, 71, 68, 128)
FONT_OPTIONS = default_font_options(FONT_SIZE, OFFSET_Y)

_HEAD_WIDTH = 16
_PING_WIDTH = 20
# room left below the baseline for CJK glyphs
_GLYPH_DESCENT = 3


def _centered_lines(texts: list[str], template: Canvas) -> list[tuple[Component, float]]:
    lines = []
    for text in texts:
        component = Component(text)
        width, _ = component.compute(template.measure, FONT_OPTIONS.bold_offset)
        lines.append((component, width))
    return lines


def get_player_list(state: AppState, request: PlayerListRequest) -> Image.Image:
    """Draw the player list with the configured header and footer lines."""
    if not request.entry:
        raise ValueError("no player data found")
    manager = get_asset_manager(request.version)
    face = get_font_face(FONT_SIZE, 72)
    template = Canvas(Image.new("RGBA", (1, 1)), face)
    shadow = FONT_OPTIONS.shadow_offset

    rows: list[Image.Image] = []
    max_row_width = 0.0
    for player in request.entry:
        component = Component(player.player_name)
        name_width, _ = component.compute(template.measure, FONT_OPTIONS.bold_offset)
        log.debug("nameWidth: %f", name_width)
        try:
            row = draw_single_player_row(state, player, component, name_width, face, manager)
        except Exception as exc:  # a player without skin or icon is left out
            log.error("Failed to draw single-player-row, %s", exc)
            continue
        max_row_width = max(float(row.width), max_row_width)
        rows.append(row)

    config = state.config.api.player_list
    headers = _centered_lines(config.header_text, template)
    footers = _centered_lines(config.footer_text, template)
    max_header = max((w for _, w in headers), default=0.0)
    max_footer = max((w for _, w in footers), default=0.0)

    width = max(max_row_width + PADDING * 2, max(max_header, max_footer) + PADDING * 2)
    height = (
        (FONT_SIZE + LINE_SPACE) * (len(headers) + len(footers))
        + (FONT_SIZE + OFFSET_Y + LINE_SPACE + shadow) * len(rows)
        + shadow
    )
    canvas = new_image_with_background(width, height, BACKGROUND_COLOR, face)

    start_y = 0.0
    for component, line_width in headers:
        start_x = math.floor((width - line_width) / 2)
        _, start_y = print_char(start_x, start_y + FONT_SIZE, component, canvas, FONT_OPTIONS)
        start_y += LINE_SPACE

    start_y += shadow
    for row in rows:
        start_x = math.floor((width - row.width) / 2)
        row_offset = row.height - FONT_SIZE + LINE_SPACE * 2
        log.debug("playerRow, dx: %d, dy: %d, rowOffset: %d", row.width, row.height, row_offset)
        canvas.draw_image(row, int(start_x), int(start_y) + row_offset)
        start_y += FONT_SIZE + LINE_SPACE + shadow

    for component, line_width in footers:
        start_x = math.floor((width - line_width) / 2)
        _, start_y = print_char(start_x, start_y + FONT_SIZE, component, canvas, FONT_OPTIONS)
        start_y += LINE_SPACE

    return canvas.image


def draw_single_player_row(
    state: AppState,
    player: PlayerListRequestEntry,
    component: Component,
    name_width: float,
    font,
    manager: Asset121,
) -> Image.Image:
    """Draw one row: head, formatted name and connection icon."""
    shadow = FONT_OPTIONS.shadow_offset
    width = shadow + name_width + _HEAD_WIDTH + _PING_WIDTH
    height = shadow + FONT_SIZE
    canvas = new_image_with_background(width, height, PLAYER_ROW_COLOR, font)

    skin = load_skin_by_name(state, player.player_name, player.player_uuid, True)
    ping_image = manager.get_ping(player.ping)

    start_x, start_y = 0.0, height - shadow - _GLYPH_DESCENT
    covey_image(skin.get_face(), start_x, OFFSET_Y, FONT_SIZE, canvas)
    start_x += _HEAD_WIDTH + 1
    start_x, start_y = print_char(start_x, start_y, component, canvas, FONT_OPTIONS)
    covey_image(ping_image, start_x, OFFSET_Y, FONT_SIZE, canvas)
    return canvas.image