"""HTTP API serving player list images and the skin viewer page."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Any

from flask import Flask, Response, has_request_context, redirect, request, send_from_directory

from mcviewgen.bootstrap import init_loader
from mcviewgen.conf import init_config
from mcviewgen.fileutil import image_to_base64
from mcviewgen.logger import init_logging
from mcviewgen.model import parse_player_list_request
from mcviewgen.player_list import get_player_list
from mcviewgen.state import (
    FONTS_PATH,
    GET_PLAYER_LIST_URI,
    PARENT_PATH,
    PING_URI,
    SKINS_PATH,
    SKINVIEW3D_URI,
    AppState,
)

log = logging.getLogger(__name__)

DEFAULT_PORT = 4399
API_BASE_PATH = "/api/v1"
SWAGGER_INDEX = API_BASE_PATH + "/swagger/index.html"


def response_success(data: Any) -> tuple[dict, int]:
    """Body and status of a successful API response."""
    return {"code": 200, "data": data}, 200


def response_error(err: BaseException | str) -> tuple[dict, int]:
    """Body and status of a failed API response; the failure is logged."""
    where = f"{request.method} {request.path}" if has_request_context() else "-"
    log.error("Http request(%s) response error, %s", where, err)
    return {"code": 400, "message": str(err)}, 400


def create_app(state: AppState, index_page: bytes) -> Flask:
    """Build the web application around the loaded ``state``."""
    app = Flask(__name__)

    @app.get("/")
    def root():
        return redirect(SWAGGER_INDEX, code=301)

    @app.get(SKINVIEW3D_URI)
    def skinview3d():
        return Response(index_page, status=200, content_type="text/html; charset=utf-8")

    @app.get(SKINVIEW3D_URI + "/fonts/<path:filename>")
    def fonts(filename: str):
        return send_from_directory(os.path.abspath(FONTS_PATH), filename)

    @app.get(SKINVIEW3D_URI + "/skins/<path:filename>")
    def skins(filename: str):
        return send_from_directory(os.path.abspath(SKINS_PATH), filename)

    @app.get(API_BASE_PATH + PING_URI)
    def ping():
        return {"message": "pong"}

    @app.post(API_BASE_PATH + GET_PLAYER_LIST_URI)
    def player_list():
        try:
            player_request = parse_player_list_request(request.get_json(silent=True))
            image = get_player_list(state, player_request)
            encoded = image_to_base64(image)
        except Exception as exc:  # every failure is reported to the client
            return response_error(exc)
        return response_success(encoded)

    return app


def serve(state: AppState, index_page: bytes, port: int = DEFAULT_PORT) -> None:
    """Run the web server until interrupted."""
    app = create_app(state, index_page)
    log.info("Swagger will start on http://127.0.0.1:%d", port)
    log.info("Skinview3d will start on http://127.0.0.1:%d%s", port, SKINVIEW3D_URI)
    app.run(host="0.0.0.0", port=port)


def main(argv: list[str] | None = None) -> int:
    """Load configuration and resources, then serve the API."""
    parser = argparse.ArgumentParser(prog="mcviewgen", description="Render game views over HTTP.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    parser.add_argument("--index-page", help="HTML file served as the skin viewer page")
    args = parser.parse_args(argv)

    config = init_config(PARENT_PATH)
    init_logging(config, PARENT_PATH)
    state = AppState(config=config)
    init_loader(state)
    index_page = Path(args.index_page).read_bytes() if args.index_page else b""
    serve(state, index_page, args.port)
    return 0