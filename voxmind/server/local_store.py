"""FastAPI server that serves a local JSON export the way the realtime database REST API does.

Only the read side is emulated: ``GET /<path>.json`` returns the node at
``<path>`` (the whole document for ``/.json``) and ``null`` when nothing is
stored there. Query parameters such as ``auth`` are accepted and ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from threading import Thread
import time
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
import uvicorn

from voxmind.constants.network_constants import LOCAL_STORE_HOST, LOCAL_STORE_PORT

logger = logging.getLogger(__name__)

_JSON_SUFFIX = ".json"
_STARTUP_TIMEOUT_SECONDS = 5.0


class LocalStoreError(Exception):
    """Raised when the local store cannot be loaded or started."""


def load_document(file_path: Path) -> Any:
    try:
        return json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise LocalStoreError(f"Could not read {file_path}: {exc}") from exc
    except ValueError as exc:
        raise LocalStoreError(f"{file_path} is not valid JSON: {exc}") from exc


def resolve_node(document: Any, node_path: str) -> Any:
    """Walk ``a/b/c`` through nested objects and arrays; missing nodes resolve to None."""
    node = document
    for segment in (part for part in node_path.split("/") if part):
        if isinstance(node, dict):
            node = node.get(segment)
        elif isinstance(node, list) and segment.isascii() and segment.isdecimal() and int(segment) < len(node):
            node = node[int(segment)]
        else:
            return None
        if node is None:
            return None
    return node


def create_store_app(document: Any) -> FastAPI:
    """Create a FastAPI application serving the provided document read-only."""
    app = FastAPI(title="VoxMind Local Store", version="0.2.0")

    @app.get("/{path:path}")
    def read_node(path: str) -> JSONResponse:
        if not path.endswith(_JSON_SUFFIX):
            raise HTTPException(status_code=404, detail="Paths must end in .json")
        node_path = path[: -len(_JSON_SUFFIX)]
        return JSONResponse(content=resolve_node(document, node_path))

    return app


def start_local_store(
    file_path: Path,
    host: str = LOCAL_STORE_HOST,
    port: int = LOCAL_STORE_PORT,
) -> Thread:
    """Start the local store in a background daemon thread."""
    document = load_document(file_path)
    app = create_store_app(document)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="warning")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="LocalQuizStore", daemon=True)
    thread.start()

    deadline = time.monotonic() + _STARTUP_TIMEOUT_SECONDS
    while not server.started and thread.is_alive() and time.monotonic() < deadline:
        time.sleep(0.05)
    if not server.started:
        raise LocalStoreError(f"Local store could not listen on {host}:{port}")

    logger.info("Serving %s at http://%s:%d/.json", file_path, host, port)
    return thread
