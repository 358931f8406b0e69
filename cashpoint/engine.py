from __future__ import annotations

from importlib import import_module
from pathlib import Path
from typing import Any

from fastapi import FastAPI

from cashpoint.logger import get_logger
from cashpoint.registry import MODULES_PATH, load_modules

logger = get_logger(__name__)


def import_attr(entry: str) -> Any:
    """Resolve a ``package.module:attr`` manifest entrypoint."""
    module_path, sep, attr = entry.partition(":")
    if not sep or not module_path or not attr:
        raise ValueError(f"Entrypoint '{entry}' must look like package.module:attr.")
    return getattr(import_module(module_path), attr)


def load_module_app(name: str, modules_path: Path = MODULES_PATH) -> FastAPI:
    meta = load_modules(modules_path).get(name)
    if meta is None:
        raise KeyError(f"Unknown module '{name}'.")
    if not meta["api"]:
        raise KeyError(f"Module '{name}' has no API entrypoint.")
    return import_attr(meta["api"])


def build_app(modules_path: Path = MODULES_PATH) -> FastAPI:
    app = FastAPI(title="Cashpoint")
    modules = load_modules(modules_path)

    @app.get("/")
    def catalog():
        public = sorted(
            (meta for meta in modules.values() if meta["public"]),
            key=lambda meta: meta["title"],
        )
        return [
            {
                "name": meta["name"],
                "title": meta["title"],
                "category": meta["category"],
                "mount": meta["mount"],
            }
            for meta in public
        ]

    for meta in modules.values():
        if not meta["api"]:
            continue
        try:
            subapp = import_attr(meta["api"])
        except (ImportError, AttributeError, ValueError):
            logger.exception("module_import_failed", module=meta["name"], entry=meta["api"])
            continue
        app.mount(meta["mount"], subapp)

    return app
