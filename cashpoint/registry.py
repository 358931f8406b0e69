from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

MODULES_PATH = Path(__file__).parent.parent / "modules"
MANIFEST_NAME = "module.yaml"


def _mount_for(name: str, raw: object) -> str:
    mount = str(raw or name.replace("_", "-")).strip().strip("/")
    return f"/{mount}" if mount else "/"


def read_manifest(manifest: Path) -> Dict[str, Any] | None:
    data = yaml.safe_load(manifest.read_text(encoding="utf-8")) or {}
    name = str(data.get("name") or "").strip()
    if not name:
        return None

    entrypoints = data.get("entrypoints") or {}
    return {
        "name": name,
        "title": data.get("title") or name,
        "description": data.get("description") or "",
        "category": data.get("category") or "Other",
        "mount": _mount_for(name, data.get("mount")),
        "public": data.get("public") is not False,
        "api": entrypoints.get("api"),
        "path": manifest.parent,
    }


def load_modules(modules_path: Path = MODULES_PATH) -> Dict[str, Dict[str, Any]]:
    if not modules_path.is_dir():
        return {}

    modules: Dict[str, Dict[str, Any]] = {}
    for manifest in sorted(modules_path.glob(f"*/{MANIFEST_NAME}")):
        meta = read_manifest(manifest)
        if meta:
            modules[meta["name"]] = meta
    return modules
