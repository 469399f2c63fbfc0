"""Reading, pinning, and writing ``package.json`` manifests."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from create_init.exceptions import ManifestReadError


def read_manifest(path: Path) -> dict[str, Any]:
    """Load a manifest, raising :class:`ManifestReadError` on any failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestReadError(path, "file not found") from exc
    except OSError as exc:
        raise ManifestReadError(path, str(exc)) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestReadError(path, f"invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestReadError(path, "expected a JSON object")
    return data


def write_manifest(data: Mapping[str, Any], path: Path) -> None:
    """Write *data* as 2-space indented JSON, replacing whatever was there."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def pin_dependencies(manifest: Mapping[str, Any], pins: Mapping[str, str]) -> dict[str, Any]:
    """Return a copy of *manifest* with every pin set in ``dependencies``.

    Dependencies not named in *pins* keep their current specifiers. Key order
    of the manifest is preserved.
    """
    pinned = dict(manifest)
    dependencies = dict(pinned.get("dependencies") or {})
    dependencies.update(pins)
    pinned["dependencies"] = dependencies
    return pinned
