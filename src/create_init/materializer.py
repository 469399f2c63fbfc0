"""Apply a decision record to the filesystem."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from create_init import fs
from create_init.config import ScaffoldSettings
from create_init.exceptions import ScaffoldError
from create_init.manifest import pin_dependencies, read_manifest, write_manifest
from create_init.models import DecisionRecord, Mode

logger = logging.getLogger(__name__)


def materialize(
    record: DecisionRecord,
    *,
    settings: ScaffoldSettings | None = None,
    console: Console | None = None,
) -> Path | None:
    """Write the project described by *record*.

    Returns the path of the manifest written, or ``None`` for a cancelled
    record. Nothing is rolled back if a write fails halfway.
    """
    settings = settings or ScaffoldSettings()
    console = console or Console()
    root = record.root

    if record.mode is Mode.CANCELLED:
        return None

    if record.mode is Mode.OVERWRITE:
        logger.info("Clearing %s", root)
        fs.clear(root)

    if not root.exists():
        root.mkdir(parents=True, exist_ok=True)

    if record.mode is Mode.UPDATE:
        return update_manifest(root, settings=settings, console=console)

    assert record.template is not None
    return render_template(root, record.template, record.package_name, settings=settings, console=console)


def update_manifest(root: Path, *, settings: ScaffoldSettings, console: Console) -> Path:
    """Pin the forced dependencies into the manifest already at *root*."""
    console.print(f"\nUpdating project: {escape(str(root))}")
    manifest_path = root / fs.MANIFEST_NAME
    manifest = pin_dependencies(read_manifest(manifest_path), settings.forced_dependencies)
    write_manifest(manifest, manifest_path)
    logger.info("Pinned %s in %s", ", ".join(sorted(settings.forced_dependencies)), manifest_path)
    return manifest_path


def render_template(
    root: Path,
    template: str,
    package_name: str,
    *,
    settings: ScaffoldSettings,
    console: Console,
) -> Path:
    """Copy *template* into *root* and write its manifest.

    Without an on-disk tree for *template*, only a minimal manifest carrying
    ``name`` and ``version`` is written.
    """
    console.print(f"\nScaffolding project in {escape(str(root))}...")
    console.print(f"\nUsing template: {escape(template)}")
    manifest_path = root / fs.MANIFEST_NAME

    template_dir = settings.templates_root / template if settings.templates_root else None
    if template_dir is None or not template_dir.is_dir():
        logger.info("No template tree for %s, writing a minimal manifest", template)
        write_manifest({"name": package_name, "version": settings.initial_version}, manifest_path)
        return manifest_path

    copied = fs.copy_template(template_dir, root)
    logger.debug("Copied %d file(s) from %s", len(copied), template_dir)

    base_manifest = template_dir / fs.MANIFEST_NAME
    if not base_manifest.is_file():
        base_manifest = template_dir.parent / fs.MANIFEST_NAME
    if not base_manifest.is_file():
        raise ScaffoldError(f"template {template!r} has no {fs.MANIFEST_NAME} under {template_dir.parent}")

    manifest = pin_dependencies(read_manifest(base_manifest), settings.forced_dependencies)
    manifest["name"] = package_name
    write_manifest(manifest, manifest_path)
    return manifest_path
