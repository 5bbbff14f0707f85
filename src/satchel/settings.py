"""Seed files describing a store's id field, collections and initial records."""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

try:  # pragma: no cover - Python < 3.11
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

from .errors import SettingsError, SettingsNotFoundError, UnsupportedFormatError
from .records import MISSING, get_field, is_keyed

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

SETTINGS_KEYS = {"id_field", "collections"}


@dataclass
class StoreSettings:
    """
    Everything needed to build a populated store.

    ``collections`` maps each collection name to its seed records, in the
    order they were read. Seeds sharing an id are merged when loaded.
    """

    id_field: str = "id"
    collections: Dict[str, List[Any]] = field(default_factory=dict)
    sources: List[Path] = field(default_factory=list)

    def seed_count(self) -> int:
        return sum(len(seeds) for seeds in self.collections.values())


def read_document(path: Path) -> Any:
    """Parse a YAML, JSON or TOML seed file; empty files read as ``{}``."""
    suffix = path.suffix.lower()
    if suffix not in {".yml", ".yaml", ".json", ".toml"}:
        raise UnsupportedFormatError(f"Cannot read seed file {path}: expected .yml, .yaml, .json or .toml")

    text = path.read_text(encoding="utf-8")
    try:
        if suffix == ".json":
            return json.loads(text) if text.strip() else {}
        if suffix == ".toml":
            return tomllib.loads(text)
        return yaml.safe_load(text) or {}
    except (yaml.YAMLError, json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise SettingsError(f"Seed file {path} could not be parsed: {exc}") from exc


def _seed_records(name: str, seeds: Any, origin: Path) -> List[Any]:
    if seeds is None:
        return []
    if is_keyed(seeds):
        seeds = [seeds]
    if not isinstance(seeds, (list, tuple)):
        raise SettingsError(
            f"Seeds for collection '{name}' in {origin} must be a record or a list of records"
        )
    for seed in seeds:
        if not isinstance(seed, Mapping):
            raise SettingsError(
                f"Seed record {seed!r} for collection '{name}' in {origin} is not a mapping"
            )
    return list(seeds)


def load_settings(*paths: PathLike,
                  optional: bool = False,
                  id_field: Optional[str] = None) -> StoreSettings:
    """
    Read seed files in order and combine them into one ``StoreSettings``.

    Collections named by several files gather all of their seeds. Files that
    declare an ``id_field`` must agree with each other; ``id_field`` given
    here takes precedence over all of them. Missing files are skipped when
    ``optional`` is true.
    """
    settings = StoreSettings()
    declared: Optional[str] = None

    for raw_path in paths:
        path = Path(raw_path)
        if not path.exists():
            if optional:
                logger.debug("Skipping missing seed file %s", path)
                continue
            raise SettingsNotFoundError(f"Seed file not found: {path}")

        document = read_document(path)
        if not isinstance(document, Mapping):
            raise SettingsError(f"Seed file {path} must hold a mapping, got {type(document).__name__}")
        unknown = set(document) - SETTINGS_KEYS
        if unknown:
            raise SettingsError(f"Unknown settings in {path}: {', '.join(sorted(map(str, unknown)))}")

        file_id = document.get("id_field")
        if file_id is not None:
            if declared is not None and file_id != declared:
                raise SettingsError(
                    f"{path} keys records by '{file_id}' but earlier seed files use '{declared}'"
                )
            declared = file_id

        collections = document.get("collections") or {}
        if not isinstance(collections, Mapping):
            raise SettingsError(
                f"'collections' in {path} must map names to seed records, got {type(collections).__name__}"
            )
        for name, seeds in collections.items():
            settings.collections.setdefault(str(name), []).extend(_seed_records(name, seeds, path))

        settings.sources.append(path)
        logger.debug("Read %d collection(s) from %s", len(collections), path)

    chosen = id_field if id_field is not None else declared
    if chosen is not None:
        settings.id_field = chosen
    if not isinstance(settings.id_field, str) or not settings.id_field:
        raise SettingsError(f"id_field must be a non-empty string, got {settings.id_field!r}")

    for name, seeds in settings.collections.items():
        for seed in seeds:
            if get_field(seed, settings.id_field) is MISSING:
                raise SettingsError(
                    f"Seed record {seed!r} for collection '{name}' has no '{settings.id_field}' field"
                )
    return settings
