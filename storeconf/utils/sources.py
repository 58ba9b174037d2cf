"""Configuration Source Reading and Merging"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Union

import yaml

from storeconf.core.errors import SourceError

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, Mapping[str, Any]]

FRAGMENT_SUFFIXES = (".json", ".yaml", ".yml")


def read_source(source: Source) -> Dict[str, Any]:
    """Return the raw key-value data held by a path or an in-memory mapping"""
    if isinstance(source, Mapping):
        return _plain_dict(source)
    if isinstance(source, (str, os.PathLike)):
        return read_file(Path(source))
    raise SourceError("<source>", f"unsupported configuration source: {type(source).__name__}")


def read_file(path: Path) -> Dict[str, Any]:
    """Parse a JSON or YAML fragment; other suffixes are parsed as YAML"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        raise SourceError(str(path), f"configuration file not found: {path}")
    except OSError as e:
        raise SourceError(str(path), f"cannot read configuration file {path}: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SourceError(str(path), f"cannot parse configuration file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SourceError(str(path), f"configuration file {path} must hold a mapping, got {type(data).__name__}")

    logger.debug(f"Read configuration fragment {path} (keys: {', '.join(map(str, data))})")
    return data


def find_fragments(directory: Union[str, os.PathLike], pattern: str = "*.config.*") -> List[Path]:
    """JSON/YAML fragments in ``directory`` matching ``pattern``, in lexical order.

    Other files matching the pattern (e.g. a ``.config.php`` loader stub)
    are skipped.
    """
    root = Path(directory)
    if not root.is_dir():
        raise SourceError(str(root), f"configuration directory not found: {root}")

    fragments = []
    for path in sorted(p for p in root.glob(pattern) if p.is_file()):
        if path.suffix.lower() in FRAGMENT_SUFFIXES:
            fragments.append(path)
        else:
            logger.debug(f"Skipping {path}: not a JSON or YAML fragment")
    return fragments


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` into a copy of ``base``.

    Nested mappings merge key by key; any other value (lists included)
    replaces what was there.
    """
    merged = _plain_dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = _plain_value(value)
    return merged


def merge_sources(sources: Iterable[Source]) -> Dict[str, Any]:
    merged: Dict[str, Any] = {}
    for source in sources:
        merged = deep_merge(merged, read_source(source))
    return merged


def _plain_dict(mapping: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: _plain_value(value) for key, value in mapping.items()}


def _plain_value(value: Any) -> Any:
    # Copy so callers can't mutate what we validate
    if isinstance(value, Mapping):
        return _plain_dict(value)
    if isinstance(value, list):
        return [_plain_value(v) for v in value]
    return value
