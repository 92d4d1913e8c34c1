"""Romanization styles.

A style is a JSON file holding the five converter tables. A style may name
another style in ``extends``; its tables are then applied on top of the
parent's, where a ``null`` value removes the inherited entry.
"""

import json
import os
from typing import Dict, List, Optional

from pydantic import ValidationError

from romanji import config
from romanji.base import StyleLoadError, StyleNotFoundError
from romanji.logger import logger
from romanji.schema import ConversionTables, StyleFile

TABLE_FIELDS = (
    "conversions",
    "verb_combos",
    "n_conversions",
    "particle_conversions",
    "tsu_conversions",
)

_style_cache: Dict[str, ConversionTables] = {}


def style_path(name: str) -> str:
    """Return the path of the style file for *name*, user directory first."""
    searched = config.style_search_path()
    for directory in searched:
        path = os.path.join(directory, f"{name}.json")
        if os.path.isfile(path):
            return path
    raise StyleNotFoundError(name, searched)

def available_styles() -> List[str]:
    names = set()
    for directory in config.style_search_path():
        if not os.path.isdir(directory):
            continue
        for filename in os.listdir(directory):
            if filename.endswith(".json"):
                names.add(filename[:-len(".json")])
    return sorted(names)

def read_style_file(path: str) -> StyleFile:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        name = os.path.splitext(os.path.basename(path))[0]
        raise StyleLoadError(name, f"{path} is not valid JSON: {e}") from e
    try:
        return StyleFile.model_validate(data)
    except ValidationError as e:
        name = data.get("name", path) if isinstance(data, dict) else path
        raise StyleLoadError(name, f"invalid style file {path}: {e}") from e

def _merge(base: Dict[str, str], overrides: Dict[str, Optional[str]]) -> Dict[str, str]:
    merged = dict(base)
    for key, value in overrides.items():
        if value is None:
            merged.pop(key, None)
        else:
            merged[key] = value
    return merged

def _resolve(name: str, chain: List[str]) -> Dict[str, Dict[str, str]]:
    if name in chain:
        cycle = " -> ".join(chain + [name])
        raise StyleLoadError(chain[0], f"inheritance cycle {cycle}")
    chain = chain + [name]

    path = style_path(name)
    style = read_style_file(path)
    logger.debug(f"Reading style '{name}' from {path}")

    if style.extends:
        tables = _resolve(style.extends, chain)
    else:
        tables = {field: {} for field in TABLE_FIELDS}

    return {
        field: _merge(tables[field], getattr(style, field))
        for field in TABLE_FIELDS
    }

def load_style(name: Optional[str] = None) -> ConversionTables:
    """Load and validate the tables of style *name* (default: ROMANJI_STYLE)."""
    name = name or config.ROMANJI_STYLE
    if name not in _style_cache:
        _style_cache[name] = _build(name)
    # The cached tables are shared; callers get their own copy to mutate
    return _style_cache[name].model_copy(deep=True)

def _build(name: str) -> ConversionTables:
    tables = _resolve(name, [])
    try:
        result = ConversionTables(**tables)
    except ValidationError as e:
        raise StyleLoadError(name, f"invalid tables: {e}") from e

    logger.debug(f"Loaded style '{name}' ({len(result.conversions)} conversions)")
    return result

def clear_cache() -> None:
    _style_cache.clear()
