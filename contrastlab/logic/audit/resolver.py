#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/audit/resolver.py

import json
import sys
from typing import Any, List, Mapping, Optional, Tuple

from contrastlab.core import config as c
from contrastlab.core.models import ThemePreset
from contrastlab.shared.logger import log
from contrastlab.shared.sanitizer import _sanitize_for_log


def coerce_preset(entry: Any) -> Optional[ThemePreset]:
    """
    Build a ThemePreset from a catalog record.

    Accepts an existing ThemePreset or a mapping with ``id``, ``label``,
    ``category`` and ``styles``. Returns None when the record has no
    usable id. A missing label falls back to the id and a missing
    category to ``uncategorized``.
    """
    if isinstance(entry, ThemePreset):
        return entry
    if not isinstance(entry, Mapping):
        return None

    preset_id = entry.get("id")
    if not isinstance(preset_id, str) or not preset_id.strip():
        return None

    label = entry.get("label")
    category = entry.get("category")
    styles = entry.get("styles")

    return ThemePreset(
        id=preset_id,
        label=label if isinstance(label, str) and label else preset_id,
        category=category if isinstance(category, str) and category else c.FALLBACK_CATEGORY,
        styles=styles if isinstance(styles, Mapping) else {},
    )


def coerce_catalog(entries: Any) -> Tuple[List[ThemePreset], int]:
    """Coerce a sequence of records; returns (presets, skipped_count)."""
    presets = []
    skipped = 0
    for entry in entries:
        preset = coerce_preset(entry)
        if preset is None:
            skipped += 1
        else:
            presets.append(preset)
    return presets, skipped


def _read_json(path: str, what: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError:
        log("error", f"{what} file not found: '{_sanitize_for_log(path)}'")
        sys.exit(2)
    except (OSError, UnicodeDecodeError) as exc:
        log("error", f"cannot read {what} file '{_sanitize_for_log(path)}': {exc}")
        sys.exit(2)
    except json.JSONDecodeError as exc:
        log("error", f"invalid JSON in {what} file '{_sanitize_for_log(path)}': {exc.msg} (line {exc.lineno})")
        sys.exit(2)


def load_catalog(path: str) -> List[ThemePreset]:
    """Load a theme catalog: a JSON list of presets or {"presets": [...]}."""
    data = _read_json(path, "catalog")

    if isinstance(data, Mapping):
        data = data.get("presets")
    if not isinstance(data, list):
        log("error", "catalog must be a list of presets or an object with a 'presets' list")
        sys.exit(2)

    presets, skipped = coerce_catalog(data)
    if skipped:
        log("warning", f"skipped {skipped} malformed preset record(s) without a usable 'id'")
    return presets


def load_pairs(path: str) -> Tuple[Tuple[str, ...], ...]:
    """Load a pair catalog: a JSON list of [bg, fg] or [bg, fg, label]."""
    data = _read_json(path, "pairs")

    if not isinstance(data, list):
        log("error", "pairs file must contain a list of [background, foreground(, label)] entries")
        sys.exit(2)

    pairs = []
    for i, item in enumerate(data):
        valid = (
            isinstance(item, list)
            and len(item) in (2, 3)
            and all(isinstance(part, str) and part for part in item)
        )
        if not valid:
            log("error", f"invalid pair entry at index {i}: '{_sanitize_for_log(item)}'")
            sys.exit(2)
        pairs.append(tuple(item))

    if not pairs:
        log("error", "pairs file is empty")
        sys.exit(2)
    return tuple(pairs)
