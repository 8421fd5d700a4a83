"""Raw speedometer declarations from the embedded config, JSON, or speedometer-config.js.

A declaration is the unvalidated input to the loader: the slot table, the
bottom row count, the override flag and the preference record. Files use the
same names as the head unit's ``speedometer-config.js``::

    var spdBottomRows = 3;
    var spdTbl = { vehSpeed: [0, 0, 0], ... };
    var overRideSpeed = false;
    var SORV = { language: "DE", ... };

The JSON form is an object with the keys ``spdBottomRows``, ``spdTbl``,
``overRideSpeed`` and ``SORV``.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import showlog

from .errors import DeclarationError

DEFAULT_BOTTOM_ROWS = 3

# Strings are matched first so comment markers inside them survive.
_COMMENT_RE = re.compile(r'("(?:\\.|[^"\\])*"|\'(?:\\.|[^\'\\])*\')|/\*.*?\*/|//[^\n]*', re.S)
_VAR_RE = re.compile(r'\bvar\s+([A-Za-z_$][\w$]*)\s*=\s*')
_BARE_KEY_RE = re.compile(r'([{,]\s*)([A-Za-z_$][\w$]*)\s*:')
_SINGLE_QUOTED_RE = re.compile(r"'((?:\\.|[^'\\])*)'")
_TRAILING_COMMA_RE = re.compile(r',(\s*[}\]])')


@dataclass
class Declaration:
    slots: Dict[str, Any]
    bottom_rows: Any = DEFAULT_BOTTOM_ROWS
    override: bool = False
    preferences: Dict[str, Any] = field(default_factory=dict)
    source: str = "<embedded>"

    def active_preferences(self) -> Dict[str, Any]:
        """The preference record to validate: SORV only when the override flag is set."""
        return dict(self.preferences) if self.override else {}


def declaration_from_config(cfg) -> Declaration:
    """Build a declaration from the ``config`` package (or any object with the same names)."""
    return Declaration(
        slots=dict(getattr(cfg, "SPD_TBL", {})),
        bottom_rows=getattr(cfg, "SPD_BOTTOM_ROWS", DEFAULT_BOTTOM_ROWS),
        override=bool(getattr(cfg, "OVERRIDE_SPEED", False)),
        preferences=dict(getattr(cfg, "SORV", {})),
        source="<embedded>",
    )


def _from_values(values: Dict[str, Any], source: str) -> Declaration:
    if "spdTbl" not in values:
        raise DeclarationError(source, "no spdTbl slot table found")
    override = values.get("overRideSpeed", False)
    if not isinstance(override, bool):
        raise DeclarationError(source, f"overRideSpeed must be true/false, got {override!r}")
    preferences = values.get("SORV") or {}
    if not isinstance(preferences, dict):
        raise DeclarationError(source, f"SORV must be an object, got {type(preferences).__name__}")
    slots = values["spdTbl"]
    if not isinstance(slots, dict):
        raise DeclarationError(source, f"spdTbl must be an object, got {type(slots).__name__}")
    return Declaration(
        slots=slots,
        bottom_rows=values.get("spdBottomRows", DEFAULT_BOTTOM_ROWS),
        override=override,
        preferences=preferences,
        source=source,
    )


def parse_json_declaration(text: str, source: str = "<json>") -> Declaration:
    try:
        values = json.loads(text)
    except json.JSONDecodeError as e:
        raise DeclarationError(source, f"invalid JSON: {e}") from e
    if not isinstance(values, dict):
        raise DeclarationError(source, "top level must be an object")
    return _from_values(values, source)


def _strip_comments(text: str) -> str:
    return _COMMENT_RE.sub(lambda m: m.group(1) or "", text)


def _scan_literal(text: str, start: int) -> int:
    """Return the index just past the literal starting at ``start``."""
    opener = text[start]
    if opener not in "{[":
        end = text.find(";", start)
        return len(text) if end == -1 else end

    depth = 0
    quote = None
    i = start
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch in "{[":
            depth += 1
        elif ch in "}]":
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    raise ValueError("unbalanced brackets")


def _js_literal_to_json(literal: str) -> str:
    literal = _SINGLE_QUOTED_RE.sub(lambda m: json.dumps(m.group(1)), literal)
    literal = _BARE_KEY_RE.sub(r'\1"\2":', literal)
    return _TRAILING_COMMA_RE.sub(r'\1', literal)


def parse_speedometer_js(text: str, source: str = "<js>") -> Declaration:
    """Read the ``var name = literal;`` assignments of a speedometer-config.js file."""
    body = _strip_comments(text)
    values: Dict[str, Any] = {}
    for match in _VAR_RE.finditer(body):
        name = match.group(1)
        start = match.end()
        try:
            end = _scan_literal(body, start)
            values[name] = json.loads(_js_literal_to_json(body[start:end].strip()))
        except ValueError as e:
            # JSONDecodeError is a ValueError
            raise DeclarationError(source, f"cannot read value of {name}: {e}") from e
    showlog.debug(f"[Declaration] {source}: found {', '.join(sorted(values)) or 'nothing'}")
    return _from_values(values, source)


def load_declaration_file(path: Union[str, Path]) -> Declaration:
    """Load a ``.json`` or ``.js`` declaration file."""
    path = Path(path)
    source = str(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DeclarationError(source, f"cannot read file: {e}") from e

    suffix = path.suffix.lower()
    if suffix == ".json":
        declaration = parse_json_declaration(text, source)
    elif suffix == ".js":
        declaration = parse_speedometer_js(text, source)
    else:
        raise DeclarationError(source, f"unsupported declaration type {suffix or '(none)'!r}, expected .json or .js")

    showlog.info(f"[Declaration] Loaded {len(declaration.slots)} slot entries from {path.name}")
    return declaration


def resolve_declaration(cfg, path: Optional[Union[str, Path]] = None) -> Declaration:
    """Use ``path`` (or cfg.DECLARATION_FILE) when given, otherwise the embedded declaration."""
    path = path or getattr(cfg, "DECLARATION_FILE", "")
    if path:
        return load_declaration_file(path)
    return declaration_from_config(cfg)
