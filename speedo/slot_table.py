"""Validation of the telemetry field -> display slot table (spdTbl)."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple

import showlog

from .errors import ConfigError, ConfigIssue, ErrorKind, FieldNotFound
from .models import (
    BOTTOM_ROW_POSITIONS,
    MAIN_COLUMN_ROWS,
    BottomRowSlot,
    HiddenSlot,
    MainColumnSlot,
    PrimarySlot,
    SlotAssignment,
    SlotKey,
    Zone,
)

Conflict = Tuple[SlotKey, FrozenSet[str]]


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class ValidatedSlotTable:
    """Immutable view of a validated slot table plus its conflict report."""

    slots: Mapping[str, SlotAssignment]
    bottom_row_count: int
    conflicts: Tuple[Conflict, ...] = ()

    def get_slot_for(self, field_name: str) -> SlotAssignment:
        try:
            return self.slots[field_name]
        except KeyError:
            raise FieldNotFound(field_name) from None

    def list_conflicts(self) -> Tuple[Conflict, ...]:
        return self.conflicts

    def field_names(self) -> Tuple[str, ...]:
        return tuple(self.slots)

    def primary_field(self) -> Optional[str]:
        for name, slot in self.slots.items():
            if isinstance(slot, PrimarySlot):
                return name
        return None

    def main_column(self) -> List[str]:
        """Main column field names, top to bottom."""
        entries = [
            (slot.row, slot.declared_position, name)
            for name, slot in self.slots.items()
            if isinstance(slot, MainColumnSlot)
        ]
        return [name for _, _, name in sorted(entries)]

    def bottom_row(self, row: int) -> List[str]:
        """Field names in bottom ``row``, left to right."""
        entries = [
            (slot.position, name)
            for name, slot in self.slots.items()
            if isinstance(slot, BottomRowSlot) and slot.row == row
        ]
        return [name for _, name in sorted(entries)]

    def hidden_fields(self) -> List[str]:
        return sorted(name for name, slot in self.slots.items() if isinstance(slot, HiddenSlot))


def _resolve(name: str, entry, bottom_row_count: Optional[int], issues: List[ConfigIssue]) -> Optional[SlotAssignment]:
    """Turn one declared [zone, row, position] triple into a slot, recording issues."""
    if isinstance(entry, (str, bytes)) or not isinstance(entry, Sequence) or len(entry) != 3:
        issues.append(ConfigIssue(ErrorKind.INVALID_VALUE, name, f"expected [zone, row, position], got {entry!r}"))
        return None

    zone, row, position = entry
    if not _is_int(zone) or zone < 0:
        issues.append(ConfigIssue(ErrorKind.UNKNOWN_ZONE, name, f"zone {zone!r} is not 0 (main), 1 (bottom) or 2+ (hidden)"))
        return None
    if zone >= Zone.HIDDEN:
        return HiddenSlot(zone, row, position)
    if not _is_int(row) or not _is_int(position):
        issues.append(ConfigIssue(ErrorKind.INVALID_VALUE, name, f"row and position must be integers, got {entry!r}"))
        return None

    if zone == Zone.MAIN_COLUMN:
        if row == 0 and position == 0:
            return PrimarySlot()
        if not 1 <= row <= MAIN_COLUMN_ROWS:
            issues.append(ConfigIssue(
                ErrorKind.OUT_OF_RANGE, name,
                f"main column row {row} outside 1-{MAIN_COLUMN_ROWS} ([0, 0, 0] is the main value)",
            ))
            return None
        return MainColumnSlot(row, position)

    ok = True
    if bottom_row_count is not None and not 1 <= row <= bottom_row_count:
        issues.append(ConfigIssue(ErrorKind.OUT_OF_RANGE, name, f"bottom row {row} outside 1-{bottom_row_count}"))
        ok = False
    if not 1 <= position <= BOTTOM_ROW_POSITIONS:
        issues.append(ConfigIssue(
            ErrorKind.OUT_OF_RANGE, name, f"bottom row position {position} outside 1-{BOTTOM_ROW_POSITIONS}",
        ))
        ok = False
    return BottomRowSlot(row, position) if ok else None


def find_conflicts(slots: Mapping[str, SlotAssignment]) -> Tuple[Conflict, ...]:
    """Group visible fields by slot key and return every key claimed more than once."""
    claims: Dict[SlotKey, set] = {}
    for name, slot in slots.items():
        key = slot.slot_key
        if key is None:
            continue
        claims.setdefault(key, set()).add(name)
    return tuple(
        (key, frozenset(names))
        for key, names in sorted(claims.items())
        if len(names) > 1
    )


def load_slot_table(declarations: Mapping[str, Sequence[int]], bottom_row_count: int) -> ValidatedSlotTable:
    """Validate a declared slot table.

    Raises ConfigError listing every malformed or out-of-range entry.
    Shared slots are not errors here; they are returned in ``conflicts``.
    """
    issues: List[ConfigIssue] = []

    if not _is_int(bottom_row_count) or bottom_row_count < 1:
        issues.append(ConfigIssue(
            ErrorKind.INVALID_VALUE, "spdBottomRows", f"bottom row count must be a positive integer, got {bottom_row_count!r}",
        ))
        bottom_row_count_ok = False
    else:
        bottom_row_count_ok = True

    if not isinstance(declarations, Mapping):
        issues.append(ConfigIssue(ErrorKind.INVALID_VALUE, "spdTbl", f"expected a mapping, got {type(declarations).__name__}"))
        raise ConfigError(issues)

    # with a broken row count, bottom rows are type-checked but their row is not range-checked
    limit = bottom_row_count if bottom_row_count_ok else None

    slots: Dict[str, SlotAssignment] = {}
    for name, entry in declarations.items():
        slot = _resolve(str(name), entry, limit, issues)
        if slot is not None:
            slots[str(name)] = slot

    if issues:
        showlog.debug(f"[SlotTable] {len(issues)} issue(s) in {len(declarations)} entries")
        raise ConfigError(issues)

    conflicts = find_conflicts(slots)
    showlog.verbose(
        f"[SlotTable] {len(slots)} fields, {bottom_row_count} bottom rows, {len(conflicts)} conflict(s)"
    )
    return ValidatedSlotTable(MappingProxyType(slots), bottom_row_count, conflicts)
