"""Builds the validated speedometer configuration handed to the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

import config as cfg
import showlog

from .declaration import Declaration, resolve_declaration
from .errors import ConfigError, ConfigIssue, ErrorKind
from .models import ConflictPolicy, RangePolicy, SlotAssignment, ValidatedPreferences
from .preferences import load_preferences
from .slot_table import Conflict, ValidatedSlotTable, load_slot_table


@dataclass(frozen=True)
class DashboardConfig:
    """Validated slot table and preferences for one display session."""

    slots: ValidatedSlotTable
    preferences: ValidatedPreferences
    source: str = "<embedded>"

    @property
    def bottom_row_count(self) -> int:
        return self.slots.bottom_row_count

    def get_slot_for(self, field_name: str) -> SlotAssignment:
        return self.slots.get_slot_for(field_name)

    def get_preferences(self) -> ValidatedPreferences:
        return self.preferences

    def list_conflicts(self) -> Tuple[Conflict, ...]:
        return self.slots.list_conflicts()


def _conflict_issues(conflicts) -> List[ConfigIssue]:
    return [
        ConfigIssue(ErrorKind.SLOT_CONFLICT, ", ".join(sorted(names)), f"fields share slot {key}")
        for key, names in conflicts
    ]


def _policy(kind, value, subject: str, issues: List[ConfigIssue]):
    try:
        return kind(value)
    except ValueError:
        choices = ", ".join(member.value for member in kind)
        issues.append(ConfigIssue(ErrorKind.INVALID_VALUE, subject, f"unknown policy {value!r}, expected one of {choices}"))
        return None


def load_dashboard_config(
    declaration: Optional[Declaration] = None,
    *,
    path: Optional[Union[str, Path]] = None,
    range_policy: Optional[Union[RangePolicy, str]] = None,
    conflict_policy: Optional[Union[ConflictPolicy, str]] = None,
) -> DashboardConfig:
    """Validate a declaration into a DashboardConfig.

    Without arguments the declaration comes from cfg.DECLARATION_FILE or the
    embedded config, and both policies come from the active profile. Slot and
    preference problems are raised together in a single ConfigError.
    """
    if declaration is None:
        declaration = resolve_declaration(cfg, path)
    policy_issues: List[ConfigIssue] = []
    range_policy = _policy(RangePolicy, range_policy or cfg.RANGE_POLICY, "range_policy", policy_issues)
    conflict_policy = _policy(ConflictPolicy, conflict_policy or cfg.CONFLICT_POLICY, "conflict_policy", policy_issues)
    if policy_issues:
        error = ConfigError(policy_issues)
        showlog.error(f"[Loader] {declaration.source} rejected\n{error}")
        raise error

    showlog.debug(
        f"[Loader] Validating {declaration.source} "
        f"(range={range_policy.value}, conflicts={conflict_policy.value}, override={declaration.override})"
    )

    issues: List[ConfigIssue] = []
    slots = None
    preferences = None

    try:
        slots = load_slot_table(declaration.slots, declaration.bottom_rows)
    except ConfigError as e:
        issues.extend(e.issues)

    try:
        preferences = load_preferences(declaration.active_preferences(), range_policy)
    except ConfigError as e:
        issues.extend(e.issues)

    if slots is not None:
        conflicts = slots.list_conflicts()
        if conflicts and conflict_policy is ConflictPolicy.REJECT:
            issues.extend(_conflict_issues(conflicts))
        else:
            for key, names in conflicts:
                showlog.warn(f"[Loader] Slot {key} shared by {', '.join(sorted(names))}")

        if getattr(cfg, "WARN_UNKNOWN_FIELDS", True):
            known = getattr(cfg, "KNOWN_FIELDS", {})
            for name in slots.field_names():
                if name not in known:
                    showlog.warn(f"[Loader] Unknown telemetry field {name!r}")

    if issues:
        error = ConfigError(issues)
        showlog.error(f"[Loader] {declaration.source} rejected\n{error}")
        raise error

    if not declaration.override:
        showlog.debug("[Loader] overRideSpeed is off, using default preferences")

    showlog.info(
        f"[Loader] {declaration.source}: {len(slots.slots)} fields, "
        f"{slots.bottom_row_count} bottom rows, language {preferences.language.value}"
    )
    return DashboardConfig(slots, preferences, declaration.source)
