"""Validation of the preference override record (SORV)."""

from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Optional, Union

import config as cfg
import helper
import showlog

from .errors import ConfigError, ConfigIssue, ErrorKind
from .models import AnalogColor, Language, RangePolicy, ValidatedPreferences

# declared key -> ValidatedPreferences attribute
BOOL_KEYS: Dict[str, str] = {
    "isMPH": "is_mph",
    "barSpeedometerMod": "bar_speedometer_mod",
    "speedMod": "speed_mod",
    "startAnalog": "start_analog",
    "StatusBarSpeedometer": "status_bar_speedometer",
    "sbTemp": "sb_temp",
    "original_background_image": "original_background_image",
    "fuelEffunit_kml": "fuel_eff_unit_kml",
    "tempIsF": "temp_is_f",
    "pressIsPsi": "press_is_psi",
    "engineSpeedBar": "engine_speed_bar",
    "hideSpeedBar": "hide_speed_bar",
    "speedAnimation": "speed_animation",
}

KNOWN_KEYS = frozenset(BOOL_KEYS) | {
    "language",
    "black_background_opacity",
    "analogColor",
    "barTheme",
    "fuelGaugeValueSuffix",
    "fuelGaugeFactor",
}

OPACITY_RANGE = (0.0, 1.0)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class _Checker:
    """Collects issues for one preference record under a range policy."""

    def __init__(self, range_policy: RangePolicy) -> None:
        self.range_policy = range_policy
        self.issues: List[ConfigIssue] = []

    def fail(self, kind: ErrorKind, key: str, message: str) -> None:
        self.issues.append(ConfigIssue(kind, key, message))

    def in_range(self, key: str, value, lo, hi):
        """Return ``value`` (clamped under CLAMP) or None if rejected."""
        if lo <= value <= hi:
            return value
        if self.range_policy is RangePolicy.CLAMP:
            clamped = helper.clamp(value, lo, hi)
            showlog.warn(f"[Prefs] {key}={value!r} outside {lo}-{hi}, clamped to {clamped!r}")
            return clamped
        self.fail(ErrorKind.OUT_OF_RANGE, key, f"{value!r} outside {lo}-{hi}")
        return None


def load_preferences(
    declared: Optional[Mapping[str, Any]],
    range_policy: Union[RangePolicy, str] = RangePolicy.CLAMP,
) -> ValidatedPreferences:
    """Validate a declared preference record.

    Missing keys keep their defaults and unknown keys are ignored with a
    warning. Raises ConfigError listing every invalid value.
    """
    policy = RangePolicy(range_policy)
    if declared is None:
        declared = {}
    if not isinstance(declared, Mapping):
        raise ConfigError([ConfigIssue(
            ErrorKind.INVALID_VALUE, "SORV", f"expected a mapping, got {type(declared).__name__}",
        )])

    check = _Checker(policy)
    values: Dict[str, Any] = {}

    for key in declared:
        if key not in KNOWN_KEYS:
            showlog.warn(f"[Prefs] Ignoring unknown preference {key!r}")

    if "language" in declared:
        language = Language.parse(declared["language"])
        if language is None:
            supported = ", ".join(member.value for member in Language)
            check.fail(ErrorKind.INVALID_ENUM, "language", f"{declared['language']!r} not one of {supported}")
        else:
            values["language"] = language

    for key, attr in BOOL_KEYS.items():
        if key not in declared:
            continue
        raw = declared[key]
        if isinstance(raw, bool):
            values[attr] = raw
        else:
            check.fail(ErrorKind.INVALID_VALUE, key, f"expected true/false, got {raw!r}")

    if "black_background_opacity" in declared:
        raw = declared["black_background_opacity"]
        if not _is_number(raw) or math.isnan(raw):
            check.fail(ErrorKind.INVALID_VALUE, "black_background_opacity", f"expected a number, got {raw!r}")
        else:
            opacity = check.in_range("black_background_opacity", float(raw), *OPACITY_RANGE)
            if opacity is not None:
                values["black_background_opacity"] = opacity

    if "analogColor" in declared:
        color = AnalogColor.parse(declared["analogColor"])
        if color is None:
            palette = ", ".join(member.value for member in AnalogColor)
            check.fail(ErrorKind.INVALID_ENUM, "analogColor", f"{declared['analogColor']!r} not one of {palette}")
        else:
            values["analog_color"] = color

    if "barTheme" in declared:
        raw = declared["barTheme"]
        if not isinstance(raw, int) or isinstance(raw, bool):
            check.fail(ErrorKind.INVALID_VALUE, "barTheme", f"expected an integer theme, got {raw!r}")
        else:
            theme = check.in_range("barTheme", raw, cfg.BAR_THEME_MIN, cfg.BAR_THEME_MAX)
            if theme is not None:
                values["bar_theme"] = theme

    if "fuelGaugeValueSuffix" in declared:
        raw = declared["fuelGaugeValueSuffix"]
        if isinstance(raw, str) and raw:
            values["fuel_gauge_value_suffix"] = raw
        else:
            check.fail(ErrorKind.INVALID_VALUE, "fuelGaugeValueSuffix", f"expected a non-empty string, got {raw!r}")

    if "fuelGaugeFactor" in declared:
        raw = declared["fuelGaugeFactor"]
        if _is_number(raw) and math.isfinite(raw) and raw > 0:
            values["fuel_gauge_factor"] = raw
        else:
            check.fail(ErrorKind.INVALID_VALUE, "fuelGaugeFactor", f"expected a positive number, got {raw!r}")

    if check.issues:
        showlog.debug(f"[Prefs] {len(check.issues)} issue(s) in preference record")
        raise ConfigError(check.issues)

    prefs = ValidatedPreferences(**values)
    showlog.verbose(f"[Prefs] language={prefs.language.value} mph={prefs.is_mph} color={prefs.analog_color.value}")
    return prefs
