"""Speedometer overlay configuration: slot table and preference validation."""

from .declaration import (
    Declaration,
    declaration_from_config,
    load_declaration_file,
    parse_json_declaration,
    parse_speedometer_js,
)
from .errors import ConfigError, ConfigIssue, DeclarationError, ErrorKind, FieldNotFound
from .loader import DashboardConfig, load_dashboard_config
from .models import (
    AnalogColor,
    BottomRowSlot,
    ConflictPolicy,
    HiddenSlot,
    Language,
    MainColumnSlot,
    PrimarySlot,
    RangePolicy,
    SlotKey,
    ValidatedPreferences,
    Zone,
)
from .preferences import load_preferences
from .slot_table import ValidatedSlotTable, load_slot_table

__all__ = [
	"AnalogColor",
	"BottomRowSlot",
	"ConfigError",
	"ConfigIssue",
	"ConflictPolicy",
	"DashboardConfig",
	"Declaration",
	"DeclarationError",
	"ErrorKind",
	"FieldNotFound",
	"HiddenSlot",
	"Language",
	"MainColumnSlot",
	"PrimarySlot",
	"RangePolicy",
	"SlotKey",
	"ValidatedPreferences",
	"ValidatedSlotTable",
	"Zone",
	"declaration_from_config",
	"load_dashboard_config",
	"load_declaration_file",
	"load_preferences",
	"load_slot_table",
	"parse_json_declaration",
	"parse_speedometer_js",
]
