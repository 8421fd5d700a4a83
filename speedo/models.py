"""Typed slot assignments and preference records for the speedometer overlay."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, ClassVar, List, Optional, Union

import pygame

import helper


class Zone(IntEnum):
    MAIN_COLUMN = 0
    BOTTOM_ROW = 1
    HIDDEN = 2


# Placement limits
MAIN_COLUMN_ROWS = 4
BOTTOM_ROW_POSITIONS = 5


@dataclass(frozen=True, order=True)
class SlotKey:
    """Unique (zone, row, position) coordinate a field may occupy."""

    zone: Zone
    row: int
    position: int

    def __str__(self) -> str:
        return f"{self.zone.name}({self.row},{self.position})"


@dataclass(frozen=True)
class PrimarySlot:
    """The large centre value, declared as [0, 0, 0]."""

    zone: ClassVar[Zone] = Zone.MAIN_COLUMN

    @property
    def slot_key(self) -> SlotKey:
        return SlotKey(Zone.MAIN_COLUMN, 0, 0)

    def as_declared(self) -> List[int]:
        return [0, 0, 0]


@dataclass(frozen=True)
class MainColumnSlot:
    """A main column value, ordered top to bottom by row then position.

    The original layout declares its four values as [0, 1, 1] .. [0, 1, 4], so
    ``declared_position`` is part of the slot key.
    """

    row: int
    declared_position: int = 0
    zone: ClassVar[Zone] = Zone.MAIN_COLUMN

    @property
    def slot_key(self) -> SlotKey:
        return SlotKey(Zone.MAIN_COLUMN, self.row, self.declared_position)

    def as_declared(self) -> List[int]:
        return [0, self.row, self.declared_position]


@dataclass(frozen=True)
class BottomRowSlot:
    row: int
    position: int
    zone: ClassVar[Zone] = Zone.BOTTOM_ROW

    @property
    def slot_key(self) -> SlotKey:
        return SlotKey(Zone.BOTTOM_ROW, self.row, self.position)

    def as_declared(self) -> List[int]:
        return [1, self.row, self.position]


@dataclass(frozen=True)
class HiddenSlot:
    """A field excluded from display. Row and position carry no meaning and are
    kept exactly as declared, whatever their type.
    """

    declared_zone: int = 2
    declared_row: Any = 0
    declared_position: Any = 0
    zone: ClassVar[Zone] = Zone.HIDDEN

    @property
    def slot_key(self) -> Optional[SlotKey]:
        return None

    def as_declared(self) -> List[Any]:
        return [self.declared_zone, self.declared_row, self.declared_position]


SlotAssignment = Union[PrimarySlot, MainColumnSlot, BottomRowSlot, HiddenSlot]


class _CaseInsensitiveEnum(str, Enum):
    @classmethod
    def parse(cls, value) -> Optional["_CaseInsensitiveEnum"]:
        """Return the member whose value matches ``value`` ignoring case, else None."""
        if not isinstance(value, str):
            return None
        wanted = value.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


class Language(_CaseInsensitiveEnum):
    EN = "EN"
    ES = "ES"
    DE = "DE"
    PL = "PL"
    SK = "SK"
    TR = "TR"
    FR = "FR"
    IT = "IT"


class AnalogColor(_CaseInsensitiveEnum):
    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"
    YELLOW = "Yellow"
    PINK = "Pink"
    ORANGE = "Orange"
    PURPLE = "Purple"
    SILVER = "Silver"


class RangePolicy(str, Enum):
    CLAMP = "clamp"
    REJECT = "reject"


class ConflictPolicy(str, Enum):
    WARN = "warn"
    REJECT = "reject"


@dataclass(frozen=True)
class ValidatedPreferences:
    """User preference record consumed by the renderer for one display session."""

    language: Language = Language.DE
    is_mph: bool = False
    bar_speedometer_mod: bool = True
    speed_mod: bool = True
    start_analog: bool = True
    status_bar_speedometer: bool = True
    sb_temp: bool = False
    original_background_image: bool = False
    black_background_opacity: float = 0.0
    fuel_eff_unit_kml: bool = False
    temp_is_f: bool = False
    press_is_psi: bool = False
    engine_speed_bar: bool = False
    hide_speed_bar: bool = False
    speed_animation: bool = False
    analog_color: AnalogColor = AnalogColor.RED
    bar_theme: int = 0
    fuel_gauge_value_suffix: str = "%"
    fuel_gauge_factor: float = 100

    @property
    def analog_rgb(self) -> pygame.Color:
        return helper.palette_color(self.analog_color.value)

    @property
    def effective_opacity(self) -> float:
        # the original background image replaces the black overlay entirely
        if self.original_background_image:
            return 0.0
        return self.black_background_opacity
