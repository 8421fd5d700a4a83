"""Tests for slot table validation and conflict reporting."""

from __future__ import annotations

import unittest

import config
from speedo.errors import ConfigError, ErrorKind, FieldNotFound
from speedo.models import BottomRowSlot, HiddenSlot, MainColumnSlot, PrimarySlot, SlotKey, Zone
from speedo.slot_table import load_slot_table


class SlotRangeTests(unittest.TestCase):
    def assertRejected(self, declarations, kind, bottom_rows=3):
        with self.assertRaises(ConfigError) as ctx:
            load_slot_table(declarations, bottom_rows)
        self.assertIn(kind, ctx.exception.kinds)
        return ctx.exception

    def test_main_column_rows_one_to_four_accepted(self) -> None:
        table = load_slot_table({f"f{row}": [0, row, 0] for row in range(1, 5)}, 3)
        for row in range(1, 5):
            slot = table.get_slot_for(f"f{row}")
            self.assertIsInstance(slot, MainColumnSlot)
            self.assertEqual(slot.row, row)

    def test_main_column_row_out_of_range_rejected(self) -> None:
        self.assertRejected({"topSpeed": [0, 5, 0]}, ErrorKind.OUT_OF_RANGE)

    def test_main_value_only_at_exact_origin(self) -> None:
        table = load_slot_table({"vehSpeed": [0, 0, 0]}, 3)
        self.assertIsInstance(table.get_slot_for("vehSpeed"), PrimarySlot)
        self.assertEqual(table.primary_field(), "vehSpeed")
        self.assertRejected({"vehSpeed": [0, 0, 2]}, ErrorKind.OUT_OF_RANGE)

    def test_main_column_keeps_declared_position(self) -> None:
        table = load_slot_table({"engSpeed": [0, 1, 4]}, 3)
        self.assertEqual(table.get_slot_for("engSpeed").as_declared(), [0, 1, 4])

    def test_bottom_row_beyond_row_count_rejected(self) -> None:
        error = self.assertRejected({"outTemp": [1, 4, 1]}, ErrorKind.OUT_OF_RANGE, bottom_rows=3)
        self.assertEqual(len(error.issues_for("outTemp")), 1)

    def test_bottom_row_accepts_extra_rows_when_count_allows(self) -> None:
        table = load_slot_table({"outTemp": [1, 4, 1]}, 4)
        self.assertEqual(table.get_slot_for("outTemp"), BottomRowSlot(4, 1))

    def test_bottom_row_position_outside_one_to_five_rejected(self) -> None:
        self.assertRejected({"oilTemp": [1, 1, 6]}, ErrorKind.OUT_OF_RANGE)
        self.assertRejected({"oilTemp": [1, 1, 0]}, ErrorKind.OUT_OF_RANGE)
        self.assertRejected({"oilTemp": [1, 0, 1]}, ErrorKind.OUT_OF_RANGE)

    def test_bottom_row_reports_row_and_position_together(self) -> None:
        error = self.assertRejected({"oilPres": [1, 9, 9]}, ErrorKind.OUT_OF_RANGE)
        self.assertEqual(len(error.issues_for("oilPres")), 2)

    def test_unknown_zone_rejected(self) -> None:
        for zone in (-1, "main", None, 1.0, True):
            with self.subTest(zone=zone):
                self.assertRejected({"gpsAlt": [zone, 1, 1]}, ErrorKind.UNKNOWN_ZONE)

    def test_malformed_entries_rejected(self) -> None:
        for entry in ([1, 1], [1, 1, 1, 1], "111", 7, [1, "1", 1]):
            with self.subTest(entry=entry):
                self.assertRejected({"gpsLat": entry}, ErrorKind.INVALID_VALUE)

    def test_invalid_bottom_row_count_rejected(self) -> None:
        for count in (0, -2, "3", None):
            with self.subTest(count=count):
                error = self.assertRejected({"outTemp": [1, 1, 1]}, ErrorKind.INVALID_VALUE, bottom_rows=count)
                self.assertTrue(error.issues_for("spdBottomRows"))

    def test_every_problem_is_collected(self) -> None:
        with self.assertRaises(ConfigError) as ctx:
            load_slot_table({
                "topSpeed": [0, 7, 0],
                "outTemp": [1, 4, 1],
                "gpsAlt": [-1, 0, 0],
                "coolTemp": [1, 1, 2],
            }, 3)
        error = ctx.exception
        self.assertEqual(len(error.issues), 3)
        self.assertEqual(error.kinds, {ErrorKind.OUT_OF_RANGE, ErrorKind.UNKNOWN_ZONE})
        self.assertIn("topSpeed", str(error))

    def test_hidden_values_are_not_range_checked(self) -> None:
        table = load_slot_table({"batSOC": [7, 99, -3]}, 3)
        slot = table.get_slot_for("batSOC")
        self.assertIsInstance(slot, HiddenSlot)
        self.assertIs(slot.zone, Zone.HIDDEN)
        self.assertEqual(slot.as_declared(), [7, 99, -3])
        self.assertIsNone(slot.slot_key)

    def test_hidden_row_and_position_passed_through(self) -> None:
        table = load_slot_table({"batSOC": [2, None, None], "gpsLat": [3, "x", 1.5]}, 3)
        self.assertEqual(table.get_slot_for("batSOC").as_declared(), [2, None, None])
        self.assertEqual(table.get_slot_for("gpsLat").as_declared(), [3, "x", 1.5])
        self.assertEqual(table.hidden_fields(), ["batSOC", "gpsLat"])

    def test_unknown_field_lookup(self) -> None:
        table = load_slot_table({"outTemp": [1, 1, 1]}, 3)
        with self.assertRaises(FieldNotFound):
            table.get_slot_for("warpSpeed")

    def test_slots_are_read_only(self) -> None:
        table = load_slot_table({"outTemp": [1, 1, 1]}, 3)
        with self.assertRaises(TypeError):
            table.slots["outTemp"] = HiddenSlot()


class SlotConflictTests(unittest.TestCase):
    def test_shared_bottom_slot_reported(self) -> None:
        table = load_slot_table({"outTemp": [1, 1, 1], "coolTemp": [1, 1, 1], "oilTemp": [1, 1, 2]}, 3)
        self.assertEqual(
            table.list_conflicts(),
            ((SlotKey(Zone.BOTTOM_ROW, 1, 1), frozenset({"outTemp", "coolTemp"})),),
        )

    def test_main_column_conflict_keyed_by_row_and_position(self) -> None:
        table = load_slot_table({"topSpeed": [0, 1, 2], "avgSpeed": [0, 1, 2], "gpsSpeed": [0, 1, 3]}, 3)
        self.assertEqual(
            table.list_conflicts(),
            ((SlotKey(Zone.MAIN_COLUMN, 1, 2), frozenset({"topSpeed", "avgSpeed"})),),
        )

    def test_main_column_positions_in_one_row_do_not_conflict(self) -> None:
        table = load_slot_table({
            "engSpeed": [0, 1, 4],
            "topSpeed": [0, 1, 1],
            "gpsSpeed": [0, 1, 3],
            "avgSpeed": [0, 1, 2],
        }, 3)
        self.assertEqual(table.list_conflicts(), ())
        self.assertEqual(table.main_column(), ["topSpeed", "avgSpeed", "gpsSpeed", "engSpeed"])

    def test_hidden_fields_never_conflict(self) -> None:
        table = load_slot_table({
            "trpTime": [2, 1, 0],
            "trpIdle": [2, 1, 0],
            "trpDist": [2, 1, 0],
            "gearPos": [3, 1, 1],
            "outTemp": [1, 1, 1],
        }, 3)
        self.assertEqual(table.list_conflicts(), ())

    def test_conflicts_sorted_by_slot(self) -> None:
        table = load_slot_table({
            "a": [1, 2, 1], "b": [1, 2, 1],
            "c": [0, 3, 0], "d": [0, 3, 0],
        }, 3)
        keys = [key for key, _ in table.list_conflicts()]
        self.assertEqual(keys, [SlotKey(Zone.MAIN_COLUMN, 3, 0), SlotKey(Zone.BOTTOM_ROW, 2, 1)])

    def test_validation_is_idempotent(self) -> None:
        declarations = {"outTemp": [1, 1, 1], "coolTemp": [1, 1, 1], "vehSpeed": [0, 0, 0], "batSOC": [2, 4, 0]}
        self.assertEqual(load_slot_table(declarations, 3), load_slot_table(declarations, 3))


class EmbeddedLayoutTests(unittest.TestCase):
    def setUp(self) -> None:
        self.table = load_slot_table(config.SPD_TBL, config.SPD_BOTTOM_ROWS)

    def test_embedded_layout_has_no_conflicts(self) -> None:
        self.assertEqual(self.table.list_conflicts(), ())

    def test_embedded_layout_views(self) -> None:
        self.assertEqual(self.table.primary_field(), "vehSpeed")
        self.assertEqual(self.table.main_column(), ["topSpeed", "avgSpeed", "gpsSpeed", "engSpeed"])
        self.assertEqual(self.table.bottom_row(1), ["outTemp", "coolTemp", "oilTemp", "oilPres"])
        self.assertEqual(self.table.bottom_row(3), ["tpmsFlPres", "tpmsFrPres", "tpmsRlPres", "tpmsRrPres"])
        self.assertIn("inTemp", self.table.hidden_fields())
        self.assertEqual(len(self.table.field_names()), len(config.SPD_TBL))


if __name__ == "__main__":  # pragma: no cover
    unittest.main(exit=False)
