"""
Validation Policy Configuration
How the loader treats out-of-range preferences and slot collisions.
"""

RANGE_POLICIES = ("clamp", "reject")
CONFLICT_POLICIES = ("warn", "reject")

# "clamp" pulls opacity/theme back into range (with a warning),
# "reject" turns them into OutOfRange errors.
RANGE_POLICY = "clamp"

# "warn" logs shared slots and keeps loading,
# "reject" turns every shared slot into a SlotConflict error.
CONFLICT_POLICY = "warn"

# Warn about spdTbl entries that are not in KNOWN_FIELDS
WARN_UNKNOWN_FIELDS = True
