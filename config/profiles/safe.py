"""
Safe Mode Profile - Minimal Features
For troubleshooting a declaration that will not load.
"""

RANGE_POLICY = "clamp"
CONFLICT_POLICY = "warn"
WARN_UNKNOWN_FIELDS = False

# Warnings and errors, file only
LOG_LEVEL = 1
VERBOSE_LOG = False
DEBUG_LOG = False
LOG_TO_STDOUT = False
