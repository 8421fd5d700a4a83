"""
Production Profile - Optimized Settings
Default configuration for the car head unit.
"""

# Keep the display usable: clamp and report instead of refusing to start
RANGE_POLICY = "clamp"
CONFLICT_POLICY = "warn"

# Production logging (minimal)
LOG_LEVEL = 0
VERBOSE_LOG = False
DEBUG_LOG = False
LOG_TO_STDOUT = False
