"""
Development Profile - Debug-Friendly Settings
Strict validation and verbose logging while editing a declaration.
"""

# Reject out-of-range values so mistakes surface immediately
RANGE_POLICY = "reject"
CONFLICT_POLICY = "warn"

# Verbose logging for development
LOG_LEVEL = 2           # INFO level
VERBOSE_LOG = True
DEBUG_LOG = True
LOG_TO_STDOUT = True
