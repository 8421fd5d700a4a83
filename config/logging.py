"""
Logging Configuration
All logging-related settings for the speedometer config loader.
"""

# -------------------------------------------------------
# Logging configuration
# -------------------------------------------------------

# Verbosity levels:
#   0 = ERROR  → only critical errors
#   1 = WARN   → warnings and errors
#   2 = INFO   → normal info (default)
LOG_OFF = False

LOG_LEVEL = 2
VERBOSE_LOG = False
DEBUG_LOG = False

# Echo log lines to stdout as well as the log file
LOG_TO_STDOUT = False

# Keep the "[LEVEL module]" token in written lines
SHOW_LOG_TYPE_AS_TEXT = True
