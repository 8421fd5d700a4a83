"""
Path Configuration
Directory paths for logs and declaration files.
"""

import os

# Base path for the project
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Config directory for declaration files
CONFIG_DIR = os.path.join(BASE_DIR, "config")

# Log output
LOG_DIR = os.environ.get("SPEEDO_LOG_DIR") or BASE_DIR
LOG_FILE = os.path.join(LOG_DIR, "speedo_log.txt")

# Optional external declaration (.json or speedometer-config.js).
# Empty means "use the embedded declaration in config/speedometer.py".
DECLARATION_FILE = os.environ.get("SPEEDO_DECLARATION", "")


def config_path(filename):
    """Return full path for a declaration file inside /config."""
    return os.path.join(CONFIG_DIR, filename)
