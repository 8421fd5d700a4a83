# showlog.py: log lines with timestamps, levels, auto-tag, short INFO tag
import os, sys, datetime, traceback
from typing import Optional

import config as cfg

# ---------- state ----------
lastmsg = ""      # last full canonical log line written (with [LEVEL module])
_module_cache = {}

# Short tags (INFO lines only)
SHORT_TAGS = {
    "slot_table": "SLOTS",
    "preferences": "PREFS",
    "declaration": "DECL",
    "loader": "LOAD",
    "__main__": "MAIN",
}


def _log_file() -> str:
    return getattr(cfg, "LOG_FILE", os.path.join(os.path.dirname(__file__), "speedo_log.txt"))


# --- Numeric verbosity: 0=ERROR, 1=WARN, 2=INFO (default) ---
def _allow_level(level_name: str) -> bool:
    """Filter by numeric LOG_LEVEL (0=error,1=warn,2=info)."""
    try:
        log_level = int(getattr(cfg, "LOG_LEVEL", 2))
    except (TypeError, ValueError):
        log_level = 2

    lvl = (level_name or "INFO").upper()
    if lvl == "ERROR":
        return log_level >= 0
    elif lvl == "WARN":
        return log_level >= 1
    elif lvl == "INFO":
        return log_level >= 2
    elif lvl == "DEBUG":
        return bool(getattr(cfg, "DEBUG_LOG", False))
    elif lvl == "VERBOSE":
        return bool(getattr(cfg, "VERBOSE_LOG", False))
    else:
        # treat unknown/custom tags as INFO
        return log_level >= 2


# ---------- helpers ----------
def _timestamp() -> str:
    return datetime.datetime.now().strftime("%H:%M:%S")


def _caller_module() -> str:
    frame = sys._getframe(1)
    while frame:
        filename = frame.f_code.co_filename
        # stop when we're outside showlog.py
        if os.path.basename(filename) != "showlog.py":
            return os.path.splitext(os.path.basename(filename))[0] or "main"
        frame = frame.f_back
    return "main"


def _short_tag(name: str) -> str:
    if not name: return "GEN"
    key = name.lower()
    if key not in _module_cache:
        _module_cache[key] = SHORT_TAGS.get(key, key[:5].upper())
    return _module_cache[key]


def _write(level: str, message: str):
    """Format one line and write it to the log file (and stdout if enabled)."""
    global lastmsg
    if getattr(cfg, "LOG_OFF", False):
        return
    if not _allow_level(level):
        return

    module = _caller_module()
    tag = module if level != "INFO" else _short_tag(module)
    canonical = f"[{level} {tag}] {message}"
    lastmsg = canonical

    emoji_map = {"INFO": "🟢", "WARN": "🟠", "ERROR": "🔴", "DEBUG": "⚫", "VERBOSE": "⚪"}
    emoji = emoji_map.get(level, "🟢")

    if bool(getattr(cfg, "SHOW_LOG_TYPE_AS_TEXT", True)):
        line = f"[{_timestamp()}] {emoji} {canonical}"
    else:
        line = f"[{_timestamp()}] {emoji} {message}"

    try:
        path = _log_file()
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError as e:
        print(f"[showlog] write failed: {e}", file=sys.stderr)

    if getattr(cfg, "LOG_TO_STDOUT", False):
        print(line)


def last():
    """Return the last canonical line that passed the level filter."""
    return lastmsg


# --- helper: format traceback safely ---
def _format_exc_str(exc: Optional[BaseException] = None) -> str:
    """
    Return a full traceback string for the current exception context or a given exception.
    Safe to call even if no exception is active (returns empty string).
    """
    if exc is not None:
        return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    exc_type, exc_val, exc_tb = sys.exc_info()
    if exc_val is None:
        return ""
    return "".join(traceback.format_exception(exc_type, exc_val, exc_tb))


def error(msg: Optional[str] = None, exc: Optional[BaseException] = None):
    """
    Log an ERROR. If called inside an exception handler (or with exc=),
    append the full traceback to the message.
    """
    tb = _format_exc_str(exc)
    full = msg if msg else ""
    if tb:
        full = (full + ("\n" if full else "") + tb).rstrip()
    _write("ERROR", full)


def debug(message):
    """Extra-detailed debug messages."""
    _write("DEBUG", message)


def info(message):
    _write("INFO", message)


def warn(message):
    _write("WARN", message)


def verbose(message):
    _write("VERBOSE", message)


# Flush anything config queued before the logger existed
_notify = getattr(cfg, "_notify_showlog_ready", None)
if callable(_notify):
    _notify()
