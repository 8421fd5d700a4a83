# helper.py
import pygame

import config as cfg


def hex_to_rgb(value):
    """Convert '#RRGGBB' hex string or RGB tuple to (r, g, b)."""
    if isinstance(value, (tuple, list)) and len(value) == 3:
        return tuple(value)
    if isinstance(value, str):
        value = value.strip().lstrip('#')
        return tuple(int(value[i:i+2], 16) for i in (0, 2, 4))
    raise TypeError(f"Unsupported color format: {value!r}")


def palette_color(name: str, palette=None, default_hex: str = None) -> pygame.Color:
    """Resolve a palette name (e.g. 'Red') to a pygame.Color, with fallback."""
    palette = cfg.ANALOG_COLOR_HEX if palette is None else palette
    fallback = default_hex or getattr(cfg, "DEFAULT_ANALOG_COLOR", "#FFFFFF")
    return pygame.Color(*hex_to_rgb(palette.get(name, fallback)))


def clamp(val, lo, hi):
    """Clamp a numeric value between lo and hi."""
    return max(lo, min(hi, val))
