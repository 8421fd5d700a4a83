"""
Visual Styling Configuration
Palette values the renderer resolves preference colors against.
"""

# ================== ANALOG SPEEDOMETER ==================

# analogColor name -> needle/ring color
ANALOG_COLOR_HEX = {
    "Red":    "#FF0000",
    "Blue":   "#0050FF",
    "Green":  "#00C040",
    "Yellow": "#FFD700",
    "Pink":   "#FF69B4",
    "Orange": "#FF8000",
    "Purple": "#8A2BE2",
    "Silver": "#C0C0C0",
}

# Fallback when a palette entry is missing
DEFAULT_ANALOG_COLOR = "#FFFFFF"

# ================== BAR SPEEDOMETER ==================

BAR_THEME_MIN = 0
BAR_THEME_MAX = 5  # 0 is default white
