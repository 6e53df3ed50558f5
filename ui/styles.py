"""
Styling constants and theme configuration for the replay UI.
"""

# =============================================================================
# Color Palette
# =============================================================================

# Dark theme colors
BG_COLOR = "#111111"          # Main background
BG_COLOR_LIGHT = "#181818"    # Lighter background (canvas)
TEXT_COLOR = "#EEEEEE"        # Main text
BORDER_COLOR = "#555555"      # Borders

ACCENT_BLUE = "#6FA8FF"       # START button
ACCENT_RED = "#FF6B6B"        # STOP button

# Unlit LED
LED_OFF_COLOR = "#000000"
LED_EDGE_COLOR = "#2A2A2A"

# =============================================================================
# Car Colors (index-aligned with the loaded tracks)
# =============================================================================

CAR_COLORS = [
    "#FF0000",  # Red
    "#00FF00",  # Green
    "#0000FF",  # Blue
    "#FFFF00",  # Yellow
    "#FF00FF",  # Magenta
    "#00FFFF",  # Cyan
    "#800000",  # Maroon
    "#008000",  # Dark Green
    "#000080",  # Navy
    "#808000",  # Olive
    "#800080",  # Purple
    "#800080",  # Purple
    "#008080",  # Teal
    "#C0C0C0",  # Silver
    "#808080",  # Gray
    "#FFA500",  # Orange
    "#FF1493",  # Deep Pink
    "#4B0082",  # Indigo
    "#FFD700",  # Gold
    "#00BFFF",  # Deep Sky Blue
    "#FF69B4",  # Hot Pink
]

# =============================================================================
# PyQt5 Stylesheet
# =============================================================================

DARK_STYLESHEET = f"""
    QMainWindow {{
        background-color: {BG_COLOR};
        color: {TEXT_COLOR};
    }}
    QLabel {{
        color: {TEXT_COLOR};
        font-size: 11pt;
        font-family: monospace;
    }}
    QPushButton {{
        background-color: {ACCENT_BLUE};
        color: #FFFFFF;
        border: none;
        border-radius: 4px;
        padding: 6px 12px;
        font-weight: bold;
    }}
    QPushButton:hover {{
        background-color: #5A98EF;
    }}
    QPushButton:pressed {{
        background-color: #4A88DF;
    }}
    QPushButton#stopButton {{
        background-color: {ACCENT_RED};
    }}
    QFrame#topPanel {{
        border-bottom: 1px solid {BORDER_COLOR};
    }}
"""
