"""
forecast_net module: render/colors.py

Central color palette.
"""

BG = (14, 14, 18)
PANEL = (28, 30, 38)
TEXT = (235, 235, 235)
MUTED = (140, 140, 150)

CONN_IDLE = (60, 60, 70)
CONN_POS = (80, 200, 140)
CONN_NEG = (220, 90, 90)

INPUT = (80, 120, 230)
HIDDEN = (160, 100, 230)
OUTPUT = (80, 210, 140)
IDLE = (50, 50, 60)

BAR_BG = (55, 58, 68)
BARS = (
    (200, 90, 200),
    (80, 170, 230),
    (80, 200, 160),
    (230, 170, 70),
)
