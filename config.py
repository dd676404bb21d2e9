"""
Network and viewer tuning knobs.
"""

# Feature order (inputs to the network)
FEATURE_NAMES = ("Temperature", "Humidity", "Wind Speed", "Solar Radiation")

# Normalization: (raw + offset) / scale
TEMPERATURE_OFFSET = 20.0   # -20..40 °C
TEMPERATURE_SCALE = 60.0
HUMIDITY_SCALE = 100.0      # 0..100 %
WIND_SPEED_SCALE = 30.0     # 0..30 m/s
SOLAR_RADIATION_SCALE = 1000.0  # 0..1000 W/m²

# Built-in weights (4-4-1)
INPUT_TO_HIDDEN = (
    (0.8, -0.5, 0.3, 0.7),
    (0.4, 0.9, -0.3, 0.2),
    (-0.6, 0.7, 0.5, -0.8),
    (0.2, -0.4, 0.8, 0.6),
)
HIDDEN_TO_OUTPUT = (0.7, -0.3, 0.4, 0.9)
HIDDEN_BIAS = (0.1, -0.2, 0.3, -0.1)
OUTPUT_BIAS = 0.2

# Logging
LOG_LEVEL = "INFO"
JSON_LOGS = False

# Viewer
SCREEN_W, SCREEN_H = 1100, 680
FPS = 60
STEP_REVEAL_SECONDS = 1.2  # delay between revealed propagation steps
DEFAULT_PRESET = "Perfect Conditions"
