import os

# ------------------------------- #
#       Transformation profile    #
# ------------------------------- #
OUTPUT_WIDTH        = 1920
ASPECT_RATIO        = 16 / 9
JPEG_QUALITY        = 80

# Same adjustment for every resize option
COLOR_ADJUSTMENTS = {
    "saturation": 1.5,   # +50%
    "brightness": 1.1,   # +10%
    "hue": 10,           # degrees
}

# Percent of darkest/lightest pixels ignored when stretching levels
NORMALIZE_CUTOFF    = 1

# ------------------------------- #
#         Environment             #
# ------------------------------- #
PORT                = int(os.environ.get("PORT", 3000))
FETCH_TIMEOUT       = float(os.environ.get("FETCH_TIMEOUT", 30))
LOG_LEVEL           = os.environ.get("LOG_LEVEL", "INFO").upper()
