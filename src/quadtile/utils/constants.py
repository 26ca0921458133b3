BASE = 2  # tiles per axis double with each zoom level
QUADKEY_DIGITS = "0123"
MAX_ZOOM_LEVEL = 30  # maximum zoom level
MIN_ZOOM_LEVEL = 0  # minimum zoom level
