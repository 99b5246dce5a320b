"""Constants and limits for transferlut."""

# --- LUT resolution ---
LUT_SIZE = 256  # Fixed 8-bit 1D LUT resolution

# --- 8-bit video range levels, normalized ---
LEVEL_16_8BIT = 16.0 / 255.0  # Limited range black
LEVEL_219_8BIT = 219.0 / 255.0  # Limited range span
LEVEL_235_8BIT = 235.0 / 255.0  # Limited range white

# --- Output ---
DEFAULT_OUTPUT_DIR = "output"
MAX_CUBE_FILE_LINES = LUT_SIZE + 200  # Safety limit for .cube parsing
