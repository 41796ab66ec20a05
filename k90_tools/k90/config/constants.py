"""
Shared constants for K90 macro profiles

These constants match the values the G-key profile loader expects.
"""

# Payload size limits
MACRO_MAX_UNITS = 1360  # Opcodes the MacroInfo field holds
OPCODE_HEX_WIDTH = 6  # 3 bytes per opcode, 2 hex digits per byte
MACRO_MAX_CHARS = MACRO_MAX_UNITS * OPCODE_HEX_WIDTH
PAD_UNIT = "000000"

# Timing
DEFAULT_DELAY_MS = 15
MIN_DEFAULT_DELAY_MS = 1
MAX_DEFAULT_DELAY_MS = 999
MAX_DURATION_MS = 0xFFFF

DEFAULT_MACRO_NAME = "NewMacro"

# Fixed G-key profile fields
PROFILE_ROOT = "GKEYINFO"
PROFILE_INFO = "LaverGKey"
PROFILE_LOOP_TYPE = "0"
PROFILE_BUTTON_FUNCTION = "48"
PROFILE_BUTTON_ID = "1"
PROFILE_DELAY_TYPE = "2"
PROFILE_LAUNCH_PATH = ""
PROFILE_LOOP_NUMBER = "1"
PROFILE_RANDOM_DELAY_TIME = "1000"
