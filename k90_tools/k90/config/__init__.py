"""
K90 Profile Configuration

This package holds the payload limits and fixed field values of G-key
profiles, and the profile document reader/writer (gkey_profile).
"""

# Import constants only (no dependencies)
from .constants import (
                        DEFAULT_DELAY_MS,
                        DEFAULT_MACRO_NAME,
                        MACRO_MAX_CHARS,
                        MAX_DEFAULT_DELAY_MS,
                        MIN_DEFAULT_DELAY_MS,
)

__all__ = [
    "DEFAULT_DELAY_MS",
    "DEFAULT_MACRO_NAME",
    "MACRO_MAX_CHARS",
    "MAX_DEFAULT_DELAY_MS",
    "MIN_DEFAULT_DELAY_MS",
]
