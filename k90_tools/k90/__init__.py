"""
K90 macro tools

Compiles MacroScript files into G-key macro profiles for the K90 keyboard.
"""

__version__ = "1.0.0"
