"""
Commands package - Exports all command groups
"""

from . import games, mods, utils

__all__ = ["games", "mods", "utils"]
