from .config import Settings
from .models import Game, GameList, Mod, ModAuthor, ValidatedUser
from .utils import setup_crash_logging, setup_verbose_logging

__all__ = [
    "Settings",
    "Game",
    "GameList",
    "Mod",
    "ModAuthor",
    "ValidatedUser",
    "setup_crash_logging",
    "setup_verbose_logging",
]
