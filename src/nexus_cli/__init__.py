"""
nexus_cli - A small async client and CLI for the Nexus Mods public API.
"""

from nexus_cli.__version__ import __author__, __version__

__all__ = ["__version__", "__author__"]
