"""
api package - Exposes the Nexus Mods API client.
"""

from .client import ConfigurationError, NexusAPIClient

__all__ = ["NexusAPIClient", "ConfigurationError"]
