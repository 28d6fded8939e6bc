"""
api/client.py - Async client for the Nexus Mods public API (v1)
"""

from __future__ import annotations

import asyncio
import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

import aiohttp
from pydantic import ValidationError
from yarl import URL

from nexus_cli.core.config import Settings

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    pass


class NexusAPIClient:
    """
    Singleton client bound to one base URL and API key.

    The first successful construction configures the process-wide instance.
    Later constructions still validate their base URL but return that same
    instance, whatever configuration they were given.
    """

    _instance: Optional["NexusAPIClient"] = None

    ENDPOINTS: Mapping[str, str | Callable[[Any, Any], str]] = MappingProxyType(
        {
            "validate_user": "/users/validate.json",
            "games": "/games.json",
            "unapproved_games": "/games.json?include_unapproved=true",
            "mod": lambda game_id, mod_id: f"/games/{game_id}/mods/{mod_id}.json",
        }
    )

    def __new__(
        cls,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "NexusAPIClient":
        if api_key is None or base_url is None or timeout is None:
            try:
                settings = Settings()
            except ValidationError as e:
                raise ConfigurationError(f"Invalid configuration in environment: {e}") from e
            api_key = settings.api_key if api_key is None else api_key
            base_url = settings.base_url if base_url is None else base_url
            timeout = settings.timeout_seconds if timeout is None else timeout

        cls._validate_configuration(base_url)

        if cls._instance is not None:
            if base_url != cls._instance.base_url:
                logger.debug("Client already configured for %s, ignoring %s", cls._instance.base_url, base_url)
            return cls._instance

        instance = super().__new__(cls)
        instance._configure(api_key, base_url, timeout)
        cls._instance = instance
        return instance

    @staticmethod
    def _validate_configuration(base_url: Optional[str]) -> None:
        # The API key is not checked here; `nexus-cli doctor` reports a missing one.
        if not base_url:
            raise ConfigurationError("Missing required configuration: NEXUS_API_BASE_URL")

    def _configure(self, api_key: str, base_url: str, timeout: Optional[float]) -> None:
        self._defaults: Mapping[str, Any] = MappingProxyType(
            {
                "base_url": base_url,
                "headers": MappingProxyType({"accept": "application/json", "apikey": api_key}),
                "timeout": timeout,
            }
        )

    @property
    def defaults(self) -> Mapping[str, Any]:
        return self._defaults

    @property
    def base_url(self) -> str:
        return self._defaults["base_url"]

    # === Requests ===

    def _new_session(self) -> aiohttp.ClientSession:
        """Open a session in the running loop with the configured headers and timeout."""
        return aiohttp.ClientSession(
            headers=dict(self._defaults["headers"]),
            timeout=aiohttp.ClientTimeout(total=self._defaults["timeout"]),
            raise_for_status=True,
        )

    def _safe_config(self) -> dict[str, Any]:
        headers = dict(self._defaults["headers"])
        if headers.get("apikey"):
            headers["apikey"] = "***"
        return {**self._defaults, "headers": headers}

    async def _get(self, endpoint: str) -> Any:
        full_url = f"{self.base_url}{endpoint}"
        logger.debug(
            "Making request: %s",
            {
                "endpoint": endpoint,
                "client_exists": self._defaults is not None,
                "full_url": full_url,
            },
        )

        try:
            async with self._new_session() as session:
                async with session.get(URL(full_url, encoded=True)) as response:
                    return await response.json()
        # ValueError covers a 2xx body that is not valid JSON
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(
                "Request error: %s",
                {
                    "message": str(e),
                    "code": getattr(e, "status", None) or getattr(e, "errno", None),
                    "endpoint": endpoint,
                    "config": self._safe_config(),
                },
            )
            raise

    # === Endpoints ===

    async def validate_user(self) -> Any:
        """Return the account that owns the configured API key."""
        return await self._get(self.ENDPOINTS["validate_user"])

    async def get_supported_games(self) -> Any:
        return await self._get(self.ENDPOINTS["games"])

    async def get_unsupported_games(self) -> Any:
        """Return the full catalogue, unapproved games included."""
        return await self._get(self.ENDPOINTS["unapproved_games"])

    async def get_mod_data(self, game_id: Any, mod_id: Any) -> Any:
        """
        Fetch metadata for one mod.

        Identifiers are formatted into the path as is, without escaping.
        An unknown game or mod surfaces as aiohttp.ClientResponseError (404).
        """
        return await self._get(self.ENDPOINTS["mod"](game_id, mod_id))
