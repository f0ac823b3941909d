"""HTTP client for the state endpoint with offline fallback and debounced saves."""

import asyncio
import logging
from typing import Any

import httpx

from shopping_assistant.config import get_settings

logger = logging.getLogger(__name__)


class StateClient:
    """Load and save shopping list state through the persistence API.

    Loading falls back to empty state when the API is unreachable, and
    marks the backend offline so that later saves are skipped. Save
    failures are logged and dropped; the in-memory session stays
    authoritative.
    """

    def __init__(
        self,
        user_id: str | None = None,
        base_url: str | None = None,
        debounce_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = get_settings()
        self.user_id = user_id or self.settings.default_user_id
        self.base_url = (base_url or self.settings.api_base_url).rstrip("/")
        self.debounce_seconds = (
            self.settings.save_debounce_seconds if debounce_seconds is None else debounce_seconds
        )
        self.timeout = self.settings.request_timeout_seconds
        self._transport = transport
        self._pending_save: asyncio.Task | None = None
        self.backend_online: bool | None = None

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        )

    async def load(self) -> dict[str, Any]:
        """Fetch stored state; returns empty defaults if the API is unavailable."""
        try:
            async with self._client() as client:
                response = await client.get("/api/state", params={"userId": self.user_id})
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Could not load state, continuing offline: {e}")
            self.backend_online = False
            return {"items": [], "history": []}

        self.backend_online = True
        if not isinstance(data, dict):
            data = {}
        return {
            "items": data["items"] if isinstance(data.get("items"), list) else [],
            "history": data["history"] if isinstance(data.get("history"), list) else [],
        }

    async def save(self, state: dict[str, Any]) -> bool:
        """Post state immediately. Returns False on any failure."""
        try:
            async with self._client() as client:
                response = await client.post(
                    "/api/state", params={"userId": self.user_id}, json=state
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"Failed to save state for user '{self.user_id}': {e}")
            return False

        logger.debug(f"Saved state for user '{self.user_id}'")
        return True

    def schedule_save(self, state: dict[str, Any]) -> asyncio.Task | None:
        """Save after the debounce delay, replacing any save still waiting.

        Does nothing while the backend is not known to be online, or when
        there is no running event loop to schedule on.
        """
        if self.backend_online is not True:
            return None

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(f"No running event loop, skipping save for user '{self.user_id}'")
            return None

        self.cancel_pending()
        self._pending_save = loop.create_task(self._save_later(state))
        return self._pending_save

    def cancel_pending(self) -> None:
        if self._pending_save and not self._pending_save.done():
            self._pending_save.cancel()
        self._pending_save = None

    async def flush(self) -> None:
        """Wait for a scheduled save to finish, if there is one."""
        if self._pending_save is None:
            return
        try:
            await self._pending_save
        except asyncio.CancelledError:
            pass

    async def _save_later(self, state: dict[str, Any]) -> None:
        await asyncio.sleep(self.debounce_seconds)
        await self.save(state)
