"""Run the CookieCloud → KaraKeep cookie synchronization, once or on a timer."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Set

import httpx

from cookiesync.clients import CookieCloudClient
from cookiesync.core.config import AppSettings
from cookiesync.core.errors import ConfigError, CookieSyncError
from cookiesync.schemas import SyncResult
from cookiesync.services import convert_to_karakeep_format, save_cookies_to_file

logger = logging.getLogger(__name__)


class CookieSyncService:
    """Fetch, convert and save cookies using explicitly supplied settings."""

    def __init__(
        self,
        *,
        settings: AppSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    def _build_client(self) -> CookieCloudClient:
        cloud = self._settings.cookie_cloud
        missing = cloud.missing_fields()
        if missing:
            raise ConfigError(missing)

        logger.info("Cookie Cloud Host: %s", cloud.host)
        logger.info("Cookie Cloud UUID: %s", cloud.uuid)
        return CookieCloudClient(
            host=cloud.host,
            uuid=cloud.uuid,
            password=cloud.password,
            timeout=cloud.timeout_seconds,
            transport=self._transport,
        )

    async def run_once(self) -> SyncResult:
        """Run the pipeline a single time, raising on the first failure."""
        logger.info("Starting cookie synchronization...")
        client = self._build_client()

        cloud_cookies = await client.fetch_cookies()
        if not cloud_cookies:
            logger.info("No cookies found in Cookie Cloud")
            return SyncResult(status="empty")

        logger.info("Converting cookies to KaraKeep format...")
        karakeep_cookies = convert_to_karakeep_format(cloud_cookies)

        output_path = await asyncio.to_thread(
            save_cookies_to_file, karakeep_cookies, self._settings.output_path
        )
        logger.info("Cookie synchronization completed successfully!")
        return SyncResult(
            status="synced",
            cookie_count=len(karakeep_cookies),
            output_path=output_path,
        )

    async def _run_reporting_errors(self) -> Optional[SyncResult]:
        try:
            return await self.run_once()
        except CookieSyncError as exc:
            logger.error("Cookie synchronization failed: %s", exc)
        except Exception:  # pylint: disable=broad-except
            logger.exception("Cookie synchronization failed unexpectedly")
        return None

    async def run_periodic(
        self, *, interval_seconds: float, max_runs: Optional[int] = None
    ) -> None:
        """Run immediately, then start a new run every ``interval_seconds``.

        Runs are launched as independent tasks, so a run that outlasts the
        interval overlaps with the next one. Failures are logged and never stop
        the loop. ``max_runs`` bounds the number of runs; the call then waits
        for any run still in flight.
        """
        logger.info(
            "Setting up periodic sync every %g minutes...", interval_seconds / 60
        )
        pending: Set[asyncio.Task] = set()

        def launch() -> None:
            task = asyncio.create_task(self._run_reporting_errors())
            pending.add(task)
            task.add_done_callback(pending.discard)

        launch()
        launched = 1
        try:
            while max_runs is None or launched < max_runs:
                await asyncio.sleep(interval_seconds)
                logger.info("--- Periodic Sync ---")
                launch()
                launched += 1
            if pending:
                await asyncio.gather(*pending)
        finally:
            for task in pending:
                task.cancel()


__all__ = ["CookieSyncService"]
