import asyncio
import logging
from typing import Optional

from contracts.exporter_settings import ExporterSettings
from core.errors import ProbeError
from core.mirror_metrics import (
    LAST_UPDATED_METRIC,
    RESPONSE_STATUS_METRIC,
    MirrorMetrics,
)
from core.mirror_prober import MirrorProber
from core.profiler import Profiler

logger = logging.getLogger(__name__)


class MirrorMetricsUpdater:
    """
    Background loop that polls every configured backend and writes the
    results into the mirror gauges.
    """

    def __init__(
        self,
        prober: MirrorProber,
        metrics: MirrorMetrics,
        settings: ExporterSettings,
    ):
        """
        Initialize the MirrorMetricsUpdater.

        Args:
            prober (MirrorProber): Issues the freshness and availability probes.
            metrics (MirrorMetrics): Gauges that receive successful samples.
            settings (ExporterSettings): URLs, backends and refresh interval.
        """
        self.prober = prober
        self.metrics = metrics
        self.settings = settings
        self._task: Optional[asyncio.Task] = None
        self._stopped: Optional[asyncio.Event] = None
        self._running = False
        logger.info(
            f"MirrorMetricsUpdater initialized for backends {settings.backends} "
            f"every {settings.refresh_interval}s"
        )

    async def update_last_updated(self, backend: str) -> bool:
        """
        Probe freshness for one backend and set its gauge.

        Returns:
            bool: True if the gauge was updated, False if the probe failed.
        """
        try:
            seconds = await self.prober.fetch_freshness(
                backend, self.settings.mirror_freshness_url
            )
        except ProbeError as e:
            self._log_failure(LAST_UPDATED_METRIC, e)
            return False
        self.metrics.set_freshness(backend, seconds)
        return True

    async def update_response_status(self, backend: str) -> bool:
        """
        Probe availability for one backend and set its gauge.

        Returns:
            bool: True if the gauge was updated, False if the probe failed.
        """
        try:
            status_code = await self.prober.fetch_availability(
                backend, self.settings.mirror_availability_url
            )
        except ProbeError as e:
            self._log_failure(RESPONSE_STATUS_METRIC, e)
            return False
        self.metrics.set_availability(backend, status_code)
        return True

    @Profiler.profile
    async def refresh(self):
        """
        Run one polling cycle over all backends, in configured order.
        """
        updated = 0
        for backend in self.settings.backends:
            if await self.update_last_updated(backend):
                updated += 1
            if await self.update_response_status(backend):
                updated += 1
        logger.info(
            f"Refreshed mirror metrics: {updated}/{2 * len(self.settings.backends)} probes succeeded"
        )

    async def run(self):
        """
        Refresh, then wait for the refresh interval, until stopped.
        """
        if self._stopped is None:
            self._stopped = asyncio.Event()
        self._running = True
        while self._running:
            try:
                await self.refresh()
            except Exception:
                logger.exception("Unexpected error during metrics refresh")
            try:
                await asyncio.wait_for(
                    self._stopped.wait(), timeout=self.settings.refresh_interval
                )
            except asyncio.TimeoutError:
                continue
        logger.info("Metrics refresh loop exited.")

    async def start(self):
        """
        Start the refresh loop as an asynchronous task.
        """
        if self._task and not self._task.done():
            logger.warning("Metrics refresh loop already running.")
            return
        self._stopped = asyncio.Event()
        self._task = asyncio.create_task(self.run())
        logger.info("Metrics refresh loop started.")

    async def stop(self):
        """
        Stop the refresh loop, cancelling any probe still in progress.
        """
        self._running = False
        if self._stopped is not None:
            self._stopped.set()
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("Metrics refresh loop stopped.")

    def _log_failure(self, metric: str, error: ProbeError):
        logger.error(
            f"Error updating metrics: metric={metric} backend={error.backend} "
            f"kind={error.kind.value} error={error}"
        )
