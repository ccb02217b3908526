import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Response
from fastapi.responses import ORJSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

from contracts.exporter_settings import ExporterSettings
from core.metrics_updater import MirrorMetricsUpdater
from core.mirror_metrics import MirrorMetrics
from core.mirror_prober import MirrorProber

logger = logging.getLogger(__name__)


def create_app(
    settings: ExporterSettings,
    metrics: Optional[MirrorMetrics] = None,
    client: Optional[httpx.AsyncClient] = None,
    run_updater: bool = True,
) -> FastAPI:
    """
    Build the exporter application.

    Args:
        settings (ExporterSettings): Validated exporter settings.
        metrics (Optional[MirrorMetrics]): Gauges to expose; a fresh registry
            is created when omitted.
        client (Optional[httpx.AsyncClient]): Client used for probes. A client
            created here is closed on shutdown; a supplied one is left open.
        run_updater (bool): Start the refresh loop with the application.

    Returns:
        FastAPI: Application serving /metrics and /healthz.
    """
    if metrics is None:
        metrics = MirrorMetrics(CollectorRegistry())
    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(
            timeout=settings.probe_timeout, follow_redirects=True
        )
    updater = MirrorMetricsUpdater(MirrorProber(client), metrics, settings)

    @asynccontextmanager
    async def lifespan(app):
        if run_updater:
            await updater.start()
        yield
        await updater.stop()
        if owns_client:
            await client.aclose()

    app = FastAPI(lifespan=lifespan, default_response_class=ORJSONResponse)
    app.state.metrics = metrics
    app.state.updater = updater

    @app.get("/metrics")
    def metrics_endpoint():
        return Response(
            generate_latest(metrics.registry), media_type=CONTENT_TYPE_LATEST
        )

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    return app
