import logging
from typing import Optional

from prometheus_client import CollectorRegistry, Gauge

logger = logging.getLogger(__name__)

LAST_UPDATED_METRIC = "govuk_mirror_last_updated_time"
RESPONSE_STATUS_METRIC = "govuk_mirror_response_status_code"


class MirrorMetrics:
    """
    Gauges published for scraping, one series per backend.

    A series only exists once a backend has produced a sample, and it keeps
    its last value when later probes fail.
    """

    def __init__(self, registry: CollectorRegistry):
        """
        Create both gauges on the given registry.

        Args:
            registry (CollectorRegistry): Registry the gauges are exposed from.
        """
        self.registry = registry
        self.LAST_UPDATED = Gauge(
            LAST_UPDATED_METRIC,
            "Last time the mirror was updated",
            ["backend"],
            registry=registry,
        )
        self.RESPONSE_STATUS = Gauge(
            RESPONSE_STATUS_METRIC,
            "Response status code for the MIRROR_AVAILABILITY_URL probe",
            ["backend"],
            registry=registry,
        )
        logger.info("MirrorMetrics initialized.")

    def set_freshness(self, backend: str, seconds: float):
        self.LAST_UPDATED.labels(backend=backend).set(seconds)

    def set_availability(self, backend: str, status_code: int):
        self.RESPONSE_STATUS.labels(backend=backend).set(float(status_code))

    def last_updated(self, backend: str) -> Optional[float]:
        return self.registry.get_sample_value(
            LAST_UPDATED_METRIC, {"backend": backend}
        )

    def response_status(self, backend: str) -> Optional[float]:
        return self.registry.get_sample_value(
            RESPONSE_STATUS_METRIC, {"backend": backend}
        )

    def series_count(self, metric_name: str) -> int:
        """
        Count the labelled series currently held for one metric.

        Args:
            metric_name (str): LAST_UPDATED_METRIC or RESPONSE_STATUS_METRIC.

        Returns:
            int: Number of backends with a sample for that metric.
        """
        count = 0
        for family in self.registry.collect():
            if family.name == metric_name:
                count += len(family.samples)
        return count
