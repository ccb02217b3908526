import os

from pydantic import ValidationError

from contracts.exporter_settings import ExporterSettings
from core.errors import ConfigError


class Config:
    """
    Configuration class for environment variables and default settings.
    """

    MIRROR_FRESHNESS_URL = os.environ.get("MIRROR_FRESHNESS_URL", "")
    MIRROR_AVAILABILITY_URL = os.environ.get("MIRROR_AVAILABILITY_URL", "")
    # Comma-separated backend names, polled in this order
    BACKENDS = os.environ.get("BACKENDS", "")
    REFRESH_INTERVAL = os.environ.get("REFRESH_INTERVAL") or "4h"
    # Unset means no per-request timeout
    PROBE_TIMEOUT = os.environ.get("PROBE_TIMEOUT", "")

    METRICS_HOST = "0.0.0.0"
    METRICS_PORT = 9090


def load_settings(config=Config) -> ExporterSettings:
    """
    Validate the raw configuration values.

    Args:
        config: Object exposing the same attributes as Config.

    Returns:
        ExporterSettings: Parsed settings.

    Raises:
        ConfigError: If any value is missing or invalid.
    """
    try:
        return ExporterSettings(
            mirror_freshness_url=config.MIRROR_FRESHNESS_URL,
            mirror_availability_url=config.MIRROR_AVAILABILITY_URL,
            backends=config.BACKENDS,
            refresh_interval=config.REFRESH_INTERVAL,
            probe_timeout=config.PROBE_TIMEOUT,
            metrics_host=config.METRICS_HOST,
            metrics_port=config.METRICS_PORT,
        )
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e
