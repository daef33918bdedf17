"""
Health Service

Builds the service-info, health and readiness reports. Reports are created
fresh on every request and stamped with the current UTC time.
"""

from datetime import datetime, timezone
from typing import Callable

from shortener.api.schemas import HealthResponse, ServiceInfo
from shortener.core.setting import Settings


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class HealthService:
    """Service for the liveness and readiness probes."""

    def __init__(self, settings: Settings, now: Callable[[], datetime] = utc_now):
        self.settings = settings
        self.now = now

    def service_info(self) -> ServiceInfo:
        return ServiceInfo(
            service=self.settings.SERVICE_NAME,
            version=self.settings.VERSION,
            environment=self.settings.ENVIRONMENT,
        )

    def _report(self, status: str) -> HealthResponse:
        return HealthResponse(
            status=status,
            environment=self.settings.ENVIRONMENT,
            version=self.settings.VERSION,
            timestamp=self.now(),
        )

    def health(self) -> HealthResponse:
        """Liveness: the process is up and serving requests."""
        return self._report("healthy")

    def readiness(self) -> HealthResponse:
        """
        Readiness: the instance can accept traffic.

        Future Enhancement:
        - Check downstream dependencies once the service has any
        """
        return self._report("ready")
