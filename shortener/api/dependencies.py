"""
FastAPI dependencies.

Settings are attached to the application by create_app() and reach the
handlers only through these providers.
"""

from fastapi import Depends, Request

from shortener.core.setting import Settings
from shortener.services.health_service import HealthService
from shortener.services.redirect_service import RedirectService
from shortener.services.url_service import URLShorteningService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_url_service(settings: Settings = Depends(get_settings)) -> URLShorteningService:
    return URLShorteningService(settings)


def get_redirect_service() -> RedirectService:
    return RedirectService()


def get_health_service(settings: Settings = Depends(get_settings)) -> HealthService:
    return HealthService(settings)
