from fastapi import Request

from app.config import Settings
from app.services.search import CatalogSearcher


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_searcher(request: Request) -> CatalogSearcher:
    return request.app.state.searcher
