from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from app.api.deps import get_searcher
from app.schemas import HealthResponse
from app.services.search import CatalogSearcher

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(searcher: CatalogSearcher = Depends(get_searcher)) -> HealthResponse:
    return HealthResponse(status="ok", timestamp=datetime.now(UTC), records=len(searcher))
