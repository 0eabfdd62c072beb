import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from app.api.deps import get_app_settings
from app.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["autocomplete"])


@router.get("/autocomplete")
def autocomplete(settings: Settings = Depends(get_app_settings)) -> FileResponse:
    path = settings.autocomplete_path
    if not path.is_file():
        logger.warning("Autocomplete file not found: %s", path)
        raise HTTPException(status_code=404, detail="Autocomplete data is not available")
    return FileResponse(path, media_type="application/json")
