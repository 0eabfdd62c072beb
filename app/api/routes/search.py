from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import get_searcher
from app.schemas import Record
from app.services.search import CatalogSearcher

router = APIRouter(tags=["search"])

EMPTY_TERM_DETAIL = "Well, Maybe You can search thing here"


@router.get("/search", response_model=list[Record])
def search(
    terms: list[str] = Query(default=[], alias="term"),
    searcher: CatalogSearcher = Depends(get_searcher),
) -> list[Record]:
    # first occurrence wins for repeated ?term=
    term = terms[0] if terms else ""
    if not term:
        raise HTTPException(status_code=400, detail=EMPTY_TERM_DETAIL)
    return searcher.search(term)
