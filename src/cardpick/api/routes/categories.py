from fastapi import APIRouter, Depends, HTTPException

from cardpick.api.deps import get_catalog
from cardpick.domain.catalog import CategoryCatalog
from cardpick.schemas.responses import CategoryResponse

router = APIRouter(prefix="/api", tags=["categories"])


@router.get("/categories/{code}", response_model=CategoryResponse)
def lookup_category(code: str, catalog: CategoryCatalog = Depends(get_catalog)) -> CategoryResponse:
    info = catalog.lookup(code)
    if info is None:
        raise HTTPException(status_code=404, detail=f"Unknown category code: {code}")
    return CategoryResponse(code=code, **info.model_dump())
