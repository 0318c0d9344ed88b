from pydantic import BaseModel

from cardpick.domain.models import CategoryInfo


class HealthResponse(BaseModel):
    status: str
    version: str


class CategoryResponse(CategoryInfo):
    code: str
