from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class PageMeta(BaseModel):
    total: int
    page: int
    limit: int
    totalPages: int


class ApiResponse(BaseModel, Generic[T]):
    """Uniform response envelope shared by every endpoint."""

    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None
    meta: Optional[PageMeta] = None
