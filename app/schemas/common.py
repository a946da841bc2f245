"""
Response envelopes shared by every router.

Route handlers return plain dicts built by `success_response` /
`paginated_response`; the models below document those shapes in OpenAPI.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class PageMeta(BaseModel):
    page:       int
    limit:      int
    total:      int = Field(description="Rows matching the filters, across all pages")
    totalPages: int
    hasNext:    bool
    hasPrev:    bool


class SuccessResponse(BaseModel):
    success: bool = True
    message: str
    data:    Any = None


class PaginatedResponse(BaseModel):
    success: bool = True
    message: str
    data:    list[Any]
    meta:    PageMeta


class FieldError(BaseModel):
    field:   str
    message: str


class ErrorInfo(BaseModel):
    code:    str = Field(description="Machine-readable code, e.g. BOOKING_CONFLICT")
    details: Optional[list[FieldError]] = None
    field:   Optional[str] = None


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error:   ErrorInfo


def success_response(message: str, data: Any = None) -> dict:
    return {"success": True, "message": message, "data": data}


def page_meta(total: int, page: int, limit: int) -> dict:
    total_pages = -(-total // limit) if limit else 0
    return {
        "page":       page,
        "limit":      limit,
        "total":      total,
        "totalPages": total_pages,
        "hasNext":    page < total_pages,
        "hasPrev":    page > 1,
    }


def paginated_response(message: str, data: list, total: int, page: int, limit: int) -> dict:
    return {"success": True, "message": message, "data": data, "meta": page_meta(total, page, limit)}
