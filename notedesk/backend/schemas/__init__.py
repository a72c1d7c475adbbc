# Pydantic schemas package
from notedesk.backend.schemas.base import (
    ApiResponse,
    ErrorDetail,
    ErrorResponse,
    ResponseMetadata,
)
from notedesk.backend.schemas.category import (
    CategoryCreate,
    CategoryRename,
    CategoryResponse,
)
from notedesk.backend.schemas.note import (
    NoteCategoriesUpdate,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
)

__all__ = [
    "ApiResponse",
    "CategoryCreate",
    "CategoryRename",
    "CategoryResponse",
    "ErrorDetail",
    "ErrorResponse",
    "NoteCategoriesUpdate",
    "NoteCreate",
    "NoteResponse",
    "NoteUpdate",
    "ResponseMetadata",
]
