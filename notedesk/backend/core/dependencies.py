"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from notedesk.backend.core.database import get_db_session
from notedesk.backend.services.association import AssociationService
from notedesk.backend.services.category import CategoryService
from notedesk.backend.services.note import NoteService

DbSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_request_id(x_request_id: str | None = Header(None)) -> str:
    """Extract or generate request ID from headers."""
    return x_request_id or str(uuid.uuid4())


RequestId = Annotated[str, Depends(get_request_id)]


def get_category_service(db: DbSession) -> CategoryService:
    return CategoryService(db)


def get_note_service(db: DbSession) -> NoteService:
    return NoteService(db)


def get_association_service(db: DbSession) -> AssociationService:
    return AssociationService(db)


CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
NoteServiceDep = Annotated[NoteService, Depends(get_note_service)]
AssociationServiceDep = Annotated[AssociationService, Depends(get_association_service)]
