"""
Notes API Endpoints.

REST API endpoints for note management.
"""

from fastapi import APIRouter, Query

from notedesk.backend.core.dependencies import (
    AssociationServiceDep,
    NoteServiceDep,
    RequestId,
)
from notedesk.backend.models.note import Note
from notedesk.backend.schemas.base import ApiResponse, ResponseMetadata
from notedesk.backend.schemas.note import (
    NoteCategoriesUpdate,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
)

router = APIRouter()


def _respond(note: Note, request_id: str) -> ApiResponse[NoteResponse]:
    return ApiResponse(
        data=NoteResponse.model_validate(note),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.post(
    "",
    response_model=ApiResponse[NoteResponse],
    status_code=201,
    summary="Create a note",
)
async def create_note(
    data: NoteCreate,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Create a new note."""
    note = await service.create_note(data)
    return _respond(note, request_id)


@router.get(
    "",
    response_model=ApiResponse[list[NoteResponse]],
    summary="List notes",
    description="List notes newest first, optionally filtered by archive flag and category.",
)
async def list_notes(
    service: NoteServiceDep,
    request_id: RequestId,
    archived: bool | None = Query(
        default=None,
        description="Only notes with this archive flag",
    ),
    category_id: int | None = Query(
        default=None,
        alias="categoryId",
        description="Only notes tagged with this category",
    ),
) -> ApiResponse[list[NoteResponse]]:
    """List notes."""
    notes = await service.list_notes(archived=archived, category_id=category_id)
    return ApiResponse(
        data=[NoteResponse.model_validate(note) for note in notes],
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/{note_id}",
    response_model=ApiResponse[NoteResponse],
    summary="Get a note",
)
async def get_note(
    note_id: int,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Get a note by ID."""
    note = await service.get_note(note_id)
    return _respond(note, request_id)


@router.put(
    "/{note_id}",
    response_model=ApiResponse[NoteResponse],
    summary="Update a note",
    description="Update an existing note. Only provided fields are updated.",
)
async def update_note(
    note_id: int,
    data: NoteUpdate,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Update a note."""
    note = await service.update_note(note_id, data)
    return _respond(note, request_id)


@router.delete(
    "/{note_id}",
    response_model=ApiResponse[NoteResponse],
    summary="Delete a note",
    description="Permanently delete a note. Returns the note as it was.",
)
async def delete_note(
    note_id: int,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Delete a note."""
    note = await service.delete_note(note_id)
    return _respond(note, request_id)


@router.patch(
    "/{note_id}/archive",
    response_model=ApiResponse[NoteResponse],
    summary="Archive a note",
)
async def archive_note(
    note_id: int,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Archive a note."""
    note = await service.archive_note(note_id)
    return _respond(note, request_id)


@router.patch(
    "/{note_id}/unarchive",
    response_model=ApiResponse[NoteResponse],
    summary="Unarchive a note",
)
async def unarchive_note(
    note_id: int,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Unarchive a note."""
    note = await service.unarchive_note(note_id)
    return _respond(note, request_id)


@router.patch(
    "/{note_id}/categories",
    response_model=ApiResponse[NoteResponse],
    summary="Replace note categories",
    description="Replace every category of a note. Unknown and duplicate ids are ignored.",
)
async def set_note_categories(
    note_id: int,
    data: NoteCategoriesUpdate,
    service: AssociationServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Replace the categories of a note."""
    note = await service.set_categories(note_id, data.category_ids)
    return _respond(note, request_id)
