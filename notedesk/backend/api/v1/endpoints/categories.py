"""
Categories API Endpoints.

REST API endpoints for category management.
"""

from fastapi import APIRouter, Response

from notedesk.backend.core.dependencies import CategoryServiceDep, RequestId
from notedesk.backend.schemas.base import ApiResponse, ResponseMetadata
from notedesk.backend.schemas.category import (
    CategoryCreate,
    CategoryRename,
    CategoryResponse,
)

router = APIRouter()


@router.get(
    "",
    response_model=ApiResponse[list[CategoryResponse]],
    summary="List categories",
    description="Get every category ordered by name.",
)
async def list_categories(
    service: CategoryServiceDep,
    request_id: RequestId,
) -> ApiResponse[list[CategoryResponse]]:
    """List all categories."""
    categories = await service.list_categories()
    return ApiResponse(
        data=[CategoryResponse.model_validate(category) for category in categories],
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.post(
    "",
    response_model=ApiResponse[CategoryResponse],
    status_code=201,
    summary="Create a category",
    description="Create a category. Names are trimmed and must be unique.",
)
async def create_category(
    data: CategoryCreate,
    service: CategoryServiceDep,
    request_id: RequestId,
) -> ApiResponse[CategoryResponse]:
    """Create a new category."""
    category = await service.create_category(data.name)
    return ApiResponse(
        data=CategoryResponse.model_validate(category),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.patch(
    "/{category_id}",
    response_model=ApiResponse[CategoryResponse],
    summary="Rename a category",
)
async def rename_category(
    category_id: int,
    data: CategoryRename,
    service: CategoryServiceDep,
    request_id: RequestId,
) -> ApiResponse[CategoryResponse]:
    """Rename a category."""
    category = await service.rename_category(category_id, data.name)
    return ApiResponse(
        data=CategoryResponse.model_validate(category),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.delete(
    "/{category_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a category",
    description="Delete a category and untag every note that carried it.",
)
async def delete_category(
    category_id: int,
    service: CategoryServiceDep,
) -> Response:
    """Delete a category."""
    await service.delete_category(category_id)
    return Response(status_code=204)
