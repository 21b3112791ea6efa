"""Categories router."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from finwise.application.commands import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from finwise.application.queries import ListCategoriesQuery
from finwise.domain.ledger.value_objects import TransactionType
from finwise.presentation.api.dependencies import RepoFactory
from finwise.presentation.api.schemas.categories import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

TypeFilter = Annotated[
    TransactionType | None,
    Query(description="Only income or only expense categories"),
]


@router.get("", summary="List categories")
async def list_categories(
    factory: RepoFactory,
    type: TypeFilter = None,  # NOQA: A002
) -> list[CategoryResponse]:
    query = ListCategoriesQuery.from_factory(factory)
    categories = await query.execute(category_type=type)
    return [CategoryResponse.from_record(c) for c in categories]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
)
async def create_category(
    request: CategoryCreateRequest,
    factory: RepoFactory,
) -> CategoryResponse:
    command = CreateCategoryCommand.from_factory(factory)

    try:
        category = await command.execute(**request.model_dump())
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryResponse.from_record(category)


@router.put(
    "/{category_id}",
    summary="Update a category",
    responses={
        404: {"description": "Category not found"},
        422: {"description": "Type change on a category in use"},
    },
)
async def update_category(
    category_id: UUID,
    request: CategoryUpdateRequest,
    factory: RepoFactory,
) -> CategoryResponse:
    command = UpdateCategoryCommand.from_factory(factory)

    try:
        category = await command.execute(
            category_id=category_id,
            changes=request.model_dump(exclude_unset=True),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryResponse.from_record(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a category",
    responses={
        404: {"description": "Category not found"},
        422: {"description": "Category still has transactions"},
    },
)
async def delete_category(category_id: UUID, factory: RepoFactory) -> None:
    command = DeleteCategoryCommand.from_factory(factory)

    try:
        await command.execute(category_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
