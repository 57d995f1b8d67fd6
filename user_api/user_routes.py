"""
Name: User Directory Routes

Responsibilities:
  - Paginated listing, lookup, creation, update and deletion of users
  - Map use case results onto the response envelope

Notes:
  - Path ids and query values arrive as strings; the use cases validate them
  - Every route takes the caller identity from require_user
"""

from typing import Any

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from .application.usecases import (
    AuthenticatedUser,
    CreateUserInput,
    CreateUserUseCase,
    DeleteUserInput,
    DeleteUserUseCase,
    GetUserInput,
    GetUserUseCase,
    ListUsersInput,
    ListUsersUseCase,
    UpdateUserInput,
    UpdateUserUseCase,
)
from .container import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_update_user_use_case,
)
from .dependencies import require_user
from .error_responses import OPENAPI_ERROR_RESPONSES, error_response, success_response

router = APIRouter(prefix="/users", tags=["users"], responses=OPENAPI_ERROR_RESPONSES)


class UserPayload(BaseModel):
    first_name: Any = None
    last_name: Any = None
    email: Any = None
    password: Any = None


@router.get("")
def list_users(
    limit: str | None = Query(default=None),
    page: str | None = Query(default=None),
    actor: AuthenticatedUser = Depends(require_user),
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
):
    """R: One page of users in insertion order plus pagination metadata."""
    result = use_case.execute(ListUsersInput(page=page, per_page=limit, actor=actor))
    if result.error is not None:
        return error_response(result.error)
    return success_response(
        [user.to_public_dict() for user in result.users],
        pagination=result.pagination.model_dump(),
    )


@router.post("", status_code=201)
def create_user(
    req: UserPayload | None = None,
    actor: AuthenticatedUser = Depends(require_user),
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
):
    req = req or UserPayload()
    result = use_case.execute(
        CreateUserInput(
            first_name=req.first_name,
            last_name=req.last_name,
            email=req.email,
            password=req.password,
            actor=actor,
        )
    )
    if result.error is not None:
        return error_response(result.error)
    return success_response(
        result.user.to_public_dict(),
        message="User created successfully",
        status_code=201,
    )


@router.get("/{user_id}")
def get_user(
    user_id: str,
    actor: AuthenticatedUser = Depends(require_user),
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
):
    result = use_case.execute(GetUserInput(user_id=user_id, actor=actor))
    if result.error is not None:
        return error_response(result.error)
    return success_response(result.user.to_public_dict())


@router.api_route("/{user_id}", methods=["PUT", "PATCH"])
def update_user(
    user_id: str,
    req: UserPayload | None = None,
    actor: AuthenticatedUser = Depends(require_user),
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
):
    """R: Full attribute update; password is optional (omitted keeps the old one)."""
    req = req or UserPayload()
    result = use_case.execute(
        UpdateUserInput(
            user_id=user_id,
            first_name=req.first_name,
            last_name=req.last_name,
            email=req.email,
            password=req.password,
            actor=actor,
        )
    )
    if result.error is not None:
        return error_response(result.error)
    return success_response(
        result.user.to_public_dict(), message="User updated successfully"
    )


@router.delete("/{user_id}")
def delete_user(
    user_id: str,
    actor: AuthenticatedUser = Depends(require_user),
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
):
    result = use_case.execute(DeleteUserInput(user_id=user_id, actor=actor))
    if result.error is not None:
        return error_response(result.error)
    return success_response(
        {"deleted_rows": result.deleted_rows}, message="User deleted successfully"
    )
