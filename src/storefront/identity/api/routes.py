"""FastAPI endpoints for user accounts."""

from fastapi import APIRouter, HTTPException
from protean.utils.globals import current_domain

from storefront.identity.api.schemas import (
    LoginRequest,
    RegisterUserRequest,
    StatusResponse,
    UpdateUserRequest,
    UserIdResponse,
    UserResponse,
)
from storefront.identity.user.authentication import authenticate
from storefront.identity.user.management import DeleteUser, UpdateUser
from storefront.identity.user.registration import RegisterUser
from storefront.identity.user.user import User

router = APIRouter(prefix="/users", tags=["users"])


def _user(user) -> UserResponse:
    return UserResponse(
        user_id=str(user.id),
        username=user.username,
        email=user.email,
        name=user.name,
        role=user.role,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.post("", status_code=201, response_model=UserIdResponse)
async def register_user(body: RegisterUserRequest) -> UserIdResponse:
    command = RegisterUser(
        username=body.username,
        email=body.email,
        password=body.password,
        name=body.name,
    )
    result = current_domain.process(command, asynchronous=False)
    return UserIdResponse(user_id=result)


@router.post("/login", response_model=UserResponse)
async def login(body: LoginRequest) -> UserResponse:
    result = authenticate(body.email, body.password)
    if not result.success:
        raise HTTPException(status_code=401, detail=result.message)
    return _user(result.user)


@router.get("", response_model=list[UserResponse])
async def list_users() -> list[UserResponse]:
    return [_user(u) for u in current_domain.repository_for(User).find_all()]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    return _user(current_domain.repository_for(User).get(user_id))


@router.put("/{user_id}", response_model=StatusResponse)
async def update_user(user_id: str, body: UpdateUserRequest) -> StatusResponse:
    command = UpdateUser(user_id=user_id, **body.model_dump(exclude_unset=True))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.delete("/{user_id}", response_model=StatusResponse)
async def delete_user(user_id: str) -> StatusResponse:
    current_domain.process(DeleteUser(user_id=user_id), asynchronous=False)
    return StatusResponse()
