"""The /user sub-router: an in-memory user directory."""

from typing import Annotated, Final

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..application.user_service import UserService, get_user_service
from ..domain.constants import MAX_AGE, MAX_NAME_LENGTH, MIN_AGE
from ..domain.entities import User

user_router: Final = APIRouter(
    tags=["users"],
    responses={
        400: {"description": "Bad Request - Invalid input data"},
        404: {"description": "Not Found - User does not exist"},
    },
)

UserServiceDep = Annotated[UserService, Depends(get_user_service)]
UserId = Annotated[str, Path(description="Id of the user")]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreate(_CamelModel):
    """Request model for adding a user."""

    first_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    last_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    age: int = Field(..., ge=MIN_AGE, le=MAX_AGE)


class UserUpdate(_CamelModel):
    """Request model for a partial update; omitted fields stay unchanged."""

    first_name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    last_name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    age: int | None = Field(None, ge=MIN_AGE, le=MAX_AGE)


class UserResponse(_CamelModel):
    id: str
    first_name: str
    last_name: str
    age: int

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            age=user.age,
        )


@user_router.api_route(
    "", methods=["GET", "HEAD"], response_model=list[UserResponse]
)
@user_router.api_route(
    "/",
    methods=["GET", "HEAD"],
    response_model=list[UserResponse],
    include_in_schema=False,
)
async def list_users(service: UserServiceDep) -> list[UserResponse]:
    return [UserResponse.from_entity(user) for user in service.list_users()]


@user_router.post(
    "", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED
)
@user_router.post(
    "/",
    response_class=PlainTextResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_user(payload: UserCreate, service: UserServiceDep) -> str:
    user = service.create_user(payload.first_name, payload.last_name, payload.age)
    return f"User with the name {user.first_name} added to the database!"


@user_router.api_route(
    "/{user_id}", methods=["GET", "HEAD"], response_model=UserResponse
)
async def get_user(user_id: UserId, service: UserServiceDep) -> UserResponse:
    return UserResponse.from_entity(service.get_user(user_id))


@user_router.patch("/{user_id}", response_class=PlainTextResponse)
async def update_user(
    user_id: UserId, payload: UserUpdate, service: UserServiceDep
) -> str:
    service.update_user(user_id, **payload.model_dump(exclude_unset=True))
    return f"User with the id {user_id} has been updated"


@user_router.delete("/{user_id}", response_class=PlainTextResponse)
async def delete_user(user_id: UserId, service: UserServiceDep) -> str:
    service.delete_user(user_id)
    return f"User with the id {user_id} deleted from the database."
