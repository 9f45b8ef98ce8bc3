"""User actions. Routes address users by their string id."""

from __future__ import annotations

from typing import TYPE_CHECKING

from emprecords.actions.base import ActionResponse, respond, route_not_found
from emprecords.domain.payloads import GetAllUsersRequest, RegisterRequest, UpdateUserRequest
from emprecords.services.users import UserService

if TYPE_CHECKING:
    from emprecords.actions.base import ActionRequest


async def register(request: ActionRequest, *, body: RegisterRequest) -> ActionResponse:
    return respond(await UserService(request.uow).register(body), success_status=201)


async def list_users(
    request: ActionRequest, *, query: GetAllUsersRequest | None = None
) -> ActionResponse:
    return respond(await UserService(request.uow).list_users(query or GetAllUsersRequest()))


async def get_user(request: ActionRequest) -> ActionResponse:
    user_id = request.route_values.get("id")
    if not user_id:
        return route_not_found("id", request)
    return respond(await UserService(request.uow).get_user(user_id))


async def update_user(request: ActionRequest, *, body: UpdateUserRequest) -> ActionResponse:
    user_id = request.route_values.get("id")
    if not user_id:
        return route_not_found("id", request)
    return respond(await UserService(request.uow).update_user(user_id, body))


async def deactivate_user(request: ActionRequest) -> ActionResponse:
    user_id = request.route_values.get("id")
    if not user_id:
        return route_not_found("id", request)
    return respond(await UserService(request.uow).deactivate_user(user_id))
