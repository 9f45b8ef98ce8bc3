"""UserService — user records.

Registration only creates the user record. Credentials, sessions and lockout
are the identity provider's concern, so passwords never reach this service.
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any

from sqlalchemy import func, select

from emprecords.infrastructure.database.schema import User
from emprecords.services._helpers import iso_utc, page_window
from emprecords.services.base import BaseService
from emprecords.services.result import CONFLICT, ServiceError, ServiceResult, not_found

if TYPE_CHECKING:
    from emprecords.domain.payloads import GetAllUsersRequest, RegisterRequest, UpdateUserRequest

DEFAULT_RECORDS_PER_PAGE = 10


def serialize_user(user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "email": user.email,
        "user_name": user.user_name,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "full_name": user.full_name,
        "display_name": user.display_name,
        "profile_picture": user.profile_picture,
        "is_active": user.is_active,
        "last_login_date": iso_utc(user.last_login_date),
        "created_by": user.created_by,
        "created_at": iso_utc(user.created_at),
        "modified_by": user.modified_by,
        "modified_at": iso_utc(user.modified_at),
    }


class UserService(BaseService):
    """Register, list, read, update and deactivate users."""

    async def register(self, request: RegisterRequest) -> ServiceResult:
        op = "register"
        email = request.email or ""
        taken = await self.session.scalar(select(User.id).where(User.email == email))
        if taken is not None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code=CONFLICT, message=f"Email {email!r} is already registered"),
            )
        user = User(
            id=str(uuid.uuid4()),
            email=email,
            user_name=email,
            first_name=request.first_name,
            last_name=request.last_name,
            is_active=True,
        )
        self._uow.add(user)
        await self._uow.commit()
        return ServiceResult(ok=True, op=op, data=serialize_user(user))

    async def list_users(self, request: GetAllUsersRequest) -> ServiceResult:
        op = "list_users"
        offset, limit = page_window(
            request.page, request.records_per_page, DEFAULT_RECORDS_PER_PAGE
        )

        query = select(User)
        if request.email_contains:
            query = query.where(User.email.contains(request.email_contains))
        if request.first_name_contains:
            query = query.where(User.first_name.contains(request.first_name_contains))
        if request.last_name_contains:
            query = query.where(User.last_name.contains(request.last_name_contains))
        if request.is_active is not None:
            query = query.where(User.is_active == request.is_active)

        total = await self.session.scalar(select(func.count()).select_from(query.subquery()))
        rows = await self.session.scalars(query.order_by(User.email).offset(offset).limit(limit))
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": [serialize_user(user) for user in rows]},
            meta={
                "page": request.page or 1,
                "records_per_page": limit,
                "total": total or 0,
            },
        )

    async def get_user(self, user_id: str) -> ServiceResult:
        op = "get_user"
        user = await self.session.get(User, user_id)
        if user is None:
            return not_found(op, f"No user found with ID: {user_id}", id=user_id)
        return ServiceResult(ok=True, op=op, data=serialize_user(user))

    async def update_user(self, user_id: str, request: UpdateUserRequest) -> ServiceResult:
        """Apply the profile fields the request actually sets."""
        op = "update_user"
        user = await self.session.get(User, user_id)
        if user is None:
            return not_found(op, f"No user found with ID: {user_id}", id=user_id)

        for name, value in request.model_dump(exclude_none=True).items():
            setattr(user, name, value)
        await self._uow.commit()
        return ServiceResult(ok=True, op=op, data=serialize_user(user))

    async def deactivate_user(self, user_id: str) -> ServiceResult:
        op = "deactivate_user"
        user = await self.session.get(User, user_id)
        if user is None:
            return not_found(op, f"No user found with ID: {user_id}", id=user_id)
        warnings: list[str] = []
        if not user.is_active:
            warnings.append(f"User {user_id} is already inactive")
        user.is_active = False
        await self._uow.commit()
        return ServiceResult(ok=True, op=op, data=serialize_user(user), warnings=warnings)
