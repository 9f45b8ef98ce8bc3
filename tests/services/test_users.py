"""Tests for UserService."""

from __future__ import annotations

from emprecords.domain.payloads import GetAllUsersRequest, RegisterRequest, UpdateUserRequest
from emprecords.infrastructure.database.unit_of_work import UnitOfWork
from emprecords.services.users import UserService


async def _register(uow: UnitOfWork, email: str, **fields: str) -> dict:
    result = await UserService(uow).register(
        RegisterRequest(email=email, password="Secret123", confirm_password="Secret123", **fields)
    )
    assert result.ok, result.error
    return result.data


class TestRegister:
    async def test_register_creates_active_record(self, uow: UnitOfWork) -> None:
        user = await _register(uow, "ada@example.com", first_name="Ada", last_name="Byron")
        assert user["is_active"] is True
        assert user["full_name"] == "Ada Byron"
        assert user["display_name"] == "Ada Byron"
        assert user["created_at"] == "2022-01-01T00:00:00Z"
        assert "password" not in user

    async def test_duplicate_email_conflicts(self, uow: UnitOfWork) -> None:
        await _register(uow, "ada@example.com")
        result = await UserService(uow).register(RegisterRequest(email="ada@example.com"))
        assert result.error is not None
        assert result.error.code == "CONFLICT"


class TestList:
    async def test_default_ten_per_page_ordered_by_email(self, uow: UnitOfWork) -> None:
        for n in reversed(range(12)):
            await _register(uow, f"user{n:02d}@example.com")
        result = await UserService(uow).list_users(GetAllUsersRequest())
        emails = [u["email"] for u in result.data["items"]]
        assert emails == [f"user{n:02d}@example.com" for n in range(10)]
        assert result.meta == {"page": 1, "records_per_page": 10, "total": 12}

    async def test_active_filter(self, uow: UnitOfWork) -> None:
        active = await _register(uow, "a@example.com")
        inactive = await _register(uow, "b@example.com")
        await UserService(uow).deactivate_user(inactive["id"])
        result = await UserService(uow).list_users(GetAllUsersRequest(is_active=True))
        assert [u["id"] for u in result.data["items"]] == [active["id"]]


class TestUpdateAndDeactivate:
    async def test_update_sets_only_given_fields(self, uow: UnitOfWork) -> None:
        user = await _register(uow, "ada@example.com", first_name="Ada", last_name="Byron")
        result = await UserService(uow).update_user(
            user["id"], UpdateUserRequest(profile_picture="https://cdn.example.com/ada.png")
        )
        assert result.data["first_name"] == "Ada"
        assert result.data["profile_picture"] == "https://cdn.example.com/ada.png"
        assert result.data["modified_at"] == "2022-01-01T00:00:00Z"

    async def test_deactivate_twice_warns(self, uow: UnitOfWork) -> None:
        user = await _register(uow, "ada@example.com")
        service = UserService(uow)
        first = await service.deactivate_user(user["id"])
        assert first.data["is_active"] is False
        assert first.warnings == []
        second = await service.deactivate_user(user["id"])
        assert second.warnings == [f"User {user['id']} is already inactive"]

    async def test_unknown_user_is_not_found(self, uow: UnitOfWork) -> None:
        result = await UserService(uow).get_user("missing")
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
