"""Validators for user account and profile payloads.

Password rules only check shape; hashing, lockout and credential checks
belong to the identity provider.

No action here accepts the login, forgot-password or reset-password payloads.
Their validators are registered so the identity provider's flows get the same
field messages when they route those requests through the pipeline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from emprecords.domain.payloads import (
    ForgotPasswordRequest,
    GetAllUsersRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
    UpdateUserRequest,
)
from emprecords.infrastructure.database.schema import User
from emprecords.validation.rules import (
    absolute_url,
    context_rule,
    email_address,
    equal_to_field,
    matches,
    max_length,
    min_length,
    not_empty,
)
from emprecords.validation.validator import Validator
from emprecords.validation.validators.employees import PAGE_RULES, RECORDS_PER_PAGE_RULES

if TYPE_CHECKING:
    from emprecords.validation.context import RuleContext

STRONG_PASSWORD = r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)"
NAME_MAX = 100

EMAIL_RULES = (
    not_empty("Email is required."),
    email_address("A valid email is required."),
)


async def email_not_registered(value: Any, _payload: Any, ctx: RuleContext) -> bool:
    if not value:
        return True
    existing = await ctx.require_reader().scalar(select(User.id).where(User.email == value))
    return existing is None


class RegisterValidator(Validator[RegisterRequest]):
    payload_type = RegisterRequest
    rules = {
        "email": (
            *EMAIL_RULES,
            context_rule(email_not_registered, "Email is already registered."),
        ),
        "password": (
            not_empty("Password is required."),
            min_length(8, "Password must be at least 8 characters long."),
            matches(
                STRONG_PASSWORD,
                "Password must contain at least one uppercase letter, "
                "one lowercase letter, and one digit.",
            ),
        ),
        "confirm_password": (
            not_empty("Password confirmation is required."),
            equal_to_field("password", "Password and confirmation password do not match."),
        ),
        "first_name": (max_length(NAME_MAX, "First name cannot exceed 100 characters."),),
        "last_name": (max_length(NAME_MAX, "Last name cannot exceed 100 characters."),),
    }


class LoginValidator(Validator[LoginRequest]):
    payload_type = LoginRequest
    rules = {
        "email": EMAIL_RULES,
        "password": (not_empty("Password is required."),),
    }


class ForgotPasswordValidator(Validator[ForgotPasswordRequest]):
    payload_type = ForgotPasswordRequest
    rules = {"email": EMAIL_RULES}


class ResetPasswordValidator(Validator[ResetPasswordRequest]):
    payload_type = ResetPasswordRequest
    rules = {
        "new_password": (
            not_empty("New password is required."),
            min_length(6, "New password must be at least 6 characters long."),
            matches(
                STRONG_PASSWORD,
                "New password must contain at least one uppercase letter, "
                "one lowercase letter, and one digit.",
            ),
        ),
        "confirm_new_password": (
            not_empty("Password confirmation is required."),
            equal_to_field(
                "new_password", "New password and confirmation password do not match."
            ),
        ),
    }


class UpdateUserValidator(Validator[UpdateUserRequest]):
    payload_type = UpdateUserRequest
    rules = {
        "first_name": (max_length(NAME_MAX, "First name cannot exceed 100 characters."),),
        "last_name": (max_length(NAME_MAX, "Last name cannot exceed 100 characters."),),
        "profile_picture": (
            max_length(500, "Profile picture URL cannot exceed 500 characters."),
            absolute_url("Profile picture must be a valid URL."),
        ),
    }


class GetAllUsersValidator(Validator[GetAllUsersRequest]):
    payload_type = GetAllUsersRequest
    rules = {
        "page": PAGE_RULES,
        "records_per_page": RECORDS_PER_PAGE_RULES,
    }
