"""Request payloads — the deserialized bodies that actions receive.

Payloads are frozen: nothing may change them between deserialization and the
end of validation. Almost every field is optional so that absent values reach
the field rules (which produce the caller-facing messages) instead of failing
at parse time.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Payload(BaseModel):
    """Base class marking a model as a request body.

    The validation pipeline treats every action argument that is a
    ``Payload`` instance as body-bound and looks up its validator.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")


# --- Employees ---


class CreateEmployeeRequest(Payload):
    first_name: str | None = None
    last_name: str | None = None
    social_security_number: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone_number: str | None = None
    email: str | None = None


class UpdateEmployeeRequest(Payload):
    """Replacement contact details for an existing employee."""

    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone_number: str | None = None
    email: str | None = None


class GetAllEmployeesRequest(Payload):
    page: int | None = None
    records_per_page: int | None = None
    first_name_contains: str | None = None
    last_name_contains: str | None = None


# --- Benefits ---


class CreateBenefitRequest(Payload):
    name: str | None = None
    description: str | None = None
    base_cost: Decimal | None = None


class ReplaceBenefitsRequest(Payload):
    """Full replacement of an employee's benefit set.

    ``cost_overrides`` maps a benefit id to the employee-specific cost; ids
    without an override fall back to the benefit's base cost.
    """

    benefit_ids: list[int] = Field(default_factory=list)
    cost_overrides: dict[int, Decimal] = Field(default_factory=dict)


# --- Users ---


class RegisterRequest(Payload):
    email: str | None = None
    password: str | None = None
    confirm_password: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class LoginRequest(Payload):
    email: str | None = None
    password: str | None = None
    remember_me: bool = False


class ForgotPasswordRequest(Payload):
    email: str | None = None


class ResetPasswordRequest(Payload):
    new_password: str | None = None
    confirm_new_password: str | None = None


class UpdateUserRequest(Payload):
    first_name: str | None = None
    last_name: str | None = None
    profile_picture: str | None = None


class GetAllUsersRequest(Payload):
    page: int | None = None
    records_per_page: int | None = None
    email_contains: str | None = None
    first_name_contains: str | None = None
    last_name_contains: str | None = None
    is_active: bool | None = None
