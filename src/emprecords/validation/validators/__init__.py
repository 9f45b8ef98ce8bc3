"""Concrete validators, one per payload type.

``ALL_VALIDATORS`` is the startup list the default registry is built from.
Adding a validator means adding it here.
"""

from emprecords.validation.validators.benefits import (
    CreateBenefitValidator,
    ReplaceBenefitsValidator,
)
from emprecords.validation.validators.employees import (
    CreateEmployeeValidator,
    GetAllEmployeesValidator,
    UpdateEmployeeValidator,
)
from emprecords.validation.validators.users import (
    ForgotPasswordValidator,
    GetAllUsersValidator,
    LoginValidator,
    RegisterValidator,
    ResetPasswordValidator,
    UpdateUserValidator,
)

ALL_VALIDATORS = (
    CreateEmployeeValidator,
    UpdateEmployeeValidator,
    GetAllEmployeesValidator,
    CreateBenefitValidator,
    ReplaceBenefitsValidator,
    RegisterValidator,
    LoginValidator,
    ForgotPasswordValidator,
    ResetPasswordValidator,
    UpdateUserValidator,
    GetAllUsersValidator,
)

__all__ = [
    "ALL_VALIDATORS",
    "CreateBenefitValidator",
    "CreateEmployeeValidator",
    "ForgotPasswordValidator",
    "GetAllEmployeesValidator",
    "GetAllUsersValidator",
    "LoginValidator",
    "RegisterValidator",
    "ReplaceBenefitsValidator",
    "ResetPasswordValidator",
    "UpdateEmployeeValidator",
    "UpdateUserValidator",
]
