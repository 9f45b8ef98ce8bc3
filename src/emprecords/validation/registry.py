"""Validator registry — payload type to zero-or-one validator.

Built once at startup from an explicit tuple of validator classes; there is
no reflection scan. A payload type nobody registered simply has no validator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from emprecords.domain.payloads import Payload
    from emprecords.validation.validator import Validator


class ValidatorRegistry:
    """Exact-type lookup from payload class to a validator instance."""

    def __init__(self, validators: Iterable[type[Validator[Any]]] = ()) -> None:
        self._by_type: dict[type[Payload], Validator[Any]] = {}
        for validator_cls in validators:
            self.register(validator_cls)

    def register(self, validator_cls: type[Validator[Any]]) -> None:
        """Bind *validator_cls* to the payload type it declares.

        Raises:
            ValueError: another validator is already bound to that type.
        """
        payload_type = validator_cls.payload_type
        existing = self._by_type.get(payload_type)
        if existing is not None:
            msg = (
                f"{payload_type.__name__} already has validator "
                f"{type(existing).__name__}; cannot also bind {validator_cls.__name__}"
            )
            raise ValueError(msg)
        self._by_type[payload_type] = validator_cls()

    def resolve(self, payload_type: type[Payload]) -> Validator[Any] | None:
        return self._by_type.get(payload_type)

    def __len__(self) -> int:
        return len(self._by_type)

    def __contains__(self, payload_type: object) -> bool:
        return payload_type in self._by_type


def default_registry() -> ValidatorRegistry:
    """Registry holding every validator shipped with emprecords."""
    from emprecords.validation.validators import ALL_VALIDATORS

    return ValidatorRegistry(ALL_VALIDATORS)
