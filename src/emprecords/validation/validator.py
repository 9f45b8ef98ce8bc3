"""Validator — per-payload-type composition of field rules.

A validator subclass binds itself to exactly one payload type and declares an
ordered mapping of field name to rules::

    class CreateEmployeeValidator(Validator[CreateEmployeeRequest]):
        payload_type = CreateEmployeeRequest
        rules = {
            "first_name": (not_empty("First name is required."),),
        }

Rules of one field run in declaration order and every failing message is
kept. Distinct fields are independent and run as concurrent tasks; their
results are merged back in declared field order, so the outcome does not
depend on which lookup finished first.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from emprecords.domain.payloads import Payload
from emprecords.errors import RuleEvaluationFault

if TYPE_CHECKING:
    from emprecords.validation.context import RuleContext
    from emprecords.validation.rules import FieldRule

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Payload)


@dataclass(frozen=True)
class ValidationOutcome:
    """Field name to failure messages; valid iff empty."""

    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors


class Validator(Generic[P]):
    """Base class for payload validators."""

    payload_type: ClassVar[type[Payload]]
    rules: ClassVar[Mapping[str, Sequence[FieldRule]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        payload_type = cls.__dict__.get("payload_type")
        if payload_type is None:
            return
        unknown = [name for name in cls.rules if name not in payload_type.model_fields]
        if unknown:
            msg = f"{cls.__name__} declares rules for unknown fields: {', '.join(unknown)}"
            raise TypeError(msg)

    async def validate(self, payload: P, ctx: RuleContext) -> ValidationOutcome:
        """Run every field's rules and collect the failures.

        Raises:
            RuleEvaluationFault: a rule could not complete. Outstanding field
                tasks are cancelled before the fault propagates.
        """
        names = list(self.rules)
        tasks = [
            asyncio.create_task(self._validate_field(name, payload, ctx), name=f"validate:{name}")
            for name in names
        ]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        errors: dict[str, list[str]] = {}
        for name, messages in zip(names, results, strict=True):
            if messages:
                errors[name] = messages
        return ValidationOutcome(errors)

    async def _validate_field(self, name: str, payload: P, ctx: RuleContext) -> list[str]:
        value = getattr(payload, name)
        messages: list[str] = []
        for rule in self.rules[name]:
            try:
                passed = await rule.evaluate(value, payload, ctx)
            except RuleEvaluationFault:
                raise
            except Exception as exc:
                logger.debug("Rule for %s.%s raised: %s", type(payload).__name__, name, exc)
                raise RuleEvaluationFault(name, str(exc)) from exc
            if not passed:
                messages.append(rule.message)
        return messages
