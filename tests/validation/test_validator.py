"""Tests for the Validator base: accumulation, concurrency and faults."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import pytest

from emprecords.domain.payloads import Payload
from emprecords.errors import RuleEvaluationFault
from emprecords.validation.context import RuleContext
from emprecords.validation.rules import context_rule, max_length, min_length, not_empty
from emprecords.validation.validator import ValidationOutcome, Validator


class SamplePayload(Payload):
    a: str | None = None
    b: str | None = None


class TestValidationOutcome:
    def test_empty_is_valid(self) -> None:
        assert ValidationOutcome().valid

    def test_errors_make_invalid(self) -> None:
        assert not ValidationOutcome({"a": ["bad"]}).valid


class TestAccumulation:
    async def test_all_failing_messages_of_a_field_are_kept(self) -> None:
        class AccumulatingValidator(Validator[SamplePayload]):
            payload_type = SamplePayload
            rules = {
                "a": (
                    min_length(5, "too short"),
                    max_length(2, "too long"),
                    not_empty("required"),
                ),
            }

        outcome = await AccumulatingValidator().validate(SamplePayload(a="abc"), RuleContext())
        assert outcome.errors == {"a": ["too short", "too long"]}

    async def test_valid_payload_has_no_errors(self) -> None:
        class RequiredValidator(Validator[SamplePayload]):
            payload_type = SamplePayload
            rules = {"a": (not_empty("required"),)}

        outcome = await RequiredValidator().validate(SamplePayload(a="x"), RuleContext())
        assert outcome.valid
        assert outcome.errors == {}


class TestConcurrentFields:
    async def test_fields_run_concurrently_and_merge_in_declared_order(self) -> None:
        started: list[str] = []
        release_a = asyncio.Event()

        async def slow_a(_value: Any, _payload: Any, _ctx: RuleContext) -> bool:
            started.append("a")
            await release_a.wait()
            return False

        async def fast_b(_value: Any, _payload: Any, _ctx: RuleContext) -> bool:
            started.append("b")
            release_a.set()
            return False

        class OrderedValidator(Validator[SamplePayload]):
            payload_type = SamplePayload
            rules = {
                "a": (context_rule(slow_a, "a failed"),),
                "b": (context_rule(fast_b, "b failed"),),
            }

        outcome = await asyncio.wait_for(
            OrderedValidator().validate(SamplePayload(), RuleContext()), timeout=5
        )
        # b had to start while a was still waiting, otherwise a never finishes
        assert started == ["a", "b"]
        assert list(outcome.errors) == ["a", "b"]

    async def test_rules_of_one_field_run_in_order(self) -> None:
        seen: list[int] = []

        def record(n: int) -> Any:
            def check(_value: Any, _payload: Any, _ctx: RuleContext) -> bool:
                seen.append(n)
                return True

            return check

        class SequentialValidator(Validator[SamplePayload]):
            payload_type = SamplePayload
            rules = {"a": tuple(context_rule(record(n), str(n)) for n in range(5))}

        await SequentialValidator().validate(SamplePayload(), RuleContext())
        assert seen == [0, 1, 2, 3, 4]


class TestFaults:
    async def test_exception_becomes_rule_evaluation_fault(self) -> None:
        def broken(_value: Any, _payload: Any, _ctx: RuleContext) -> bool:
            raise ConnectionError("storage unreachable")

        class BrokenValidator(Validator[SamplePayload]):
            payload_type = SamplePayload
            rules = {"a": (context_rule(broken, "never shown"),)}

        with pytest.raises(RuleEvaluationFault) as exc_info:
            await BrokenValidator().validate(SamplePayload(), RuleContext())
        assert exc_info.value.field == "a"
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    async def test_fault_cancels_other_fields(self) -> None:
        cancelled = asyncio.Event()

        async def hangs(_value: Any, _payload: Any, _ctx: RuleContext) -> bool:
            try:
                await asyncio.sleep(60)
            except asyncio.CancelledError:
                cancelled.set()
                raise
            return True

        async def breaks(_value: Any, _payload: Any, _ctx: RuleContext) -> bool:
            await asyncio.sleep(0)
            raise RuntimeError("boom")

        class MixedValidator(Validator[SamplePayload]):
            payload_type = SamplePayload
            rules = {
                "a": (context_rule(hangs, "a"),),
                "b": (context_rule(breaks, "b"),),
            }

        with pytest.raises(RuleEvaluationFault):
            await asyncio.wait_for(
                MixedValidator().validate(SamplePayload(), RuleContext()), timeout=5
            )
        assert cancelled.is_set()

    async def test_cancelling_validation_cancels_running_rules(self) -> None:
        waiting = asyncio.Event()
        cancelled = asyncio.Event()

        async def lookup(_value: Any, _payload: Any, _ctx: RuleContext) -> bool:
            waiting.set()
            try:
                await asyncio.sleep(60)
            except asyncio.CancelledError:
                cancelled.set()
                raise
            return True

        class LookupValidator(Validator[SamplePayload]):
            payload_type = SamplePayload
            rules = {
                "a": (context_rule(lookup, "a"),),
                "b": (not_empty("b required"),),
            }

        task = asyncio.create_task(LookupValidator().validate(SamplePayload(), RuleContext()))
        await asyncio.wait_for(waiting.wait(), timeout=5)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert cancelled.is_set()

    async def test_fault_is_not_logged_as_error(self, caplog: pytest.LogCaptureFixture) -> None:
        def broken(_value: Any, _payload: Any, _ctx: RuleContext) -> bool:
            raise ConnectionError("storage unreachable")

        class BrokenValidator(Validator[SamplePayload]):
            payload_type = SamplePayload
            rules = {"a": (context_rule(broken, "never shown"),)}

        with caplog.at_level(logging.DEBUG, logger="emprecords.validation.validator"):
            with pytest.raises(RuleEvaluationFault):
                await BrokenValidator().validate(SamplePayload(), RuleContext())

        records = [r for r in caplog.records if r.name == "emprecords.validation.validator"]
        assert records
        assert all(r.levelno == logging.DEBUG for r in records)

    async def test_missing_reader_is_a_fault(self) -> None:
        async def needs_storage(_value: Any, _payload: Any, ctx: RuleContext) -> bool:
            ctx.require_reader()
            return True

        class StorageValidator(Validator[SamplePayload]):
            payload_type = SamplePayload
            rules = {"a": (context_rule(needs_storage, "a"),)}

        with pytest.raises(RuleEvaluationFault):
            await StorageValidator().validate(SamplePayload(), RuleContext())


class TestDeclaration:
    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(TypeError, match="unknown fields: c"):

            class _Bad(Validator[SamplePayload]):
                payload_type = SamplePayload
                rules = {"c": (not_empty("x"),)}
