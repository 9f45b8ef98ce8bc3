"""Validators for benefit payloads."""

from __future__ import annotations

from decimal import Decimal

from emprecords.domain.payloads import CreateBenefitRequest, ReplaceBenefitsRequest
from emprecords.validation.rules import context_rule, greater_than_or_equal, must, not_empty
from emprecords.validation.validator import Validator


class ReplaceBenefitsValidator(Validator[ReplaceBenefitsRequest]):
    payload_type = ReplaceBenefitsRequest
    rules = {
        "benefit_ids": (
            must(
                lambda ids: all(benefit_id > 0 for benefit_id in ids),
                "Benefit ids must be positive integers.",
            ),
        ),
        "cost_overrides": (
            must(
                lambda overrides: all(cost >= 0 for cost in overrides.values()),
                "Cost override must not be negative.",
            ),
            context_rule(
                lambda overrides, payload, _ctx: set(overrides) <= set(payload.benefit_ids),
                "Cost overrides must reference a selected benefit.",
            ),
        ),
    }


class CreateBenefitValidator(Validator[CreateBenefitRequest]):
    payload_type = CreateBenefitRequest
    rules = {
        "name": (not_empty("Benefit name is required."),),
        "base_cost": (
            must(lambda cost: cost is not None, "Base cost is required."),
            greater_than_or_equal(Decimal(0), "Base cost must not be negative."),
        ),
    }
