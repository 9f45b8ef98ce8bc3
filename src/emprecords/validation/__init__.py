"""Request validation: field rules, validators, registry and pipeline."""

from emprecords.validation.context import RuleContext, StorageReader, parse_route_int
from emprecords.validation.registry import ValidatorRegistry, default_registry
from emprecords.validation.rules import FieldRule
from emprecords.validation.validator import ValidationOutcome, Validator

__all__ = [
    "FieldRule",
    "RuleContext",
    "StorageReader",
    "ValidationOutcome",
    "Validator",
    "ValidatorRegistry",
    "default_registry",
    "parse_route_int",
]
