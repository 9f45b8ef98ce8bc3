"""Fault taxonomy.

Validation failures are not exceptions: the pipeline turns them into a 400
``ActionResponse``. Missing records are not exceptions either: services
return ``ServiceError(code="NOT_FOUND")``. The classes below are the faults
that must propagate untouched to whatever maps errors to 5xx responses.
"""

from __future__ import annotations


class EmpRecordsError(Exception):
    """Base class for all emprecords faults."""


class RuleEvaluationFault(EmpRecordsError):
    """A field rule could not complete (e.g. storage unreachable).

    Distinct from a rule *failing*: the field may well be valid, we just
    could not find out.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Rule for {field!r} could not be evaluated: {message}")
        self.field = field
        self.rule_message = message


class CommitFault(EmpRecordsError):
    """The underlying write failed; the whole unit of work was rolled back."""


class ConstraintViolation(EmpRecordsError):
    """A uniqueness or foreign-key constraint rejected the commit.

    Callers are expected to prevent these before they reach storage, so one
    surfacing here signals a programming error rather than bad input.
    """
