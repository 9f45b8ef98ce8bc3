"""Benefit catalogue actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from emprecords.actions.base import ActionResponse, respond
from emprecords.domain.payloads import CreateBenefitRequest
from emprecords.services.benefits import BenefitService

if TYPE_CHECKING:
    from emprecords.actions.base import ActionRequest


async def create_benefit(request: ActionRequest, *, body: CreateBenefitRequest) -> ActionResponse:
    return respond(await BenefitService(request.uow).create_benefit(body), success_status=201)


async def list_benefits(request: ActionRequest) -> ActionResponse:
    return respond(await BenefitService(request.uow).list_benefits())
