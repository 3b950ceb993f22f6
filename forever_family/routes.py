"""
HTTP routes for the Forever Family API.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from forever_family.auth import require_admin
from forever_family.dependencies import get_collection_store
from forever_family.errors import NotFoundError, ValidationError
from forever_family.portal import issue_grant
from forever_family.records import Referral, Step, Submission, merge_step
from forever_family.schemas import (
    JoinRequest,
    PortalLoginRequest,
    PortalLoginResponse,
    ReferralRequest,
    StepCreateRequest,
    StepResponse,
    StepsResponse,
    SubmissionsResponse,
    SuccessResponse,
)
from forever_family.store import REFERRALS, STEPS, SUBMISSIONS, CollectionStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _require(*values: Any, message: str | None = None) -> None:
    if not all(values):
        raise ValidationError(message)


def _append(store: CollectionStore, collection: str, record: dict) -> None:
    records = store.read(collection)
    records.append(record)
    store.write(collection, records)


@router.post("/join", response_model=SuccessResponse)
def join(payload: JoinRequest, store: CollectionStore = Depends(get_collection_store)):
    _require(payload.name, payload.email, payload.city, payload.interest)
    submission = Submission(
        name=payload.name,
        email=payload.email,
        city=payload.city,
        interest=payload.interest,
        phone=payload.phone,
        message=payload.message,
    )
    _append(store, SUBMISSIONS, submission.as_dict())
    logger.info("[JOIN] %s <%s> - %s", payload.name, payload.email, payload.interest)
    return SuccessResponse()


@router.post("/referral", response_model=SuccessResponse)
def referral(
    payload: ReferralRequest, store: CollectionStore = Depends(get_collection_store)
):
    _require(payload.name, payload.referral_name, payload.situation)
    record = Referral(
        name=payload.name,
        referral_name=payload.referral_name,
        situation=payload.situation,
        relationship=payload.relationship,
        urgency=payload.urgency,
    )
    _append(store, REFERRALS, record.as_dict())
    logger.info(
        "[G-LINE] %s -> re: %s (%s)", payload.name, payload.referral_name, payload.urgency
    )
    return SuccessResponse()


@router.post("/portal-login", response_model=PortalLoginResponse)
def portal_login(payload: PortalLoginRequest):
    """
    Exchange a tier access code for a demo portal token. The token is plain
    base64 and is never checked again by this service.
    """
    _require(payload.email, payload.code, message="Email and access code required.")
    grant = issue_grant(payload.email, payload.code)
    logger.info("[PORTAL] %s logged in as %s", grant.email, grant.tier)
    return PortalLoginResponse(tier=grant.tier, token=grant.encode())


@router.get("/steps", response_model=StepsResponse)
def list_steps(store: CollectionStore = Depends(get_collection_store)):
    return StepsResponse(steps=store.read(STEPS))


@router.post(
    "/steps", response_model=StepResponse, dependencies=[Depends(require_admin)]
)
def create_step(
    payload: StepCreateRequest, store: CollectionStore = Depends(get_collection_store)
):
    step = Step(
        location=payload.location,
        city=payload.city,
        area=payload.area,
        steppers=payload.steppers,
        status=payload.status,
        start_time=payload.start_time,
        end_time=payload.end_time,
        purpose=payload.purpose,
        outcome=payload.outcome,
        coordinated_by=payload.coordinated_by,
    )
    record = step.as_dict()
    _append(store, STEPS, record)
    logger.info("[STEP] New step added: %s (%s)", payload.location, payload.status)
    return StepResponse(step=record)


@router.put(
    "/steps/{step_id}",
    response_model=StepResponse,
    dependencies=[Depends(require_admin)],
)
def update_step(
    step_id: str,
    changes: dict[str, Any] = Body(default={}),
    store: CollectionStore = Depends(get_collection_store),
):
    steps = store.read(STEPS)
    for index, existing in enumerate(steps):
        if isinstance(existing, dict) and str(existing.get("id")) == step_id:
            break
    else:
        raise NotFoundError("Step not found.")
    steps[index] = merge_step(existing, changes)
    store.write(STEPS, steps)
    logger.info("[STEP] Updated step %s", step_id)
    return StepResponse(step=steps[index])


@router.get(
    "/submissions",
    response_model=SubmissionsResponse,
    dependencies=[Depends(require_admin)],
)
def list_submissions(store: CollectionStore = Depends(get_collection_store)):
    return SubmissionsResponse(
        submissions=store.read(SUBMISSIONS),
        referrals=store.read(REFERRALS),
    )
