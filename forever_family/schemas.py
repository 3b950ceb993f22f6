"""
Pydantic schemas for the Forever Family API.

Request fields are all optional at the schema level; required-field checks
happen in the handlers so a missing field answers 400 with the site's own
message instead of a framework validation error.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class FormPayload(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, populate_by_name=True)


class JoinRequest(FormPayload):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    interest: Optional[str] = None
    message: Optional[str] = None


class ReferralRequest(FormPayload):
    name: Optional[str] = None
    referral_name: Optional[str] = Field(default=None, alias="referralName")
    relationship: Optional[str] = None
    urgency: Optional[str] = None
    situation: Optional[str] = None


class PortalLoginRequest(FormPayload):
    email: Optional[str] = None
    code: Optional[str] = None


class StepCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    location: Any = None
    city: Any = None
    area: Any = None
    steppers: Any = None
    status: Any = None
    start_time: Any = Field(default=None, alias="startTime")
    end_time: Any = Field(default=None, alias="endTime")
    purpose: Any = None
    outcome: Any = None
    coordinated_by: Any = Field(default=None, alias="coordinatedBy")


class SuccessResponse(BaseModel):
    success: bool = True


class PortalLoginResponse(SuccessResponse):
    tier: str
    token: str


class StepsResponse(BaseModel):
    steps: list[Any]


class StepResponse(SuccessResponse):
    step: dict


class SubmissionsResponse(BaseModel):
    submissions: list[Any]
    referrals: list[Any]
