"""User endpoints: registration, lookup, eligibility, history."""

from __future__ import annotations

from datetime import timedelta

from fastapi import APIRouter, Depends

from schoolpulse.config import get_settings
from schoolpulse.storage import get_storage
from schoolpulse.storage.base import Storage
from schoolpulse.users.schemas import EligibilityResponse, UserAnswerResponse, UserCreateRequest, UserResponse
from schoolpulse.users.service import check_eligibility, find_user_by_access_code, get_user_or_404, register_user

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("", response_model=UserResponse)
async def create_user_endpoint(
    body: UserCreateRequest,
    storage: Storage = Depends(get_storage),
) -> UserResponse:
    """Register a respondent. The access code is generated unless supplied."""
    user = await register_user(
        storage,
        school_id=body.school_id,
        role=body.role,
        access_code=body.access_code,
        max_attempts=get_settings().access_code_max_attempts,
    )
    await storage.commit()
    return UserResponse.model_validate(user)


# Declared before /{user_id} routes.
@router.get("/access-code/{access_code}", response_model=UserResponse)
async def get_user_by_access_code_endpoint(
    access_code: str,
    storage: Storage = Depends(get_storage),
) -> UserResponse:
    """Resume a session with a 4-character access code."""
    return UserResponse.model_validate(await find_user_by_access_code(storage, access_code))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user_endpoint(
    user_id: str,
    storage: Storage = Depends(get_storage),
) -> UserResponse:
    """Get a user by id."""
    return UserResponse.model_validate(await get_user_or_404(storage, user_id))


@router.get("/{user_id}/can-take-assessment", response_model=EligibilityResponse)
async def can_take_assessment_endpoint(
    user_id: str,
    storage: Storage = Depends(get_storage),
) -> EligibilityResponse:
    """Whether the user is outside the assessment cooldown."""
    cooldown = timedelta(days=get_settings().assessment_cooldown_days)
    eligible, next_at = await check_eligibility(storage, user_id, cooldown=cooldown)
    return EligibilityResponse(can_take_assessment=eligible, next_eligible_at=next_at)


@router.get("/{user_id}/responses", response_model=list[UserAnswerResponse])
async def get_user_responses_endpoint(
    user_id: str,
    storage: Storage = Depends(get_storage),
) -> list[UserAnswerResponse]:
    """All answers the user has submitted, oldest first."""
    responses = await storage.get_responses_by_user(user_id)
    return [UserAnswerResponse.model_validate(r) for r in responses]
