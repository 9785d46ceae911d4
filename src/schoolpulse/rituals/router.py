"""Micro-ritual endpoints: catalogue, completions, attempts."""

from __future__ import annotations

from datetime import timedelta

from fastapi import APIRouter, Depends

from schoolpulse.config import get_settings
from schoolpulse.rituals.schemas import (
    AttemptCreateRequest,
    AttemptResponse,
    CompletionCreateRequest,
    CompletionResponse,
    MicroRitualResponse,
)
from schoolpulse.rituals.service import complete_micro_ritual, record_attempt
from schoolpulse.storage import get_storage
from schoolpulse.storage.base import Storage

router = APIRouter(prefix="/api", tags=["Micro-rituals"])


# ── Catalogue ──


@router.get("/micro-rituals", response_model=list[MicroRitualResponse])
async def list_micro_rituals_endpoint(
    storage: Storage = Depends(get_storage),
) -> list[MicroRitualResponse]:
    return [MicroRitualResponse.model_validate(r) for r in await storage.list_micro_rituals()]


@router.get("/micro-rituals/category/{category}", response_model=list[MicroRitualResponse])
async def micro_rituals_by_category_endpoint(
    category: str,
    storage: Storage = Depends(get_storage),
) -> list[MicroRitualResponse]:
    rituals = await storage.get_micro_rituals_by_category(category)
    return [MicroRitualResponse.model_validate(r) for r in rituals]


@router.get("/micro-rituals/role/{role}", response_model=list[MicroRitualResponse])
async def micro_rituals_by_role_endpoint(
    role: str,
    storage: Storage = Depends(get_storage),
) -> list[MicroRitualResponse]:
    """Rituals whose applicable roles include ``role``."""
    rituals = await storage.get_micro_rituals_by_role(role)
    return [MicroRitualResponse.model_validate(r) for r in rituals]


# ── Completions ──


@router.post("/micro-ritual-completions", response_model=CompletionResponse)
async def create_completion_endpoint(
    body: CompletionCreateRequest,
    storage: Storage = Depends(get_storage),
) -> CompletionResponse:
    """Mark a ritual as completed; the school score is recalculated."""
    completion = await complete_micro_ritual(
        storage,
        body.user_id,
        body.micro_ritual_id,
        window=timedelta(days=get_settings().score_window_days),
    )
    await storage.commit()
    return CompletionResponse.model_validate(completion)


@router.get("/users/{user_id}/micro-ritual-completions", response_model=list[CompletionResponse])
async def list_completions_endpoint(
    user_id: str,
    storage: Storage = Depends(get_storage),
) -> list[CompletionResponse]:
    completions = await storage.get_micro_ritual_completions_by_user(user_id)
    return [CompletionResponse.model_validate(c) for c in completions]


# ── Attempts ──


@router.post("/micro-ritual-attempts", response_model=AttemptResponse)
async def create_attempt_endpoint(
    body: AttemptCreateRequest,
    storage: Storage = Depends(get_storage),
) -> AttemptResponse:
    attempt = await record_attempt(storage, body.user_id, body.attempted_rituals)
    await storage.commit()
    return AttemptResponse.model_validate(attempt)


@router.get("/users/{user_id}/micro-ritual-attempts", response_model=list[AttemptResponse])
async def list_attempts_endpoint(
    user_id: str,
    storage: Storage = Depends(get_storage),
) -> list[AttemptResponse]:
    attempts = await storage.get_micro_ritual_attempts_by_user(user_id)
    return [AttemptResponse.model_validate(a) for a in attempts]
