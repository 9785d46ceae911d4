"""Question bank endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from schoolpulse.questions.schemas import QuestionResponse
from schoolpulse.storage import get_storage
from schoolpulse.storage.base import Storage

router = APIRouter(prefix="/api/questions", tags=["Questions"])


@router.get("/{role}", response_model=list[QuestionResponse])
async def get_questions_endpoint(
    role: str,
    storage: Storage = Depends(get_storage),
) -> list[QuestionResponse]:
    """Questions for a role in presentation order. Unknown roles get an empty list."""
    questions = await storage.get_questions_by_role(role)
    return [QuestionResponse.model_validate(q) for q in questions]
