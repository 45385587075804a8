"""Metadata endpoints: the ids of every registered template, by kind."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from procgen.api.dependencies import get_generation_service
from procgen.api.service import GenerationService

router = APIRouter(prefix="/metadata", tags=["Metadata"])


@router.get("/templates")
def templates(
    service: GenerationService = Depends(get_generation_service),
) -> dict[str, list[str]]:
    return service.template_summary()
