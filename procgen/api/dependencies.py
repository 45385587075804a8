"""FastAPI dependency injection: provides the GenerationService singleton."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException

from procgen.api.service import GenerationService
from procgen.core.errors import GenerationError, NotInitializedError, UnknownTemplateError

_service: GenerationService | None = None


def set_generation_service(service: GenerationService | None) -> None:
    global _service
    _service = service


def get_generation_service() -> GenerationService:
    if _service is None:
        raise RuntimeError("GenerationService not initialized, server not started correctly.")
    return _service


@contextmanager
def generation_errors() -> Iterator[None]:
    """Translate library errors into HTTP errors: 404 unknown ids, 503 not initialized, 400 otherwise."""
    try:
        yield
    except UnknownTemplateError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except NotInitializedError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except GenerationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
