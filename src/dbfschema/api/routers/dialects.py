"""Dialect listing endpoint: GET /dialects."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Request

from dbfschema.api.schemas import DialectInfo, DialectListResponse
from dbfschema.dialect import DialectRegistry

router = APIRouter()


@router.get("", response_model=DialectListResponse)
async def list_dialects(request: Request) -> DialectListResponse:
    """List all available schema dialects and their capabilities."""
    dialects = []
    for name in DialectRegistry.available():
        dialect = DialectRegistry.get(name)
        caps = asdict(dialect.capabilities)
        dialects.append(DialectInfo(name=name, capabilities=caps))
    return DialectListResponse(
        dialects=dialects, default=request.app.state.settings.default_dialect
    )
