"""Schema generation endpoint: POST /schema."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from dbfschema.api.schemas import SchemaRequest, SchemaResponse
from dbfschema.dialect import UnsupportedDialectError
from dbfschema.service.generator import generate_table_schema

router = APIRouter()


@router.post("", response_model=SchemaResponse, response_model_by_alias=True)
async def generate(body: SchemaRequest, request: Request) -> SchemaResponse:
    """Render the posted table descriptor in the requested dialect."""
    dialect = body.dialect
    if dialect is None:
        dialect = request.app.state.settings.default_dialect
    try:
        text = generate_table_schema(body.table, dialect, fragment_only=body.fragment_only)
    except UnsupportedDialectError as exc:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "UNSUPPORTED_DIALECT",
                "message": str(exc),
                "available": exc.available,
            },
        ) from None
    return SchemaResponse(schema_text=text, dialect=dialect)
