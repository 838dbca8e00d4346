"""API request/response Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dbfschema.models.table import Table


class SchemaRequest(BaseModel):
    """Request body for POST /schema."""

    table: Table
    dialect: str | None = Field(None, description="Target dialect; server default when omitted")
    fragment_only: bool = False


class SchemaResponse(BaseModel):
    """Response body for POST /schema."""

    schema_text: str = Field(alias="schema")
    dialect: str

    model_config = {"populate_by_name": True}


class DialectInfo(BaseModel):
    """Information about a supported dialect."""

    name: str
    capabilities: dict[str, bool] = {}


class DialectListResponse(BaseModel):
    """Response for GET /dialects."""

    dialects: list[DialectInfo] = []
    default: str = ""


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""
