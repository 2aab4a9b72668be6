"""
Request/response schemas for the textfathom HTTP API.

The analysis response itself is the shared
:class:`~textfathom.core.contracts.summary.AnalysisSummary` contract; this
module only adds the request envelope and the small report/health payloads.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class AnalyseRequest(BaseModel):
    """Body of `POST /analyse` and `POST /report`."""

    text: str = Field(..., description="Block of English text; may contain line feeds.")
    include_words: bool = Field(
        default=False, description="Include the unique word table in the response."
    )


class ReportResponse(BaseModel):
    """Fixed-layout text report."""

    report: str


class HealthResponse(BaseModel):
    """Liveness payload."""

    status: str = "ok"
    environment: str
    version: str
