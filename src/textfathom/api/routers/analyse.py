"""
API Routes for text analysis.

Endpoints
---------
- `POST /analyse`: Return the statistics and indices of a text block.
- `POST /report`: Return the fixed-layout text report of a text block.

Design Decisions
----------------
- **Synchronous**: Analysis is a linear scan, so results are returned in the
  response instead of going through a job queue.
- **Isolation**: Every request gets its own :class:`AnalysisSession`; no
  state is shared between requests.
"""

from __future__ import annotations

from fastapi import APIRouter

from textfathom.api.schemas import AnalyseRequest, ReportResponse
from textfathom.core.contracts.summary import AnalysisSummary
from textfathom.core.session import AnalysisSession

router = APIRouter(tags=["Analysis"])


def _analyse(request: AnalyseRequest) -> AnalysisSession:
    session = AnalysisSession()
    session.analyse_block(request.text)
    return session


@router.post(
    "/analyse",
    response_model=AnalysisSummary,
    summary="Analyse a block of text",
)
def analyse_text(request: AnalyseRequest) -> AnalysisSummary:
    """Count characters, words, sentences, lines and paragraphs; derive the indices."""
    return _analyse(request).summary(include_words=request.include_words)


@router.post(
    "/report",
    response_model=ReportResponse,
    summary="Render the text report for a block of text",
)
def report_text(request: AnalyseRequest) -> ReportResponse:
    """Return the same report the CLI prints."""
    return ReportResponse(report=_analyse(request).report())


__all__ = ["router"]
