"""textfathom: readability statistics for English text.

Quick start::

    from textfathom import AnalysisSession

    session = AnalysisSession()
    session.analyse_file("sample.txt")
    print(session.report())
"""

from __future__ import annotations

__version__ = "1.0.0"

from textfathom.core.session import AnalysisSession  # noqa: E402

__all__ = ["__version__", "AnalysisSession"]
