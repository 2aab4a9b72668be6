"""Core package for textfathom.

Re-exports nothing; import from the submodules directly, e.g.:
    from textfathom.core.session import AnalysisSession
    from textfathom.core.settings import settings, load_settings, Settings, get_logger
"""

from __future__ import annotations

__all__ = ["__doc__"]
