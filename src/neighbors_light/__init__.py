"""
Neighbors Light - case management views.

Derived-state layer for a referral, intake and bed tracking service,
with a Streamlit dashboard on top.
"""

__version__ = "0.1.0"

from neighbors_light.backend.interface import Backend, BackendError
from neighbors_light.views.pipeline import build_referral_rows
from neighbors_light.views.risk import build_risk_overview

__all__ = ["Backend", "BackendError", "build_referral_rows", "build_risk_overview", "__version__"]
