"""HTTP API for the ATS engine."""
from ats_engine.api.routes import router

__all__ = ["router"]
