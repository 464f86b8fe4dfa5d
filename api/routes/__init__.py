"""
API routes package for JSON Diff Pro.
"""
from api.routes import comparison, formatting

__all__ = ["comparison", "formatting"]
