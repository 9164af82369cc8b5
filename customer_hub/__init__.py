# customer_hub/__init__.py
"""
Package entrypoint for the FastAPI application.

This lets us run:
    uvicorn customer_hub:app --reload
"""

from .main import app

__all__ = ["app"]
