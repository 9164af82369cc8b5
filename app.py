# app.py
"""
Thin entrypoint for the web app.

Usage example:
    uvicorn app:app --reload
"""

from customer_hub.main import app  # re-export FastAPI instance
