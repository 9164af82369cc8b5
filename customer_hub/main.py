# customer_hub/main.py

from fastapi import FastAPI

from customer_hub.api.customers import router as customers_router
from customer_hub.api.importer import router as import_router
from customer_hub.config import load_settings
from customer_hub.logging_setup import configure_logging
from customer_hub.web.pages import router as pages_router

configure_logging(load_settings().log_level)

app = FastAPI(
    title="Customer Hub",
    version="0.1.0",
)

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(pages_router)
app.include_router(customers_router)
app.include_router(import_router)
