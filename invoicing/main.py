# invoicing/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from invoicing.api.customers import router as customers_router
from invoicing.api.invoices import router as invoices_router
from invoicing.core.exceptions import register_exception_handlers
from invoicing.core.logging_config import configure_logging
from invoicing.db.engine import get_engine
from invoicing.db.schema import create_schema

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # create_all only creates tables that are missing
    create_schema(get_engine())
    logger.info("Database schema ready")
    yield


app = FastAPI(
    title="Invoicing API",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)


@app.get("/health")
def health_check():
    return {"status": "ok"}


app.include_router(customers_router)
app.include_router(invoices_router)
