import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.exceptions import register_exception_handlers
from .api.routes import router as accounts_router, transfer_router
from .core.config import get_settings
from .core.db import get_engine, init_db

settings = get_settings()
logging.basicConfig(level=settings.log_level, format=settings.log_format)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(
        "bank.startup",
        extra={"database": get_engine().url.render_as_string(hide_password=True)},
    )
    yield
    logger.info("bank.shutdown")

app = FastAPI(
    title=settings.app_name,
    description="Register accounts and move money between them.",
    lifespan=lifespan,
)

app.include_router(accounts_router)
app.include_router(transfer_router)
register_exception_handlers(app)

@app.get("/health", tags=["health"])
def read_health() -> dict[str, str]:
    return {"status": "ok"}
