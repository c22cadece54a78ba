import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager

from app.config import settings
from app.context import build_order_service
from app.database import create_db_and_tables, engine
from app.routes import orders


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level)
    # Run DB creation ONLY in local
    if settings.ENV == "local":
        create_db_and_tables()
    app.state.order_service = build_order_service(engine)
    yield

app = FastAPI(title="Bookstore Orders API", lifespan=lifespan)

app.include_router(orders.router, prefix="/orders", tags=["Orders"])


@app.get("/")
def root():
    return {
        "order_endpoints": [
            "/orders", "/orders/{order_id}"
        ]
    }
