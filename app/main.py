import logging
from fastapi import FastAPI
from app.api.exceptions import register_error_handler
from app.api.v1.routes import locations, categories, events, tickets, orders
from app.core.logging_config import configure_logging
from app.core.middleware.http_ctx import HttpContextMiddleware
from app.core.redis import create_redis

logger = logging.getLogger("app")


async def lifespan(app: FastAPI):
    configure_logging()
    r = await create_redis()
    app.state.redis = r
    if r is None:
        logger.info("REDIS_URL not set - audit records go to the log only")
    try:
        yield
    finally:
        if r is not None:
            await r.aclose()


app = FastAPI(title="Event Ticketing Admin", lifespan=lifespan)
app.add_middleware(HttpContextMiddleware, request_id_header="X-Request-ID")
register_error_handler(app)
app.include_router(locations.router)
app.include_router(categories.router)
app.include_router(events.router)
app.include_router(tickets.router)
app.include_router(orders.router)


@app.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}
