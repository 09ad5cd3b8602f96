from typing import Optional
import logging

from fastapi import FastAPI, Depends, Query, Request
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from cooknote.api.dependencies import get_event_log
from cooknote.domain.errors import AIMalformedResponseError, AIServiceError, ValidationError
from cooknote.events.observers import EventLog

# Routers
from cooknote.api.routes import recipes, family, catalog, cost
from cooknote.api.api_ai import router as ai_router

load_dotenv()

# Logging
logger = logging.getLogger("cooknote_app")

# Initialize FastAPI app
app = FastAPI(title="CookNote Recipe Journal API")

# Include routers
app.include_router(recipes.router)
app.include_router(family.router)
app.include_router(catalog.router)
app.include_router(cost.router)
app.include_router(ai_router)


@app.on_event("startup")
def _startup_event_log():
    """Subscribe the event log to the bus when the app starts."""
    get_event_log().start()
    logger.info("Event log started")


# -------------------- Error mapping --------------------
@app.exception_handler(ValidationError)
async def _validation_error(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(AIServiceError)
async def _ai_service_error(request: Request, exc: AIServiceError):
    kind = "malformed" if isinstance(exc, AIMalformedResponseError) else "unavailable"
    return JSONResponse(status_code=502, content={"error": str(exc), "kind": kind})


# -------------------- API --------------------
@app.get("/api/events")
def recent_events(since: Optional[int] = Query(default=None), log: EventLog = Depends(get_event_log)):
    return log.get_events(since)


@app.get("/health")
def health():
    return {"status": "ok"}
