"""FastAPI application entrypoint and HTTP controllers.

This module publishes the records controller over HTTP and serves the
server-rendered Home page. Routes are intentionally thin: they call the
matching controller function and return its envelope with the envelope's
`status` as the HTTP status code.

Endpoints implemented:
- GET /records/experience
- GET /records/experience/{record_id}
- GET /records/education
- GET /records/education/{record_id}
- GET /
- GET /health
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, HTMLResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import json
import logging
import time
import uuid
from pathlib import Path
from .database import create_db_and_tables
from .controllers import records
from .components.home import render_home_page
from .schemas import ResponseData
from .config import settings

app = FastAPI(title="Portfolio Records API")
logger = logging.getLogger("portfolio.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# home.css lives here
static_dir = Path(__file__).resolve().parent.parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=static_dir), name="static")

create_db_and_tables()


def _request_context(request: Request, req_id: str, started: float) -> dict:
    return {
        "request_id": req_id,
        "path": request.url.path,
        "method": request.method,
        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
        "client": request.client.host if request.client else "unknown",
    }


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        if request.url.path.startswith("/records"):
            logger.exception(
                "request_failed %s",
                json.dumps(_request_context(request, req_id, started), ensure_ascii=True),
            )
        raise
    response.headers["X-Request-ID"] = req_id
    if request.url.path.startswith("/records"):
        context = _request_context(request, req_id, started)
        context["status_code"] = response.status_code
        logger.info("request_done %s", json.dumps(context, ensure_ascii=True))
    return response


def _envelope_response(envelope: ResponseData) -> JSONResponse:
    return JSONResponse(status_code=envelope.status, content=envelope.model_dump(mode="json"))


@app.get('/records/experience')
async def list_experience_records():
    """Return every experience record, or an informational message when there are none."""
    return _envelope_response(await records.get_all_experience_records())


@app.get('/records/experience/{record_id}')
async def get_experience_record(record_id: str):
    """Return one experience record by id."""
    return _envelope_response(await records.get_experience_record_by_id(record_id))


@app.get('/records/education')
async def list_educational_records():
    """Return every educational record, or an informational message when there are none."""
    return _envelope_response(await records.get_all_educational_records())


@app.get('/records/education/{record_id}')
async def get_educational_record(record_id: str):
    """Return one educational record by id."""
    return _envelope_response(await records.get_educational_record_by_id(record_id))


@app.get("/", response_class=HTMLResponse)
def home():
    """Portfolio landing page with the Home section."""
    return render_home_page()


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
