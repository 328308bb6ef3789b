"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the groups backend.
Controllers are intentionally thin: they parse the request, delegate to
`services.GroupService` and return JSON, or a plain-text body on
failure.

Endpoints implemented:
- GET /api/groups
- GET /api/students
- POST /api/groups
- GET /api/groups/{id}
- DELETE /api/groups/{id}
"""

from fastapi import FastAPI, Depends, Request
from fastapi.responses import PlainTextResponse, Response
from fastapi.middleware.cors import CORSMiddleware
import json
import logging
import re
import time
import uuid
from typing import List, Optional
from . import models, schemas, services
from .store import GroupStore, get_store
from .config import settings

app = FastAPI(title="Groups API")
logger = logging.getLogger("app.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

# Any origin may call the API (browser frontends served from elsewhere).
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|(\d+))")


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.exception(
            "request_failed %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": elapsed_ms,
                    "client": request.client.host if request.client else "unknown",
                },
                ensure_ascii=True,
            ),
        )
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    if request.url.path.startswith("/api"):
        logger.info(
            "request_done %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code,
                    "duration_ms": elapsed_ms,
                    "client": request.client.host if request.client else "unknown",
                },
                ensure_ascii=True,
            ),
        )
    return response


def parse_group_id(raw: str) -> Optional[int]:
    """Parse the leading integer of a path segment.

    `"12abc"` gives 12 and `"1.5"` gives 1. A `0x`/`0X` prefix switches
    to base 16 (`"0x1f"` gives 31). A segment without leading digits, or
    a bare `0x`, gives `None`, which matches no stored group.
    """
    m = _LEADING_INT.match(raw)
    if not m:
        return None
    sign, hex_digits, dec_digits = m.groups()
    if dec_digits is not None:
        value = int(dec_digits)
    elif hex_digits:
        value = int(hex_digits, 16)
    else:
        return None
    return -value if sign == "-" else value


def get_group_service(store: GroupStore = Depends(get_store)) -> services.GroupService:
    return services.GroupService(store)


@app.get('/api/groups', response_model=List[schemas.GroupSummary])
def list_groups(svc: services.GroupService = Depends(get_group_service)):
    """List every group as a summary, in creation order."""
    return svc.list_summaries()


@app.get('/api/students', response_model=List[models.Student])
def list_students(svc: services.GroupService = Depends(get_group_service)):
    """List every student across all groups.

    Students are ordered by their group's creation order, then by their
    position inside the group.
    """
    return svc.list_students()


@app.post('/api/groups', response_model=schemas.GroupSummary)
def create_group(payload: schemas.GroupCreateIn, svc: services.GroupService = Depends(get_group_service)):
    """Create a group and its students from a list of member names.

    Returns the new group's summary. Responds 400 with a plain-text
    message when the first member name is empty.
    """
    try:
        return svc.create_group(payload.group_name, payload.members)
    except services.InvalidMembers as e:
        return PlainTextResponse(str(e), status_code=400)


@app.delete('/api/groups/{group_id}', status_code=204)
def delete_group(group_id: str, svc: services.GroupService = Depends(get_group_service)):
    """Delete a group and its students. Responds 204 with an empty body."""
    try:
        svc.delete_group(parse_group_id(group_id))
    except services.GroupNotFound as e:
        return PlainTextResponse(str(e), status_code=404)
    return Response(status_code=204)


@app.get('/api/groups/{group_id}', response_model=models.Group)
def get_group(group_id: str, svc: services.GroupService = Depends(get_group_service)):
    """Return a single group with full student records."""
    try:
        return svc.get_group(parse_group_id(group_id))
    except services.GroupNotFound as e:
        return PlainTextResponse(str(e), status_code=404)


def run():
    """Serve the application with uvicorn on the configured host/port."""
    import uvicorn
    logger.info("Server running on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == '__main__':
    run()
