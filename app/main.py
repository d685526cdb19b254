# app/main.py
from __future__ import annotations

import logging
import socket
from functools import lru_cache
from typing import List, Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.settings import settings
from backend.errors import BackendConnectionError, ConfigurationError, InvalidRestaurantName, RestaurantNotFound
from backend.lookup import RestaurantCountLookup
from backend.store_factory import get_lookup

logging.basicConfig(
    level=getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
LOG = logging.getLogger(__name__)

# the four restaurants on the yelb ballot
RESTAURANTS = ["ihop", "chipotle", "outback", "bucadibeppo"]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Authorization,Accepts,Content-Type,X-CSRF-Token,X-Requested-With",
    "Access-Control-Allow-Methods": "GET",
}

# ---------- App + globals ----------
app = FastAPI(title="Yelb AppServer API")


@lru_cache(maxsize=1)
def lookup_dep() -> RestaurantCountLookup:
    return get_lookup(settings)


def _resolve_lookup(request: Request) -> RestaurantCountLookup:
    # resolved per branch so hostname and bad paths work without a store
    factory = request.app.dependency_overrides.get(lookup_dep, lookup_dep)
    return factory()


# ---------- helpers ----------
def normalize_api_path(api_path: Optional[str]) -> str:
    """'//////api/test' and 'api/test' both become '/api/test'."""
    parts = [p for p in (api_path or "").split("/") if p]
    return "/" + "/".join(parts)


def get_hostname() -> str:
    try:
        return socket.gethostname()
    except OSError as e:
        LOG.error("unable to get hostname - %s", e)
        return ""


def get_votes(lookup: RestaurantCountLookup) -> List[dict]:
    votes = []
    for name in RESTAURANTS:
        try:
            value = int(lookup.lookup_count(name))
        except RestaurantNotFound:
            value = 0
        votes.append({"name": name, "value": value})
    return votes


# ---------- middleware / error mapping ----------
@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    for k, v in CORS_HEADERS.items():
        response.headers[k] = v
    return response


@app.exception_handler(RestaurantNotFound)
async def _not_found(request: Request, exc: RestaurantNotFound):
    return JSONResponse({"error": str(exc)}, status_code=404)


@app.exception_handler(BackendConnectionError)
async def _backend_down(request: Request, exc: BackendConnectionError):
    return JSONResponse({"error": str(exc)}, status_code=503)


@app.exception_handler(ConfigurationError)
async def _misconfigured(request: Request, exc: ConfigurationError):
    LOG.error("configuration error: %s", exc)
    return JSONResponse({"error": str(exc)}, status_code=500)


@app.exception_handler(InvalidRestaurantName)
async def _bad_request(request: Request, exc: InvalidRestaurantName):
    return JSONResponse({"error": str(exc)}, status_code=400)


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return JSONResponse(
            {"error": f"'{request.method}' is an invalid method.  only GET supported."},
            status_code=400,
        )
    return await http_exception_handler(request, exc)


# ---------- api ----------
@app.get("/api/hostname", response_class=PlainTextResponse)
def hostname():
    return get_hostname()


@app.get("/api/getvotes")
def getvotes(lookup: RestaurantCountLookup = Depends(lookup_dep)):
    return JSONResponse(get_votes(lookup))


@app.get("/api/restaurant/{name}", response_class=PlainTextResponse)
def restaurant_count(name: str, lookup: RestaurantCountLookup = Depends(lookup_dep)):
    return lookup.lookup_count(name)


# function deployments only route "/", so the real path arrives as ?api_path=
@app.get("/")
def dispatch(request: Request, api_path: Optional[str] = Query(None)):
    path = normalize_api_path(api_path)
    if path == "/api/hostname":
        return PlainTextResponse(get_hostname())
    if path == "/api/getvotes":
        return JSONResponse(get_votes(_resolve_lookup(request)))
    if path.startswith("/api/restaurant/"):
        lookup = _resolve_lookup(request)
        return PlainTextResponse(lookup.lookup_count(path[len("/api/restaurant/"):]))
    return JSONResponse({"error": f"'{path}' is an invalid api_path"}, status_code=400)


if __name__ == "__main__":
    import uvicorn

    # yelb clients expect the appserver on 4567
    uvicorn.run("app.main:app", host="0.0.0.0", port=4567)
