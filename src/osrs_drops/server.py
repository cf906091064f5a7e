"""
HTTP surface for item drop lookups.

A small FastAPI app exposing GET /item-drops for the collection tracker
frontend. Input errors are answered with 400 and a static message; any
failure while building a response is logged and answered with a generic 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from osrs_drops import service
from osrs_drops.cache import DropsCache
from osrs_drops.exceptions import InvalidItemIdError

log = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def parse_item_id(raw: str) -> int:
    try:
        item_id = int(raw.strip())
    except ValueError as e:
        raise InvalidItemIdError(raw) from e
    if item_id < 0:
        raise InvalidItemIdError(raw)
    return item_id


def create_app(cache: DropsCache | None = None) -> FastAPI:
    app = FastAPI(
        title="OSRS Drops",
        description="Item drop sources scraped from the OSRS wiki",
    )
    app.add_middleware(CORSMiddleware, allow_origins=["*"])
    app.state.cache = cache if cache is not None else DropsCache()

    @app.get("/item-drops")
    def item_drops(request: Request) -> JSONResponse:
        raw = request.query_params.get("itemId")
        if raw is None:
            raw = request.query_params.get("id")
        if not raw:
            return _error(400, "Missing ?itemId=")
        try:
            item_id = parse_item_id(raw)
        except InvalidItemIdError:
            return _error(400, "Invalid itemId")

        try:
            result = service.get_item_drops(item_id, request.app.state.cache)
        except Exception as e:
            log.error("item-drops error for item %d: %s", item_id, e)
            return _error(500, "Failed to fetch item drops")

        return JSONResponse(content=result.model_dump(mode="json", by_alias=True))

    return app
