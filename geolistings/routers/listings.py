# geolistings/routers/listings.py
import logging
import re
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response
from pydantic_core import PydanticSerializationError
from sqlalchemy.engine import Engine
from sqlalchemy.sql import Select

from geolistings.deps import get_engine, get_statement
from geolistings.exceptions import DataAccessError, InvalidFilterError, SerializationError
from geolistings.models import FeatureCollection, ListingFilters
from geolistings.repository import listings as repo

LOG = logging.getLogger("listings")

router = APIRouter(tags=["listings"])

GEOJSON_MEDIA_TYPE = "application/vnd.geo+json"
JSON_MEDIA_TYPE = "application/json"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2 ** 63), 2 ** 63 - 1

def _parse_int(param: str, raw: str) -> int:
    if not _INT_RE.fullmatch(raw):
        raise InvalidFilterError(param)
    val = int(raw)
    if not _INT64_MIN <= val <= _INT64_MAX:
        raise InvalidFilterError(param)
    return val

def resolve_filters(query: Any) -> ListingFilters:
    """
    Overlay the supplied query values on the defaults.
    Absent or empty values keep the default; a repeated key uses its first value.
    """
    vals: Dict[str, int] = {}
    for param in ListingFilters.model_fields:
        supplied = query.getlist(param)
        if supplied and supplied[0] != "":
            vals[param] = _parse_int(param, supplied[0])
    return ListingFilters(**vals)

def render(fc: FeatureCollection) -> bytes:
    try:
        return fc.model_dump_json().encode("utf-8")
    except (PydanticSerializationError, ValueError) as e:
        raise SerializationError("feature collection could not be serialized") from e

def _problem(exc: Exception) -> Response:
    LOG.error("listings request failed: %s", exc, exc_info=exc)
    return Response(
        content=f"We encountered a problem:\n{exc}",
        status_code=500,
        media_type="text/plain",
    )

@router.get("/listings")
def list_listings(
    request: Request,
    engine: Engine = Depends(get_engine),
    stmt: Select = Depends(get_statement),
):
    """
    GeoJSON FeatureCollection of the listings inside the price, bedroom and
    bathroom ranges. A `json` key in the query string switches the
    Content-Type to plain JSON; the body is the same.
    """
    try:
        filters = resolve_filters(request.query_params)
    except InvalidFilterError as e:
        return Response(content=str(e), status_code=400, media_type="text/plain")

    # no connection is checked out until the filters are valid
    try:
        with repo.connect(engine) as conn:
            body = render(repo.find_feature_collection(conn, stmt, filters))
    except (DataAccessError, SerializationError) as e:
        return _problem(e)

    media_type = JSON_MEDIA_TYPE if "json" in request.query_params else GEOJSON_MEDIA_TYPE
    return Response(content=body, media_type=media_type)
