import logging
from contextlib import contextmanager
from typing import Any, Iterable, Iterator

from pydantic import ValidationError
from sqlalchemy.engine import Connection, Engine, Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import Select

from geolistings.exceptions import DataAccessError
from geolistings.models import (
    Feature, FeatureCollection, Geometry, ListingFilters, Properties,
)

LOG = logging.getLogger("repo")

@contextmanager
def connect(engine: Engine) -> Iterator[Connection]:
    """Check a connection out of the pool; a failed checkout is a DataAccessError."""
    try:
        conn = engine.connect()
    except SQLAlchemyError as e:
        raise DataAccessError("database connection failed") from e
    try:
        yield conn
    finally:
        conn.close()

def query_listings(conn: Connection, stmt: Select, filters: ListingFilters) -> Result:
    """Run the listings statement with the six inclusive bounds bound as parameters."""
    params = filters.as_params()
    LOG.debug("listings query bounds: %s", params)
    try:
        return conn.execute(stmt, params)
    except SQLAlchemyError as e:
        raise DataAccessError("listings query failed") from e

def _row_to_feature(row: Any) -> Feature:
    m = row._mapping
    return Feature(
        geometry=Geometry(coordinates=(m["lng"], m["lat"])),
        properties=Properties(
            id=str(m["id"]),
            street=m["street"],
            price=m["price"],
            bedrooms=m["bedrooms"],
            bathrooms=m["bathrooms"],
            sq_ft=m["sq_ft"],
        ),
    )

def to_feature_collection(rows: Iterable[Any]) -> FeatureCollection:
    """
    Single pass over the cursor: one Point feature per row.
    Rows that cannot be represented (NULL columns, cursor failures)
    surface as DataAccessError, like a failed scan.
    """
    features = []
    try:
        for row in rows:
            features.append(_row_to_feature(row))
    except SQLAlchemyError as e:
        raise DataAccessError("reading listings rows failed") from e
    except ValidationError as e:
        raise DataAccessError("listing row has unusable values") from e
    return FeatureCollection(features=features)

def find_feature_collection(conn: Connection, stmt: Select, filters: ListingFilters) -> FeatureCollection:
    fc = to_feature_collection(query_listings(conn, stmt, filters))
    LOG.info("listings matched: %s", len(fc.features))
    return fc
