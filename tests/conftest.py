"""
Shared fixtures for the GeoListings test suite.

This conftest provides:
- An in-memory SQLite engine with a seeded ``listings`` table
- Test client (httpx.AsyncClient) bound to an app built on that engine
- A listing row factory
"""
from __future__ import annotations

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from geolistings.main import create_app
from geolistings.sql import listings, metadata


def make_listing_row(
    *,
    id: str = "1",
    street: str = "123 Walnut St",
    price: int = 150000,
    bedrooms: int = 2,
    bathrooms: int = 1,
    sq_ft: int = 1100,
    lat: float = 33.36944420834164,
    lng: float = -112.11971469843907,
) -> dict[str, Any]:
    """Return a dict shaped like a ``listings`` row."""
    return {
        "id": id,
        "street": street,
        "price": price,
        "bedrooms": bedrooms,
        "bathrooms": bathrooms,
        "sq_ft": sq_ft,
        "lat": lat,
        "lng": lng,
    }


# Four listings: one inside every default range, one per excluded dimension.
SAMPLE_ROWS = [
    make_listing_row(id="1"),
    make_listing_row(id="2", street="9 Elm Ave", price=450000, bedrooms=4, bathrooms=2, sq_ft=2400,
                     lat=33.45, lng=-112.07),
    make_listing_row(id="3", street="77 Oak Rd", price=250000, bedrooms=6, bathrooms=2, sq_ft=3000,
                     lat=33.50, lng=-111.92),
    make_listing_row(id="4", street="5 Pine Ct", price=300000, bedrooms=5, bathrooms=3, sq_ft=2100,
                     lat=33.41, lng=-112.00),
]


@pytest.fixture()
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def seeded_engine(engine):
    with engine.begin() as conn:
        conn.execute(listings.insert(), SAMPLE_ROWS)
    return engine


@pytest.fixture()
def app(seeded_engine):
    return create_app(seeded_engine)


@pytest.fixture()
def client(app):
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://testserver")
