# -*- coding: utf-8 -*-
"""
Standalone Data-Quality Checker for the listings table (read-only)

Checks:
  • listings not empty
  • no NULLs in the columns /listings serves (a NULL row fails the endpoint)
  • coordinates within range (lat in [-90, 90], lng in [-180, 180])
  • no negative price / bedrooms / bathrooms / sq_ft
  • at least one listing inside the default filter window

Exit codes:
  0 = OK
  1 = DQ issues found
  2 = configuration/connection error
"""

import os
import sys
from contextlib import closing

import psycopg2
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from geolistings.models import ListingFilters

DATABASE_URL = os.getenv("DATABASE_URL")

SERVED_COLUMNS = ("id", "street", "price", "bedrooms", "bathrooms", "sq_ft", "lat", "lng")

def libpq_url(url: str) -> str:
    """Strip the SQLAlchemy driver suffix (postgresql+psycopg2 -> postgresql) for psycopg2."""
    return make_url(url).set(drivername="postgresql").render_as_string(hide_password=False)

def _count(conn, where, params=()):
    with conn.cursor() as cur:
        cur.execute(f"SELECT COUNT(*) FROM listings WHERE {where}", params)
        return cur.fetchone()[0]

def collect_issues(conn):
    issues = []

    # 1) Non-empty?
    if not _count(conn, "TRUE"):
        issues.append("listings is empty.")
        return issues

    # 2) NULLs in served columns
    nulls = _count(conn, " OR ".join(f"{c} IS NULL" for c in SERVED_COLUMNS))
    if nulls:
        issues.append(f"{nulls} listing(s) have NULL in a served column; /listings fails when it matches them.")

    # 3) Coordinate ranges (catches swapped lat/lng too)
    bad_coords = _count(conn, "lat NOT BETWEEN -90 AND 90 OR lng NOT BETWEEN -180 AND 180")
    if bad_coords:
        issues.append(f"{bad_coords} listing(s) have coordinates out of range.")

    # 4) Negative scalar values
    negatives = _count(conn, "price < 0 OR bedrooms < 0 OR bathrooms < 0 OR sq_ft < 0")
    if negatives:
        issues.append(f"{negatives} listing(s) have negative price/bedrooms/bathrooms/sq_ft.")

    # 5) Default window coverage
    d = ListingFilters()
    in_window = _count(
        conn,
        "price BETWEEN %s AND %s AND bedrooms BETWEEN %s AND %s AND bathrooms BETWEEN %s AND %s",
        (d.min_price, d.max_price, d.min_bed, d.max_bed, d.min_bath, d.max_bath),
    )
    if not in_window:
        issues.append("No listing falls inside the default filter window; an unfiltered /listings is empty.")

    return issues

def report(issues) -> int:
    """Print the outcome and return the exit code."""
    if not issues:
        print("✅ listings passed all data-quality checks")
        return 0
    print(f"❌ listings failed {len(issues)} data-quality check(s):")
    for issue in issues:
        print(" -", issue)
    return 1

def run_checks():
    if not DATABASE_URL:
        print("ERROR: Set DATABASE_URL", file=sys.stderr)
        sys.exit(2)

    try:
        with closing(psycopg2.connect(libpq_url(DATABASE_URL))) as conn:
            issues = collect_issues(conn)
    except (ArgumentError, psycopg2.Error) as e:
        print(f"ERROR: DQ checks could not run: {e}", file=sys.stderr)
        sys.exit(2)

    sys.exit(report(issues))

if __name__ == "__main__":
    run_checks()
