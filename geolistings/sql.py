from sqlalchemy import MetaData, Table, Column, Integer, String, Float, bindparam
from sqlalchemy.sql import select, and_

metadata = MetaData()

# ---------- Table (read-only) ----------
listings = Table(
    "listings", metadata,
    Column("id", String, primary_key=True),
    Column("street", String),
    Column("price", Integer),
    Column("bedrooms", Integer),
    Column("bathrooms", Integer),
    Column("sq_ft", Integer),
    Column("lat", Float),
    Column("lng", Float),
)

# Bind parameter names, in the order the ranges are declared
BOUND_PARAMS = ("min_price", "max_price", "min_bed", "max_bed", "min_bath", "max_bath")

# ---------- Column list ----------

LISTING_COLS = [
    listings.c.id,
    listings.c.street,
    listings.c.price,
    listings.c.bedrooms,
    listings.c.bathrooms,
    listings.c.sq_ft,
    listings.c.lat,
    listings.c.lng,
]

# ---------- Public selector ----------

def _between(col, lo: str, hi: str):
    return col.between(bindparam(lo, type_=Integer), bindparam(hi, type_=Integer))

def listings_select():
    """
    Parameterized listings query; all three ranges are inclusive.
    Execute with a mapping holding every name in BOUND_PARAMS.
    """
    return select(*LISTING_COLS).where(
        and_(
            _between(listings.c.price, "min_price", "max_price"),
            _between(listings.c.bedrooms, "min_bed", "max_bed"),
            _between(listings.c.bathrooms, "min_bath", "max_bath"),
        )
    )
