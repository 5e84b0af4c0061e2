from typing import Dict, List, Literal, Tuple
from pydantic import BaseModel, ConfigDict, Field, FiniteFloat

class ListingFilters(BaseModel):
    """Inclusive bounds applied to price, bedrooms and bathrooms."""
    model_config = ConfigDict(frozen=True)

    min_price: int = 0
    max_price: int = 300000
    min_bed: int = 0
    max_bed: int = 5
    min_bath: int = 0
    max_bath: int = 3

    def as_params(self) -> Dict[str, int]:
        return self.model_dump()

# ---------- GeoJSON pieces ----------

class Geometry(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["Point"] = "Point"
    # [longitude, latitude]; NaN and infinity are not valid GeoJSON numbers
    coordinates: Tuple[FiniteFloat, FiniteFloat]

class Properties(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    street: str
    price: int
    bedrooms: int
    bathrooms: int
    sq_ft: int

class Feature(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["Feature"] = "Feature"
    geometry: Geometry
    properties: Properties

class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: List[Feature] = Field(default_factory=list)
