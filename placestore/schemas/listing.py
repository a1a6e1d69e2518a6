"""
Listing Schemas

Pydantic models for the nearby-search listing shape returned by the upstream
places provider, and the mapping from a listing to a place record.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from placestore.schemas.place import PlaceCreate


class LatLng(BaseModel):
    """A coordinate pair as sent upstream (``lat``/``lng`` keys)."""

    latitude: float = Field(..., alias="lat")
    longitude: float = Field(..., alias="lng")

    model_config = ConfigDict(populate_by_name=True)


class Viewport(BaseModel):
    northeast: LatLng
    southwest: LatLng


class Geometry(BaseModel):
    location: LatLng
    viewport: Optional[Viewport] = None


class PlaceListing(BaseModel):
    """One result of a nearby search."""

    business_status: Optional[str] = None
    geometry: Optional[Geometry] = None
    name: Optional[str] = None
    place_id: Optional[str] = None
    reference: Optional[str] = None
    types: Optional[List[str]] = None
    vicinity: Optional[str] = None
    opening_hours: Optional[Dict[str, Any]] = None

    def to_place_create(self) -> PlaceCreate:
        """Flatten the nested geometry into a PlaceCreate."""
        coords: Dict[str, float] = {}
        if self.geometry is not None:
            coords["location_latitude"] = self.geometry.location.latitude
            coords["location_longitude"] = self.geometry.location.longitude
            viewport = self.geometry.viewport
            if viewport is not None:
                coords["viewport_northeast_latitude"] = viewport.northeast.latitude
                coords["viewport_northeast_longitude"] = viewport.northeast.longitude
                coords["viewport_southwest_latitude"] = viewport.southwest.latitude
                coords["viewport_southwest_longitude"] = viewport.southwest.longitude

        return PlaceCreate(
            business_status=self.business_status,
            name=self.name,
            place_id=self.place_id,
            reference=self.reference,
            types=self.types,
            vicinity=self.vicinity,
            opening_hours=self.opening_hours,
            **coords,
        )


class NearbySearchResponse(BaseModel):
    results: List[PlaceListing] = Field(default_factory=list)
    next_page_token: Optional[str] = None
