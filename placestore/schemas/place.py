"""
Place Schemas

Pydantic models for creating, updating and reading place records.
Values are accepted as-is: coordinates are not range-checked and
business_status is free text.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class PlaceBase(BaseModel):
    location_latitude: Optional[float] = None
    location_longitude: Optional[float] = None
    viewport_northeast_latitude: Optional[float] = None
    viewport_northeast_longitude: Optional[float] = None
    viewport_southwest_latitude: Optional[float] = None
    viewport_southwest_longitude: Optional[float] = None
    business_status: Optional[str] = None
    name: Optional[str] = None
    place_id: Optional[str] = None
    reference: Optional[str] = None
    types: Optional[List[str]] = None
    vicinity: Optional[str] = None
    opening_hours: Optional[Dict[str, Any]] = None

    def location_in_viewport(self) -> Optional[bool]:
        """
        Check whether the location point lies inside the viewport box.

        The store does not enforce this; callers that need it can check here.
        A viewport whose southwest longitude is east of its northeast
        longitude is taken to cross the antimeridian.

        Returns:
            None if any coordinate is missing, otherwise whether the point
            is inside the box (edges included)
        """
        coords = (
            self.location_latitude,
            self.location_longitude,
            self.viewport_northeast_latitude,
            self.viewport_northeast_longitude,
            self.viewport_southwest_latitude,
            self.viewport_southwest_longitude,
        )
        if any(c is None for c in coords):
            return None
        lat, lng, ne_lat, ne_lng, sw_lat, sw_lng = coords

        if not sw_lat <= lat <= ne_lat:
            return False
        if sw_lng <= ne_lng:
            return sw_lng <= lng <= ne_lng
        return lng >= sw_lng or lng <= ne_lng


class PlaceCreate(PlaceBase):
    pass


class PlaceUpdate(PlaceBase):
    """Partial update. Only fields that are explicitly set are written."""


class PlaceResponse(PlaceBase):
    internal_id: int

    model_config = ConfigDict(from_attributes=True)
