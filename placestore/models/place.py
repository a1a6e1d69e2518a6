from sqlalchemy import JSON, Column, Float, Integer, Text
from sqlalchemy.dialects.postgresql import ARRAY

from placestore.db.database import Base

# TEXT[] on PostgreSQL, a JSON list elsewhere (SQLite in tests)
TextList = JSON(none_as_null=True).with_variant(ARRAY(Text), "postgresql")


class Place(Base):
    __tablename__ = "places"
    # keep SQLite from reusing ids of deleted rows, like SERIAL does
    __table_args__ = {"sqlite_autoincrement": True}

    internal_id = Column(Integer, primary_key=True, index=True)
    location_latitude = Column(Float)
    location_longitude = Column(Float)
    viewport_northeast_latitude = Column(Float)
    viewport_northeast_longitude = Column(Float)
    viewport_southwest_latitude = Column(Float)
    viewport_southwest_longitude = Column(Float)
    business_status = Column(Text)
    name = Column(Text)
    place_id = Column(Text, unique=True, index=True)
    reference = Column(Text)
    types = Column(TextList)
    vicinity = Column(Text)
    opening_hours = Column(JSON(none_as_null=True))

    def __init__(
        self,
        location_latitude=None,
        location_longitude=None,
        viewport_northeast_latitude=None,
        viewport_northeast_longitude=None,
        viewport_southwest_latitude=None,
        viewport_southwest_longitude=None,
        business_status=None,
        name=None,
        place_id=None,
        reference=None,
        types=None,
        vicinity=None,
        opening_hours=None,
    ):
        self.location_latitude = location_latitude
        self.location_longitude = location_longitude
        self.viewport_northeast_latitude = viewport_northeast_latitude
        self.viewport_northeast_longitude = viewport_northeast_longitude
        self.viewport_southwest_latitude = viewport_southwest_latitude
        self.viewport_southwest_longitude = viewport_southwest_longitude
        self.business_status = business_status
        self.name = name
        self.place_id = place_id
        self.reference = reference
        self.types = types
        self.vicinity = vicinity
        self.opening_hours = opening_hours

    def __repr__(self) -> str:
        return f"<Place internal_id={self.internal_id} place_id={self.place_id!r}>"
