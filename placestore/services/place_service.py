"""
Place service for creating, reading, updating and deleting place records.
"""

import logging
from typing import Iterable

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from placestore.exceptions import (
    PlaceNotFoundError,
    PlaceStoreError,
    PlaceUniquenessError,
)
from placestore.models.place import Place
from placestore.schemas.listing import PlaceListing
from placestore.schemas.place import PlaceCreate, PlaceUpdate

logger = logging.getLogger(__name__)

# Dialects whose INSERT supports ON CONFLICT DO NOTHING
_CONFLICT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class PlaceService:
    """Service for handling place operations."""

    @staticmethod
    def get_place(db: Session, internal_id: int) -> Place:
        """
        Get a place by its internal ID.

        Args:
            db: Database session
            internal_id: Internal (surrogate) ID of the place

        Returns:
            Place object

        Raises:
            PlaceNotFoundError: If no place has that ID
        """
        place = db.query(Place).filter(Place.internal_id == internal_id).first()
        if place is None:
            logger.warning("Place with internal_id=%s not found", internal_id)
            raise PlaceNotFoundError(internal_id)
        return place

    @staticmethod
    def get_place_by_place_id(db: Session, place_id: str) -> Place:
        """
        Get a place by its external place_id. Only exact matches count.

        Args:
            db: Database session
            place_id: External identifier from the upstream source

        Returns:
            Place object

        Raises:
            PlaceNotFoundError: If no place has that place_id
        """
        if place_id is None:
            # an absent place_id identifies nothing
            raise PlaceNotFoundError(place_id, field="place_id")

        place = db.query(Place).filter(Place.place_id == place_id).first()
        if place is None:
            logger.warning("Place with place_id=%r not found", place_id)
            raise PlaceNotFoundError(place_id, field="place_id")
        return place

    @staticmethod
    def create_place(db: Session, place_in: PlaceCreate) -> Place:
        """
        Create a new place. Every field is optional.

        Args:
            db: Database session
            place_in: Place creation data

        Returns:
            Created Place object with its internal_id assigned

        Raises:
            PlaceUniquenessError: If place_id is already in use
        """
        place = Place(**place_in.model_dump())
        db.add(place)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning("Rejected duplicate place_id=%r", place_in.place_id)
            raise PlaceUniquenessError(place_in.place_id) from e
        db.refresh(place)

        logger.info(
            "Created place internal_id=%s place_id=%r", place.internal_id, place.place_id
        )
        return place

    @classmethod
    def update_place(
        cls, db: Session, internal_id: int, place_in: PlaceUpdate
    ) -> Place:
        """
        Update a place in place, writing only the fields that were supplied.

        A field explicitly set to None is cleared; fields left unset keep
        their stored value.

        Args:
            db: Database session
            internal_id: Internal ID of the place to update
            place_in: Partial place data

        Returns:
            Updated Place object

        Raises:
            PlaceNotFoundError: If no place has that ID
            PlaceUniquenessError: If the new place_id is already in use
        """
        place = cls.get_place(db, internal_id)

        for field, value in place_in.model_dump(exclude_unset=True).items():
            setattr(place, field, value)

        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning(
                "Rejected update of place internal_id=%s to duplicate place_id=%r",
                internal_id,
                place_in.place_id,
            )
            raise PlaceUniquenessError(place_in.place_id) from e
        db.refresh(place)

        return place

    @classmethod
    def delete_place(cls, db: Session, internal_id: int) -> bool:
        """
        Delete a place. The row is removed irrecoverably.

        Args:
            db: Database session
            internal_id: Internal ID of the place to delete

        Returns:
            True if deleted successfully

        Raises:
            PlaceNotFoundError: If no place has that ID
        """
        place = cls.get_place(db, internal_id)

        db.delete(place)
        db.commit()

        logger.info("Deleted place internal_id=%s", internal_id)
        return True

    @staticmethod
    def ingest_listings(db: Session, listings: Iterable[PlaceListing]) -> int:
        """
        Insert nearby-search listings, skipping any whose place_id is
        already stored. All rows go in one transaction.

        Args:
            db: Database session
            listings: Listings from the upstream provider

        Returns:
            Number of places actually inserted

        Raises:
            PlaceStoreError: If the database dialect has no conflict-skipping insert
        """
        dialect = db.get_bind().dialect.name
        insert = _CONFLICT_INSERTS.get(dialect)
        if insert is None:
            raise PlaceStoreError(f"Listing ingest is not supported on {dialect}")

        inserted = 0
        try:
            for listing in listings:
                values = listing.to_place_create().model_dump()
                stmt = (
                    insert(Place.__table__)
                    .values(**values)
                    .on_conflict_do_nothing(index_elements=["place_id"])
                )
                inserted += db.execute(stmt).rowcount
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Failed to ingest place listings")
            raise

        logger.info("Ingested %d new places from listings", inserted)
        return inserted


# Create a singleton instance
place_service = PlaceService()
