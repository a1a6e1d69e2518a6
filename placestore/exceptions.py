"""
Errors raised by the place store.
"""

from typing import Union


class PlaceStoreError(Exception):
    """Base class for place store errors"""
    pass


class PlaceNotFoundError(PlaceStoreError):
    """Raised when no place matches an internal id or place_id"""

    def __init__(self, key: Union[int, str], field: str = "internal_id"):
        self.key = key
        self.field = field
        super().__init__(f"Place with {field}={key!r} not found")


class PlaceUniquenessError(PlaceStoreError):
    """Raised when a place_id is already used by another place"""

    def __init__(self, place_id: str):
        self.place_id = place_id
        super().__init__(f"A place with place_id={place_id!r} already exists")
