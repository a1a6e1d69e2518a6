from placestore.models.place import Place

__all__ = ["Place"]
