"""Interactive prompt collection."""
