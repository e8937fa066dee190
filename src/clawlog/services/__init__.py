"""Service layer wrapping the data layer in ``Result`` values."""
