class StereoBPError(Exception):
    pass


class InvalidInput(StereoBPError, ValueError):
    """Bad image pair or configuration: empty image, size mismatch, load failure, border too small."""


class DimensionTooSmall(StereoBPError, ValueError):
    """Image leaves no interior pixel once the border is removed."""
