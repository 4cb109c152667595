"""Exception types raised by geojson_wind."""


class GeoJSONWindError(Exception):
    """Base class for all geojson_wind errors."""


class GeoJSONIOError(GeoJSONWindError):
    """The input file could not be read."""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"IO error: {cause}")


class GeoJSONDecodeError(GeoJSONWindError):
    """The input could not be decoded into a GeoJSON document."""

    def __init__(self, reason):
        self.reason = reason
        super().__init__(f"GeoJSON deserialisation error: {reason}. Is your GeoJSON valid?")


class WindingInvariantError(GeoJSONWindError):
    """A node's contents do not match its type tag.

    The decoder guarantees a consistent tree, so this signals a defect
    rather than bad input and is never caught inside the package.
    """
