class TartError(Exception):
    """Base class for errors raised by the tart package."""


class IngestionParseError(TartError):
    """The nations dump could not be parsed. No index is produced."""


class InvalidQueryInput(TartError, ValueError):
    """A query was made without a usable nation identifier."""
