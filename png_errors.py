class PNGError(Exception):
    pass


class SignatureError(PNGError, ValueError):
    """First 8 bytes are not the PNG signature."""


class TruncatedChunkError(PNGError, ValueError):
    """A length field is cut short or declares more bytes than remain."""


class MissingTargetChunkError(PNGError):
    """No chunk to replace and no anchor chunk to insert before."""


class IncompleteWriteError(PNGError):
    """The output sink took fewer bytes than it was given."""
