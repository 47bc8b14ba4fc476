"""
Custom exceptions for the Gen 3 save reader.

Everything that depends on the contents of a save image derives from
Gen3SaveError so callers can report "corrupt/unrecognized save data"
with a single except clause. SectorIndexError is not part of that
hierarchy: it means the reader itself asked for a sector that cannot
exist.
"""


class Gen3SaveError(Exception):
    """Base exception for save image decoding."""
    pass


class SaveFormatError(Gen3SaveError):
    """The image has no consistent save index pattern."""
    pass


class InconsistentSaveIndexError(SaveFormatError):
    """
    Raised when a sector's save index differs from its region's.

    Usually a torn write: the game was interrupted while writing the
    slot, so some sectors carry the old generation.
    """

    def __init__(self, sector_id: int, expected: int, actual: int):
        self.sector_id = sector_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Sector {sector_id} has an invalid save index, "
            f"expected {expected} but got {actual}"
        )


class AmbiguousSlotError(SaveFormatError):
    """Raised when slot A and slot B carry the same save index."""

    def __init__(self, save_index: int):
        self.save_index = save_index
        super().__init__(f"Slot A and B have the same save index ({save_index})")


class SaveSizeError(SaveFormatError):
    """Raised when the image is not exactly one flash save long."""

    def __init__(self, size: int, expected: int):
        self.size = size
        self.expected = expected
        super().__init__(f"Save image is {size} bytes (expected {expected})")


class ChecksumError(Gen3SaveError):
    """
    Raised when a stored sector checksum does not match its data.

    The slot structure may look fine; the data inside it is not.
    """

    def __init__(self, sectors):
        self.sectors = list(sectors)
        super().__init__(
            f"Checksum mismatch in sector(s): {', '.join(map(str, self.sectors))}"
        )


class SectorIndexError(IndexError):
    """Raised for a sector id outside 0-31. Indicates a bug, not bad data."""
    pass
