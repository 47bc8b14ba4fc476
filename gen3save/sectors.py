"""
Gen 3 Save Reader - Sector Module
Addresses 4 KiB sectors of the flash image and reads their footers
"""

import struct

from .constants import (
    CHECKSUM_OFFSET,
    MAX_SECTOR_ID,
    SAVE_INDEX_OFFSET,
    SECTION_ID_OFFSET,
    SECTOR_COUNT,
    SECTOR_SIZE,
    SIGNATURE_OFFSET,
)
from .exceptions import SectorIndexError


def sector_by_id(sector_id, buffer):
    """
    Return one sector of the image as a read-only view.

    Args:
        sector_id: Sector index (0-31)
        buffer: Save image data

    Returns:
        memoryview: bytes [sector_id * 0x1000, sector_id * 0x1000 + 0x1000)

    Raises:
        SectorIndexError: sector_id is outside 0-31
    """
    if not 0 <= sector_id <= MAX_SECTOR_ID:
        raise SectorIndexError(
            f"Sector must be between 0 and {MAX_SECTOR_ID}, got {sector_id}"
        )

    offset = sector_id * SECTOR_SIZE
    return memoryview(buffer).toreadonly()[offset : offset + SECTOR_SIZE]


def iter_sectors(buffer):
    """Yield (sector_id, sector) for every sector in the image."""
    for sector_id in range(SECTOR_COUNT):
        yield sector_id, sector_by_id(sector_id, buffer)


def get_save_index(sector):
    """Save index (generation counter) from the last 4 bytes of a sector."""
    return struct.unpack("<I", sector[SAVE_INDEX_OFFSET : SAVE_INDEX_OFFSET + 4])[0]


def get_section_id(sector):
    """Logical section id (0-13 for slot data) of a sector."""
    return struct.unpack("<H", sector[SECTION_ID_OFFSET : SECTION_ID_OFFSET + 2])[0]


def get_stored_checksum(sector):
    return struct.unpack("<H", sector[CHECKSUM_OFFSET : CHECKSUM_OFFSET + 2])[0]


def get_signature(sector):
    return struct.unpack("<I", sector[SIGNATURE_OFFSET : SIGNATURE_OFFSET + 4])[0]
