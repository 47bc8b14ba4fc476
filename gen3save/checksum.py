"""
Gen 3 Save Reader - Checksum Module
Recomputes and verifies the stored checksum of every sector
"""

import logging
import struct

from .constants import (
    CHECKSUM_GEN3,
    CHECKSUM_OFFSET,
    CHECKSUM_SCHEMES,
    CHECKSUM_WORD16,
    DEFAULT_CHECKSUM,
    ERASED_BYTE,
    SECTION_SIZES,
    SECTOR_DATA_SIZE,
    SECTOR_SIZE,
    SECTORS_PER_SLOT,
)
from .sectors import get_section_id, get_stored_checksum, iter_sectors

logger = logging.getLogger(__name__)

_ERASED_SECTOR = bytes([ERASED_BYTE]) * SECTOR_SIZE


def checksum_size(sector_id, sector):
    """
    Number of bytes at the start of a sector covered by its checksum.

    Slot sectors use the size of the section they hold; the extra
    sectors after both slots always cover the full data area.
    """
    if sector_id < SECTORS_PER_SLOT * 2:
        return SECTION_SIZES.get(get_section_id(sector), SECTOR_DATA_SIZE)
    return SECTOR_DATA_SIZE


def compute_sector_checksum(sector, scheme=DEFAULT_CHECKSUM, size=SECTOR_DATA_SIZE):
    """
    Compute the checksum of a single sector.

    Args:
        sector: 0x1000 bytes of sector data
        scheme: CHECKSUM_WORD16 (default) or CHECKSUM_GEN3
        size: Bytes covered by the gen3 scheme (ignored by word16)

    Returns:
        int: 16-bit checksum
    """
    if scheme == CHECKSUM_GEN3:
        words = struct.unpack(f"<{size // 4}I", sector[:size])
        checksum = sum(words) & 0xFFFFFFFF
        # Fold to 16 bits
        return ((checksum >> 16) + (checksum & 0xFFFF)) & 0xFFFF

    if scheme == CHECKSUM_WORD16:
        # Everything except the stored checksum field itself
        data = bytes(sector[:CHECKSUM_OFFSET]) + bytes(sector[CHECKSUM_OFFSET + 2 :])
        words = struct.unpack(f"<{len(data) // 2}H", data)
        return sum(words) & 0xFFFF

    raise ValueError(f"Unknown checksum scheme {scheme!r}, expected one of {CHECKSUM_SCHEMES}")


def is_erased(sector):
    """True for a sector that was never written (all 0xFF)."""
    return bytes(sector) == _ERASED_SECTOR


def sector_checksum_matches(sector_id, sector, scheme=DEFAULT_CHECKSUM):
    if is_erased(sector):
        return True

    calculated = compute_sector_checksum(
        sector, scheme, checksum_size(sector_id, sector)
    )
    return calculated == get_stored_checksum(sector)


def failing_sectors(buffer, scheme=DEFAULT_CHECKSUM):
    """
    List the sectors whose stored checksum does not match their data.

    Args:
        buffer: Save image data
        scheme: Checksum scheme name

    Returns:
        list: Sector ids (0-31) that failed
    """
    return [
        sector_id
        for sector_id, sector in iter_sectors(buffer)
        if not sector_checksum_matches(sector_id, sector, scheme)
    ]


def is_valid_checksum(buffer, scheme=DEFAULT_CHECKSUM):
    """True if every sector of the image passes its checksum."""
    failed = failing_sectors(buffer, scheme)
    if failed:
        logger.warning(f"Checksum mismatch in sectors {failed}")
        return False
    return True
