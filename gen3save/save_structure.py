"""
Gen 3 Save Reader - Save Structure Module
Resolves the active save slot and reports on the sector layout
"""

import logging
from enum import IntEnum

from .checksum import failing_sectors, is_erased
from .constants import (
    DEFAULT_CHECKSUM,
    MAX_SAVE_INDEX,
    SAVE_SIZE,
    SECTOR_SIGNATURE,
    SECTORS_PER_SLOT,
    SLOT_BOUNDARY_SECTOR,
    SLOT_SCAN_END,
)
from .exceptions import (
    AmbiguousSlotError,
    Gen3SaveError,
    InconsistentSaveIndexError,
    SaveFormatError,
    SaveSizeError,
)
from .sectors import get_save_index, get_section_id, get_signature, sector_by_id

logger = logging.getLogger(__name__)


class SaveSlot(IntEnum):
    """
    The two redundant save regions.

    A occupies sectors 0-13, B occupies sectors 14-27. The game
    alternates between them on every save.
    """

    A = 0
    B = 1

    @property
    def first_sector(self) -> int:
        return self.value * SECTORS_PER_SLOT

    def sector_offset(self, sector_id: int) -> int:
        """Global sector id of a slot-relative sector."""
        return self.first_sector + sector_id

    def sectors(self) -> range:
        return range(self.first_sector, self.first_sector + SECTORS_PER_SLOT)


def resolve_slot(indices) -> SaveSlot:
    """
    Decide which save slot is the most recent one.

    Walks (sector_id, save_index) pairs in sector order. Every sector of
    a region must carry the region's save index; at the boundary sector
    slot B's index is compared with slot A's, honouring wraparound of the
    32-bit counter.

    Args:
        indices: Iterable of (sector_id, save_index), starting at sector 0

    Returns:
        SaveSlot: The authoritative slot

    Raises:
        InconsistentSaveIndexError: A sector diverges from its region
        AmbiguousSlotError: Both slots carry the same save index
        SaveFormatError: The boundary sector was never reached
    """
    save_index = None
    save_slot = None

    for sector_id, retrieved_index in indices:
        if save_index is None:
            save_index = retrieved_index

        if sector_id == SLOT_BOUNDARY_SECTOR:
            if save_index != MAX_SAVE_INDEX and retrieved_index < save_index:
                save_slot = SaveSlot.A
            elif save_index == MAX_SAVE_INDEX or retrieved_index > save_index:
                save_slot = SaveSlot.B
            else:
                error = AmbiguousSlotError(save_index)
                logger.warning(str(error))
                raise error

            save_index = retrieved_index
        elif sector_id != 0 and save_index != retrieved_index:
            error = InconsistentSaveIndexError(sector_id, save_index, retrieved_index)
            logger.warning(str(error))
            raise error

    if save_slot is None:
        raise SaveFormatError(
            f"No save index found for boundary sector {SLOT_BOUNDARY_SECTOR}"
        )

    return save_slot


def slot_from_buffer(buffer) -> SaveSlot:
    """
    Resolve the active slot from the save indices of sectors 0-26.

    Raises:
        SaveSizeError: buffer is not 131072 bytes
        SaveFormatError: no consistent active slot
    """
    if len(buffer) != SAVE_SIZE:
        raise SaveSizeError(len(buffer), SAVE_SIZE)

    return resolve_slot(
        (sector_id, get_save_index(sector_by_id(sector_id, buffer)))
        for sector_id in range(SLOT_SCAN_END)
    )


def is_blank_save(buffer):
    """
    Check if the save image is blank (uninitialized).

    A written slot has a section id of 0-13 in its first sector. The
    image is only blank if neither slot has one.
    """
    if len(buffer) < SAVE_SIZE:
        return True

    for slot in SaveSlot:
        section_id = get_section_id(sector_by_id(slot.first_sector, buffer))
        if 0 <= section_id < SECTORS_PER_SLOT:
            return False

    return True


def build_section_map(buffer, slot):
    """
    Build a map of section ids to the sectors holding them.

    The game rotates sections through a slot's sectors, so section 0 is
    not necessarily in the slot's first sector.

    Args:
        buffer: Save image data
        slot: SaveSlot to map

    Returns:
        dict: {section_id: sector_id}
    """
    section_map = {}

    for sector_id in slot.sectors():
        section_id = get_section_id(sector_by_id(sector_id, buffer))

        if 0 <= section_id < SECTORS_PER_SLOT:
            section_map[section_id] = sector_id
        else:
            logger.debug(f"Invalid section id {section_id} in sector {sector_id}")

    if len(section_map) < SECTORS_PER_SLOT:
        missing = [i for i in range(SECTORS_PER_SLOT) if i not in section_map]
        logger.debug(f"Slot {slot.name} is missing sections {missing}")

    return section_map


def get_save_info(buffer, scheme=DEFAULT_CHECKSUM):
    """
    Get basic information about the save image.

    Args:
        buffer: Save image data
        scheme: Checksum scheme name

    Returns:
        dict: Save information, with "valid" False and an "error" message
        when the image cannot be read
    """
    if len(buffer) != SAVE_SIZE:
        return {
            "valid": False,
            "error": str(SaveSizeError(len(buffer), SAVE_SIZE)),
        }

    if is_blank_save(buffer):
        return {
            "valid": False,
            "error": "Save image is blank/uninitialized",
        }

    try:
        slot = slot_from_buffer(buffer)
    except Gen3SaveError as e:
        return {
            "valid": False,
            "error": str(e),
        }

    return {
        "valid": True,
        "slot": slot.name,
        "save_index": get_save_index(sector_by_id(slot.first_sector, buffer)),
        "section_map": build_section_map(buffer, slot),
        "checksum_valid": not failing_sectors(buffer, scheme),
    }


def validate_save(buffer, scheme=DEFAULT_CHECKSUM):
    """
    Validate the save image structure.

    Args:
        buffer: Save image data
        scheme: Checksum scheme name

    Returns:
        dict: {"valid": bool, "errors": [...], "warnings": [...]}
    """
    results = {
        "valid": True,
        "errors": [],
        "warnings": [],
    }

    if len(buffer) != SAVE_SIZE:
        results["valid"] = False
        results["errors"].append(str(SaveSizeError(len(buffer), SAVE_SIZE)))
        return results

    slot = None
    try:
        slot = slot_from_buffer(buffer)
    except Gen3SaveError as e:
        results["errors"].append(str(e))

    for sector_id in failing_sectors(buffer, scheme):
        results["errors"].append(f"Sector {sector_id} checksum mismatch")

    for sector_id in range(SECTORS_PER_SLOT * 2):
        sector = sector_by_id(sector_id, buffer)
        if not is_erased(sector) and get_signature(sector) != SECTOR_SIGNATURE:
            results["errors"].append(f"Sector {sector_id} has no save signature")

    if slot is not None:
        section_map = build_section_map(buffer, slot)
        for section_id in range(SECTORS_PER_SLOT):
            if section_id not in section_map:
                results["warnings"].append(f"Missing section {section_id}")

    results["valid"] = not results["errors"]
    return results
