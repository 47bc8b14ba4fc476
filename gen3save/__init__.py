"""
Gen 3 Save Reader Package

Reads the 128 KiB flash save of Ruby/Sapphire/Emerald and
FireRed/LeafGreen: resolves which of the two save slots is current,
verifies sector checksums and decodes the trainer ID.

Usage:
    from gen3save import Gen3Save

    save = Gen3Save.from_buffer(data)
    print(f"Slot {save.save_slot.name}: {save.trainer_id}")
"""

from .checksum import compute_sector_checksum, failing_sectors, is_valid_checksum
from .constants import (
    CHECKSUM_GEN3,
    CHECKSUM_WORD16,
    DEFAULT_CHECKSUM,
    SAVE_SIZE,
    SECRET_ID_OFFSET,
    SECRET_ID_OFFSET_OBSERVED,
    SECRET_ID_OFFSET_STANDARD,
    SECTOR_SIZE,
)
from .exceptions import (
    AmbiguousSlotError,
    ChecksumError,
    Gen3SaveError,
    InconsistentSaveIndexError,
    SaveFormatError,
    SaveSizeError,
    SectorIndexError,
)
from .gen3_parser import Gen3Save
from .save_reader import load_image, read_save
from .save_structure import (
    SaveSlot,
    build_section_map,
    get_save_info,
    is_blank_save,
    resolve_slot,
    slot_from_buffer,
    validate_save,
)
from .sectors import get_save_index, sector_by_id
from .trainer import TrainerID, format_trainer_id

__version__ = "0.1.0"

__all__ = [
    "Gen3Save",
    "SaveSlot",
    "TrainerID",
    "Gen3SaveError",
    "SaveFormatError",
    "InconsistentSaveIndexError",
    "AmbiguousSlotError",
    "SaveSizeError",
    "ChecksumError",
    "SectorIndexError",
    "resolve_slot",
    "slot_from_buffer",
    "is_valid_checksum",
    "failing_sectors",
    "compute_sector_checksum",
    "sector_by_id",
    "get_save_index",
    "is_blank_save",
    "build_section_map",
    "get_save_info",
    "validate_save",
    "format_trainer_id",
    "load_image",
    "read_save",
    "SAVE_SIZE",
    "SECTOR_SIZE",
    "CHECKSUM_GEN3",
    "CHECKSUM_WORD16",
    "DEFAULT_CHECKSUM",
    "SECRET_ID_OFFSET",
    "SECRET_ID_OFFSET_STANDARD",
    "SECRET_ID_OFFSET_OBSERVED",
]
