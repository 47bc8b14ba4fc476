"""
Gen 3 Save Reader - Main Module
Decodes the active slot and trainer identifier from a save image
"""

import logging
from dataclasses import dataclass

from .checksum import failing_sectors, is_valid_checksum
from .constants import DEFAULT_CHECKSUM, SAVE_SIZE, SECRET_ID_OFFSET, TRAINER_SECTOR
from .exceptions import ChecksumError, SaveSizeError
from .save_structure import SaveSlot, slot_from_buffer
from .sectors import get_save_index, sector_by_id
from .trainer import TrainerID

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Gen3Save:
    """
    Decoded state of a Gen 3 save image.

    Usage:
        save = Gen3Save.from_buffer(data)
        print(save.save_slot.name, save.trainer_id.public)
    """

    save_slot: SaveSlot
    trainer_id: TrainerID
    save_index: int

    @classmethod
    def from_buffer(
        cls,
        buffer,
        secret_id_offset: int = SECRET_ID_OFFSET,
        checksum_scheme: str = DEFAULT_CHECKSUM,
    ) -> "Gen3Save":
        """
        Decode a 131072-byte save image.

        Args:
            buffer: Save image data
            secret_id_offset: Byte offset of the secret ID in the trainer sector
            checksum_scheme: Checksum scheme name

        Returns:
            Gen3Save

        Raises:
            SaveSizeError: buffer is not 131072 bytes
            SaveFormatError: no consistent active slot
            ChecksumError: a sector failed its checksum
        """
        if len(buffer) != SAVE_SIZE:
            raise SaveSizeError(len(buffer), SAVE_SIZE)

        save_slot = slot_from_buffer(buffer)

        if not is_valid_checksum(buffer, checksum_scheme):
            raise ChecksumError(failing_sectors(buffer, checksum_scheme))

        trainer_sector = sector_by_id(save_slot.sector_offset(TRAINER_SECTOR), buffer)
        trainer_id = TrainerID.from_sector(trainer_sector, secret_id_offset)
        save_index = get_save_index(sector_by_id(save_slot.first_sector, buffer))

        logger.debug(
            f"Decoded slot {save_slot.name} (save index {save_index}), "
            f"trainer {trainer_id}"
        )

        return cls(save_slot=save_slot, trainer_id=trainer_id, save_index=save_index)

    def to_dict(self):
        return {
            "slot": self.save_slot.name,
            "save_index": self.save_index,
            "trainer_id": {
                "public": self.trainer_id.public,
                "secret": self.trainer_id.secret,
            },
        }
