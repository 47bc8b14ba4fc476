"""
Gen 3 Save Reader - Trainer Module
Handles parsing of the trainer identifier
"""

import struct
from dataclasses import dataclass

from .constants import PUBLIC_ID_OFFSET, SECRET_ID_OFFSET


@dataclass(frozen=True)
class TrainerID:
    """Public and secret trainer IDs (16 bits each)."""

    public: int
    secret: int

    @classmethod
    def from_sector(cls, sector, secret_id_offset: int = SECRET_ID_OFFSET) -> "TrainerID":
        """
        Read the trainer ID from the trainer sector of the active slot.

        Args:
            sector: 0x1000 bytes of sector data
            secret_id_offset: Byte offset of the secret ID within the sector

        Returns:
            TrainerID
        """
        public = struct.unpack("<H", sector[PUBLIC_ID_OFFSET : PUBLIC_ID_OFFSET + 2])[0]
        secret = struct.unpack("<H", sector[secret_id_offset : secret_id_offset + 2])[0]

        return cls(public=public, secret=secret)

    def __str__(self):
        return format_trainer_id(self.public, self.secret, show_secret=True)


def format_trainer_id(trainer_id, secret_id=None, show_secret=False):
    """
    Format trainer ID for display.

    Args:
        trainer_id: Public trainer ID
        secret_id: Secret trainer ID (optional)
        show_secret: Whether to show secret ID

    Returns:
        str: Formatted ID string
    """
    public = str(trainer_id).zfill(5)

    if show_secret and secret_id is not None:
        secret = str(secret_id).zfill(5)
        return f"{public}-{secret}"

    return public
