"""
save_reader.py - Loads .sav files from disk and hands them to Gen3Save.
"""

import logging
import os

from .constants import DEFAULT_CHECKSUM, SAVE_SIZE, SECRET_ID_OFFSET
from .exceptions import Gen3SaveError, SaveSizeError
from .gen3_parser import Gen3Save

log = logging.getLogger(__name__)


def load_image(sav_path):
    """
    Read a save file into a 131072-byte buffer.

    Emulators may append a real-time-clock trailer after the flash
    image; anything past 131072 bytes is dropped.

    Args:
        sav_path: Path to the .sav file

    Returns:
        bytes: The flash image

    Raises:
        SaveSizeError: The file is shorter than one flash image
        OSError: The file could not be read
    """
    with open(sav_path, "rb") as f:
        data = f.read()

    if len(data) < SAVE_SIZE:
        raise SaveSizeError(len(data), SAVE_SIZE)

    if len(data) > SAVE_SIZE:
        log.debug(f"Ignoring {len(data) - SAVE_SIZE} trailing bytes in {sav_path}")
        data = data[:SAVE_SIZE]

    return data


def read_save(sav_path, secret_id_offset=SECRET_ID_OFFSET, checksum_scheme=DEFAULT_CHECKSUM):
    """
    Parse a Gen3 .sav file.

    Args:
        sav_path: Path to the .sav file
        secret_id_offset: Byte offset of the secret ID in the trainer sector
        checksum_scheme: Checksum scheme name

    Returns:
        Gen3Save, or None on failure
    """
    if not os.path.exists(sav_path):
        log.debug(f"Save file not found: {sav_path}")
        return None

    try:
        data = load_image(sav_path)
    except OSError as e:
        log.error(f"Failed to read save file {sav_path}: {e}")
        return None
    except SaveSizeError as e:
        log.warning(f"Not a Gen 3 save: {sav_path}: {e}")
        return None

    try:
        return Gen3Save.from_buffer(
            data,
            secret_id_offset=secret_id_offset,
            checksum_scheme=checksum_scheme,
        )
    except Gen3SaveError as e:
        log.warning(f"Corrupt or unrecognized save data in {sav_path}: {e}")
        return None
