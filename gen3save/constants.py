"""
Gen 3 Save Reader - Constants
Layout offsets and sizes of the 128 KiB flash save image
"""

# ============================================================
# IMAGE LAYOUT
# ============================================================
# The flash image is 32 sectors of 0x1000 bytes. Sectors 0-13 hold
# save slot A, 14-27 hold slot B, 28-31 hold Hall of Fame / extras.

SAVE_SIZE = 0x20000  # 131072 bytes
SECTOR_SIZE = 0x1000  # 4096 bytes
SECTOR_COUNT = 32
MAX_SECTOR_ID = SECTOR_COUNT - 1

SECTORS_PER_SLOT = 14

# Slot resolution scans sectors 0-26; sector 14 is the A/B boundary
SLOT_SCAN_END = 27
SLOT_BOUNDARY_SECTOR = 14


# ============================================================
# SECTOR FOOTER
# ============================================================
# Last 12 bytes of every sector (all little-endian)

SECTION_ID_OFFSET = 0x0FF4  # u16
CHECKSUM_OFFSET = 0x0FF6  # u16
SIGNATURE_OFFSET = 0x0FF8  # u32
SAVE_INDEX_OFFSET = 0x0FFC  # u32

SECTOR_SIGNATURE = 0x08012025
SECTOR_DATA_SIZE = 0x0F80  # 3968 bytes

MAX_SAVE_INDEX = 0xFFFFFFFF

ERASED_BYTE = 0xFF


# ============================================================
# SECTION SIZES
# ============================================================
# Bytes of each section covered by its checksum

SECTION_SIZES = {
    0: 3884,  # Trainer info
    1: 3968,  # Team/Items
    2: 3968,  # Game state
    3: 3968,  # Misc data
    4: 3848,  # Rival info
    5: 3968,  # PC buffer A
    6: 3968,  # PC buffer B
    7: 3968,  # PC buffer C
    8: 3968,  # PC buffer D
    9: 3968,  # PC buffer E
    10: 3968,  # PC buffer F
    11: 3968,  # PC buffer G
    12: 3968,  # PC buffer H
    13: 2000,  # PC buffer I
}

# Checksum schemes
CHECKSUM_GEN3 = "gen3"  # u32 word sum folded to 16 bits
CHECKSUM_WORD16 = "word16"  # u16 word sum over everything but the checksum field
CHECKSUM_SCHEMES = (CHECKSUM_WORD16, CHECKSUM_GEN3)
DEFAULT_CHECKSUM = CHECKSUM_WORD16


# ============================================================
# TRAINER ID
# ============================================================
# Trainer ID lives in sector 1 of the active slot.
#
# The secret ID is documented at 0x0C, directly after the public ID.
# Older readers of this format took it from 0x0D, which pairs the
# secret ID's high byte with the byte after it and is almost certainly
# an off-by-one. Both are kept so images can be decoded either way.

TRAINER_SECTOR = 1
PUBLIC_ID_OFFSET = 0x0A
SECRET_ID_OFFSET_STANDARD = 0x0C
SECRET_ID_OFFSET_OBSERVED = 0x0D
SECRET_ID_OFFSET = SECRET_ID_OFFSET_STANDARD

SECRET_ID_OFFSETS = {
    "standard": SECRET_ID_OFFSET_STANDARD,
    "observed": SECRET_ID_OFFSET_OBSERVED,
}
