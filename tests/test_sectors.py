"""Tests for sector addressing and footer fields."""

import pytest

from gen3save.constants import SAVE_SIZE, SECTOR_SIZE
from gen3save.exceptions import Gen3SaveError, SectorIndexError
from gen3save.sectors import (
    get_save_index,
    get_section_id,
    get_signature,
    iter_sectors,
    sector_by_id,
)

from builders import make_image, make_sector


class TestSectorById:
    def test_first_sector(self):
        image = bytes(range(256)) * (SAVE_SIZE // 256)
        assert bytes(sector_by_id(0, image)) == image[:SECTOR_SIZE]

    def test_last_sector_is_final_4096_bytes(self):
        image = bytearray(SAVE_SIZE)
        image[-SECTOR_SIZE:] = b"\xab" * SECTOR_SIZE
        sector = sector_by_id(31, image)
        assert len(sector) == SECTOR_SIZE
        assert bytes(sector) == bytes(image[-SECTOR_SIZE:])

    def test_sector_32_is_rejected(self):
        with pytest.raises(SectorIndexError):
            sector_by_id(32, bytes(SAVE_SIZE))

    def test_negative_sector_is_rejected(self):
        with pytest.raises(SectorIndexError):
            sector_by_id(-1, bytes(SAVE_SIZE))

    def test_contract_violation_is_not_a_data_error(self):
        """Out-of-range ids are bugs; they must not be caught as bad save data."""
        assert issubclass(SectorIndexError, IndexError)
        assert not issubclass(SectorIndexError, Gen3SaveError)

    def test_view_is_read_only(self):
        image = bytearray(SAVE_SIZE)
        sector = sector_by_id(3, image)
        with pytest.raises(TypeError):
            sector[0] = 1

    def test_iter_sectors_covers_image(self):
        sectors = list(iter_sectors(bytes(SAVE_SIZE)))
        assert [sector_id for sector_id, _ in sectors] == list(range(32))


class TestFooter:
    def test_footer_fields(self):
        sector = make_sector(section_id=7, save_index=0xDEADBEEF)
        assert get_section_id(sector) == 7
        assert get_save_index(sector) == 0xDEADBEEF
        assert get_signature(sector) == 0x08012025

    def test_save_index_read_through_image(self):
        image = make_image(index_a=10, index_b=11)
        assert get_save_index(sector_by_id(13, image)) == 10
        assert get_save_index(sector_by_id(14, image)) == 11
