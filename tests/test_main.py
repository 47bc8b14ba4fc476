"""Tests for the command-line entry point."""

import json

import pytest

from gen3save.constants import SECTOR_SIZE
from gen3save.main import main

from builders import make_image


def write_save(tmp_path, image, name="save.sav"):
    path = tmp_path / name
    path.write_bytes(bytes(image))
    return str(path)


class TestMain:
    def test_prints_slot_and_trainer(self, tmp_path, capsys):
        path = write_save(tmp_path, make_image(index_a=1, index_b=2))
        assert main([path]) == 0
        out = capsys.readouterr().out
        assert "Slot:       B" in out
        assert "Save index: 2" in out
        assert "Trainer ID: 04369\n" in out

    def test_show_secret(self, tmp_path, capsys):
        path = write_save(tmp_path, make_image(index_a=1, index_b=2))
        assert main([path, "--show-secret"]) == 0
        assert "Trainer ID: 04369-08738" in capsys.readouterr().out

    def test_json(self, tmp_path, capsys):
        path = write_save(tmp_path, make_image(index_a=2, index_b=1))
        assert main([path, "--json"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result == {
            "slot": "A",
            "save_index": 2,
            "trainer_id": {"public": 0x1234},
        }

    def test_json_with_secret(self, tmp_path, capsys):
        path = write_save(tmp_path, make_image(index_a=2, index_b=1))
        assert main([path, "--json", "--show-secret"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["trainer_id"]["secret"] == 0x5678

    def test_observed_secret_offset(self, tmp_path, capsys):
        path = write_save(tmp_path, make_image(index_a=2, index_b=1))
        assert main([path, "--json", "--show-secret", "--secret-id-offset", "observed"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["trainer_id"]["secret"] == 0x0056

    def test_corrupt_save(self, tmp_path, capsys):
        path = write_save(tmp_path, make_image(index_a=2, index_b=2))
        assert main([path]) == 1
        assert "corrupt or unrecognized" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.sav")]) == 1
        assert "error:" in capsys.readouterr().err

    def test_validate_ok(self, tmp_path, capsys):
        path = write_save(tmp_path, make_image())
        assert main([path, "--validate"]) == 0
        assert capsys.readouterr().out.startswith("Valid")

    def test_validate_reports_checksum(self, tmp_path, capsys):
        image = make_image()
        image[5 * SECTOR_SIZE + 1] ^= 0x10
        path = write_save(tmp_path, image)
        assert main([path, "--validate", "--json"]) == 1
        results = json.loads(capsys.readouterr().out)
        assert results["errors"] == ["Sector 5 checksum mismatch"]

    def test_bad_option(self, tmp_path):
        path = write_save(tmp_path, make_image())
        with pytest.raises(SystemExit) as exc_info:
            main([path, "--secret-id-offset", "sideways"])
        assert exc_info.value.code == 2
