"""
gen3save: print the active slot and trainer ID of a Gen 3 save file.

Usage:
  python -m gen3save SAVE [--json] [--validate] [--show-secret]
                          [--secret-id-offset standard|observed]
                          [--checksum gen3|word16] [--verbose]
"""

import argparse
import json
import logging
import sys

from .constants import CHECKSUM_SCHEMES, DEFAULT_CHECKSUM, SECRET_ID_OFFSETS
from .exceptions import Gen3SaveError
from .gen3_parser import Gen3Save
from .save_reader import load_image
from .save_structure import validate_save
from .trainer import format_trainer_id


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="gen3save",
        description="Read the active save slot and trainer ID from a Gen 3 save file",
    )
    parser.add_argument("save", help="Path to the .sav file")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Print a validation report instead of decoding",
    )
    parser.add_argument(
        "--show-secret", action="store_true", help="Include the secret ID"
    )
    parser.add_argument(
        "--secret-id-offset",
        choices=sorted(SECRET_ID_OFFSETS),
        default="standard",
        help="Where to read the secret ID (default: standard, 0x0C)",
    )
    parser.add_argument(
        "--checksum",
        choices=CHECKSUM_SCHEMES,
        default=DEFAULT_CHECKSUM,
        help="Checksum scheme (default: word16)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _report(results, as_json):
    if as_json:
        print(json.dumps(results, indent=2))
        return

    print("Valid" if results["valid"] else "Invalid")
    for error in results["errors"]:
        print(f"  error: {error}")
    for warning in results["warnings"]:
        print(f"  warning: {warning}")


def main(argv=None):
    args = _build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    try:
        data = load_image(args.save)
    except (OSError, Gen3SaveError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.validate:
        results = validate_save(data, scheme=args.checksum)
        _report(results, args.json)
        return 0 if results["valid"] else 1

    try:
        save = Gen3Save.from_buffer(
            data,
            secret_id_offset=SECRET_ID_OFFSETS[args.secret_id_offset],
            checksum_scheme=args.checksum,
        )
    except Gen3SaveError as e:
        print(f"error: corrupt or unrecognized save data: {e}", file=sys.stderr)
        return 1

    if args.json:
        result = save.to_dict()
        if not args.show_secret:
            del result["trainer_id"]["secret"]
        print(json.dumps(result, indent=2))
        return 0

    trainer = save.trainer_id
    print(f"Slot:       {save.save_slot.name}")
    print(f"Save index: {save.save_index}")
    print(f"Trainer ID: {format_trainer_id(trainer.public, trainer.secret, args.show_secret)}")
    return 0
