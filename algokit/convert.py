"""Feet to millimetre conversion with a small command-line front end."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

MILLIMETERS_PER_FOOT = 384.9


def feet_to_millimeters(feet: float) -> float:
    """Convert a length in feet to millimetres."""
    return feet * MILLIMETERS_PER_FOOT


def main(argv: Sequence[str] | None = None) -> int:
    """Read a whole number of feet and print it in millimetres."""
    parser = argparse.ArgumentParser(description="Konversi Kaki (ft) ke Milimeter (mm)")
    parser.add_argument("feet", nargs="?", help="satuan kaki (ft)")
    args = parser.parse_args(argv)

    print("Konversi Kaki (ft) ke Milimeter (mm)")
    raw = args.feet if args.feet is not None else input("Masukan satuan kaki (ft) : ")
    try:
        feet = int(raw.strip())
    except ValueError:
        parser.error(f"invalid number of feet: {raw!r}")

    print(f"Hasil = {feet_to_millimeters(feet):g} mm")
    return 0