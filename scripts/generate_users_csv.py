"""
Generate large users CSV files for bulk ingestion testing.

Names and addresses cycle deterministically over fixed lists; ages are drawn
per bucket so roughly 10% are under 20, 40% are 20-39, 30% are 41-60 and 20%
are over 60.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from datetime import datetime, timezone
from pathlib import Path

MAX_RECORDS = 1_000_000
WRITE_CHUNK_SIZE = 1000

HEADERS: tuple[str, ...] = (
    "name.firstName",
    "name.lastName",
    "age",
    "address.line1",
    "address.line2",
    "address.city",
    "address.state",
    "gender",
)

FIRST_NAMES: tuple[str, ...] = (
    "Rohit", "Priya", "Amit", "Sneha", "Rajesh", "Anita", "Vikas", "Kavita", "Suresh", "Deepa",
    "Rahul", "Pooja", "Vikram", "Neha", "Arjun", "Simran", "Karan", "Riya", "Aditya", "Divya",
)

LAST_NAMES: tuple[str, ...] = (
    "Prasad", "Sharma", "Kumar", "Patel", "Singh", "Verma", "Mehta", "Reddy", "Nair", "Joshi",
    "Gupta", "Iyer", "Desai", "Malhotra", "Kulkarni", "Rao", "Agarwal", "Chopra", "Bose", "Trivedi",
)

ADDRESSES: tuple[tuple[str, str, str, str], ...] = (
    ("A-563 Rakshak Society", "New Pune Road", "Pune", "Maharashtra"),
    ("B-101 Green Park", "Link Road", "Mumbai", "Maharashtra"),
    ("C-45 Sector 12", "Main Street", "Delhi", "Delhi"),
    ("D-789 Heritage Villa", "MG Road", "Bangalore", "Karnataka"),
    ("E-234 Sunset Apartments", "Beach Road", "Chennai", "Tamil Nadu"),
    ("F-567 Golden Heights", "Ring Road", "Hyderabad", "Telangana"),
    ("G-890 Silver Oak", "Station Road", "Jaipur", "Rajasthan"),
    ("H-123 Rose Garden", "Park Street", "Kolkata", "West Bengal"),
    ("I-456 Palm Grove", "Lake Road", "Kochi", "Kerala"),
    ("J-789 Maple Court", "Hill Road", "Shimla", "Himachal Pradesh"),
)

GENDERS: tuple[str, ...] = ("male", "female")


def generate_age(index: int, rng: random.Random) -> int:
    age_group = index % 10
    if age_group < 1:
        return rng.randint(12, 19)
    if age_group < 5:
        return rng.randint(20, 39)
    if age_group < 8:
        return rng.randint(41, 60)
    return rng.randint(61, 80)


def generate_row(index: int, rng: random.Random) -> list[str]:
    first_name = FIRST_NAMES[index % len(FIRST_NAMES)]
    last_name = LAST_NAMES[(index // len(FIRST_NAMES)) % len(LAST_NAMES)]
    line1, line2, city, state = ADDRESSES[index % len(ADDRESSES)]
    gender = GENDERS[index % len(GENDERS)]
    return [first_name, last_name, str(generate_age(index, rng)), line1, line2, city, state, gender]


def write_csv(num_records: int, output_path: Path, *, seed: int | None = None) -> Path:
    """
    Write ``num_records`` generated rows plus the header to ``output_path``.
    """

    rng = random.Random(seed)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(",".join(HEADERS) + "\n")
        chunk: list[str] = []
        for index in range(num_records):
            chunk.append(",".join(generate_row(index, rng)))
            if len(chunk) >= WRITE_CHUNK_SIZE or index == num_records - 1:
                handle.write("\n".join(chunk) + "\n")
                chunk = []
                progress = (index + 1) / num_records * 100
                sys.stderr.write(
                    f"\r   Progress: {progress:.1f}% ({index + 1:,} / {num_records:,} records)"
                )
    sys.stderr.write("\n")
    return output_path


def _default_output_path(num_records: int) -> Path:
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S")
    return Path.cwd() / "uploads" / f"bulk_{num_records}_{timestamp}.csv"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a synthetic users CSV file.")
    parser.add_argument("records", type=int, help=f"Number of records (1 to {MAX_RECORDS:,}).")
    parser.add_argument("--output", type=Path, default=None, help="Output CSV path.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible ages.")
    args = parser.parse_args(argv)

    if args.records <= 0:
        parser.error("Please provide a valid positive number")
    if args.records > MAX_RECORDS:
        parser.error(f"Maximum {MAX_RECORDS:,} records allowed")

    output_path = args.output or _default_output_path(args.records)
    started = time.perf_counter()
    write_csv(args.records, output_path, seed=args.seed)
    elapsed = time.perf_counter() - started

    size_mb = output_path.stat().st_size / 1024 / 1024
    print(f"CSV file generated: {output_path}")
    print(f"   Records: {args.records:,}")
    print(f"   File Size: {size_mb:.2f} MB")
    print(f"   Time Taken: {elapsed:.2f}s")
    print(f"Set CSV_FILE_PATH={output_path} and POST /api/upload to ingest it.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
