"""Interactive comparison of string hash functions by bucket distribution."""

from __future__ import annotations

import argparse
import enum
import random
import sys
from pathlib import Path
from typing import Callable, Iterator, Sequence, TextIO

from structkit.hash_functions import fnv1a_hash, polynomial_rolling_hash
from structkit.unordered_map import UnorderedMap

MAX_TERMINAL_WIDTH = 80
N_ELEMENTS = 10_000
N_SAMPLE_HASHES = 5

_MASK64 = (1 << 64) - 1


class HashType(enum.Enum):
    """Selectable hash functions, labelled as shown in the menu."""

    ZERO = "Zero Hash"
    FIRST_CHARACTER = "First Character Hash"
    POLYNOMIAL_ROLLING = "Polynomial Rolling Hash"
    FNV1A = "FNV-1A"

    @property
    def label(self) -> str:
        return self.value


def zero_hash(text: str) -> int:
    """Hash that sends every string to 0."""
    return 0


def first_character_hash(text: str) -> int:
    """Hash of the first byte of the string, 0 for the empty string."""
    data = text.encode("utf-8")
    if not data:
        return 0
    first = data[0]
    signed = first - 256 if first >= 128 else first
    return signed & _MASK64


_HASHES: dict[HashType, Callable[[str], int]] = {
    HashType.ZERO: zero_hash,
    HashType.FIRST_CHARACTER: first_character_hash,
    HashType.POLYNOMIAL_ROLLING: polynomial_rolling_hash,
    HashType.FNV1A: fnv1a_hash,
}


def select_hash(hash_type: HashType) -> Callable[[str], int]:
    """Hash function for the given choice."""
    return _HASHES[hash_type]


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def prompt_hash_type(stdin: TextIO | None = None, stdout: TextIO | None = None) -> HashType:
    """Show the menu and read selections until a valid one is entered."""
    source = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout
    choices = list(HashType)

    out.write("Which hash would you like to use:\n")
    for i, choice in enumerate(choices):
        out.write(f"({i}). {choice.label}\n")
    out.write("\n")

    tokens = _tokens(source)
    while True:
        out.write("Enter your selection: ")
        out.flush()
        token = next(tokens, None)
        if token is None:
            raise EOFError("no hash selection given")
        try:
            index = int(token)
        except ValueError:
            continue
        if 0 <= index < len(choices):
            return choices[index]


def _read_lines(path: Path) -> list[str]:
    lines = Path(path).read_text(encoding="utf-8").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class AnimalDistribution:
    """Draws random "Adjective animal" names from two word lists."""

    def __init__(self, adjectives_path: Path | str, animals_path: Path | str) -> None:
        self.adjectives = _read_lines(Path(adjectives_path))
        self.animals = _read_lines(Path(animals_path))

    def __call__(self, rng: random.Random) -> str:
        adjective = rng.choice(self.adjectives) if self.adjectives else ""
        animal = rng.choice(self.animals) if self.animals else ""
        if adjective and "a" <= adjective[0] <= "z":
            adjective = adjective[0].upper() + adjective[1:]
        return f"{adjective} {animal}"


def _separator() -> str:
    return "\n" + "-" * MAX_TERMINAL_WIDTH + "\n\n"


def bucket_report(table: UnorderedMap) -> str:
    """Histogram of bucket sizes followed by size, bucket and load statistics."""
    count = table.bucket_count()
    sizes = [table.bucket_size(n) for n in range(count)]
    max_count = max(sizes, default=0)
    load = table.load_factor()

    if len(table) > 1:
        variance = sum((s - load) ** 2 for s in sizes) / (len(table) - 1)
    else:
        variance = sys.float_info.max

    parts = [_separator()]
    for n, size in enumerate(sizes):
        width = int(MAX_TERMINAL_WIDTH * (size / max_count)) if max_count else 0
        parts.append(f"{n:>5}: " + "#" * width + "\n")
    parts.append(_separator())
    parts.append(f"  Size: {len(table)}\n")
    parts.append(f"  Buckets: {count}\n")
    parts.append(f"  Load factor: {load:g}\n")
    parts.append(f"  Load variance: {variance:g}\n")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Hash random animal names with a chosen function and show the bucket spread."""
    parser = argparse.ArgumentParser(
        prog="hash-demo",
        description="Show how a hash function spreads random names over buckets.",
    )
    parser.add_argument(
        "data_dir",
        nargs="?",
        default=str(Path("..") / "data_files"),
        help="directory holding animals.txt and adjectives.txt",
    )
    args = parser.parse_args(argv)

    data_dir = Path(args.data_dir)
    out = sys.stdout
    hash_type = prompt_hash_type(sys.stdin, out)

    rng = random.Random()
    hash_fn = select_hash(hash_type)
    distribution = AnimalDistribution(data_dir / "adjectives.txt", data_dir / "animals.txt")

    out.write("\nExample hashes:\n")
    for _ in range(N_SAMPLE_HASHES):
        animal = distribution(rng)
        out.write(f"{animal}: {hash_fn(animal)}\n")

    table = UnorderedMap(30, hash_fn)
    for _ in range(N_ELEMENTS):
        table.insert(distribution(rng), 0)

    out.write(bucket_report(table))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())