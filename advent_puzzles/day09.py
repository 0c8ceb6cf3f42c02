"""Disk fragmenter: compact files block by block or whole files at once."""

from __future__ import annotations

import argparse
from pathlib import Path

Disk = list[int | None]


def _segments(disk_map: str) -> list[tuple[bool, int]]:
    """Alternating (is_file, length) pairs of the dense disk map."""
    digits = disk_map.strip()
    if not all(ch in "0123456789" for ch in digits):
        raise ValueError("disk map must contain only digits")
    return [(i % 2 == 0, int(ch)) for i, ch in enumerate(digits)]


def expand_disk_map(disk_map: str) -> Disk:
    """One entry per block: the file id, or None for free space."""
    disk: Disk = []
    file_id = 0
    for is_file, length in _segments(disk_map):
        if is_file:
            disk.extend([file_id] * length)
            file_id += 1
        else:
            disk.extend([None] * length)
    return disk


def compact_blocks(disk_map: str) -> Disk:
    """Move single blocks from the end into the leftmost free block."""
    disk = expand_disk_map(disk_map)
    left, right = 0, len(disk) - 1
    while left < right:
        if disk[left] is not None:
            left += 1
        elif disk[right] is None:
            right -= 1
        else:
            disk[left], disk[right] = disk[right], None
    return disk


def compact_files(disk_map: str) -> Disk:
    """Move whole files, highest id first, into the leftmost span that fits."""
    disk: Disk = []
    files: dict[int, int] = {}
    free: dict[int, int] = {}
    file_id = 0
    for is_file, length in _segments(disk_map):
        if is_file:
            files[len(disk)] = length
            disk.extend([file_id] * length)
            file_id += 1
        else:
            free[len(disk)] = length
            disk.extend([None] * length)

    spans = [[start, length] for start, length in sorted(free.items())]
    for start, length in sorted(files.items(), reverse=True):
        for index, (spot, spot_length) in enumerate(spans):
            if spot > start:
                break
            if spot_length >= length:
                disk[spot : spot + length] = disk[start : start + length]
                disk[start : start + length] = [None] * length
                del spans[index]
                new_start = spot + length
                if index < len(spans) and spans[index][0] == new_start:
                    spans[index][1] = spot_length - length
                else:
                    spans.insert(index, [new_start, spot_length - length])
                break
    return disk


def checksum(disk: Disk) -> int:
    """Sum of block position times file id over occupied blocks."""
    return sum(i * file_id for i, file_id in enumerate(disk) if file_id is not None)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compact a fragmented disk.")
    parser.add_argument("input", nargs="?", default="inputs/9.txt", type=Path)
    args = parser.parse_args(argv)

    disk_map = args.input.read_text()
    print(f"A checksum of {checksum(compact_blocks(disk_map))}")
    print(f"A revised checksum of {checksum(compact_files(disk_map))}")