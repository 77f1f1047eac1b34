"""
Plain-text views of a device for a human operator.
Symbols are separated by single spaces, one device row per line.
"""

from typing import Iterable

from .cipher import DiskCipher


def format_grid(rows: Iterable[str]) -> str:
    return "\n".join(" ".join(row) for row in rows)


def format_disks(cipher: DiskCipher, with_key: bool = False) -> str:
    return format_grid(cipher.disks(with_key))


def format_key(cipher: DiskCipher) -> str:
    return " ".join(str(k) for k in cipher.key())


def format_all(cipher: DiskCipher) -> str:
    """Seed, raw disks, key, and disks in spindle order."""
    return "\n".join([
        f"Seed: {cipher.seed()}",
        "",
        "Disks:",
        format_disks(cipher),
        "",
        f"Key: {format_key(cipher)}",
        "",
        "Disks with key:",
        format_disks(cipher, with_key=True),
    ])
