"""
jefferson_disk — Jefferson Disk (wheel cipher)
==============================================
A simulation of the rotating-disk cipher device: N shuffled alphabet
disks on a spindle in a secret order.

Modules:
    disks     — alphabet, disk type, disk / key generation
    cipher    — DiskCipher engine (encrypt, decrypt, inspection views)
    keysheet  — export / import of device settings with a fingerprint
    display   — plain-text views for a human operator

Not a security tool: the device has been breakable since 1893.
"""

__version__ = "1.0.0"

from .disks    import ALPHABET, ALPHABET_LENGTH, Disk, validate_message
from .errors   import (JeffersonDiskError, InvalidMessage, InvalidRow,
                       InvalidKey, KeySheetError)
from .cipher   import DiskCipher
from .keysheet import export_keysheet, load_keysheet
from .display  import format_all, format_disks, format_grid, format_key

__all__ = [
    "ALPHABET",
    "ALPHABET_LENGTH",
    "Disk",
    "validate_message",
    "DiskCipher",
    "JeffersonDiskError",
    "InvalidMessage",
    "InvalidRow",
    "InvalidKey",
    "KeySheetError",
    "export_keysheet",
    "load_keysheet",
    "format_all",
    "format_disks",
    "format_grid",
    "format_key",
]
