"""
Key sheet
=========
Everything a correspondent needs to assemble an identical device:
seed, disk contents, spindle key, and a SHA-256 fingerprint that both
sides can compare before trusting the setup.

Format (JSON):
  {"seed": ..., "disk_count": N, "key": [...], "disks": [...], "fingerprint": "..."}

The disks travel in full, so a sheet stays valid even if the random
generator behind `seed` changes.
"""

import json
import logging

from .cipher import DiskCipher
from .errors import JeffersonDiskError, KeySheetError

logger = logging.getLogger(__name__)

FIELDS = ("seed", "disk_count", "key", "disks", "fingerprint")


def export_keysheet(cipher: DiskCipher) -> str:
    sheet = {
        "seed":        cipher.seed(),
        "disk_count":  cipher.disk_count,
        "key":         cipher.key(),
        "disks":       list(cipher.disk_set),
        "fingerprint": cipher.fingerprint(),
    }
    return json.dumps(sheet, indent=2)


def load_keysheet(text: str) -> DiskCipher:
    """
    Rebuild the device described by `text`.
    Raises KeySheetError if the sheet is malformed or was altered.
    """
    try:
        sheet = json.loads(text)
    except json.JSONDecodeError as exc:
        raise KeySheetError(f"Key sheet is not valid JSON: {exc}") from exc
    if not isinstance(sheet, dict):
        raise KeySheetError("Key sheet must be a JSON object.")

    missing = [f for f in FIELDS if f not in sheet]
    if missing:
        raise KeySheetError(f"Key sheet is missing fields: {', '.join(missing)}")
    if not isinstance(sheet["disks"], list) or len(sheet["disks"]) != sheet["disk_count"]:
        raise KeySheetError("disk_count does not match the number of disks.")

    try:
        cipher = DiskCipher.from_settings(sheet["disks"], sheet["key"], seed=sheet["seed"])
    except (JeffersonDiskError, ValueError, TypeError) as exc:
        raise KeySheetError(f"Key sheet describes an invalid device: {exc}") from exc

    if cipher.fingerprint() != sheet["fingerprint"]:
        raise KeySheetError("Fingerprint mismatch: key sheet was altered.")
    logger.debug(f"Key sheet loaded: {cipher.disk_count} disks")
    return cipher
