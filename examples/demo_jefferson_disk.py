"""
jefferson_disk — Live Demo
==========================
Run:  python examples/demo_jefferson_disk.py [seed]

Builds a 12-disk device, prints its disks and key, encrypts a message
on row 14, then sets the ciphertext back on the device and prints
every line so the plaintext can be read off by eye.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from jefferson_disk import DiskCipher, export_keysheet, format_all, format_grid

LINE = "═" * 70
MSG  = "HEIILHITTLER"
ROW  = 14

logging.basicConfig(level=logging.INFO, format=' %(message)s')

seed = int(sys.argv[1]) if len(sys.argv) > 1 else None
jd   = DiskCipher(seed=seed)

print(f"\n{LINE}")
print("  jefferson_disk — Wheel Cipher Demo")
print(LINE)
print(format_all(jd))

print(f"\nMessage: {MSG}\n")
key = jd.key()
ct  = jd.encrypt(MSG, ROW)
print(f"Encrypted message (row {ROW}): {ct}\n")

print("Disks with key and offsets:")
grid = jd.decrypt(key, ct)
print(format_grid(grid))
print(f"\n  ✓  Plaintext on line {ROW - 1}: {grid[ROW - 1]}")

print(f"\n{LINE}")
print("Key sheet:")
print(export_keysheet(jd))
print(LINE + "\n")
