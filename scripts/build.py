#!/usr/bin/env python3
"""Build standalone binary for tinytop."""

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).parent.parent


def build_pyinstaller() -> None:
    """Build standalone binary using PyInstaller."""
    entry_point = ROOT / "src" / "tinytop" / "__main__.py"

    cmd = [
        sys.executable,
        "-m",
        "PyInstaller",
        "--onefile",
        "--name",
        "tinytop",
        "--paths",
        str(ROOT / "src"),
        "--distpath",
        str(ROOT / "dist"),
        "--workpath",
        str(ROOT / "build"),
        "--specpath",
        str(ROOT / "build"),
        "--clean",
        str(entry_point),
    ]

    subprocess.run(cmd, check=True, cwd=ROOT)
    print(f"\nBinary built: {ROOT / 'dist' / 'tinytop'}")


if __name__ == "__main__":
    build_pyinstaller()
