#!/usr/bin/env python3
"""Write or verify requirements.txt from the pyproject dependency table.

Usage::

    python scripts/sync_requirements.py          # rewrite requirements.txt
    python scripts/sync_requirements.py --check  # fail when out of date
"""

from __future__ import annotations

import sys
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
REQUIREMENTS = ROOT / "requirements.txt"
# Installed profile: the library plus its command line.
EXTRAS = ("cli",)
HEADER = (
    "# Generated from pyproject.toml (base + extras: cli)\n"
    "# Do not edit manually; run: python scripts/sync_requirements.py\n"
    "\n"
)


def declared() -> list[str]:
    """Return the sorted runtime requirements for the installed profile."""
    project = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))["project"]
    wanted = set(project.get("dependencies", []))
    for extra in EXTRAS:
        wanted.update(project.get("optional-dependencies", {}).get(extra, []))
    return sorted(req.strip() for req in wanted if req.strip())


def render() -> str:
    return HEADER + "".join(f"{req}\n" for req in declared())


def main(argv: list[str]) -> int:
    expected = render()
    if "--check" in argv:
        current = REQUIREMENTS.read_text(encoding="utf-8") if REQUIREMENTS.exists() else ""
        if current != expected:
            print(
                "requirements.txt is out of sync with pyproject.toml; "
                "run: python scripts/sync_requirements.py",
                file=sys.stderr,
            )
            return 1
        print("requirements.txt is up to date.")
        return 0
    REQUIREMENTS.write_text(expected, encoding="utf-8")
    print(f"Wrote {len(declared())} requirements to {REQUIREMENTS.name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
