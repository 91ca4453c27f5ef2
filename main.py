"""Development entry point for azureauth-cli (no install needed).

    python -m main acquire --client <id> --tenant <id> --scope <scope>
    python -m main clear --client <id> --tenant <id> --scope <scope> --dry-run

The packages live in `src/`, so without an editable install Python cannot
find `cli`, `core` or `adapters`.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
