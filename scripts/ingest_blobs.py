"""CLI utility to ingest the latest Celenium rollup blob on a fixed interval."""

from pathlib import Path
import sys


# Ensure the repository root (which contains the ``blobtrack`` package) is on PYTHONPATH
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from blobtrack.ingest import main


if __name__ == "__main__":
    sys.exit(main())
