"""Pytest configuration.

The repository uses a flat `src/` namespace layout. This conftest ensures tests can import from
`src.*` when running `pytest` from a checkout that was not installed with `pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))
