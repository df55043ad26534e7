"""Pytest configuration — makes the root-level ``api`` and ``main`` modules importable."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))
