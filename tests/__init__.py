"""Test package initialisation for BB Sight."""

from pathlib import Path
import sys

# Make the top-level modules (config, logging_config) importable when the
# tests run from another working directory without an installed package.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
