"""Runtime defaults for casefile entry points."""

from __future__ import annotations

import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent

# Bundled cases ship as package data, so this resolves in installed wheels too.
DEFAULT_CASE_PATH = PACKAGE_DIR / "assets" / "cases" / "case001.json"

LOG_LEVEL = os.environ.get("CASEFILE_LOG_LEVEL", "INFO").upper()
LOG_FILE = Path(os.environ.get("CASEFILE_LOG_FILE", "casefile.log"))
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
