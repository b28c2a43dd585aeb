from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from casefile import config
from casefile.cases.loader import load_case_file
from casefile.domain.errors import CaseDataError
from casefile.ui.app import CaseApp


def main() -> None:
    parser = argparse.ArgumentParser(description="Textual front end for a single case.")
    parser.add_argument(
        "--case",
        type=str,
        default=str(config.DEFAULT_CASE_PATH),
        help="Case file to open (.json, .yml or .yaml).",
    )
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    parser.add_argument(
        "--log-file",
        type=str,
        default=str(config.LOG_FILE),
        help="Where to write logs while the terminal UI is running.",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format=config.LOG_FORMAT,
        filename=args.log_file,
    )
    try:
        case = load_case_file(Path(args.case))
    except CaseDataError as exc:
        print(f"Cannot open case: {exc}", file=sys.stderr)
        sys.exit(1)
    CaseApp(case=case).run()


if __name__ == "__main__":
    main()
