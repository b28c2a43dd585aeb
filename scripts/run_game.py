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
from casefile.investigation.progress import ProgressController
from casefile.presentation.views import format_view, render_screen
from casefile.ui.commands import Session, handle_command, menu_text


def _show(session: Session) -> None:
    print()
    print(format_view(render_screen(session.screen, session.controller)))
    print()
    print(menu_text(session.screen))


def main() -> None:
    parser = argparse.ArgumentParser(description="Plain terminal loop for a single case.")
    parser.add_argument("--case", type=str, default=str(config.DEFAULT_CASE_PATH))
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format=config.LOG_FORMAT)
    try:
        case = load_case_file(Path(args.case))
    except CaseDataError as exc:
        print(f"Cannot open case: {exc}", file=sys.stderr)
        sys.exit(1)

    session = Session(controller=ProgressController(case))
    _show(session)
    while True:
        try:
            value = input("> ")
        except EOFError:
            break
        result = handle_command(session, value)
        if result.quit:
            break
        if result.message:
            print(result.message)
        _show(session)


if __name__ == "__main__":
    main()
