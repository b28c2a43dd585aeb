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
from casefile.domain.models import Case
from casefile.investigation.progress import ProgressController
from casefile.investigation.thresholds import CLUE_UNLOCK_INTERVIEWS


def _run_path(case: Case, choice_id: str) -> None:
    controller = ProgressController(case)
    for entry in case.interviews[:CLUE_UNLOCK_INTERVIEWS]:
        controller.record_interview(entry.id)
    controller.record_decision(choice_id)
    decision = controller.current_decision()
    print(f"[{choice_id}] {decision.label}: {controller.resolution_text(choice_id)}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Validate a case file and walk each ending.")
    parser.add_argument("paths", nargs="*", default=[str(config.DEFAULT_CASE_PATH)])
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format=config.LOG_FORMAT)
    failures = 0
    for raw_path in args.paths:
        path = Path(raw_path)
        try:
            case = load_case_file(path)
        except CaseDataError as exc:
            failures += 1
            print(f"{path}: INVALID ({type(exc).__name__}) {exc}")
            continue
        print(
            f"{path}: OK  {case.title} "
            f"({len(case.interviews)} interviews, {len(case.final_choices)} endings)"
        )
        if len(case.interviews) < CLUE_UNLOCK_INTERVIEWS:
            failures += 1
            print(f"  needs at least {CLUE_UNLOCK_INTERVIEWS} interviews to reach the clue.")
            continue
        for choice in case.final_choices:
            _run_path(case, choice.id)
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
