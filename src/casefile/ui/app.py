from __future__ import annotations

from pathlib import Path

from textual.app import App, ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Input, RichLog, Static

from casefile import config
from casefile.cases.loader import load_case_file
from casefile.domain.enums import SCREEN_LABELS
from casefile.domain.models import Case
from casefile.investigation.progress import ProgressController
from casefile.investigation.thresholds import CLUE_UNLOCK_INTERVIEWS
from casefile.presentation.views import format_view, render_screen
from casefile.ui.commands import Session, handle_command, menu_text


class CaseApp(App):
    TITLE = ""
    SUB_TITLE = ""
    BINDINGS = [
        ("f6", "focus_log", "Focus log"),
        ("f7", "focus_detail", "Focus detail"),
        ("f8", "focus_input", "Focus input"),
    ]
    CSS = """
    Screen {
        layout: vertical;
    }
    #header {
        height: auto;
        padding: 1 1;
    }
    #detail {
        height: 2fr;
        border: solid $secondary;
        padding: 0 1;
    }
    #detail_view {
        width: 100%;
    }
    #log {
        height: 1fr;
        border: solid $secondary;
        padding: 0 1;
    }
    #menu {
        height: auto;
        padding: 1 1;
    }
    #command {
        height: 3;
        padding: 0 1;
    }
    """

    def __init__(self, case: Case | None = None, case_path: Path | None = None) -> None:
        super().__init__()
        if case is None:
            case = load_case_file(case_path or config.DEFAULT_CASE_PATH)
        self.session = Session(controller=ProgressController(case))

    @property
    def controller(self) -> ProgressController:
        return self.session.controller

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("", id="header", markup=False)
            yield VerticalScroll(Static("", id="detail_view", expand=True, markup=False), id="detail")
            yield RichLog(id="log", wrap=True)
            yield Static(menu_text(self.session.screen), id="menu", markup=False)
            yield Input(placeholder="Comando (1-5, e N, d N o q)...", id="command")

    def on_mount(self) -> None:
        self._refresh()
        self._write(f"Caso {self.controller.case.case_id} abierto.")
        self._write("Focus: F6 log, F7 detail, F8 input (Tab cycles focus).")
        self.query_one("#command", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        value = event.value.strip()
        event.input.value = ""
        if not value:
            return
        result = handle_command(self.session, value)
        if result.quit:
            self.exit()
            return
        if result.message:
            self._write(result.message)
        self._refresh()

    def _write(self, message: str) -> None:
        self.query_one("#log", RichLog).write(message)

    def action_focus_log(self) -> None:
        self.query_one("#log", RichLog).focus()

    def action_focus_detail(self) -> None:
        self.query_one("#detail", VerticalScroll).focus()

    def action_focus_input(self) -> None:
        self.query_one("#command", Input).focus()

    def header_text(self) -> str:
        case = self.controller.case
        decision = self.controller.current_decision()
        lines = [
            f"{case.title}  |  {SCREEN_LABELS[self.session.screen]}",
            (
                f"Entrevistas {self.controller.interview_count()}/{len(case.interviews)}  "
                f"Pista {'destrabada' if self.controller.is_clue_unlocked() else 'bloqueada'} "
                f"({CLUE_UNLOCK_INTERVIEWS} necesarias)  "
                f"Decisión: {decision.label if decision else '-'}"
            ),
        ]
        return "\n".join(lines)

    def detail_text(self) -> str:
        return format_view(render_screen(self.session.screen, self.controller))

    def _refresh(self) -> None:
        self.query_one("#header", Static).update(self.header_text())
        self.query_one("#detail_view", Static).update(self.detail_text())
        self.query_one("#menu", Static).update(menu_text(self.session.screen))
