"""journey CLI: run the API, plan a trip, or keep a to-do list."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Callable, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from journey.application import ui_state
from journey.application.generate_suggestions import generate_suggestions
from journey.application.ui_state import PlannerState, TodoState
from journey.client import SuggestionClient
from journey.config.settings import get_settings
from journey.domain.enums import MoodTag, SuggestionStyle, TaskPriority
from journey.services.suggestion_presenter import render_cards

SUGGESTION_DELAY_SECONDS = 0.3

_HELP_TODO = """Commands:
  new <text>     start a task and show suggestions
  add [N]        add the current text, or suggestion N
  done <id>      toggle a task as completed
  rm <id>        delete a task
  list           show all tasks
  quit           exit"""


def _split_moods(values: list[str]) -> list[str]:
    moods: list[str] = []
    for value in values:
        for part in value.split(","):
            mood = part.strip().lower()
            if mood and mood not in moods:
                moods.append(mood)
    return moods


def _format_errors(exc: ValidationError) -> str:
    rows = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        rows.append(f"  - {loc}: {err.get('msg', 'invalid value')}")
    return "\n".join(rows)


# ── plan ──────────────────────────────────────────────


def build_planner_state(args: argparse.Namespace) -> PlannerState:
    state = PlannerState()
    state = ui_state.set_field(state, "departure", args.departure or "")
    state = ui_state.set_field(state, "destination", args.destination or "")
    state = ui_state.set_field(state, "departure_time", args.depart_at or "")
    state = ui_state.set_field(state, "arrival_time", args.arrive_by or "")
    state = ui_state.set_field(state, "style", args.style or SuggestionStyle.BALANCED.value)
    for mood in _split_moods(args.mood or []):
        if mood not in state.form.moods:
            state = ui_state.toggle_mood(state, mood)
    return state


def run_plan(args: argparse.Namespace, out=None) -> int:
    out = out or sys.stdout
    state = build_planner_state(args)
    if not ui_state.is_form_valid(state):
        print("Please fill in departure, destination, both times and at least one mood.", file=out)
        return 2
    try:
        request = ui_state.to_request(state)
    except ValidationError as exc:
        print("Invalid trip details:\n" + _format_errors(exc), file=out)
        return 2

    state = ui_state.start_request(state)
    if args.local:
        state = ui_state.receive_result(state, generate_suggestions(request))
    else:
        with SuggestionClient(args.api_url) as client:
            outcome = client.fetch(request)
        if outcome.error:
            state = ui_state.receive_failure(state, outcome.error, outcome.result)
        else:
            state = ui_state.receive_result(state, outcome.result)

    if state.error:
        print(f"Error: {state.error}", file=out)
    if state.result is not None:
        print(render_cards(state.result), file=out)
    return 0


# ── todo ──────────────────────────────────────────────


def _render_tasks(state: TodoState) -> str:
    if not state.tasks:
        return "No tasks yet."
    lines = []
    for task in state.tasks:
        mark = "x" if task.completed else " "
        lines.append(f"[{mark}] {task.id}  {task.text}  ({task.priority.value})")
    lines.append(f"{ui_state.pending_count(state)} pending / {len(state.tasks)} total")
    return "\n".join(lines)


def _render_suggestions(state: TodoState) -> str:
    if not state.suggestions:
        return "No suggestions."
    return "\n".join(f"  {idx}. {text}" for idx, text in enumerate(state.suggestions, start=1))


def handle_todo_command(
    state: TodoState,
    line: str,
    *,
    priority: TaskPriority = TaskPriority.MEDIUM,
    sleep: Callable[[float], None] = time.sleep,
) -> tuple[TodoState, str]:
    """Apply one command line; returns the new state and the text to show."""
    command, _, rest = line.strip().partition(" ")
    command = command.lower()
    rest = rest.strip()

    if command == "new":
        state = ui_state.set_draft(state, rest)
        sleep(SUGGESTION_DELAY_SECONDS)
        return state, _render_suggestions(state)
    if command == "add":
        if rest:
            if not rest.isdigit():
                return state, "Usage: add [N]"
            new_state = ui_state.accept_suggestion(state, int(rest) - 1, priority=priority)
        else:
            new_state = ui_state.add_task(state, priority=priority)
        if new_state is state:
            return state, "Nothing to add."
        return new_state, f"Added: {new_state.tasks[-1].text}"
    if command == "done" and rest:
        state = ui_state.toggle_task(state, rest)
        return state, _render_tasks(state)
    if command == "rm" and rest:
        state = ui_state.delete_task(state, rest)
        return state, _render_tasks(state)
    if command == "list":
        return state, _render_tasks(state)
    return state, _HELP_TODO


def run_todo(args: argparse.Namespace, input_fn: Callable[[str], str] = input, out=None) -> int:
    out = out or sys.stdout
    priority = TaskPriority(args.priority)
    state = TodoState()
    print(_HELP_TODO, file=out)
    while True:
        try:
            line = input_fn("\ntodo> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!", file=out)
            return 0
        if not line:
            continue
        if line.lower() in ("quit", "exit", "q"):
            print("Bye!", file=out)
            return 0
        state, message = handle_todo_command(state, line, priority=priority)
        print(message, file=out)


# ── serve ─────────────────────────────────────────────


def run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "journey.api.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_level="info",
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="journey", description="Mood-based journey suggestions")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="run the HTTP API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    plan = sub.add_parser("plan", help="suggest stopovers for a trip")
    plan.add_argument("--from", dest="departure", required=True, help="departure place")
    plan.add_argument("--to", dest="destination", required=True, help="destination place")
    plan.add_argument("--depart-at", required=True, help="HH:MM")
    plan.add_argument("--arrive-by", required=True, help="HH:MM")
    plan.add_argument(
        "--mood",
        action="append",
        help=f"repeatable or comma-separated: {', '.join(m.value for m in MoodTag)}",
    )
    plan.add_argument("--style", default=SuggestionStyle.BALANCED.value, help="safe / balanced / creative")
    plan.add_argument("--api-url", default=None, help="backend base URL (default: $JOURNEY_API_URL)")
    plan.add_argument("--local", action="store_true", help="run the suggestion pipeline in-process")

    todo = sub.add_parser("todo", help="interactive to-do list with suggestions")
    todo.add_argument("--priority", choices=[p.value for p in TaskPriority], default=TaskPriority.MEDIUM.value)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)
    if args.command == "serve":
        return run_serve(args)
    if args.command == "plan":
        return run_plan(args)
    return run_todo(args)


if __name__ == "__main__":
    sys.exit(main())
