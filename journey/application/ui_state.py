"""Client-side UI state as immutable values with pure transitions.

Front ends (the CLI, or any other renderer) hold one state object and
replace it with the return value of a transition; nothing here mutates
its input or performs I/O.
"""

from __future__ import annotations

import datetime as dt
import uuid
from dataclasses import dataclass, field, replace
from typing import Optional

from journey.application.contracts import SuggestionRequest
from journey.domain.enums import SuggestionStyle, TaskPriority, coerce_style
from journey.domain.models import SuggestionResult, Task
from journey.domain.templates import match_templates

FORM_FIELDS = ("departure", "destination", "departure_time", "arrival_time", "style")


# ── Journey planner form ─────────────────────────────


@dataclass(frozen=True)
class PlannerForm:
    departure: str = ""
    destination: str = ""
    departure_time: str = ""
    arrival_time: str = ""
    moods: tuple[str, ...] = ()
    style: str = SuggestionStyle.BALANCED.value


@dataclass(frozen=True)
class PlannerState:
    form: PlannerForm = field(default_factory=PlannerForm)
    result: Optional[SuggestionResult] = None
    loading: bool = False
    error: Optional[str] = None


def set_field(state: PlannerState, name: str, value: str) -> PlannerState:
    if name not in FORM_FIELDS:
        raise KeyError(f"unknown form field: {name}")
    return replace(state, form=replace(state.form, **{name: value}), error=None)


def toggle_mood(state: PlannerState, mood: str) -> PlannerState:
    moods = state.form.moods
    if mood in moods:
        moods = tuple(m for m in moods if m != mood)
    else:
        moods = moods + (mood,)
    return replace(state, form=replace(state.form, moods=moods), error=None)


def is_form_valid(state: PlannerState) -> bool:
    form = state.form
    return bool(
        form.departure.strip()
        and form.destination.strip()
        and form.departure_time
        and form.arrival_time
        and form.moods
    )


def to_request(state: PlannerState) -> SuggestionRequest:
    """Raises pydantic.ValidationError when the form is incomplete or malformed."""
    form = state.form
    return SuggestionRequest(
        departure=form.departure.strip(),
        destination=form.destination.strip(),
        departure_time=form.departure_time,
        arrival_time=form.arrival_time,
        moods=list(dict.fromkeys(mood.strip().lower() for mood in form.moods)),
        style=coerce_style(form.style),
    )


def start_request(state: PlannerState) -> PlannerState:
    return replace(state, loading=True, error=None)


def receive_result(state: PlannerState, result: SuggestionResult) -> PlannerState:
    return replace(state, loading=False, result=result, error=None)


def receive_failure(
    state: PlannerState,
    message: str,
    fallback: Optional[SuggestionResult] = None,
) -> PlannerState:
    return replace(state, loading=False, error=message, result=fallback)


# ── To-do list ───────────────────────────────────────


@dataclass(frozen=True)
class TodoState:
    tasks: tuple[Task, ...] = ()
    draft: str = ""
    suggestions: tuple[str, ...] = ()


def set_draft(state: TodoState, text: str) -> TodoState:
    return replace(state, draft=text, suggestions=tuple(match_templates(text)))


def add_task(
    state: TodoState,
    text: Optional[str] = None,
    *,
    priority: TaskPriority = TaskPriority.MEDIUM,
    now: Optional[dt.datetime] = None,
    task_id: Optional[str] = None,
) -> TodoState:
    """Append a task from ``text`` (or the current draft); blank text is ignored."""
    body = (state.draft if text is None else text).strip()
    if not body:
        return state
    task = Task(
        id=task_id or uuid.uuid4().hex[:12],
        text=body,
        created_at=now or dt.datetime.now(dt.timezone.utc),
        priority=priority,
    )
    return replace(state, tasks=state.tasks + (task,), draft="", suggestions=())


def accept_suggestion(state: TodoState, index: int, **kwargs) -> TodoState:
    if not 0 <= index < len(state.suggestions):
        return state
    return add_task(state, state.suggestions[index], **kwargs)


def toggle_task(state: TodoState, task_id: str) -> TodoState:
    tasks = tuple(
        task.model_copy(update={"completed": not task.completed}) if task.id == task_id else task
        for task in state.tasks
    )
    return replace(state, tasks=tasks)


def delete_task(state: TodoState, task_id: str) -> TodoState:
    return replace(state, tasks=tuple(task for task in state.tasks if task.id != task_id))


def pending_count(state: TodoState) -> int:
    return sum(1 for task in state.tasks if not task.completed)


__all__ = [
    "PlannerForm",
    "PlannerState",
    "TodoState",
    "accept_suggestion",
    "add_task",
    "delete_task",
    "is_form_valid",
    "pending_count",
    "receive_failure",
    "receive_result",
    "set_draft",
    "set_field",
    "start_request",
    "to_request",
    "toggle_mood",
    "toggle_task",
]
