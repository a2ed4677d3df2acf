# ruff: noqa: RUF001
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from .categories import format_mood
from .normalizer import NormalizedRecord

SUPPORT_WINDOW = 5
SUPPORT_THRESHOLD = 2.0
SUPPORT_MESSAGE = (
    "It looks like your last few check-ins have been on the tougher side. "
    "If you’d like, you can explore some gentle support resources."
)
DEFAULT_RESOURCES_PATH = "/api/v1/resources"


@dataclass(frozen=True)
class SupportPromptState:
    """One-shot flag for a single screen visit."""

    shown: bool = False
    avg: str | None = None


@dataclass(frozen=True)
class SupportPrompt:
    avg: str
    message: str = SUPPORT_MESSAGE
    resources_path: str = DEFAULT_RESOURCES_PATH
    dismissible: bool = True


def recent_average(records: Sequence[NormalizedRecord], window: int = SUPPORT_WINDOW) -> float | None:
    """Mean of the ``window`` newest records, ``None`` when there are fewer."""

    if len(records) < window:
        return None
    recent = sorted(records, key=lambda record: record.created_at, reverse=True)[:window]
    return sum(record.mood_value for record in recent) / window


def evaluate_support_prompt(
    records: Sequence[NormalizedRecord],
    state: SupportPromptState,
    *,
    resources_path: str = DEFAULT_RESOURCES_PATH,
) -> tuple[SupportPrompt | None, SupportPromptState]:
    """Decide whether the support prompt should surface for this visit.

    ``records`` must be the whole normalized history, not the range-filtered
    subset. The returned state replaces ``state``; once ``shown`` is set the
    prompt never fires again for the same visit.
    """

    if state.shown:
        return None, state
    avg = recent_average(records)
    if avg is None or avg >= SUPPORT_THRESHOLD:
        return None, state
    frozen = format_mood(avg)
    prompt = SupportPrompt(avg=frozen, resources_path=resources_path)
    return prompt, replace(state, shown=True, avg=frozen)


__all__ = [
    "SUPPORT_MESSAGE",
    "SUPPORT_THRESHOLD",
    "SUPPORT_WINDOW",
    "SupportPrompt",
    "SupportPromptState",
    "evaluate_support_prompt",
    "recent_average",
]
