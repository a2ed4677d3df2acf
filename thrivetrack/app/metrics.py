from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "thrivetrack_requests_total",
    "Total HTTP requests processed by ThriveTrack",
    ("method", "path", "status"),
)

REQUEST_LATENCY = Histogram(
    "thrivetrack_request_latency_seconds",
    "HTTP request latency in seconds",
    ("method", "path"),
)

REQUEST_ERRORS = Counter(
    "thrivetrack_request_errors_total",
    "HTTP requests resulting in server errors",
    ("method", "path", "status"),
)

MOOD_ENTRY_EVENTS = Counter(
    "thrivetrack_mood_entries_total",
    "Mood entry writes by action",
    ("action",),
)

INSIGHTS_COMPUTED = Counter(
    "thrivetrack_insights_computed_total",
    "Mood insight pipeline runs",
    ("range",),
)

SUPPORT_PROMPTS = Counter(
    "thrivetrack_support_prompts_total",
    "Support prompts surfaced to users",
)

SNAPSHOT_FAILURES = Counter(
    "thrivetrack_snapshot_failures_total",
    "Failed mood snapshot fetches",
    ("source",),
)

__all__ = [
    "INSIGHTS_COMPUTED",
    "MOOD_ENTRY_EVENTS",
    "REQUEST_COUNT",
    "REQUEST_ERRORS",
    "REQUEST_LATENCY",
    "SNAPSHOT_FAILURES",
    "SUPPORT_PROMPTS",
]
