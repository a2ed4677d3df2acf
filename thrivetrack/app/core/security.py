from __future__ import annotations

import hashlib

from fastapi import Header, HTTPException, Query, Request, status


def _hash_identifier(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()[:12]


def resolve_user_id(
    request: Request,
    user_id: str | None = Query(default=None, max_length=100),
    user_header: str | None = Header(default=None, alias="X-ThriveTrack-User"),
) -> str:
    """Pick the journal owner for this request.

    There is no authentication: the query parameter wins, then the header, then
    the configured demo user.
    """

    candidate = user_id if user_id is not None else user_header
    if candidate is None:
        candidate = request.app.state.settings.demo_user_id
    candidate = candidate.strip()
    if not candidate:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="invalid user id",
        )
    request.state.telemetry_user = _hash_identifier(candidate)
    return candidate
