"""
Admin seeding operation.

Creates the platform's admin account through the running HTTP API:
register first, and if the username is already taken, log in instead.
Either way the returned user record is saved as JSON for later scripts.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx

from lessonbase.core.errors import ApiError, LessonbaseError, SourceError
from lessonbase.core.logging import get_logger
from lessonbase.ops.context import OperationContext
from lessonbase.ops.requests import AdminSeedRequest
from lessonbase.ops.responses import AdminSeedResult
from lessonbase.ops.result import OperationResult, start_timer

logger = get_logger(__name__)

USERNAME_TAKEN = "Username already exists"


def _post_json(client: httpx.Client, endpoint: str, payload: dict[str, Any]) -> Any:
    """POST *payload* and return the decoded JSON body, raising :class:`ApiError`."""
    try:
        response = client.post(endpoint, json=payload)
    except httpx.HTTPError as exc:
        raise ApiError(f"API request failed: {exc}", cause=exc).with_context(
            url=f"{client.base_url}{endpoint}"
        ) from exc

    if response.is_error:
        # The platform answers with {"message": ...} or {"error": ...}.
        try:
            body = response.json()
        except ValueError:
            body = None
        message = None
        if isinstance(body, dict):
            message = body.get("message") or body.get("error")
        raise ApiError(
            f"API request failed: {message or response.reason_phrase}",
            status_code=response.status_code,
        ).with_context(url=str(response.url))

    try:
        return response.json()
    except ValueError as exc:
        raise ApiError(
            "API returned a non-JSON response",
            status_code=response.status_code,
            cause=exc,
        ).with_context(url=str(response.url)) from exc


def create_admin_user(
    ctx: OperationContext,
    request: AdminSeedRequest | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> OperationResult[AdminSeedResult]:
    """Register (or log in) the admin user and save it to ``admin-info.json``."""
    request = request or AdminSeedRequest()
    elapsed = start_timer()
    base_url = request.base_url or ctx.settings.api_base_url
    output_path = Path(request.output_path or ctx.settings.admin_info_path)

    register_payload = {
        "username": request.username,
        "password": request.password,
        "name": request.name,
        "email": request.email,
    }

    try:
        with httpx.Client(base_url=base_url, transport=transport, timeout=10.0) as client:
            try:
                user = _post_json(client, "/api/register", register_payload)
                action = "registered"
            except ApiError as exc:
                if USERNAME_TAKEN not in exc.message:
                    raise
                logger.info("admin_exists_logging_in", username=request.username)
                user = _post_json(
                    client,
                    "/api/login",
                    {"username": request.username, "password": request.password},
                )
                action = "logged_in"

        try:
            output_path.write_text(json.dumps(user, indent=2), encoding="utf-8")
        except OSError as exc:
            raise SourceError(f"Cannot write {output_path}: {exc}", cause=exc).with_context(
                path=str(output_path)
            ) from exc
    except LessonbaseError as exc:
        logger.error("admin_seed_failed", username=request.username, error=exc.message)
        return OperationResult.from_error(exc, elapsed_ms=elapsed())

    logger.info("admin_seeded", username=request.username, action=action, saved_to=str(output_path))
    return OperationResult.ok(
        AdminSeedResult(action=action, user=user, saved_to=str(output_path)),
        elapsed_ms=elapsed(),
    )
