"""Response error extraction for load test observability.

Handles the storefront's three error shapes:

- Pydantic validation (422): {"detail": [{"loc": [...], "msg": "...", "type": "..."}]}
- Domain errors (400/401/403/404/503): {"error": {"field": ["msg", ...]}}
- Empty listings (404): {"message": "msg"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a compact, human-readable message from an API error response."""
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if isinstance(body.get("detail"), list):
        parts = []
        for err in body["detail"]:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    if "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            return " | ".join(
                f"{field}: {'; '.join(msgs) if isinstance(msgs, list) else msgs}" for field, msgs in error.items()
            )
        return str(error)

    if "message" in body:
        return str(body["message"])

    return str(body)[:300]


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
