"""
Error handling and edge case tests.

- Error taxonomy: http_status and codes of the service exceptions
- Error envelope produced by the registered handlers
- Token edge cases at the HTTP boundary (expired, wrong scheme, wrong secret)
- Request logging middleware headers
"""

import pytest

from test_fixtures import (
    client,
    test_engine,
    signed_up_user,
    auth_headers,
    meal_payload,
    hours_ago,
)
from app.config import settings
from app.exceptions import (
    DailyDietError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    UnauthorizedError,
)
from services.security import SessionAuthority


# =============================================================================
# EXCEPTION TAXONOMY
# =============================================================================


@pytest.mark.parametrize(
    "exc_class, status, code",
    [
        (ServiceValidationError, 400, "SERVICE_VALIDATION_ERROR"),
        (UnauthorizedError, 401, "UNAUTHORIZED"),
        (NotFoundError, 404, "NOT_FOUND"),
        (ConflictError, 409, "CONFLICT"),
    ],
)
def test_exception_defaults(exc_class, status, code):
    exc = exc_class()

    assert isinstance(exc, DailyDietError)
    assert exc.http_status == status
    assert exc.code == code
    assert str(exc) == exc.message


def test_exception_to_dict_includes_details_only_when_present():
    plain = NotFoundError("Meal 3 not found")
    detailed = ServiceValidationError("Bad field", details={"field": "name"})

    assert plain.to_dict() == {"code": "NOT_FOUND", "message": "Meal 3 not found"}
    assert detailed.to_dict()["details"] == {"field": "name"}


# =============================================================================
# ERROR ENVELOPE
# =============================================================================


def test_not_found_envelope(client):
    user = signed_up_user(client)

    response = client.get("/meals/12345", headers=user.headers)

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "MEAL_NOT_FOUND"
    assert "12345" in body["error"]["message"]
    assert "timestamp" in body


def test_validation_envelope_lists_field_errors(client):
    user = signed_up_user(client)
    payload = meal_payload()
    payload["on_diet"] = "maybe"

    response = client.post("/meals", json=payload, headers=user.headers)

    assert response.status_code == 422
    details = response.json()["error"]["details"]
    assert any("on_diet" in err["loc"] for err in details)


def test_unknown_route_uses_http_envelope(client):
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "HTTP_404"


# =============================================================================
# TOKEN EDGE CASES
# =============================================================================


def test_expired_token_is_rejected(client):
    user = signed_up_user(client)
    stale = SessionAuthority(
        settings.jwt_secret, clock=lambda: hours_ago(settings.token_ttl_hours + 1)
    ).issue(user.user_id)

    response = client.get("/meals", headers=auth_headers(stale))

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "TOKEN_EXPIRED"


def test_token_from_another_secret_is_rejected(client):
    user = signed_up_user(client)
    forged = SessionAuthority("attacker-secret-0123456789abcdef0123").issue(
        user.user_id
    )

    response = client.get("/meals", headers=auth_headers(forged))

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_TOKEN"


def test_non_bearer_scheme_is_rejected(client):
    user = signed_up_user(client)

    response = client.get("/meals", headers={"Authorization": f"Basic {user.token}"})

    assert response.status_code == 401


def test_missing_token_code(client):
    response = client.get("/metrics")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "MISSING_TOKEN"


# =============================================================================
# MIDDLEWARE
# =============================================================================


def test_responses_carry_request_id_and_timing(client):
    response = client.get("/health-check")

    assert response.headers.get("X-Request-ID")
    assert float(response.headers["X-Process-Time"]) >= 0
