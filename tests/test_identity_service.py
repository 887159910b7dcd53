import asyncio
import json

import httpx
import pytest

from app.api.deps import extract_bearer_token
from app.core.exceptions import AuthenticationError, ExternalServiceError
from app.services.identity_service import FirebaseIdentityProvider

LOOKUP_URL = "https://identity.test/v1/accounts:lookup"


def make_provider(handler, api_key="test-key"):
    return FirebaseIdentityProvider(
        api_key=api_key,
        lookup_url=LOOKUP_URL,
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


def test_verify_token_maps_account():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["key"] = request.url.params["key"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={
            "users": [{"localId": "uid-42", "email": "asha@example.com", "displayName": "Asha"}]
        })

    identity = asyncio.run(make_provider(handler).verify_token("id-token"))

    assert identity.uid == "uid-42"
    assert identity.email == "asha@example.com"
    assert identity.name == "Asha"
    assert seen == {"key": "test-key", "body": {"idToken": "id-token"}}


def test_rejected_token_is_authentication_error():
    def handler(request):
        return httpx.Response(400, json={"error": {"message": "INVALID_ID_TOKEN"}})

    with pytest.raises(AuthenticationError) as exc_info:
        asyncio.run(make_provider(handler).verify_token("bad"))

    assert exc_info.value.details == {"reason": "INVALID_ID_TOKEN"}


def test_empty_lookup_is_authentication_error():
    def handler(request):
        return httpx.Response(200, json={"kind": "identitytoolkit#GetAccountInfoResponse"})

    with pytest.raises(AuthenticationError):
        asyncio.run(make_provider(handler).verify_token("orphan"))


def test_disabled_account_is_authentication_error():
    def handler(request):
        return httpx.Response(200, json={"users": [{"localId": "uid-1", "disabled": True}]})

    with pytest.raises(AuthenticationError):
        asyncio.run(make_provider(handler).verify_token("disabled"))


def test_provider_outage_is_external_error():
    def handler(request):
        return httpx.Response(503, text="unavailable")

    with pytest.raises(ExternalServiceError):
        asyncio.run(make_provider(handler).verify_token("token"))


def test_network_failure_is_external_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ExternalServiceError):
        asyncio.run(make_provider(handler).verify_token("token"))


def test_missing_api_key_is_external_error(monkeypatch):
    from app.core.config import settings

    monkeypatch.setattr(settings, "FIREBASE_API_KEY", None)

    with pytest.raises(ExternalServiceError):
        asyncio.run(make_provider(lambda r: httpx.Response(200), api_key=None).verify_token("token"))


@pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer   ", "Token abc", "abc"])
def test_extract_bearer_token_rejects(header):
    with pytest.raises(AuthenticationError):
        extract_bearer_token(header)


def test_extract_bearer_token():
    assert extract_bearer_token("Bearer abc.def") == "abc.def"
    assert extract_bearer_token("bearer  xyz ") == "xyz"
