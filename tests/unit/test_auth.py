import datetime as dt

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from api.auth import create_access_token, current_user_id, decode_user_id
from config.settings import settings


def _creds(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def test_token_roundtrip():
    token = create_access_token("user-42")
    assert decode_user_id(token) == "user-42"
    assert current_user_id(_creds(token)) == "user-42"


def test_sub_claim_is_accepted():
    token = jwt.encode({"sub": "user-7"}, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    assert decode_user_id(token) == "user-7"


def test_expired_and_tampered_tokens_are_rejected():
    expired = create_access_token("user-1", expires_delta=dt.timedelta(seconds=-5))
    assert decode_user_id(expired) is None
    forged = jwt.encode({"userId": "user-1"}, "another-secret", algorithm="HS256")
    assert decode_user_id(forged) is None
    assert decode_user_id("not-a-jwt") is None


def test_missing_and_invalid_credentials_raise_401():
    with pytest.raises(HTTPException) as missing:
        current_user_id(None)
    assert missing.value.status_code == 401
    assert missing.value.detail == "No token, authorization denied"

    with pytest.raises(HTTPException) as invalid:
        current_user_id(_creds("garbage"))
    assert invalid.value.status_code == 401
    assert invalid.value.detail == "Token is not valid"
