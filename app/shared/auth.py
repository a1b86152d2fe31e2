# app/shared/auth.py
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any, Tuple

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError  # python-jose[cryptography]

from app.shared.config import settings
from app.shared.errors import AuthError

bearer = HTTPBearer(auto_error=False, scheme_name="bearerAuth")

def create_access_token(
    sub: str,
    extra: Optional[Dict[str, Any]] = None,
    minutes: Optional[int] = None,
) -> Tuple[str, datetime]:
    now = datetime.now(timezone.utc)
    exp = now + timedelta(minutes=minutes or settings.JWT_EXPIRE_MIN)
    payload: Dict[str, Any] = {
        "sub": sub,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    if settings.JWT_ISS:
        payload["iss"] = settings.JWT_ISS
    if settings.JWT_AUD:
        payload["aud"] = settings.JWT_AUD
    if extra:
        payload.update(extra)
    return jwt.encode(payload, settings.JWT_KEY, algorithm=settings.JWT_ALG), exp

def current_session(token: str) -> str:
    """Verify signature and expiry of a session token and return its user id."""
    try:
        payload = jwt.decode(
            token,
            settings.JWT_KEY,
            algorithms=[settings.JWT_ALG],
            audience=settings.JWT_AUD,
            issuer=settings.JWT_ISS,
            options={
                "verify_aud": bool(settings.JWT_AUD),
                "verify_iss": bool(settings.JWT_ISS),
            },
        )
    except JWTError as e:
        raise AuthError("invalid session", details=str(e))

    sub = payload.get("sub")
    if not sub:
        raise AuthError("invalid session", details="missing sub")
    return sub

def current_user_id(request: Request, creds: HTTPAuthorizationCredentials = Depends(bearer)) -> str:
    # Bearer header wins over the session cookie
    token = creds.credentials if creds else request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        raise AuthError("not authenticated")
    return current_session(token)
