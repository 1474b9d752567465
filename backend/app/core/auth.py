# app/core/auth.py
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from firebase_admin import auth as fb_auth

from app.config import init_firebase
from app.schemas.principal import Principal

# "Authorization: Bearer <Firebase ID token>"; a missing header is reported by get_principal
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def verify_id_token(id_token: str) -> dict:
    """
    Firebase ID token verification with the revocation check on, so tokens
    issued before a sign-out are refused.
    """
    try:
        return fb_auth.verify_id_token(id_token, app=init_firebase(), check_revoked=True)
    except fb_auth.ExpiredIdTokenError:
        raise _unauthorized("Token expired")
    except fb_auth.RevokedIdTokenError:
        raise _unauthorized("Session revoked")
    except (fb_auth.InvalidIdTokenError, fb_auth.UserDisabledError, ValueError):
        raise _unauthorized("Invalid authentication token")


def principal_from_claims(decoded: dict) -> Principal:
    """
    Roles:
    - anonymous sign-in provider -> 'guest' (a storefront visitor with a session cart)
    - custom claim `admin: true` -> 'admin'
    - anyone else -> 'user'
    """
    uid = decoded.get("uid") or decoded.get("user_id")
    if not uid:
        raise _unauthorized("Invalid token payload")

    provider = (decoded.get("firebase") or {}).get("sign_in_provider")
    if provider == "anonymous":
        role = "guest"
    elif decoded.get("admin") is True:
        role = "admin"
    else:
        role = "user"

    return Principal(uid=uid, role=role, email=decoded.get("email"), display_name=decoded.get("name"))


# --------- FastAPI Dependencies --------- #

async def get_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    """Valid token required; answers 401 otherwise."""
    if not credentials or not credentials.credentials:
        raise _unauthorized("Authentication credentials were not provided")
    return principal_from_claims(verify_id_token(credentials.credentials))
