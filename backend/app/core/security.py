"""
# `app/core/security.py` - Role checks

Authorization helpers layered on `app.core.auth.get_principal`. Use them with
`Depends(...)` on routers or single endpoints.

| Dependency      | Allows          | Otherwise |
|-----------------|-----------------|-----------|
| `get_principal` | any valid token | 401       |
| `require_admin` | `role == admin` | 403       |

Admin is granted through the Firebase custom claim `admin: true`.
"""
from fastapi import Depends, HTTPException, status

from app.core.auth import get_principal
from app.schemas.principal import Principal


def require_admin(principal: Principal = Depends(get_principal)) -> Principal:
    """
    Admin users only.
    """
    if principal.role != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privilege required."
        )
    return principal
