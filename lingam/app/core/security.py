"""
Security and Authentication for the back-office API.

OAuth2 password flow with JWT bearer tokens. Storefront routes (booking,
testimonial submission, public listings) need no token; every back-office
route declares the scope it requires.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, List

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer, SecurityScopes
from jose import JWTError, jwt
from pydantic import BaseModel

from lingam.app.core.config import get_settings

settings = get_settings()

APPOINTMENT_READ = "appointment:read"
APPOINTMENT_WRITE = "appointment:write"
CUSTOMER_READ = "customer:read"
CUSTOMER_WRITE = "customer:write"
TESTIMONIAL_MODERATE = "testimonial:moderate"
STORE_SETTINGS_WRITE = "store:settings:write"

oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.api_prefix.lstrip('/')}/auth/token",
    scopes={
        APPOINTMENT_READ: "List and view booked appointments",
        APPOINTMENT_WRITE: "Change appointment status or delete appointments",
        CUSTOMER_READ: "Read the customer ledger",
        CUSTOMER_WRITE: "Create, update and delete customers; record visits and purchases",
        TESTIMONIAL_MODERATE: "Approve, feature and delete testimonials",
        STORE_SETTINGS_WRITE: "Edit the public store information",
    },
)


class Role:
    ADMIN = "admin"


ROLE_SCOPES = {
    Role.ADMIN: [
        APPOINTMENT_READ, APPOINTMENT_WRITE,
        CUSTOMER_READ, CUSTOMER_WRITE,
        TESTIMONIAL_MODERATE,
        STORE_SETTINGS_WRITE,
    ],
}


class User(BaseModel):
    username: str
    role: str
    scopes: List[str] = []


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Generate a signed JWT token.
    """
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=15)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


async def get_current_user(
    security_scopes: SecurityScopes,
    token: str = Depends(oauth2_scheme),
) -> User:
    """
    Validate the JWT and check the scopes the route asks for.
    """
    if security_scopes.scopes:
        authenticate_value = f'Bearer scope="{security_scopes.scope_str}"'
    else:
        authenticate_value = "Bearer"

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": authenticate_value},
    )

    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        raise credentials_exception

    username: Optional[str] = payload.get("sub")
    if username is None:
        raise credentials_exception
    role: str = payload.get("role", "")
    token_scopes: List[str] = payload.get("scopes", ROLE_SCOPES.get(role, []))

    for scope in security_scopes.scopes:
        if scope not in token_scopes:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Not enough permissions. Required scope: {scope}",
                headers={"WWW-Authenticate": authenticate_value},
            )

    return User(username=username, role=role, scopes=token_scopes)
