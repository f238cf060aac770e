"""
Authentication router.
Exchanges back-office credentials for a JWT.
"""

from datetime import timedelta
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from lingam.app.core.config import get_settings
from lingam.app.core.security import create_access_token
from lingam.app.services import auth_service

router = APIRouter()
settings = get_settings()


@router.post("/token")
async def login_for_access_token(form_data: OAuth2PasswordRequestForm = Depends()) -> Any:
    """
    Standard OAuth2 /token endpoint to exchange credentials for a JWT.
    """
    user = auth_service.authenticate_admin(settings, form_data.username, form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(
        data={"sub": user.username, "role": user.role, "scopes": user.scopes},
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )

    return {
        "access_token": access_token,
        "token_type": "bearer",
        "role": user.role,
        "scopes": user.scopes,
    }
