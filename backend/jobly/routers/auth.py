# jobly/routers/auth.py
from pydantic import BaseModel
from fastapi import APIRouter

from jobly.core.config import settings
from jobly.auth.jwt import create_access_token
from jobly.core.errors import unauthorized
from jobly.core import ErrorReason

router = APIRouter(prefix="/auth", tags=["auth"])

class LoginRequest(BaseModel):
    username: str
    password: str

class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in_minutes: int

@router.post("/token", response_model=LoginResponse)
def login(req: LoginRequest) -> LoginResponse:
    if req.username != settings.ADMIN_USERNAME or req.password != settings.ADMIN_PASSWORD:
        raise unauthorized("Invalid credentials", reason=ErrorReason.AUTH_INVALID)

    token = create_access_token(subject=settings.ADMIN_USERNAME, is_admin=True)
    return LoginResponse(
        access_token=token,
        expires_in_minutes=settings.JWT_ACCESS_TOKEN_EXPIRES_MINUTES,
    )
