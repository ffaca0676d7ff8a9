# bloglist/routes/auth.py

"""Login route issuing bearer tokens."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from bloglist.dependencies import AuthServiceDep
from bloglist.schemas import LoginRequest, LoginResponse

router = APIRouter(prefix="/api/login", tags=["🔐 Auth"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=LoginResponse,
    summary="Login for access token",
    responses={
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"detail": "invalid username or password"}},
            },
        },
    },
    operation_id="auth_login",
)
async def login(credentials: LoginRequest, auth_service: AuthServiceDep) -> LoginResponse:
    """
    Login with username and password.

    Raises
    ------
    InvalidCredentialsError
        If authentication fails.
    """
    return await auth_service.login(
        credentials.username,
        credentials.password.get_secret_value(),
    )
