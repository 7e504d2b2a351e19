from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Header, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlmodel import Session

from storefront.core.config import settings
from storefront.core.cookies import sign_cookie
from storefront.core.security import decode_access_token
from storefront.db.session import get_session
from storefront.models.user import User, UserRead
from storefront.services.auth import AuthService

router = APIRouter()

TOKEN_COOKIE = "token"


class UserCreate(BaseModel):
    email: str
    password: str
    name: Optional[str] = None

class LoginRequest(BaseModel):
    email: str
    password: str

class LoginResponse(BaseModel):
    token: str
    user: UserRead

def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(session)

async def read_credentials(request: Request) -> LoginRequest:
    """Accept credentials as JSON or as a URL-encoded form."""
    if request.headers.get("content-type", "").startswith("application/x-www-form-urlencoded"):
        data = dict(await request.form())
    else:
        try:
            data = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Malformed JSON body")
    try:
        return LoginRequest.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError(e.errors())

async def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None),
    service: AuthService = Depends(get_auth_service),
) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
    )
    # Header first, then the signed cookie set at login
    token = authorization or getattr(request.state, "signed_cookies", {}).get(TOKEN_COOKIE)
    if not token:
        raise credentials_exception
    if token.startswith("Bearer "):
        token = token[len("Bearer "):]

    user_id = decode_access_token(token)
    if user_id is None:
        raise credentials_exception

    user = service.get_user(user_id)
    if user is None:
        raise credentials_exception
    return user

@router.post("/signup", response_model=UserRead, status_code=201)
def signup(user_in: UserCreate, service: AuthService = Depends(get_auth_service)):
    return service.register_user(user_in.email, user_in.password, name=user_in.name)

@router.post("/login", response_model=LoginResponse)
def login(
    response: Response,
    credentials: LoginRequest = Depends(read_credentials),
    service: AuthService = Depends(get_auth_service),
):
    user, error_message = service.authenticate_user(credentials.email, credentials.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=error_message)

    token = service.issue_token(user)
    response.set_cookie(
        TOKEN_COOKIE,
        sign_cookie(token, settings.COOKIE_SECRET),
        httponly=True,
        secure=True,
        samesite="none",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
    return {"token": token, "user": UserRead.model_validate(user)}

@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(TOKEN_COOKIE, secure=True, samesite="none")
    return {"message": "Logged out"}

@router.get("/me", response_model=UserRead)
def read_user_me(current_user: User = Depends(get_current_user)):
    """
    Get current user.
    """
    return current_user
