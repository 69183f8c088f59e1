# server/api/auth.py

import json
import logging
from jose import JWTError, jwt
from pydantic import BaseModel
from fastapi import APIRouter, Depends, Header
from datetime import datetime, timedelta, timezone
from config import Settings, get_settings
from core.errors import InvalidCredentials, InvalidToken, Unauthorized


ALGORITHM = "HS256"


router = APIRouter()
logger = logging.getLogger(__name__)


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class Token(BaseModel):
    token: str


def load_users(path: str) -> dict[str, str]:
    """
    Reads the username -> password mapping from a JSON file shaped like
    {"users": {"alice": "secret"}}. Read on every call.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)["users"]


def authenticate_user(users: dict[str, str], username: str | None, password: str | None) -> bool:
    if not username or username not in users:
        return False
    stored = users[username]
    return bool(stored) and stored == password


def create_access_token(data: dict, secret_key: str, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=Settings.access_token_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str, secret_key: str) -> dict:
    """
    Verifies signature and expiry. Every failure becomes InvalidToken.
    """
    try:
        payload = jwt.decode(token, secret_key, algorithms=[ALGORITHM], options={"require_exp": True})
    except JWTError:
        raise InvalidToken()
    if not payload.get("username"):
        raise InvalidToken()
    return payload


@router.post("/login", response_model=Token)
def login(req: LoginRequest, settings: Settings = Depends(get_settings)):
    try:
        users = load_users(settings.users_file)
    except (OSError, ValueError, KeyError, TypeError) as e:
        logger.error("Cannot load credentials from %s: %s", settings.users_file, e)
        raise InvalidCredentials()

    if not authenticate_user(users, req.username, req.password):
        logger.warning("Failed login for %r", req.username)
        raise InvalidCredentials()

    token = create_access_token(
        data={"username": req.username},
        secret_key=settings.secret_key,
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )
    return {"token": token}


def get_current_user(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Bearer-token gate for protected endpoints. Returns the username.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise Unauthorized()

    token = authorization.split(" ")[1]
    payload = decode_access_token(token, settings.secret_key)
    return payload["username"]
