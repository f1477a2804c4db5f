from datetime import timedelta
from typing import Optional

from jose import jwt, JWTError
from passlib.context import CryptContext

from videotube.constants import BCRYPT_ROUNDS, JWT_ALGORITHM
from videotube.utility.time import utc_now

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: Optional[str]) -> bool:
    if not hashed:
        return False
    return pwd_context.verify(plain, hashed)


def create_token(data: dict, secret: str, expires_minutes: int) -> str:
    to_encode = data.copy()
    expire = utc_now() + timedelta(minutes=expires_minutes)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, secret, algorithm=JWT_ALGORITHM)


def decode_token(token: str, secret: str) -> Optional[dict]:
    """Return the token claims, or None when the token is invalid or expired"""
    try:
        return jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except JWTError:
        return None
