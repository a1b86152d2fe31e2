import logging
import bcrypt
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.auth.models import User
from app.shared.errors import AuthError, ConflictError, ValidationError

logger = logging.getLogger(__name__)

MIN_PASSWORD_LEN = 6
MAX_PASSWORD_BYTES = 72  # bcrypt input limit

def _hash(pw: str) -> str:
    return bcrypt.hashpw(pw.encode(), bcrypt.gensalt()).decode()

def _verify(pw: str, ph: str) -> bool:
    try:
        return bcrypt.checkpw(pw.encode(), ph.encode())
    except ValueError:
        # malformed stored hash or overlong password
        return False

def _normalize_email(email: str) -> str:
    return email.lower().strip()

def _public(u: User) -> dict:
    return {"id": u.id, "name": u.name, "email": u.email}

def register_user(db: Session, name: str | None, email: str | None, password: str | None) -> dict:
    name = (name or "").strip()
    email = _normalize_email(email or "")
    if not name or not email or not password:
        raise ValidationError("All fields are required")
    if len(password) < MIN_PASSWORD_LEN:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LEN} characters")
    if len(password.encode()) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

    if db.scalars(select(User).where(User.email == email)).first():
        raise ConflictError("User already exists")
    u = User(name=name, email=email, password_hash=_hash(password))
    db.add(u)
    try:
        db.commit()
    except IntegrityError:
        # lost a race against a concurrent signup for the same email
        db.rollback()
        raise ConflictError("User already exists")
    db.refresh(u)
    logger.info("user registered id=%s", u.id)
    return _public(u)

def authenticate_user(db: Session, email: str, password: str) -> dict:
    u = db.scalars(select(User).where(User.email == _normalize_email(email))).first()
    if not u:
        logger.warning("login failed reason=no_such_user")
        raise AuthError("invalid credentials")
    if not _verify(password, u.password_hash):
        logger.warning("login failed reason=wrong_password user=%s", u.id)
        raise AuthError("invalid credentials")
    logger.info("login ok user=%s", u.id)
    return _public(u)

def get_user(db: Session, user_id: str) -> dict | None:
    u = db.get(User, user_id)
    return _public(u) if u else None
