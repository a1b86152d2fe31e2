# app/auth/api.py
from fastapi import APIRouter, Depends, Response
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from app.shared.db import get_db
from app.shared.auth import create_access_token, current_user_id
from app.shared.config import settings
from app.shared.errors import NotFoundError
from app.shared.http import ok
from app.auth.schemas import SignupIn, LoginIn, UserOut, TokenOut
from app.auth.service import register_user, authenticate_user, get_user

router = APIRouter(prefix="/auth", tags=["Auth"])

def _issue_session(response: Response, user: dict) -> dict:
    token, exp = create_access_token(sub=user["id"])
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.JWT_EXPIRE_MIN * 60,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return {"access_token": token, "token_type": "bearer", "expires_at": exp, "user": user}

@router.post("/signup", response_model=UserOut, status_code=201)
def api_signup(inb: SignupIn, db: Session = Depends(get_db)):
    return register_user(db, inb.name, inb.email, inb.password)

@router.post("/login", response_model=TokenOut)
def api_login(inb: LoginIn, response: Response, db: Session = Depends(get_db)):
    user = authenticate_user(db, inb.email, inb.password)
    return _issue_session(response, user)

@router.post("/token", response_model=TokenOut)
def api_token(response: Response, form: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    # Swagger "Authorize" dialog: username is the email
    user = authenticate_user(db, form.username, form.password)
    return _issue_session(response, user)

@router.post("/logout")
def api_logout(response: Response):
    # tokens are stateless; dropping the cookie is all there is
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return ok({"logged_out": True})

@router.get("/me", response_model=UserOut)
def api_me(uid: str = Depends(current_user_id), db: Session = Depends(get_db)):
    user = get_user(db, uid)
    if not user:
        raise NotFoundError("User not found")
    return user
