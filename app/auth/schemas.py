from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr

class SignupIn(BaseModel):
    # all optional so missing fields surface as ValidationError from the service
    name: str | None = None
    email: EmailStr | None = None
    password: str | None = None

class LoginIn(BaseModel):
    email: str
    password: str

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    name: str
    email: str

class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: UserOut
