# schemas.py
from pydantic import BaseModel, ConfigDict, EmailStr

class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str | None = None
    nome: str | None = None
    tipo: str

class LoginRequest(BaseModel):
    email: EmailStr
    senha: str

class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    tipo: str
    id: int | None

class TokenPayload(BaseModel):
    sub: str  # email
    role: str
