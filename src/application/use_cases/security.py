# security.py
import os
import logging
from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from passlib.context import CryptContext
from fastapi import HTTPException, status, Depends
from fastapi.security import OAuth2PasswordBearer, HTTPBearer
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.orm import Session

from infrastructure.database import get_db
from domain.models.user_models import TokenPayload
from domain.entities.usuario_entity import Usuario
from domain.entities.user_classes import UserEntity, RoleType

logger = logging.getLogger(__name__)

SALT_ROUNDS = 10

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=SALT_ROUNDS,
)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")
http_bearer = HTTPBearer(auto_error=False)

JWT_SECRET = os.environ.get("JWT_SECRET", "change_this_in_prod")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
JWT_LEEWAY_SECONDS = int(os.environ.get("JWT_LEEWAY_SECONDS", "30"))

def hash_password(raw: str) -> str:
    if not isinstance(raw, str):
        raise TypeError("Password must be a string")
    return pwd_context.hash(raw)

def verify_password(raw: str, hashed: str | None) -> bool:
    if not isinstance(raw, str) or not hashed:
        return False
    return pwd_context.verify(raw, hashed)

def create_access_token(*, email: str, role: RoleType | str, expires_minutes: int | None = None) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes or ACCESS_TOKEN_EXPIRE_MINUTES)
    role_value = role.value if hasattr(role, "value") else str(role)
    payload = {"sub": email, "role": role_value, "exp": expire}
    return jwt.encode(payload, JWT_SECRET, algorithm=ALGORITHM)

def decode_token(token: str) -> TokenPayload:
    try:
        payload = jwt.decode(
            token,
            JWT_SECRET,
            algorithms=[ALGORITHM],
            options={"verify_exp": True, "leeway": JWT_LEEWAY_SECONDS},
        )
        return TokenPayload(sub=payload.get("sub"), role=payload.get("role"))
    except (JWTError, ValidationError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")

def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> UserEntity:
    payload = decode_token(token)
    user = db.execute(select(Usuario).where(Usuario.email == payload.sub)).scalar_one_or_none()
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    try:
        role = RoleType(user.tipo)
    except ValueError:
        logger.info("Usuário %s com tipo sem permissão: %s", user.id, user.tipo)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions")
    return UserEntity(id=user.id, email=user.email, nome=user.nome, role=role)

def require_roles(*allowed: RoleType):
    def _checker(current: UserEntity = Depends(get_current_user)) -> UserEntity:
        if current.role not in allowed:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions")
        return current
    return _checker

def swagger_bearer_auth():
    # Só registra o esquema Bearer no Swagger de rotas sem require_roles; não valida nada.
    return Depends(http_bearer)
