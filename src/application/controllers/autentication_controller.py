# autentication_controller.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
import logging

from infrastructure.database import get_db
from domain.models.user_models import UserRead, LoginRequest, LoginResponse
from domain.entities.user_classes import UserEntity
from application.use_cases.autentication_use_cases import AuthenticationUseCases
from application.use_cases.security import get_current_user, swagger_bearer_auth

router = APIRouter(prefix="/auth", tags=["auth"])

logger = logging.getLogger(__name__)

@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    uc = AuthenticationUseCases(db)
    try:
        token, user = uc.login(email=payload.email, senha=payload.senha)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    return {
        "access_token": token,
        "token_type": "bearer",
        "tipo": user.tipo,
        "id": user.id,
    }

@router.get("/me", response_model=UserRead, dependencies=[swagger_bearer_auth()])
def me(current: UserEntity = Depends(get_current_user)):
    return UserRead(
        id=current.id,
        email=current.email,
        nome=current.nome,
        tipo=current.role.value,
    )
