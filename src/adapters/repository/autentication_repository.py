# autentication_repository.py
from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import Session
from domain.entities.usuario_entity import Usuario
from application.use_cases.security import verify_password

class AuthenticationRepository:
    """Data access for users/auth (SQLAlchemy implementation)."""

    def __init__(self, db: Session):
        self.db = db

    def get_user_by_email(self, email: str) -> Optional[Usuario]:
        return self.db.execute(select(Usuario).where(Usuario.email == email)).scalar_one_or_none()

    def verify_credentials(self, *, email: str, senha: str) -> Optional[Usuario]:
        user = self.get_user_by_email(email)
        if not user:
            return None
        if not verify_password(senha, user.senha):
            return None
        return user
