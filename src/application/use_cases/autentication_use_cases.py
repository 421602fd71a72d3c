from typing import Tuple
import logging
from sqlalchemy.orm import Session
from adapters.repository.autentication_repository import AuthenticationRepository
from application.use_cases.security import create_access_token
from domain.entities.usuario_entity import Usuario

logger = logging.getLogger(__name__)

class AuthenticationUseCases:
    """Application business rules for auth."""

    def __init__(self, db: Session):
        self.repo = AuthenticationRepository(db)

    def login(self, *, email: str, senha: str) -> Tuple[str, Usuario]:
        user = self.repo.verify_credentials(email=email, senha=senha)
        if not user:
            logger.info("Tentativa de login inválida para %s", email)
            raise ValueError("Credenciais Inválidas")

        token = create_access_token(email=user.email, role=user.tipo)
        return token, user
