# entities.py
from dataclasses import dataclass
from enum import Enum

class RoleType(str, Enum):
    administrador = "administrador"
    empreendedor = "empreendedor"

@dataclass(frozen=True)
class UserEntity:
    id: int
    email: str | None
    nome: str | None
    role: RoleType
