# models.py
from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from infrastructure.database import Base


class Endereco(Base):
    __tablename__ = "enderecos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    cep: Mapped[str | None] = mapped_column(String(9), nullable=True)
    logradouro: Mapped[str | None] = mapped_column(String(255), nullable=True)
    numero: Mapped[str | None] = mapped_column(String(20), nullable=True)
    complemento: Mapped[str | None] = mapped_column(String(255), nullable=True)
    bairro: Mapped[str | None] = mapped_column(String(255), nullable=True)
    cidade: Mapped[str | None] = mapped_column(String(255), nullable=True)
    estado: Mapped[str | None] = mapped_column(String(2), nullable=True)


class Usuario(Base):
    """Tabela compartilhada por todos os tipos de usuário (empreendedor, administrador...)."""
    __tablename__ = "usuarios"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    nome: Mapped[str | None] = mapped_column(String(255), index=True, nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), unique=True, index=True, nullable=True)
    cpf: Mapped[str | None] = mapped_column(String(14), index=True, nullable=True)
    senha: Mapped[str] = mapped_column(String(255), nullable=False)
    telefone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    descricao: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    foto: Mapped[str | None] = mapped_column(String(500), nullable=True)
    tipo: Mapped[str] = mapped_column(String(50), index=True, nullable=False)
    endereco_id: Mapped[int | None] = mapped_column(
        "endereco", Integer, ForeignKey("enderecos.id", ondelete="SET NULL"), nullable=True
    )

    endereco: Mapped[Endereco | None] = relationship(Endereco, lazy="select")
