# schemas.py
from pydantic import BaseModel, ConfigDict, Field
from fastapi import Form
from typing import List


class EnderecoRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    cep: str | None = None
    logradouro: str | None = None
    numero: str | None = None
    complemento: str | None = None
    bairro: str | None = None
    cidade: str | None = None
    estado: str | None = None


class EmpreendedorResumo(BaseModel):
    """Dados públicos do empreendedor, sem o hash da senha."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str | None = None
    email: str | None = None
    cpf: str | None = None
    telefone: str | None = None
    endereco_id: int | None = None
    descricao: str | None = None
    foto: str | None = None
    tipo: str


class EmpreendedorRead(EmpreendedorResumo):
    endereco: EnderecoRead | None = None


class EmpreendedorComSenha(EmpreendedorRead):
    senha: str


class EmpreendedorPage(BaseModel):
    content: List[EmpreendedorResumo]
    totalPages: int


class SenhaUpdate(BaseModel):
    senha: str = Field(min_length=1)


class EmpreendedorUpdate(BaseModel):
    """Atualização completa: campos ausentes são gravados como nulos."""
    nome: str | None = None
    email: str | None = None
    cpf: str | None = None
    telefone: str | None = None
    endereco: int | None = None
    descricao: str | None = None
    foto: str | None = None

    @classmethod
    def as_form(
        cls,
        nome: str | None = Form(None),
        email: str | None = Form(None),
        cpf: str | None = Form(None),
        telefone: str | None = Form(None),
        endereco: int | None = Form(None),
        descricao: str | None = Form(None),
    ) -> "EmpreendedorUpdate":
        # a foto chega pela dependência de upload (arquivo ou texto no mesmo campo)
        return cls(
            nome=nome,
            email=email,
            cpf=cpf,
            telefone=telefone,
            endereco=endereco,
            descricao=descricao,
        )


class MessageResponse(BaseModel):
    message: str
