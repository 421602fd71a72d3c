# empreendedor_controller.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging

from infrastructure.database import get_db
from domain.entities.user_classes import UserEntity, RoleType
from domain.entities.errors import EmpreendedorError, InternalError
from domain.models.empreendedor_models import (
    EmpreendedorPage, EmpreendedorRead, EmpreendedorComSenha,
    EmpreendedorUpdate, SenhaUpdate, MessageResponse,
)
from application.use_cases.empreendedor_use_cases import EmpreendedorUseCases
from application.use_cases.security import require_roles
from application.utils.upload import UploadedImage, upload_image

router = APIRouter(tags=["empreendedores"])

logger = logging.getLogger(__name__)

ADMIN_ONLY = require_roles(RoleType.administrador)
EMPREENDEDOR_OU_ADMIN = require_roles(RoleType.empreendedor, RoleType.administrador)


@router.get("/empreendedores", response_model=EmpreendedorPage)
def list_empreendedores(
    page: str | None = Query(None, description="Página (0-based)"),
    size: str | None = Query(None, description="Itens por página (1 a 23, padrão 6)"),
    nome: str | None = Query(None, description="Trecho do nome para pesquisa"),
    db: Session = Depends(get_db),
    _: UserEntity = Depends(ADMIN_ONLY),
):
    try:
        return EmpreendedorUseCases(db).list_empreendedores(page=page, size=size, nome=nome)
    except Exception:
        logger.exception("Falha ao listar empreendedores")
        raise InternalError()


@router.put("/empreendedores/senha/{empreendedor_id}", response_model=MessageResponse)
def update_password(
    empreendedor_id: str,
    payload: SenhaUpdate,
    db: Session = Depends(get_db),
    _: UserEntity = Depends(EMPREENDEDOR_OU_ADMIN),
):
    try:
        EmpreendedorUseCases(db).update_password(empreendedor_id, payload.senha)
        return {"message": "Senha atualizada com sucesso!"}
    except EmpreendedorError:
        raise
    except Exception:
        logger.exception("Falha ao atualizar senha do empreendedor %s", empreendedor_id)
        raise InternalError()


@router.get("/empreendedores/senha/{empreendedor_id}", response_model=EmpreendedorComSenha)
def get_empreendedor_com_senha(
    empreendedor_id: str,
    db: Session = Depends(get_db),
    _: UserEntity = Depends(EMPREENDEDOR_OU_ADMIN),
):
    try:
        return EmpreendedorUseCases(db).get_empreendedor_com_senha(empreendedor_id)
    except EmpreendedorError:
        raise
    except Exception:
        logger.exception("Falha ao buscar empreendedor %s", empreendedor_id)
        raise InternalError()


@router.get("/empreendedores/{empreendedor_id}", response_model=EmpreendedorRead)
def get_empreendedor(empreendedor_id: str, db: Session = Depends(get_db)):
    try:
        return EmpreendedorUseCases(db).get_empreendedor(empreendedor_id)
    except EmpreendedorError:
        raise
    except Exception:
        logger.exception("Falha ao buscar empreendedor %s", empreendedor_id)
        raise InternalError()


@router.put("/empreendedores/{empreendedor_id}", response_model=MessageResponse)
def update_empreendedor(
    empreendedor_id: str,
    foto: UploadedImage = Depends(upload_image("foto")),
    _: UserEntity = Depends(EMPREENDEDOR_OU_ADMIN),
    dados: EmpreendedorUpdate = Depends(EmpreendedorUpdate.as_form),
    db: Session = Depends(get_db),
):
    """
    Multipart: arquivo `foto` + nome, email, cpf, telefone, endereco, descricao.
    Atualização completa: campos não enviados ficam nulos.
    """
    try:
        EmpreendedorUseCases(db).update_profile(empreendedor_id, dados, foto)
        return {"message": "Empreendedor atualizado com sucesso"}
    except EmpreendedorError:
        raise
    except Exception:
        logger.exception("Falha ao atualizar empreendedor %s", empreendedor_id)
        raise InternalError()


@router.delete("/empreendedores/{empreendedor_id}", response_model=MessageResponse)
def delete_empreendedor(
    empreendedor_id: str,
    db: Session = Depends(get_db),
    _: UserEntity = Depends(ADMIN_ONLY),
):
    try:
        EmpreendedorUseCases(db).delete_empreendedor(empreendedor_id)
        return {"message": "Empreendedor deletado com sucesso"}
    except EmpreendedorError:
        raise
    except Exception:
        logger.exception("Falha ao deletar empreendedor %s", empreendedor_id)
        raise InternalError()
