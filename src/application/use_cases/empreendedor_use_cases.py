import math
import logging
from sqlalchemy.orm import Session
from adapters.repository.empreendedor_repository import EmpreendedorRepository
from application.use_cases.security import hash_password
from application.utils import cpf as CPF
from application.utils.upload import UploadedImage, discard_upload
from domain.entities.errors import NotFound, ValidationFailed
from domain.entities.usuario_entity import Usuario
from domain.models.empreendedor_models import EmpreendedorUpdate

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 6
MAX_PAGE_SIZE = 23
MAX_ID = 2**63 - 1


def _parse_int(raw: str | None) -> int | None:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def _parse_id(raw: str | None) -> int | None:
    # ids fora da faixa de um INTEGER do banco não existem
    parsed = _parse_int(raw)
    return parsed if parsed is not None and 1 <= parsed <= MAX_ID else None


def resolve_page(raw: str | None) -> int:
    page = _parse_int(raw)
    return page if page is not None and page > 0 else 0


def resolve_size(raw: str | None) -> int:
    size = _parse_int(raw)
    return size if size is not None and 1 <= size <= MAX_PAGE_SIZE else DEFAULT_PAGE_SIZE


class EmpreendedorUseCases:
    def __init__(self, db: Session):
        self.repo = EmpreendedorRepository(db)

    def list_empreendedores(self, *, page: str | None, size: str | None, nome: str | None) -> dict:
        """
        Três modos, na ordem:
        - `nome` informado: filtra por nome e pagina;
        - `page` e `size` informados: pagina sem filtro de nome;
        - caso contrário: devolve todos os empreendedores.
        `totalPages` é sempre calculado com o tamanho de página efetivo.
        """
        page_number = resolve_page(page)
        page_size = resolve_size(size)
        offset = page_number * page_size

        if nome:
            rows, total = self.repo.find_and_count(nome=nome, limit=page_size, offset=offset)
        elif page and size:
            rows, total = self.repo.find_and_count(limit=page_size, offset=offset)
        else:
            rows, total = self.repo.find_and_count()

        return {"content": rows, "totalPages": math.ceil(total / page_size)}

    def get_empreendedor(self, empreendedor_id: str) -> Usuario:
        parsed = _parse_id(empreendedor_id)
        empreendedor = self.repo.get_with_endereco(parsed) if parsed is not None else None
        if not empreendedor:
            raise NotFound()
        return empreendedor

    def get_empreendedor_com_senha(self, empreendedor_id: str) -> Usuario:
        return self.get_empreendedor(empreendedor_id)

    def update_password(self, empreendedor_id: str, senha: str) -> None:
        parsed = _parse_id(empreendedor_id)
        if parsed is None or not self.repo.get_by_id(parsed):
            raise NotFound()

        self.repo.update_password(parsed, hash_password(senha))
        logger.info("Senha do empreendedor %s atualizada", parsed)

    def update_profile(self, empreendedor_id: str, dados: EmpreendedorUpdate, foto: UploadedImage) -> None:
        parsed = _parse_id(empreendedor_id)
        if parsed is None or not self.repo.get_by_id(parsed):
            discard_upload(foto)
            raise NotFound()

        if not CPF.is_valid(dados.cpf):
            logger.info("CPF inválido na atualização do empreendedor %s", parsed)
            discard_upload(foto)
            raise ValidationFailed()

        self.repo.update_profile(parsed, dados.model_copy(update={"foto": foto.path}))

    def delete_empreendedor(self, empreendedor_id: str) -> None:
        parsed = _parse_id(empreendedor_id)
        if parsed is None or not self.repo.get_by_id(parsed):
            raise NotFound()

        self.repo.delete(parsed)
        logger.info("Empreendedor %s removido", parsed)
