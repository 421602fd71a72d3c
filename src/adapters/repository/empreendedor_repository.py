from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select, update, delete, func
from domain.entities.usuario_entity import Usuario
from domain.entities.user_classes import RoleType
from domain.models.empreendedor_models import EmpreendedorUpdate

TIPO_EMPREENDEDOR = RoleType.empreendedor.value


class EmpreendedorRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_and_count(self, *, nome: str | None = None, limit: int | None = None, offset: int = 0) -> tuple[list[Usuario], int]:
        filters = [Usuario.tipo == TIPO_EMPREENDEDOR]
        if nome:
            filters.append(Usuario.nome.like(f"%{nome}%"))

        count_query = select(func.count()).select_from(Usuario).where(*filters)
        total = self.db.execute(count_query).scalar_one()

        query = select(Usuario).where(*filters).order_by(Usuario.id)
        if limit is not None:
            query = query.limit(limit).offset(offset)
        rows = self.db.execute(query).scalars().all()
        return list(rows), total

    def get_by_id(self, empreendedor_id: int) -> Usuario | None:
        return self.db.get(Usuario, empreendedor_id)

    def get_with_endereco(self, empreendedor_id: int) -> Usuario | None:
        query = (
            select(Usuario)
            .options(selectinload(Usuario.endereco))
            .where(Usuario.id == empreendedor_id)
        )
        return self.db.execute(query).scalar_one_or_none()

    def update_password(self, empreendedor_id: int, hashed_password: str) -> None:
        query = update(Usuario).where(Usuario.id == empreendedor_id).values(senha=hashed_password)
        self.db.execute(query)
        self.db.commit()

    def update_profile(self, empreendedor_id: int, dados: EmpreendedorUpdate) -> None:
        query = (
            update(Usuario)
            .where(Usuario.id == empreendedor_id)
            .values({
                Usuario.nome: dados.nome,
                Usuario.email: dados.email,
                Usuario.cpf: dados.cpf,
                Usuario.telefone: dados.telefone,
                Usuario.endereco_id: dados.endereco,
                Usuario.descricao: dados.descricao,
                Usuario.foto: dados.foto,
            })
        )
        self.db.execute(query)
        self.db.commit()

    def delete(self, empreendedor_id: int) -> None:
        self.db.execute(delete(Usuario).where(Usuario.id == empreendedor_id))
        self.db.commit()
