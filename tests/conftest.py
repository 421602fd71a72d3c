"""Shared fixtures — in-memory SQLite + FastAPI TestClient.

Invariants:
    - Every test gets a fresh database (StaticPool keeps a single in-memory connection)
    - get_db is overridden for routes and for the role gate
    - Uploaded photos go to a per-test tmp directory
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import application.utils.upload as upload_module
from application.use_cases.security import create_access_token, hash_password
from domain.entities.usuario_entity import Endereco, Usuario
from infrastructure.database import Base, get_db
from main import app

VALID_CPF = "529.982.247-25"
OTHER_VALID_CPF = "111.444.777-35"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    directory = tmp_path / "uploads"
    monkeypatch.setattr(upload_module, "UPLOAD_DIR", str(directory))
    return directory


@pytest.fixture
def client(session_factory, upload_dir):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def fetch_usuario(session_factory):
    """Reads a user with a fresh session, so assertions see what the API committed."""
    def _fetch(usuario_id):
        with session_factory() as db:
            usuario = db.get(Usuario, usuario_id)
            if usuario is not None and usuario.endereco_id is not None:
                usuario.endereco  # carrega antes de fechar a sessão
            return usuario
    return _fetch


@pytest.fixture
def make_usuario(session_factory):
    """Factory: inserts a user and returns it (detached, attributes loaded)."""
    counter = {"n": 0}
    senha_hash = hash_password("senha-inicial")

    def _make(nome="Empreendedor", tipo="empreendedor", email=None, cpf=VALID_CPF, endereco=None, **extra):
        counter["n"] += 1
        usuario = Usuario(
            nome=nome,
            email=email or f"usuario{counter['n']}@empresa.com.br",
            cpf=cpf,
            senha=senha_hash,
            tipo=tipo,
            telefone=extra.get("telefone", "11999990000"),
            descricao=extra.get("descricao", "Descrição"),
            foto=extra.get("foto"),
        )
        with session_factory() as db:
            if endereco is not None:
                db.add(endereco)
                db.flush()
                usuario.endereco_id = endereco.id
            db.add(usuario)
            db.commit()
            db.refresh(usuario)
        return usuario

    return _make


@pytest.fixture
def make_endereco():
    def _make(**fields):
        defaults = {"cep": "01001-000", "logradouro": "Praça da Sé", "numero": "1", "cidade": "São Paulo", "estado": "SP"}
        defaults.update(fields)
        return Endereco(**defaults)
    return _make


def _headers(usuario):
    token = create_access_token(email=usuario.email, role=usuario.tipo)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin(make_usuario):
    return make_usuario(nome="Admin", tipo="administrador", email="admin@empresa.com.br")


@pytest.fixture
def admin_headers(admin):
    return _headers(admin)


@pytest.fixture
def empreendedor(make_usuario):
    return make_usuario(nome="Joana Empreendedora", email="joana@empresa.com.br")


@pytest.fixture
def empreendedor_headers(empreendedor):
    return _headers(empreendedor)


@pytest.fixture
def headers_for():
    return _headers
