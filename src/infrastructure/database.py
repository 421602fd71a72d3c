# database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from dotenv import load_dotenv
from typing import Iterator
import os

load_dotenv()
DATABASE_URL = os.environ["DATABASE_URL"]
SQL_ECHO = os.environ.get("SQL_ECHO", "false").lower() == "true"

# sqlite só é usado em desenvolvimento/testes; o FastAPI roda rotas síncronas em threads
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    DATABASE_URL,
    echo=SQL_ECHO,
    pool_pre_ping=True,
    pool_recycle=1800,
    connect_args=connect_args,
    future=True,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)
Base = declarative_base()

def get_db() -> Iterator[Session]:
    """Uma sessão por requisição; o pool de conexões é do engine."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
