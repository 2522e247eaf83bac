"""SQLAlchemy models for the lancamentos record store."""

import uuid
from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    String,
    Date,
    DateTime,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()

TABLE_NAME = "financeiro_lancamentos"


def utc_now() -> datetime:
    return datetime.now(UTC)


class Lancamento(Base):
    """Transaction record model."""

    __tablename__ = TABLE_NAME

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    data_vencimento = Column(Date, nullable=False, index=True)
    descricao = Column(String, nullable=False)
    observacao = Column(String, nullable=False, default="")
    categoria = Column(String, nullable=False)
    tipo = Column(String, nullable=False)
    valor = Column(Numeric(12, 2), nullable=False)
    status = Column(String, nullable=False, default="Aberto")
    codigo_barras = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
