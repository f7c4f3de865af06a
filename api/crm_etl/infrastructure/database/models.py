"""
Modelos de base de datos (ORM).
"""
from sqlalchemy import Column, String, Integer, DateTime, Text, ForeignKey

from crm_etl.infrastructure.database.session import Base


class CompanyModel(Base):
    """
    Modelo de base de datos para empresas sincronizadas desde HubSpot.

    hubspot_id es la clave de upsert; id es el UUID local estable.
    """

    __tablename__ = "companies"

    id = Column(String(36), primary_key=True)
    hubspot_id = Column(String(64), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)
    domain = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Company(id={self.id}, hubspot_id={self.hubspot_id}, name={self.name})>"


class ContactModel(Base):
    """Modelo de base de datos para contactos sincronizados desde HubSpot."""

    __tablename__ = "contacts"

    id = Column(String(36), primary_key=True)
    hubspot_id = Column(String(64), nullable=False, unique=True, index=True)
    firstname = Column(String(255), nullable=True)
    lastname = Column(String(255), nullable=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    company_id = Column(
        String(36),
        ForeignKey("companies.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Contact(id={self.id}, hubspot_id={self.hubspot_id}, email={self.email})>"


class SyncRunModel(Base):
    """
    Historial de corridas de sincronizacion.

    Una fila por corrida finalizada (completed o failed).
    """

    __tablename__ = "sync_runs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    status = Column(String(20), nullable=False, index=True)
    started_at = Column(DateTime(timezone=True), nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    companies_processed = Column(Integer, nullable=False, default=0)
    contacts_processed = Column(Integer, nullable=False, default=0)
    contacts_skipped = Column(Integer, nullable=False, default=0)
    error_count = Column(Integer, nullable=False, default=0)
    last_error = Column(Text, nullable=True)

    def __repr__(self):
        return f"<SyncRun(id={self.id}, status={self.status}, started_at={self.started_at})>"
