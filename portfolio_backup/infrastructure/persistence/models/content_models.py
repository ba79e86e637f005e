"""
Modeles SQLAlchemy pour le contenu editorial du portfolio.

Tables:
-------
- users: Comptes d'administration
- contact_submissions: Messages du formulaire de contact
- case_studies: Etudes de cas
- media_assets: Fichiers media uploades
- content_sections / content_versions: Sections editables et historique
- knowledge_base_documents: Documents de la base de connaissances

Les tableaux et champs jsonb sont declares en JSON pour rester portables
(PostgreSQL en production, SQLite en tests).
"""
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, Text, Boolean, JSON, Index

from portfolio_backup.infrastructure.persistence.models.base import Base


class User(Base):
    """Table users - Comptes d'administration"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, unique=True, nullable=False)
    password = Column(Text, nullable=False)


class ContactSubmission(Base):
    """Table contact_submissions - Messages recus via le formulaire"""
    __tablename__ = "contact_submissions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    company = Column(Text)
    project_type = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    submitted_at = Column(Text, nullable=False)


class CaseStudy(Base):
    """Table case_studies - Etudes de cas publiees ou en brouillon"""
    __tablename__ = "case_studies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    subtitle = Column(Text)
    challenge = Column(Text, nullable=False)
    approach = Column(Text, nullable=False)
    solution = Column(Text, nullable=False)
    impact = Column(Text, nullable=False)
    metrics = Column(JSON, nullable=False, default=list)
    technologies = Column(JSON, nullable=False, default=list)
    status = Column(Text, nullable=False, default="draft")  # draft, published, archived
    featured = Column(Boolean, default=False)
    display_order = Column(Integer, default=0)
    image_url = Column(Text)
    image_file = Column(Text)
    external_url = Column(Text)
    client_name = Column(Text)
    project_duration = Column(Text)
    team_size = Column(Text)
    technical_details = Column(JSON)
    visual_elements = Column(JSON)
    cross_cultural_elements = Column(JSON)
    slug = Column(Text, unique=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index('idx_case_studies_status', 'status'),
    )


class MediaAsset(Base):
    """Table media_assets - Fichiers media"""
    __tablename__ = "media_assets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    filename = Column(Text, nullable=False)
    url = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    size = Column(Integer, nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    uploaded_at = Column(DateTime, default=datetime.utcnow)


class ContentSection(Base):
    """Table content_sections - Sections editables (hero, about, ...)"""
    __tablename__ = "content_sections"

    id = Column(String(100), primary_key=True)
    name = Column(Text, nullable=False)
    content = Column(JSON, nullable=False)
    status = Column(Text, nullable=False, default="published")
    last_modified = Column(DateTime, default=datetime.utcnow)
    version = Column(Integer, nullable=False, default=1)


class ContentVersion(Base):
    """Table content_versions - Historique des versions de sections"""
    __tablename__ = "content_versions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    section_id = Column(String(100), nullable=False)
    content = Column(JSON, nullable=False)
    version = Column(Integer, nullable=False)
    change_summary = Column(Text)
    created_by = Column(Text, default="admin")
    created_at = Column(DateTime, default=datetime.utcnow)
    published_at = Column(DateTime)

    __table_args__ = (
        Index('idx_content_versions_section', 'section_id', 'version'),
    )


class KnowledgeBaseDocument(Base):
    """Table knowledge_base_documents - Documents indexes pour l'assistant"""
    __tablename__ = "knowledge_base_documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    filename = Column(Text, nullable=False)
    original_name = Column(Text, nullable=False)
    content_type = Column(Text, nullable=False)  # pdf, docx, txt
    content_text = Column(Text)
    category = Column(Text, nullable=False)
    size = Column(Integer, nullable=False)
    status = Column(Text, nullable=False, default="processing")  # processing, embedded, failed
    vector_id = Column(Text)
    tags = Column(JSON, default=list)
    summary = Column(Text)
    key_insights = Column(JSON)
    uploaded_at = Column(DateTime, default=datetime.utcnow)
    processed_at = Column(DateTime)
