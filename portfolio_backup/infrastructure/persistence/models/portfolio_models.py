"""
Modeles SQLAlchemy pour les sections du profil.

Relations:
----------
- skills.category_id -> skill_categories.id (ON DELETE CASCADE)
- portfolio_images.case_study_id -> case_studies.id (ON DELETE CASCADE)
"""
from datetime import datetime
from sqlalchemy import (
    Column, Integer, DateTime, Text, Boolean, JSON, ForeignKey, Index,
)

from portfolio_backup.infrastructure.persistence.models.base import Base


class ExperienceEntry(Base):
    """Table experience_entries - Entrees de la timeline"""
    __tablename__ = "experience_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    year = Column(Text, nullable=False)
    title = Column(Text, nullable=False)
    company = Column(Text, nullable=False)
    location = Column(Text)
    description = Column(Text)
    highlight = Column(Boolean, default=False)
    order_index = Column(Integer, default=0)
    color = Column(Text, default="bg-gray-400")
    level = Column(Text, default="Expert")
    experience_points = Column(Text, default="1000 XP")
    impact_metrics = Column(JSON)
    achievements = Column(JSON, default=list)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class SkillCategory(Base):
    """Table skill_categories - Groupes de competences"""
    __tablename__ = "skill_categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    order_index = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)


class Skill(Base):
    """Table skills - Competences rattachees a une categorie"""
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    category_id = Column(
        Integer, ForeignKey("skill_categories.id", ondelete="CASCADE")
    )
    name = Column(Text, nullable=False)
    proficiency_level = Column(Integer, default=5)
    order_index = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (
        Index('idx_skills_category', 'category_id'),
    )


class PortfolioMetric(Base):
    """Table portfolio_metrics - Chiffres cles affiches"""
    __tablename__ = "portfolio_metrics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    metric_name = Column(Text, nullable=False)
    metric_value = Column(Text, nullable=False)
    metric_label = Column(Text, nullable=False)
    display_order = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class CoreValue(Base):
    """Table core_values - Valeurs mises en avant"""
    __tablename__ = "core_values"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    icon = Column(Text, default="target")
    order_index = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class PortfolioImage(Base):
    """Table portfolio_images - Images par section (hero, about, case-study)"""
    __tablename__ = "portfolio_images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    section = Column(Text, nullable=False)
    image_url = Column(Text, nullable=False)
    alt_text = Column(Text, nullable=False)
    caption = Column(Text)
    order_index = Column(Integer, default=0)
    is_active = Column(Boolean, default=True)
    case_study_id = Column(
        Integer, ForeignKey("case_studies.id", ondelete="CASCADE")
    )
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class SeoSetting(Base):
    """Table seo_settings - Balises SEO par page"""
    __tablename__ = "seo_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    page = Column(Text, unique=True, nullable=False)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    keywords = Column(JSON, nullable=False, default=list)
    og_title = Column(Text)
    og_description = Column(Text)
    og_image = Column(Text)
    twitter_title = Column(Text)
    twitter_description = Column(Text)
    twitter_image = Column(Text)
    canonical_url = Column(Text)
    robots_directive = Column(Text, default="index,follow")
    structured_data = Column(JSON)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
