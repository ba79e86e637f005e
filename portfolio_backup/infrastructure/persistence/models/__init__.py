"""
Modeles SQLAlchemy - exports centralises.

Organisation par domaine:
- base: Base declarative
- content_models: Utilisateurs, contact, etudes de cas, media, sections
- portfolio_models: Timeline, competences, metriques, images, SEO
"""

from portfolio_backup.infrastructure.persistence.models.base import Base

from portfolio_backup.infrastructure.persistence.models.content_models import (
    User,
    ContactSubmission,
    CaseStudy,
    MediaAsset,
    ContentSection,
    ContentVersion,
    KnowledgeBaseDocument,
)

from portfolio_backup.infrastructure.persistence.models.portfolio_models import (
    ExperienceEntry,
    SkillCategory,
    Skill,
    PortfolioMetric,
    CoreValue,
    PortfolioImage,
    SeoSetting,
)

__all__ = [
    # Base
    "Base",
    # Content
    "User",
    "ContactSubmission",
    "CaseStudy",
    "MediaAsset",
    "ContentSection",
    "ContentVersion",
    "KnowledgeBaseDocument",
    # Portfolio
    "ExperienceEntry",
    "SkillCategory",
    "Skill",
    "PortfolioMetric",
    "CoreValue",
    "PortfolioImage",
    "SeoSetting",
]
