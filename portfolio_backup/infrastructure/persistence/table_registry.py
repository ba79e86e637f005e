"""
Registre des tables sauvegardees.

Source unique partagee par la sauvegarde et la restauration: la liste
des paires (nom logique, modele) dans l'ordre des dependances. Toute
table parente precede ses enfants, la restauration peut donc remplacer
les tables dans cet ordre sans violer les cles etrangeres.

Les noms logiques sont ceux ecrits dans les snapshots: les renommer
rend les anciens fichiers irrestaurables pour la table concernee.
"""
from typing import Optional

from portfolio_backup.infrastructure.persistence.models import (
    Base,
    User,
    ContactSubmission,
    CaseStudy,
    MediaAsset,
    ContentSection,
    ContentVersion,
    KnowledgeBaseDocument,
    ExperienceEntry,
    SkillCategory,
    Skill,
    PortfolioMetric,
    CoreValue,
    PortfolioImage,
    SeoSetting,
)

BACKUP_TABLES: tuple[tuple[str, type[Base]], ...] = (
    ("users", User),
    ("contactSubmissions", ContactSubmission),
    ("caseStudies", CaseStudy),
    ("mediaAssets", MediaAsset),
    ("contentSections", ContentSection),
    ("contentVersions", ContentVersion),
    ("knowledgeBaseDocuments", KnowledgeBaseDocument),
    ("experienceEntries", ExperienceEntry),
    ("skillCategories", SkillCategory),
    ("skills", Skill),
    ("portfolioMetrics", PortfolioMetric),
    ("coreValues", CoreValue),
    ("portfolioImages", PortfolioImage),
    ("seoSettings", SeoSetting),
)

_BY_NAME = dict(BACKUP_TABLES)


def table_names() -> list[str]:
    """Noms logiques dans l'ordre de sauvegarde/restauration."""
    return [name for name, _ in BACKUP_TABLES]


def get_model(name: str) -> Optional[type[Base]]:
    """Retourne le modele d'un nom logique, None si inconnu."""
    return _BY_NAME.get(name)


def find_order_violations() -> list[tuple[str, str]]:
    """
    Verifie que l'ordre du registre respecte les cles etrangeres.

    Returns:
        Paires (table enfant, table parente) ou l'enfant precede le parent.
    """
    position = {model.__tablename__: index for index, (_, model) in enumerate(BACKUP_TABLES)}
    violations = []

    for _, model in BACKUP_TABLES:
        for fk in model.__table__.foreign_keys:
            parent = fk.column.table.name
            if parent in position and position[parent] > position[model.__tablename__]:
                violations.append((model.__tablename__, parent))

    return violations


def cascade_children(name: str) -> list[str]:
    """
    Tables videes en cascade quand la table `name` est videe.

    Suit les cles etrangeres ON DELETE CASCADE, transitivement.

    Returns:
        Noms logiques des tables enfants, dans l'ordre du registre.
    """
    model = get_model(name)
    if model is None:
        return []

    emptied = {model.__tablename__}
    children = []

    # Le registre est ordonne: un parent est toujours vu avant ses enfants
    for child_name, child_model in BACKUP_TABLES:
        for fk in child_model.__table__.foreign_keys:
            if (
                fk.ondelete == "CASCADE"
                and fk.column.table.name in emptied
                and child_model.__tablename__ not in emptied
            ):
                emptied.add(child_model.__tablename__)
                children.append(child_name)

    return children
