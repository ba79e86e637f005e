"""
Couche Infrastructure - Adapters.

Implemente les ports du domaine: persistence SQLAlchemy, stockage
des snapshots sur disque, planification, logging.
"""
