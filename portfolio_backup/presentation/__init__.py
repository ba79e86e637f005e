"""
Couche Presentation - API REST d'administration des backups.
"""
