"""
Couche Domain - Logique metier pure.

Contient les artefacts de backup, les exceptions metier et les ports
(interfaces) implementes par la couche Infrastructure.
"""
