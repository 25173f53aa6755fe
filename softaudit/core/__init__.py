"""
Module Core - Composants principaux de SoftAudit

Ce module contient :
- Configuration
- Logging
- Modèle de données et exceptions
- Génération des rapports
"""
