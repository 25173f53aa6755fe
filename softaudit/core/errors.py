"""
Exceptions de SoftAudit

Toutes les erreurs remontées à l'utilisateur dérivent de SoftAuditError.
"""

from typing import Optional


class SoftAuditError(Exception):
    """Erreur de base de SoftAudit"""


class ConfigurationError(SoftAuditError):
    """Paramètres de rapport invalides, détectés avant toute écriture"""


class CollectionError(SoftAuditError):
    """Aucune source d'inventaire n'a pu être lue"""


class ReportWriteError(SoftAuditError):
    """
    Échec de création du dossier de destination ou d'écriture du rapport

    Attributes:
        path: Chemin concerné
        cause: Exception d'origine
    """

    def __init__(self, message: str, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        if cause is not None:
            message = f"{message}: {path} ({cause})"
        else:
            message = f"{message}: {path}"
        super().__init__(message)
