"""
Sources d'inventaire spécifiques par plateforme

- Windows : clés de désinstallation du registre (64 et 32 bits)
- Linux : base de paquets dpkg
"""

import sys
from typing import List

from ..base import InventorySource


def default_sources(logger=None) -> List[InventorySource]:
    """
    Sélectionne les sources d'inventaire de la plateforme courante

    Args:
        logger: Instance de AuditLogger

    Returns:
        list: Sources à lire, dans l'ordre (vide si plateforme non supportée)
    """
    if sys.platform == "win32":
        from .windows import registry_sources
        return registry_sources(logger)

    if sys.platform.startswith("linux"):
        from .linux import DpkgSource
        return [DpkgSource(logger)]

    return []
