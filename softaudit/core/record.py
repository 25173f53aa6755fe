"""
Modèle de données d'un logiciel installé
"""

from dataclasses import dataclass
from typing import Dict, Any

NOT_AVAILABLE = "N/A"
UNKNOWN_DATE = "Unknown"
INVALID_DATE = "Invalid Date"

# Noms des champs exportés, dans l'ordre des colonnes
FIELDS = ['Name', 'Version', 'InstallDate', 'Publisher', 'InstallLocation']


@dataclass
class SoftwareRecord:
    """
    Une entrée normalisée de l'inventaire logiciel

    Le nom est toujours renseigné ; les autres champs valent la valeur
    source ou une valeur sentinelle (N/A, Unknown, Invalid Date).
    """

    name: str
    version: str = NOT_AVAILABLE
    install_date: str = UNKNOWN_DATE
    publisher: str = NOT_AVAILABLE
    install_location: str = NOT_AVAILABLE

    def to_dict(self) -> Dict[str, str]:
        """
        Convertit l'enregistrement avec les noms de champs exportés

        Returns:
            dict: Champs dans l'ordre des colonnes du rapport
        """
        return {
            'Name': self.name,
            'Version': self.version,
            'InstallDate': self.install_date,
            'Publisher': self.publisher,
            'InstallLocation': self.install_location,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SoftwareRecord':
        """Reconstruit un enregistrement depuis un dictionnaire exporté"""
        return cls(
            name=data['Name'],
            version=data.get('Version', NOT_AVAILABLE),
            install_date=data.get('InstallDate', UNKNOWN_DATE),
            publisher=data.get('Publisher', NOT_AVAILABLE),
            install_location=data.get('InstallLocation', NOT_AVAILABLE),
        )
