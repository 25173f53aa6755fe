"""
Classes de base des collecteurs et des sources d'inventaire

Ce module définit l'interface commune que les collecteurs et les
sources doivent implémenter, ainsi que des utilitaires partagés.
"""

import re
import time
import subprocess
from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional


class InventorySource(ABC):
    """
    Emplacement brut de l'inventaire logiciel (clé de registre, base de paquets)

    Chaque entrée renvoyée est un dictionnaire indexé par les noms de valeurs
    du registre de désinstallation : DisplayName, DisplayVersion, InstallDate,
    Publisher, InstallLocation. Une valeur absente vaut None.
    """

    label = "source"

    def __init__(self, logger=None):
        self.logger = logger

    @abstractmethod
    def read_entries(self) -> List[Dict[str, Any]]:
        """
        Lit toutes les entrées de la source

        Returns:
            list: Entrées brutes, dans l'ordre d'énumération

        Raises:
            OSError: La source ne peut pas être ouverte
        """

    def _debug(self, message: str):
        if self.logger:
            self.logger.debug(message)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.label!r})"


class BaseCollector(ABC):
    """
    Classe de base abstraite pour les collecteurs

    Cette classe définit l'interface commune et fournit des méthodes
    utilitaires pour la collecte de données.
    """

    def __init__(self, config, logger):
        """
        Initialise le collecteur de base

        Args:
            config: Instance de AuditConfig
            logger: Instance de AuditLogger
        """
        self.config = config
        self.logger = logger

        # Métadonnées du collecteur
        self.collector_name = self.__class__.__name__
        self.collection_start_time = None
        self.collection_errors = []
        self.last_collection_duration = 0.0

    @abstractmethod
    def collect(self):
        """
        Méthode principale de collecte - doit être implémentée par chaque collecteur
        """

    def _start_collection(self):
        """
        Démarre une session de collecte

        Initialise les métriques et logs pour le suivi de performance.
        """
        self.collection_start_time = time.time()
        self.collection_errors = []
        self.logger.debug(f"Début collecte {self.collector_name}")

    def _end_collection(self) -> float:
        """
        Termine une session de collecte

        Returns:
            float: Durée de collecte en secondes
        """
        if self.collection_start_time:
            duration = time.time() - self.collection_start_time
            self.logger.debug(f"Collecte {self.collector_name} terminée en {duration:.2f}s")

            if self.collection_errors:
                self.logger.warning(f"Collecte {self.collector_name} avec {len(self.collection_errors)} erreur(s)")

            return duration
        return 0.0

    def _safe_execute(self, func, error_message: str = "Erreur lors de l'exécution", default_value=None):
        """
        Exécute une fonction en enregistrant l'erreur éventuelle

        Args:
            func: Fonction à exécuter
            error_message: Message d'erreur personnalisé
            default_value: Valeur par défaut en cas d'erreur

        Returns:
            Résultat de la fonction ou default_value
        """
        try:
            return func()
        except Exception as e:
            error_details = f"{error_message}: {e}"
            self.collection_errors.append(error_details)
            self.logger.warning(error_details)
            return default_value

    def _clean_string(self, value, collapse_whitespace: bool = True) -> str:
        """
        Nettoie une chaîne de caractères

        Args:
            value: Valeur à nettoyer
            collapse_whitespace: Réduit les suites d'espaces internes à un seul.
                Sinon l'espacement interne est conservé tel quel.

        Returns:
            str: Chaîne nettoyée (vide si la valeur est absente)
        """
        if value is None:
            return ""

        value = str(value).strip()

        # Remplacer les suites d'espaces (tabulations, retours ligne compris)
        if collapse_whitespace:
            value = re.sub(r'\s+', ' ', value)

        # Supprimer les caractères de contrôle
        value = ''.join(char for char in value if char.isprintable())

        return value.strip()

    def get_collection_stats(self) -> Dict[str, Any]:
        """
        Retourne les statistiques de la dernière collecte

        Returns:
            dict: Statistiques du collecteur
        """
        return {
            'collector_name': self.collector_name,
            'collection_duration': self.last_collection_duration,
            'errors_count': len(self.collection_errors),
            'errors': self.collection_errors.copy()
        }


def execute_command(command: List[str], timeout: int = 30) -> Optional[str]:
    """
    Exécute une commande système et retourne sa sortie standard

    Args:
        command: Commande et arguments
        timeout: Délai maximal en secondes

    Returns:
        str: Sortie de la commande

    Raises:
        OSError: Commande introuvable, en échec ou trop longue
    """
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=timeout
        )
    except subprocess.TimeoutExpired as e:
        raise OSError(f"Timeout pour la commande: {' '.join(command)}") from e

    if result.returncode != 0:
        raise OSError(f"Commande échouée: {' '.join(command)} (code: {result.returncode})")

    return result.stdout
