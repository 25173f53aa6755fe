"""
Module de configuration pour SoftAudit

Ce module gère la configuration de l'outil d'audit, incluant :
- Lecture du fichier de configuration INI
- Validation des paramètres
- Valeurs par défaut
- Emplacements spécifiques par plateforme
"""

import os
import sys
import tempfile
import configparser
from typing import Dict, Any, List, Optional


VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
VALID_FORMATS = ['TXT', 'CSV', 'HTML', 'XML', 'JSON']


def default_log_path() -> str:
    """
    Détermine le chemin par défaut des logs (dossier temporaire de la plateforme)

    Returns:
        str: Chemin vers le fichier de log
    """
    return os.path.join(tempfile.gettempdir(), "softaudit.log")


class AuditConfig:
    """
    Gestionnaire de configuration pour SoftAudit

    Cette classe centralise la configuration du rapport (format par défaut,
    dossier de sortie, options de mise en forme) et celle du logging.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialise la configuration

        Args:
            config_file: Chemin vers le fichier de configuration (optionnel)
        """
        self.config = configparser.ConfigParser()
        self.config_file = config_file or self._get_default_config_path()

        # Définir les valeurs par défaut
        self._set_defaults()

        # Charger la configuration depuis le fichier
        self._load_config()

    def _get_default_config_path(self) -> str:
        """
        Détermine le chemin par défaut du fichier de configuration selon la plateforme

        Returns:
            str: Chemin vers le fichier de configuration
        """
        if sys.platform == "win32":
            return os.path.join(
                os.environ.get("PROGRAMDATA", "C:\\ProgramData"),
                "SoftAudit",
                "softaudit.ini"
            )
        return "/etc/softaudit/softaudit.ini"

    def _set_defaults(self):
        """
        Définit les valeurs de configuration par défaut

        Ces valeurs sont utilisées si aucun fichier de configuration n'est trouvé
        ou si certaines sections/clés sont manquantes.
        """
        self.config.add_section('agent')
        self.config.set('agent', 'log_level', 'INFO')

        # Configuration du rapport
        self.config.add_section('report')
        self.config.set('report', 'default_format', 'TXT')
        self.config.set('report', 'output_dir', 'Reports')
        self.config.set('report', 'html_formatting', 'Table')
        self.config.set('report', 'xml_formatting', 'String')
        self.config.set('report', 'title', 'Installed Software Audit')

        # Configuration logging
        self.config.add_section('logging')
        self.config.set('logging', 'log_file', default_log_path())
        self.config.set('logging', 'max_log_size', '10485760')  # 10MB
        self.config.set('logging', 'backup_count', '5')

    def _load_config(self):
        """
        Charge la configuration depuis le fichier

        Si le fichier n'existe pas, utilise les valeurs par défaut.
        Un fichier illisible est signalé puis ignoré.
        """
        if not os.path.exists(self.config_file):
            return

        try:
            self.config.read(self.config_file, encoding='utf-8')
        except configparser.Error as e:
            print(f"Erreur lors du chargement de la configuration {self.config_file}: {e}")
            print("Utilisation des valeurs par défaut")

    def get(self, section: str, option: str, fallback: Any = None) -> str:
        """
        Récupère une valeur de configuration

        Args:
            section: Nom de la section
            option: Nom de l'option
            fallback: Valeur par défaut si non trouvée

        Returns:
            str: Valeur de configuration
        """
        return self.config.get(section, option, fallback=fallback)

    def getint(self, section: str, option: str, fallback: int = 0) -> int:
        """Récupère une valeur entière de configuration"""
        return self.config.getint(section, option, fallback=fallback)

    def set(self, section: str, option: str, value: str):
        """
        Définit une valeur de configuration

        Args:
            section: Nom de la section
            option: Nom de l'option
            value: Nouvelle valeur
        """
        if not self.config.has_section(section):
            self.config.add_section(section)
        self.config.set(section, option, str(value))

    def save(self):
        """
        Sauvegarde la configuration dans le fichier

        Crée les dossiers parents si nécessaire. Les erreurs d'écriture
        sont propagées à l'appelant.
        """
        config_dir = os.path.dirname(self.config_file)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_file, 'w', encoding='utf-8') as f:
            self.config.write(f)

    def get_report_config(self) -> Dict[str, Any]:
        """
        Récupère la configuration complète du rapport

        Returns:
            dict: Configuration du rapport
        """
        return {
            'default_format': self.get('report', 'default_format', 'TXT').upper(),
            'output_dir': self.get('report', 'output_dir', 'Reports'),
            'html_formatting': self.get('report', 'html_formatting', 'Table'),
            'xml_formatting': self.get('report', 'xml_formatting', 'String'),
            'title': self.get('report', 'title', 'Installed Software Audit'),
        }

    def get_logging_config(self) -> Dict[str, Any]:
        """
        Récupère la configuration complète du logging

        Returns:
            dict: Configuration logging
        """
        return {
            'log_level': self.get('agent', 'log_level', 'INFO').upper(),
            'log_file': self.get('logging', 'log_file'),
            'max_log_size': self.getint('logging', 'max_log_size', 10485760),
            'backup_count': self.getint('logging', 'backup_count', 5),
        }

    def validate(self) -> List[str]:
        """
        Valide la configuration courante

        Returns:
            list: Erreurs détectées (vide si la configuration est valide)
        """
        errors = []

        log_level = self.get('agent', 'log_level', '').upper()
        if log_level not in VALID_LOG_LEVELS:
            errors.append(f"Niveau de log invalide: {log_level!r}")

        report = self.get_report_config()
        if report['default_format'] not in VALID_FORMATS:
            errors.append(
                f"Format par défaut invalide (doit être: {', '.join(VALID_FORMATS)})"
            )

        if report['html_formatting'] not in ('Table', 'List'):
            errors.append("Mise en forme HTML invalide (doit être: Table, List)")

        if report['xml_formatting'] not in ('String', 'Stream'):
            errors.append("Mise en forme XML invalide (doit être: String, Stream)")

        try:
            if self.getint('logging', 'max_log_size') <= 0:
                errors.append("Taille maximale du log invalide")
        except ValueError:
            errors.append("Taille maximale du log invalide")

        return errors


def create_default_config(config_path: str) -> AuditConfig:
    """
    Crée un fichier de configuration par défaut

    Args:
        config_path: Chemin où créer le fichier de configuration

    Returns:
        AuditConfig: Instance de configuration créée
    """
    config = AuditConfig(config_path)
    config.save()
    return config
