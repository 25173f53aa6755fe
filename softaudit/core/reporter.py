"""
Module de génération des rapports

Ce module écrit la liste des logiciels dans un fichier de rapport :
- Vérification des options de mise en forme avant toute écriture
- Création du dossier de destination
- Nom de fichier horodaté SoftAudit_<yyyyMMdd_HHmmss>.<ext>
- Écriture atomique (fichier temporaire puis renommage)
"""

import io
import os
import platform
import tempfile
from datetime import datetime
from typing import List, Optional, Tuple, Union

from .errors import ConfigurationError, ReportWriteError
from .record import SoftwareRecord
from ..reporters import ReportFormat, FormattingOption, REQUIRED_OPTIONS, WRITERS, ENCODINGS

REPORT_PREFIX = 'SoftAudit'
DEFAULT_OUTPUT_DIR = 'Reports'


def validate_formatting_option(fmt, option=None) -> Tuple[ReportFormat, Optional[FormattingOption]]:
    """
    Vérifie le couple format / option de mise en forme

    L'option est obligatoire pour HTML (Table, List) et XML (String, Stream)
    et ignorée pour les autres formats.

    Args:
        fmt: Format demandé (ReportFormat ou chaîne)
        option: Option de mise en forme (FormattingOption, chaîne ou None)

    Returns:
        tuple: (format, option) normalisés ; option vaut None hors HTML/XML

    Raises:
        ConfigurationError: Format inconnu, option absente ou incompatible
    """
    fmt = ReportFormat.parse(fmt)

    allowed = REQUIRED_OPTIONS.get(fmt)
    if allowed is None:
        return fmt, None

    choices = ', '.join(o.value for o in allowed)
    if option is None or not str(getattr(option, 'value', option)).strip():
        raise ConfigurationError(
            f"Une option de mise en forme est requise pour le format {fmt.value} (choix: {choices})"
        )

    option = FormattingOption.parse(option)
    if option not in allowed:
        raise ConfigurationError(
            f"Option {option.value} invalide pour le format {fmt.value} (choix: {choices})"
        )

    return fmt, option


def build_report_filename(fmt: ReportFormat, timestamp: datetime) -> str:
    """Nom du fichier de rapport pour un format et un horodatage"""
    return f"{REPORT_PREFIX}_{timestamp:%Y%m%d_%H%M%S}.{fmt.extension}"


class ReportWriter:
    """
    Générateur de rapports d'inventaire logiciel

    La liste des enregistrements appartient à l'appelant : elle est lue,
    jamais modifiée ni conservée.
    """

    def __init__(self, config, logger):
        """
        Args:
            config: Instance de AuditConfig (peut être None)
            logger: Instance de AuditLogger
        """
        self.config = config
        self.logger = logger

        if config is not None:
            report_config = config.get_report_config()
            self.default_output_dir = report_config['output_dir']
            self.title = report_config['title']
        else:
            self.default_output_dir = DEFAULT_OUTPUT_DIR
            self.title = 'Installed Software Audit'

    def report(self, records: List[SoftwareRecord], fmt=None, formatting_option=None,
               destination_dir: Optional[str] = None,
               no_file: bool = False) -> Union[str, List[SoftwareRecord]]:
        """
        Écrit le rapport, ou renvoie les enregistrements tels quels

        Args:
            records: Enregistrements à exporter
            fmt: Format du rapport
            formatting_option: Option de mise en forme (HTML/XML)
            destination_dir: Dossier de sortie
            no_file: Ne pas écrire de fichier

        Returns:
            Chemin du rapport écrit, ou la liste records elle-même si no_file
        """
        if no_file:
            self.logger.debug(f"Sortie fichier déclinée, {len(records)} enregistrement(s) renvoyé(s)")
            return records

        return self.write(records, fmt, formatting_option, destination_dir)

    def render(self, records: List[SoftwareRecord], fmt, formatting_option=None,
               timestamp: Optional[datetime] = None) -> str:
        """
        Génère le contenu du rapport en mémoire, sans écrire de fichier

        Le contenu est celui qu'aurait le fichier : les caractères hors de
        l'encodage du format (ASCII pour CSV) sont remplacés par "?".

        Returns:
            str: Contenu du rapport
        """
        fmt, formatting_option = validate_formatting_option(fmt, formatting_option)
        out = io.StringIO(newline='')
        WRITERS[fmt](records, out, formatting_option, self._build_meta(timestamp or datetime.now()))
        encoding = ENCODINGS[fmt]
        return out.getvalue().encode(encoding, errors='replace').decode(encoding)

    def write(self, records: List[SoftwareRecord], fmt, formatting_option=None,
              destination_dir: Optional[str] = None,
              timestamp: Optional[datetime] = None) -> str:
        """
        Écrit le rapport dans le dossier de destination

        Args:
            records: Enregistrements à exporter
            fmt: Format du rapport
            formatting_option: Option de mise en forme (HTML/XML)
            destination_dir: Dossier de sortie (défaut configuré si vide)
            timestamp: Horodatage du nom de fichier (maintenant par défaut)

        Returns:
            str: Chemin du fichier écrit

        Raises:
            ConfigurationError: Option de mise en forme manquante ou invalide
            ReportWriteError: Échec de création du dossier ou d'écriture
        """
        # Aucune écriture tant que les paramètres ne sont pas valides
        fmt, formatting_option = validate_formatting_option(fmt, formatting_option)

        timestamp = timestamp or datetime.now()
        directory = self._resolve_directory(destination_dir)

        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            raise ReportWriteError("Impossible de créer le dossier de destination", directory, e) from e

        path = os.path.join(directory, build_report_filename(fmt, timestamp))
        self.logger.debug(f"Écriture du rapport {fmt.value} ({len(records)} logiciels) vers {path}")

        try:
            fd, temp_path = tempfile.mkstemp(prefix=f".{REPORT_PREFIX}_", suffix='.tmp', dir=directory)
        except OSError as e:
            raise ReportWriteError("Impossible d'écrire dans le dossier de destination", directory, e) from e

        try:
            with open(fd, 'w', encoding=ENCODINGS[fmt], errors='replace', newline='') as out:
                WRITERS[fmt](records, out, formatting_option, self._build_meta(timestamp))
            os.replace(temp_path, path)
        except Exception as e:
            self._remove_quietly(temp_path)
            raise ReportWriteError("Erreur lors de l'écriture du rapport", path, e) from e

        self.logger.info(f"Rapport {fmt.value} écrit: {path}")
        return path

    def _resolve_directory(self, destination_dir: Optional[str]) -> str:
        if destination_dir is None or not str(destination_dir).strip():
            return self.default_output_dir
        return str(destination_dir).strip()

    def _build_meta(self, timestamp: datetime) -> dict:
        return {
            'title': self.title,
            'host': platform.node(),
            'generated': timestamp.strftime('%Y-%m-%d %H:%M:%S'),
        }

    def _remove_quietly(self, path: str):
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            self.logger.warning(f"Fichier temporaire non supprimé {path}: {e}")
