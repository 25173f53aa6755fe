"""
Collecteur de logiciels installés

Ce module lit les sources d'inventaire de la plateforme et produit la
liste ordonnée des SoftwareRecord :
- Entrées sans nom d'affichage écartées
- Champs manquants remplacés par des valeurs par défaut
- Dates d'installation YYYYMMDD converties au format ISO
"""

import re
from datetime import datetime
from typing import List, Dict, Any, Optional, Callable

from .base import BaseCollector
from .platform import default_sources
from ..core.errors import CollectionError
from ..core.record import SoftwareRecord, NOT_AVAILABLE, UNKNOWN_DATE, INVALID_DATE

_COMPACT_DATE = re.compile(r'\d{8}')


def parse_install_date(value) -> str:
    """
    Convertit une date d'installation YYYYMMDD en YYYY-MM-DD

    Args:
        value: Valeur brute (chaîne ou entier DWORD du registre)

    Returns:
        str: Date ISO, "Unknown" si absente, "Invalid Date" si illisible
    """
    if value is None:
        return UNKNOWN_DATE

    value = str(value).strip()
    if not value:
        return UNKNOWN_DATE

    if not _COMPACT_DATE.fullmatch(value):
        return INVALID_DATE

    try:
        return datetime.strptime(value, '%Y%m%d').strftime('%Y-%m-%d')
    except ValueError:
        return INVALID_DATE


class SoftwareCollector(BaseCollector):
    """
    Collecteur de logiciels installés

    Les sources sont lues dans l'ordre ; l'ordre d'énumération est conservé
    dans la liste retournée (pas de tri, pas de déduplication).
    """

    def __init__(self, config, logger, sources=None,
                 progress_callback: Optional[Callable[[int], None]] = None):
        """
        Args:
            config: Instance de AuditConfig
            logger: Instance de AuditLogger
            sources: Sources d'inventaire (par défaut celles de la plateforme)
            progress_callback: Appelé avec le pourcentage d'entrées traitées
        """
        super().__init__(config, logger)
        self.sources = sources if sources is not None else default_sources(logger)
        self.progress_callback = progress_callback or self._log_progress
        self._last_progress_step = -1

    def collect(self) -> List[SoftwareRecord]:
        """
        Collecte tous les logiciels installés

        Returns:
            list: SoftwareRecord dans l'ordre d'énumération

        Raises:
            CollectionError: Aucune source n'a pu être lue
        """
        self._start_collection()
        self._last_progress_step = -1

        raw_entries = self._read_sources()

        records = []
        total = len(raw_entries)
        for index, entry in enumerate(raw_entries, 1):
            record = self._safe_execute(
                lambda: self._normalize_entry(entry),
                "Entrée d'inventaire ignorée"
            )
            if record is not None:
                records.append(record)

            self.progress_callback(index * 100 // total)

        skipped = total - len(records)
        self.logger.info(f"Collecté {len(records)} logiciels ({skipped} entrée(s) ignorée(s))")
        self.last_collection_duration = self._end_collection()

        return records

    def _read_sources(self) -> List[Dict[str, Any]]:
        """
        Lit toutes les sources accessibles

        Returns:
            list: Entrées brutes concaténées
        """
        raw_entries = []
        readable = 0

        for source in self.sources:
            try:
                entries = source.read_entries()
            except OSError as e:
                error_details = f"Source {source.label} illisible: {e}"
                self.collection_errors.append(error_details)
                self.logger.warning(error_details)
                continue

            readable += 1
            raw_entries.extend(entries)

        if readable == 0:
            self.last_collection_duration = self._end_collection()
            if self.sources:
                raise CollectionError(
                    "Aucune source d'inventaire lisible: "
                    + "; ".join(self.collection_errors)
                )
            raise CollectionError("Aucune source d'inventaire pour cette plateforme")

        return raw_entries

    def _normalize_entry(self, entry: Dict[str, Any]) -> Optional[SoftwareRecord]:
        """
        Normalise une entrée brute

        Args:
            entry: Entrée brute de la source

        Returns:
            SoftwareRecord ou None si l'entrée n'a pas de nom d'affichage
        """
        name = self._clean_string(entry.get('DisplayName'))
        if not name:
            return None

        return SoftwareRecord(
            name=name,
            version=self._value(entry, 'DisplayVersion'),
            install_date=parse_install_date(entry.get('InstallDate')),
            publisher=self._value(entry, 'Publisher'),
            install_location=self._value(entry, 'InstallLocation'),
        )

    def _value(self, entry: Dict[str, Any], key: str) -> str:
        # Valeur source conservée, seuls les bords et les caractères de contrôle sont retirés
        return self._clean_string(entry.get(key), collapse_whitespace=False) or NOT_AVAILABLE

    def _log_progress(self, percent: int):
        step = percent // 10
        if step > self._last_progress_step:
            self._last_progress_step = step
            self.logger.debug(f"Progression de la collecte: {percent}%")
