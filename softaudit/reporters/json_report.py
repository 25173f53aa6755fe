"""
Rapport JSON : toujours un tableau d'objets, même pour un seul logiciel
"""

import json
from typing import List, TextIO

from ..core.record import SoftwareRecord


def write_json(records: List[SoftwareRecord], out: TextIO, option=None, meta=None):
    json.dump([record.to_dict() for record in records], out, indent=4, ensure_ascii=False)
    out.write('\n')


def read_json(path: str) -> List[SoftwareRecord]:
    """
    Relit un rapport JSON

    Args:
        path: Chemin du rapport

    Returns:
        list: SoftwareRecord dans l'ordre du fichier
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return [SoftwareRecord.from_dict(item) for item in data]
