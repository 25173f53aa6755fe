"""
Rapport CSV : une ligne d'en-tête puis une ligne par logiciel

Le fichier est écrit en ASCII ; l'encodage est fixé à l'ouverture par le
ReportWriter, les caractères non ASCII y sont remplacés par '?'.
"""

import csv
from typing import List, TextIO

from ..core.record import FIELDS, SoftwareRecord


def write_csv(records: List[SoftwareRecord], out: TextIO, option=None, meta=None):
    writer = csv.DictWriter(out, fieldnames=FIELDS, delimiter=',')
    writer.writeheader()
    for record in records:
        writer.writerow(record.to_dict())
