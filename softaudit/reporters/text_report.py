"""
Rapport texte : tableau aux colonnes dimensionnées sur leur contenu
"""

from typing import List, TextIO

from ..core.record import FIELDS, SoftwareRecord


def write_text(records: List[SoftwareRecord], out: TextIO, option=None, meta=None):
    rows = [record.to_dict() for record in records]

    widths = {
        field: max([len(field)] + [len(row[field]) for row in rows])
        for field in FIELDS
    }

    def format_line(values):
        cells = [values[field].ljust(widths[field]) for field in FIELDS]
        return ' '.join(cells).rstrip() + '\n'

    out.write(format_line({field: field for field in FIELDS}))
    out.write(format_line({field: '-' * len(field) for field in FIELDS}))
    for row in rows:
        out.write(format_line(row))
