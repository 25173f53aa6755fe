"""
Package des générateurs de rapport

Un générateur par format, choisi dans une table fermée indexée par
ReportFormat. Chaque générateur écrit les enregistrements dans un flux
texte déjà ouvert : write(records, out, option, meta).
"""

from .formats import ReportFormat, FormattingOption, REQUIRED_OPTIONS
from .text_report import write_text
from .csv_report import write_csv
from .html_report import write_html
from .xml_report import write_xml
from .json_report import write_json

WRITERS = {
    ReportFormat.TXT: write_text,
    ReportFormat.CSV: write_csv,
    ReportFormat.HTML: write_html,
    ReportFormat.XML: write_xml,
    ReportFormat.JSON: write_json,
}

# Encodage du fichier de sortie, avec remplacement des caractères non représentables
ENCODINGS = {
    ReportFormat.TXT: 'utf-8',
    ReportFormat.CSV: 'ascii',
    ReportFormat.HTML: 'utf-8',
    ReportFormat.XML: 'utf-8',
    ReportFormat.JSON: 'utf-8',
}

__all__ = ['ReportFormat', 'FormattingOption', 'REQUIRED_OPTIONS', 'WRITERS', 'ENCODINGS']
