"""
Rapport HTML rendu avec Jinja2

Le gabarit templates/report.html affiche les logiciels sous forme de
tableau (Table) ou d'une liste de propriétés par logiciel (List).
"""

from typing import List, TextIO

from jinja2 import Environment, PackageLoader, select_autoescape

from .formats import FormattingOption
from ..core.record import FIELDS, SoftwareRecord

_environment = None


def get_environment() -> Environment:
    """Environnement Jinja2 du paquet, créé au premier rendu"""
    global _environment
    if _environment is None:
        _environment = Environment(
            loader=PackageLoader('softaudit', 'templates'),
            autoescape=select_autoescape(['html']),
            trim_blocks=True,
            lstrip_blocks=True,
        )
    return _environment


def write_html(records: List[SoftwareRecord], out: TextIO, option=None, meta=None):
    meta = meta or {}
    template = get_environment().get_template('report.html')
    out.write(template.render(
        title=meta.get('title', 'Installed Software Audit'),
        host=meta.get('host', ''),
        generated=meta.get('generated', ''),
        layout='list' if option is FormattingOption.LIST else 'table',
        fields=FIELDS,
        rows=[record.to_dict() for record in records],
    ))
