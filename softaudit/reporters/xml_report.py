"""
Rapport XML

Deux mises en forme, même structure de document :
- String : l'arbre complet est construit puis sérialisé en une seule chaîne
- Stream : un élément <Software> est sérialisé et écrit par logiciel
"""

import xml.etree.ElementTree as ET
from typing import List, TextIO

from .formats import FormattingOption
from ..core.record import SoftwareRecord

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'
ROOT_TAG = 'SoftwareInventory'
RECORD_TAG = 'Software'


def _record_element(record: SoftwareRecord) -> ET.Element:
    element = ET.Element(RECORD_TAG)
    for field, value in record.to_dict().items():
        ET.SubElement(element, field).text = value
    return element


def write_xml(records: List[SoftwareRecord], out: TextIO, option=None, meta=None):
    if option is FormattingOption.STREAM:
        _write_stream(records, out)
    else:
        _write_string(records, out)


def _write_string(records: List[SoftwareRecord], out: TextIO):
    root = ET.Element(ROOT_TAG)
    for record in records:
        root.append(_record_element(record))

    ET.indent(root, space='  ')
    out.write(XML_DECLARATION + ET.tostring(root, encoding='unicode') + '\n')


def _write_stream(records: List[SoftwareRecord], out: TextIO):
    out.write(XML_DECLARATION)
    out.write(f'<{ROOT_TAG}>\n')
    for record in records:
        out.write('  ' + ET.tostring(_record_element(record), encoding='unicode') + '\n')
    out.write(f'</{ROOT_TAG}>\n')
