"""
SoftAudit - Inventaire des logiciels installés

Ce paquet énumère les logiciels installés sur la machine (registre de
désinstallation Windows, base dpkg), normalise les entrées et les exporte
en TXT, CSV, HTML, XML ou JSON.

Version: 1.0.0
"""

__version__ = "1.0.0"

from .core.config import AuditConfig
from .core.logger import AuditLogger
from .core.record import SoftwareRecord
from .core.reporter import ReportWriter
from .collectors.software import SoftwareCollector

__all__ = ['AuditConfig', 'AuditLogger', 'SoftwareRecord', 'ReportWriter', 'SoftwareCollector']
