import logging
from pathlib import Path
from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest

from softaudit.collectors.base import InventorySource
from softaudit.core.logger import LOGGER_NAME
from softaudit.core.record import SoftwareRecord


class FakeSource(InventorySource):
    """Source d'inventaire en mémoire"""

    def __init__(self, entries: List[Dict[str, Any]], label: str = "fake", error: Exception = None):
        super().__init__()
        self.entries = entries
        self.label = label
        self.error = error

    def read_entries(self) -> List[Dict[str, Any]]:
        if self.error is not None:
            raise self.error
        return list(self.entries)


def raw_entry(name=None, version=None, date=None, publisher=None, location=None) -> Dict[str, Any]:
    return {
        'DisplayName': name,
        'DisplayVersion': version,
        'InstallDate': date,
        'Publisher': publisher,
        'InstallLocation': location,
    }


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def records() -> List[SoftwareRecord]:
    return [
        SoftwareRecord("Mozilla Firefox", "128.0", "2024-07-09", "Mozilla", "C:\\Program Files\\Mozilla Firefox"),
        SoftwareRecord("7-Zip 23.01 (x64)", "23.01", "Unknown", "Igor Pavlov", "N/A"),
        SoftwareRecord("Notepad++", "N/A", "Invalid Date", "N/A", "N/A"),
    ]


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "softaudit.ini"
    path.write_text(
        "[agent]\n"
        "log_level = DEBUG\n"
        "\n"
        "[report]\n"
        f"output_dir = {tmp_path / 'Reports'}\n"
        "html_formatting = List\n"
        "xml_formatting = Stream\n"
        "\n"
        "[logging]\n"
        f"log_file = {tmp_path / 'logs' / 'softaudit.log'}\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def reset_audit_logger():
    """Le logger SoftAudit est global : on repart sans handler à chaque test"""
    audit_logger = logging.getLogger(LOGGER_NAME)

    def clear():
        for handler in list(audit_logger.handlers):
            handler.close()
            audit_logger.removeHandler(handler)

    clear()
    yield
    clear()
