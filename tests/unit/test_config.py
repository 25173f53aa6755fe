"""
Tests de la configuration et du logger.
"""

import logging
import logging.handlers
from pathlib import Path
from unittest.mock import patch

from softaudit.core.config import AuditConfig, create_default_config
from softaudit.core.logger import AuditLogger


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    """Un fichier absent donne la configuration par défaut."""
    cfg = AuditConfig(str(tmp_path / "missing.ini"))
    report = cfg.get_report_config()
    assert report["default_format"] == "TXT"
    assert report["output_dir"] == "Reports"
    assert report["html_formatting"] == "Table"
    assert report["xml_formatting"] == "String"
    assert cfg.get_logging_config()["max_log_size"] == 10485760
    assert cfg.validate() == []


def test_file_overrides_defaults(config_file: Path, tmp_path: Path) -> None:
    """Les valeurs du fichier remplacent les valeurs par défaut."""
    cfg = AuditConfig(str(config_file))
    report = cfg.get_report_config()
    assert report["output_dir"] == str(tmp_path / "Reports")
    assert report["html_formatting"] == "List"
    assert report["default_format"] == "TXT"
    assert cfg.get_logging_config()["log_level"] == "DEBUG"


def test_validate_reports_every_problem(tmp_path: Path) -> None:
    """validate() liste chaque paramètre invalide."""
    path = tmp_path / "bad.ini"
    path.write_text(
        "[agent]\nlog_level = LOUD\n"
        "[report]\ndefault_format = PDF\nhtml_formatting = Stream\nxml_formatting = List\n"
    )
    errors = AuditConfig(str(path)).validate()
    assert len(errors) == 4


def test_create_default_config(tmp_path: Path) -> None:
    """create_default_config écrit un fichier relisible."""
    path = tmp_path / "etc" / "softaudit.ini"
    create_default_config(str(path))
    assert path.is_file()
    assert AuditConfig(str(path)).get("report", "title") == "Installed Software Audit"


def test_set_and_save_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "softaudit.ini"
    cfg = AuditConfig(str(path))
    cfg.set("report", "default_format", "json")
    cfg.save()
    assert AuditConfig(str(path)).get_report_config()["default_format"] == "JSON"


def test_logger_writes_to_rotating_file(config_file: Path, tmp_path: Path) -> None:
    """Le logger ajoute un fichier avec rotation et une sortie console."""
    audit_logger = AuditLogger(AuditConfig(str(config_file)))
    handlers = audit_logger.get_logger().handlers
    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in handlers)
    assert audit_logger.get_logger().level == logging.DEBUG

    audit_logger.info("inventaire démarré")
    audit_logger.close()
    content = (tmp_path / "logs" / "softaudit.log").read_text(encoding="utf-8")
    assert "inventaire démarré" in content


def test_logger_is_configured_once(config_file: Path) -> None:
    first = AuditLogger(AuditConfig(str(config_file)))
    count = len(first.get_logger().handlers)
    AuditLogger(AuditConfig(str(config_file)))
    assert len(first.get_logger().handlers) == count


def test_verbose_forces_debug(tmp_path: Path) -> None:
    cfg = AuditConfig(str(tmp_path / "missing.ini"))
    cfg.set("logging", "log_file", str(tmp_path / "audit.log"))
    audit_logger = AuditLogger(cfg, verbose=True)
    assert audit_logger.get_logger().level == logging.DEBUG


@patch("tempfile.gettempdir")
def test_logger_without_config_uses_config_default_path(mock_tempdir, tmp_path: Path) -> None:
    """Sans configuration, le logger écrit là où la configuration l'aurait placé."""
    mock_tempdir.return_value = str(tmp_path)
    expected = AuditConfig(str(tmp_path / "missing.ini")).get_logging_config()["log_file"]

    audit_logger = AuditLogger()
    file_handlers = [h for h in audit_logger.get_logger().handlers
                     if isinstance(h, logging.handlers.RotatingFileHandler)]

    assert expected == str(tmp_path / "softaudit.log")
    assert [h.baseFilename for h in file_handlers] == [expected]
