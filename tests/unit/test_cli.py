import json
import os
from pathlib import Path
from typing import List
from unittest.mock import MagicMock, patch

import pytest

from softaudit.core.logger import AuditLogger
from softaudit.main import SoftAudit, main, prompt_format, prompt_formatting
from softaudit.reporters import FormattingOption, ReportFormat
from tests.conftest import FakeSource, raw_entry


@pytest.fixture
def sources() -> List[FakeSource]:
    return [
        FakeSource([raw_entry("Git", "2.45.1", "20240601", "The Git Development Community")], label="64-bit"),
        FakeSource([raw_entry(None, "1.0"), raw_entry("WinRAR", date="garbage")], label="32-bit"),
    ]


def _answers(*values):
    iterator = iter(values)
    return lambda prompt: next(iterator)


def test_prompt_format_retries_on_invalid_input() -> None:
    printed = []
    fmt = prompt_format(_answers("pdf", "", "json"), printed.append)
    assert fmt is ReportFormat.JSON
    assert len(printed) == 2


def test_prompt_formatting_only_accepts_matching_options() -> None:
    printed = []
    option = prompt_formatting(ReportFormat.XML, _answers("Table", "nope", "stream"), printed.append)
    assert option is FormattingOption.STREAM
    assert len(printed) == 2


def test_main_writes_requested_format(config_file: Path, tmp_path: Path, sources, capsys) -> None:
    out_dir = tmp_path / "out"
    code = main(
        ["-c", str(config_file), "--format", "json", "--output-dir", str(out_dir)],
        interactive=False,
        sources=sources,
    )
    assert code == 0
    files = os.listdir(out_dir)
    assert len(files) == 1
    assert files[0].startswith("SoftAudit_") and files[0].endswith(".json")

    data = json.loads((out_dir / files[0]).read_text(encoding="utf-8"))
    assert [item["Name"] for item in data] == ["Git", "WinRAR"]
    assert data[1]["InstallDate"] == "Invalid Date"
    assert str(out_dir / files[0]) in capsys.readouterr().out


def test_main_uses_configured_formatting_when_not_interactive(
    config_file: Path, tmp_path: Path, sources
) -> None:
    code = main(["-c", str(config_file), "-f", "HTML"], interactive=False, sources=sources)
    assert code == 0
    report_dir = tmp_path / "Reports"
    (report,) = report_dir.iterdir()
    assert 'class="record"' in report.read_text(encoding="utf-8")


def test_main_interactive_prompts(config_file: Path, tmp_path: Path, sources) -> None:
    code = main(
        ["-c", str(config_file), "-o", str(tmp_path / "out")],
        input_func=_answers("doc", "xml", "string"),
        interactive=True,
        sources=sources,
    )
    assert code == 0
    (report,) = (tmp_path / "out").iterdir()
    assert report.suffix == ".xml"


def test_main_closed_input_during_prompt(config_file: Path, tmp_path: Path, sources, capsys) -> None:
    def closed_stdin(prompt):
        raise EOFError

    with patch.object(AuditLogger, "exception") as mock_exception:
        code = main(
            ["-c", str(config_file), "-o", str(tmp_path / "out")],
            input_func=closed_stdin,
            interactive=True,
            sources=sources,
        )

    assert code == 1
    mock_exception.assert_not_called()
    assert "Entrée interrompue" in capsys.readouterr().out
    assert not (tmp_path / "out").exists()


def test_main_no_file_prints_records(config_file: Path, tmp_path: Path, sources, capsys) -> None:
    code = main(["-c", str(config_file), "--no-file"], interactive=False, sources=sources)
    assert code == 0
    out = capsys.readouterr().out
    assert "Git" in out and "WinRAR" in out
    assert not (tmp_path / "Reports").exists()


def test_main_reports_write_errors(config_file: Path, tmp_path: Path, sources, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    code = main(
        ["-c", str(config_file), "-f", "TXT", "-o", str(blocker / "reports")],
        interactive=False,
        sources=sources,
    )
    assert code == 1
    assert str(blocker / "reports") in capsys.readouterr().out


def test_main_reports_collection_errors(config_file: Path, capsys) -> None:
    broken = [FakeSource([], error=FileNotFoundError("clé absente"))]
    code = main(["-c", str(config_file), "-f", "TXT"], interactive=False, sources=broken)
    assert code == 1
    assert "clé absente" in capsys.readouterr().out


def test_main_create_config(tmp_path: Path) -> None:
    path = tmp_path / "new" / "softaudit.ini"
    assert main(["--create-config", "-c", str(path)]) == 0
    assert path.is_file()


def test_softaudit_export_passthrough(config_file: Path, sources) -> None:
    app = SoftAudit(str(config_file), sources=sources)
    records = app.collect()
    assert app.export(records, no_file=True) is records
    assert app.default_formatting(ReportFormat.XML) == "Stream"
    assert app.default_formatting(ReportFormat.CSV) is None


def test_invalid_format_argument_exits() -> None:
    with pytest.raises(SystemExit):
        main(["--format", "pdf"], interactive=False, sources=[MagicMock()])
