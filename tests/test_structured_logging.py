from __future__ import annotations

import io
import json
from pathlib import Path

from boundedfs.logging import DataRedactor, LogLevel, StructuredLogger, create_logger


def _lines(buf: io.StringIO):
    return [json.loads(line) for line in buf.getvalue().splitlines()]


def test_entry_structure():
    """Test JSON entry fields."""
    buf = io.StringIO()
    log = StructuredLogger("bounded_path", session_id="s1", output_file=buf, enable_console=False)
    log.info("file created", path="/srv/data/a.txt", size=3)

    (entry,) = _lines(buf)
    assert entry["level"] == "info"
    assert entry["component"] == "bounded_path"
    assert entry["session_id"] == "s1"
    assert entry["message"] == "file created"
    assert entry["path"] == "/srv/data/a.txt"
    assert entry["size"] == 3


def test_level_threshold():
    """Test entries below the threshold are dropped."""
    buf = io.StringIO()
    log = StructuredLogger("tree", output_file=buf, enable_console=False, min_level="warning")
    log.debug("hidden")
    log.info("hidden")
    log.warning("shown")
    log.error("shown too")
    assert [e["level"] for e in _lines(buf)] == ["warning", "error"]


def test_unknown_level_defaults_to_debug():
    """Test an unknown level name."""
    log = StructuredLogger("x", enable_console=False, min_level="loud")
    assert log.min_level is LogLevel.DEBUG


def test_console_output(capsys):
    """Test console output is JSON."""
    log = StructuredLogger("console", enable_console=True)
    log.warning("escape", parent="/srv", child="/etc")
    out = capsys.readouterr().out
    assert json.loads(out)["child"] == "/etc"


def test_redaction_of_home_and_secrets():
    """Test redaction of home directories and secrets."""
    redactor = DataRedactor()
    data = redactor.redact_dict(
        {
            "path": "/home/alice/uploads/a.txt",
            "token": "abc",
            "note": "api_key=abcdefgh1234",
            "parts": ["/Users/bob/x", 3],
            "nested": {"password": "x", "path": Path("/home/carol/y")},
        }
    )
    assert data["path"] == "[REDACTED]/uploads/a.txt"
    assert data["token"] == "[REDACTED]"
    assert "abcdefgh1234" not in data["note"]
    assert data["parts"] == ["[REDACTED]/x", 3]
    assert data["nested"]["password"] == "[REDACTED]"
    assert data["nested"]["path"] == "[REDACTED]/y"


def test_contents_never_logged():
    """Test file contents are redacted."""
    buf = io.StringIO()
    log = StructuredLogger("x", output_file=buf, enable_console=False)
    log.info("write", contents="top secret")
    assert _lines(buf)[0]["contents"] == "[REDACTED]"


def test_create_logger_writes_jsonl(tmp_path: Path):
    """Test create_logger writes a JSONL file."""
    log = create_logger("bounded_path", session_id="t", log_dir=tmp_path, min_level="debug", enable_console=False)
    log.debug("hello")
    log.close()
    written = (tmp_path / "bounded_path_t.jsonl").read_text().splitlines()
    assert json.loads(written[0])["message"] == "hello"


def test_rotation(tmp_path: Path):
    """Test size-based rotation."""
    target = tmp_path / "rot.jsonl"
    log = StructuredLogger("rot", output_file=target, enable_console=False, max_log_files=2)
    log.max_log_size_bytes = 10
    for i in range(5):
        log.info("entry", i=i)
    log.close()
    assert target.exists()
    assert (tmp_path / "rot.1.jsonl").exists()
