"""Tests for the inspect_message script."""

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "inspect_message.py"


@pytest.fixture
def inspect_message() -> ModuleType:
    spec = importlib.util.spec_from_file_location("inspect_message", SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def message_path(tmp_path: Path) -> Path:
    path = tmp_path / "message.eml"
    path.write_bytes(b"Received: a\nX-Mailer: m\nSubject: s\n\nbody\n")
    return path


class TestInspectMessage:
    """Command-line error handling."""

    def test_invalid_config_exits_cleanly(
        self,
        inspect_message: ModuleType,
        message_path: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """A bad policy file is reported as an error, not a traceback."""
        config = tmp_path / "policy.yaml"
        config.write_text("remvoe: [X-Mailer]\n")
        monkeypatch.setattr("sys.argv", ["inspect_message.py", str(message_path), "--config", str(config)])

        with pytest.raises(SystemExit) as exc_info:
            inspect_message.main()

        assert exc_info.value.code == 1
        assert capsys.readouterr().out.startswith("Error: ")

    def test_missing_config_exits_cleanly(
        self,
        inspect_message: ModuleType,
        message_path: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """An unreadable policy file is reported as an error."""
        monkeypatch.setattr(
            "sys.argv", ["inspect_message.py", str(message_path), "--config", str(tmp_path / "missing.yaml")]
        )

        with pytest.raises(SystemExit) as exc_info:
            inspect_message.main()

        assert exc_info.value.code == 1
        assert "missing.yaml" in capsys.readouterr().out
