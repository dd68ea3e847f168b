from __future__ import annotations

from pathlib import Path

import pytest

import main
from config import Config


def test_script_runs_commands(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "demo.nfa"
    script.write_text('INIT 2\nADD 1 2 a\nCHECK "a"\nPREFIX "b"\nQUIT\nCHECK "a"\n', encoding="utf-8")
    assert main.main(["lambda-nfa", str(script)]) == 0
    assert capsys.readouterr().out.splitlines() == ["In language.", "No prefix in language."]


def test_generate_flag_preloads_demo(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "check.nfa"
    script.write_text('PREFIX "aab"\n', encoding="utf-8")
    assert main.main(["lambda-nfa", "--generate", str(script)]) == 0
    assert capsys.readouterr().out == '"aa"\n'


def test_script_with_utf8_bom(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "bom.nfa"
    script.write_bytes(b"\xef\xbb\xbfGENERATE\r\nCHECK \"aa\"\r\n")
    assert main.detect_file_encoding(script) == "utf-8-sig"
    assert main.main(["lambda-nfa", str(script)]) == 0
    assert capsys.readouterr().out == "In language.\n"


def test_missing_script(tmp_path: Path) -> None:
    assert main.main(["lambda-nfa", str(tmp_path / "nope.nfa")]) == 1


def test_bad_config(tmp_path: Path) -> None:
    config = tmp_path / "app.toml"
    config.write_text("", encoding="utf-8")
    assert main.main(["lambda-nfa", "--config", str(config)]) == 1


@pytest.mark.parametrize("content", ["- a\n- b\n", "alphabet: [1, 2]\n", "7\n"])
def test_malformed_config_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str], content: str) -> None:
    config = tmp_path / "app.yaml"
    config.write_text(content, encoding="utf-8")
    assert main.main(["lambda-nfa", "--config", str(config)]) == 1
    assert "must be a mapping" in capsys.readouterr().err


def test_config_with_echo(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "app.yaml"
    config.write_text("shell:\n  prompt: '$ '\n  echo: true\n", encoding="utf-8")
    script = tmp_path / "s.nfa"
    script.write_text("INIT 1\nDISPLAY\n", encoding="utf-8")
    assert main.main(["lambda-nfa", "--config", str(config), str(script)]) == 0
    assert capsys.readouterr().out.splitlines() == ["$ INIT 1", "$ DISPLAY"]


def test_resolve_file_path_strips_quotes(tmp_path: Path) -> None:
    target = tmp_path / "x.nfa"
    target.write_text("", encoding="utf-8")
    assert main.resolve_file_path(f'"{target}"') == target
    assert main.resolve_file_path("") is None


def test_build_shell_uses_config() -> None:
    shell = main.build_shell(Config(), generate=True)
    assert shell.prompt == "nfa> "
    assert shell.nfa is not None and shell.nfa.state_count == 5
