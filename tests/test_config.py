from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from config import AlphabetConfig, Config, LoggingConfig, load_config
from infra.logging_setup import configure_logging


def test_defaults() -> None:
    config = Config()
    assert config.alphabet == AlphabetConfig()
    assert config.shell.prompt == "nfa> "
    assert config.shell.echo is False
    assert config.logging.level == "WARNING"
    assert config.logging.resolved_path() is None
    alphabet = config.alphabet.build()
    assert (alphabet.first_symbol, alphabet.last_symbol, alphabet.lambda_symbol) == ("a", "z", "~")


def test_load_yaml(tmp_path: Path) -> None:
    path = tmp_path / "app.yaml"
    path.write_text(
        "alphabet:\n"
        "  first_symbol: '0'\n"
        "  last_symbol: '9'\n"
        "  lambda_symbol: '_'\n"
        "shell:\n"
        "  prompt: '> '\n"
        "  echo: true\n"
        "logging:\n"
        "  level: DEBUG\n"
        "  filepath: logs/nfa.log\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.alphabet.build().symbols()[:3] == ["0", "1", "2"]
    assert config.shell.prompt == "> "
    assert config.shell.echo is True
    assert config.logging.level == "DEBUG"
    assert config.logging.resolved_path() == (tmp_path / "logs" / "nfa.log").resolve()


def test_load_json(tmp_path: Path) -> None:
    path = tmp_path / "app.json"
    path.write_text(json.dumps({"shell": {"prompt": "$ "}}), encoding="utf-8")
    config = load_config(str(path))
    assert config.shell.prompt == "$ "
    assert config.alphabet == AlphabetConfig()


def test_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == Config()


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_unsupported_suffix(tmp_path: Path) -> None:
    path = tmp_path / "app.ini"
    path.write_text("[shell]\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize(
    "name, content",
    [
        ("list.yaml", "- a\n- b\n"),
        ("scalar.yaml", "42\n"),
        ("list.json", "[1, 2]"),
        ("string.json", '"nfa"'),
    ],
)
def test_non_mapping_root_is_rejected(tmp_path: Path, name: str, content: str) -> None:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError, match="root must be a mapping"):
        load_config(path)


@pytest.mark.parametrize("section", ["alphabet", "shell", "logging"])
def test_non_mapping_section_is_rejected(tmp_path: Path, section: str) -> None:
    path = tmp_path / "app.yaml"
    path.write_text(f"{section}: [1, 2]\n", encoding="utf-8")
    with pytest.raises(ValueError, match=f"'{section}' must be a mapping"):
        load_config(path)


def test_empty_section_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "app.yaml"
    path.write_text("shell:\nlogging:\n", encoding="utf-8")
    assert load_config(path) == Config()


def test_invalid_alphabet_fails_at_load_time(tmp_path: Path) -> None:
    path = tmp_path / "app.yaml"
    path.write_text("alphabet:\n  lambda_symbol: 'm'\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_configure_logging_writes_file(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "nfa.log"
    configure_logging(LoggingConfig(level="INFO", filepath=log_path, console=False))
    logging.getLogger("nfa.engine").info("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "nfa.engine | hello" in log_path.read_text(encoding="utf-8")
    assert logging.getLogger().level == logging.INFO


def test_configure_logging_level_override() -> None:
    configure_logging(LoggingConfig(level="WARNING"), level="debug")
    assert logging.getLogger().level == logging.DEBUG
