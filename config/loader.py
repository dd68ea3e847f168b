"""Configuration loader utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from config.models import AlphabetConfig, Config, LoggingConfig, ShellConfig


def _normalize_path(path: Union[Path, str]) -> Path:
    return path if isinstance(path, Path) else Path(path)


def _load_raw_config(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found at {config_path}")

    suffix = config_path.suffix.lower()
    with config_path.open("r", encoding="utf-8") as stream:
        if suffix in {".yaml", ".yml"}:
            raw = yaml.safe_load(stream)
        elif suffix == ".json":
            raw = json.load(stream)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError("Config root must be a mapping")
    return raw


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    # 空的小节（如 "shell:" 后无内容）按默认值处理
    section = raw.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return dict(section)


def load_config(config_path: Union[Path, str]) -> Config:
    """Load configuration file and construct Config dataclass."""

    config_path = _normalize_path(config_path)
    raw = _load_raw_config(config_path)

    alphabet = AlphabetConfig(**_section(raw, "alphabet"))
    # 提前构造一次，字母表不合法时在加载阶段就报错
    alphabet.build()

    shell = ShellConfig(**_section(raw, "shell"))

    logging_raw = _section(raw, "logging")
    log_path = logging_raw.get("filepath")
    if log_path:
        # 日志路径相对配置文件所在目录解析
        logging_raw["filepath"] = (config_path.parent / log_path).resolve()
    logging = LoggingConfig(**logging_raw)

    return Config(alphabet=alphabet, shell=shell, logging=logging)
