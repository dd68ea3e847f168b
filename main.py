from __future__ import annotations

import argparse
import locale
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import yaml

from config import Config, load_config
from infra.logging_setup import configure_logging
from nfa.errors import AutomatonError
from shell.demo import build_demo_nfa
from shell.shell import Shell

logger = logging.getLogger("app.main")

_THIS_DIR = Path(__file__).resolve().parent


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="lambda-nfa", description="Interactive shell for lambda NFAs.")
    parser.add_argument(
        "script",
        nargs="?",
        default=None,
        help="命令脚本路径，每行一条 shell 命令；省略时进入交互模式。",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML/JSON 配置文件路径。",
    )
    parser.add_argument(
        "--generate",
        action="store_true",
        help="启动时预先载入演示自动机（等同于 GENERATE）。",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="覆盖配置中的日志级别，例如 DEBUG。",
    )
    return parser.parse_args(list(argv))


def resolve_file_path(file_path: str) -> Optional[Path]:
    if not file_path:
        return None

    # 处理带引号的路径（Windows 常见）
    if file_path.startswith('"') and file_path.endswith('"') and len(file_path) >= 2:
        file_path = file_path[1:-1]

    path = Path(file_path).expanduser()

    # 如果是绝对路径，直接返回
    if path.is_absolute():
        return path

    # 相对路径：按这些基准目录依次尝试
    candidates = [
        Path.cwd() / path,  # 当前工作目录（优先）
        _THIS_DIR / path,   # 当前 main.py 所在目录
        Path.home() / path, # 用户目录
    ]

    for p in candidates:
        if p.exists():
            return p

    # 都不存在时：仍返回“相对工作目录”的拼接结果，便于后续报错信息更直观
    return Path.cwd() / path


def detect_file_encoding(path: Path) -> Optional[str]:
    try:
        with path.open("rb") as f:
            data = f.read(4)
    except OSError:
        return None
    if len(data) >= 4 and data[0:4] == b"\x00\x00\xFE\xFF":
        return "utf-32-be"
    if len(data) >= 4 and data[0:4] == b"\xFF\xFE\x00\x00":
        return "utf-32-le"
    if len(data) >= 3 and data[0:3] == b"\xEF\xBB\xBF":
        return "utf-8-sig"
    if len(data) >= 2 and data[0:2] == b"\xFE\xFF":
        return "utf-16-be"
    if len(data) >= 2 and data[0:2] == b"\xFF\xFE":
        return "utf-16-le"
    return None


def read_script_lines(path: Path) -> Optional[List[str]]:
    encoding = detect_file_encoding(path)
    logger.info("脚本编码: %s", encoding if encoding is not None else "UTF-8 (默认)")

    if encoding is None:
        encoding = locale.getpreferredencoding(False) or "utf-8"

    try:
        with path.open("r", encoding=encoding) as f:
            lines = [line.rstrip("\r\n") for line in f]
    except FileNotFoundError:
        print(f"文件未找到: {path}", file=sys.stderr)
        return None
    except (OSError, UnicodeDecodeError) as e:
        print(f"读取文件错误: {e}", file=sys.stderr)
        return None

    logger.info("读取行数: %d", len(lines))
    return lines


def build_shell(config: Config, generate: bool = False) -> Shell:
    alphabet = config.alphabet.build()
    shell = Shell(alphabet=alphabet, prompt=config.shell.prompt, echo=config.shell.echo)
    if generate:
        shell.nfa = build_demo_nfa(alphabet)
    return shell


def main(argv: List[str]) -> int:
    args = parse_args(argv[1:])

    try:
        config = load_config(args.config) if args.config is not None else Config()
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        print(f"错误: 无法加载配置 - {e}", file=sys.stderr)
        return 1

    configure_logging(config.logging, level=args.log_level)

    try:
        shell = build_shell(config, generate=args.generate)
    except (ValueError, AutomatonError) as e:
        print(f"错误: {e}", file=sys.stderr)
        return 1

    if args.script is None:
        shell.run_interactive()
        return 0

    script = resolve_file_path(args.script)
    if script is None or not script.is_file():
        print(f"错误: 脚本文件不存在 - {args.script}", file=sys.stderr)
        return 1

    lines = read_script_lines(script)
    if lines is None:
        return 1

    logger.info("执行脚本: %s", script.resolve())
    shell.run(lines)
    return 0


def run() -> None:
    raise SystemExit(main(sys.argv))


if __name__ == "__main__":
    run()
