"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import shutil
import sys
from typing import Optional

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings

_BRIGHT_GREEN = "\033[1;92m"
_CYAN = "\033[96m"
_YELLOW = "\033[93m"
_RESET = "\033[0m"
_BOLD = "\033[1m"


def _g(s: str) -> str:
    return f"{_BRIGHT_GREEN}{s}{_RESET}"


def _c(s: str) -> str:
    return f"{_CYAN}{s}{_RESET}"


_LOGO = r"""
  ██████╗ ██╗   ██╗ ██████╗     ██╗███╗   ██╗███████╗██╗ ██████╗ ██╗  ██╗████████╗███████╗
  ██╔══██╗██║   ██║██╔═══██╗    ██║████╗  ██║██╔════╝██║██╔════╝ ██║  ██║╚══██╔══╝██╔════╝
  ██║  ██║██║   ██║██║   ██║    ██║██╔██╗ ██║███████╗██║██║  ███╗███████║   ██║   ███████╗
  ██║  ██║██║   ██║██║   ██║    ██║██║╚██╗██║╚════██║██║██║   ██║██╔══██║   ██║   ╚════██║
  ██████╔╝╚██████╔╝╚██████╔╝    ██║██║ ╚████║███████║██║╚██████╔╝██║  ██║   ██║   ███████║
  ╚═════╝  ╚═════╝  ╚═════╝     ╚═╝╚═╝  ╚═══╝╚══════╝╚═╝ ╚═════╝ ╚═╝  ╚═╝   ╚═╝   ╚══════╝
"""


def _print_logo() -> None:
    cols = shutil.get_terminal_size(fallback=(100, 20)).columns
    div = "═" * min(cols, 96)
    print(_g(div))
    for line in _LOGO.splitlines():
        print(_g(line))
    print(_c("  League of Legends Ranked Player & Duo Analytics"))
    print(_g(div))


def _menu() -> int:
    _print_logo()
    # Lazy imports keep `--help` fast and free of settings side effects
    from infrastructure import create_blob_store
    from presentation.cli import AnalyzeCommand, DuoCommand, JobsCommand

    # One store for the session so "memory" runs can analyse, then query duos
    store = create_blob_store()

    while True:
        cols = shutil.get_terminal_size(fallback=(96, 20)).columns
        print(f"\n{_g('═' * min(cols, 48))}")
        print(f"  {_BOLD}MAIN MENU{_RESET}")
        print(_g("═" * min(cols, 48)))
        print(f"  {_c('1')}  Analyze player")
        print(f"  {_c('2')}  Duo synergy")
        print(f"  {_c('3')}  List jobs")
        print(f"  {_c('4')}  Exit")
        print(_g("─" * min(cols, 48)))
        choice = input("  Choose: ").strip()

        if choice == "1":
            asyncio.run(AnalyzeCommand(store).run())
        elif choice == "2":
            asyncio.run(DuoCommand(store).run())
        elif choice == "3":
            asyncio.run(JobsCommand(store).run())
        elif choice == "4":
            print(f"\n  {_g('Goodbye!')}\n")
            return 0
        else:
            print(f"  {_YELLOW}Invalid option.{_RESET}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="duo-insights", description="Ranked player and duo analytics")
    sub = parser.add_subparsers(dest="command")

    analyze = sub.add_parser("analyze", help="fetch and summarise a player's recent ranked games")
    analyze.add_argument("riot_id", help="Name#TAG")
    analyze.add_argument("-r", "--region", required=True, help="server, e.g. euw or euw1")
    analyze.add_argument("-n", "--limit", type=int, default=None, help=f"match count (default {settings.DEFAULT_MATCH_LIMIT}, max {settings.MAX_MATCH_LIMIT})")
    analyze.add_argument("--insights", action="store_true", help="append generated insights")

    duo = sub.add_parser("duo", help="duo synergy from cached matches of player A")
    duo.add_argument("puuid_a")
    duo.add_argument("puuid_b")
    duo.add_argument("-r", "--region", required=True)
    duo.add_argument("--insights", action="store_true")

    sub.add_parser("jobs", help="list stored jobs")
    return parser


def _dispatch(args: argparse.Namespace) -> Optional[int]:
    from presentation.cli import AnalyzeCommand, DuoCommand, JobsCommand
    from presentation.cli.analyze_command import split_riot_id

    if args.command == "analyze":
        game_name, tag_line = split_riot_id(args.riot_id)
        return asyncio.run(AnalyzeCommand().run(game_name, tag_line, args.region, args.limit, args.insights))
    if args.command == "duo":
        return asyncio.run(DuoCommand().run(args.puuid_a, args.puuid_b, args.region, args.insights))
    if args.command == "jobs":
        return asyncio.run(JobsCommand().run())
    return None


def main(argv: list[str]) -> int:
    args = _build_parser().parse_args(argv)
    bootstrap_logging(
        service="duo-insights",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="duo_insights.jsonl",
    )
    try:
        if args.command is None:
            return _menu()
        return _dispatch(args) or 0
    finally:
        shutdown_logging()


def _entry() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
