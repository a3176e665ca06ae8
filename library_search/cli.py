"""
cli.py - command line interface for library search
Features:
- One-shot subcommands: suggest, search, show
- Interactive loop with live suggestions (pick one with /<n>)
- Config inspection/editing and latency stats
- Uses Rich for tables and formatting
"""

import argparse
import sys
from typing import List, Optional

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from .catalog import CatalogError
from .core.book import Book
from .search_engine import SearchEngine, SearchOutcome
from .utils.config_manager import Config
from .utils.logger_utils import get_logger

BANNER = "Library Search"
HELP = (
    "Type text for suggestions. Commands:\n"
    "  /search <q>   search the catalog\n"
    "  /<n>          search suggestion number n\n"
    "  /show <id>    book details\n"
    "  /stats        latency + index stats\n"
    "  /config [key val]\n"
    "  /help /quit"
)


class CLI:
    """Interactive library search: suggestions, search, details."""

    def __init__(self, engine: SearchEngine, console: Optional[Console] = None):
        self.engine = engine
        self.console = console or Console()
        self.suggestions: List[str] = []
        self.outcome: Optional[SearchOutcome] = None  # None until the first search
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - plain text shows suggestions
        - lines starting with / are commands
        """
        self.console.rule(f"[bold magenta]{BANNER}[/bold magenta]")
        self.console.print(f"[cyan]{HELP}[/cyan]\n")

        while self.running:
            try:
                line = Prompt.ask("[green]Search[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self.running = False
                break
            line = line.strip()
            if not line:
                continue
            if line.startswith("/"):
                self.handle_command(line)
            else:
                self.show_suggestions(line)
        self.console.print("bye.")

    # COMMAND HANDLING -----------------------------------------------------------
    def handle_command(self, line: str):
        cmd, _, arg = line.partition(" ")
        arg = arg.strip()

        if cmd in ("/q", "/quit", "/exit"):
            self.running = False
            return

        if cmd == "/help":
            self.console.print(HELP)
            return

        if cmd == "/search" and arg:
            self.show_results(arg)
            return

        if cmd[1:].isdigit():
            self._pick_suggestion(int(cmd[1:]))
            return

        if cmd == "/show" and arg:
            self.show_book(arg)
            return

        if cmd == "/stats":
            self.show_stats()
            return

        if cmd == "/config":
            self._config(arg.split())
            return

        self.console.print(f"[red]Unknown command:[/red] {escape(line)}")

    def _pick_suggestion(self, n: int):
        if not 1 <= n <= len(self.suggestions):
            self.console.print(f"[red]No suggestion #{n}[/red]")
            return
        self.show_results(self.suggestions[n - 1])

    def _config(self, parts: List[str]):
        cfg = self.engine.config
        if not parts:
            table = Table(title="Config", box=box.MINIMAL)
            table.add_column("Option", style="cyan")
            table.add_column("Value")
            for k, v in cfg.items():
                table.add_row(k, escape(str(v)))
            self.console.print(table)
            return
        if len(parts) != 2:
            self.console.print("usage: /config [key val]")
            return
        try:
            cfg.set(parts[0], parts[1])
        except (KeyError, ValueError) as e:
            self.console.print(f"[red]{escape(str(e.args[0]))}[/red]")
            return
        self.console.print(f"[green]{escape(parts[0])}[/green] = {escape(str(cfg.get(parts[0])))}")

    # DISPLAY -------------------------------------------------------------------------------
    def show_suggestions(self, text: str) -> List[str]:
        self.suggestions = self.engine.on_text_changed(text)
        if not self.suggestions:
            self.console.print("[dim](no suggestions)[/dim]")
            return self.suggestions

        table = Table(title="Suggestions", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Suggestion", style="bold")
        for i, s in enumerate(self.suggestions, 1):
            table.add_row(str(i), escape(s))
        self.console.print(table)
        return self.suggestions

    def show_results(self, query: str) -> SearchOutcome:
        outcome = self.engine.on_query_submitted(query)
        self.outcome = outcome
        if outcome.is_empty:
            self.console.print(f"[yellow]No results found for '{escape(query)}'[/yellow]")
            return outcome

        table = Table(title=f"Results for '{escape(outcome.query)}'", box=box.SIMPLE)
        table.add_column("ID", style="cyan")
        table.add_column("Title", style="bold")
        table.add_column("Author")
        table.add_column("Tags", style="dim")
        for b in outcome:
            table.add_row(escape(b.id), escape(b.title), escape(b.author), escape(", ".join(b.tags)))
        self.console.print(table)
        return outcome

    def show_book(self, book_id: str) -> Optional[Book]:
        book = self.engine.get_book(book_id)
        if book is None:
            self.console.print(f"[red]No book with id '{escape(book_id)}'[/red]")
            return None
        body = (
            f"[b]{escape(book.title)}[/b]\nby {escape(book.author)}\n\n"
            f"[dim]tags:[/dim] {escape(', '.join(book.tags)) or '-'}"
        )
        self.console.print(Panel(body, title=f"Book {escape(book.id)}", border_style="cyan"))
        return book

    def show_stats(self):
        table = Table(title="Stats", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Value")
        for k, v in self.engine.index.stats().items():
            table.add_row(k, str(v))
        for k, v in self.engine.metrics.summary().items():
            table.add_row(f"{k} (avg)", f"{v['avg_ms']:.3f} ms over {v['count']}")
        self.console.print(table)


# ENTRY POINT -------------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="library-search", description="Autocomplete and search a book catalog.")
    parser.add_argument("--config", help="JSON config file")
    parser.add_argument("--catalog", help="JSON catalog file (default: built-in sample books)")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("suggest", help="show suggestions for a prefix")
    p.add_argument("text")
    p.add_argument("--limit", type=int)

    p = sub.add_parser("search", help="search titles, authors and tags")
    p.add_argument("text")
    p.add_argument("--limit", type=int)

    p = sub.add_parser("show", help="show one book")
    p.add_argument("id")

    sub.add_parser("repl", help="interactive prompt (default)")
    sub.add_parser("tui", help="full-screen terminal UI")
    return parser


def build_engine(args) -> SearchEngine:
    cfg = Config(args.config)
    # flags apply to this run only, they never reach the config file
    if args.catalog:
        cfg.override("catalog_path", args.catalog)
    if args.log_level:
        cfg.override("log_level", args.log_level)
    if getattr(args, "limit", None) is not None:
        key = "suggest_limit" if args.command == "suggest" else "search_limit"
        cfg.override(key, max(0, args.limit))
    get_logger(level=cfg.get("log_level"), log_path=cfg.get("log_file") or None)
    return SearchEngine(config=cfg)


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    try:
        engine = build_engine(args)
    except (CatalogError, OSError) as e:
        console.print(f"[red]Could not load catalog:[/red] {escape(str(e))}")
        return 2

    cli = CLI(engine, console=console)
    if args.command == "suggest":
        cli.show_suggestions(args.text)
        return 0
    if args.command == "search":
        cli.show_results(args.text)
        return 0
    if args.command == "show":
        return 0 if cli.show_book(args.id) else 1
    if args.command == "tui":
        from .tui_app import LibrarySearchApp
        LibrarySearchApp(engine).run()
        return 0
    cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
