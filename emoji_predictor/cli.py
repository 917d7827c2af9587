"""
cli.py - terminal front-end for the emoji predictor
Features:
- one-shot subcommands: word, sentence, category, categories, popular
- interactive typing loop: word suggestions for the word being typed; an
  empty line settles the text and shows sentence suggestions
- /pick to append an emoji, /config to view or change settings
- Uses Rich for tables and formatting
"""

from __future__ import annotations

import argparse
import logging
import shlex
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from rich import box

from emoji_predictor.core.matcher import EmojiMatcher, default_matcher
from emoji_predictor.errors import EmojiPredictorError
from emoji_predictor.session import TypingSession
from emoji_predictor.utils.config_manager import DEFAULT_CONFIG_PATH, Config
from emoji_predictor.utils.logger_utils import Log, setup_logging

logger = logging.getLogger(__name__)

HELP = (
    "Commands: /word <w> [n], /sentence <text>, /category <name> [n], /categories,\n"
    "          /popular, /pick <emoji>, /clear, /config [key value], /help, /quit\n"
    "Anything else is typed text. Press Enter on an empty line to get sentence suggestions."
)


def render_symbols(console: Console, title: str, symbols: Sequence[str]) -> None:
    if symbols:
        console.print(f"[bold cyan]{escape(title)}:[/bold cyan] " + "  ".join(symbols))
    else:
        console.print(f"[bold cyan]{escape(title)}:[/bold cyan] [dim](no matches)[/dim]")


def render_categories(console: Console, matcher: EmojiMatcher) -> None:
    table = Table(title="Categories", box=box.SIMPLE)
    table.add_column("Category", style="magenta")
    table.add_column("Sample")
    for cat in matcher.kb.categories():
        table.add_row(cat, " ".join(matcher.by_category(cat, 5)))
    console.print(table)


class CLI:
    """Interactive loop around a TypingSession."""

    def __init__(self, cfg: Config, matcher: Optional[EmojiMatcher] = None, console: Optional[Console] = None):
        self.cfg = cfg
        self.matcher = matcher or default_matcher()
        self.console = console or Console()
        self.session = TypingSession(
            self.matcher,
            word_results=cfg.get("word_results"),
            sentence_results=cfg.get("sentence_results"),
        )
        self.running = True

    def run(self):
        self.console.rule("[bold magenta]Emoji Predictor[/bold magenta]")
        self.console.print(f"[cyan]{escape(HELP)}[/cyan]\n")
        while self.running:
            try:
                line = Prompt.ask("[green]You[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nbye.")
                break
            self.handle(line)

    def handle(self, line: str) -> None:
        """Process one input line (command or typed text)."""
        line = line.strip()
        try:
            if not line:
                self._settle()
            elif line.startswith("/"):
                self._command(line)
            else:
                self._typed(line)
        except EmojiPredictorError as e:
            self.console.print(f"[red]error:[/red] {escape(str(e))}")

    # typed text -------------------------------------------------------------
    def _typed(self, text: str) -> None:
        # text arrives a line at a time; treat it as appended to the session text
        full = f"{self.session.text} {text}".strip() if self.session.text else text
        with Log.time_block("word query"):
            words = self.session.update(full)
        render_symbols(self.console, "word", words)

    def _settle(self) -> None:
        # an empty line stands in for the pause after typing
        if not self.session.text.strip():
            return
        with Log.time_block("sentence query"):
            sentence = self.session.settle()
        render_symbols(self.console, "sentence", sentence)

    # commands ---------------------------------------------------------------
    def _command(self, line: str) -> None:
        try:
            parts = shlex.split(line)
        except ValueError:
            parts = line.split()
        cmd, args = parts[0].lower(), parts[1:]

        if cmd in ("/q", "/quit", "/exit"):
            self.running = False
            self.console.print("bye.")
        elif cmd == "/help":
            self.console.print(escape(HELP))
        elif cmd == "/word" and args:
            n = _int_arg(args[1:], self.cfg.get("word_results"))
            render_symbols(self.console, "word", self.matcher.predict_for_word(args[0], n))
        elif cmd == "/sentence" and args:
            render_symbols(
                self.console,
                "sentence",
                self.matcher.predict_for_sentence(" ".join(args), self.cfg.get("sentence_results")),
            )
        elif cmd == "/category" and args:
            n = _int_arg(args[1:], 10)
            render_symbols(self.console, args[0], self.matcher.by_category(args[0], n))
        elif cmd == "/categories":
            render_categories(self.console, self.matcher)
        elif cmd == "/popular":
            render_symbols(self.console, "popular", self.matcher.popular_symbols())
        elif cmd == "/pick" and args:
            text = self.session.pick(args[0])
            self.console.print(f"[green]text:[/green] {escape(text)}")
        elif cmd == "/clear":
            self.session.clear()
            self.console.print("cleared.")
        elif cmd == "/config":
            self._config(args)
        else:
            self.console.print(f"[red]Unknown command:[/red] {escape(line)}")

    def _config(self, args: List[str]) -> None:
        if not args:
            table = Table(box=box.SIMPLE)
            table.add_column("Option", style="magenta")
            table.add_column("Value")
            for k, v in self.cfg.show():
                table.add_row(k, str(v))
            self.console.print(table)
        elif len(args) == 2:
            self.cfg.set(args[0], args[1])
            self.session.word_results = self.cfg.get("word_results")
            self.session.sentence_results = self.cfg.get("sentence_results")
            if args[0] == "log_level":
                setup_logging(self.cfg.get("log_level"))
            self.console.print(f"{escape(args[0])} = {escape(str(self.cfg.get(args[0])))}")
        else:
            self.console.print(escape("usage: /config [key value]"))


def _int_arg(args: List[str], default: int) -> int:
    if not args:
        return default
    try:
        return int(args[0])
    except ValueError:
        return default


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="emoji-predictor", description="Suggest emoji for words and sentences.")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="path to JSON config file")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("word", help="predict emoji for a (partial) word")
    p.add_argument("word")
    p.add_argument("-n", "--max-results", type=int, default=None)

    p = sub.add_parser("sentence", help="predict emoji for a sentence")
    p.add_argument("text", nargs="+")
    p.add_argument("-n", "--max-results", type=int, default=None)

    p = sub.add_parser("category", help="list emoji in a category")
    p.add_argument("name")
    p.add_argument("-n", "--limit", type=int, default=10)

    sub.add_parser("categories", help="list known categories")
    sub.add_parser("popular", help="show popular emoji")
    return parser


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()

    # one-shot commands never write a config file
    cfg = Config(args.config, autosave=args.command is None)
    setup_logging(args.log_level or cfg.get("log_level"))
    logger.debug("command=%s config=%s", args.command or "interactive", args.config)

    try:
        matcher = default_matcher()
    except EmojiPredictorError as e:
        console.print(f"[red]error:[/red] {escape(str(e))}")
        return 1

    if args.command == "word":
        n = args.max_results if args.max_results is not None else cfg.get("word_results")
        render_symbols(console, args.word, matcher.predict_for_word(args.word, n))
    elif args.command == "sentence":
        n = args.max_results if args.max_results is not None else cfg.get("sentence_results")
        render_symbols(console, "sentence", matcher.predict_for_sentence(" ".join(args.text), n))
    elif args.command == "category":
        render_symbols(console, args.name, matcher.by_category(args.name, args.limit))
    elif args.command == "categories":
        render_categories(console, matcher)
    elif args.command == "popular":
        render_symbols(console, "popular", matcher.popular_symbols())
    else:
        CLI(cfg, matcher, console).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
