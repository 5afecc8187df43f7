"""
cli.py - command line spellchecker
Features:
- Checks text from a file (-f) or piped stdin, one line at a time
- Interactive correction: numbered suggestions per misspelled word, pick one, keep the word,
  or type a replacement
- Report mode (--report, or whenever input is piped): table of misspelled words and suggestions
  on stderr, text copied unchanged to stdout or -o
- JSON config file plus flag overrides
- Uses Rich for tables, prompts and log output
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Optional, Sequence, TextIO, Tuple

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from intelligent_spellchecker import __version__
from intelligent_spellchecker.core.dictionary import DictionaryError, load_dictionary
from intelligent_spellchecker.core.spell_checker import SpellChecker, TokenCheck
from intelligent_spellchecker.utils.config_manager import Config, ConfigError
from intelligent_spellchecker.utils.input_reader import InputError, read_lines, stdin_is_piped
from intelligent_spellchecker.utils.logger_utils import Log

logger = logging.getLogger(__name__)

# corrected text goes to stdout, everything the user looks at goes to stderr
console = Console(stderr=True)

ReportRow = Tuple[int, str, List[Tuple[str, int]]]


class CLI:
    """Runs a built SpellChecker over lines of text, interactively or as a report."""

    def __init__(self, checker: SpellChecker, ui: Optional[Console] = None, max_suggestions: int = 5):
        self.checker = checker
        self.ui = ui or console
        self.max_suggestions = max_suggestions
        self.corrections = 0

    # INTERACTIVE ------------------------------------------------------------------
    def correct(self, lines: Iterable[str], out: TextIO) -> int:
        """Write corrected lines to `out`. Returns the number of misspelled tokens seen."""
        misspelled = 0
        for lineno, line in enumerate(lines, 1):
            bad = [tc for tc in self.checker.check_line(line) if tc.needs_correction]
            if bad:
                misspelled += len(bad)
                self.ui.rule(f"[bold]line {lineno}[/bold]")
                self.ui.print(line, markup=False, highlight=False)
                line = self.checker.correct_line(line, self._choose)
            out.write(line + "\n")
        out.flush()
        return misspelled

    def _shown(self, tc: TokenCheck) -> List[Tuple[str, int]]:
        cands = list(tc.suggestions)
        if self.max_suggestions:
            cands = cands[: self.max_suggestions]
        return cands

    def _choose(self, tc: TokenCheck) -> Optional[str]:
        """
        Prompt for a replacement of one misspelled token.
        number -> that suggestion, empty -> keep the word, anything else -> used verbatim.
        """
        cands = self._shown(tc)
        if cands:
            table = Table(box=box.SIMPLE, title=f"'{escape(tc.core)}' not found")
            table.add_column("#", justify="right", style="cyan")
            table.add_column("suggestion", style="green")
            table.add_column("distance", justify="right")
            for i, (word, dist) in enumerate(cands, 1):
                table.add_row(str(i), Text(tc.replace(word)), str(dist))
            self.ui.print(table)
            question = "Pick a number, type a replacement, or Enter to keep"
        else:
            self.ui.print(f"[yellow]'{escape(tc.core)}' not found and no suggestions.[/yellow]")
            question = "Type a replacement, or Enter to keep"

        answer = Prompt.ask(question, console=self.ui, default="", show_default=False).strip()
        if not answer:
            return None
        if answer.isdigit() and cands:
            idx = int(answer)
            if 1 <= idx <= len(cands):
                choice = cands[idx - 1][0]
            else:
                self.ui.print(f"[red]no suggestion #{idx}, keeping '{escape(tc.core)}'[/red]")
                return None
        else:
            choice = answer
        self.corrections += 1
        logger.debug("replaced %r with %r", tc.core, choice)
        return choice

    # REPORT ------------------------------------------------------------------------
    def report(self, lines: Iterable[str], out: Console) -> int:
        """Print a table of misspelled tokens. Returns how many were found."""
        rows: List[ReportRow] = []
        for lineno, line in enumerate(lines, 1):
            for tc in self.checker.check_line(line):
                if tc.needs_correction:
                    rows.append((lineno, tc.token, self._shown(tc)))

        if not rows:
            out.print("No spelling errors found.")
            return 0

        table = Table(box=box.SIMPLE_HEAD, title="Spelling report")
        table.add_column("line", justify="right", style="cyan")
        table.add_column("word", style="red")
        table.add_column("suggestions", style="green")
        for lineno, token, cands in rows:
            sugg = ", ".join(f"{w} ({d})" for w, d in cands) or "-"
            table.add_row(str(lineno), Text(token), Text(sugg))
        out.print(table)
        return len(rows)

    def show_stats(self) -> None:
        table = Table(box=box.SIMPLE, title="Dictionary structures")
        table.add_column("stat")
        table.add_column("value", justify="right")
        for k, v in self.checker.stats().items():
            table.add_row(k, str(v))
        self.ui.print(table)


def write_lines(lines: Iterable[str], out: TextIO) -> None:
    for line in lines:
        out.write(line + "\n")
    out.flush()


# COMMAND LINE -----------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="intelligent-spellchecker",
        description="Check text against a dictionary and suggest corrections.",
    )
    p.add_argument("-f", "--file", help="path to the text to check (default: piped stdin)")
    p.add_argument("-d", "--dictionary", help="word list, one word per line")
    p.add_argument("-c", "--config", help="JSON config file")
    p.add_argument("-o", "--output", help="write corrected text here instead of stdout")
    p.add_argument("--report", action="store_true", help="only list misspellings, no prompts")
    p.add_argument("--max-radius", type=int, help="largest edit distance to search")
    p.add_argument("--fp-rate", type=float, help="bloom filter false-positive rate")
    p.add_argument("--max-suggestions", type=int, help="suggestions shown per word (0 = all)")
    p.add_argument("--tie-break", choices=["discovery", "alphabetic"])
    p.add_argument("--serial-build", action="store_true", help="build filter and tree on one thread")
    p.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    p.add_argument("--stats", action="store_true", help="print structure statistics after build")
    p.add_argument("--show-config", action="store_true", help="print effective config and exit")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _load_config(args: argparse.Namespace) -> Config:
    return Config(
        args.config,
        dictionary_path=args.dictionary,
        max_radius=args.max_radius,
        fp_rate=args.fp_rate,
        max_suggestions=args.max_suggestions,
        tie_break=args.tie_break,
        parallel_build=False if args.serial_build else None,
        log_level=args.log_level,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = _load_config(args)
        Log.setup(cfg["log_level"], cfg["log_path"] or None)

        if args.show_config:
            table = Table(box=box.SIMPLE, title="config")
            table.add_column("option")
            table.add_column("value")
            for k, v in cfg.items():
                table.add_row(k, str(v))
            Console().print(table)
            return 0

        interactive = not args.report and not stdin_is_piped()
        lines = list(read_lines(args.file))

        dictionary = load_dictionary(cfg["dictionary_path"], lowercase=cfg["lowercase"])
        checker = SpellChecker.from_words(dictionary.words, cfg)
        cli = CLI(checker, max_suggestions=cfg["max_suggestions"])
        if args.stats:
            cli.show_stats()

        if not interactive:
            # report goes to stderr, the text passes through unchanged
            cli.report(lines, console)

        def emit(out: TextIO) -> None:
            if interactive:
                cli.correct(lines, out)
            else:
                write_lines(lines, out)

        if args.output:
            with open(args.output, "w", encoding="utf-8") as out:
                emit(out)
        else:
            emit(sys.stdout)
        logger.info("%d correction(s) applied", cli.corrections)
        return 0
    except (ConfigError, DictionaryError, InputError, OSError) as e:
        console.print(f"[bold red]error:[/bold red] {escape(str(e))}", highlight=False)
        return 1
    except (EOFError, KeyboardInterrupt):
        console.print("\n[yellow]aborted.[/yellow]")
        return 130
