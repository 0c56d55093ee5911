"""CLI for PassGauge — generate passwords and analyze password strength."""

import argparse
import logging
import sys

from rich import print
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .charsets import CharacterClass
from .config import load_config, policy_from_config
from .evaluator import RULE_NAMES, analyze
from .generator import GenerationPolicy, InvalidPolicy, generate
from .history import PasswordHistory, truncate_for_display
from .score import StrengthTier

EXIT_INVALID_POLICY = 2

TIER_STYLES = {
    StrengthTier.WEAK: "red",
    StrengthTier.MEDIUM: "yellow",
    StrengthTier.STRONG: "green",
    StrengthTier.VERY_STRONG: "bold green",
}

RULE_LABELS = {
    "length": "At least 8 characters",
    "uppercase": "Uppercase letter",
    "lowercase": "Lowercase letter",
    "number": "Number",
    "special": "Special character",
    "common": "Not a common password",
}

def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_time=False, show_path=False)],
    )

def _policy_from_args(args, cfg) -> GenerationPolicy:
    base = policy_from_config(cfg)
    classes = set(base.classes)
    for disabled, cc in (
        (args.no_upper, CharacterClass.UPPERCASE),
        (args.no_lower, CharacterClass.LOWERCASE),
        (args.no_digits, CharacterClass.DIGIT),
        (args.no_symbols, CharacterClass.SYMBOL),
    ):
        if disabled:
            classes.discard(cc)
    return GenerationPolicy.of(
        length=args.length if args.length is not None else base.length,
        classes=classes,
        exclude_similar=args.exclude_similar or base.exclude_similar,
    )

def cmd_generate(args) -> int:
    cfg = load_config()
    policy = _policy_from_args(args, cfg)
    history = PasswordHistory(int(cfg.get("history_size", 5)))
    for i in range(args.copies):
        try:
            pw = generate(policy)
        except InvalidPolicy as e:
            print(f"[red]Cannot generate password: {e}[/red]")
            return EXIT_INVALID_POLICY
        history.add(pw)
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")
    if args.history:
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("#", width=4)
        table.add_column("Recent passwords")
        for i, pw in enumerate(history):
            table.add_row(str(i + 1), escape(truncate_for_display(pw)))
        print(table)
    return 0

def cmd_analyze(args) -> int:
    report = analyze(args.password)
    style = TIER_STYLES[report.tier]
    header = f"[{style}]{report.label}[/{style}] — {report.score}/100"
    checklist = "\n".join(
        f"{'[green]✓[/green]' if report.rules_passed[name] else '[red]✗[/red]'} {RULE_LABELS[name]}"
        for name in RULE_NAMES
    )
    print(Panel(checklist, title=header))
    print("[bold]Suggestions:[/bold]")
    for s in report.suggestions:
        print(f" • {s}")
    return 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passgauge")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=None, help="Password length (default from settings)")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--exclude-similar", action="store_true", help="Leave out look-alike characters (iIl1oO0)")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.add_argument("--history", action="store_true", help="Show the recent-passwords table")
    gen.set_defaults(func=cmd_generate)

    an = sub.add_parser("analyze", aliases=["score"], help="Analyze a password and show suggestions")
    an.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    an.set_defaults(func=cmd_analyze)
    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    return args.func(args)

if __name__ == "__main__":
    sys.exit(main())
