"""CLI for PassCheck — check a password, run an interactive field session, show the policy."""

import argparse
import logging
import sys

from rich import print
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import ConfigError, load_config, validate_policy
from .messages import describe_session, headline, missing_criteria
from .models import Criterion, ValidationSession
from .status import new_session, on_focus_lost, on_text_changed, reset

log = logging.getLogger(__name__)

COMMANDS_HELP = ":reset clears the criteria, :new starts over, :quit exits"


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(RichHandler(show_time=False, show_path=False, rich_tracebacks=True))


def render_session(session: ValidationSession) -> Table:
    table = Table(show_header=False, box=None)
    table.add_column(width=3)
    table.add_column()
    for line in describe_session(session):
        table.add_row(line["marker"], line["label"])
        if line["criterion"] is Criterion.MIN_LENGTH_NO_SPACE:
            table.add_row("", f"[dim]{headline(session.policy)}[/dim]")
    return table


def _print_verdict(session: ValidationSession, valid: bool) -> None:
    if valid:
        print("[bold green]Password accepted.[/bold green]")
        return
    print("[bold red]Password rejected.[/bold red]")
    for label in missing_criteria(session):
        print(f" • missing: {label}")


def _load_policy():
    return validate_policy(load_config())


def cmd_check(args) -> int:
    session = new_session(_load_policy())
    on_text_changed(session, args.password)
    valid = on_focus_lost(session)
    print(Panel(render_session(session), title="Password criteria"))
    _print_verdict(session, valid)
    return 0 if valid else 1


def cmd_interactive(args) -> int:
    policy = _load_policy()
    session = new_session(policy)
    print(f"[dim]Type a password and press Enter ({COMMANDS_HELP}).[/dim]")
    while True:
        try:
            line = input("password> ")
        except EOFError:
            break
        if line == ":quit":
            break
        if line == ":reset":
            reset(session)
            print(render_session(session))
            continue
        if line == ":new":
            session = new_session(policy)
            print("[yellow]New session.[/yellow]")
            continue

        on_text_changed(session, line)
        print(Panel(render_session(session), title="While typing"))
        valid = on_focus_lost(session)
        print(Panel(render_session(session), title="After leaving the field"))
        _print_verdict(session, valid)
    return 0


def cmd_config(args) -> int:
    policy = _load_policy()
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in policy.items():
        table.add_row(key, escape(str(value)))
    print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passcheck")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More log output (-vv for debug)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    chk = sub.add_parser("check", help="Check a password against the criteria")
    chk.add_argument("password", type=str, help="Password to check (wrap in quotes)")
    chk.set_defaults(func=cmd_check)

    it = sub.add_parser("interactive", help="Simulate typing into a password field")
    it.set_defaults(func=cmd_interactive)

    cfg = sub.add_parser("config", help="Show the effective password policy")
    cfg.set_defaults(func=cmd_config)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        return args.func(args)
    except ConfigError as e:
        log.debug("configuration rejected", exc_info=True)
        print(f"[red]Invalid configuration: {e}[/red]")
        return 2


if __name__ == "__main__":
    sys.exit(main())
