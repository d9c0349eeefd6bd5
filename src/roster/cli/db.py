"""``roster db``: create, inspect and migrate the person database."""

from pathlib import Path

from alembic import command
from alembic.config import Config
from rich.console import Console
from rich.table import Table

from roster.db import operations
from roster.logging import get_logger

logger = get_logger(__file__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def register_subcommands(subparsers):
    for name in ("init", "status"):
        sub = subparsers.add_parser(name, help=f"{name} the person database")
        sub.add_argument("--file", help="database file (default: ROSTER_DB_PATH)")

    for name, default in (("upgrade", "head"), ("downgrade", "-1")):
        sub = subparsers.add_parser(name, help=f"alembic {name}")
        sub.add_argument("revision", nargs="?", default=default)
        sub.add_argument("--database", help="database URL or file to migrate")


def dispatch(args, console: Console | None = None):
    if args.subcommand == "init":
        operations.initialize(file_path=args.file)
    elif args.subcommand == "status":
        render_summary(operations.summary(file_path=args.file), console or Console())
    elif args.subcommand in ("upgrade", "downgrade"):
        migrate = getattr(command, args.subcommand)
        logger.info("alembic %s %s", args.subcommand, args.revision)
        migrate(alembic_config(args.database), args.revision)
    else:
        raise ValueError(f"No handler for db subcommand: {args.subcommand}")


def render_summary(summary: dict[str, object], console: Console) -> None:
    table = Table(title="roster database", show_header=False)
    table.add_column(style="bold cyan")
    table.add_column()
    for key, value in summary.items():
        table.add_row(key.replace("_", " "), str(value))
    console.print(table)


def alembic_config(database: str | None = None) -> Config:
    """Alembic config for this checkout, optionally pointed at ``database``."""
    ini = PROJECT_ROOT / "alembic.ini"
    config = Config(str(ini)) if ini.exists() else Config()
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    database = (database or "").strip()
    if database:
        url = database if "://" in database else f"sqlite:///{Path(database).expanduser()}"
        config.set_main_option("sqlalchemy.url", url)
    return config
