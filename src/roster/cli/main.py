# roster/cli/main.py
import argparse

from roster.cli import api, db

COMMANDS = {
    "db": (db, "Database operations"),
    "api": (api, "API server control"),
}


def main(argv=None):
    parser = argparse.ArgumentParser(prog="roster", description="roster person service CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, (module, help_text) in COMMANDS.items():
        sub = subparsers.add_parser(name, help=help_text)
        module.register_subcommands(sub.add_subparsers(dest="subcommand", required=True))

    args = parser.parse_args(argv)
    COMMANDS[args.command][0].dispatch(args)


if __name__ == "__main__":
    main()
