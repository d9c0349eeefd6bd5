# roster/cli/api.py
from roster.logging import get_logger

logger = get_logger(__file__)


def register_subcommands(subparsers):
    start = subparsers.add_parser("start", help="serve the people API with uvicorn")
    start.add_argument("--host", default="localhost")
    start.add_argument("--port", type=int, default=8000)


def dispatch(args):
    if args.subcommand != "start":
        raise ValueError(f"No handler for api subcommand: {args.subcommand}")

    import uvicorn
    from roster.api.main import app

    logger.info("serving people API on %s:%s", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port)
