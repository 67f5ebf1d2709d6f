"""The ``perch`` command.

Installed as a console script (``perch = "perch.cli:main"``) with two
subcommands::

    perch run myapp:app --port 3000
    perch routes myapp:app
"""

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="perch",
        description="perch: a minimal HTTP request router for ASGI.",
    )
    commands = parser.add_subparsers(dest="command")

    run = commands.add_parser("run", help="Serve an app with the development server")
    run.add_argument("app", help="Import string, e.g. myapp:app")
    run.add_argument("--host", help="Bind address (default: AppConfig.host)")
    run.add_argument("--port", type=int, help="Bind port (default: AppConfig.port)")
    run.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes (always on with AppConfig(debug=True))",
    )

    routes = commands.add_parser("routes", help="Print the route table in match order")
    routes.add_argument("app", help="Import string, e.g. myapp:app")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse *argv* (default ``sys.argv[1:]``) and run the chosen subcommand."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    match args.command:
        case "run":
            from perch.cli._run import run_server

            run_server(args)
        case "routes":
            from perch.cli._routes import run_routes

            run_routes(args)
        case _:
            parser.print_help()
            sys.exit(0)
