"""Command line interface for swarmresolver."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, TextIO

from swarmresolver import __version__
from swarmresolver.client import ClientFactory, ResolverClient
from swarmresolver.config import ResolverSettings
from swarmresolver.core.exceptions import ConfigurationError, SwarmResolverError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swarm-resolver",
        description="Resolve names to swarm content addresses",
    )
    parser.add_argument(
        "--resolver-options",
        action="append",
        metavar="[TLD:][CONTRACT-ADDR@]URL",
        help="Name service connection; may be given more than once.",
    )
    parser.add_argument(
        "--force-default",
        action="store_true",
        default=None,
        help="Route every name to the default resolver chain.",
    )
    parser.add_argument("--log-level", help="Logging level (default: INFO).")

    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser("resolve", help="Resolve names")
    resolve_parser.add_argument("names", nargs="+", help="The name(s) to resolve.")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", help="Bind address.")
    serve_parser.add_argument("--port", type=int, help="Bind port.")

    subparsers.add_parser("version", help="Print the version")

    return parser


def load_settings(args: argparse.Namespace) -> ResolverSettings:
    """Build settings from the environment, overridden by command line flags."""
    overrides: dict[str, Any] = {}
    if args.resolver_options:
        overrides["resolver_options"] = args.resolver_options
    if args.force_default:
        overrides["force_default"] = True
    if args.log_level:
        overrides["log_level"] = args.log_level
    for key in ("host", "port"):
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value
    return ResolverSettings(**overrides)


def run_resolve(
    settings: ResolverSettings,
    names: list[str],
    out: TextIO,
    client_factory: ClientFactory | None = None,
) -> int:
    failed = 0
    with ResolverClient(settings, client_factory=client_factory) as client:
        for name in names:
            try:
                address = client.resolve(name)
            except SwarmResolverError as e:
                logger.error(f"Failed to resolve {name!r}: {e}")
                failed += 1
                continue
            print(f"{name} {address}", file=out)
    return 1 if failed else 0


def run_serve(settings: ResolverSettings) -> int:
    import uvicorn

    from swarmresolver.api.app import create_app

    uvicorn.run(
        create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


def main(
    argv: list[str] | None = None,
    *,
    out: TextIO | None = None,
    client_factory: ClientFactory | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    out = out or sys.stdout

    if args.command == "version":
        print(__version__, file=out)
        return 0

    try:
        settings = load_settings(args)
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    except ValueError as e:
        # pydantic.ValidationError is a ValueError
        logger.error(f"Invalid settings: {e}")
        return 2

    try:
        if args.command == "serve":
            return run_serve(settings)
        return run_resolve(settings, args.names, out, client_factory)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2


def entrypoint() -> None:
    sys.exit(main())
