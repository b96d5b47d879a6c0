"""
Process-wide settings, resolved once at import.

``python -m toolcatalog.main`` takes ``--mode/--host/--port`` from the command
line. Any other importer (uvicorn, pytest, the seed script) gets the mode from
``APP_MODE`` and never sees our flags, so its own argv is left alone.
"""
import os
import sys
import argparse

from toolcatalog.core.config import get_settings

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = int(os.getenv("PORT", "3001"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tool Catalog API server")
    parser.add_argument(
        "--mode",
        choices=["dev", "prod"],
        default=os.getenv("APP_MODE", "dev"),
        help="dev: SQLite file at DATABASE_PATH; prod: PostgreSQL at DATABASE_URL",
    )
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help="defaults to $PORT, then 3001",
    )
    return parser


def launched_directly(argv0: str) -> bool:
    return argv0.endswith(os.path.join("toolcatalog", "main.py"))


if launched_directly(sys.argv[0]):
    args = build_parser().parse_args()
else:
    args = argparse.Namespace(
        mode=os.getenv("APP_MODE", "dev"), host=DEFAULT_HOST, port=DEFAULT_PORT
    )

settings = get_settings(args.mode)

__all__ = ["settings", "args"]
