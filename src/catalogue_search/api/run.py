"""
Launch helper for the FastAPI backend.

Provides the ``main()`` entry point used by the ``catalogue-search-api``
console script defined in ``pyproject.toml``.

Usage::

    catalogue-search-api                              # default: 0.0.0.0:8000
    catalogue-search-api --dataset exports/ids.json   # explicit dataset
    catalogue-search-api --port 8080 --reload         # development
    uvicorn catalogue_search.api.app:app              # direct uvicorn alternative
"""

import argparse
import os

import uvicorn

from catalogue_search.config import get_settings, reload_settings


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Catalogue search API server")
    parser.add_argument(
        "--host",
        default=settings.api.host,
        help=f"Bind host (default: {settings.api.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.api.port,
        help=f"Port number (default: {settings.api.port})",
    )
    parser.add_argument(
        "--dataset",
        default=None,
        help=f"Dataset JSON file (default: {settings.dataset.path})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    return parser


def main() -> None:
    """Launch the FastAPI app via uvicorn."""
    args = build_parser().parse_args()

    if args.dataset:
        # Exported so reload workers, which re-read settings, see it too
        os.environ["DATASET_PATH"] = args.dataset
        reload_settings()

    uvicorn.run(
        "catalogue_search.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
