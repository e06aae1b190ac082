from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import httpx

from sbg_api.client import ApiRequest, SBGError
from sbg_api.client.request import SUPPORTED_METHODS
from sbg_api.config.settings import get_settings
from sbg_api.observability.logging import DEFAULT_FORMAT, configure_logging


def _parse_query_pair(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{raw}'")
    return key, value


def _parse_body(raw: str) -> dict[str, Any]:
    try:
        body = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise argparse.ArgumentTypeError(f"body is not valid JSON: {exc}") from exc
    if not isinstance(body, dict):
        raise argparse.ArgumentTypeError("body must be a JSON object")
    return body


def _log_handlers(log_file: Path | None) -> list[logging.Handler]:
    if log_file is None:
        return []
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    return [handler]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sbg-request",
        description="Send a single request to the Seven Bridges Genomics API and print the JSON result",
    )
    parser.add_argument(
        "method",
        type=str.upper,
        choices=SUPPORTED_METHODS,
        help="HTTP method",
    )
    parser.add_argument("path", help="Resource path, e.g. projects or files/<id>")
    parser.add_argument(
        "--token",
        default=None,
        help="Auth token (default: SBG_AUTH_TOKEN)",
    )
    parser.add_argument(
        "--api-version",
        default=None,
        help="API version segment (default: SBG_API_VERSION or 1.1)",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="API base URL (default: SBG_BASE_URL)",
    )
    parser.add_argument(
        "--query",
        action="append",
        type=_parse_query_pair,
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter; may be repeated",
    )
    parser.add_argument(
        "--body",
        type=_parse_body,
        default=None,
        help="JSON object sent as the request body (POST/PUT)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: SBG_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log output to this file",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = get_settings()
        configure_logging(args.log_level or settings.log_level, extra_handlers=_log_handlers(args.log_file))
        request = ApiRequest(
            args.token,
            args.path,
            args.method,
            dict(args.query) if args.query else None,
            args.body,
            base_url=args.base_url,
            version=args.api_version,
        )
    except ValueError as exc:
        print(f"Invalid request: {exc}", file=sys.stderr)
        return 1

    with request:
        try:
            result = request.execute()
        except (SBGError, httpx.HTTPError) as exc:
            print(str(exc), file=sys.stderr)
            return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
