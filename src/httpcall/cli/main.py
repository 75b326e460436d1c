# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpcall CLI."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from ..config import load_http_settings
from ..errors import HttpIOError, InvalidArgumentError, error_category_to_reason
from ..http import HttpResponse, ResponsePolicy, SharedClientFactory, send_request
from ..log import setup_logging


def _pair(separator: str):
    def parse(raw: str) -> tuple[str, str]:
        key, sep, value = raw.partition(separator)
        if not sep or not key.strip():
            raise argparse.ArgumentTypeError(f"expected NAME{separator}VALUE, got {raw!r}")
        return key.strip(), value.strip() if separator == ":" else value

    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send a single HTTP request and print the response")
    parser.add_argument("method", help="HTTP method: GET, POST, PUT or DELETE")
    parser.add_argument("url", help="Target URL (query parameters are appended)")
    parser.add_argument(
        "-H",
        "--header",
        dest="headers",
        action="append",
        type=_pair(":"),
        default=[],
        metavar="NAME:VALUE",
        help="Request header (repeatable, last one wins)",
    )
    parser.add_argument(
        "-p",
        "--param",
        dest="params",
        action="append",
        type=_pair("="),
        default=None,
        metavar="KEY=VALUE",
        help="Query parameter (repeatable)",
    )
    parser.add_argument("-d", "--data", default=None, help="Request body (UTF-8)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Print only the body and fail on non-2xx responses",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of a human-friendly summary",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (defaults to HTTPCALL_LOG_LEVEL)")
    return parser


def _print_json(data: dict[str, Any] | Any) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pretty_print(response: HttpResponse) -> None:
    print(f"HTTP {response.status_code} {response.reason}".rstrip())
    for name, value in response.headers:
        print(f"{name}: {value}")
    print()
    if response.body is None:
        print("<body unavailable>")
    else:
        print(response.body)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    policy = ResponsePolicy.STRICT if args.strict else ResponsePolicy.PASSTHROUGH
    params = dict(args.params) if args.params is not None else None

    with SharedClientFactory(load_http_settings()) as factory:
        try:
            result = send_request(
                factory.get_client(),
                args.method.upper(),
                args.url,
                headers=dict(args.headers),
                params=params,
                body=args.data,
                policy=policy,
            )
        except InvalidArgumentError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        except HttpIOError as exc:
            print(f"error: {error_category_to_reason(exc.category)}: {exc}", file=sys.stderr)
            return 1

    if isinstance(result, HttpResponse):
        if args.json:
            _print_json(result)
        else:
            _pretty_print(result)
    elif args.json:
        _print_json({"body": result})
    else:
        print(result)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
