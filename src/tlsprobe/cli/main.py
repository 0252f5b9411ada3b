# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""tlsprobe CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from ..config import DEFAULT_URL, ProbeSettings, load_probe_settings
from ..errors import TlsProbeError, TransportError
from ..http import create_default_connection_client, parse_target
from ..log import setup_logging
from ..models import ProfileOutcome, ProfileRequest
from ..profiling.report import format_summary
from ..runtime import TlsProbe

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch a URL over raw HTTPS/1.0, or profile its latency with concurrent requests")
    parser.add_argument("--url", default=DEFAULT_URL, help="The URL to be tested")
    parser.add_argument("--profile", type=int, default=1, help="Number of requests to be made")
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Cap on concurrent connections while profiling (default: one per request)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of the plain-text body or report",
    )
    return parser


def _print_json(data: dict[str, Any] | Any) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _print_outcome(outcome: ProfileOutcome) -> None:
    if outcome.summary is not None:
        print(format_summary(outcome.summary))
    else:
        print(outcome.body or "")


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    settings: ProbeSettings = load_probe_settings()

    try:
        request = ProfileRequest(target=parse_target(args.url), count=args.profile, max_workers=args.workers)
        with TlsProbe(client=create_default_connection_client(settings), settings=settings) as probe:
            outcome = probe.execute(request)
    except TlsProbeError as exc:
        if isinstance(exc, TransportError):
            logger.warning("%s (%s)", exc.reason, exc.category.value)
        print(exc)
        return exc.exit_code

    if args.json:
        _print_json(outcome)
    else:
        _print_outcome(outcome)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
