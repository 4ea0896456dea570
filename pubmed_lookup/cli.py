"""Command-line lookup of a single DOI or PMID."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable

from pydantic import ValidationError

from pubmed_lookup.api import PaperLookupClient
from pubmed_lookup.core.formatting import format_copy_payload
from pubmed_lookup.core.models import PaperRecord
from pubmed_lookup.core.session import render_text
from pubmed_lookup.core.settings import LookupSettings


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pubmed-lookup",
        description="Look up a paper by DOI or PMID via PubMed and Crossref",
    )
    parser.add_argument(
        "identifier",
        help="DOI (doi:10.x/y or 10.x/y) or PMID (digits, optionally pmid:/pm:/pubmed:)",
    )
    parser.add_argument(
        "--format",
        choices=("record", "copy", "json"),
        default="record",
        help="record: all fields; copy: the one-line clipboard entry; json: machine readable",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    parser.add_argument("--email", default=None, help="Contact email for NCBI and Crossref")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _format_json(record: PaperRecord) -> str:
    return json.dumps(record.to_dict(), indent=2, ensure_ascii=False)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides: dict[str, Any] = {}
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if args.email:
        overrides["contact_email"] = args.email
    try:
        settings = LookupSettings(**overrides)
    except ValidationError as exc:
        parser.error(str(exc))

    client = PaperLookupClient(settings)
    session = client.run(args.identifier)
    state = session.state

    if state.error or state.record is None:
        print(state.error or "No information found for the given input.", file=sys.stderr)
        return 1

    formatters: dict[str, Callable[[PaperRecord], str]] = {
        "record": lambda record: render_text(state),
        "copy": format_copy_payload,
        "json": _format_json,
    }
    print(formatters[args.format](state.record))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
