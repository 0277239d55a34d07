"""Command-line interface for charlockholmes."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import charlockholmes
from charlockholmes.config import DetectionOptions, initialize
from charlockholmes.detector import Detector
from charlockholmes.pipeline import EncodingMatch


def _format(label: str, match: EncodingMatch | None, minimal: bool) -> str:
    if match is None:
        return "None" if minimal else f"{label}: no encoding detected"
    if minimal:
        return str(match.name) if match.name is not None else "binary"
    if match.name is None:
        return f"{label}: binary with confidence {match.confidence}"
    line = f"{label}: {match.name} with confidence {match.confidence}"
    if match.language:
        line += f" ({match.language})"
    return line


def _report(
    label: str,
    data: bytes,
    detector: Detector,
    options: DetectionOptions,
    args: argparse.Namespace,
) -> None:
    if args.all:
        matches = detector.detect_all(data, options)
        if not matches:
            print(_format(label, None, args.minimal))
        for match in matches:
            print(_format(label, match, args.minimal))
    else:
        print(_format(label, detector.detect(data, options), args.minimal))


def main(argv: list[str] | None = None) -> None:
    """Run the ``charlockholmes`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(description="Detect character encoding of files.")
    parser.add_argument("files", nargs="*", help="Files to detect encoding of")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the encoding name"
    )
    parser.add_argument(
        "-a", "--all", action="store_true", help="List every candidate encoding"
    )
    parser.add_argument("--hint", default=None, help="Expected encoding name")
    parser.add_argument(
        "--min-confidence",
        type=int,
        default=None,
        help="Minimum confidence (0-100) for a candidate to be reported",
    )
    parser.add_argument(
        "--strip-tags",
        action="store_true",
        help="Ignore HTML/XML markup when analysing",
    )
    parser.add_argument(
        "--list-encodings",
        action="store_true",
        help="Print the supported encodings and exit",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log detection details"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"charlockholmes {charlockholmes.__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s: %(levelname)s: %(message)s"
        )

    detector = Detector(initialize())

    if args.list_encodings:
        for name in detector.supported_encodings():
            print(name)
        return

    try:
        options = DetectionOptions(
            hint=args.hint,
            min_confidence=args.min_confidence,
            strip_tags=args.strip_tags,
        )
    except charlockholmes.InvalidArgumentError as e:
        parser.error(str(e))

    if args.files:
        for filepath in args.files:
            try:
                with Path(filepath).open("rb") as f:
                    data = f.read(detector.config.max_bytes)
            except OSError as e:
                print(f"charlockholmes: {filepath}: {e}", file=sys.stderr)
                continue
            _report(filepath, data, detector, options, args)
    else:
        data = sys.stdin.buffer.read(detector.config.max_bytes)
        _report("stdin", data, detector, options, args)


if __name__ == "__main__":
    main()
