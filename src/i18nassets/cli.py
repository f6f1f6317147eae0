"""Command line interface for compiling i18n assets.

Compiles ``.i18n`` assets against a directory of properties bundles and
writes the generated JavaScript to stdout or an output directory.

Python 3.13+.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from i18nassets.config import ProcessorConfig
from i18nassets.constants import (
    DEFAULT_BUNDLE_BASENAME,
    DEFAULT_BUNDLE_DIR,
    DEFAULT_BUNDLE_EXTENSION,
    DEFAULT_ENCODING,
)
from i18nassets.diagnostics import I18nError, UnresolvedMessagesError
from i18nassets.runtime.processor import I18nProcessor, ProcessResult

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

_EPILOG = """
Examples:
  # Compile one asset, print JavaScript:
  i18nassets js/messages_de.i18n --bundle-dir grails-app/i18n

  # Compile several assets into build/js, failing on missing codes:
  i18nassets js/*.i18n --bundle-dir grails-app/i18n -o build/js --strict

  # Machine-readable summary of unresolved codes:
  i18nassets js/*.i18n --bundle-dir grails-app/i18n -o build/js --json
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="i18nassets",
        description="Compile .i18n assets into JavaScript message lookup tables.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_EPILOG,
    )
    parser.add_argument("assets", nargs="+", type=Path, help="i18n asset files to compile")
    parser.add_argument(
        "--bundle-dir",
        default=DEFAULT_BUNDLE_DIR,
        help=f"Directory of properties bundles (default: {DEFAULT_BUNDLE_DIR})",
    )
    parser.add_argument("--basename", default=DEFAULT_BUNDLE_BASENAME, help="Bundle file stem")
    parser.add_argument(
        "--extension", default=DEFAULT_BUNDLE_EXTENSION, help="Bundle file extension"
    )
    parser.add_argument(
        "--encoding", default=DEFAULT_ENCODING, help="Encoding of bundles and assets"
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        help="Write <asset stem>.js files here instead of printing to stdout",
    )
    parser.add_argument(
        "--strict", action="store_true", help="Fail if any message code is missing"
    )
    parser.add_argument(
        "--no-parent-merge",
        action="store_true",
        help="Only read the exact locale bundle (no de_AT -> de -> base chain)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a machine-readable summary instead of the JavaScript",
    )
    parser.add_argument("--verbose", "-v", action="count", default=0, help="More logging")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _summary(asset: Path, result: ProcessResult, output_path: Path | None) -> dict[str, object]:
    return {
        "asset": str(asset),
        "locale": result.locale,
        "codes": len(result.catalog),
        "unresolved": list(result.unresolved_codes),
        "bundles": [
            {"locale": load.locale, "status": str(load.status), "path": load.source_path}
            for load in result.load_results
        ],
        "output": str(output_path) if output_path is not None else None,
    }


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        0 on success, 1 if any asset failed
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = ProcessorConfig(
            bundle_dir=args.bundle_dir,
            bundle_basename=args.basename,
            bundle_extension=args.extension,
            encoding=args.encoding,
            merge_parent_bundles=not args.no_parent_merge,
            strict=args.strict,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    processor = I18nProcessor(config=config)
    summaries: list[dict[str, object]] = []
    written: dict[Path, Path] = {}
    exit_code = 0

    for asset in args.assets:
        output_path: Path | None = None
        try:
            if args.output_dir is not None:
                output_path = args.output_dir / f"{asset.stem}.js"
                if output_path in written:
                    msg = f"output {output_path} already written for {written[output_path]}"
                    raise ValueError(msg)
            content = asset.read_text(encoding=config.encoding)
            result = processor.process_with_result(content, str(asset))
            if output_path is not None:
                output_path.parent.mkdir(parents=True, exist_ok=True)
                output_path.write_text(result.output, encoding="utf-8")
                written[output_path] = asset
                logger.info("Wrote %s", output_path)
        except UnresolvedMessagesError as e:
            print(str(e), file=sys.stderr)
            summaries.append({"asset": str(asset), "error": "unresolved", "codes": list(e.codes)})
            exit_code = 1
            continue
        except (I18nError, OSError, ValueError) as e:
            print(f"error: {asset}: {e}", file=sys.stderr)
            summaries.append({"asset": str(asset), "error": str(e)})
            exit_code = 1
            continue

        if output_path is None and not args.json:
            sys.stdout.write(result.output)

        summaries.append(_summary(asset, result, output_path))

    if args.json:
        print(json.dumps(summaries, indent=2))

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
