"""
Command-line interface for the CSS URL rewriter.

Copies stylesheets to a new location, translating every relative ``url(...)``
so it keeps pointing at the same resource.
"""

import argparse
import sys
from pathlib import Path

try:
    from tqdm import tqdm as _tqdm
    _TQDM_AVAILABLE = True
except ImportError:
    _TQDM_AVAILABLE = False

from .config import QUOTE_CHOICES
from .errors import CSSURLRewriteError
from .logging_setup import log, setup_logging
from .utils import content_hash, relocate_css


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="css-url-rewrite",
        description="Move CSS files and rewrite their relative url() "
                    "references so they still resolve.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "data:, http(s):// and root-relative (/...) URLs are left as-is.\n"
            "When several SRC files are given, --dest must be a directory."
        ),
    )
    parser.add_argument(
        "src", nargs="+",
        help="Stylesheet(s) to relocate",
    )
    parser.add_argument(
        "--dest", required=True,
        help="Destination file, or directory for several sources",
    )
    parser.add_argument(
        "--quotes", choices=sorted(QUOTE_CHOICES), default="none",
        help="Quote rewritten URLs (default: none)",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--quiet", action="store_true",
        help="Only log warnings and errors",
    )
    return parser.parse_args(argv)


def _destinations(sources: list[Path], dest: Path) -> list[tuple[Path, Path]]:
    if len(sources) > 1 or dest.is_dir():
        return [(src, dest / src.name) for src in sources]
    return [(sources[0], dest)]


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(debug=args.debug, quiet=args.quiet)

    quote_style = QUOTE_CHOICES[args.quotes]
    pairs = _destinations([Path(s) for s in args.src], Path(args.dest))

    if len(pairs) > 1 and _TQDM_AVAILABLE:
        pairs_iter = _tqdm(pairs, desc="Rewriting", unit="file", dynamic_ncols=True)
    else:
        pairs_iter = pairs

    failed = 0
    for src, dest in pairs_iter:
        try:
            before = content_hash(src.read_bytes())
            relocate_css(src, dest, quote_style=quote_style)
        except (OSError, UnicodeError, CSSURLRewriteError) as exc:
            failed += 1
            log.error("[ERR] %s: %s", src, exc)
            continue
        if content_hash(dest.read_bytes()) == before:
            log.info("[SAME] %s → %s", src, dest)
        else:
            log.info("[SAVE] %s → %s", src, dest)

    if failed:
        log.error("%d of %d file(s) failed", failed, len(pairs))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
