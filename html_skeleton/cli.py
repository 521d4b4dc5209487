#!/usr/bin/env python3
"""
Command-line interface: strip an HTML document down to its skeleton.

Usage:
  html-skeleton page.html
  cat page.html | html-skeleton -o skeleton.html
  html-skeleton --keep-whitespace page.html
"""

import argparse
import contextlib
import io
import logging
import sys

from html_skeleton import __version__
from html_skeleton.adapters import PARSERS
from html_skeleton.config import get_default_parser
from html_skeleton.processor import process_html, read_input, write_output

PROG = 'html-skeleton'
DESCRIPTION = "Removes scripts, styles and all attributes from an HTML document."

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit with status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def build_parser():
    parser = _ArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        default=None,
        help="Input HTML file (if not specified, stdin will be used)."
    )
    parser.add_argument(
        "-k", "--keep-whitespace",
        action="store_true",
        help="Keep whitespace and newlines in HTML."
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output file (if not specified, stdout will be used)."
    )
    parser.add_argument(
        "--parser",
        default=None,
        choices=PARSERS,
        help="BeautifulSoup parser to use.\n(default: $HTML_SKELETON_PARSER or 'html.parser')"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress and size reduction to stderr."
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv=None, stdin=None, stdout=None, stderr=None, isatty=None):
    """
    Runs the tool and returns the process exit status.

    The streams and the terminal check can be injected; they default to
    the process's standard streams and ``stdin.isatty``. Help, version and
    usage-error messages go to the injected streams too.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    isatty = isatty if isatty is not None else stdin.isatty

    parser = build_parser()
    try:
        # argparse prints --help, --version and usage errors to sys.stdout/sys.stderr
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=stderr,
        force=True
    )

    # Nothing piped in and no file given: show help instead of blocking on a read
    if not args.input_file and isatty():
        parser.print_help(stdout)
        return 0

    try:
        parser_name = args.parser or get_default_parser()
        input_html = read_input(args.input_file, stdin)
        output_html = process_html(
            input_html,
            keep_whitespace=args.keep_whitespace,
            parser=parser_name
        )
        write_output(output_html, args.output, stdout)
    except Exception as e:
        logger.debug("Processing failed", exc_info=True)
        print(f"Error: {str(e) or 'Unknown error'}", file=stderr)
        return 1

    return 0


def run():
    # Undecodable bytes on stdin are replaced, the same as for input files
    stdin = io.TextIOWrapper(sys.stdin.buffer, encoding='utf-8', errors='replace')
    sys.exit(main(stdin=stdin))


if __name__ == "__main__":
    run()
