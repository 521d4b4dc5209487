"""
Reads HTML, strips it to its skeleton and writes the result.

The pipeline is: parse -> strip_and_clean -> serialize -> normalize_whitespace.
"""

import logging

from html_skeleton.adapters import DEFAULT_PARSER, parse_document, serialize
from html_skeleton.cleaner import strip_and_clean
from html_skeleton.whitespace import normalize_whitespace

logger = logging.getLogger(__name__)


def process_html(input_html, keep_whitespace=False, parser=DEFAULT_PARSER):
    """
    Strips scripts, styles and attributes from an HTML document.

    Args:
        input_html (str): The HTML to clean.
        keep_whitespace (bool): Skip whitespace normalization when True.
        parser (str): BeautifulSoup tree builder to parse with.

    Returns:
        str: The cleaned HTML. An empty document yields an empty string.
    """
    soup = parse_document(input_html, parser=parser)
    strip_and_clean(soup.contents)

    result = serialize(soup)
    result = normalize_whitespace(result, keep_whitespace=keep_whitespace)

    report_reduction(input_html, result)
    return result


def report_reduction(input_html, output_html):
    input_size = len(input_html.encode('utf-8'))
    output_size = len(output_html.encode('utf-8'))
    logger.debug("Original size: %.2f KB", input_size / 1024)
    logger.debug("Cleaned size:  %.2f KB", output_size / 1024)
    if input_size > 0:
        reduction = 100 - (output_size / input_size * 100)
        logger.debug("Size reduction: %.2f%%", reduction)


def read_input(input_path, stdin):
    """Reads the whole input, from a file when a path is given, else from stdin."""
    if input_path:
        logger.debug("Reading from '%s'", input_path)
        with open(input_path, 'r', encoding='utf-8', errors='replace') as f:
            return f.read()

    logger.debug("Reading from stdin")
    return stdin.read()


def write_output(output_html, output_path, stdout):
    """Writes the result to a file when a path is given, else to stdout."""
    if output_path:
        logger.debug("Writing cleaned HTML to '%s'", output_path)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(output_html)
        return

    stdout.write(output_html)
    stdout.flush()
