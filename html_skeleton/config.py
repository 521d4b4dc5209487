import os

from html_skeleton.adapters import DEFAULT_PARSER, PARSERS

PARSER_ENV_VAR = 'HTML_SKELETON_PARSER'


def get_default_parser():
    """Parser used when --parser is not given on the command line."""
    raw = (os.environ.get(PARSER_ENV_VAR) or '').strip()
    if not raw:
        return DEFAULT_PARSER
    if raw not in PARSERS:
        raise ValueError(f"{PARSER_ENV_VAR}={raw!r} is not one of: {', '.join(PARSERS)}")
    return raw
