import re

_RE_WS_RUN = re.compile(r'\s{2,}')
_RE_INTER_TAG_WS = re.compile(r'>\s+<')
_RE_NEWLINE = re.compile(r'\n')


def normalize_whitespace(html_content, keep_whitespace=False):
    """
    Removes redundant whitespace from serialized HTML.

    Works on the string only, so whitespace inside <pre> and friends is
    collapsed as well.

    Args:
        html_content (str): The serialized HTML.
        keep_whitespace (bool): Return the input untouched when True.

    Returns:
        str: The normalized HTML.
    """
    if keep_whitespace:
        return html_content

    # Runs of two or more whitespace characters become one space
    html_content = _RE_WS_RUN.sub(' ', html_content)
    # Whitespace between tags disappears entirely
    html_content = _RE_INTER_TAG_WS.sub('><', html_content)
    return _RE_NEWLINE.sub('', html_content)
