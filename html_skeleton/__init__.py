"""Strip an HTML document down to its structural skeleton."""

__version__ = "0.1.0"

from html_skeleton.processor import process_html

__all__ = ["process_html", "__version__"]
