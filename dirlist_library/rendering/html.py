"""HTML rendering of a Listing.

Produces a self-contained, Apache-style index page: embedded stylesheet,
a table of entries and a static server footer.
"""

from collections.abc import Callable
from html import escape as html_escape

from ..listing.formatting import render_size
from ..listing.formatting import render_timestamp
from ..models import Entry
from ..models import Listing
from ..version import __version__

DEFAULT_CSS = (
    "H1 {font-family:Tahoma,Arial,sans-serif;color:white;background-color:#525D76;font-size:22px;} "
    "H2 {font-family:Tahoma,Arial,sans-serif;color:white;background-color:#525D76;font-size:16px;} "
    "H3 {font-family:Tahoma,Arial,sans-serif;color:white;background-color:#525D76;font-size:14px;} "
    "BODY {font-family:Tahoma,Arial,sans-serif;color:black;background-color:white;} "
    "B {font-family:Tahoma,Arial,sans-serif;color:white;background-color:#525D76;} "
    "P {font-family:Tahoma,Arial,sans-serif;background:white;color:black;font-size:12px;}"
    "A {color : black;}"
    "A.name {color : black;}"
    ".line {height: 1px; background-color: #525D76; border: none;}"
)

SERVER_INFO = f"dirlist/{__version__}"

SHADE_COLOR = "#eeeeee"


def render_html(listing: Listing, title: str, *, server_info: str = SERVER_INFO, escape: bool = True) -> str:
    """Render a listing as an HTML page.

    Rows are written parent first (unshaded), then directories, then files.
    Directory and file rows alternate shaded and unshaded, starting shaded,
    with one toggle running across both groups.

    Args:
        listing: Listing to render
        title: Page title and heading, usually the directory name
        server_info: Footer text
        escape: HTML-escape names, URLs and title

    Returns:
        Complete HTML document
    """
    text = html_escape if escape else _verbatim
    parts: list[str] = []

    parts.append("<!DOCTYPE html>")
    parts.append("<html>")
    parts.append("<head>")
    parts.append(f"<title>{text(title)}</title>")
    parts.append(f'<style type="text/css"><!--{DEFAULT_CSS}--></style> ')
    parts.append("</head>")

    parts.append("<body>")
    parts.append(f"<h1>{text(title)}</h1>")
    parts.append('<HR size="1" noshade="noshade">')
    parts.append('<table width="100%" cellspacing="0" cellpadding="5" align="center">')

    parts.append("<tr>")
    parts.append('<td align="left"><font size="+1"><strong>Filename</strong></font></td>')
    parts.append('<td align="right"><font size="+1"><strong>Size</strong></font></td>')
    parts.append('<td align="right"><font size="+1"><strong>Last Modified</strong></font></td>')
    parts.append("</tr>")

    if listing.parent is not None:
        parts.append(_row(listing.parent, False, text))

    shade = True
    for entry in (*listing.directories, *listing.files):
        parts.append(_row(entry, shade, text))
        shade = not shade

    parts.append("</table>")
    parts.append('<HR size="1" noshade="noshade">')
    parts.append(f"<h3>{text(server_info)}</h3>")
    parts.append("</body>")
    parts.append("</html>")

    return "".join(parts)


def _verbatim(value: str) -> str:
    return value


def _row(entry: Entry, shade: bool, text: Callable[[str], str]) -> str:
    bgcolor = f' bgcolor="{SHADE_COLOR}"' if shade else ""
    return (
        f"<tr{bgcolor}>"
        f'<td align="left">&nbsp;&nbsp;<a href="{text(entry.url)}"><tt>{text(entry.name)}</tt></a></td>'
        f'<td align="right"><tt>{render_size(entry.size)}</tt></td>'
        f'<td align="right"><tt>{render_timestamp(entry.last_modified)}</tt></td>'
        "</tr>"
    )
