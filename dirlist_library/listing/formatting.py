"""Size and timestamp formatting shared by the renderers."""

from email.utils import formatdate

KILOBYTE = 1024


def render_size(size: int) -> str:
    """Render a byte count as kilobytes with one decimal digit.

    The tenths digit is ``(size % 1024) // 103``, so 1536 bytes renders as
    "1.4 kb". Any non-zero size renders as at least "0.1 kb".

    Example:
        >>> render_size(1024)
        '1.0 kb'
        >>> render_size(1)
        '0.1 kb'
    """
    left = size // KILOBYTE
    right = (size % KILOBYTE) // 103
    if left == 0 and right == 0 and size > 0:
        right = 1
    return f"{left}.{right} kb"


def render_timestamp(millis: int) -> str:
    """Render epoch milliseconds as an RFC 1123 date in GMT.

    Example:
        >>> render_timestamp(0)
        'Thu, 01 Jan 1970 00:00:00 GMT'
    """
    return formatdate(millis / 1000, usegmt=True)
