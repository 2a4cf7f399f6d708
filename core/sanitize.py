import nh3


def sanitize_html(value):
    """Strip scripts, event handlers and unsafe URLs from user-supplied HTML."""
    if not value:
        return value
    return nh3.clean(value)
