#
# Dimscale Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any, *, max_repr: int = 120) -> str:
    """Format type information of an object or a type for exception messages.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(float)
        '<type: float>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    try:
        type_name = target_type.__name__
    except AttributeError:
        type_name = str(target_type)

    return _fmt_format_pair("type", _fmt_truncate(type_name, max_repr))


def fmt_value(x: Any, *, max_repr: int = 120) -> str:
    """
    Format a single value as a type–value pair for exception messages.

    Broken __repr__ methods are handled gracefully, long reprs are truncated and '>' is
    escaped so the closing angle bracket stays unambiguous.

    Examples:
        >>> fmt_value(0)
        '<int: 0>'
        >>> fmt_value("mm")
        "<str: 'mm'>"
    """
    t = type(x).__name__
    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"

    base_repr = base_repr.replace(">", "\\>")
    return _fmt_format_pair(t, _fmt_truncate(base_repr, max_repr))


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(s: str, max_len: int, ellipsis: str = "...") -> str:
    """
    Truncate s to at most max_len visible characters before appending the ellipsis.

    Quoted reprs keep their quotes, the ellipsis goes outside the closing quote.
    """
    if max_len <= 0:
        return ""
    if len(s) <= max_len:
        return s

    if len(s) >= 2 and s[0] in ("'", '"') and s[-1] == s[0]:
        inner = s[1:1 + max(1, max_len - 4)]
        return f"{s[0]}{inner}{s[0]}{ellipsis}"

    return s[:max(1, max_len)] + ellipsis


def _fmt_format_pair(type_name: str, value_repr: str) -> str:
    return f"<{type_name}: {value_repr}>"
