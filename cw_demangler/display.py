"""
Helpers for showing demangled names in symbol tables and tab separated reports.
"""

from typing import Optional

from cw_demangler.demangler import CWDemangler

# Bare scope with no base name, as produced for anonymous and static initializer symbols.
DEGENERATE_MARKER = "int::"

MAX_SYMBOL_WIDTH = 97
ELLIPSIS = "..."


def is_degenerate(demangled: str) -> bool:
    """
    Determine if a demangled name carries nothing useful to show.

    This is the case for anonymous and static initializer symbols, which have no base
    name, so they either decode to nothing or to a bare scope such as `int::`.
    """
    return demangled == DEGENERATE_MARKER or not demangled or demangled.endswith("::")


def sanitize(text: str) -> str:
    """
    Remove control characters (NUL, tabs, newlines, ...) which break tabular output.
    """
    return "".join(char for char in text if ord(char) >= 0x20)


def truncate(text: str, width: int = MAX_SYMBOL_WIDTH) -> str:
    """
    Shorten `text` to at most `width` characters, marking the cut with `...`.
    """
    if len(text) <= width:
        return text
    return text[: max(width - len(ELLIPSIS), 0)] + ELLIPSIS


def display_name(
    symbol: str, width: Optional[int] = None, demangler: Optional[CWDemangler] = None
) -> str:
    """
    Demangle `symbol` for display, falling back to the raw symbol when the result is
    degenerate.
    """
    demangled = (demangler or CWDemangler()).demangle(symbol)
    if is_degenerate(demangled):
        demangled = symbol

    demangled = sanitize(demangled)
    if width is not None:
        demangled = truncate(demangled, width)
    return demangled
