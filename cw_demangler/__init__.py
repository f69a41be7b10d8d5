"""
Python package which implements a demangler for Metrowerks CodeWarrior C++ symbols.
"""

from cw_demangler.component import Component
from cw_demangler.demangler import (
    DEFAULT_MAX_DEPTH,
    CWDemangler,
    DemangleError,
    demangle,
    demangle_type,
    parse,
)
from cw_demangler.display import DEGENERATE_MARKER, display_name, is_degenerate
from cw_demangler.signature import Signature

__all__ = [
    "parse",
    "demangle",
    "demangle_type",
    "display_name",
    "is_degenerate",
    "CWDemangler",
    "Component",
    "DemangleError",
    "Signature",
    "DEFAULT_MAX_DEPTH",
    "DEGENERATE_MARKER",
]
