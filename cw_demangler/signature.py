"""
Demangled top-level symbol.
"""

from dataclasses import dataclass


@dataclass
class Signature:
    """
    Represents a demangled CodeWarrior symbol.

    CodeWarrior leaves the return type out of top-level function symbols, so only the
    owning scope, the name, the parameter list and the `const` member qualifier are
    known. `params` is empty both for data symbols and for unparsed parameter lists.
    """

    name: str
    scope: str = ""
    params: str = ""
    is_const: bool = False

    def qualified_name(self) -> str:
        if self.scope:
            return f"{self.scope}::{self.name}"
        return self.name

    def __str__(self) -> str:
        params_str = f"({self.params})" if self.params else ""
        const_str = " const" if self.is_const else ""
        return f"{self.qualified_name()}{params_str}{const_str}"
