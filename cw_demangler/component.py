"""
Module implementing the variant type for decoded fragments of a CodeWarrior type.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Optional


@dataclass(frozen=True)
class Component:
    """
    One decoded piece of a type expression: a modifier, a fundamental type, a named
    type, a function type or an array dimension.

    This is a closed variant type. Only `TYPE` and `FUNCTION` use `name`, only
    `FUNCTION` uses `params` and only `ARRAY` uses `length`.
    """

    class Kind(StrEnum):
        # Modifiers
        CONST = "const"
        POINTER = "*"
        REFERENCE = "&"
        UNSIGNED = "unsigned"
        # Fundamental types
        VOID = "void"
        BOOL = "bool"
        CHAR = "char"
        WIDE_CHAR = "wchar_t"
        SHORT = "short"
        INT = "int"
        LONG = "long"
        LONG_LONG = "long long"
        FLOAT = "float"
        DOUBLE = "double"
        # Compound types
        TYPE = "type"
        FUNCTION = "function"
        ARRAY = "array"

        def is_keyword(self) -> bool:
            """
            Determine if this kind renders as its own C++ spelling.
            """
            return self not in [
                Component.Kind.TYPE,
                Component.Kind.FUNCTION,
                Component.Kind.ARRAY,
            ]

    _MODIFIER_CODES: ClassVar[dict[str, Kind]] = {
        "C": Kind.CONST,
        "P": Kind.POINTER,
        "R": Kind.REFERENCE,
        "U": Kind.UNSIGNED,
    }
    _FUNDAMENTAL_CODES: ClassVar[dict[str, Kind]] = {
        "v": Kind.VOID,
        "b": Kind.BOOL,
        "c": Kind.CHAR,
        "w": Kind.WIDE_CHAR,
        "s": Kind.SHORT,
        "i": Kind.INT,
        "l": Kind.LONG,
        "x": Kind.LONG_LONG,
        "f": Kind.FLOAT,
        "d": Kind.DOUBLE,
    }

    kind: Kind
    name: str = ""
    params: str = ""
    length: int = 0

    def is_array(self) -> bool:
        return self.kind == Component.Kind.ARRAY

    def __str__(self) -> str:
        """
        Text of this component on its own. Functions and arrays need their neighbours
        to render properly; see `cw_demangler.render`.
        """
        if self.kind.is_keyword():
            return str(self.kind)
        if self.kind == Component.Kind.ARRAY:
            return f"[{self.length}]"
        return self.name

    @staticmethod
    def modifier(code: str) -> Optional["Component"]:
        """
        Construct a modifier from its type code (`C`, `P`, `R`, `U`), or return `None`
        if the code is not a modifier.
        """
        kind = Component._MODIFIER_CODES.get(code)
        return Component(kind=kind) if kind else None

    @staticmethod
    def fundamental(code: str) -> Optional["Component"]:
        """
        Construct a fundamental type from its type code, or return `None` if the code
        is not a known fundamental type.
        """
        kind = Component._FUNDAMENTAL_CODES.get(code)
        return Component(kind=kind) if kind else None

    @staticmethod
    def named(name: str) -> "Component":
        return Component(kind=Component.Kind.TYPE, name=name)

    @staticmethod
    def function(params: str, return_name: str) -> "Component":
        return Component(kind=Component.Kind.FUNCTION, name=return_name, params=params)

    @staticmethod
    def array(length: int) -> "Component":
        return Component(kind=Component.Kind.ARRAY, length=length)
