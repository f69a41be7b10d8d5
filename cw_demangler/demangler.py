"""
Demangler for Metrowerks CodeWarrior C++ symbols.

CodeWarrior symbols look like `name__<scope><qualifier>F<params>`. Types are spelled
with single-letter codes (`i` for `int`, `P` for a pointer, ...), class names are
prefixed with their length (`4Hero`), and template arguments are kept inline inside
angle brackets (`8Vec<i,i>`).

Decoding is best effort. Nothing here raises on malformed input: unknown codes and
truncated symbols simply produce partial text. Each time the decoder has to fall back
like this it records why in `CWDemangler.fallbacks`, which `parse` uses to reject
symbols that did not decode cleanly.
"""

import logging
from typing import Optional

from cw_demangler.component import Component
from cw_demangler.cursor import DIGITS, SENTINEL, SEPARATOR, Cursor
from cw_demangler.render import render_components
from cw_demangler.signature import Signature

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64

# Characters which end a template argument. A number followed by one of these is a
# literal value instead of the length of a name.
_LITERAL_TERMINATORS = frozenset(",>")


class DemangleError(ValueError):
    """
    Raised by `parse` when a symbol could not be decoded without falling back.
    """

    def __init__(self, symbol: str, fallbacks: list[str]):
        self.symbol = symbol
        self.fallbacks = list(fallbacks)
        super().__init__(f"Unable to cleanly demangle {symbol!r}: {'; '.join(self.fallbacks)}")


class CWDemangler:
    """
    Demangler object.

    An instance can be reused for any number of symbols, but it keeps the fallbacks of
    the last call, so it should not be shared between threads.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth
        self._reset()

    def _reset(self):
        """
        Reset the per-symbol state.
        """
        self.fallbacks: list[str] = []
        self._depth: int = 0

    def demangle(self, symbol: str) -> str:
        """
        Demangle `symbol` as far as possible. Never raises.
        """
        self._reset()
        return str(self._demangle_symbol(Cursor(symbol)))

    def parse(self, symbol: str) -> Signature:
        """
        Demangle `symbol`, raising `DemangleError` if any part of it had to be skipped
        or guessed.
        """
        self._reset()
        sig = self._demangle_symbol(Cursor(symbol))
        if self.fallbacks:
            raise DemangleError(symbol, self.fallbacks)
        return sig

    def demangle_type(self, mangled_type: str) -> str:
        """
        Demangle a single mangled type, such as `PCc` or `Q23Foo3Bar`.
        """
        self._reset()
        src = Cursor(mangled_type)
        result = self._type_text(src)
        if not src.at_end():
            self._fallback(src, "trailing input after type")
        return result

    def _fallback(self, src: Cursor, reason: str):
        """
        Record a point where decoding could not follow the encoding.
        """
        message = f"{reason} at offset {src.position}"
        logger.debug("%s in %r", message, src.data)
        self.fallbacks.append(message)

    def _demangle_symbol(self, src: Cursor) -> Signature:
        """
        Demangle a full symbol: the base name, the optional owning scope, the `const`
        qualifier and the parameter list.
        """
        name = self._demangle_name(src)

        scope = ""
        if not src.at_end() and src.peek() != "F":
            scope = self._type_text(src)

        is_const = False
        if src.peek() == "C":
            src.read()
            is_const = True

        params = ""
        if src.peek() == "F":
            src.read()
            # Top-level parameter lists have no terminator and no return type; they
            # simply run until the end of the symbol.
            while not src.at_end():
                if params:
                    params += ", "
                params += self._type_text(src)

        if not src.at_end():
            self._fallback(src, "unparsed trailing input")

        return Signature(name=name, scope=scope, params=params, is_const=is_const)

    def _demangle_name(self, src: Cursor) -> str:
        """
        Demangle the base name, which runs up to the last `__` in the symbol.
        """
        output: list[str] = []
        end = src.find_last_separator()

        while src.position < end:
            char = src.read()
            if char == "<":
                self._demangle_template(src, output)
            else:
                output.append(char)

        if end < len(src):
            src.position += len(SEPARATOR)

        return "".join(output)

    def _type_text(self, src: Cursor) -> str:
        """
        Demangle one type into a new string.
        """
        output: list[str] = []
        self._demangle_type(src, output)
        return "".join(output)

    def _demangle_type(self, src: Cursor, output: list[str]):
        """
        Demangle one type and append it to `output`.
        """
        if self._depth >= self.max_depth:
            # Give up on the rest of the symbol rather than recursing further. Every
            # caller stops once the input is exhausted.
            self._fallback(src, "type nesting too deep")
            src.exhaust()
            return

        self._depth += 1
        try:
            char = src.peek()
            if char == "-" or char in DIGITS:
                self._demangle_number_or_name(src, output)
            else:
                self._demangle_components(src, output)
        finally:
            self._depth -= 1

    def _demangle_number_or_name(self, src: Cursor, output: list[str]):
        """
        Demangle a number. Inside template arguments, the number is a literal value.
        Everywhere else, it is the length of the name which follows it.
        """
        negative = src.peek() == "-"
        if negative:
            src.read()

        number = src.read_number()

        if negative or src.peek() in _LITERAL_TERMINATORS:
            output.append(str(-number if negative else number))
            return

        start = src.position
        while src.position - start < number and not src.at_end():
            char = src.read()
            if char == "<":
                self._demangle_template(src, output)
            else:
                output.append(char)

        if src.position - start < number:
            self._fallback(src, f"name shorter than its length {number}")

    def _demangle_components(self, src: Cursor, output: list[str]):
        """
        Demangle a chain of modifiers ending in a base type, and render it.
        """
        components: list[Component] = []

        while True:
            code = src.read()

            if code == SENTINEL:
                if components:
                    self._fallback(src, "type ends unexpectedly")
                break

            modifier = Component.modifier(code)
            if modifier:
                components.insert(0, modifier)
                continue

            if code == "A":
                components.insert(0, Component.array(self._read_array_length(src)))
                continue

            fundamental = Component.fundamental(code)
            if fundamental:
                components.insert(0, fundamental)
            elif code == "Q":
                components.insert(0, Component.named(self._demangle_qualified(src)))
            elif code == "F":
                components.insert(0, self._demangle_function(src))
            elif code in DIGITS:
                # Step back so the digit is read again as the length of a name.
                src.position -= 1
                components.insert(0, Component.named(self._type_text(src)))
            else:
                self._fallback(src, f"unknown type code {code!r}")
            break

        output.append(render_components(components))

    def _read_array_length(self, src: Cursor) -> int:
        """
        Read an array dimension terminated by `_`.
        """
        length = 0
        while True:
            char = src.read()
            if char == "_":
                break
            if char == SENTINEL:
                self._fallback(src, "array dimension ends unexpectedly")
                break
            if char in DIGITS:
                length = length * 10 + int(char)
            else:
                self._fallback(src, f"unexpected character {char!r} in array dimension")
        return length

    def _demangle_qualified(self, src: Cursor) -> str:
        """
        Demangle a `Q` qualified name: a single digit count followed by that many names.
        """
        count_char = src.read()
        if count_char in DIGITS:
            count = int(count_char)
        else:
            self._fallback(src, f"expected qualified name count, got {count_char!r}")
            count = 0

        return "::".join(self._type_text(src) for _ in range(count))

    def _demangle_function(self, src: Cursor) -> Component:
        """
        Demangle an `F` function type: parameter types, `_`, then the return type.
        """
        params = ""
        while src.peek() not in ("_", SENTINEL):
            if params:
                params += ", "
            params += self._type_text(src)

        if src.read() != "_":
            self._fallback(src, "function type has no return type")

        return_name = self._type_text(src)
        return Component.function("" if params == "void" else params, return_name)

    def _demangle_template(self, src: Cursor, output: list[str]):
        """
        Demangle the template arguments following a `<`, up to and including the `>`.
        """
        output.append("<")

        while True:
            self._demangle_type(src, output)

            char = src.read()
            if char == ">":
                break
            if char == ",":
                output.append(", ")
            elif char == SENTINEL:
                self._fallback(src, "template arguments are not terminated")
                break
            else:
                self._fallback(src, f"unexpected character {char!r} in template arguments")

        output.append(">")


def parse(mangled: str, max_depth: Optional[int] = None) -> Signature:
    p = CWDemangler() if max_depth is None else CWDemangler(max_depth=max_depth)
    return p.parse(mangled)


def demangle(mangled: str) -> str:
    return CWDemangler().demangle(mangled)


def demangle_type(mangled_type: str) -> str:
    return CWDemangler().demangle_type(mangled_type)
