"""
Render a decoded component sequence as C++ type text.
"""

from typing import Sequence

from cw_demangler.component import Component


def render_components(components: Sequence[Component], start: int = 0) -> str:
    """
    Render `components[start:]` as a string.

    A single space separates each component from the previous one whenever their
    kinds differ, so repeated modifiers stay glued together (`int **`).

    Function and array components consume everything after them:
    - A function renders the trailing components between its return type and its
      parameter list, which gives function pointers their `void (*)(int)` shape.
    - A run of arrays renders the trailing components in parentheses, followed by
      one bracket per dimension in the order they appeared in the mangled symbol.
    """
    if start >= len(components):
        return ""

    result: list[str] = []
    last = components[start].kind
    index = start

    while index < len(components):
        component = components[index]

        if component.kind != last:
            result.append(" ")
            last = component.kind

        if component.kind.is_keyword():
            result.append(str(component.kind))

        elif component.kind == Component.Kind.TYPE:
            result.append(component.name)

        elif component.kind == Component.Kind.FUNCTION:
            inner = render_components(components, index + 1)
            result.append(f"{component.name} ({inner})({component.params})")
            break

        elif component.kind == Component.Kind.ARRAY:
            count = 0
            while index + count < len(components) and components[index + count].is_array():
                count += 1

            if index + count < len(components):
                result.append(f"({render_components(components, index + count)}) ")

            # Components were inserted at the front while scanning, so the
            # dimensions are stored innermost first.
            dimensions = components[index : index + count]
            result.extend(str(dim) for dim in reversed(dimensions))
            break

        else:
            raise AssertionError(f"Unhandled component kind {component.kind!r}")

        index += 1

    return "".join(result)
