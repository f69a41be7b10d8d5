"""
Read cursor over a single mangled symbol.
"""

SENTINEL = "\0"
SEPARATOR = "__"
DIGITS = frozenset("0123456789")


class Cursor:
    """
    Indexed read position over a mangled symbol.

    None of the read operations raise. Reading past the end of the symbol returns
    `SENTINEL` instead, so callers only need to check for that value to detect
    truncated input.
    """

    def __init__(self, data: str):
        self.data = data
        self._position: int = 0

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, value: int):
        # Keep 0 <= position <= len(data).
        self._position = max(0, min(value, len(self.data)))

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> str:
        if 0 <= index < len(self.data):
            return self.data[index]
        return SENTINEL

    def read(self) -> str:
        """
        Read the current character and advance, or return `SENTINEL` at the end.
        """
        char = self[self._position]
        if self._position < len(self.data):
            self._position += 1
        return char

    def peek(self) -> str:
        """
        Return the current character without advancing.
        """
        return self[self._position]

    def at_end(self) -> bool:
        return self._position >= len(self.data)

    def exhaust(self):
        """
        Move the cursor to the end of the symbol.
        """
        self._position = len(self.data)

    def read_number(self) -> int:
        """
        Read subsequent decimal digits and return them as a positive base-10 integer.
        Returns 0 if the cursor does not point to a digit.
        """
        number = 0
        while self.peek() in DIGITS:
            number = number * 10 + int(self.read())
        return number

    def find_last_separator(self) -> int:
        """
        Find the offset of the last `__` at or after the current position.

        Every match overwrites the previous candidate, so the rightmost separator wins
        (including inside a run of three or more underscores). Returns the length of
        the symbol if no separator exists.
        """
        end = len(self.data)
        for index in range(self._position, len(self.data) - 1):
            if self.data[index : index + 2] == SEPARATOR:
                end = index
        return end

    def __repr__(self) -> str:
        return f"Cursor({self.data!r}, position={self._position})"
