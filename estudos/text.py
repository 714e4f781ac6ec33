"""A small mutable string type with concatenation, comparison and indexing."""

from __future__ import annotations

import sys
from typing import Iterator, List, Optional, Sequence, TextIO, Union

_MAX_WORD = 99


class Text:
    """A mutable sequence of characters compared like C strings."""

    __slots__ = ("_chars",)

    def __init__(self, value: Union["Text", str] = "") -> None:
        if isinstance(value, Text):
            self._chars: List[str] = list(value._chars)
        elif isinstance(value, str):
            self._chars = list(value)
        else:
            raise TypeError(f"cannot build Text from {type(value).__name__}")

    @staticmethod
    def _as_str(other: object) -> Optional[str]:
        if isinstance(other, Text):
            return str(other)
        if isinstance(other, str):
            return other
        return None

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int):
            raise TypeError("Text indices must be integers")
        if index < 0 or index >= len(self._chars):
            raise IndexError("Indice invalido")

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"Text({str(self)!r})"

    def __add__(self, other: Union["Text", str]) -> "Text":
        suffix = self._as_str(other)
        if suffix is None:
            return NotImplemented
        return Text(str(self) + suffix)

    def __iadd__(self, other: Union["Text", str]) -> "Text":
        suffix = self._as_str(other)
        if suffix is None:
            return NotImplemented
        self._chars.extend(suffix)
        return self

    def __bool__(self) -> bool:
        return bool(self._chars)

    def __eq__(self, other: object) -> bool:
        value = self._as_str(other)
        if value is None:
            return NotImplemented
        return str(self) == value

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Union["Text", str]) -> bool:
        value = self._as_str(other)
        if value is None:
            return NotImplemented
        return str(self) < value

    def __le__(self, other: Union["Text", str]) -> bool:
        value = self._as_str(other)
        if value is None:
            return NotImplemented
        return str(self) <= value

    def __gt__(self, other: Union["Text", str]) -> bool:
        value = self._as_str(other)
        if value is None:
            return NotImplemented
        return str(self) > value

    def __ge__(self, other: Union["Text", str]) -> bool:
        value = self._as_str(other)
        if value is None:
            return NotImplemented
        return str(self) >= value

    def __getitem__(self, index: int) -> str:
        self._check_index(index)
        return self._chars[index]

    def __setitem__(self, index: int, char: str) -> None:
        self._check_index(index)
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("a single character is required")
        self._chars[index] = char

    @classmethod
    def read(cls, stream: TextIO) -> "Text":
        """Read one whitespace-delimited word of at most 99 characters.

        Raises EOFError when the stream holds no further word.
        """
        ch = stream.read(1)
        while ch and ch.isspace():
            ch = stream.read(1)
        if not ch:
            raise EOFError("no word left to read")
        chars: List[str] = []
        while ch and not ch.isspace():
            chars.append(ch)
            if len(chars) == _MAX_WORD:
                break
            ch = stream.read(1)
        return cls("".join(chars))


def _demo_lines() -> Iterator[str]:
    empty = Text()
    yield str(empty)
    yield "teste de STRING vazia^"

    s1, s2, s3, s4, s5 = (Text(v) for v in ("aa", "bb", "cc", "ab", "cc"))
    if s1 > s2:
        yield f"{s1} eh maior que {s2}"
    if s3 == s5 and s3 <= s5 and s3 >= s5:
        yield f"{s3} e {s5} sao iguais"
    if s4 < s5:
        yield f"{s4} eh menor que {s5}"
    if s2 >= s1:
        yield f"{s2} eh maior ou igual a {s1}"
    if s2 != s4:
        yield f"{s2} eh diferente de {s4}"

    t1 = Text("abacate")
    for i, char in enumerate(t1):
        yield f"indice[{i}] de t1: {char}"
    t1[6] = "o"
    yield f"teste de sobrecarga de [], atribuicao de um lvalue na STRING t1: {t1}"
    yield f"concatenacao de objeto STRING e char*: {t1 + 'cereja'}"
    t2 = Text("maracuja")
    yield f"concatenacao de dois objetos STRING: {t1 + t2}"
    t3 = Text(t2)
    t3 += Text("coca-cola")
    yield f"concatenacao usando += com objeto rvalue: {t3}"
    t1 += "caramelo"
    yield f"concatenacao usando += com objeto e char*: {t1}"
    t4 = Text()
    yield "STRING vazia" if not t4 else "STRING nao-vazia"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Exercise Text, then read one word from standard input and echo it."""
    for line in _demo_lines():
        print(line)
    print("Insira um valor para t4")
    try:
        word = Text.read(sys.stdin)
    except EOFError:
        print("nenhum valor lido", file=sys.stderr)
        return 1
    print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())