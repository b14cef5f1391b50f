# src/subnetcalc/keys.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

ESC = "\x1b"
CSI_START = "["
SS3_START = "O"
ENTER_CHARS = ("\r", "\n")
BACKSPACE_CHARS = ("\x7f", "\x08")


class KeyKind(Enum):
    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    OTHER = "other"


@dataclass(frozen=True)
class Key:
    kind: KeyKind
    char: str = ""

    @classmethod
    def of(cls, ch: str) -> "Key":
        return cls(KeyKind.CHAR, ch)


ENTER = Key(KeyKind.ENTER)
BACKSPACE = Key(KeyKind.BACKSPACE)


def _escape_end(text: str, start: int) -> int:
    """Index just past the escape sequence that begins at text[start]."""
    nxt = start + 1
    if nxt >= len(text):
        return nxt
    if text[nxt] == CSI_START:
        # parameter / intermediate bytes, then one final byte in @..~
        for j in range(nxt + 1, len(text)):
            if "@" <= text[j] <= "~":
                return j + 1
        return len(text)
    if text[nxt] == SS3_START:
        return min(nxt + 2, len(text))
    # bare Esc
    return nxt


def decode_keys(text: str) -> List[Key]:
    """
    Split decoded input into key events. An escape sequence (arrows, F-keys,
    a bare Esc) becomes one OTHER event; keys after it are still decoded.
    """
    keys: List[Key] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == ESC:
            end = _escape_end(text, i)
            keys.append(Key(KeyKind.OTHER, text[i:end]))
            i = end
            continue
        if ch in ENTER_CHARS:
            keys.append(ENTER)
        elif ch in BACKSPACE_CHARS:
            keys.append(BACKSPACE)
        elif ch.isprintable():
            keys.append(Key.of(ch))
        else:
            keys.append(Key(KeyKind.OTHER, ch))
        i += 1
    return keys
