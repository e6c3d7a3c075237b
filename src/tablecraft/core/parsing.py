"""Pure input-line parsing helpers.

Every function in this module is a **pure** transformation of strings:
no state, no I/O.

Argument tokenization has two modes:

* **Plain** — split on whitespace runs.
* **Quoted** — used when the text holds more than one ``"``.  Each
  non-empty ``"..."`` segment becomes one token.  A leading integer
  written without quotes is kept as the first token, so an index can
  precede quoted cells (``add 2 "a b" "c"``).
"""

from __future__ import annotations

import re

_QUOTED_SEGMENT = re.compile(r'"([^"]+)"')

_TEXT_EXTENSION = ".txt"


def split_command(line: str) -> tuple[str, str]:
    """Split *line* into ``(command_name, rest_of_line)``.

    Both parts are stripped.  A blank line yields ``("", "")``.
    """
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def is_integer(token: str) -> bool:
    """Return ``True`` when *token* is the canonical text of an integer.

    The token must survive an ``int`` round trip unchanged, so ``"-3"``
    qualifies while ``"+3"``, ``"03"``, ``" 3"`` and ``"3.0"`` do not.
    """
    try:
        value = int(token)
    except ValueError:
        return False
    return str(value) == token


def tokenize(text: str) -> list[str]:
    """Split command arguments into tokens (plain or quoted mode)."""
    if text.count('"') <= 1:
        return text.split()

    tokens = _QUOTED_SEGMENT.findall(text)
    words = text.split()
    if words and is_integer(words[0]):
        tokens.insert(0, words[0])
    return tokens


def resolve_save_filename(name: str) -> str:
    """Append ``.txt`` unless the name already contains it anywhere.

    ``report`` becomes ``report.txt`` while ``my.txt.backup`` is kept
    as is.
    """
    if _TEXT_EXTENSION in name:
        return name
    return name + _TEXT_EXTENSION
