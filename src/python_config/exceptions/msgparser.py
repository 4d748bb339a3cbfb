"""Parser for the error catalog in `messages.txt`.

Each entry is a `[Exxx / TypeName]` header followed by a message template
and an optional help line. Lines starting with `#` are comments.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

header_pattern = re.compile(r"\[ \s* (E\d{3}) \s* / \s* (\w+) \s* \]", re.VERBOSE)


@dataclass
class ErrorMessage:
    code: str
    type: str
    message: str
    help: Optional[str] = None


def parse_lines(lines: Iterable[str]) -> dict[str, ErrorMessage]:
    entries: list[list[str]] = []

    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if header := header_pattern.match(line):
            entries.append([header.group(1), header.group(2)])
        elif not entries:
            raise SyntaxError("Must start with a valid header")
        elif len(entries[-1]) == 4:
            raise ValueError("An item may not have more than two fields")
        else:
            entries[-1].append(line)

    return {fields[0]: ErrorMessage(*fields) for fields in entries}


@lru_cache(maxsize=None)
def parse(path: str) -> dict[str, ErrorMessage]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_lines(f)
