"""Reading rule text from outside the process.

The compiler only understands the comma-separated blob format. This
module gets that text from a file or a file-like object, and converts
the canonical public suffix list format (one rule per line, "//"
comments) into it:

    // ===BEGIN ICANN DOMAINS===
    com
    *.ck
    !www.ck

becomes "com,*.ck,!www.ck". Unicode rules such as "公司.cn" are
ACE-encoded on the way ("xn--55qx5d.cn").

Nothing here caches or retries. I/O errors propagate to the caller.
"""

from __future__ import annotations

import encodings.idna as idna
import logging
from os import PathLike
from typing import IO

from dns_name.suffix.compiler import RULE_DELIMITER
from dns_name.suffix.trie import EXCEPTION_PREFIX

log = logging.getLogger(__name__)

COMMENT_PREFIX = "//"
ENCODING = "utf-8"


def read_reader(reader: IO[str] | IO[bytes]) -> str:
    """Read all remaining text from a file-like object.

    Binary readers are decoded as UTF-8.
    """
    data = reader.read()
    if isinstance(data, bytes):
        data = data.decode(ENCODING)
    log.debug("read %d characters of rule text", len(data))
    return data


def read_path(path: str | PathLike[str]) -> str:
    """Read rule text from a file on disk."""
    with open(path, "r", encoding=ENCODING) as f:
        return read_reader(f)


def rule_to_ascii(rule: str) -> str:
    """ACE-encode the non-ASCII labels of one rule.

    "!公司.cn" -> "!xn--55qx5d.cn". ASCII labels, empty ones included,
    pass through untouched so the compiler reports malformed rules.
    """
    prefix = EXCEPTION_PREFIX if rule.startswith(EXCEPTION_PREFIX) else ""
    labels = rule[len(prefix):].split(".")
    return prefix + ".".join(
        label if label.isascii() else idna.ToASCII(label).decode("ascii")
        for label in labels
    )


def convert_public_suffix_list(text: str) -> str:
    """Convert canonical one-rule-per-line list text to a rule blob.

    Comments and blank lines are dropped. Only the first token of a
    line is the rule; anything after whitespace is ignored, as the
    list format specifies. Internationalized rules are written in
    Unicode in the list and are converted to their ASCII-compatible
    form, since names are matched in that form. Duplicate rules keep
    their first position.
    """
    rules: list[str] = []
    seen: set[str] = set()
    for raw in text.splitlines():
        line = raw.split(COMMENT_PREFIX, 1)[0].strip()
        if not line:
            continue
        rule = rule_to_ascii(line.split(None, 1)[0])
        if rule in seen:
            continue
        seen.add(rule)
        rules.append(rule)
    log.debug("converted %d rules from public suffix list text", len(rules))
    return RULE_DELIMITER.join(rules)
