"""Compile a rule blob into a RuleTrie.

The blob is a comma-separated list of rules:

    "com,uk,co.uk,*.ck,!www.ck"

Each rule is a dot-separated label sequence. A leading "!" marks an
exception rule, and a "*" label matches any single label. Whitespace
around the blob and around each rule is ignored, so a file ending in a
newline compiles the same as one without.

After the caller's rules, the catch-all rule "*" is always inserted.
Any TLD that appears in no rule is therefore still its own one-label
suffix, which is how the public suffix algorithm treats unknown TLDs.
"""

from __future__ import annotations

import logging

from dns_name.suffix.trie import EXCEPTION_PREFIX, WILDCARD, RuleTrie, ascii_lower

log = logging.getLogger(__name__)

RULE_DELIMITER = ","
FALLBACK_RULE = WILDCARD


class CompileError(ValueError):
    """Base class for errors raised while compiling a rule blob."""


class EmptyList(CompileError):
    """Raised when the rule blob holds no rules at all."""

    def __init__(self) -> None:
        super().__init__("rule list is empty")


class InvalidRule(CompileError):
    """Raised when a single rule entry is malformed."""

    def __init__(self, rule: str, reason: str = "empty label") -> None:
        self.rule = rule
        super().__init__(f"invalid rule {rule!r}: {reason}")


def parse_rule(rule: str) -> tuple[list[str], bool]:
    """Split one rule entry into (labels, is_exception).

    Labels come back lowercased and in written order.
    Raises InvalidRule for empty labels or labels with whitespace.
    """
    entry = rule.strip()
    is_exception = entry.startswith(EXCEPTION_PREFIX)
    if is_exception:
        entry = entry[len(EXCEPTION_PREFIX):]

    labels = ascii_lower(entry).split(".")
    for label in labels:
        if not label:
            raise InvalidRule(rule)
        if any(ch.isspace() for ch in label):
            raise InvalidRule(rule, "whitespace in label")
    return labels, is_exception


def compile_rules(rule_text: str) -> RuleTrie:
    """Build a RuleTrie from a comma-separated rule blob.

    Raises EmptyList if the blob holds no rules, InvalidRule on the
    first malformed entry. The returned trie always contains the
    fallback "*" rule and is never mutated afterwards by the matcher.
    """
    text = rule_text.strip()
    if not text:
        raise EmptyList()

    trie = RuleTrie()
    for rule in text.split(RULE_DELIMITER):
        labels, is_exception = parse_rule(rule)
        trie.insert(labels, is_exception)

    trie.insert([FALLBACK_RULE])
    log.debug(
        "compiled %d rules into %d trie nodes", trie.rule_count, trie.node_count()
    )
    return trie
