"""Longest-match classification of a DNS name against a RuleTrie.

Walk:
  1.  Lowercase the name and drop one trailing dot.
  2.  Visit labels from the rightmost inward. At each node follow the
      literal label if the node has it, otherwise the "*" child,
      otherwise stop.
  3.  Every node that carries a leaf replaces the current best match,
      so the deepest leaf on the path wins.
  4.  An exception leaf gives back its own label: the suffix is one
      label shorter than the matched rule.

The walk is O(labels) and never backtracks. It never mutates the trie,
so one compiled trie can serve any number of threads.
"""

from __future__ import annotations

from dns_name.suffix.name import ParsedName, Span
from dns_name.suffix.trie import WILDCARD, RuleLeaf, RuleTrie, ascii_lower


class MatchError(ValueError):
    """Base class for errors raised while classifying a name."""


class InvalidInput(MatchError):
    """Raised when a name is structurally invalid."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"invalid name {name!r}: {reason}")


def split_labels(name: str) -> list[str]:
    """Split a name (without its trailing dot) into labels.

    Raises InvalidInput on empty labels or labels containing whitespace.
    Any other character is allowed, IP literals included.
    """
    labels = name.split(".")
    for label in labels:
        if not label:
            raise InvalidInput(name, "empty label")
        if any(ch.isspace() for ch in label):
            raise InvalidInput(name, "whitespace in label")
    return labels


def longest_match(labels: list[str], trie: RuleTrie) -> tuple[RuleLeaf, int] | None:
    """Return (leaf, matched_label_count) for the deepest rule, or None."""
    best: tuple[RuleLeaf, int] | None = None
    node = trie.root
    depth = 0
    for label in reversed(labels):
        child = node.children.get(label)
        if child is None:
            child = node.children.get(WILDCARD)
            if child is None:
                break
        node = child
        depth += 1
        if node.leaf is not None:
            best = (node.leaf, depth)
    return best


def tail_span(labels: list[str], count: int) -> Span:
    """Span covering the last `count` labels of the joined name.

    (["b", "example", "uk", "com"], 2) -> "uk.com" -> (10, 16)
    """
    total = sum(len(label) for label in labels) + len(labels) - 1
    tail = sum(len(label) for label in labels[len(labels) - count:]) + count - 1
    return (total - tail, total)


def classify(name: str, trie: RuleTrie) -> ParsedName:
    """Classify `name` against `trie`.

    Returns a ParsedName whose suffix/root/registrable are None where
    they do not exist. Raises InvalidInput for a leading dot (other
    than the root name "."), an empty label, or whitespace in a label.
    """
    if name == ".":
        return ParsedName.root_name()
    if name.startswith("."):
        raise InvalidInput(name, "leading dot")

    normalized = ascii_lower(name)
    domain = normalized[:-1] if normalized.endswith(".") else normalized
    labels = split_labels(domain)

    found = longest_match(labels, trie)
    if found is None:
        return ParsedName(normalized)

    leaf, matched = found
    suffix_len = matched - 1 if leaf.is_exception else matched
    if suffix_len == 0:
        # A single-label exception rule leaves nothing to call a suffix.
        return ParsedName(normalized)

    suffix = tail_span(labels, suffix_len)
    root = None
    if len(labels) > suffix_len:
        root = tail_span(labels, suffix_len + 1)
    return ParsedName(normalized, suffix, root)
