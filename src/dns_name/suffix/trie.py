"""Label-level trie for public suffix rules.

Rules are split on "." and reversed before insertion so that the TLD
comes first: "co.uk" becomes ["uk", "co"]. Every rule sharing a TLD
shares the node for it, and lookups walk from the rightmost label of
a name inward.

Wildcard labels ("*") are stored as ordinary children with the key "*".
Exception rules ("!www.ck") are stored under their plain labels; the
node where the rule ends carries a leaf with is_exception=True.

The trie does no matching itself. Longest-match resolution lives in
matcher.py, which only reads the structure built here.
"""

from __future__ import annotations

from dataclasses import dataclass, field

WILDCARD = "*"
EXCEPTION_PREFIX = "!"

# ASCII-only case fold. str.lower() also folds non-ASCII letters and can
# change the string's length, which would break offset bookkeeping.
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


@dataclass(frozen=True, slots=True)
class RuleLeaf:
    """Marks that a rule terminates at a node."""
    is_exception: bool = False


@dataclass(slots=True)
class RuleNode:
    """A node in the rule trie.

    children maps a lowercased label (or "*") to the next node.
    leaf is set when some rule ends exactly here.
    """
    children: dict[str, RuleNode] = field(default_factory=dict)
    leaf: RuleLeaf | None = None


class RuleTrie:
    """Trie over reversed rule labels.

    Supports rules like:
        "com"        -- plain suffix
        "co.uk"      -- multi-label suffix
        "*.ck"       -- any single label under ck is a suffix
        "!www.ck"    -- exception: www.ck is registrable, not a suffix

    Inserting the same rule twice overwrites its leaf; the last
    exception flag wins.
    """

    def __init__(self) -> None:
        self._root = RuleNode()
        self._rule_count = 0

    @property
    def root(self) -> RuleNode:
        return self._root

    @property
    def rule_count(self) -> int:
        return self._rule_count

    @property
    def is_empty(self) -> bool:
        return not self._root.children

    def insert(self, labels: list[str], is_exception: bool = False) -> None:
        """Insert a rule given as labels in written order.

        ["co", "uk"] is inserted as the path uk -> co. Labels are
        expected to be validated and lowercased by the caller.
        """
        node = self._root
        for label in reversed(labels):
            child = node.children.get(label)
            if child is None:
                child = RuleNode()
                node.children[label] = child
            node = child
        if node.leaf is None:
            self._rule_count += 1
        node.leaf = RuleLeaf(is_exception)

    def lookup(self, labels: list[str]) -> RuleLeaf | None:
        """Return the leaf of the exact rule with these labels, if any.

        Wildcards are not expanded: lookup(["*", "ck"]) finds the rule
        "*.ck" itself.
        """
        node = self._root
        for label in reversed(labels):
            node = node.children.get(label)
            if node is None:
                return None
        return node.leaf

    def node_count(self) -> int:
        """Count total nodes in the trie, root included."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def __len__(self) -> int:
        return self._rule_count
