"""SuffixList: a compiled rule set plus the query API.

Usage:
    suffixes = SuffixList.from_path("public_suffix_list.dat",
                                    public_suffix_format=True)

    name = suffixes.parse_dns_name("www.example.com")
    name.suffix       # "com"
    name.root         # "example.com"
    name.registrable  # "example"

Loading belongs to loader.py, compiling to compiler.py, matching to
matcher.py. SuffixList just ties them to one RuleTrie, which it never
modifies after construction.
"""

from __future__ import annotations

from os import PathLike
from typing import IO, Any

from dns_name.suffix.compiler import compile_rules, parse_rule
from dns_name.suffix.loader import convert_public_suffix_list, read_path, read_reader
from dns_name.suffix.matcher import classify
from dns_name.suffix.name import ParsedName
from dns_name.suffix.trie import RuleTrie


class SuffixList:
    """Classify DNS names against one compiled public suffix rule set."""

    def __init__(self, trie: RuleTrie | None = None) -> None:
        self._trie = trie if trie is not None else RuleTrie()

    @classmethod
    def empty(cls) -> SuffixList:
        """A list with no rules, not even the fallback.

        Every name parsed against it has no suffix, root or registrable.
        """
        return cls()

    @classmethod
    def from_text(cls, text: str) -> SuffixList:
        """Compile a comma-separated rule blob."""
        return cls(compile_rules(text))

    @classmethod
    def from_public_suffix_list(cls, text: str) -> SuffixList:
        """Compile canonical one-rule-per-line list text."""
        return cls.from_text(convert_public_suffix_list(text))

    @classmethod
    def from_reader(
        cls, reader: IO[str] | IO[bytes], public_suffix_format: bool = False
    ) -> SuffixList:
        return cls._from_loaded(read_reader(reader), public_suffix_format)

    @classmethod
    def from_path(
        cls, path: str | PathLike[str], public_suffix_format: bool = False
    ) -> SuffixList:
        return cls._from_loaded(read_path(path), public_suffix_format)

    @classmethod
    def _from_loaded(cls, text: str, public_suffix_format: bool) -> SuffixList:
        if public_suffix_format:
            return cls.from_public_suffix_list(text)
        return cls.from_text(text)

    @property
    def trie(self) -> RuleTrie:
        return self._trie

    @property
    def rule_count(self) -> int:
        return self._trie.rule_count

    def has_rule(self, rule: str) -> bool:
        """True if this exact rule is listed, exception flag included.

        Wildcards are not expanded: has_rule("*.ck") asks for the rule
        "*.ck" itself. Raises InvalidRule for a malformed rule.
        """
        labels, is_exception = parse_rule(rule)
        leaf = self._trie.lookup(labels)
        return leaf is not None and leaf.is_exception == is_exception

    def parse_dns_name(self, name: str) -> ParsedName:
        """Classify a name. Raises InvalidInput for malformed names."""
        return classify(name, self._trie)

    def parse_domain(self, name: str) -> ParsedName:
        """Older name for parse_dns_name(), kept for existing callers."""
        return self.parse_dns_name(name)

    def parse_name_object(self, name: Any) -> ParsedName:
        """Classify a domain-name object from another library.

        Objects with a to_text() method (dnspython's dns.name.Name) are
        rendered with it; anything else goes through str(). The object
        must already render in ASCII-compatible form.
        """
        to_text = getattr(name, "to_text", None)
        text = to_text() if callable(to_text) else str(name)
        return self.parse_dns_name(text)

    def __len__(self) -> int:
        return self._trie.rule_count
