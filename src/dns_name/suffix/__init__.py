"""Public suffix classification of DNS names."""

from dns_name.suffix.compiler import CompileError, EmptyList, InvalidRule, compile_rules
from dns_name.suffix.loader import convert_public_suffix_list, read_path, read_reader
from dns_name.suffix.matcher import InvalidInput, MatchError, classify
from dns_name.suffix.name import ParsedName
from dns_name.suffix.suffix_list import SuffixList
from dns_name.suffix.trie import RuleLeaf, RuleNode, RuleTrie

__all__ = [
    "CompileError",
    "EmptyList",
    "InvalidInput",
    "InvalidRule",
    "MatchError",
    "ParsedName",
    "RuleLeaf",
    "RuleNode",
    "RuleTrie",
    "SuffixList",
    "classify",
    "compile_rules",
    "convert_public_suffix_list",
    "read_path",
    "read_reader",
]
