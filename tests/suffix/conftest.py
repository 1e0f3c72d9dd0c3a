"""Shared fixtures for suffix classification tests."""

from __future__ import annotations

import random

import pytest

from dns_name.suffix.compiler import compile_rules
from dns_name.suffix.suffix_list import SuffixList
from dns_name.suffix.trie import RuleTrie

SEED = 42

# A small slice of the public suffix list covering each rule shape:
# plain TLDs, multi-label suffixes, wildcards and exceptions.
RULES = ",".join([
    "com",
    "net",
    "org",
    "nu",
    "museum",
    "saarland",
    "uk",
    "co.uk",
    "uk.com",
    "apps.fbsbx.com",
    "*.ck",
    "!www.ck",
    "jp",
    "ac.jp",
    "*.kobe.jp",
    "!city.kobe.jp",
])

PUBLIC_SUFFIX_TEXT = """\
// This Source Code Form is subject to the terms of the Mozilla Public
// License, v. 2.0.

// ===BEGIN ICANN DOMAINS===

// com : https://en.wikipedia.org/wiki/.com
com

// uk : https://en.wikipedia.org/wiki/.uk
uk
co.uk

// ck : https://en.wikipedia.org/wiki/.ck
*.ck
!www.ck

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

uk.com   // CentralNic
com

// ===END PRIVATE DOMAINS===
"""

LABELS = ["www", "api", "mail", "example", "bluecat", "city", "c", "127", "a-b"]
TAILS = ["com", "uk.com", "co.uk", "uk", "ck", "www.ck", "kobe.jp", "ac.jp", "nu", "madeup"]


@pytest.fixture
def rule_trie() -> RuleTrie:
    return compile_rules(RULES)


@pytest.fixture
def suffixes() -> SuffixList:
    return SuffixList.from_text(RULES)


def generate_names(count: int, seed: int = SEED) -> list[str]:
    """Random names over LABELS and TAILS, with mixed case and FQDN dots."""
    rng = random.Random(seed)
    names: list[str] = []
    for _ in range(count):
        head = [rng.choice(LABELS) for _ in range(rng.randint(0, 3))]
        name = ".".join(head + [rng.choice(TAILS)])
        if rng.random() < 0.3:
            name = name.upper()
        if rng.random() < 0.2:
            name += "."
        names.append(name)
    return names
