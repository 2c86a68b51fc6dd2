"""Keyword-based prompt → genre pool classification.

Rules are evaluated in list order and the first match wins, so a prompt
mentioning both "rock" and "pop" lands in the rock pool.
"""

from typing import List, NamedTuple, Tuple

from vibeset.core.models import Track

from .pools import DEFAULT_POOL_KEY, get_pool


class PoolRule(NamedTuple):
    pool_key: str
    keywords: Tuple[str, ...]

    def matches(self, lowered_prompt: str) -> bool:
        return any(keyword in lowered_prompt for keyword in self.keywords)


POOL_RULES: List[PoolRule] = [
    PoolRule("rock", ("rock", "guitar", "indie")),
    PoolRule("electronic", ("edm", "electronic", "ambient", "techno")),
    PoolRule("hiphop", ("hip hop", "hiphop", "rap", "lofi")),
    PoolRule("pop", ("pop", "dance", "radio")),
]


def pick_pool_key(prompt: str) -> str:
    lowered = prompt.lower()
    for rule in POOL_RULES:
        if rule.matches(lowered):
            return rule.pool_key
    return DEFAULT_POOL_KEY


def pick_pool(prompt: str) -> Tuple[Track, ...]:
    return get_pool(pick_pool_key(prompt))
