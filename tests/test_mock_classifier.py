from vibeset.mock import DEFAULT_POOL_KEY, POOL_RULES, POOLS, pick_pool, pick_pool_key


def test_pick_pool_key_examples() -> None:
    assert pick_pool_key("guitar solo rock anthem") == "rock"
    assert pick_pool_key("late-night ambient techno") == "electronic"
    assert pick_pool_key("lofi rap beats") == "hiphop"
    assert pick_pool_key("pop dance radio hit") == "pop"


def test_unmatched_prompt_falls_back_to_electronic() -> None:
    assert DEFAULT_POOL_KEY == "electronic"
    assert pick_pool_key("xyz unmatched term") == "electronic"
    assert pick_pool("xyz unmatched term") == POOLS["electronic"]


def test_rock_wins_over_pop_when_both_match() -> None:
    assert pick_pool_key("pop punk rock") == "rock"
    assert pick_pool_key("indie radio edit") == "rock"


def test_matching_is_case_insensitive() -> None:
    assert pick_pool_key("HIP HOP Classics") == "hiphop"
    assert pick_pool_key("EDM Festival") == "electronic"


def test_rules_are_checked_in_priority_order() -> None:
    assert [rule.pool_key for rule in POOL_RULES] == [
        "rock",
        "electronic",
        "hiphop",
        "pop",
    ]


def test_pools_shape() -> None:
    assert set(POOLS) == {"rock", "electronic", "hiphop", "pop", "default"}
    assert POOLS["default"] == POOLS["electronic"]
    for tracks in POOLS.values():
        ids = [t.id for t in tracks]
        assert len(ids) == 5
        assert len(set(ids)) == len(ids)
