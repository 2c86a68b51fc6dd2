import pytest

from vibeset.core import InvalidInput, Track
from vibeset.mock import (
    POOLS,
    RandomSource,
    desired_track_count,
    generate_mock_playlist,
    make_playlist_name,
)


def test_desired_track_count_is_clamped() -> None:
    assert desired_track_count("a" * 9) == 5
    assert desired_track_count("a" * 49) == 5
    assert desired_track_count("a" * 75) == 7
    assert desired_track_count("a" * 300) == 10


@pytest.mark.parametrize("prompt", ["", "   ", "\n\t", None])
def test_generate_rejects_blank_prompt(prompt) -> None:
    with pytest.raises(InvalidInput):
        generate_mock_playlist(prompt)


def test_generate_returns_distinct_tracks_from_one_pool() -> None:
    playlist = generate_mock_playlist("  guitar solo rock anthem  ", rng=RandomSource(seed=3))

    assert playlist.prompt == "guitar solo rock anthem"
    assert 5 <= len(playlist.tracks) <= 10
    assert len(playlist.tracks) <= len(POOLS["rock"])

    ids = [t.id for t in playlist.tracks]
    assert len(set(ids)) == len(ids)
    assert set(playlist.tracks) <= set(POOLS["rock"])


def test_generate_count_follows_prompt_length_when_pool_is_large(monkeypatch) -> None:
    big_pool = tuple(Track(id=f"x{i}", title=f"T{i}", artist="A") for i in range(12))
    monkeypatch.setattr(
        "vibeset.mock.generator.pick_pool",
        lambda prompt: big_pool,
        raising=True,
    )

    assert len(generate_mock_playlist("a" * 75).tracks) == 7
    assert len(generate_mock_playlist("a" * 500).tracks) == 10
    assert len(generate_mock_playlist("short").tracks) == 5


def test_seeded_random_source_is_reproducible() -> None:
    first = generate_mock_playlist("lofi rap beats", rng=RandomSource(seed=42))
    second = generate_mock_playlist("lofi rap beats", rng=RandomSource(seed=42))

    assert [t.id for t in first.tracks] == [t.id for t in second.tracks]


def test_shuffled_returns_a_permutation_without_touching_input() -> None:
    items = list(range(20))
    result = RandomSource(seed=1).shuffled(items)

    assert sorted(result) == items
    assert items == list(range(20))


def test_playlist_name_strips_quotes() -> None:
    assert make_playlist_name('I love jazz"') == "AI Set: I love jazz"
    assert make_playlist_name("it's 'late'") == "AI Set: its late"


def test_playlist_name_truncates_long_prompts() -> None:
    prompt = "b" * 50
    name = make_playlist_name(prompt)

    assert name == "AI Set: " + "b" * 40 + "…"


def test_playlist_name_keeps_exactly_forty_chars_untouched() -> None:
    assert make_playlist_name("c" * 40) == "AI Set: " + "c" * 40


def test_playlist_name_defaults_when_only_quotes() -> None:
    assert make_playlist_name("\"'\"") == "AI Set: Custom Mix"

    playlist = generate_mock_playlist("\"\"''")
    assert playlist.playlist_name == "AI Set: Custom Mix"
