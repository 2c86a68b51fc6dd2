"""Static genre pools of fabricated tracks.

Nothing here is persisted or mutated: pools are module-level tuples and the
generator always works on a copy.
"""

from typing import Dict, Tuple

from vibeset.core.models import Track

DEFAULT_POOL_KEY = "electronic"

ROCK: Tuple[Track, ...] = (
    Track(id="r1", title="Amp Bloom", artist="Glass Riffs"),
    Track(id="r2", title="Neon Garage", artist="The Backline"),
    Track(id="r3", title="Nightdrive Anthem", artist="Chrome & Ash"),
    Track(id="r4", title="Razor Chorus", artist="Static Hearts"),
    Track(id="r5", title="Wide Open Sky", artist="Midwest Moon"),
)

ELECTRONIC: Tuple[Track, ...] = (
    Track(id="e1", title="Midnight Circuit", artist="Neon Static"),
    Track(id="e2", title="Soft Focus", artist="Ambient Avenue"),
    Track(id="e3", title="Voltage Drift", artist="Low Key Logic"),
    Track(id="e4", title="Rain on Glass", artist="Nocturne Dept."),
    Track(id="e5", title="Late Compile", artist="Sine & Coffee"),
)

HIPHOP: Tuple[Track, ...] = (
    Track(id="h1", title="Lo-Fi Ledger", artist="Sidechain Poets"),
    Track(id="h2", title="Corner Lights", artist="Kinetic Verse"),
    Track(id="h3", title="Afterhours Loop", artist="Basement Bloom"),
    Track(id="h4", title="Backbeat Blueprint", artist="Metro Ink"),
    Track(id="h5", title="Coffee & Concrete", artist="Night Shift"),
)

POP: Tuple[Track, ...] = (
    Track(id="p1", title="City Spark", artist="Weekend Color"),
    Track(id="p2", title="Golden Hour Texts", artist="Paper Satellites"),
    Track(id="p3", title="Runway Lights", artist="Velvet Neon"),
    Track(id="p4", title="Heartbeat Emoji", artist="Stereo Summer"),
    Track(id="p5", title="Stay Up Late", artist="Candy Static"),
)

POOLS: Dict[str, Tuple[Track, ...]] = {
    "rock": ROCK,
    "electronic": ELECTRONIC,
    "hiphop": HIPHOP,
    "pop": POP,
    "default": ELECTRONIC,
}


def get_pool(pool_key: str) -> Tuple[Track, ...]:
    """
    Return the pool registered under `pool_key`.

    Raises KeyError if the key is unknown.
    """
    return POOLS[pool_key]
