"""Human-pronounceable share link tokens (e.g. "RedGoatJump")."""

import logging
import random
from collections.abc import Callable

logger = logging.getLogger(__name__)

ADJECTIVES = [
    "Red", "Blue", "Green", "Yellow", "Purple", "Orange", "Pink", "Black", "White", "Gray",
    "Big", "Small", "Fast", "Slow", "Hot", "Cold", "New", "Old", "Young", "Smart",
    "Brave", "Calm", "Wild", "Quiet", "Loud", "Bright", "Dark", "Sharp", "Smooth", "Rough",
    "Happy", "Sad", "Angry", "Kind", "Bold", "Shy", "Proud", "Humble", "Wise", "Funny",
]  # fmt: skip

NOUNS = [
    "Goat", "Pie", "Cat", "Dog", "Bird", "Fish", "Bear", "Lion", "Tiger", "Wolf",
    "Moon", "Star", "Sun", "Cloud", "Rain", "Snow", "Wind", "Fire", "Water", "Earth",
    "Tree", "Flower", "Leaf", "Rock", "Stone", "Mountain", "River", "Ocean", "Lake", "Island",
    "Book", "Pen", "Key", "Door", "Window", "Table", "Chair", "Lamp", "Clock", "Bell",
    "Apple", "Banana", "Orange", "Grape", "Berry", "Peach", "Pear", "Cherry", "Lemon", "Lime",
]  # fmt: skip

VERBS = [
    "Jump", "Run", "Walk", "Fly", "Swim", "Climb", "Dance", "Sing", "Play", "Read",
    "Write", "Draw", "Paint", "Cook", "Bake", "Eat", "Drink", "Sleep", "Wake", "Dream",
    "Think", "Learn", "Teach", "Help", "Give", "Take", "Make", "Build", "Create", "Fix",
    "Break", "Open", "Close", "Push", "Pull", "Lift", "Drop", "Catch", "Throw", "Roll",
]  # fmt: skip


def generate_share_link() -> str:
    """Combine a random adjective, noun and verb."""
    return f"{random.choice(ADJECTIVES)}{random.choice(NOUNS)}{random.choice(VERBS)}"  # noqa: S311


def generate_unique_share_link(exists: Callable[[str], bool], max_attempts: int = 100) -> str:
    """Generate a share link for which ``exists`` returns False.

    After ``max_attempts`` collisions a random number is appended instead.
    """
    for _ in range(max_attempts):
        link = generate_share_link()
        if not exists(link):
            return link

    logger.warning(
        "Share link space exhausted after %d attempts, using numeric suffix", max_attempts
    )
    return f"{generate_share_link()}{random.randint(0, 999)}"  # noqa: S311
