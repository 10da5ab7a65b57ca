"""Default icon and colour choices for new wishlists."""

import random

ICONS = [
    # FontAwesome
    "FaGift", "FaHeart", "FaStar", "FaHome", "FaShoppingCart", "FaGamepad", "FaMusic",
    "FaCamera", "FaBook", "FaPlane", "FaLaptop", "FaHeadphones", "FaDice", "FaRocket",
    # Feather
    "FiGift", "FiHeart", "FiStar", "FiCoffee", "FiShoppingBag", "FiTag", "FiBox", "FiPackage",
    # Heroicons
    "HiGift", "HiSparkles", "HiLightningBolt", "HiFire", "HiCube", "HiPuzzle",
    # Material Design
    "MdToys", "MdFlight", "MdSportsEsports", "MdDiamond", "MdLocalMovies", "MdRestaurant",
    # Ionicons
    "IoGift", "IoCart", "IoGameController", "IoDiamond", "IoFilm", "IoBicycle",
]  # fmt: skip

COLORS = [
    "#3B82F6",  # blue
    "#10B981",  # green
    "#F59E0B",  # amber
    "#EF4444",  # red
    "#8B5CF6",  # purple
    "#EC4899",  # pink
    "#06B6D4",  # cyan
    "#F97316",  # orange
    "#84CC16",  # lime
    "#6366F1",  # indigo
    "#14B8A6",  # teal
    "#F43F5E",  # rose
]


def random_icon_and_color() -> tuple[str, str]:
    return random.choice(ICONS), random.choice(COLORS)  # noqa: S311
