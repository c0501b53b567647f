"""Color definitions for the renderer."""

# Background
BG_DARK = (28, 28, 32)
BG_SIDEBAR = (38, 38, 45)

# World background - grass
WORLD_BG = (58, 162, 74)
WORLD_BG_ACCENT = (64, 170, 80)

# Player
PLAYER_COLOR = (30, 144, 255)  # Dodger blue
PLAYER_DOWN = (110, 110, 120)

# Resources
TREE_TRUNK = (107, 61, 24)
TREE_CANOPY = (13, 122, 47)
ROCK_COLOR = (127, 127, 128)
BERRY_COLOR = (220, 20, 60)  # Crimson
WATER_COLOR = (30, 120, 255)
WATER_ALPHA = 217
WATER_HIGHLIGHT = (255, 255, 255, 20)
CAMPFIRE_COLOR = (255, 165, 0)  # Orange
CAMPFIRE_GLOW = (255, 140, 40, 40)

# Reach / warmth hints
REACH_RING = (255, 255, 255, 20)

# UI
TEXT_PRIMARY = (240, 240, 245)
TEXT_SECONDARY = (160, 160, 170)
TEXT_ALERT = (255, 110, 100)
DIVIDER = (60, 60, 70)
OVERLAY = (0, 0, 0, 140)


def lerp_color(
    color1: tuple[int, int, int],
    color2: tuple[int, int, int],
    t: float,
) -> tuple[int, int, int]:
    """Linearly interpolate between two colors."""
    t = max(0.0, min(1.0, t))
    return (
        int(color1[0] + (color2[0] - color1[0]) * t),
        int(color1[1] + (color2[1] - color1[1]) * t),
        int(color1[2] + (color2[2] - color1[2]) * t),
    )


def get_player_color(health: float) -> tuple[int, int, int]:
    """Fade the player towards grey as health runs out."""
    return lerp_color(PLAYER_DOWN, PLAYER_COLOR, health / 100)
