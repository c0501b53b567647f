"""Pygame-CE renderer for playing the survival game."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from ..config import RendererConfig
from ..simulation.entity import ResourceType
from . import colors
from .keyboard import KeyboardInput
from .sprites import Sprites
from .ui import UI_COLORS, ShortcutButton, SimulationMode, Sparkline, StatBar

if TYPE_CHECKING:
    from ..simulation.controls import ActionState
    from ..simulation.entity import Resource
    from ..simulation.world import World


class PygameRenderer:
    """
    Pygame-based renderer and input adapter for the survival game.

    Renders:
    - Grass background and water pools
    - Trees, rocks, berries and campfires (sprites or shapes)
    - The player
    - Sidebar with the HUD, stat charts and session totals
    """

    def __init__(self, config: RendererConfig, profile_name: str = "classic"):
        """
        Initialize the renderer.

        Args:
            config: Renderer configuration
            profile_name: Tuning profile shown in the sidebar
        """
        self.config = config
        self.profile_name = profile_name
        self.window_width = config.window_width
        self.window_height = config.window_height
        self.sidebar_width = config.sidebar_width
        self.world_width = config.window_width - config.sidebar_width
        self.world_height = config.window_height

        # Initialize Pygame
        pygame.init()
        pygame.display.set_caption("Campfire Survival")

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        self.clock = pygame.time.Clock()

        # Fonts
        self.font_large = pygame.font.Font(None, 40)
        self.font_medium = pygame.font.Font(None, 22)
        self.font_small = pygame.font.Font(None, 18)

        # Pre-render some surfaces
        self._world_surface = pygame.Surface((self.world_width, self.world_height))
        self._sidebar_surface = pygame.Surface((self.sidebar_width, self.window_height))
        self._overlay_surface = pygame.Surface((self.world_width, self.world_height), pygame.SRCALPHA)

        # Needs a display mode for convert_alpha
        self.sprites = Sprites(config.assets_dir)

        self.keyboard = KeyboardInput()
        self.mode = SimulationMode.RUNNING
        self.restart_requested = False

        self._fps_history: list[float] = []

        self._init_ui()

    def _init_ui(self) -> None:
        """Initialize UI elements."""
        padding = 15
        bar_width = self.sidebar_width - padding * 2
        chart_width = self.sidebar_width - padding * 2

        pause_rect = pygame.Rect(padding, 10, 118, 26)
        self.btn_pause = ShortcutButton.for_mode(
            pause_rect, "SPACE",
            current_mode=lambda: self.mode,
            lit_in=SimulationMode.PAUSED,
            labels={SimulationMode.RUNNING: "Pause", SimulationMode.PAUSED: "Resume"},
            on_click=self._toggle_pause,
        )
        self.btn_restart = ShortcutButton(
            pygame.Rect(pause_rect.right + 6, 10, 86, 26), "R",
            label=lambda: "Restart",
            on_click=self._request_restart,
        )
        self.buttons = [self.btn_pause, self.btn_restart]

        # Positions are set during render
        self.bar_health = StatBar(padding, 0, bar_width, 10, "Health", UI_COLORS.chart_health)
        self.bar_hunger = StatBar(padding, 0, bar_width, 10, "Hunger", UI_COLORS.chart_hunger)
        self.bar_thirst = StatBar(padding, 0, bar_width, 10, "Thirst", UI_COLORS.chart_thirst)

        self.chart_health = Sparkline(padding, 0, chart_width, 40, color=UI_COLORS.chart_health)
        self.chart_hunger = Sparkline(padding, 0, chart_width, 40, color=UI_COLORS.chart_hunger)
        self.chart_thirst = Sparkline(padding, 0, chart_width, 40, color=UI_COLORS.chart_thirst)

    @property
    def actions(self) -> ActionState:
        """The held actions the simulation reads each tick."""
        return self.keyboard.actions

    def _toggle_pause(self) -> None:
        if self.mode == SimulationMode.RUNNING:
            self.mode = SimulationMode.PAUSED
        else:
            self.mode = SimulationMode.RUNNING

    def _request_restart(self) -> None:
        self.restart_requested = True

    def handle_events(self) -> bool:
        """
        Handle Pygame events.

        Returns:
            False if the window should close, True otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_SPACE:
                    self._toggle_pause()
                    continue
                if event.key == pygame.K_r:
                    self._request_restart()
                    continue

            if self.keyboard.handle_event(event):
                continue

            for btn in self.buttons:
                if btn.handle_event(event):
                    break

        return True

    def should_step(self) -> bool:
        """Check if simulation should step this frame."""
        return self.mode == SimulationMode.RUNNING

    def render(self, world: World) -> None:
        """
        Render the current state of the world.

        Args:
            world: The simulation world to render
        """
        self.screen.fill(colors.BG_DARK)

        self._render_world(world)
        self._render_sidebar(world)

        self.screen.blit(self._world_surface, (self.sidebar_width, 0))
        self.screen.blit(self._sidebar_surface, (0, 0))

        pygame.display.flip()

        # Track FPS
        self._fps_history.append(self.clock.get_fps())
        if len(self._fps_history) > 60:
            self._fps_history.pop(0)

    def _to_screen(self, world: World, x: float, y: float) -> tuple[int, int]:
        """Convert world coordinates to world-surface pixels."""
        return (
            int(x * self.world_width / world.width),
            int(y * self.world_height / world.height),
        )

    def _blit_centered(self, image: pygame.Surface, center: tuple[int, int]) -> None:
        rect = image.get_rect(center=center)
        self._world_surface.blit(image, rect)

    def _render_world(self, world: World) -> None:
        """Render the background, resources and player."""
        self._world_surface.fill(colors.WORLD_BG)

        # Draw a subtle grid pattern
        grid_size = 64
        for x in range(0, self.world_width, grid_size):
            pygame.draw.line(
                self._world_surface, colors.WORLD_BG_ACCENT, (x, 0), (x, self.world_height), 1
            )
        for y in range(0, self.world_height, grid_size):
            pygame.draw.line(
                self._world_surface, colors.WORLD_BG_ACCENT, (0, y), (self.world_width, y), 1
            )

        registry = world.registry
        for pool in registry.of_type(ResourceType.WATER):
            self._draw_water(world, pool)
        for tree in registry.of_type(ResourceType.TREE):
            self._draw_tree(world, tree)
        for rock in registry.of_type(ResourceType.ROCK):
            self._draw_rock(world, rock)
        for berry in registry.of_type(ResourceType.BERRY):
            self._draw_berry(world, berry)
        for campfire in registry.of_type(ResourceType.CAMPFIRE):
            self._draw_campfire(world, campfire)

        self._draw_player(world)

        if world.player.is_incapacitated:
            self._render_incapacitated_overlay(world)

    def _draw_water(self, world: World, pool: Resource) -> None:
        center = self._to_screen(world, pool.x, pool.y)
        radius = int(pool.radius * self.world_width / world.width)
        image = self.sprites.get_scaled("water", radius * 2)
        if image is not None:
            self._blit_centered(image, center)
            return

        # Translucent pool with a soft highlight
        size = radius * 2 + 2
        pool_surface = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(pool_surface, (*colors.WATER_COLOR, colors.WATER_ALPHA), (radius + 1, radius + 1), radius)
        pygame.draw.circle(
            pool_surface,
            colors.WATER_HIGHLIGHT,
            (int(radius * 0.8) + 1, int(radius * 0.8) + 1),
            int(radius * 0.6),
        )
        self._world_surface.blit(pool_surface, (center[0] - radius - 1, center[1] - radius - 1))

    def _draw_tree(self, world: World, tree: Resource) -> None:
        sx, sy = self._to_screen(world, tree.x, tree.y)
        image = self.sprites.get("tree")
        if image is not None:
            self._blit_centered(image, (sx, sy))
            return
        pygame.draw.rect(self._world_surface, colors.TREE_TRUNK, (sx - 6, sy + 6, 12, 18))
        pygame.draw.circle(self._world_surface, colors.TREE_CANOPY, (sx, sy), 24)

    def _draw_rock(self, world: World, rock: Resource) -> None:
        sx, sy = self._to_screen(world, rock.x, rock.y)
        image = self.sprites.get("rock")
        if image is not None:
            self._blit_centered(image, (sx, sy))
            return
        pygame.draw.ellipse(self._world_surface, colors.ROCK_COLOR, (sx - 18, sy - 14, 36, 28))

    def _draw_berry(self, world: World, berry: Resource) -> None:
        center = self._to_screen(world, berry.x, berry.y)
        image = self.sprites.get("berry")
        if image is not None:
            self._blit_centered(image, center)
            return
        pygame.draw.circle(self._world_surface, colors.BERRY_COLOR, center, 8)

    def _draw_campfire(self, world: World, campfire: Resource) -> None:
        center = self._to_screen(world, campfire.x, campfire.y)

        # Warmth radius
        warmth = int(world.player_config.campfire_radius * self.world_width / world.width)
        glow = pygame.Surface((warmth * 2, warmth * 2), pygame.SRCALPHA)
        pygame.draw.circle(glow, colors.CAMPFIRE_GLOW, (warmth, warmth), warmth)
        self._world_surface.blit(glow, (center[0] - warmth, center[1] - warmth))

        image = self.sprites.get("campfire")
        if image is not None:
            self._blit_centered(image, center)
            return
        pygame.draw.circle(self._world_surface, colors.CAMPFIRE_COLOR, center, 10)

    def _draw_player(self, world: World) -> None:
        player = world.player
        center = self._to_screen(world, player.x, player.y)

        # Reach ring
        reach = int(player.reach * self.world_width / world.width)
        ring = pygame.Surface((reach * 2 + 2, reach * 2 + 2), pygame.SRCALPHA)
        pygame.draw.circle(ring, colors.REACH_RING, (reach + 1, reach + 1), reach, 1)
        self._world_surface.blit(ring, (center[0] - reach - 1, center[1] - reach - 1))

        image = self.sprites.get("player")
        if image is not None:
            self._blit_centered(image, center)
            return
        color = colors.get_player_color(player.health)
        pygame.draw.circle(self._world_surface, color, center, int(player.size))

    def _render_incapacitated_overlay(self, world: World) -> None:
        self._overlay_surface.fill(colors.OVERLAY)
        self._world_surface.blit(self._overlay_surface, (0, 0))

        title = self.font_large.render("You collapsed", True, colors.TEXT_ALERT)
        self._world_surface.blit(
            title,
            ((self.world_width - title.get_width()) // 2, self.world_height // 2 - 30),
        )
        survived = f"Survived {world.stats.time_survived:.0f}s - press R to start again"
        hint = self.font_medium.render(survived, True, colors.TEXT_PRIMARY)
        self._world_surface.blit(
            hint,
            ((self.world_width - hint.get_width()) // 2, self.world_height // 2 + 10),
        )

    def _render_sidebar(self, world: World) -> None:
        """Render the sidebar with the HUD, charts and controls."""
        self._sidebar_surface.fill(colors.BG_SIDEBAR)

        # Draw divider line on right edge
        pygame.draw.line(
            self._sidebar_surface,
            colors.DIVIDER,
            (self.sidebar_width - 1, 0),
            (self.sidebar_width - 1, self.window_height),
            2,
        )

        padding = 15
        y = 10

        for btn in self.buttons:
            btn.render(self._sidebar_surface, self.font_small)
        y += 36

        avg_fps = sum(self._fps_history) / len(self._fps_history) if self._fps_history else 0
        status_text = f"Time: {world.stats.elapsed:.0f}s   FPS: {avg_fps:.0f}"
        status_surface = self.font_small.render(status_text, True, colors.TEXT_SECONDARY)
        self._sidebar_surface.blit(status_surface, (padding, y))
        y += 18

        seed_text = f"Seed: {world.seed}   Profile: {self.profile_name}"
        seed_surface = self.font_small.render(seed_text, True, colors.TEXT_SECONDARY)
        self._sidebar_surface.blit(seed_surface, (padding, y))
        y += 18

        y = self._render_divider(y, padding)

        # === SURVIVAL SECTION ===
        hud = world.hud()
        y = self._render_section_header("SURVIVAL", y, padding)
        for bar, value in (
            (self.bar_health, hud.health),
            (self.bar_hunger, hud.hunger),
            (self.bar_thirst, hud.thirst),
        ):
            bar.rect.y = y
            bar.render(self._sidebar_surface, self.font_small, value)
            y += 32

        y = self._render_divider(y, padding)

        # === INVENTORY SECTION ===
        y = self._render_section_header("INVENTORY", y, padding)
        inventory = f"Wood: {hud.wood}   Stone: {hud.stone}   Campfires: {hud.campfires}"
        inv_surface = self.font_small.render(inventory, True, colors.TEXT_PRIMARY)
        self._sidebar_surface.blit(inv_surface, (padding, y - 14))
        y += 10

        y = self._render_divider(y, padding)

        # === HISTORY SECTION ===
        y = self._render_section_header("HISTORY", y, padding)
        history = world.stats_history
        for chart, data in (
            (self.chart_health, history.health),
            (self.chart_hunger, history.hunger),
            (self.chart_thirst, history.thirst),
        ):
            chart.rect.y = y - 14
            chart.render(self._sidebar_surface, list(data))
            y += 46

        y = self._render_divider(y - 10, padding)

        # === SESSION SECTION ===
        stats = world.stats
        lines = [
            f"Trees felled: {stats.trees_felled}   Rocks mined: {stats.rocks_mined}",
            f"Berries eaten: {stats.berries_eaten}   Fires built: {stats.campfires_built}",
        ]
        for line in lines:
            line_surface = self.font_small.render(line, True, colors.TEXT_SECONDARY)
            self._sidebar_surface.blit(line_surface, (padding, y))
            y += 16
        y += 6

        y = self._render_divider(y, padding)

        hints = [
            "WASD / arrows move",
            "X chop   Z mine   C craft campfire",
            "SPACE pause   R restart   ESC quit",
        ]
        for hint in hints:
            hint_surface = self.font_small.render(hint, True, colors.TEXT_SECONDARY)
            self._sidebar_surface.blit(hint_surface, (padding, y))
            y += 16

    def _render_divider(self, y: int, padding: int) -> int:
        pygame.draw.line(
            self._sidebar_surface, colors.DIVIDER,
            (padding, y), (self.sidebar_width - padding, y)
        )
        return y + 8

    def _render_section_header(self, title: str, y: int, padding: int) -> int:
        """Render a section header and return new y position."""
        header_surface = self.font_small.render(title, True, UI_COLORS.accent)
        self._sidebar_surface.blit(header_surface, (padding, y))
        return y + 32  # Header height + gap + space for bar labels (15px above bar)

    def tick(self) -> float:
        """
        Advance the renderer clock and return delta time.

        Returns:
            Time elapsed since last tick in seconds.
        """
        return self.clock.tick(self.config.target_fps) / 1000.0

    def cleanup(self) -> None:
        """Clean up Pygame resources."""
        pygame.quit()
