"""UI widgets for the sidebar."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

import pygame


class SimulationMode(Enum):
    """Whether the game loop advances the world."""

    RUNNING = auto()
    PAUSED = auto()


@dataclass
class UIColors:
    """Color scheme for UI elements."""

    # Background
    bg: tuple[int, int, int] = (30, 32, 40)
    bg_hover: tuple[int, int, int] = (45, 48, 58)
    bg_active: tuple[int, int, int] = (55, 58, 70)

    # Accents
    accent: tuple[int, int, int] = (255, 170, 60)
    accent_dim: tuple[int, int, int] = (140, 95, 40)

    # Text
    text: tuple[int, int, int] = (220, 225, 235)
    text_dim: tuple[int, int, int] = (140, 145, 155)

    # Bars and charts
    bar_track: tuple[int, int, int] = (50, 52, 62)
    chart_health: tuple[int, int, int] = (230, 80, 80)
    chart_hunger: tuple[int, int, int] = (240, 170, 70)
    chart_thirst: tuple[int, int, int] = (90, 160, 255)
    chart_bg: tuple[int, int, int] = (25, 27, 35)


UI_COLORS = UIColors()


class StatBar:
    """A labelled horizontal bar for a 0-100 stat."""

    def __init__(self, x: int, y: int, width: int, height: int, label: str, color: tuple[int, int, int]):
        self.rect = pygame.Rect(x, y, width, height)
        self.label = label
        self.color = color

    def render(self, surface: pygame.Surface, font: pygame.font.Font, value: int) -> None:
        """Render the bar filled to `value` percent, with its label above."""
        label_surface = font.render(self.label, True, UI_COLORS.text_dim)
        surface.blit(label_surface, (self.rect.x, self.rect.y - 15))

        value_surface = font.render(str(value), True, UI_COLORS.text)
        surface.blit(value_surface, (self.rect.right - value_surface.get_width(), self.rect.y - 15))

        pygame.draw.rect(surface, UI_COLORS.bar_track, self.rect, border_radius=3)
        fill_width = int(self.rect.width * max(0, min(100, value)) / 100)
        if fill_width > 0:
            fill_rect = pygame.Rect(self.rect.x, self.rect.y, fill_width, self.rect.height)
            pygame.draw.rect(surface, self.color, fill_rect, border_radius=3)


class Sparkline:
    """A mini line chart for displaying time-series data."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        color: tuple[int, int, int] = UI_COLORS.chart_health,
        bg_color: tuple[int, int, int] = UI_COLORS.chart_bg,
    ):
        """
        Initialize a sparkline chart.

        Args:
            x: X position
            y: Y position
            width: Chart width
            height: Chart height
            color: Line color
            bg_color: Background color
        """
        self.rect = pygame.Rect(x, y, width, height)
        self.color = color
        self.bg_color = bg_color

    def render(
        self,
        surface: pygame.Surface,
        data: Sequence[float],
        min_val: float = 0.0,
        max_val: float = 100.0,
    ) -> None:
        """
        Render the sparkline chart.

        Args:
            surface: Surface to render on
            data: Sequence of values to plot
            min_val: Value drawn at the bottom edge
            max_val: Value drawn at the top edge
        """
        pygame.draw.rect(surface, self.bg_color, self.rect, border_radius=3)

        if len(data) < 2:
            return

        value_range = max_val - min_val if max_val > min_val else 1.0

        padding = 2
        chart_width = self.rect.width - padding * 2
        chart_height = self.rect.height - padding * 2

        points: list[tuple[int, int]] = []
        for i, value in enumerate(data):
            x = self.rect.x + padding + int(i * chart_width / (len(data) - 1))
            normalized = max(0.0, min(1.0, (value - min_val) / value_range))
            y = self.rect.y + padding + int((1 - normalized) * chart_height)
            points.append((x, y))

        pygame.draw.lines(surface, self.color, False, points, 2)


class ShortcutButton:
    """
    Sidebar button that mirrors a keyboard shortcut.

    The label and highlight are read back from the owner on every frame, so
    the button always agrees with whatever SPACE or R last did. A click only
    fires when the left button goes down and comes back up over the button.
    """

    def __init__(
        self,
        rect: pygame.Rect,
        hotkey: str,
        label: Callable[[], str],
        on_click: Callable[[], None],
        lit: Callable[[], bool] = lambda: False,
    ):
        self.rect = rect
        self.hotkey = hotkey
        self.label = label
        self.on_click = on_click
        self.lit = lit
        self.hovered = False
        self._armed = False

    @classmethod
    def for_mode(
        cls,
        rect: pygame.Rect,
        hotkey: str,
        current_mode: Callable[[], SimulationMode],
        lit_in: SimulationMode,
        labels: dict[SimulationMode, str],
        on_click: Callable[[], None],
    ) -> ShortcutButton:
        """Button whose label follows the simulation mode and lights up in `lit_in`."""
        return cls(
            rect,
            hotkey,
            label=lambda: labels[current_mode()],
            on_click=on_click,
            lit=lambda: current_mode() == lit_in,
        )

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Track hover and clicks.

        Returns:
            True if the event was a left click on the button
        """
        if event.type == pygame.MOUSEMOTION:
            self.hovered = bool(self.rect.collidepoint(event.pos))
            return False
        if event.type not in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP) or event.button != 1:
            return False

        inside = bool(self.rect.collidepoint(event.pos))
        if event.type == pygame.MOUSEBUTTONDOWN:
            self._armed = inside
            return inside

        fire = self._armed and inside
        self._armed = False
        if fire:
            self.on_click()
        return fire

    def render(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Render the label, the shortcut hint and the highlight."""
        lit = self.lit()
        if lit:
            fill, text_color, hint_color = UI_COLORS.accent, UI_COLORS.bg, UI_COLORS.bg_active
        else:
            if self._armed:
                fill = UI_COLORS.bg_active
            elif self.hovered:
                fill = UI_COLORS.bg_hover
            else:
                fill = UI_COLORS.bg
            text_color, hint_color = UI_COLORS.text, UI_COLORS.text_dim

        pygame.draw.rect(surface, fill, self.rect, border_radius=4)
        border = UI_COLORS.accent if lit else UI_COLORS.accent_dim
        pygame.draw.rect(surface, border, self.rect, width=1, border_radius=4)

        # Label on the left, shortcut key on the right
        inner = self.rect.inflate(-12, 0)
        label_surface = font.render(self.label(), True, text_color)
        surface.blit(label_surface, label_surface.get_rect(midleft=inner.midleft))
        hint_surface = font.render(self.hotkey, True, hint_color)
        surface.blit(hint_surface, hint_surface.get_rect(midright=inner.midright))
