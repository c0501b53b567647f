import pygame

from campfire_survival.renderer.ui import ShortcutButton, SimulationMode


def mouse(event_type, pos, button=1):
    return pygame.event.Event(event_type, pos=pos, button=button)


def make_pause_button(state):
    def toggle():
        state["mode"] = (
            SimulationMode.PAUSED if state["mode"] == SimulationMode.RUNNING else SimulationMode.RUNNING
        )

    return ShortcutButton.for_mode(
        pygame.Rect(10, 10, 100, 20), "SPACE",
        current_mode=lambda: state["mode"],
        lit_in=SimulationMode.PAUSED,
        labels={SimulationMode.RUNNING: "Pause", SimulationMode.PAUSED: "Resume"},
        on_click=toggle,
    )


def test_click_inside_fires_once():
    clicks = []
    button = ShortcutButton(pygame.Rect(0, 0, 50, 20), "R", lambda: "Restart", lambda: clicks.append(1))

    assert button.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (10, 10)))
    assert clicks == []
    assert button.handle_event(mouse(pygame.MOUSEBUTTONUP, (12, 8)))
    assert clicks == [1]


def test_release_outside_or_right_click_does_nothing():
    clicks = []
    button = ShortcutButton(pygame.Rect(0, 0, 50, 20), "R", lambda: "Restart", lambda: clicks.append(1))

    button.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (10, 10)))
    assert not button.handle_event(mouse(pygame.MOUSEBUTTONUP, (200, 200)))
    assert not button.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (10, 10), button=3))
    assert not button.handle_event(mouse(pygame.MOUSEBUTTONUP, (10, 10), button=3))
    # Press started outside the button
    button.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (200, 200)))
    assert not button.handle_event(mouse(pygame.MOUSEBUTTONUP, (10, 10)))
    assert clicks == []


def test_pause_button_follows_mode_changed_elsewhere():
    state = {"mode": SimulationMode.RUNNING}
    button = make_pause_button(state)
    assert button.label() == "Pause"
    assert not button.lit()

    # Paused from the keyboard, not through the button
    state["mode"] = SimulationMode.PAUSED
    assert button.label() == "Resume"
    assert button.lit()


def test_clicking_pause_button_toggles_mode():
    state = {"mode": SimulationMode.RUNNING}
    button = make_pause_button(state)

    button.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (20, 15)))
    button.handle_event(mouse(pygame.MOUSEBUTTONUP, (20, 15)))
    assert state["mode"] == SimulationMode.PAUSED
    assert button.lit()


def test_hover_tracks_mouse_motion():
    button = ShortcutButton(pygame.Rect(0, 0, 50, 20), "R", lambda: "Restart", lambda: None)
    button.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 5), rel=(0, 0), buttons=(0, 0, 0)))
    assert button.hovered
    button.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(90, 5), rel=(0, 0), buttons=(0, 0, 0)))
    assert not button.hovered
