import pygame

from campfire_survival.renderer.keyboard import KeyboardInput
from campfire_survival.simulation import Action, ResourceType

DT = 1 / 60


def key(event_type, key_code):
    return pygame.event.Event(event_type, key=key_code, mod=0, unicode="", scancode=0)


def test_wasd_and_arrows_map_to_movement():
    keyboard = KeyboardInput()
    keyboard.handle_event(key(pygame.KEYDOWN, pygame.K_w))
    keyboard.handle_event(key(pygame.KEYDOWN, pygame.K_RIGHT))
    assert keyboard.actions.held == {Action.UP, Action.RIGHT}

    keyboard.handle_event(key(pygame.KEYUP, pygame.K_w))
    assert keyboard.actions.held == {Action.RIGHT}


def test_action_stays_held_while_another_bound_key_is_down():
    keyboard = KeyboardInput()
    keyboard.handle_event(key(pygame.KEYDOWN, pygame.K_w))
    keyboard.handle_event(key(pygame.KEYDOWN, pygame.K_UP))

    keyboard.handle_event(key(pygame.KEYUP, pygame.K_UP))
    assert keyboard.actions.is_action_held(Action.UP)

    keyboard.handle_event(key(pygame.KEYUP, pygame.K_w))
    assert not keyboard.actions.is_action_held(Action.UP)


def test_mixed_keys_for_one_direction_release_in_any_order():
    keyboard = KeyboardInput()
    keyboard.handle_event(key(pygame.KEYDOWN, pygame.K_LEFT))
    keyboard.handle_event(key(pygame.KEYDOWN, pygame.K_a))
    keyboard.handle_event(key(pygame.KEYUP, pygame.K_a))
    assert keyboard.actions.held == {Action.LEFT}

    keyboard.handle_event(key(pygame.KEYUP, pygame.K_LEFT))
    assert keyboard.actions.held == frozenset()


def test_focus_loss_forgets_keys_that_were_down():
    keyboard = KeyboardInput()
    keyboard.handle_event(key(pygame.KEYDOWN, pygame.K_w))
    keyboard.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))

    # Only the up arrow is pressed after refocus
    keyboard.handle_event(key(pygame.KEYDOWN, pygame.K_UP))
    keyboard.handle_event(key(pygame.KEYUP, pygame.K_UP))
    assert keyboard.actions.held == frozenset()


def test_unbound_keys_are_ignored():
    keyboard = KeyboardInput()
    assert not keyboard.handle_event(key(pygame.KEYDOWN, pygame.K_q))
    assert keyboard.actions.held == frozenset()


def test_focus_loss_releases_everything():
    keyboard = KeyboardInput()
    keyboard.handle_event(key(pygame.KEYDOWN, pygame.K_x))
    keyboard.handle_event(key(pygame.KEYDOWN, pygame.K_a))
    keyboard.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))
    assert keyboard.actions.held == frozenset()


def test_holding_craft_key_builds_one_campfire(world):
    keyboard = KeyboardInput()
    world.player.wood = 6
    world.player.stone = 3

    keyboard.handle_event(key(pygame.KEYDOWN, pygame.K_c))
    for _ in range(10):
        world.step(keyboard.actions, DT)
    assert world.registry.count(ResourceType.CAMPFIRE) == 1

    # Release and press again
    keyboard.handle_event(key(pygame.KEYUP, pygame.K_c))
    keyboard.handle_event(key(pygame.KEYDOWN, pygame.K_c))
    world.step(keyboard.actions, DT)
    assert world.registry.count(ResourceType.CAMPFIRE) == 2
