import pytest

from fireduck.animation import Timer, TimerMode
from fireduck.balistics import FireballCooldown, update_cooldowns
from fireduck.movement import MovementController, Vec2
from fireduck.player import (
    CharacterController,
    FireballAttack,
    Player,
    PlayerAssets,
    record_directional_input,
    record_fire_input,
)


def _ready_cooldown():
    cooldown = FireballCooldown.new(1.0)
    update_cooldowns(cooldown, 1.0)
    return cooldown


def test_actions_are_first_in_first_out():
    controller = CharacterController()
    first = FireballAttack(Vec2(1.0, 0.0))
    second = FireballAttack(Vec2(-1.0, 0.0))
    controller.queue_action(first)
    controller.queue_action(second)
    assert controller.pop_action() == first
    assert controller.pop_action() == second


def test_pop_on_empty_queue_returns_none():
    assert CharacterController().pop_action() is None


def test_directional_input_is_normalised():
    controller = MovementController()
    record_directional_input(controller, Vec2(3.0, 4.0))
    assert controller.direction.length() == pytest.approx(1.0)
    assert controller.direction.x * 4.0 == pytest.approx(controller.direction.y * 3.0)


def test_zero_directional_input_stays_zero():
    controller = MovementController(direction=Vec2(1.0, 0.0))
    record_directional_input(controller, Vec2.ZERO)
    assert controller.direction == Vec2.ZERO


def test_fire_on_cooldown_queues_nothing():
    character = CharacterController()
    result = record_fire_input(FireballCooldown.new(1.0), character, MovementController())
    assert result is None
    assert character.pop_action() is None


def test_fire_when_idle_goes_right():
    character = CharacterController()
    result = record_fire_input(_ready_cooldown(), character, MovementController())
    assert result == FireballAttack(Vec2(1.0, 0.0))
    assert character.pop_action() == result


def test_fire_while_moving_uses_movement_direction():
    character = CharacterController()
    movement = MovementController(direction=Vec2(0.0, -2.0))
    result = record_fire_input(_ready_cooldown(), character, movement)
    assert result.direction == Vec2(0.0, -1.0)


def test_fire_accepts_any_object_with_timer():
    class Cooldown:
        timer = Timer.from_seconds(0.5, TimerMode.ONCE)

    Cooldown.timer.tick(0.5)
    character = CharacterController()
    assert record_fire_input(Cooldown(), character, MovementController()) is not None
    assert len(character.action_queue) == 1


def test_player_assets_paths():
    assets = PlayerAssets()
    assert assets.ducky == "images/ducky.png"
    assert len(assets.steps) == 4
    assert assets.steps[0] == "audio/sound_effects/step1.ogg"
    assert assets.steps[-1] == "audio/sound_effects/step4.ogg"


def test_player_atlas_index_follows_animation():
    player = Player()
    assert player.atlas_index == player.animation.atlas_index()
    assert player.ATLAS_TILE_SIZE == 32