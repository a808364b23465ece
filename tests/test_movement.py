import math

from fireduck.movement import (
    MovementController,
    MovingBody,
    Vec2,
    Vec3,
    apply_gravity,
    apply_movement_damping,
    movement_to_physics,
)


def test_normalize_has_unit_length():
    v = Vec2(3.0, -7.0).normalize_or_zero()
    assert math.isclose(v.length(), 1.0)
    assert v.x > 0 and v.y < 0


def test_normalize_zero_stays_zero():
    assert Vec2(0.0, 0.0).normalize_or_zero() == Vec2.ZERO


def test_vec3_truncate_and_length():
    v = Vec3(1.0, 2.0, 2.0)
    assert v.truncate() == Vec2(1.0, 2.0)
    assert v.length_squared() == 1.0 + 4.0 + 4.0


def test_movement_to_physics_adds_and_clears():
    body = MovingBody(MovementController(Vec2(1.0, 0.0), 4.0), Vec2(0.0, 0.0))
    movement_to_physics([body])
    assert body.velocity == Vec2(4.0, 0.0)
    assert body.controller.direction == Vec2.ZERO


def test_movement_without_velocity_keeps_direction():
    body = MovingBody(MovementController(Vec2(0.0, 1.0)))
    movement_to_physics([body])
    assert body.velocity is None
    assert body.controller.direction == Vec2(0.0, 1.0)


def test_gravity_applies_to_both_components():
    body = MovingBody(velocity=Vec2(1.0, 1.0))
    apply_gravity([body], 0.5)
    assert math.isclose(body.velocity.x, 1.0 - 9.8 * 0.5)
    assert body.velocity.x == body.velocity.y


def test_damping_skips_fireballs_and_y():
    hero = MovingBody(velocity=Vec2(10.0, 5.0))
    fireball = MovingBody(velocity=Vec2(10.0, 5.0), is_fireball=True)
    apply_movement_damping([hero, fireball])
    assert math.isclose(hero.velocity.x, 10.0 * 0.9)
    assert hero.velocity.y == 5.0
    assert fireball.velocity == Vec2(10.0, 5.0)