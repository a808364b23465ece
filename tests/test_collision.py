import pytest

from fireduck.balistics import Fireball
from fireduck.collision import (
    Body,
    CollisionBundle,
    GroundDetection,
    RigidBodyKind,
    WallBundle,
    apply_explosion_shockwave,
    fireball_collisions,
    ground_sensor,
)
from fireduck.movement import MovementController, Vec2, Vec3


def _fireball(position):
    return Fireball(position=position, controller=MovementController())


def test_collision_bundle_defaults():
    bundle = CollisionBundle()
    assert (bundle.width, bundle.height) == (16.0, 16.0)
    assert bundle.rigid_body is RigidBodyKind.DYNAMIC
    assert bundle.sleeping


def test_collision_bundle_from_entity_instance_keeps_size():
    bundle = CollisionBundle.from_entity_instance(32, 48)
    assert (bundle.width, bundle.height) == (32.0, 48.0)
    assert bundle.rigid_body is RigidBodyKind.DYNAMIC


def test_wall_is_static_tile():
    wall = WallBundle()
    assert wall.rigid_body is RigidBodyKind.STATIC
    assert (wall.width, wall.height) == (16.0, 16.0)


def test_ground_sensor_points_down_below_entity():
    caster = ground_sensor()
    assert caster.origin == Vec2(0.0, -10.0)
    assert caster.direction == Vec2(0.0, -1.0)
    assert caster.max_distance == 5.0
    assert caster.height == 2.0
    assert 0.0 < caster.width < 16.0


def test_ground_detection_follows_hits():
    detection = GroundDetection()
    detection.update(["floor"])
    assert detection.on_ground is True
    detection.update([])
    assert detection.on_ground is False


def test_shockwave_pushes_body_away():
    body = Body("block", Vec3(100.0, 0.0, 0.0))
    hit = apply_explosion_shockwave(Vec3(), [body])
    assert hit == [body]
    assert body.external_impulse.x > 0.0
    assert body.external_impulse.y == pytest.approx(0.0)
    assert body.external_impulse.length() < 75000.0
    assert body.shockwave_hit.impulse == body.external_impulse


def test_closer_bodies_receive_stronger_impulse():
    near = Body("near", Vec3(0.0, 50.0, 0.0))
    far = Body("far", Vec3(0.0, -150.0, 0.0))
    apply_explosion_shockwave(Vec3(), [near, far])
    assert near.external_impulse.length() > far.external_impulse.length()
    assert near.external_impulse.y > 0.0
    assert far.external_impulse.y < 0.0


def test_shockwave_ignores_out_of_range_static_and_coincident():
    outside = Body("outside", Vec3(250.0, 0.0, 0.0))
    static = Body("static", Vec3(10.0, 0.0, 0.0), RigidBodyKind.STATIC)
    coincident = Body("same", Vec3())
    hit = apply_explosion_shockwave(Vec3(), [outside, static, coincident])
    assert hit == []
    assert outside.shockwave_hit is None
    assert static.external_impulse == Vec2.ZERO
    assert coincident.shockwave_hit is None


def test_fireball_collisions_explode_only_touching_fireballs():
    touching = _fireball(Vec3(0.0, 0.0, 1.0))
    flying = _fireball(Vec3(500.0, 500.0, 1.0))
    target = Body("block", Vec3(30.0, 0.0, 0.0))
    explosions, remaining = fireball_collisions(
        [touching, flying], [{"block"}, set()], [target]
    )
    assert [e.position for e in explosions] == [touching.position]
    assert remaining == [flying]
    assert target.shockwave_hit is not None
    assert target.external_impulse.x > 0.0


def test_fireball_collisions_require_matching_lengths():
    with pytest.raises(ValueError):
        fireball_collisions([_fireball(Vec3())], [], [])