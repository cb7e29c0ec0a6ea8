from towerdefense.constants import FRAMERATE
from towerdefense.entities import Bullet, Enemy, Explosion
from towerdefense.geometry import Vector2D
from towerdefense.texture import Color


def test_bullet_moves_by_direction():
    start, direction = Vector2D(5, 5), Vector2D(1, -1)
    bullet = Bullet(start, direction)
    bullet.update()
    assert bullet.position == start + direction
    assert bullet.direction == direction


def test_bullet_texture():
    bullet = Bullet(Vector2D(), Vector2D(1, 0))
    assert bullet.texture.symbol == "o"
    assert bullet.texture.color is Color.BLUE


def test_enemy_starts_inactive():
    enemy = Enemy()
    assert enemy.active is False
    assert enemy.texture.symbol == "@"


def test_activate_and_deactivate():
    enemy = Enemy()
    enemy.activate(Vector2D(3, 4))
    assert enemy.active is True
    assert enemy.position == Vector2D(3, 4)
    enemy.deactivate()
    assert enemy.active is False


def test_next_position_reaches_target_in_chebyshev_steps():
    enemy = Enemy(position=Vector2D(0, 0), target=Vector2D(6, 2))
    steps = 0
    while enemy.position != enemy.target and steps < 100:
        enemy.position = enemy.next_position()
        steps += 1
    assert enemy.position == enemy.target
    assert steps == max(6, 2)


def test_next_position_at_target_stays():
    enemy = Enemy(position=Vector2D(4, 4), target=Vector2D(4, 4))
    assert enemy.next_position() == Vector2D(4, 4)


def test_next_position_moves_in_negative_direction():
    enemy = Enemy(position=Vector2D(5, 5), target=Vector2D(0, 5))
    nxt = enemy.next_position()
    assert nxt.x < 5
    assert nxt.y == 5


def test_full_speed_enemy_moves_every_frame():
    enemy = Enemy(position=Vector2D(0, 0), target=Vector2D(10, 0), velocity=FRAMERATE)
    expected = enemy.next_position()
    enemy.update()
    assert enemy.position == expected


def test_slow_enemy_waits_framerate_frames():
    enemy = Enemy(position=Vector2D(0, 0), target=Vector2D(10, 10), velocity=1)
    expected = enemy.next_position()
    for _ in range(FRAMERATE - 1):
        enemy.update()
    assert enemy.position == Vector2D(0, 0)
    enemy.update()
    assert enemy.position == expected
    assert enemy.frame_counter == 0


def test_zero_velocity_never_moves():
    enemy = Enemy(position=Vector2D(0, 0), target=Vector2D(5, 5), velocity=0)
    for _ in range(50):
        enemy.update()
    assert enemy.position == Vector2D(0, 0)


def test_enemies_compare_by_identity():
    assert Enemy() is not Enemy()
    assert (Enemy() == Enemy()) is False


def test_explosion_defaults():
    explosion = Explosion(Vector2D(1, 1))
    assert explosion.texture.symbol == "X"
    assert explosion.texture.color is Color.YELLOW


def test_explosion_custom_color():
    explosion = Explosion(Vector2D(1, 1), Color.LIME)
    assert explosion.texture.color is Color.LIME


def test_explosion_finishes_after_five_frames():
    explosion = Explosion(Vector2D())
    for _ in range(4):
        explosion.update()
    assert explosion.finished() is False
    explosion.update()
    assert explosion.finished() is True


def test_explosion_frames_do_not_go_negative():
    explosion = Explosion(Vector2D())
    for _ in range(20):
        explosion.update()
    assert explosion.frames_remaining == 0