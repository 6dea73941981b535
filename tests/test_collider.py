from dataclasses import dataclass

from platformer.collider import Collider, Interact
from platformer.libs import Rect


@dataclass
class Block:
    rect: Rect
    solid: bool = True


def tile(x, y):
    return Rect(x, y, 0.0, 0.0, 40.0)


def test_no_objects_no_collision():
    collider = Collider()
    assert collider.collision(tile(0.0, 0.0), []) is False
    assert collider.interact is None


def test_standing_on_block_below():
    collider = Collider()
    player = Rect(0.0, 0.0, 5.0, 0.0, 40.0)
    below = Block(tile(0.0, 40.0))
    assert collider.collision(player, [below]) is True
    assert collider.interact == (Interact.BOTTOM, below.rect.top() - player.scale)


def test_hitting_block_above():
    collider = Collider()
    above = Block(tile(0.0, -40.0))
    assert collider.collision(tile(0.0, 0.0), [above]) is True
    assert collider.interact == (Interact.TOP, above.rect.bottom())


def test_block_on_the_left():
    collider = Collider()
    left = Block(tile(-40.0, 0.0))
    assert collider.collision(tile(0.0, 0.0), [left]) is True
    assert collider.interact == (Interact.LEFT, left.rect.right())


def test_block_on_the_right():
    collider = Collider()
    player = tile(0.0, 0.0)
    right = Block(tile(40.0, 0.0))
    assert collider.collision(player, [right]) is True
    assert collider.interact == (Interact.RIGHT, right.rect.left() - player.scale)


def test_exact_overlap_resolves_horizontally_to_right():
    collider = Collider()
    player = tile(10.0, 10.0)
    block = Block(tile(10.0, 10.0))
    assert collider.collision(player, [block]) is True
    assert collider.interact[0] is Interact.RIGHT


def test_non_solid_objects_are_ignored():
    collider = Collider()
    cloud = Block(tile(0.0, 40.0), solid=False)
    assert collider.collision(tile(0.0, 0.0), [cloud]) is False
    assert collider.interact is None


def test_distant_block_does_not_collide():
    collider = Collider()
    assert collider.collision(tile(0.0, 0.0), [Block(tile(200.0, 200.0))]) is False


def test_first_touching_solid_object_wins():
    collider = Collider()
    above = Block(tile(0.0, -40.0))
    below = Block(tile(0.0, 40.0))
    far = Block(tile(500.0, 500.0))
    assert collider.collision(tile(0.0, 0.0), [far, above, below]) is True
    assert collider.interact[0] is Interact.TOP


def test_previous_contact_is_kept_when_nothing_is_hit():
    collider = Collider()
    collider.collision(tile(0.0, 0.0), [Block(tile(0.0, 40.0))])
    before = collider.interact
    assert collider.collision(tile(0.0, 0.0), []) is False
    assert collider.interact == before