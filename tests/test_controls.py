from space_game.controls import InputBuffer, Intent


def test_last_pressed_direction_wins():
    buf = InputBuffer()
    buf.press(Intent.LEFT)
    assert buf.direction == -1
    buf.press(Intent.RIGHT)
    assert buf.direction == 1


def test_release_only_clears_the_current_direction():
    buf = InputBuffer()
    buf.press(Intent.LEFT)
    buf.press(Intent.RIGHT)

    buf.release(Intent.LEFT)
    assert buf.direction == 1

    buf.release(Intent.RIGHT)
    assert buf.direction == 0


def test_release_without_press_does_nothing():
    buf = InputBuffer()
    buf.release(Intent.RIGHT)
    buf.release(Intent.FIRE)
    assert buf.direction == 0
    assert not buf.fire_requested


def test_fire_request_is_consumed_once():
    buf = InputBuffer()
    buf.press(Intent.FIRE)
    buf.press(Intent.FIRE)

    assert buf.take_fire()
    assert not buf.take_fire()


def test_drop_fire():
    buf = InputBuffer()
    buf.press(Intent.FIRE)
    buf.drop_fire()
    assert not buf.take_fire()


def test_fire_does_not_change_direction():
    buf = InputBuffer()
    buf.press(Intent.LEFT)
    buf.press(Intent.FIRE)
    assert buf.direction == -1
