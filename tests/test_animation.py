from villagedefense.animation import Animation, FrameRect


def _animation(idx_list, loop=True):
    anim = Animation()
    anim.loop = loop
    anim.interval = 1.0
    anim.set_frame_data((144, 96), 3, 2, idx_list)
    return anim


def test_frame_rects_cover_sheet():
    anim = _animation([0, 4])
    assert anim.frame_width * 3 == 144
    assert anim.frame_height * 2 == 96
    assert anim.frames[0] == FrameRect(0, 0, anim.frame_width, anim.frame_height)
    assert anim.frames[1] == FrameRect(48, 48, 48, 48)


def test_looping_wraps_to_first_frame():
    anim = _animation([0, 1, 2])
    anim.on_update(1.0)
    assert anim.current_frame() == anim.frames[1]
    anim.on_update(1.0)
    anim.on_update(1.0)
    assert anim.idx_frame == 0
    assert anim.current_frame() == anim.frames[0]


def test_non_loop_stops_on_last_and_calls_finish():
    finished = []
    anim = _animation([0, 1], loop=False)
    anim.on_finish = lambda: finished.append(True)
    for _ in range(4):
        anim.on_update(1.0)
    assert anim.idx_frame == len(anim.frames) - 1
    assert len(finished) == 3


def test_looping_never_calls_finish():
    finished = []
    anim = _animation([0, 1])
    anim.on_finish = lambda: finished.append(True)
    for _ in range(5):
        anim.on_update(1.0)
    assert finished == []


def test_reset_returns_to_first_frame():
    anim = _animation([0, 1, 2])
    anim.on_update(1.0)
    anim.on_update(0.5)
    anim.reset()
    assert anim.idx_frame == 0
    anim.on_update(0.5)
    assert anim.idx_frame == 0


def test_interval_property_round_trip():
    anim = Animation()
    anim.interval = 0.25
    assert anim.interval == 0.25