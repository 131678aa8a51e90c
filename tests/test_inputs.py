import pytest

from dungeon.inputs import (
    KEY_MAX,
    MAX_INPUT_BUFFER_SIZE,
    Input,
    InputHandler,
    make_input,
)


def _recorder(log, label):
    return lambda: log.append(label)


def test_make_input_binds_key_and_action():
    log = []
    item = make_input(30, _recorder(log, "a"))
    assert item.key == 30
    item.execute()
    assert log == ["a"]


def test_make_input_accepts_key_max():
    assert make_input(KEY_MAX, lambda: None).key == KEY_MAX


def test_make_input_rejects_key_above_max():
    with pytest.raises(ValueError):
        make_input(KEY_MAX + 1, lambda: None)


def test_buffer_size_is_clamped():
    handler = InputHandler(owner=None, buffer_size=MAX_INPUT_BUFFER_SIZE + 100)
    assert handler.buffer_size == MAX_INPUT_BUFFER_SIZE
    assert handler.owner is None


def test_zero_buffer_size_rejected():
    with pytest.raises(ValueError):
        InputHandler(owner=None, buffer_size=0)


def test_update_on_empty_queue_does_nothing():
    handler = InputHandler(owner="snake", buffer_size=4)
    handler.update()
    assert handler.last_input is None
    assert len(handler) == 0


def test_inputs_run_in_order_one_per_update():
    log = []
    handler = InputHandler(owner="snake", buffer_size=4)
    assert handler.add(Input(1, _recorder(log, "left")))
    assert handler.add(Input(2, _recorder(log, "right")))
    handler.update()
    assert log == ["left"]
    handler.update()
    assert log == ["left", "right"]
    assert len(handler) == 0


def test_queue_holds_one_less_than_its_size():
    log = []
    handler = InputHandler(owner=None, buffer_size=3)
    assert handler.add(Input(1, _recorder(log, "a")))
    assert handler.add(Input(2, _recorder(log, "b")))
    assert not handler.add(Input(3, _recorder(log, "c")))
    assert len(handler) == handler.capacity
    for _ in range(3):
        handler.update()
    assert log == ["a", "b"]


def test_size_one_queue_accepts_nothing():
    handler = InputHandler(owner=None, buffer_size=1)
    assert not handler.add(Input(1, lambda: None))
    assert len(handler) == 0


def test_repeated_key_is_consumed_without_running():
    log = []
    handler = InputHandler(owner=None, buffer_size=8)
    first = Input(5, _recorder(log, "first"))
    repeat = Input(5, _recorder(log, "repeat"))
    handler.add(first)
    handler.add(repeat)
    handler.update()
    handler.update()
    assert log == ["first"]
    assert handler.last_input is first
    assert len(handler) == 0


def test_same_key_runs_again_after_another_key():
    log = []
    handler = InputHandler(owner=None, buffer_size=8)
    for key, label in [(5, "x"), (6, "y"), (5, "z")]:
        handler.add(Input(key, _recorder(log, label)))
    for _ in range(3):
        handler.update()
    assert log == ["x", "y", "z"]


def test_space_frees_after_update():
    handler = InputHandler(owner=None, buffer_size=2)
    assert handler.add(Input(1, lambda: None))
    assert not handler.add(Input(2, lambda: None))
    handler.update()
    assert handler.add(Input(2, lambda: None))