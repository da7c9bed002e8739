import random
from concurrent.futures import Future

import pytest

import apps.heart as heart
from pulseheart import Canvas, create


@pytest.fixture
def fresh_build(monkeypatch):
    monkeypatch.setitem(heart._build, "future", None)
    monkeypatch.setenv("HEART_FRAMES", "2")
    monkeypatch.setenv("HEART_SEED", "3")


def test_load_options_defaults(monkeypatch):
    monkeypatch.delenv("HEART_SEED", raising=False)
    monkeypatch.delenv("HEART_FRAMES", raising=False)
    options = heart.load_options()
    assert options == {"frame_count": 20, "rng": None}


def test_load_options_seeded_rng_repeats(monkeypatch):
    monkeypatch.setenv("HEART_SEED", "10")
    a = heart.load_options()["rng"].random()
    b = heart.load_options()["rng"].random()
    assert a == b


@pytest.mark.parametrize("name,value", [("HEART_SEED", "abc"), ("HEART_FRAMES", "0")])
def test_load_options_rejects_bad_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(SystemExit):
        heart.load_options()


def test_render_plays_frames_once_built(fresh_build):
    canvas = Canvas()
    gen = heart.start(canvas.width, canvas.height).result(timeout=120)
    assert gen.frame_count == 2
    assert gen.center == (420, 340)

    heart.render(canvas, 0.0, 0)
    lit = canvas.buffer[:, :, 0].astype(bool).sum()
    assert lit > 1000
    assert not canvas.buffer[:, :, 1:].any()

    # Each precomputed frame is held for FRAME_HOLD ticks, then the sequence loops
    first = canvas.buffer.copy()
    heart.render(canvas, 0.0, heart.FRAME_HOLD - 1)
    assert (canvas.buffer == first).all()
    heart.render(canvas, 0.0, 2 * heart.FRAME_HOLD)
    assert (canvas.buffer == first).all()


def test_render_is_blank_while_building(fresh_build):
    future = Future()
    heart._build["future"] = future
    canvas = Canvas(20, 20)
    canvas.clear((9, 9, 9))
    heart.render(canvas, 0.0, 0)
    assert not canvas.buffer.any()


def test_report_prints_summary(capsys):
    future = Future()
    future.set_result(create((10, 10), 1, outline_count=20, rng=random.Random(0)))
    heart._report(future)
    assert "[heart] built 1 frames" in capsys.readouterr().out

    failed = Future()
    failed.set_exception(ValueError("boom"))
    heart._report(failed)
    assert "[heart] ERROR building frames: boom" in capsys.readouterr().out
