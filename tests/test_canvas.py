import numpy as np

from pulseheart import Canvas, Particle

RED = (255, 0, 0)


def lit_pixels(canvas):
    return {(int(x), int(y)) for y, x in zip(*np.nonzero(canvas.buffer[:, :, 0]))}


def test_default_size():
    canvas = Canvas()
    assert canvas.buffer.shape == (680, 840, 3)
    assert canvas.buffer.dtype == np.uint8


def test_clear_with_color():
    canvas = Canvas(3, 3)
    canvas.clear((9, 8, 7))
    assert (canvas.buffer == (9, 8, 7)).all()
    canvas.clear()
    assert not canvas.buffer.any()


def test_rect_is_clipped():
    canvas = Canvas(8, 4)
    canvas.rect(6, 2, 5, 5, RED)
    assert lit_pixels(canvas) == {(6, 2), (7, 2), (6, 3), (7, 3)}
    canvas.rect(-10, -10, 3, 3, (0, 0, 255))
    assert not canvas.buffer[:, :, 2].any()


def test_draw_particles_paints_squares():
    canvas = Canvas(10, 10)
    canvas.draw_particles([Particle(2.7, 3.2, 2), Particle(8, 8, 3)], RED)
    assert lit_pixels(canvas) == {(2, 3), (3, 3), (2, 4), (3, 4), (8, 8), (9, 8), (8, 9), (9, 9)}


def test_draw_particles_off_canvas_is_ignored():
    canvas = Canvas(10, 10)
    canvas.draw_particles([Particle(-50, 4, 2), Particle(4, 400, 1), Particle(-1.5, -1.5, 2)], RED)
    # Only (-1.5, -1.5) with size 2 reaches pixel (0, 0)
    assert lit_pixels(canvas) == {(0, 0)}
    assert tuple(canvas.buffer[0, 0]) == RED
