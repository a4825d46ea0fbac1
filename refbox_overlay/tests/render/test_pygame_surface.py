import logging
import math

from refbox_overlay.config.enums import Team
from refbox_overlay.data_sources.snapshot import RobotSlot, SnapshotSource, TrackingSnapshot
from refbox_overlay.entities.data.tracking import Pose, RobotPercept, RobotSample
from refbox_overlay.entities.game.field import FieldGeometry
from refbox_overlay.render.colors import COLORS
from refbox_overlay.render.frame import FieldStateRenderer
from refbox_overlay.render.primitives import DisplayList
from refbox_overlay.render.pygame_surface import PygameSurface

GEO = FieldGeometry.standard()


def _pixel(canvas: PygameSurface, x: int, y: int):
    return tuple(int(c) for c in canvas.to_array()[y, x])


def test_field_fits_window(pygame_offscreen):
    canvas = PygameSurface(GEO, window_size=(1000, 730))
    assert canvas._pos_transform(0, 0) == (500, 365)
    left, top = canvas._pos_transform(-GEO.half_width, GEO.half_height)
    right, bottom = canvas._pos_transform(GEO.half_width, -GEO.half_height)
    assert 0 <= left < right <= 1000
    assert 0 <= top < bottom <= 730


def test_y_axis_points_up(pygame_offscreen):
    canvas = PygameSurface(GEO, window_size=(1000, 730))
    dl = DisplayList()
    dl.rect(0, 2000, 200, COLORS["RED"])
    canvas.draw(dl)
    _, y = canvas._pos_transform(0, 2000)
    assert y < 365
    assert _pixel(canvas, 500, y) == COLORS["RED"]
    assert _pixel(canvas, 500, 365) == COLORS["FIELD_GREEN"]


def test_every_primitive_type_draws(pygame_offscreen):
    canvas = PygameSurface(GEO, window_size=(740, 540))
    dl = DisplayList()
    dl.points([(0, 0), (10, 10)], COLORS["WHITE"])
    dl.line_strip([(0, 0), (1000, 0), (1000, 1000)], COLORS["WHITE"], width=2)
    dl.lines([(-1000, 0), (-2000, 0)], COLORS["RED"], width=3)
    dl.polygon([(0, 0), (500, 0), (0, 500)], COLORS["ORANGE"])
    dl.polygon([(0, 0)], COLORS["ORANGE"])
    dl.rect(-500, -500, 100, COLORS["GREY"])
    dl.text(0, 0, "7", COLORS["BLACK"], 18, centered=True)
    dl.text(-1480, 2052, "internal Play_State: HALTED", COLORS["WHITE"], 10)
    surface = canvas.draw(dl)
    assert surface.get_size() == (740, 540)
    assert canvas.to_array().shape == (540, 740, 3)


def test_full_frame(pygame_offscreen):
    renderer = FieldStateRenderer(SnapshotSource(TrackingSnapshot(timestamp=0.0)))
    canvas = PygameSurface(GEO)
    canvas.draw(renderer.render())
    pixels = canvas.to_array()
    # the white outline is somewhere on screen
    assert (pixels == COLORS["WHITE"]).all(axis=2).any()


def test_non_finite_primitives_are_skipped(pygame_offscreen, caplog):
    snapshot = TrackingSnapshot(
        timestamp=0.0,
        robots={
            (0, 1): RobotSlot(
                model=RobotSample(Team.YELLOW, 1, Pose(0, 0, math.nan)),
                percepts=[RobotPercept(0, 0, Team.YELLOW, rotation=math.nan, rotation_known=True)],
            )
        },
    )
    dl = FieldStateRenderer(SnapshotSource(snapshot)).render()
    dl.rect(math.inf, 0, 100, COLORS["RED"])
    canvas = PygameSurface(GEO)
    with caplog.at_level(logging.WARNING):
        canvas.draw(dl)
    assert "non-finite points" in caplog.text
    # the rest of the frame is still drawn
    assert (canvas.to_array() == COLORS["WHITE"]).all(axis=2).any()
