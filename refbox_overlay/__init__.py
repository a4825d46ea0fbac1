from refbox_overlay.data_sources.base import TrackingSource
from refbox_overlay.data_sources.snapshot import RobotSlot, SnapshotSource, TrackingSnapshot
from refbox_overlay.entities.game.field import FieldGeometry
from refbox_overlay.render.frame import FieldStateRenderer
from refbox_overlay.render.primitives import DisplayList
