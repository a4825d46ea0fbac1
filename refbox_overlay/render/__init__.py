from refbox_overlay.render.aggregator import FrameObjects, ObjectStateAggregator
from refbox_overlay.render.arc import bres_circle_points, draw_bres_circle
from refbox_overlay.render.colors import COLORS
from refbox_overlay.render.field import FieldRenderer
from refbox_overlay.render.frame import FieldStateRenderer
from refbox_overlay.render.objects import draw_ball, draw_robot
from refbox_overlay.render.primitives import DisplayList, Primitive, PrimitiveType
from refbox_overlay.render.rules_overlay import RuleViolationOverlay, recent_rules
