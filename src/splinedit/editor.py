"""Interactive curve editing state.

:class:`CurveEditor` holds what the window's input handlers change
(control points, weights, curve type, the point being dragged) and
hands it to the pure evaluators in :mod:`splinedit.curve` once per
frame.  It knows nothing about windows or GL: callers feed it cursor
positions in pixels and draw the :class:`CurveFrame` it returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from splinedit.config import EditorSettings
from splinedit.curve import CurveType, evaluate_curve
from splinedit.geom import Point, dist_xy
from splinedit.mesh import control_polygon


def window_to_ndc(x: float, y: float, width: int, height: int) -> Point:
    """Map a window pixel position to normalized device coordinates.

    The result lies on the ``z = 0`` plane with ``y`` pointing up.
    """

    ndc_x = 2.0 * float(x) / width - 1.0
    ndc_y = 1.0 - 2.0 * float(y) / height
    return (ndc_x, ndc_y, 0.0)


@dataclass(frozen=True)
class CurveFrame:
    """Everything the drawing layer needs for one frame."""

    curve_type: CurveType
    control_points: Tuple[Point, ...]
    control_polygon: Tuple[Point, ...]
    curve: Tuple[Point, ...]


class CurveEditor:
    """Control points, weights and drag state for one editable curve."""

    def __init__(self, settings: Optional[EditorSettings] = None,
                 curve_type: CurveType = CurveType.BEZIER) -> None:
        self.settings = settings or EditorSettings()
        self.curve_type = CurveType(curve_type)
        self.points: List[Point] = []
        self.weights: List[float] = []
        self.dragged: Optional[int] = None

    @property
    def dragging(self) -> bool:
        return self.dragged is not None

    def _ndc(self, x: float, y: float) -> Point:
        return window_to_ndc(x, y, self.settings.window_width, self.settings.window_height)

    def pick(self, position: Sequence[float]) -> Optional[int]:
        """Return the index of the first point within the pick radius."""

        for i, p in enumerate(self.points):
            if dist_xy(p, position) < self.settings.pick_radius:
                return i
        return None

    def press(self, x: float, y: float) -> int:
        """Handle a button press at window pixel ``(x, y)``.

        Grabs the nearest control point under the cursor for dragging,
        or appends a new point there.  Returns the affected index.
        """

        position = self._ndc(x, y)
        hit = self.pick(position)
        if hit is not None:
            self.dragged = hit
            logger.debug("dragging control point {}", hit)
            return hit
        self.points.append(position)
        self.weights.append(self.settings.default_weight)
        logger.debug("added control point {} at {}", len(self.points) - 1, position)
        return len(self.points) - 1

    def drag(self, x: float, y: float) -> None:
        """Move the grabbed point to window pixel ``(x, y)``."""

        if self.dragged is None or self.dragged >= len(self.points):
            return
        self.points[self.dragged] = self._ndc(x, y)

    def release(self) -> None:
        self.dragged = None

    def clear(self) -> None:
        """Remove every control point and weight."""

        self.points.clear()
        self.weights.clear()
        self.dragged = None
        logger.debug("cleared control points")

    def set_curve_type(self, curve_type: CurveType) -> None:
        self.curve_type = CurveType(curve_type)

    def set_weight(self, index: int, value: float) -> float:
        """Set one NURBS weight, clamped to the configured range."""

        self.sync_weights()
        if not 0 <= index < len(self.weights):
            raise IndexError(f"no control point {index}")
        s = self.settings
        clamped = min(max(float(value), s.weight_min), s.weight_max)
        self.weights[index] = clamped
        return clamped

    def sync_weights(self) -> None:
        """Refill weights with the default when the point count changed."""

        if len(self.weights) != len(self.points):
            logger.debug("resetting {} weights for {} control points",
                         len(self.weights), len(self.points))
            self.weights = [self.settings.default_weight] * len(self.points)

    def frame(self) -> CurveFrame:
        """Evaluate the current curve for drawing."""

        self.sync_weights()
        ctrl = tuple(self.points)
        curve: List[Point] = []
        if ctrl:
            curve = evaluate_curve(
                self.curve_type,
                ctrl,
                weights=self.weights,
                degree=self.settings.degree,
                num_samples=self.settings.curve_samples,
            )
        return CurveFrame(
            curve_type=self.curve_type,
            control_points=ctrl,
            control_polygon=tuple(control_polygon(ctrl)),
            curve=tuple(curve),
        )


__all__ = ["window_to_ndc", "CurveFrame", "CurveEditor"]
