"""Render-ready arrays and upload bookkeeping for the drawing layer.

The drawing layer owns the GPU objects.  :class:`GeometryBuffers`
keeps the CPU copy of what was last handed over so unchanged geometry
is not re-uploaded every frame.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import numpy as np

from splinedit.geom import to_vec3


def vertex_array(points: Sequence[Sequence[float]]) -> np.ndarray:
    """Pack points into a ``float32`` array of shape ``(N, 3)``.

    2D points are placed on the ``z = 0`` plane.
    """

    if len(points) == 0:
        return np.zeros((0, 3), dtype=np.float32)
    return np.asarray([to_vec3(p) for p in points], dtype=np.float32)


def index_array(indices: Sequence[int]) -> np.ndarray:
    """Pack triangle indices into a ``uint32`` array."""

    return np.asarray(indices, dtype=np.uint32).reshape(-1)


class GeometryBuffers:
    """Last-uploaded vertex and index data, keyed by layer.

    Each ``update_*`` method stores the new data and returns ``True`` if
    the layer changed (and therefore needs uploading).
    """

    LAYERS = ("control_points", "control_polygon", "curve", "surface", "wireframe")

    def __init__(self) -> None:
        self._vertices: Dict[str, np.ndarray] = {
            name: np.zeros((0, 3), dtype=np.float32) for name in self.LAYERS
        }
        self._surface_indices = np.zeros(0, dtype=np.uint32)
        self.surface_as_wireframe = False

    def _store(self, name: str, points: Sequence[Sequence[float]]) -> bool:
        data = vertex_array(points)
        if np.array_equal(data, self._vertices[name]):
            return False
        self._vertices[name] = data
        return True

    def update_control_points(self, points: Sequence[Sequence[float]]) -> bool:
        return self._store("control_points", points)

    def update_control_polygon(self, points: Sequence[Sequence[float]]) -> bool:
        return self._store("control_polygon", points)

    def update_curve(self, points: Sequence[Sequence[float]]) -> bool:
        return self._store("curve", points)

    def update_wireframe(self, lines: Sequence[Sequence[float]]) -> bool:
        return self._store("wireframe", lines)

    def update_surface(self, positions: Sequence[Sequence[float]],
                       indices: Sequence[int]) -> bool:
        idx = index_array(indices)
        changed = self._store("surface", positions)
        if not np.array_equal(idx, self._surface_indices):
            self._surface_indices = idx
            changed = True
        return changed

    def update_frame(self, frame) -> List[str]:
        """Store a :class:`~splinedit.editor.CurveFrame`; return the changed layers."""

        changed = []
        if self.update_control_points(frame.control_points):
            changed.append("control_points")
        if self.update_control_polygon(frame.control_polygon):
            changed.append("control_polygon")
        if self.update_curve(frame.curve):
            changed.append("curve")
        return changed

    def vertices(self, name: str) -> np.ndarray:
        """Return the stored ``(N, 3)`` array for a layer."""

        if name not in self._vertices:
            raise KeyError(f"unknown buffer layer: {name}")
        return self._vertices[name]

    @property
    def surface_indices(self) -> np.ndarray:
        return self._surface_indices

    def vertex_count(self, name: str) -> int:
        return int(self.vertices(name).shape[0])

    def surface_draw_count(self) -> Optional[int]:
        """Index count to draw for the surface.

        ``None`` when there is no surface, or while ``surface_as_wireframe``
        is set and only the wireframe layer is drawn.
        """

        if self.surface_as_wireframe or self._surface_indices.size == 0:
            return None
        return int(self._surface_indices.size)

    def wireframe_draw_count(self) -> Optional[int]:
        """Vertex count to draw for the wireframe, ``None`` when it is empty."""

        count = self.vertex_count("wireframe")
        return count or None


__all__ = ["vertex_array", "index_array", "GeometryBuffers"]
