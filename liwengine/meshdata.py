"""Mesh vertex data: loading, primitive shapes and normal/tangent generation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

__all__ = ["PrimitiveType", "SubMesh", "MeshData"]


class PrimitiveType(IntEnum):
    """How the index array is grouped into primitives."""

    TRIANGLES = 0
    MAX = 1


@dataclass(frozen=True)
class SubMesh:
    """A range ``[idx_beg, idx_end)`` of the index array."""

    idx_beg: int
    idx_end: int


def _empty(width: int) -> np.ndarray:
    return np.zeros((0, width), dtype=np.float32)


def _normalize(vectors: np.ndarray) -> np.ndarray:
    with np.errstate(divide="ignore", invalid="ignore"):
        lengths = np.linalg.norm(vectors, axis=1, keepdims=True)
        return (vectors / lengths).astype(np.float32)


def _resolve_index(token: str, count: int, lineno: int) -> int:
    try:
        value = int(token)
    except ValueError:
        raise ValueError(f"line {lineno}: bad index {token!r}") from None
    if value > 0:
        index = value - 1
    elif value < 0:
        index = count + value
    else:
        raise ValueError(f"line {lineno}: index 0 is not allowed")
    if not 0 <= index < count:
        raise ValueError(f"line {lineno}: index {value} out of range")
    return index


class MeshData:
    """Vertex attributes and indices of a mesh, assumed to be indexed."""

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.positions = _empty(3)
        self.normals = _empty(3)
        self.tangents = _empty(4)
        self.texcoords = _empty(2)
        self.colours = _empty(3)
        self.indices = np.zeros(0, dtype=np.uint32)
        self.submeshes: list[SubMesh] = []
        self.primitive_type = PrimitiveType.MAX

    def is_valid(self) -> bool:
        """Whether the mesh data holds loaded geometry."""
        return self.primitive_type != PrimitiveType.MAX

    def triangle_count(self) -> int:
        """Number of triangles described by the index array."""
        return len(self.indices) // 3

    def _require_empty(self) -> None:
        if self.is_valid():
            raise RuntimeError("meshdata already loaded.")

    def _require_triangles(self) -> None:
        if not self.is_valid():
            raise RuntimeError("meshdata not loaded.")
        if self.primitive_type != PrimitiveType.TRIANGLES:
            raise NotImplementedError("only triangle primitives are supported.")

    def _triangles(self) -> np.ndarray:
        count = self.triangle_count()
        return self.indices[: count * 3].astype(np.int64).reshape(count, 3)

    # Loading

    def load_obj(self, path: str | os.PathLike, flip_texcoord_v: bool = True) -> None:
        """Load a Wavefront OBJ file; polygons are split into triangle fans.

        Every face corner becomes its own vertex, and each object or group
        becomes one submesh.
        """
        self._require_empty()

        verts: list[list[float]] = []
        vert_colours: list[list[float]] = []
        has_colours = False
        norms: list[list[float]] = []
        texs: list[list[float]] = []
        shapes: list[list[list[tuple[int, int | None, int | None]]]] = [[]]

        with open(path, encoding="utf-8") as fh:
            for lineno, raw in enumerate(fh, 1):
                line = raw.split("#", 1)[0].strip()
                if not line:
                    continue
                tag, *fields = line.split()
                try:
                    if tag == "v":
                        nums = [float(f) for f in fields]
                        if len(nums) < 3:
                            raise ValueError("vertex needs 3 coordinates")
                        verts.append(nums[:3])
                        if len(nums) >= 6:
                            vert_colours.append(nums[3:6])
                            has_colours = True
                        else:
                            vert_colours.append([1.0, 1.0, 1.0])
                    elif tag == "vn":
                        nums = [float(f) for f in fields]
                        if len(nums) < 3:
                            raise ValueError("normal needs 3 components")
                        norms.append(nums[:3])
                    elif tag == "vt":
                        nums = [float(f) for f in fields]
                        if not nums:
                            raise ValueError("texcoord needs a component")
                        texs.append((nums + [0.0])[:2])
                except ValueError as exc:
                    raise ValueError(f"line {lineno}: {exc}") from None
                if tag == "f":
                    corners = []
                    for token in fields:
                        parts = token.split("/")
                        vi = _resolve_index(parts[0], len(verts), lineno)
                        ti = (
                            _resolve_index(parts[1], len(texs), lineno)
                            if len(parts) > 1 and parts[1]
                            else None
                        )
                        ni = (
                            _resolve_index(parts[2], len(norms), lineno)
                            if len(parts) > 2 and parts[2]
                            else None
                        )
                        corners.append((vi, ti, ni))
                    if len(corners) < 3:
                        raise ValueError(f"line {lineno}: face needs 3 vertices")
                    for k in range(1, len(corners) - 1):
                        shapes[-1].append([corners[0], corners[k], corners[k + 1]])
                elif tag in ("o", "g") and shapes[-1]:
                    shapes.append([])

        shapes = [shape for shape in shapes if shape]
        use_normal = bool(norms)
        use_texcoord = bool(texs)

        positions, normals, texcoords, colours = [], [], [], []
        submeshes: list[SubMesh] = []
        count = 0
        for shape in shapes:
            begin = count
            for face in shape:
                for vi, ti, ni in face:
                    positions.append(verts[vi])
                    if use_normal:
                        if ni is None:
                            raise ValueError("face corner without a normal")
                        normals.append(norms[ni])
                    if use_texcoord:
                        if ti is None:
                            raise ValueError("face corner without a texcoord")
                        u, v = texs[ti]
                        texcoords.append([u, 1.0 - v if flip_texcoord_v else v])
                    if has_colours:
                        colours.append(vert_colours[vi])
                    count += 1
            submeshes.append(SubMesh(begin, count))

        if count == 0:
            raise ValueError("no index array generated.")

        self.positions = np.array(positions, dtype=np.float32).reshape(-1, 3)
        self.normals = np.array(normals, dtype=np.float32).reshape(-1, 3)
        self.texcoords = np.array(texcoords, dtype=np.float32).reshape(-1, 2)
        self.colours = np.array(colours, dtype=np.float32).reshape(-1, 3)
        self.tangents = _empty(4)
        self.indices = np.arange(count, dtype=np.uint32)
        self.submeshes = submeshes
        self.primitive_type = PrimitiveType.TRIANGLES

    def unload(self) -> None:
        """Drop all geometry."""
        if not self.is_valid():
            raise RuntimeError("meshdata not loaded.")
        self._reset()

    # Generation

    def generate_normals(self) -> bool:
        """Replace normals with area-weighted averages of the face normals."""
        self._require_triangles()
        positions = self.positions.astype(np.float32)
        normals = np.zeros_like(positions)
        tris = self._triangles()
        a, b, c = tris[:, 0], tris[:, 1], tris[:, 2]
        face = np.cross(positions[a] - positions[b], positions[c] - positions[b])
        for corner in (a, b, c):
            np.add.at(normals, corner, face)
        self.normals = _normalize(normals)
        return True

    def generate_tangents(self) -> bool:
        """Replace tangents from texcoords; False if there are none."""
        self._require_triangles()
        if len(self.texcoords) == 0:
            return False

        positions = self.positions.astype(np.float32)
        texcoords = self.texcoords.astype(np.float32)
        tangents = np.zeros((len(positions), 4), dtype=np.float32)
        tris = self._triangles()
        a, b, c = tris[:, 0], tris[:, 1], tris[:, 2]

        ba = positions[b] - positions[a]
        ca = positions[c] - positions[a]
        tba = texcoords[b] - texcoords[a]
        tca = texcoords[c] - texcoords[a]

        with np.errstate(divide="ignore", invalid="ignore"):
            det = tba[:, 0] * tca[:, 1] - tba[:, 1] * tca[:, 0]
            i00 = (tca[:, 1] / det)[:, None]
            i01 = (-tca[:, 0] / det)[:, None]
            i10 = (-tba[:, 1] / det)[:, None]
            i11 = (tba[:, 0] / det)[:, None]
            tangent = ba * i00 + ca * i01
            binormal = ba * i10 + ca * i11
            normal = np.cross(ca, ba)
            bi_cross = np.cross(normal, tangent)
            dots = np.einsum("ij,ij->i", bi_cross, binormal)
        handedness = np.where(dots < 0.0, -1.0, 1.0).astype(np.float32)
        face = np.hstack([tangent, handedness[:, None]]).astype(np.float32)

        for corner in (a, b, c):
            np.add.at(tangents, corner, face)

        sign = np.where(tangents[:, 3] > 0.0, 1.0, -1.0).astype(np.float32)
        result = np.empty_like(tangents)
        result[:, :3] = _normalize(tangents[:, :3])
        result[:, 3] = sign
        self.tangents = result
        return True

    # Primitive shapes

    @classmethod
    def create_cube(cls) -> MeshData:
        """A unit cube centred at the origin with texcoords and colours."""
        positions: list[tuple[float, float, float]] = []
        texcoords: list[tuple[float, float]] = []
        indices: list[int] = []
        halves = (-0.5, 0.5)

        def close_face() -> None:
            idx = len(positions)
            indices.extend([idx - 2, idx - 3, idx - 1, idx - 3, idx - 2, idx - 4])

        for z in halves:
            s = np.sign(z)
            for y in halves:
                for x in halves:
                    positions.append((s * x, y, z))
                    texcoords.append((x + 0.5, y + 0.5))
            close_face()

        for x in halves:
            s = np.sign(-x)
            for y in halves:
                for z in halves:
                    positions.append((x, y, s * z))
                    texcoords.append((z + 0.5, y + 0.5))
            close_face()

        for y in halves:
            s = np.sign(y)
            for z in (0.5, -0.5):
                for x in halves:
                    positions.append((x, y, s * z))
                    texcoords.append((x + 0.5, -z + 0.5))
            close_face()

        mesh = cls()
        mesh.positions = np.array(positions, dtype=np.float32)
        mesh.texcoords = np.array(texcoords, dtype=np.float32)
        mesh.colours = np.ones((len(positions), 3), dtype=np.float32)
        mesh.indices = np.array(indices, dtype=np.uint32)
        mesh.submeshes = [SubMesh(0, len(indices))]
        mesh.primitive_type = PrimitiveType.TRIANGLES
        mesh.generate_normals()
        mesh.generate_tangents()
        return mesh

    @classmethod
    def create_plane(cls) -> MeshData:
        """A 2x2 plane in XZ facing +Y."""
        mesh = cls()
        mesh.positions = np.array(
            [
                [-1.0, 0.0, 1.0],
                [-1.0, 0.0, -1.0],
                [1.0, 0.0, 1.0],
                [1.0, 0.0, -1.0],
            ],
            dtype=np.float32,
        )
        mesh.indices = np.array([0, 3, 1, 2, 3, 0], dtype=np.uint32)
        mesh.texcoords = np.array(
            [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]], dtype=np.float32
        )
        mesh.colours = np.ones((4, 3), dtype=np.float32)
        mesh.normals = np.tile(np.array([0.0, 1.0, 0.0], dtype=np.float32), (4, 1))
        mesh.tangents = np.tile(
            np.array([1.0, 0.0, 0.0, 1.0], dtype=np.float32), (4, 1)
        )
        mesh.submeshes = [SubMesh(0, 6)]
        mesh.primitive_type = PrimitiveType.TRIANGLES
        return mesh