"""Reader for the simple Wavefront OBJ files the scene uses.

The reader expects the layout written by common exporters: vertex
positions, then normals, then texture coordinates, then a ``s 0`` line
followed by quad faces of the form ``f v/t/n v/t/n v/t/n v/t/n``.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

_INT_RE = re.compile(r"[+-]?[0-9]+")
_MASK32 = 0xFFFFFFFF


@dataclass
class Face:
    """One face: vertex indices and normal indices, both one-based."""

    id: int
    indices: list[int] = field(default_factory=list)
    normals: list[int] = field(default_factory=list)


@dataclass
class Model:
    """Interleaved vertex data ready for upload, with element indices."""

    vertices: list[float] = field(default_factory=list)
    normals: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


def _parse_float(token: str) -> float:
    if any(ch.isspace() for ch in token) or "_" in token:
        raise ValueError(f"invalid number in OBJ data: {token!r}")
    try:
        return float(np.float32(float(token)))
    except ValueError:
        raise ValueError(f"invalid number in OBJ data: {token!r}") from None


def _parse_int(token: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise ValueError(f"invalid index in OBJ data: {token!r}")
    return int(token)


def _flatten(pieces: list[str]) -> list[str]:
    return "".join(piece.replace("\n", " ") for piece in pieces).split(" ")


def _group_by_three(tokens: list[str]) -> dict[int, list[float]]:
    groups: dict[int, list[float]] = {}
    for position, token in enumerate(tokens):
        if token:
            groups.setdefault(position // 3, []).append(_parse_float(token))
    return groups


def parse_vertices(text: str) -> dict[int, list[float]]:
    """Vertex positions keyed by zero-based vertex number."""
    before_normals = text.partition("vn ")[0]
    pieces = before_normals.split("v ")[1:]
    return _group_by_three(_flatten(pieces))


def parse_normals(text: str) -> dict[int, list[float]]:
    """Vertex normals keyed by zero-based normal number."""
    section = text.partition("s ")[0]
    section = section.partition("vn ")[2]
    section = section.partition("vt ")[0]
    section = section.replace("vn ", "")
    return _group_by_three(_flatten(section.split("v ")))


def _face_tokens(text: str) -> list[str]:
    return _flatten(text.partition("s 0")[2].split("f "))


def _assign(faces: list[Face], position: int) -> Face:
    slot = position // 5
    if slot >= len(faces):
        raise ValueError("face data does not fit the expected quad layout")
    return faces[slot]


def parse_faces(text: str) -> list[Face]:
    """Faces listed after the ``s 0`` line."""
    tokens = _face_tokens(text)
    faces = [Face(number) for number in range(len(tokens) // 4)]

    for position, token in enumerate(tokens):
        vertex = token.partition("/")[0]
        if vertex:
            _assign(faces, position).indices.append(_parse_int(vertex) & _MASK32)

    for position, token in enumerate(tokens):
        normal = token.partition("/")[2].partition("/")[2]
        if normal:
            _assign(faces, position).normals.append(_parse_int(normal))

    return faces


def parse_obj(text: str) -> tuple[dict[int, list[float]], dict[int, list[float]], list[Face]]:
    """Vertices, normals and faces of an OBJ document."""
    return parse_vertices(text), parse_normals(text), parse_faces(text)


def load_obj(path) -> tuple[dict[int, list[float]], dict[int, list[float]], list[Face]]:
    """Read and parse an OBJ file."""
    return parse_obj(Path(path).read_text())


def build_model(
    vertices: dict[int, list[float]],
    normals: dict[int, list[float]],
    faces: list[Face],
) -> Model:
    """Interleave positions and normals of every face corner into a model."""
    data: list[float] = []
    indices: list[int] = []
    for face in faces:
        for corner, vertex_index in enumerate(face.indices):
            try:
                position = vertices[vertex_index - 1]
                normal = normals[face.normals[corner] - 1]
                xv, zv, yv = position[0], position[1], position[2]
                xn, zn, yn = normal[0], normal[1], normal[2]
            except (KeyError, IndexError):
                raise ValueError(
                    f"face {face.id} refers to missing vertex or normal data") from None
            data.extend((xv, xn, yv, yn, zv, zn))
            indices.append(corner)
    return Model(vertices=data, indices=indices)


def load_model(path) -> Model:
    """Read an OBJ file and build a model from it."""
    return build_model(*load_obj(path))