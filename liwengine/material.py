"""Materials: a shader program plus named uniform parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable

__all__ = ["MaterialParamType", "MaterialParam", "Material"]

MAX_PARAM_NAME_LENGTH = 31


class MaterialParamType(IntEnum):
    """Kinds of value a material parameter can hold."""

    INT = 0
    FLOAT = 1
    IVEC4 = 2
    FVEC4 = 3
    TEX2D = 4


@dataclass(frozen=True)
class MaterialParam:
    """A named parameter value."""

    name: str
    value: Any


def _vec4(value: Iterable, kind: type) -> tuple:
    items = tuple(kind(v) for v in value)
    if len(items) != 4:
        raise ValueError(f"expected 4 components, got {len(items)}")
    return items


class Material:
    """A shader program and the parameters to feed it, grouped by type."""

    def __init__(self, shader_program: Any = None) -> None:
        self.shader_program = shader_program
        self._params: dict[MaterialParamType, list[MaterialParam]] = {
            kind: [] for kind in MaterialParamType
        }

    def _add(self, kind: MaterialParamType, name: str, value: Any) -> None:
        if len(name) > MAX_PARAM_NAME_LENGTH:
            raise ValueError(
                f"parameter name longer than {MAX_PARAM_NAME_LENGTH} characters: {name!r}"
            )
        self._params[kind].append(MaterialParam(name, value))

    def add_param_int(self, name: str, value: int) -> None:
        """Add an integer parameter."""
        self._add(MaterialParamType.INT, name, int(value))

    def add_param_float(self, name: str, value: float) -> None:
        """Add a float parameter."""
        self._add(MaterialParamType.FLOAT, name, float(value))

    def add_param_ivec4(self, name: str, value: Iterable[int]) -> None:
        """Add a four-component integer vector parameter."""
        self._add(MaterialParamType.IVEC4, name, _vec4(value, int))

    def add_param_fvec4(self, name: str, value: Iterable[float]) -> None:
        """Add a four-component float vector parameter."""
        self._add(MaterialParamType.FVEC4, name, _vec4(value, float))

    def add_param_tex2d(self, name: str, texture: Any) -> None:
        """Add a 2D texture parameter."""
        self._add(MaterialParamType.TEX2D, name, texture)

    def clear_params(self) -> None:
        """Remove every parameter."""
        for params in self._params.values():
            params.clear()

    def params(self, param_type: MaterialParamType) -> tuple[MaterialParam, ...]:
        """Parameters of one type, in the order they were added."""
        return tuple(self._params[MaterialParamType(param_type)])