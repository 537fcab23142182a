"""Named storage for engine assets, with per-type capacity limits."""

from __future__ import annotations

import sys
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Callable, Mapping, TextIO

from .image import Image
from .material import Material
from .meshdata import MeshData

__all__ = ["AssetType", "AssetManager"]


class AssetType(IntEnum):
    """Kinds of asset the manager keeps."""

    IMAGE = 0
    TEXTURE2D = 1
    FRAMEBUFFER = 2
    MESHDATA = 3
    MESH = 4
    SHADER = 5
    SHADERPROGRAM = 6
    MATERIAL = 7
    MAX = 8


_LABELS: dict[AssetType, tuple[str, str]] = {
    AssetType.IMAGE: ("Images", "ImageName"),
    AssetType.TEXTURE2D: ("Tex2Ds", "Tex2D"),
    AssetType.FRAMEBUFFER: ("FrameBuffers", "FrameBuffer"),
    AssetType.MESHDATA: ("Meshdatas", "Meshdata"),
    AssetType.MESH: ("Meshes", "Mesh"),
    AssetType.SHADER: ("Shaders", "Shader"),
    AssetType.SHADERPROGRAM: ("ShaderPrograms", "ShaderProgram"),
    AssetType.MATERIAL: ("Materials", "Material"),
}

_DEFAULT_FACTORIES: dict[AssetType, Callable[[], Any]] = {
    AssetType.IMAGE: Image,
    AssetType.MESHDATA: MeshData,
    AssetType.MATERIAL: Material,
}


def _check_type(asset_type: AssetType) -> AssetType:
    kind = AssetType(asset_type)
    if kind == AssetType.MAX:
        raise ValueError("AssetType.MAX is not an asset type")
    return kind


class AssetManager:
    """Creates, finds and destroys assets by type and name.

    Each type builds new assets with a factory; images, mesh data and
    materials have one by default, other types need one supplied.
    A type may be given a capacity; creating beyond it raises RuntimeError.
    """

    def __init__(
        self,
        factories: Mapping[AssetType, Callable[[], Any]] | None = None,
        capacities: Mapping[AssetType, int] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._factories = {**_DEFAULT_FACTORIES, **(factories or {})}
        self._capacities = dict(capacities or {})
        self._stream = stream
        self._assets: dict[AssetType, dict[str, Any]] = {
            kind: {} for kind in _LABELS
        }

    def create(self, asset_type: AssetType, name: str) -> Any:
        """Build a new asset and register it under ``name``."""
        kind = _check_type(asset_type)
        store = self._assets[kind]
        capacity = self._capacities.get(kind)
        if capacity is not None and len(store) >= capacity:
            raise RuntimeError(
                f"exceeds capacity of {capacity} for {kind.name.lower()} assets."
            )
        try:
            factory = self._factories[kind]
        except KeyError:
            raise KeyError(f"no factory registered for {kind.name}") from None
        asset = factory()
        store[name] = asset
        return asset

    def get(self, asset_type: AssetType, name: str) -> Any:
        """The asset registered under ``name``; KeyError if there is none."""
        store = self._assets[_check_type(asset_type)]
        try:
            return store[name]
        except KeyError:
            raise KeyError(f"cannot find asset named {name!r}") from None

    def destroy(self, asset_type: AssetType, name: str) -> None:
        """Remove the asset registered under ``name``."""
        store = self._assets[_check_type(asset_type)]
        try:
            del store[name]
        except KeyError:
            raise KeyError(f"cannot find asset named {name!r}") from None

    def assets(self, asset_type: AssetType) -> Mapping[str, Any]:
        """A read-only view of the assets of one type by name."""
        return MappingProxyType(self._assets[_check_type(asset_type)])

    def cleanup(self) -> dict[AssetType, list[str]]:
        """Warn about assets never destroyed and return their names by type."""
        stream = self._stream if self._stream is not None else sys.stdout
        remaining: dict[AssetType, list[str]] = {}
        for kind, (plural, label) in _LABELS.items():
            names = list(self._assets[kind])
            if not names:
                continue
            remaining[kind] = names
            print(f"Warning: Not all {plural} have been destroyed: ", file=stream)
            for name in names:
                print(f" {label}: {name} ", file=stream)
        return remaining