from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from labelchart.config import ChartConfig
from labelchart.errors import MountError
from labelchart.raster import RasterSurface
from labelchart.recording import RecordingSurface
from labelchart.surface import DrawingSurface


class MountPoint(ABC):
    """A container that can host the drawing surface of one chart."""

    @abstractmethod
    def create_surface(self, config: ChartConfig) -> DrawingSurface:
        raise NotImplementedError


class RasterMount(MountPoint):
    def create_surface(self, config: ChartConfig) -> DrawingSurface:
        return RasterSurface(config.width, config.height, background=config.background)


class RecordingMount(MountPoint):
    def create_surface(self, config: ChartConfig) -> DrawingSurface:
        return RecordingSurface(width=config.width, height=config.height)


@dataclass
class MountRegistry:
    """Maps container ids to mount points."""

    _mounts: dict[str, MountPoint] = field(default_factory=dict)

    def register(self, container_id: str, mount: MountPoint) -> None:
        if not container_id or not isinstance(container_id, str):
            raise ValueError("container id must be a non-empty string")
        if not isinstance(mount, MountPoint):
            raise TypeError(f"mount must be a MountPoint, got {type(mount)!r}")
        self._mounts[container_id] = mount

    def unregister(self, container_id: str) -> None:
        self._mounts.pop(container_id, None)

    def ids(self) -> list[str]:
        return sorted(self._mounts)

    def resolve(self, handle: str | MountPoint) -> MountPoint:
        if isinstance(handle, MountPoint):
            return handle
        if isinstance(handle, str):
            mount = self._mounts.get(handle)
            if mount is None:
                raise MountError(f"no container registered with id {handle!r}")
            return mount
        raise MountError(f"container handle must be an id or a MountPoint, got {type(handle)!r}")


def resolve_mount(handle: object, registry: MountRegistry | None = None) -> MountPoint:
    if isinstance(handle, MountPoint):
        return handle
    if registry is None:
        raise MountError(f"cannot resolve container {handle!r} without a mount registry")
    return registry.resolve(handle)  # type: ignore[arg-type]


def mount_surface(mount: MountPoint, config: ChartConfig) -> DrawingSurface:
    try:
        surface = mount.create_surface(config)
    except (OSError, ValueError) as exc:
        raise MountError(f"container cannot host a drawing surface: {exc}") from exc
    if not isinstance(surface, DrawingSurface):
        raise MountError(f"container produced {type(surface).__name__}, not a drawing surface")
    return surface
