"""Small vector and matrix value types."""

from __future__ import annotations

from dataclasses import astuple, dataclass, field
from typing import Any, Iterator


class _Components:
    def __iter__(self) -> Iterator[Any]:
        return iter(astuple(self, tuple_factory=tuple)
                    if not any(isinstance(v, _Components) for v in vars(self).values())
                    else tuple(vars(self).values()))


@dataclass
class Vec2(_Components):
    x: Any = 0
    y: Any = 0


@dataclass
class Vec3(_Components):
    x: Any = 0
    y: Any = 0
    z: Any = 0


@dataclass
class Vec4(_Components):
    x: Any = 0
    y: Any = 0
    z: Any = 0
    w: Any = 0


@dataclass
class Mat2(_Components):
    x: Vec2 = field(default_factory=Vec2)
    y: Vec2 = field(default_factory=Vec2)


@dataclass
class Mat3(_Components):
    x: Vec3 = field(default_factory=Vec3)
    y: Vec3 = field(default_factory=Vec3)
    z: Vec3 = field(default_factory=Vec3)


@dataclass
class Mat4(_Components):
    x: Vec4 = field(default_factory=Vec4)
    y: Vec4 = field(default_factory=Vec4)
    z: Vec4 = field(default_factory=Vec4)
    w: Vec4 = field(default_factory=Vec4)