"""Immediate-mode user interface description."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional

from jolly.vec import Vec2, Vec3, Vec4


class Layout(Enum):
    GRID = auto()
    JUSTIFY = auto()


@dataclass
class UiContext:
    """Collects the elements declared while a component renders."""

    pressed: set[str] = field(default_factory=set)
    elements: list[str] = field(default_factory=list)
    layout: Optional[Layout] = None

    def grid(self) -> None:
        self.layout = Layout.GRID

    def justify(self) -> None:
        self.layout = Layout.JUSTIFY

    def button(self, name: str) -> bool:
        """Declare a button; return whether it was pressed."""
        self.elements.append(name)
        return name in self.pressed


UiRender = Callable[[UiContext, float], None]


@dataclass
class UiComponent:
    pos: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=Vec2)
    color: Vec3 = field(default_factory=Vec3)
    fn: Optional[UiRender] = None


@dataclass
class UiDefaults:
    background: Vec4 = field(default_factory=Vec4)
    element_foreground: Vec4 = field(default_factory=Vec4)
    element_background: Vec4 = field(default_factory=Vec4)
    element_hover: Vec4 = field(default_factory=Vec4)
    element_select: Vec4 = field(default_factory=Vec4)
    text_color: Vec4 = field(default_factory=Vec4)
    text_select: Vec4 = field(default_factory=Vec4)
    text_font: str = ""