"""Small 2D drawings built from polygons and lines, exported as SVG."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple
from xml.sax.saxutils import escape, quoteattr

Color = Tuple[float, float, float]
Point = Tuple[float, float]
_Matrix = Tuple[float, float, float, float, float, float]

_IDENTITY: _Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
_KINDS = frozenset({"polygon", "line_strip", "line_loop", "lines"})
_RED: Color = (1.0, 0.0, 0.0)
_WHITE: Color = (1.0, 1.0, 1.0)


def _multiply(m: _Matrix, n: _Matrix) -> _Matrix:
    """Compose two affine maps so that ``n`` is applied first."""
    a1, b1, c1, d1, e1, f1 = m
    a2, b2, c2, d2, e2, f2 = n
    return (
        a1 * a2 + c1 * b2,
        b1 * a2 + d1 * b2,
        a1 * c2 + c1 * d2,
        b1 * c2 + d1 * d2,
        a1 * e2 + c1 * f2 + e1,
        b1 * e2 + d1 * f2 + f1,
    )


class TransformStack:
    """Current 2D transform plus a stack of saved ones.

    Each operation is composed on the right, so the most recent operation is
    the first applied to a point.
    """

    def __init__(self) -> None:
        self._current: _Matrix = _IDENTITY
        self._saved: List[_Matrix] = []

    def _compose(self, matrix: _Matrix) -> None:
        self._current = _multiply(self._current, matrix)

    def translate(self, dx: float, dy: float) -> None:
        self._compose((1.0, 0.0, 0.0, 1.0, float(dx), float(dy)))

    def scale(self, sx: float, sy: float) -> None:
        self._compose((float(sx), 0.0, 0.0, float(sy), 0.0, 0.0))

    def rotate(self, degrees: float) -> None:
        """Rotate counter-clockwise by ``degrees`` about the origin."""
        radians = math.radians(degrees)
        cos, sin = math.cos(radians), math.sin(radians)
        self._compose((cos, sin, -sin, cos, 0.0, 0.0))

    def push(self) -> None:
        """Save the current transform."""
        self._saved.append(self._current)

    def pop(self) -> None:
        """Restore the last saved transform; raises IndexError when none is saved."""
        if not self._saved:
            raise IndexError("transform stack underflow")
        self._current = self._saved.pop()

    def apply(self, point: Point) -> Point:
        """Map a point through the current transform."""
        x, y = point
        a, b, c, d, e, f = self._current
        return (a * x + c * y + e, b * x + d * y + f)


@dataclass(frozen=True)
class Primitive:
    """One drawn shape: a filled polygon or a line figure."""

    kind: str
    color: Color
    points: Tuple[Point, ...]
    line_width: float = 1.0

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"unknown primitive kind {self.kind!r}")
        if self.kind == "lines" and len(self.points) % 2:
            raise ValueError("lines need an even number of points")


def _fmt(value: float) -> str:
    text = f"{round(float(value), 6) + 0.0:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _hex(color: Color) -> str:
    return "#" + "".join(f"{round(min(max(c, 0.0), 1.0) * 255):02x}" for c in color)


def _points_attr(points: Iterable[Point]) -> str:
    return " ".join(f"{_fmt(x)},{_fmt(y)}" for x, y in points)


def _svg_element(primitive: Primitive) -> List[str]:
    colour = _hex(primitive.color)
    stroke = (
        f'fill="none" stroke="{colour}" stroke-width="{_fmt(primitive.line_width)}" '
        'vector-effect="non-scaling-stroke"'
    )
    points = _points_attr(primitive.points)
    if primitive.kind == "polygon":
        return [f'<polygon points="{points}" fill="{colour}"/>']
    if primitive.kind == "line_loop":
        return [f'<polygon points="{points}" {stroke}/>']
    if primitive.kind == "line_strip":
        return [f'<polyline points="{points}" {stroke}/>']
    ends = iter(primitive.points)
    return [
        f'<line x1="{_fmt(x1)}" y1="{_fmt(y1)}" x2="{_fmt(x2)}" y2="{_fmt(y2)}" {stroke}/>'
        for (x1, y1), (x2, y2) in zip(ends, ends)
    ]


@dataclass(frozen=True)
class Scene:
    """A window size, an orthographic view (left, right, bottom, top) and shapes."""

    title: str
    width: int
    height: int
    view: Tuple[float, float, float, float]
    primitives: Tuple[Primitive, ...]
    background: Color = field(default=_WHITE)

    def to_svg(self) -> str:
        """Render the scene as an SVG document with the y axis pointing up."""
        left, right, bottom, top = self.view
        view_width, view_height = right - left, top - bottom
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" '
            f'height="{self.height}" viewBox="{_fmt(left)} {_fmt(-top)} '
            f'{_fmt(view_width)} {_fmt(view_height)}" preserveAspectRatio="none">',
            f"<title>{escape(self.title)}</title>",
            '<g transform="scale(1,-1)">',
            f'<rect x="{_fmt(left)}" y="{_fmt(bottom)}" width="{_fmt(view_width)}" '
            f'height="{_fmt(view_height)}" fill={quoteattr(_hex(self.background))}/>',
        ]
        for primitive in self.primitives:
            lines.extend(_svg_element(primitive))
        lines.extend(["</g>", "</svg>"])
        return "\n".join(lines) + "\n"


def circle(x: float, y: float, radius: float, segments: int) -> Tuple[Point, ...]:
    """Return ``segments`` points evenly spaced on a circle, starting at angle 0."""
    return tuple(
        (
            x + math.cos(i * 2 * math.pi / segments) * radius,
            y + math.sin(i * 2 * math.pi / segments) * radius,
        )
        for i in range(segments)
    )


class _Painter:
    """Collects primitives under a current colour, line width and transform."""

    def __init__(self) -> None:
        self.transform = TransformStack()
        self.color: Color = _WHITE
        self.line_width = 1.0
        self.primitives: List[Primitive] = []

    def draw(self, kind: str, points: Iterable[Point]) -> None:
        mapped = tuple(self.transform.apply(p) for p in points)
        self.primitives.append(Primitive(kind, self.color, mapped, self.line_width))

    def circle(self, x: float, y: float, radius: float, segments: int) -> None:
        self.color = _RED
        self.draw("line_loop", circle(x, y, radius, segments))


def boat_scene() -> Scene:
    """A sailing boat on a wavy sea under a pale sky."""
    width, height = 700, 700
    sail = ((0, 100), (-100, 100), (0, 300))
    paint = _Painter()
    paint.line_width = 3.0

    paint.color = (0.8, 0.8, 1.0)
    paint.draw("polygon", [(-width, -height), (-width, 7000), (width, 7000), (width, -height)])
    paint.color = (0.2, 0.2, 1.0)
    paint.draw("polygon", [(-width, -height), (-width, 0), (width, 0), (width, -height)])
    paint.color = (0.4, 0.2, 0.2)
    paint.draw("polygon", [(-200, 100), (-100, 0), (100, 0), (200, 100)])
    paint.color = (0.7, 0.0, 1.0)
    paint.draw("polygon", sail)

    paint.transform.push()
    paint.transform.scale(-1, 1)
    paint.transform.scale(0.6, 0.6)
    paint.transform.translate(0, 65)
    paint.color = (0.9, 0.9, 0.3)
    paint.draw("polygon", sail)
    paint.transform.pop()

    paint.transform.push()
    paint.transform.rotate(-90)
    paint.transform.scale(0.4, 0.4)
    paint.transform.translate(-600, -100)
    paint.color = _RED
    paint.draw("polygon", sail)
    paint.transform.pop()

    paint.line_width = 7.0
    paint.color = (0.5, 0.3, 0.0)
    paint.draw("lines", [(0, 100), (0, 300)])

    for step in range(15):
        offset = 100 * step
        paint.color = (0.2, 0.2, 1.0)
        paint.draw("polygon", [(-620 + offset, 30), (-670 + offset, -50), (-700 + offset, 0)])

    return Scene("barquinho", 700, 900, (-700, 700, -900, 900), tuple(paint.primitives))


def house_scene() -> Scene:
    """A house with a door, a window and a triangular roof."""
    paint = _Painter()
    paint.color = (0.7, 0.5, 0.1)
    paint.draw("polygon", [(100, 100), (100, 500), (600, 500), (600, 100)])
    paint.color = (0.3, 0.5, 0.8)
    paint.draw("polygon", [(150, 100), (150, 250), (250, 250), (250, 100)])
    paint.color = (0.3, 0.5, 0.1)
    paint.draw("polygon", [(450, 250), (550, 250), (550, 350), (450, 350)])
    paint.color = (1.0, 0.1, 0.1)
    paint.draw("polygon", [(100, 500), (600, 500), (350, 700)])
    return Scene("casa", 700, 700, (0, 700, 0, 700), tuple(paint.primitives))


def squares_scene() -> Scene:
    """A small circle under three nested squares, each three quarters the last."""
    square = [(-300, -300), (-300, 300), (300, 300), (300, -300)]
    paint = _Painter()
    paint.line_width = 3.0
    paint.circle(0, 0, 20, 100)
    for index, colour in enumerate([(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)]):
        if index:
            paint.transform.scale(0.75, 0.75)
        paint.color = colour
        paint.draw("polygon", square)
    return Scene("quadrados", 700, 700, (-700, 700, -700, 700), tuple(paint.primitives))


def tree_scene() -> Scene:
    """A green triangle topped by a zig-zag black line."""
    paint = _Painter()
    paint.color = (0.3, 0.8, 0.3)
    paint.draw("polygon", [(200, 10), (500, 10), (350, 400)])
    paint.color = (0.0, 0.0, 0.0)
    paint.line_width = 3.0
    paint.draw(
        "line_strip",
        [
            (350, 400), (350, 450), (500, 450), (500, 450), (500, 500),
            (250, 500), (250, 550), (450, 550), (450, 600), (300, 600),
            (300, 640), (350, 640), (350, 680),
        ],
    )
    return Scene("triangulo1", 700, 700, (0, 700, 0, 700), tuple(paint.primitives))


def triangles_scene() -> Scene:
    """A triangle, a doubled copy of it and a small circle."""
    triangle = [(100, 100), (200, 100), (150, 200)]
    paint = _Painter()
    paint.color = (1.0, 1.0, 0.0)
    paint.line_width = 3.0
    paint.draw("polygon", triangle)
    paint.transform.translate(200, 200)
    paint.transform.translate(0, -200)

    paint.transform.push()
    paint.color = (0.3, 0.8, 0.3)
    paint.transform.scale(2, 2)
    paint.transform.translate(-175, 0)
    paint.draw("polygon", triangle)
    paint.transform.pop()

    paint.color = (0.2, 0.2, 1.0)
    paint.circle(-50, 420, 20, 100)
    return Scene("triangulo2", 700, 700, (0, 700, 0, 700), tuple(paint.primitives))


_SCENES: Dict[str, Callable[[], Scene]] = {
    "boat": boat_scene,
    "house": house_scene,
    "squares": squares_scene,
    "tree": tree_scene,
    "triangles": triangles_scene,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Write one of the scenes as SVG to a file or standard output."""
    parser = argparse.ArgumentParser(description="Render a drawing as SVG.")
    parser.add_argument("scene", choices=sorted(_SCENES))
    parser.add_argument("-o", "--output", help="file to write; standard output if omitted")
    args = parser.parse_args(argv)
    svg = _SCENES[args.scene]().to_svg()
    if args.output:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.write(svg)
    else:
        sys.stdout.write(svg)
    return 0


if __name__ == "__main__":
    sys.exit(main())