from __future__ import annotations

from typing import Mapping
import xml.etree.ElementTree as ET


SVG_NS = "http://www.w3.org/2000/svg"


def fmt_number(value: float, decimals: int = 2) -> str:
    out = f"{float(value):.{decimals}f}"
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def _attr_name(key: str) -> str:
    # `class_` -> `class`, `stroke_width` -> `stroke-width`
    return key.rstrip("_").replace("_", "-")


def _attr_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return fmt_number(value)
    return str(value)


class SvgBuilder:
    """Small element-tree wrapper for emitting chart SVG markup."""

    def __init__(
        self,
        width: float,
        height: float,
        *,
        aria_label: str | None = None,
        title: str | None = None,
        description: str | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("svg width/height must be > 0")
        self.width = float(width)
        self.height = float(height)
        self.root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NS,
                "width": fmt_number(width),
                "height": fmt_number(height),
                "viewBox": f"0 0 {fmt_number(width)} {fmt_number(height)}",
                "role": "img",
            },
        )
        if aria_label:
            self.root.set("aria-label", aria_label)
        if title:
            ET.SubElement(self.root, "title").text = title
        if description:
            ET.SubElement(self.root, "desc").text = description
        self._defs: ET.Element | None = None

    def element(self, tag: str, parent: ET.Element | None = None, text: str | None = None, **attrs: object) -> ET.Element:
        node = ET.SubElement(
            self.root if parent is None else parent,
            tag,
            {_attr_name(k): _attr_value(v) for k, v in attrs.items() if v is not None},
        )
        if text is not None:
            node.text = text
        return node

    def group(self, parent: ET.Element | None = None, **attrs: object) -> ET.Element:
        return self.element("g", parent, **attrs)

    def style(self, css: str) -> ET.Element:
        return self.element("style", text=css)

    def line(self, x1: float, y1: float, x2: float, y2: float, parent: ET.Element | None = None, **attrs: object) -> ET.Element:
        return self.element("line", parent, x1=x1, y1=y1, x2=x2, y2=y2, **attrs)

    def path(self, d: str, parent: ET.Element | None = None, **attrs: object) -> ET.Element | None:
        if not d:
            return None
        return self.element("path", parent, d=d, **attrs)

    def circle(self, cx: float, cy: float, r: float, parent: ET.Element | None = None, **attrs: object) -> ET.Element:
        return self.element("circle", parent, cx=cx, cy=cy, r=r, **attrs)

    def rect(
        self, x: float, y: float, width: float, height: float, parent: ET.Element | None = None, **attrs: object
    ) -> ET.Element:
        return self.element("rect", parent, x=x, y=y, width=width, height=height, **attrs)

    def text(self, x: float, y: float, content: str, parent: ET.Element | None = None, **attrs: object) -> ET.Element:
        return self.element("text", parent, text=content, x=x, y=y, **attrs)

    def title(self, parent: ET.Element, content: str) -> ET.Element:
        return self.element("title", parent, text=content)

    def defs(self) -> ET.Element:
        if self._defs is None:
            self._defs = ET.Element("defs")
            self.root.insert(0, self._defs)
        return self._defs

    def clip_rect(self, clip_id: str, x: float, y: float, width: float, height: float) -> str:
        clip = ET.SubElement(self.defs(), "clipPath", {"id": clip_id})
        self.rect(x, y, width, height, parent=clip)
        return f"url(#{clip_id})"

    def linear_gradient(self, gradient_id: str, stops: Mapping[str, str], *, vertical: bool = True) -> str:
        coords = {"x1": "0", "x2": "0", "y1": "0", "y2": "1"} if vertical else {"x1": "0", "x2": "1", "y1": "0", "y2": "0"}
        gradient = ET.SubElement(self.defs(), "linearGradient", {"id": gradient_id, **coords})
        for offset, color in stops.items():
            ET.SubElement(gradient, "stop", {"offset": offset, "stop-color": color})
        return f"url(#{gradient_id})"

    def to_markup(self) -> str:
        return ET.tostring(self.root, encoding="unicode")
