"""VNode flag bits shared with the virtual node runtime."""

from __future__ import annotations

from enum import IntFlag


class VNodeFlags(IntFlag):
    Text = 1
    HtmlElement = 1 << 1
    ComponentClass = 1 << 2
    ComponentFunction = 1 << 3
    ComponentUnknown = 1 << 4
    HasKeyedChildren = 1 << 5
    HasNonKeyedChildren = 1 << 6
    SvgElement = 1 << 7
    MediaElement = 1 << 8
    InputElement = 1 << 9
    TextareaElement = 1 << 10
    SelectElement = 1 << 11
    Void = 1 << 12


NO_FLAGS = VNodeFlags(0)

ELEMENT_FLAGS_BY_TAG: dict[str, VNodeFlags] = {
    "svg": VNodeFlags.SvgElement,
    "input": VNodeFlags.InputElement,
    "textarea": VNodeFlags.TextareaElement,
    "select": VNodeFlags.SelectElement,
    "media": VNodeFlags.MediaElement,
}
