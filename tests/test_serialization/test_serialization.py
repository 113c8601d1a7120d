"""Tests for get_json / from_json."""

import json
from dataclasses import dataclass

import pytest

from selectorkit import css_selector_builder
from selectorkit.errors import SerializationError
from selectorkit.model import Fragment, FragmentKind, Rectangle, Selector
from selectorkit.serialization import from_json, get_json


class Circle:
    def __init__(self, radius: float) -> None:
        self.radius = radius

    def get_circumference(self) -> float:
        return 2 * 3.14 * self.radius


@dataclass
class Point:
    x: int
    y: int


# ---------------------------------------------------------------------------
# get_json
# ---------------------------------------------------------------------------


class TestGetJson:
    def test_list(self):
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_dict(self):
        assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_dataclass(self):
        assert get_json(Rectangle(width=10, height=20)) == '{"width":10,"height":20}'

    def test_plain_object(self):
        assert get_json(Circle(10)) == '{"radius":10}'

    def test_nested_objects(self):
        assert get_json({"shapes": [Point(1, 2)]}) == '{"shapes":[{"x":1,"y":2}]}'

    def test_unserializable(self):
        with pytest.raises(TypeError):
            get_json({1, 2})


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_plain_class_gets_behaviour(self):
        circle = from_json(Circle, '{"radius":10}')
        assert isinstance(circle, Circle)
        assert circle.radius == 10
        assert circle.get_circumference() == pytest.approx(62.8)

    def test_frozen_dataclass(self):
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.area() == 200

    def test_round_trip_preserves_fields(self):
        for obj in (Rectangle(width=3, height=4), Point(x=-1, y=7)):
            restored = from_json(type(obj), get_json(obj))
            assert restored == obj
            assert vars(restored) == vars(obj)

    def test_extra_keys_kept(self):
        p = from_json(Point, '{"x":1,"y":2,"label":"origin"}')
        assert p.label == "origin"  # type: ignore[attr-defined]

    def test_malformed_json(self):
        with pytest.raises(SerializationError) as info:
            from_json(Point, "{not json")
        assert info.value.cause is not None

    def test_non_object(self):
        with pytest.raises(SerializationError):
            from_json(Point, "[1,2,3]")


# ---------------------------------------------------------------------------
# Non-instances and package values
# ---------------------------------------------------------------------------


class TestGetJsonRejectsNonInstances:
    def test_function(self):
        with pytest.raises(TypeError):
            get_json(lambda: 0)

    def test_class(self):
        with pytest.raises(TypeError):
            get_json(Rectangle)

    def test_module(self):
        with pytest.raises(TypeError):
            get_json(pytest)


class TestGetJsonSelector:
    def test_fragment(self):
        frag = Fragment(kind=FragmentKind.PSEUDO_CLASS, value="hover")
        assert get_json(frag) == '{"kind":"pseudo-class","value":"hover"}'

    def test_selector(self):
        sel = css_selector_builder.element("a").class_("nav")
        assert json.loads(get_json(sel)) == {
            "fragments": [
                {"kind": "element", "value": "a"},
                {"kind": "class", "value": "nav"},
            ],
            "combined": None,
        }

    def test_combined_selector(self):
        sel = css_selector_builder.combine(
            css_selector_builder.element("ul"), ">", css_selector_builder.element("li")
        )
        assert json.loads(get_json(sel)) == {"fragments": [], "combined": "ul > li"}

    def test_selector_round_trip_renders_same(self):
        sel = css_selector_builder.id("main").attr("data-x")
        data = json.loads(get_json(sel))
        rebuilt = Selector(
            fragments=tuple(
                Fragment(kind=FragmentKind(f["kind"]), value=f["value"])
                for f in data["fragments"]
            ),
            combined=data["combined"],
        )
        assert rebuilt == sel
        assert rebuilt.stringify() == "#main[data-x]"


class Slotted:
    __slots__ = ("a",)


class TestFromJsonRejectsDictlessClasses:
    def test_builtin_dict(self):
        with pytest.raises(SerializationError) as info:
            from_json(dict, '{"a":1}')
        assert "dict" in str(info.value)

    def test_slots_class(self):
        with pytest.raises(SerializationError) as info:
            from_json(Slotted, '{"a":1}')
        assert "Slotted" in str(info.value)
