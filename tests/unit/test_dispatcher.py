"""Unit tests for attribute dispatch and tag validation."""

import pytest

from eml_compiler import InvalidTagError, UnknownPropertyError
from eml_compiler.appliers import (
    APPLIER_REGISTRY,
    ApplierDefinition,
    ApplierSet,
    Category,
    TargetBuffer,
)
from eml_compiler.core import AttributeDispatcher, TagValidator
from eml_compiler.dom import Element, Text


class TestAttributeDispatcher:

    def test_style_is_passthrough(self, make_element):
        element = make_element(style="color:red")
        assert AttributeDispatcher().dispatch(element, "style") is True
        assert element.attributes == {"style": "color:red"}

    def test_class_is_passthrough(self, make_element):
        element = make_element(**{"class": "a b"})
        assert AttributeDispatcher().dispatch(element, "class") is True
        assert element.attributes == {"class": "a b"}

    def test_unknown_attribute_returns_false(self, make_element):
        element = make_element(unknownattr="1")
        assert AttributeDispatcher().dispatch(element, "unknownattr") is False
        assert element.attributes == {"unknownattr": "1"}

    def test_apply_consumes_all_attributes(self, make_element):
        element = make_element(direction="row", grow="1", padding="2px", width="10px")
        AttributeDispatcher().apply(element)
        assert element.attributes == {
            "class": "flex-direction-row",
            "style": "flex-grow:1;padding:2px;width:10px",
        }

    def test_apply_raises_unknown_property(self, make_element):
        element = make_element(grow="1", unknownattr="1")
        with pytest.raises(UnknownPropertyError) as exc_info:
            AttributeDispatcher().apply(element)
        assert exc_info.value.attribute == "unknownattr"
        assert str(exc_info.value) == "unknown property 'unknownattr'"

    def test_first_category_in_order_wins(self, make_element):
        shadow = ApplierSet(Category.MARGIN, [
            ApplierDefinition("grow", "0", Category.MARGIN, TargetBuffer.STYLE, "shadow"),
        ])
        registry = dict(APPLIER_REGISTRY)
        registry[Category.MARGIN] = shadow
        element = make_element(grow="3")
        AttributeDispatcher(registry=registry).apply(element)
        assert element.attributes == {"style": "flex-grow:3"}

    def test_missing_category_in_registry(self):
        registry = {Category.FLEXBOX: APPLIER_REGISTRY[Category.FLEXBOX]}
        with pytest.raises(ValueError):
            AttributeDispatcher(registry=registry)

    def test_custom_passthrough(self, make_element):
        element = make_element(id="main")
        AttributeDispatcher(passthrough={"style", "class", "id"}).apply(element)
        assert element.attributes == {"id": "main"}


class TestTagValidator:

    def test_validate(self):
        validator = TagValidator({"view"})
        assert validator.validate("view") is True
        assert validator.validate("card") is False

    def test_case_sensitive(self):
        assert TagValidator({"view"}).validate("View") is False

    def test_check_carries_fragment(self):
        card = Element("card", {"grow": "1"}, None)
        card.children.append(Text("x", card))
        with pytest.raises(InvalidTagError) as exc_info:
            TagValidator({"view"}).check(card)
        assert exc_info.value.tag == "card"
        assert exc_info.value.fragment == '<card grow="1">x</card>'
        assert "element has invalid tag 'card'" in str(exc_info.value)
