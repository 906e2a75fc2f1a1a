"""Padding appliers"""
from .definition import ApplierDefinition, ApplierSet, Category, TargetBuffer

PADDING_DEFINITIONS = tuple(
    ApplierDefinition(key, "0", Category.PADDING, TargetBuffer.STYLE, css_name)
    for key, css_name in (
        ("padding", "padding"),
        ("paddingtop", "padding-top"),
        ("paddingright", "padding-right"),
        ("paddingbottom", "padding-bottom"),
        ("paddingleft", "padding-left"),
    )
)

Appliers = ApplierSet(Category.PADDING, PADDING_DEFINITIONS)
