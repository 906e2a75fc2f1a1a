"""Margin appliers"""
from .definition import ApplierDefinition, ApplierSet, Category, TargetBuffer

MARGIN_DEFINITIONS = tuple(
    ApplierDefinition(key, "0", Category.MARGIN, TargetBuffer.STYLE, css_name)
    for key, css_name in (
        ("margin", "margin"),
        ("margintop", "margin-top"),
        ("marginright", "margin-right"),
        ("marginbottom", "margin-bottom"),
        ("marginleft", "margin-left"),
    )
)

Appliers = ApplierSet(Category.MARGIN, MARGIN_DEFINITIONS)
