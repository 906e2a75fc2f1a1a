"""Flexbox appliers"""
from .definition import ApplierDefinition, ApplierSet, Category, TargetBuffer

CLASS = TargetBuffer.CLASS
STYLE = TargetBuffer.STYLE

FLEXBOX_DEFINITIONS = (
    ApplierDefinition("direction", "column", Category.FLEXBOX, CLASS, "flex-direction"),
    ApplierDefinition("wrap", "nowrap", Category.FLEXBOX, CLASS, "flex-wrap"),
    ApplierDefinition("justifycontent", "flex-start", Category.FLEXBOX, CLASS, "justify-content"),
    ApplierDefinition("justify-content", "flex-start", Category.FLEXBOX, CLASS, "justify-content"),
    ApplierDefinition("alignitems", "stretch", Category.FLEXBOX, CLASS, "align-items"),
    ApplierDefinition("align-items", "stretch", Category.FLEXBOX, CLASS, "align-items"),
    ApplierDefinition("aligncontent", "stretch", Category.FLEXBOX, CLASS, "align-content"),
    ApplierDefinition("align-content", "stretch", Category.FLEXBOX, CLASS, "align-content"),
    ApplierDefinition("alignself", "auto", Category.FLEXBOX, CLASS, "align-self"),
    ApplierDefinition("align-self", "auto", Category.FLEXBOX, CLASS, "align-self"),
    ApplierDefinition("order", 0, Category.FLEXBOX, STYLE, "order"),
    ApplierDefinition("grow", 0, Category.FLEXBOX, STYLE, "flex-grow"),
    ApplierDefinition("shrink", 1, Category.FLEXBOX, STYLE, "flex-shrink"),
    ApplierDefinition("basis", "auto", Category.FLEXBOX, STYLE, "flex-basis"),
)

Appliers = ApplierSet(Category.FLEXBOX, FLEXBOX_DEFINITIONS)
