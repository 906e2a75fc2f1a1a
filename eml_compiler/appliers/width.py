"""Width appliers"""
from .definition import ApplierDefinition, ApplierSet, Category, TargetBuffer

WIDTH_DEFINITIONS = (
    ApplierDefinition("width", "0", Category.WIDTH, TargetBuffer.STYLE, "width"),
    ApplierDefinition("minwidth", "0", Category.WIDTH, TargetBuffer.STYLE, "min-width"),
    # maxwidth 역시 min-width로 출력된다 (DESIGN.md 참고)
    ApplierDefinition("maxwidth", "0", Category.WIDTH, TargetBuffer.STYLE, "min-width"),
)

Appliers = ApplierSet(Category.WIDTH, WIDTH_DEFINITIONS)
