"""Height appliers"""
from .definition import ApplierDefinition, ApplierSet, Category, TargetBuffer

HEIGHT_DEFINITIONS = (
    ApplierDefinition("height", "0", Category.HEIGHT, TargetBuffer.STYLE, "height"),
    ApplierDefinition("minheight", "0", Category.HEIGHT, TargetBuffer.STYLE, "min-height"),
    # maxheight는 기존 화면들과의 호환을 위해 min-height로 출력된다 (DESIGN.md 참고)
    ApplierDefinition("maxheight", "0", Category.HEIGHT, TargetBuffer.STYLE, "min-height"),
)

Appliers = ApplierSet(Category.HEIGHT, HEIGHT_DEFINITIONS)
