# Attribute appliers - 카테고리별 applier 레지스트리
from .definition import (
    ApplierDefinition,
    ApplierSet,
    Category,
    TargetBuffer,
    apply_definition,
)
from .flexbox import Appliers as FlexboxAppliers
from .margin import Appliers as MarginAppliers
from .padding import Appliers as PaddingAppliers
from .height import Appliers as HeightAppliers
from .width import Appliers as WidthAppliers

APPLIER_REGISTRY = {
    Category.FLEXBOX: FlexboxAppliers,
    Category.MARGIN: MarginAppliers,
    Category.PADDING: PaddingAppliers,
    Category.WIDTH: WidthAppliers,
    Category.HEIGHT: HeightAppliers,
}

# 속성 이름이 여러 카테고리에 걸칠 경우 먼저 나온 카테고리가 처리
DISPATCH_ORDER = (
    Category.FLEXBOX,
    Category.MARGIN,
    Category.PADDING,
    Category.HEIGHT,
    Category.WIDTH,
)


def all_definitions():
    """레지스트리에 등록된 모든 ApplierDefinition을 dispatch 순서대로 반환"""
    return [definition for category in DISPATCH_ORDER
            for definition in APPLIER_REGISTRY[category]]


__all__ = [
    'ApplierDefinition',
    'ApplierSet',
    'Category',
    'TargetBuffer',
    'apply_definition',
    'APPLIER_REGISTRY',
    'DISPATCH_ORDER',
    'all_definitions',
]
