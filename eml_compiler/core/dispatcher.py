"""Attribute dispatch

속성 이름을 카테고리 -> applier 순서로 찾아 적용한다.
"""
import logging
from typing import Iterable, Mapping, Sequence

from ..appliers import APPLIER_REGISTRY, DISPATCH_ORDER, ApplierSet, Category
from ..common.constants import PASSTHROUGH_ATTRIBUTES
from ..common.errors import UnknownPropertyError

logger = logging.getLogger(__name__)


class AttributeDispatcher:
    """EML 속성을 담당 applier 카테고리로 라우팅

    registry와 order는 초기화 이후 변경되지 않으므로 여러 컴파일 호출이
    하나의 dispatcher를 공유해도 된다.
    """

    def __init__(self,
                 registry: Mapping[Category, ApplierSet] = APPLIER_REGISTRY,
                 order: Sequence[Category] = DISPATCH_ORDER,
                 passthrough: Iterable[str] = PASSTHROUGH_ATTRIBUTES):
        missing = [category for category in order if category not in registry]
        if missing:
            raise ValueError(f"no appliers registered for {[c.value for c in missing]}")
        self.handlers = tuple(registry[category] for category in order)
        self.passthrough = frozenset(passthrough)

    def dispatch(self, element, attribute: str) -> bool:
        """속성을 처리했으면 True, 알 수 없는 속성이면 False"""
        if attribute in self.passthrough:
            return True
        for handler in self.handlers:
            if handler.apply(element, attribute):
                return True
        return False

    def apply(self, element):
        """element의 모든 속성을 적용, 알 수 없는 속성이 있으면 UnknownPropertyError"""
        # applier가 class/style을 추가하므로 시작 시점의 속성 이름만 순회
        for attribute in list(element.attributes):
            if attribute not in element.attributes:
                continue
            if not self.dispatch(element, attribute):
                logger.debug("unknown property %r on %r", attribute, element)
                raise UnknownPropertyError(attribute)
