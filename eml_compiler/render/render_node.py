"""
컴파일 결과를 UI 렌더러에 전달하기 위한 트리
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class RenderNode:
    """렌더러가 소비하는 단일 노드 (tag 또는 text)"""

    kind: str
    tag: Optional[str] = None

    # 남아있는 속성 (class / style)
    attributes: Dict[str, str] = field(default_factory=dict)

    # style 속성을 파싱한 결과 (같은 속성은 마지막 선언이 이김)
    style: Dict[str, str] = field(default_factory=dict)

    children: List["RenderNode"] = field(default_factory=list)

    # kind == "text"일 때의 내용
    text: Optional[str] = None

    @property
    def class_names(self) -> List[str]:
        return self.attributes.get("class", "").split()

    def __repr__(self) -> str:
        if self.kind == "text":
            return repr(self.text)
        return f"<{self.tag}>"


@dataclass
class RenderTree:
    """body 내용 전체 - 직렬화된 마크업과 최상위 노드 목록"""

    markup: str = ""
    children: List[RenderNode] = field(default_factory=list)
