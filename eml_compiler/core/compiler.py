"""EML compiler entry point

마크업 문자열 -> DOM 트리 -> (태그 검증, 속성 적용) -> render tree
"""
import logging
from typing import Optional

from ..common.config import CompilerConfig
from ..common.errors import EMLError
from ..dom import HTMLParser, Element, find_child, descendants
from ..profiling import MeasureTime, Tracer
from ..render import RenderTree, to_render_tree
from .dispatcher import AttributeDispatcher
from .validator import TagValidator

logger = logging.getLogger(__name__)


class EMLCompiler:
    """EML 마크업을 검증하고 레이아웃 속성을 CSS class/style로 변환

    - 호출마다 새 DOM 트리를 만들고 한 번만 변경한 뒤 버린다
    - 공유 상태(applier 레지스트리, 화이트리스트)는 읽기 전용
    - 태그 검증 실패나 알 수 없는 속성은 호출 전체를 실패시킨다
    """

    def __init__(self, config: Optional[CompilerConfig] = None,
                 dispatcher: Optional[AttributeDispatcher] = None,
                 validator: Optional[TagValidator] = None):
        self.config = config or CompilerConfig()
        self.validator = validator or TagValidator(self.config.valid_tags)
        self.dispatcher = dispatcher or AttributeDispatcher(
            passthrough=self.config.passthrough_attributes)
        # trace_file이 있는 컴파일러만 자기 트레이서를 가짐
        self.tracer = Tracer(self.config.trace_file) if self.config.trace_file else None

    def parse_document(self, markup: str) -> Element:
        """마크업을 파싱해 body 요소 반환"""
        with MeasureTime("parse", category="eml", tracer=self.tracer):
            root = HTMLParser(markup, fragment=True).parse()
        body = find_child(root, "body")
        if body is None:
            # 빈 <html> 문서
            body = Element("body", {}, root)
            root.children.append(body)
        return body

    def transform(self, body: Element) -> Element:
        """body의 모든 하위 태그를 문서 순서대로 검증하고 속성을 적용"""
        with MeasureTime("transform", category="eml", tracer=self.tracer):
            for node in descendants(body):
                if node.kind != "tag":
                    continue
                self.validator.check(node)
                self.dispatcher.apply(node)
        return body

    def compile_tree(self, markup: str) -> Element:
        return self.transform(self.parse_document(markup))

    def compile(self, markup: str) -> RenderTree:
        logger.debug("compiling %d characters of markup", len(markup))
        try:
            body = self.compile_tree(markup)
        except EMLError as e:
            logger.debug("compilation failed: %s", e)
            raise
        with MeasureTime("render", category="eml", tracer=self.tracer):
            return to_render_tree(body)

    def close(self):
        """트레이서가 있으면 파일로 저장하고 수집 종료"""
        if self.tracer is not None:
            self.tracer.finish()


def compile(markup: str, config: Optional[CompilerConfig] = None) -> RenderTree:
    """EML 마크업을 render tree로 컴파일"""
    return EMLCompiler(config).compile(markup)
