"""EML 컴파일 에러"""


class EMLError(Exception):
    """eml_compiler가 발생시키는 모든 에러의 기반 클래스"""


class InvalidTagError(EMLError):
    """화이트리스트에 없는 태그"""

    def __init__(self, tag: str, fragment: str = ""):
        super().__init__(f"element has invalid tag '{tag}' in {fragment}")
        self.tag = tag
        self.fragment = fragment


class UnknownPropertyError(EMLError):
    """어떤 applier 카테고리도 처리하지 못한 속성"""

    def __init__(self, attribute: str):
        super().__init__(f"unknown property '{attribute}'")
        self.attribute = attribute


class ConfigError(EMLError):
    """설정 파일 형식 오류"""
