"""DOM Text node"""


class Text:
    """텍스트 콘텐츠를 나타내는 DOM 노드"""

    kind = "text"

    def __init__(self, text, parent):
        self.text = text
        self.children = []
        self.parent = parent

    def __repr__(self) -> str:
        return repr(self.text)
