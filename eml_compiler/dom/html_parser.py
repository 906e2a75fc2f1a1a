import html
from typing import List
from .element import Element
from .text import Text


class HTMLParser:
    """EML 마크업 문자열을 html > head/body DOM 트리로 변환

    fragment=True이면 입력 전체를 body 조각으로 취급한다. head 전용 태그
    (script, title 등)나 명시적인 <head>도 body 안의 일반 요소가 된다.
    """

    SELF_CLOSING_TAGS = [
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "param", "source", "track", "wbr"
    ]
    HEAD_TAGS = [
        "base", "basefont", "bgsound", "noscript",
        "link", "meta", "title", "style", "script",
    ]
    ATTRIBUTE_NAME_STOP = ["=", " ", "\t", "\n", "\r"]
    WHITESPACE = [" ", "\t", "\n", "\r"]

    def __init__(self, body, fragment=False):
        self.body = body
        self.fragment = fragment
        self.unfinished: List[Element] = []

    def parse(self):
        text = ""
        in_tag = False
        quote = None
        i = 0
        while i < len(self.body):
            if not in_tag and self.body.startswith("<!--", i):
                # 주석은 내부의 '>' 까지 통째로 건너뛴다
                if text: self.add_text(text)
                text = ""
                end = self.body.find("-->", i + 4)
                i = len(self.body) if end == -1 else end + 3
                continue
            c = self.body[i]
            if in_tag:
                if quote:
                    if c == quote:
                        quote = None
                    text += c
                elif c in ["'", "\""] and text.rstrip().endswith("="):
                    # 따옴표 안의 '>'는 태그를 닫지 않는다
                    quote = c
                    text += c
                elif c == ">":
                    in_tag = False
                    self.add_tag(text)
                    text = ""
                else:
                    text += c
            elif c == "<" and self.starts_tag(i + 1):
                in_tag = True
                if text: self.add_text(text)
                text = ""
            else:
                text += c
            i += 1
        if not in_tag and text:
            self.add_text(text)
        return self.finish()

    def starts_tag(self, i):
        """'<' 다음 글자가 태그 이름, '/', '!', '?' 일 때만 태그로 본다 (예: '1 < 2')"""
        if i >= len(self.body):
            return False
        c = self.body[i]
        return c.isalpha() or c in ["/", "!", "?"]

    def _html_children(self):
        if self.fragment:
            return ["body", "/html"]
        return ["head", "body", "/html"]

    def implicit_tags(self, tag):
        while True:
            open_tags = [node.tag for node in self.unfinished]

            if open_tags == [] and tag != "html":
                self.add_tag("html")

            elif open_tags == ["html"] \
                and tag not in self._html_children():
                if tag in self.HEAD_TAGS and not self.fragment:
                    self.add_tag("head")
                else:
                    self.add_tag("body")

            elif open_tags == ["html", "head"] and \
                tag not in ["/head"] + self.HEAD_TAGS:
                self.add_tag("/head")

            else:
                break

    def add_text(self, text: str):
        if text.isspace(): return
        self.implicit_tags(None)
        parent = self.unfinished[-1]
        node = Text(html.unescape(text), parent)
        parent.children.append(node)

    def add_tag(self, tag: str):
        self_closing = tag.endswith("/") and not tag.startswith("/")
        if self_closing:
            tag = tag[:-1]
        tag, attributes = self.get_attributes(tag)
        if not tag or tag.startswith("!") or tag.startswith("?"): return

        self.implicit_tags(tag)
        if tag.startswith("/"):
            if len(self.unfinished) == 1: return
            node = self.unfinished.pop()
            parent = self.unfinished[-1]
            parent.children.append(node)

        elif tag in self.SELF_CLOSING_TAGS or self_closing:
            parent = self.unfinished[-1]
            node = Element(tag, attributes, parent)
            parent.children.append(node)

        else:
            parent = self.unfinished[-1] if self.unfinished else None
            node = Element(tag, attributes, parent)
            self.unfinished.append(node)

    def finish(self):
        if not self.unfinished:
            self.implicit_tags(None)

        while len(self.unfinished) > 1:
            node = self.unfinished.pop()
            parent = self.unfinished[-1]
            parent.children.append(node)
        return self.unfinished.pop()

    def get_attributes(self, text: str):
        parts = text.split(None, 1)
        tag = parts[0].casefold() if parts else ""
        attributes = {}
        if len(parts) < 2:
            return tag, attributes

        rest = parts[1]
        i = 0
        while i < len(rest):
            i = self._skip_whitespace(rest, i)
            if i >= len(rest):
                break

            key_start = i
            while i < len(rest) and rest[i] not in self.ATTRIBUTE_NAME_STOP:
                i += 1
            key = rest[key_start:i].casefold()
            if not key:
                break

            i = self._skip_whitespace(rest, i)
            if i >= len(rest) or rest[i] != "=":
                # 값 없는 속성 (예: <view hidden>)
                attributes[key] = ""
                continue

            i = self._skip_whitespace(rest, i + 1)
            if i >= len(rest):
                attributes[key] = ""
                break

            if rest[i] in ["'", "\""]:
                quote = rest[i]
                value_start = i + 1
                end = rest.find(quote, value_start)
                if end == -1:
                    end = len(rest)
                value = rest[value_start:end]
                i = end + 1
            else:
                value_start = i
                while i < len(rest) and rest[i] not in self.WHITESPACE:
                    i += 1
                value = rest[value_start:i]

            attributes[key] = html.unescape(value)

        return tag, attributes

    def _skip_whitespace(self, text, i):
        while i < len(text) and text[i].isspace():
            i += 1
        return i
