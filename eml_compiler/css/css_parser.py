"""Inline style (property:value; ...) parser"""
from typing import Dict, List


class CSSParser:
    """style 속성 문자열을 {property: value} 딕셔너리로 변환"""

    def __init__(self, s):
        self.s = s
        self.i = 0

    def whitespace(self):
        while self.i < len(self.s) and self.s[self.i].isspace():
            self.i += 1

    def word(self):
        start = self.i
        while self.i < len(self.s):
            if self.s[self.i].isalnum() or self.s[self.i] in "#-.%_":
                self.i += 1
            else:
                break
        if not (self.i > start):
            raise ValueError(f"Parsing error at {self.i}")
        return self.s[start:self.i]

    def value(self):
        # 값에는 공백, 괄호, 쉼표가 들어갈 수 있음 (예: rgb(0, 0, 0))
        start = self.i
        depth = 0
        while self.i < len(self.s):
            c = self.s[self.i]
            if c == "(":
                depth += 1
            elif c == ")":
                depth -= 1
            elif c == ";" and depth <= 0:
                break
            self.i += 1
        value = self.s[start:self.i].strip()
        if not value:
            raise ValueError(f"Parsing error at {self.i}")
        return value

    def literal(self, literal):
        if not (self.i < len(self.s) and self.s[self.i] == literal):
            raise ValueError(f"Parsing error at {self.i}")
        self.i += 1

    def pair(self):
        prop = self.word()
        self.whitespace()
        self.literal(":")
        self.whitespace()
        val = self.value()
        return prop.casefold(), val

    def ignore_until(self, chars: List[str]):
        while self.i < len(self.s):
            if self.s[self.i] in chars:
                return self.s[self.i]
            self.i += 1
        return None

    def body(self) -> Dict[str, str]:
        pairs = {}
        while self.i < len(self.s):
            self.whitespace()
            if self.i >= len(self.s):
                break
            if self.s[self.i] == ";":
                self.i += 1
                continue
            try:
                prop, val = self.pair()
                # 같은 속성이 반복되면 마지막 선언이 이김
                pairs[prop] = val
            except ValueError:
                why = self.ignore_until([";"])
                if why is None:
                    break
        return pairs
