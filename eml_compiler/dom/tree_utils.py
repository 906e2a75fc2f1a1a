"""DOM Tree utilities

깊게 중첩된 문서에서도 RecursionError가 나지 않도록 명시적 스택으로 순회한다.
"""
from .element import Element


def print_tree(node, indent=0):
    """DOM 트리를 콘솔에 출력"""
    stack = [(node, indent)]
    while stack:
        current, depth = stack.pop()
        print(" " * depth, current)
        for child in reversed(current.children):
            stack.append((child, depth + 2))


def tree_to_list(tree, result_list):
    """DOM 트리를 flat list로 변환 (pre-order)"""
    stack = [tree]
    while stack:
        node = stack.pop()
        result_list.append(node)
        stack.extend(reversed(node.children))
    return result_list


def find_child(node, tag):
    """직계 자식 중 tag 이름이 일치하는 첫 번째 Element 반환"""
    for child in node.children:
        if isinstance(child, Element) and child.tag == tag:
            return child
    return None


def descendants(node):
    """node 자신을 제외한 모든 하위 노드를 문서 순서대로 반환"""
    return tree_to_list(node, [])[1:]
