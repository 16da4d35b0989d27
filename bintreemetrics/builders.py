"""Construction and serialisation helpers for binary trees.

The metrics never build trees themselves; callers do. This module offers the
usual ways of doing so:

* ``build_tree_from_level_order`` / ``level_order_values`` - level-order
  sequences with ``None`` sentinels for missing children.
* ``parse_tree`` / ``format_tree`` - brace notation, e.g. ``1{2{4,5},3{6,7}}``.
  ``v{l}`` has a left child only, ``v{,r}`` a right child only.
* ``mirror`` - a left/right swapped copy.
* ``render_tree`` - a level-by-level ASCII picture.

Every helper is iterative, so trees of any depth can be built and printed.
"""

import re
from collections import deque
from typing import Deque, Iterable, List, Optional, Tuple

from .core.node import BinaryNode

_TOKEN = re.compile(r"\s*(?:(?P<int>[-+]?\d+)|(?P<punct>[{},]))")


class TreeSyntaxError(ValueError):
    """Raised by ``parse_tree`` for malformed brace notation."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} at position {position}")
        self.position = position


def _check_value(value) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError("Level-order values must be integers or None")
    return value


def build_tree_from_level_order(values: Iterable[Optional[int]]) -> Optional[BinaryNode]:
    """Construct a binary tree from a level-order sequence.

    ``None`` entries mark missing children. Returns ``None`` when the
    sequence is empty or starts with ``None``.

    Raises:
        TypeError: If a payload is neither an integer nor None
    """
    iterator = iter(values)
    first = next(iterator, None)
    if first is None:
        return None

    root = BinaryNode(_check_value(first))
    queue: Deque[BinaryNode] = deque([root])

    while queue:
        node = queue.popleft()
        try:
            left_value = next(iterator)
        except StopIteration:
            break
        if left_value is not None:
            node.left = BinaryNode(_check_value(left_value))
            queue.append(node.left)

        try:
            right_value = next(iterator)
        except StopIteration:
            break
        if right_value is not None:
            node.right = BinaryNode(_check_value(right_value))
            queue.append(node.right)

    return root


def level_order_values(root: Optional[BinaryNode]) -> List[Optional[int]]:
    """Return the tree's level-order values including ``None`` sentinels.

    Trailing sentinels are dropped, so the result round-trips through
    ``build_tree_from_level_order``.
    """
    if root is None:
        return []
    result: List[Optional[int]] = []
    queue: Deque[Optional[BinaryNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.value)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


def _tokenize(text: str) -> List[Tuple[str, str, int]]:
    tokens = []
    pos = 0
    end = len(text.rstrip())
    while pos < end:
        match = _TOKEN.match(text, pos)
        if match is None:
            while text[pos].isspace():
                pos += 1
            raise TreeSyntaxError(f"unexpected character {text[pos]!r}", pos)
        if match.group("int") is not None:
            tokens.append(("int", match.group("int"), match.start("int")))
        else:
            punct = match.group("punct")
            tokens.append((punct, punct, match.start("punct")))
        pos = match.end()
    return tokens


def parse_tree(text: str) -> Optional[BinaryNode]:
    """Parse brace notation into a tree.

    Grammar::

        tree     := "" | node
        node     := INTEGER [ "{" [node] [ "," [node] ] "}" ]

    Whitespace is ignored. The empty string is the absent tree.

    Raises:
        TreeSyntaxError: If the text is not valid brace notation

    Example:
        >>> format_tree(parse_tree(" 1 { 2 , 3 } "))
        '1{2,3}'
    """
    tokens = _tokenize(text)
    if not tokens:
        return None

    root: Optional[BinaryNode] = None
    # Open brace frames: [node, slot] where slot 0 is left and 1 is right
    stack: List[list] = []
    state = "value"
    i = 0

    while i < len(tokens):
        kind, raw, pos = tokens[i]

        if state in ("value", "open"):
            if kind == "int":
                node = BinaryNode(int(raw))
                if stack:
                    parent, slot = stack[-1]
                    if slot == 0:
                        parent.left = node
                    else:
                        parent.right = node
                else:
                    root = node
                state = "after_value"
                i += 1
            elif state == "open" and kind == ",":
                if stack[-1][1] == 1:
                    raise TreeSyntaxError("a node has at most two children", pos)
                stack[-1][1] = 1
                i += 1
            elif state == "open" and kind == "}":
                stack.pop()
                state = "closed" if stack else "end"
                i += 1
            else:
                raise TreeSyntaxError(f"expected a value, found {raw!r}", pos)

        elif state == "after_value":
            if kind == "{":
                stack.append([node, 0])
                state = "open"
                i += 1
            else:
                # The node has no children; reread this token
                state = "closed" if stack else "end"

        elif state == "closed":
            if kind == ",":
                if stack[-1][1] == 1:
                    raise TreeSyntaxError("a node has at most two children", pos)
                stack[-1][1] = 1
                state = "open"
                i += 1
            elif kind == "}":
                stack.pop()
                state = "closed" if stack else "end"
                i += 1
            else:
                raise TreeSyntaxError(f"expected ',' or '}}', found {raw!r}", pos)

        else:
            raise TreeSyntaxError(f"unexpected trailing {raw!r}", pos)

    if stack:
        raise TreeSyntaxError("unclosed '{'", len(text))

    return root


def format_tree(root: Optional[BinaryNode]) -> str:
    """Serialise a tree to brace notation (inverse of ``parse_tree``)."""
    if root is None:
        return ""

    out: List[str] = []
    # Items are either literal text or nodes still to be written
    stack: list = [root]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
            continue

        out.append(str(item.value))
        if item.is_leaf():
            continue

        parts: list = ["{"]
        if item.left is not None:
            parts.append(item.left)
        if item.right is not None:
            parts.extend([",", item.right])
        parts.append("}")
        stack.extend(reversed(parts))

    return "".join(out)


def mirror(root: Optional[BinaryNode]) -> Optional[BinaryNode]:
    """Return a new tree with left and right swapped at every node.

    The input tree is not modified.
    """
    if root is None:
        return None

    copy = BinaryNode(root.value)
    stack: List[Tuple[BinaryNode, BinaryNode]] = [(root, copy)]
    while stack:
        source, target = stack.pop()
        if source.left is not None:
            target.right = BinaryNode(source.left.value)
            stack.append((source.left, target.right))
        if source.right is not None:
            target.left = BinaryNode(source.right.value)
            stack.append((source.right, target.left))
    return copy


def render_tree(root: Optional[BinaryNode]) -> str:
    """Render the tree level by level, marking missing children with ``·``.

    Each row lists the child slots of the real nodes in the row above,
    and rendering stops after the last row containing a real node.
    """
    if root is None:
        return "<empty>"

    lines: List[str] = []
    level: List[Optional[BinaryNode]] = [root]
    while any(node is not None for node in level):
        lines.append(" ".join("·" if node is None else str(node.value) for node in level))
        next_level: List[Optional[BinaryNode]] = []
        for node in level:
            if node is not None:
                next_level.extend((node.left, node.right))
        level = next_level

    return "\n".join(lines)
