"""PGN movetext export and import for move trees with variations.

Tag pairs are not handled; only the movetext section is.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from chesslines.core.enums import Color
from chesslines.errors import InvalidOperationError, NotationError
from chesslines.history.node import MoveNode
from chesslines.history.tree import MoveTree
from chesslines.history.variation import Variation

PGN_RESULT_TOKENS = frozenset({"1-0", "0-1", "1/2-1/2", "*"})


def _number_after(number: int, color: Color) -> int:
    return number + 1 if color == Color.BLACK else number


def _comment_token(comment: str) -> str:
    # PGN comments cannot contain a closing brace.
    return "{" + comment.replace("}", "]") + "}"


# ── Export ───────────────────────────────────────────────────────────────────


def movetext_from_tree(tree: MoveTree, result: str = "*", start_number: int = 1) -> str:
    """Build numbered PGN movetext, variations in parentheses."""
    parts: list[str] = []
    _emit_line(parts, tree.root, start_number)
    parts.append(result)
    return " ".join(parts)


def _emit_line(parts: list[str], node: MoveNode | None, number: int) -> None:
    needs_number = True
    while node is not None:
        if node.color == Color.WHITE:
            parts.append(f"{number}.")
        elif needs_number:
            parts.append(f"{number}...")
        parts.append(node.name)
        needs_number = False
        if node.comment:
            parts.append(_comment_token(node.comment))
            needs_number = True

        for variation in node.variations:
            if variation.root.color == node.color:
                root_number = number
            else:
                root_number = _number_after(number, node.color)
            side_line: list[str] = []
            _emit_line(side_line, variation.root, root_number)
            parts.append(f"({' '.join(side_line)})")
            needs_number = True

        number = _number_after(number, node.color)
        node = node.next


# ── Import ───────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class ParsedMovetext:
    """Move tree and result token read from PGN movetext."""

    tree: MoveTree
    result: str = "*"


@dataclass(slots=True)
class _Line:
    """Parser state for one line of play (main line or a variation)."""

    next_color: Color
    anchor: MoveNode | None = None
    variation: Variation | None = None
    last: MoveNode | None = None
    pending_comments: list[str] = field(default_factory=list)


def _tokenize(movetext: str) -> list[tuple[str, str]]:
    """Split movetext into ``(kind, text)`` pairs: comment, open, close, word."""
    tokens: list[tuple[str, str]] = []
    idx = 0
    total = len(movetext)

    while idx < total:
        ch = movetext[idx]

        if ch.isspace():
            idx += 1
            continue

        if ch == "{":
            end = movetext.find("}", idx + 1)
            if end < 0:
                raise NotationError("Unterminated comment in movetext")
            tokens.append(("comment", movetext[idx + 1 : end]))
            idx = end + 1
            continue

        if ch == ";":
            end = movetext.find("\n", idx + 1)
            if end < 0:
                end = total
            tokens.append(("comment", movetext[idx + 1 : end]))
            idx = end
            continue

        if ch == "(":
            tokens.append(("open", ch))
            idx += 1
            continue

        if ch == ")":
            tokens.append(("close", ch))
            idx += 1
            continue

        token_end = idx
        while (
            token_end < total
            and not movetext[token_end].isspace()
            and movetext[token_end] not in "{};()"
        ):
            token_end += 1
        tokens.append(("word", movetext[idx:token_end]))
        idx = token_end

    return tokens


def _split_move_number(word: str) -> tuple[int | None, bool, str]:
    """Peel a leading move number: ``"12...Nf6"`` → ``(12, True, "Nf6")``."""
    digits = 0
    while digits < len(word) and word[digits].isdigit():
        digits += 1
    if digits == 0 or digits == len(word) or word[digits] != ".":
        return None, False, word
    dots = digits
    while dots < len(word) and word[dots] == ".":
        dots += 1
    return int(word[:digits]), dots - digits >= 3, word[dots:]


def _attach_comment(line: _Line, text: str) -> None:
    clean = " ".join(text.split())
    if not clean:
        return
    if line.last is None:
        line.pending_comments.append(clean)
        return
    if line.last.comment:
        line.last.comment = f"{line.last.comment} {clean}"
    else:
        line.last.comment = clean


def parse_movetext(movetext: str) -> ParsedMovetext:
    """Parse movetext into a tree of textual move nodes.

    A parenthesised variation holds alternatives to the move right before
    it, so its first move has that move's color.
    """
    tree = MoveTree()
    result = "*"
    stack: list[_Line] = [_Line(next_color=Color.WHITE)]

    for kind, text in _tokenize(movetext):
        line = stack[-1]

        if kind == "comment":
            _attach_comment(line, text)
            continue

        if kind == "open":
            if line.last is None:
                raise NotationError("A variation must follow a move")
            stack.append(_Line(next_color=line.last.color, anchor=line.last))
            continue

        if kind == "close":
            if len(stack) == 1:
                raise NotationError("Unbalanced ')' in movetext")
            if line.last is None:
                raise NotationError("Empty variation in movetext")
            stack.pop()
            continue

        if text in PGN_RESULT_TOKENS:
            result = text
            continue

        if text.startswith("$") and text[1:].isdigit():
            continue

        move_number, black_to_move, name = _split_move_number(text)
        if move_number is not None:
            if line.last is None and line.anchor is None:
                line.next_color = Color.BLACK if black_to_move else Color.WHITE
            if not name:
                continue

        node = MoveNode(name, line.next_color)
        try:
            if line.anchor is None:
                tree.push_move(node)
            elif line.variation is None:
                line.variation = line.anchor.variations.add_variation_line(node)
            else:
                line.variation.push_move(node)
        except InvalidOperationError as exc:
            raise NotationError(f"Move {text!r} breaks turn order: {exc}") from exc

        if line.pending_comments:
            node.comment = " ".join(line.pending_comments)
            line.pending_comments.clear()
        line.last = node
        line.next_color = node.color.opposite

    if len(stack) != 1:
        raise NotationError("Unclosed variation in movetext")

    return ParsedMovetext(tree=tree, result=result)
