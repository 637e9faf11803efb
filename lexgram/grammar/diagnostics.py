# lexgram/grammar/diagnostics.py
"""ParseError 수집과 캐럿(^) 스니펫 출력.

트리 어디에 박혀 있든 ParseError 를 찾아내고, 원문 줄 아래 캐럿을 찍어
사람이 읽을 메시지로 만든다. 외부 설명 서비스에 넘길 (메시지, 줄) 정보도 여기서 꺼낸다.
"""

from __future__ import annotations
from typing import Iterator, List, Tuple

from .ast import *


def iter_errors(node) -> Iterator[ParseError]:
    """깊이 우선, 원문 순서로 ParseError 를 모두 돌려준다."""
    if isinstance(node, ParseError):
        yield node
    elif isinstance(node, RuleFile):
        for r in node.rules:
            yield from iter_errors(r)
    elif isinstance(node, GrammarFile):
        for d in node.declarations:
            yield from iter_errors(d)
        for p in node.productions:
            yield from iter_errors(p)
    # 나머지 노드는 ParseError 를 자식으로 갖지 않는다


def has_errors(node) -> bool:
    return next(iter_errors(node), None) is not None


# ---------- snippet utils ----------
def _line_text(src: str, line: int) -> str:
    """1-based line 번째 줄(개행 제외). 범위를 벗어나면 빈 문자열."""
    lines = src.split("\n")
    if 1 <= line <= len(lines):
        return lines[line - 1]
    return ""

def snippet_with_caret(src: str, line: int, col: int) -> str:
    """(line, col) 위치에 캐럿"""
    caret = " " * (col - 1) + "^"
    return f"{_line_text(src, line)}\n{caret}"

def format_error(src: str, err: ParseError) -> str:
    return f"{err.line}:{err.col}: {err.message}\n{snippet_with_caret(src, err.line, err.col)}"


def assist_context(node) -> List[Tuple[str, int]]:
    """(error_message, error_line) 목록: 오류 설명 서비스 요청에 들어가는 필드."""
    return [(e.message, e.line) for e in iter_errors(node)]
