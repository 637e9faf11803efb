# lexgram/lex/__init__.py
"""lexgram 토크나이저: flex(.l) / bison(.y) 원문을 토큰 스트림으로 바꾼다.

특징
----
- 두 방언(rule-file, grammar-file)이 **같은 토크나이저**를 공유
- 개행/공백은 줄·칼럼만 갱신하고 토큰으로 내보내지 않는다
- 주석 문법은 없다(인식하지 않음)
- 실패하지 않는다: 분류할 수 없는 구간은 Regex 토큰으로 담는다

분류 순서:
  1) 개행 / 공백(space, tab, CR)
  2) ':' '|' ';'
  3) 따옴표 리터럴 '...' / "..." (이스케이프 없음, 닫히지 않으면 입력 끝까지)
  4) '%%' 섹션 구분자, '%' + 영문자 키워드(예: %token)
  5) '{' 액션 블록: 중괄호 **중첩 깊이 추적**, 블록 내부 따옴표/주석 안의 중괄호는 무시
  6) 식별자 [문자_][문자숫자_]*
  7) 그 외 → 공백/'{'/입력 끝까지를 Regex 로 묶음

API
---
- `TokenKind`: 토큰 종류(닫힌 집합)
- `Token(kind, text, line, col)`: 토큰 단위(1-based 위치)
- `tokenize(src) -> List[Token]`
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple
import regex as re


class TokenKind:
    """토큰 종류. 값은 직렬화 시 그대로 쓰이는 discriminant 문자열."""
    SECTION_SEP = "SectionSeparator"
    ACTION      = "ActionBlock"
    KEYWORD     = "BisonKeyword"
    IDENT       = "Identifier"
    LITERAL     = "Literal"
    REGEX       = "Regex"
    COLON       = "Colon"
    PIPE        = "Pipe"
    SEMI        = "Semicolon"
    WHITESPACE  = "Whitespace"   # 배출하지 않음
    UNKNOWN     = "Unknown"      # 예약(현재 스캐너는 배출하지 않음)

    ALL = (
        SECTION_SEP, ACTION, KEYWORD, IDENT, LITERAL, REGEX,
        COLON, PIPE, SEMI, WHITESPACE, UNKNOWN,
    )


@dataclass(frozen=True)
class Token:
    kind: str   # TokenKind.*
    text: str   # 원문 lexeme (액션 블록은 중괄호 제거 + trim)
    line: int   # 1-based
    col: int    # 1-based


# ---- 마스터 패턴 ----
# '{' 는 tokenize 가 먼저 가로채 _scan_action 이 문자 단위로 읽는다.
_TOKEN_SPEC = [
    ("NEWLINE", r"\n"),
    ("WS",      r"[ \t\r]+"),
    ("COLON",   r":"),
    ("PIPE",    r"\|"),
    ("SEMI",    r";"),
    ("LITERAL", r"'[^']*'?|\"[^\"]*\"?"),
    ("SEP",     r"%%"),
    ("KEYWORD", r"%\p{Alphabetic}*"),
    ("IDENT",   r"[\p{Alphabetic}_][\p{Alphabetic}\p{N}_]*"),
    ("REGEX",   r"[^ \t\r\n{]+"),
]
MASTER_RE = re.compile("|".join(f"(?P<{n}>{p})" for n, p in _TOKEN_SPEC), re.S)

_KIND_OF = {
    "COLON":   TokenKind.COLON,
    "PIPE":    TokenKind.PIPE,
    "SEMI":    TokenKind.SEMI,
    "LITERAL": TokenKind.LITERAL,
    "SEP":     TokenKind.SECTION_SEP,
    "KEYWORD": TokenKind.KEYWORD,
    "IDENT":   TokenKind.IDENT,
    "REGEX":   TokenKind.REGEX,
}


def _advance_linecol_by(text: str, line: int, col: int) -> Tuple[int, int]:
    nl = text.count("\n")
    if nl == 0:
        return line, col + len(text)
    last_nl = text.rfind("\n")
    return line + nl, len(text) - last_nl


def _scan_action(src: str, i: int) -> Tuple[str, int]:
    """
    src[i] == "{" (호출자가 보장) 에서 시작해 짝이 맞는 '}' 까지 읽는다.
    반환: (본문, 닫는 중괄호 다음 위치)
    - 닫히지 않은 블록은 입력 끝까지가 본문
    - '...' / "..." 안의 중괄호는 세지 않음(역슬래시 이스케이프 허용)
    - 따옴표 상태는 줄이 바뀌면 풀린다
    - C 주석(/* */, //) 안의 중괄호/따옴표도 세지 않음
    """
    depth = 1
    j = i + 1
    quote = ""
    escape = False
    while j < len(src):
        ch = src[j]
        if not quote and src.startswith("/*", j):
            k = src.find("*/", j + 2)
            j = len(src) if k == -1 else k + 2
            continue
        if not quote and src.startswith("//", j):
            k = src.find("\n", j)
            j = len(src) if k == -1 else k
            continue
        if quote:
            if escape:
                escape = False
            elif ch == "\\":
                escape = True
            elif ch == quote or ch == "\n":
                quote = ""
            j += 1
            continue
        if ch in "'\"":
            quote = ch
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return src[i + 1:j], j + 1
        j += 1
    return src[i + 1:], len(src)


def tokenize(src: str) -> List[Token]:
    """개행은 줄/칼럼 갱신만 하고 토큰스트림에는 **넣지 않는다**."""
    toks: List[Token] = []
    line = col = 1
    i = 0
    while i < len(src):
        if src[i] == "{":
            body, end = _scan_action(src, i)
            toks.append(Token(TokenKind.ACTION, body.strip(), line, col))
            line, col = _advance_linecol_by(src[i:end], line, col)
            i = end
            continue

        # REGEX 대안이 공백/'{' 외 모든 문자를 받으므로 항상 매치된다
        m = MASTER_RE.match(src, i)
        group = m.lastgroup or ""
        lex = m.group(0)

        if group == "NEWLINE":
            line += 1
            col = 1
        elif group == "WS":
            col += len(lex)
        else:
            toks.append(Token(_KIND_OF[group], lex, line, col))
            line, col = _advance_linecol_by(lex, line, col)
        i = m.end()

    return toks


def end_position(src: str) -> Tuple[int, int]:
    """입력 끝(마지막 문자 바로 다음)의 (line, col)."""
    return _advance_linecol_by(src, 1, 1)


__all__ = ["TokenKind", "Token", "tokenize", "end_position"]
