"""lexgram 방언 파서 (재귀 하강)
- rule-file   : (%% 무시) pattern { action } 반복
- grammar-file: [%token A B ...]* %% (Name : sym* {act}? (| sym* {act}?)* ;)*
- 토큰 스트림은 lexgram.lex.tokenize 가 만든다(파서 진입 시 내부 호출)
- 잘못된 구문은 예외 대신 **ParseError 노드**로 트리에 끼워 넣는다
- 입력이 구문 중간에 끝나면 그 자리(입력 끝)에 ParseError 를 남긴다
"""

from __future__ import annotations
from typing import List, Optional
from ..lex import Token, TokenKind, tokenize, end_position
from .ast import *

TOKEN_KEYWORD = "%token"


class Dialect:
    RULE_FILE    = "rule-file"
    GRAMMAR_FILE = "grammar-file"

    # 원래 도구 이름도 받는다
    _ALIASES = {
        "rule-file": RULE_FILE,
        "flex": RULE_FILE,
        "lex": RULE_FILE,
        "grammar-file": GRAMMAR_FILE,
        "bison": GRAMMAR_FILE,
        "yacc": GRAMMAR_FILE,
    }

    @classmethod
    def resolve(cls, name: str) -> str:
        """방언 이름(별칭 포함, 대소문자 무시)을 정규 이름으로. 모르는 이름은 ValueError."""
        key = (name or "").strip().lower()
        try:
            return cls._ALIASES[key]
        except KeyError:
            known = ", ".join(sorted(cls._ALIASES))
            raise ValueError(f"Unknown dialect {name!r} (expected one of: {known})") from None


# --- 토큰 스트림 ---
class _TS:
    def __init__(self, toks: List[Token], src: str):
        self.toks = toks
        self.i = 0
        self.src = src

    def la(self, k: int = 0) -> Optional[Token]:
        j = self.i + k
        if j < len(self.toks):
            return self.toks[j]
        return None

    def check(self, kind: str, k: int = 0) -> bool:
        t = self.la(k)
        return t is not None and t.kind == kind

    def eat_any(self) -> Optional[Token]:
        """현재 토큰 종류 무관 소비. 끝이면 None(커서 그대로)."""
        t = self.la()
        if t is not None:
            self.i += 1
        return t

    def at_end(self) -> bool:
        return self.i >= len(self.toks)

    def error_at_end(self, message: str) -> ParseError:
        line, col = end_position(self.src)
        return ParseError(message, line, col)


def _error_at(tok: Token, message: str) -> ParseError:
    return ParseError(message, tok.line, tok.col)

def _describe(tok: Token) -> str:
    return f"{tok.kind} {tok.text!r}"


# --- grammar-file ---
def parse_grammar_file(src: str) -> GrammarFile:
    ts = _TS(tokenize(src), src)
    decls: List[TokenDecl] = []
    prods: list = []

    # 선언부: %% 까지. '%%' 없이 바로 `Name :` 로 시작하면 규칙부로 넘어간다.
    while not ts.at_end():
        if ts.check(TokenKind.SECTION_SEP):
            ts.eat_any()
            break
        if ts.check(TokenKind.IDENT) and ts.check(TokenKind.COLON, 1):
            break
        t = ts.eat_any()
        if t.kind == TokenKind.KEYWORD and t.text == TOKEN_KEYWORD:
            names: List[str] = []
            while ts.check(TokenKind.IDENT):
                names.append(ts.eat_any().text)
            decls.append(TokenDecl(names))
        # 그 외 선언(%left, %start, %{ ... %} 등)은 모델링하지 않음

    # 규칙부
    while not ts.at_end():
        if ts.check(TokenKind.IDENT):
            prods.extend(_parse_production(ts))
        else:
            ts.eat_any()

    return GrammarFile(decls, prods)

def _parse_production(ts: _TS) -> List[Node]:
    """
    Name : alt (| alt)* ;
    반환 리스트는 보통 노드 1개. 세미콜론 없이 입력이 끝나면
    [부분 Production, ParseError] 두 개.
    """
    name = ts.eat_any().text
    colon = ts.eat_any()
    if colon is None:
        return [ts.error_at_end(f"Expected ':' after rule name '{name}', found end of input")]
    if colon.kind != TokenKind.COLON:
        return [_error_at(colon, f"Expected ':' after rule name '{name}', found {_describe(colon)}")]

    alternatives: List[Alternative] = []
    symbols: List[str] = []
    action: Optional[str] = None
    while True:
        t = ts.eat_any()
        if t is None:
            alternatives.append(Alternative(symbols, action))
            return [
                Production(name, alternatives),
                ts.error_at_end(f"Missing ';' at end of rule '{name}'"),
            ]
        if t.kind in (TokenKind.IDENT, TokenKind.LITERAL):
            symbols.append(t.text)
        elif t.kind == TokenKind.ACTION:
            action = t.text
        elif t.kind == TokenKind.PIPE:
            alternatives.append(Alternative(symbols, action))
            symbols, action = [], None
        elif t.kind == TokenKind.SEMI:
            alternatives.append(Alternative(symbols, action))
            return [Production(name, alternatives)]
        # 그 외 토큰은 버림


# --- rule-file ---
def parse_rule_file(src: str) -> RuleFile:
    ts = _TS(tokenize(src), src)
    rules: list = []
    while not ts.at_end():
        if ts.check(TokenKind.SECTION_SEP):
            ts.eat_any()
            continue
        rules.append(_parse_rule(ts))
    return RuleFile(rules)

def _parse_rule(ts: _TS):
    """pattern { action } 하나. 종류가 안 맞는 토큰은 소비하고 ParseError."""
    pat = ts.eat_any()
    if pat is None:
        return ts.error_at_end("Expected regex pattern, found end of input")
    if pat.kind not in (TokenKind.REGEX, TokenKind.IDENT):
        return _error_at(pat, f"Expected regex pattern, found {_describe(pat)}")

    act = ts.eat_any()
    if act is None:
        return ts.error_at_end(f"Expected action block after pattern {pat.text!r}, found end of input")
    if act.kind != TokenKind.ACTION:
        return _error_at(act, f"Expected action block after pattern {pat.text!r}, found {_describe(act)}")
    return RuleDef(pat.text, act.text)


# --- 진입점 ---
def parse(src: str, dialect: str = Dialect.RULE_FILE):
    """src 를 dialect 방언으로 파싱. 모르는 방언 이름만 ValueError, 원문 오류는 ParseError 노드."""
    if Dialect.resolve(dialect) == Dialect.GRAMMAR_FILE:
        return parse_grammar_file(src)
    return parse_rule_file(src)
