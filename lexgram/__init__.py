"""lexgram: flex / bison 원문용 토크나이저 + 재귀 하강 파서.

    >>> from lexgram import tokenize, parse
    >>> parse("%token NUM %% expr : NUM ;", "grammar-file")

두 함수 모두 원문 내용 때문에 예외를 던지지 않는다. 잘못된 구문은
트리 안의 ParseError 노드로 돌아온다.
"""

from .lex import Token, TokenKind, tokenize
from .grammar.parser import Dialect, parse, parse_grammar_file, parse_rule_file
from .grammar.wire import analyze

__all__ = [
    "Token", "TokenKind", "tokenize",
    "Dialect", "parse", "parse_grammar_file", "parse_rule_file",
    "analyze",
]
