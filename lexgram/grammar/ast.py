# lexgram/grammar/ast.py
"""Syntax tree
- RuleFile / RuleDef: flex 스타일 `pattern { action }` 목록
- GrammarFile / TokenDecl / Production / Alternative: bison 스타일 선언부 + 규칙부
- ParseError: 잘못된 구문이 있던 자리에 끼워 넣는 오류 노드(자식 없음)

노드는 생성 후 변경하지 않는다(frozen). 같은 입력이면 `==` 로 같은 트리가 나온다.
"""

from __future__     import annotations
from dataclasses    import dataclass, field
from typing         import List, Optional, Union

@dataclass(frozen=True)
class ParseError:
    message: str
    line: int
    col: int

# ====== rule-file (flex)

@dataclass(frozen=True)
class RuleDef:
    pattern: str    # Regex 또는 Identifier 토큰 원문
    action: str     # 중괄호 제거된 액션 본문

@dataclass(frozen=True)
class RuleFile:
    rules: List[Union[RuleDef, ParseError]] = field(default_factory=list)

# ====== grammar-file (bison)

@dataclass(frozen=True)
class TokenDecl:
    """%token A B C  한 줄"""
    names: List[str]

@dataclass(frozen=True)
class Alternative:
    """
    대안(alt) 하나.
    - symbols: 식별자 또는 따옴표 리터럴 원문('+' 처럼 따옴표 포함)
    - action : 마지막으로 나온 액션 블록 본문(없으면 None)
    """
    symbols: List[str]
    action: Optional[str] = None

@dataclass(frozen=True)
class Production:
    name: str
    alternatives: List[Alternative]

@dataclass(frozen=True)
class GrammarFile:
    # 선언(Decl) 섹션
    declarations: List[TokenDecl] = field(default_factory=list)
    # 규칙 섹션
    productions: List[Union[Production, ParseError]] = field(default_factory=list)


Node = Union[RuleFile, RuleDef, GrammarFile, TokenDecl, Production, Alternative, ParseError]
