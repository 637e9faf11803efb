# lexgram/grammar/wire.py
"""토큰/트리 직렬화(프로세스 경계 전송용).

- 토큰: {"kind", "text", "line", "column"}
- 노드: {"type": <노드 이름>, ...필드}  (ParseError 의 위치 키는 line / column)
- analyze(src, dialect) -> {"tokens": [...], "ast": {...}}
"""

from __future__ import annotations
import json
from typing import Any, Dict, List

from ..lex import Token, TokenKind, tokenize
from .ast import *
from .parser import parse


# --- tokens ---
def token_to_dict(t: Token) -> Dict[str, Any]:
    return {"kind": t.kind, "text": t.text, "line": t.line, "column": t.col}

def token_from_dict(d: Dict[str, Any]) -> Token:
    kind = d["kind"]
    if kind not in TokenKind.ALL:
        raise ValueError(f"Unknown token kind {kind!r}")
    return Token(kind, d["text"], int(d["line"]), int(d["column"]))


# --- nodes ---
def node_to_dict(node) -> Dict[str, Any]:
    if isinstance(node, RuleFile):
        return {"type": "RuleFile", "rules": [node_to_dict(r) for r in node.rules]}
    if isinstance(node, RuleDef):
        return {"type": "RuleDef", "pattern": node.pattern, "action": node.action}
    if isinstance(node, GrammarFile):
        return {
            "type": "GrammarFile",
            "declarations": [node_to_dict(d) for d in node.declarations],
            "productions": [node_to_dict(p) for p in node.productions],
        }
    if isinstance(node, TokenDecl):
        return {"type": "TokenDecl", "names": list(node.names)}
    if isinstance(node, Production):
        return {
            "type": "Production",
            "name": node.name,
            "alternatives": [node_to_dict(a) for a in node.alternatives],
        }
    if isinstance(node, Alternative):
        return {"type": "Alternative", "symbols": list(node.symbols), "action": node.action}
    if isinstance(node, ParseError):
        return {"type": "ParseError", "message": node.message, "line": node.line, "column": node.col}
    raise TypeError(f"Not a syntax node: {type(node).__name__}")

def node_from_dict(d: Dict[str, Any]):
    kind = d.get("type")
    if kind == "RuleFile":
        return RuleFile([node_from_dict(r) for r in d["rules"]])
    if kind == "RuleDef":
        return RuleDef(d["pattern"], d["action"])
    if kind == "GrammarFile":
        return GrammarFile(
            [node_from_dict(x) for x in d["declarations"]],
            [node_from_dict(x) for x in d["productions"]],
        )
    if kind == "TokenDecl":
        return TokenDecl(list(d["names"]))
    if kind == "Production":
        return Production(d["name"], [node_from_dict(a) for a in d["alternatives"]])
    if kind == "Alternative":
        return Alternative(list(d["symbols"]), d.get("action"))
    if kind == "ParseError":
        return ParseError(d["message"], int(d["line"]), int(d["column"]))
    raise ValueError(f"Unknown node type {kind!r}")


# --- JSON ---
def to_json(value, indent=None) -> str:
    """Token, 토큰 리스트, 또는 트리 노드를 JSON 문자열로."""
    if isinstance(value, Token):
        return json.dumps(token_to_dict(value), indent=indent, ensure_ascii=False)
    if isinstance(value, list):
        return json.dumps([token_to_dict(t) for t in value], indent=indent, ensure_ascii=False)
    return json.dumps(node_to_dict(value), indent=indent, ensure_ascii=False)

def from_json(text: str):
    data = json.loads(text)
    if isinstance(data, list):
        return [token_from_dict(d) for d in data]
    if "kind" in data and "type" not in data:
        return token_from_dict(data)
    return node_from_dict(data)


def analyze(src: str, dialect: str) -> Dict[str, Any]:
    """토큰 + 트리를 한 번에(원래 /analyze 응답 모양)."""
    tree = parse(src, dialect)
    tokens: List[Token] = tokenize(src)
    return {
        "tokens": [token_to_dict(t) for t in tokens],
        "ast": node_to_dict(tree),
    }
