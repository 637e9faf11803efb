"""간단한 .l / .y 파일 로더"""

from __future__ import annotations
from pathlib    import Path
from typing     import Optional

from .parser import Dialect

_SUFFIX_DIALECT = {
    ".l": Dialect.RULE_FILE,
    ".lex": Dialect.RULE_FILE,
    ".y": Dialect.GRAMMAR_FILE,
    ".yy": Dialect.GRAMMAR_FILE,
    ".yacc": Dialect.GRAMMAR_FILE,
}


def load_source_text(path: str) -> str:
    """
    Load Source Text (CRLF 만 \\n 으로 바꾼다. 단독 CR 은 tokenize 처럼 공백으로 남긴다)
    """
    with Path(path).open(encoding="utf-8", newline="") as f:
        text = f.read()
    return text.replace("\r\n", "\n")


def guess_dialect(path: str) -> Optional[str]:
    """확장자로 방언 추정. 모르면 None."""
    return _SUFFIX_DIALECT.get(Path(path).suffix.lower())
