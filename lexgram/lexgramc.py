# lexgram/lexgramc.py
"""lexgramc – lexgram CLI

사용 예)
    $ python -m lexgram.lexgramc lex calc.y
    $ python -m lexgram.lexgramc parse calc.y -D
    $ python -m lexgram.lexgramc analyze scanner.l --indent 2
    $ python -m lexgram.lexgramc check broken.y --dialect bison

기능
----
- lex     : 토큰 스트림을 표준출력으로 보여줌
- parse   : 트리를 JSON 으로 출력
- analyze : {"tokens": [...], "ast": {...}} 를 JSON 으로 출력
- check   : ParseError 가 있으면 캐럿 스니펫과 함께 보고하고 exit 1

--dialect 를 생략하면 확장자(.l/.lex → rule-file, .y/.yy/.yacc → grammar-file)로 추정한다.
디버그 모드(-D/--debug)를 켜면 토큰 수/노드 수 등 진행 상황을 stderr 로 출력합니다.
"""

from __future__ import annotations
import argparse
import json
import sys
from typing import Optional

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _resolve_dialect(args) -> str:
    from .grammar.loader import guess_dialect
    from .grammar.parser import Dialect

    if args.dialect:
        return Dialect.resolve(args.dialect)
    guessed = guess_dialect(args.file)
    if guessed is None:
        raise ValueError(f"Cannot guess dialect from {args.file!r}; pass --dialect")
    return guessed

# ------------------------------
# 파이프라인 로딩
# ------------------------------

def _load(args, need_tree: bool = True):
    """
    파일을 읽어 방언 결정 → (필요하면) 파싱까지.
    반환: (src, dialect, tree|None)
    """
    from .grammar.loader import load_source_text
    from .grammar.parser import parse

    src = load_source_text(args.file)
    dialect = _resolve_dialect(args) if need_tree else ""
    if args.debug: _eprint(f"[DEBUG] source ready | chars={len(src)} dialect={dialect or '-'}")

    tree = None
    if need_tree:
        tree = parse(src, dialect)
        if args.debug:
            from .grammar.ast import RuleFile
            n = len(tree.rules) if isinstance(tree, RuleFile) else len(tree.productions)
            _eprint(f"[DEBUG] tree ready | top-level nodes={n}")
    return src, dialect, tree

# ------------------------------
# 커맨드 구현
# ------------------------------

def cmd_lex(args) -> int:
    """토큰 스트림을 사람이 읽기 좋게 출력."""
    from .lex import tokenize
    try:
        src, _, _ = _load(args, need_tree=False)
    except (OSError, ValueError) as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    toks = tokenize(src)
    if args.debug: _eprint(f"[DEBUG] tokens={len(toks)}")
    for i, tok in enumerate(toks):
        print(f"{i:03d}: {tok.kind:<16} {tok.text!r}  @{tok.line}:{tok.col}")
    return 0


def cmd_parse(args) -> int:
    from .grammar.wire import to_json
    try:
        _, _, tree = _load(args)
    except (OSError, ValueError) as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    print(to_json(tree, indent=args.indent))
    return 0


def cmd_analyze(args) -> int:
    from .grammar.loader import load_source_text
    from .grammar.wire import analyze
    try:
        src = load_source_text(args.file)
        payload = analyze(src, _resolve_dialect(args))
    except (OSError, ValueError) as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    if args.debug: _eprint(f"[DEBUG] tokens={len(payload['tokens'])}")
    print(json.dumps(payload, indent=args.indent, ensure_ascii=False))
    return 0


def cmd_check(args) -> int:
    from .grammar.diagnostics import iter_errors, format_error
    try:
        src, dialect, tree = _load(args)
    except (OSError, ValueError) as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    errors = list(iter_errors(tree))
    if errors:
        _eprint("[SYNTAX ERROR]")
        for err in errors:
            _eprint(format_error(src, err))
        return 1

    print(f"[CHECK OK] dialect={dialect}")
    return 0


# ------------------------------
# 엔트리포인트
# ------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="lexgramc", description="lexgram flex/bison source analyzer CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    def _common(p, with_dialect: bool = True):
        p.add_argument("file", help=".l / .y 원문 파일")
        if with_dialect:
            p.add_argument("--dialect", help="rule-file | grammar-file (별칭: flex, lex, bison, yacc)")
        p.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")

    p_lex = sub.add_parser("lex", help="토큰 스트림을 출력합니다")
    _common(p_lex, with_dialect=False)
    p_lex.set_defaults(func=cmd_lex)

    p_parse = sub.add_parser("parse", help="트리를 JSON 으로 출력합니다")
    _common(p_parse)
    p_parse.add_argument("--indent", type=int, default=None, help="JSON 들여쓰기 칸 수")
    p_parse.set_defaults(func=cmd_parse)

    p_analyze = sub.add_parser("analyze", help="토큰과 트리를 함께 JSON 으로 출력합니다")
    _common(p_analyze)
    p_analyze.add_argument("--indent", type=int, default=None, help="JSON 들여쓰기 칸 수")
    p_analyze.set_defaults(func=cmd_analyze)

    p_check = sub.add_parser("check", help="구문 오류가 있는지 검사합니다")
    _common(p_check)
    p_check.set_defaults(func=cmd_check)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
