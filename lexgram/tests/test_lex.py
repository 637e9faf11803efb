import unittest

from lexgram.lex import Token, TokenKind, tokenize, end_position


def kinds(toks):
    return [t.kind for t in toks]

def texts(toks):
    return [t.text for t in toks]


class TestTokenize(unittest.TestCase):
    def test_simple_production(self):
        toks = tokenize("a : b ;")
        self.assertEqual(kinds(toks), [TokenKind.IDENT, TokenKind.COLON, TokenKind.IDENT, TokenKind.SEMI])
        self.assertEqual(texts(toks), ["a", ":", "b", ";"])
        self.assertEqual([t.col for t in toks], [1, 3, 5, 7])
        self.assertNotIn(TokenKind.WHITESPACE, kinds(toks))

    def test_quoted_literal_keeps_quotes(self):
        toks = tokenize("'+'")
        self.assertEqual(toks, [Token(TokenKind.LITERAL, "'+'", 1, 1)])

    def test_double_quoted_literal(self):
        toks = tokenize('"if" x')
        self.assertEqual(texts(toks), ['"if"', "x"])
        self.assertEqual(toks[1].col, 6)

    def test_unterminated_literal_runs_to_end(self):
        toks = tokenize('"abc def')
        self.assertEqual(toks, [Token(TokenKind.LITERAL, '"abc def', 1, 1)])

    def test_literal_has_no_escapes(self):
        toks = tokenize(r"'\'' x")
        self.assertEqual(toks[0].text, r"'\'")
        self.assertEqual(toks[0].kind, TokenKind.LITERAL)

    def test_section_separator_and_keywords(self):
        toks = tokenize("%token NUM\n%left '+'\n%%")
        self.assertEqual(
            kinds(toks),
            [TokenKind.KEYWORD, TokenKind.IDENT, TokenKind.KEYWORD, TokenKind.LITERAL, TokenKind.SECTION_SEP],
        )
        self.assertEqual(texts(toks), ["%token", "NUM", "%left", "'+'", "%%"])
        self.assertEqual((toks[-1].line, toks[-1].col), (3, 1))

    def test_lone_percent_is_keyword(self):
        toks = tokenize("% x")
        self.assertEqual(toks[0], Token(TokenKind.KEYWORD, "%", 1, 1))

    def test_keyword_stops_at_non_letter(self):
        toks = tokenize("%type<val>")
        self.assertEqual(texts(toks), ["%type", "<val>"])
        self.assertEqual(kinds(toks), [TokenKind.KEYWORD, TokenKind.REGEX])

    def test_action_block_trimmed(self):
        toks = tokenize("{ $$ = $1; }")
        self.assertEqual(toks, [Token(TokenKind.ACTION, "$$ = $1;", 1, 1)])

    def test_action_block_tracks_nesting(self):
        toks = tokenize("{ if (x) { y(); } } z")
        self.assertEqual(toks[0].text, "if (x) { y(); }")
        self.assertEqual(toks[1], Token(TokenKind.IDENT, "z", 1, 21))

    def test_action_block_ignores_braces_in_strings(self):
        toks = tokenize('{ printf("}"); } x')
        self.assertEqual(texts(toks), ['printf("}");', "x"])

    def test_action_block_ignores_braces_in_comments(self):
        toks = tokenize("{ /* don't } */ return 1; }")
        self.assertEqual(len(toks), 1)
        self.assertEqual(toks[0].text, "/* don't } */ return 1;")

    def test_unterminated_action_runs_to_end(self):
        toks = tokenize("x { abc\n def")
        self.assertEqual(toks[-1], Token(TokenKind.ACTION, "abc\n def", 1, 3))

    def test_multiline_action_updates_position(self):
        toks = tokenize("{\n a;\n}\nb")
        self.assertEqual(toks[0], Token(TokenKind.ACTION, "a;", 1, 1))
        self.assertEqual(toks[1], Token(TokenKind.IDENT, "b", 4, 1))

    def test_same_line_after_multiline_action(self):
        toks = tokenize("{\n a;\n} ;")
        self.assertEqual((toks[1].line, toks[1].col), (3, 3))

    def test_multiline_literal_updates_position(self):
        toks = tokenize("'a\nb' c")
        self.assertEqual(toks[0], Token(TokenKind.LITERAL, "'a\nb'", 1, 1))
        self.assertEqual(toks[1], Token(TokenKind.IDENT, "c", 2, 4))

    def test_regex_pattern_then_action(self):
        toks = tokenize("[0-9]+ { return NUM; }")
        self.assertEqual(toks[0], Token(TokenKind.REGEX, "[0-9]+", 1, 1))
        self.assertEqual(toks[1], Token(TokenKind.ACTION, "return NUM;", 1, 8))

    def test_regex_stops_at_brace(self):
        toks = tokenize("[a-z]+{x}")
        self.assertEqual(texts(toks), ["[a-z]+", "x"])
        self.assertEqual(toks[1].col, 7)

    def test_regex_swallows_punctuation(self):
        toks = tokenize("[0-9]+;")
        self.assertEqual(toks, [Token(TokenKind.REGEX, "[0-9]+;", 1, 1)])

    def test_identifiers(self):
        toks = tokenize("_foo1 bar αβγ_2 12abc")
        self.assertEqual(texts(toks), ["_foo1", "bar", "αβγ_2", "12abc"])
        self.assertEqual(kinds(toks), [TokenKind.IDENT] * 3 + [TokenKind.REGEX])

    def test_identifier_then_semicolon(self):
        toks = tokenize("NUM;")
        self.assertEqual(kinds(toks), [TokenKind.IDENT, TokenKind.SEMI])

    def test_newlines_and_crlf(self):
        toks = tokenize("a\r\n  b\n\tc")
        self.assertEqual([(t.line, t.col) for t in toks], [(1, 1), (2, 3), (3, 2)])

    def test_empty_and_blank_input(self):
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize(" \n\t\r\n"), [])

    def test_positions_non_decreasing(self):
        src = (
            "%token NUM ID\n"
            "%%\n"
            "expr : expr '+' term { $$ = $1 + $3; }\n"
            "     | term\n"
            "     ;\n"
            "term : NUM { $$ = $1; } | '(' expr ')' { $$ = $2; } ;\n"
        )
        toks = tokenize(src)
        positions = [(t.line, t.col) for t in toks]
        self.assertEqual(positions, sorted(positions))

    def test_non_whitespace_reconstructed(self):
        src = "x : 'a' | [0-9]+ ;\n  y: %token NUM"
        toks = tokenize(src)
        self.assertEqual("".join(texts(toks)), "".join(src.split()))

    def test_never_emits_whitespace_or_unknown(self):
        toks = tokenize("\f ~!@#$ } ) ] \v")
        self.assertTrue(toks)
        for t in toks:
            self.assertIn(t.kind, TokenKind.ALL)
            self.assertNotIn(t.kind, (TokenKind.WHITESPACE, TokenKind.UNKNOWN))


class TestEndPosition(unittest.TestCase):
    def test_single_line(self):
        self.assertEqual(end_position("abc"), (1, 4))

    def test_trailing_newline(self):
        self.assertEqual(end_position("abc\n"), (2, 1))

    def test_empty(self):
        self.assertEqual(end_position(""), (1, 1))


if __name__ == "__main__":
    unittest.main()
