"""
Test suite for the Radish scanner.

Tests cover:
- Operator, number, identifier and keyword classification
- The whitespace allow-list
- Grapheme-cluster positions and spans
- ERROR tokens and scanning past them
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from radish.lexer import Scanner, Source, TokenType, LexerError, tokenize_string


def kinds(text):
    return [token.type for token in Scanner(text).tokenize()]


class TestScannerClassification(unittest.TestCase):
    """Token classification."""

    def test_operator_tokens(self):
        scanner = Scanner("+-*/")
        expected = [
            (TokenType.PLUS, "+"),
            (TokenType.MINUS, "-"),
            (TokenType.STAR, "*"),
            (TokenType.SLASH, "/"),
            (TokenType.EOF, ""),
        ]
        for token_type, text in expected:
            token = scanner.scan_token()
            self.assertEqual(token.type, token_type)
            self.assertEqual(token.text, text)

    def test_number_token(self):
        scanner = Scanner("123")
        token = scanner.scan_token()
        self.assertEqual(token.type, TokenType.NUMBER)
        self.assertEqual(token.text, "123")
        self.assertEqual(scanner.scan_token().type, TokenType.EOF)

    def test_number_has_no_fraction_or_exponent(self):
        tokens = Scanner("1.5").tokenize()
        self.assertEqual(tokens[0].type, TokenType.NUMBER)
        self.assertEqual(tokens[0].text, "1")
        self.assertEqual(tokens[1].type, TokenType.ERROR)
        self.assertEqual(tokens[2].type, TokenType.NUMBER)
        self.assertEqual(tokens[2].text, "5")

    def test_boolean_keywords(self):
        token = Scanner("true").scan_token()
        self.assertEqual(token.type, TokenType.TRUE)
        self.assertEqual(token.text, "true")

        token = Scanner("false").scan_token()
        self.assertEqual(token.type, TokenType.FALSE)
        self.assertEqual(token.text, "false")

    def test_keyword_prefix_is_identifier(self):
        tokens = Scanner("truee").tokenize()
        self.assertEqual(len(tokens), 2)
        self.assertEqual(tokens[0].type, TokenType.IDENT)
        self.assertEqual(tokens[0].text, "truee")

    def test_keywords_are_case_sensitive(self):
        self.assertEqual(kinds("True FALSE"), [TokenType.IDENT, TokenType.IDENT, TokenType.EOF])

    def test_identifiers(self):
        scanner = Scanner("radishes cats _under_score")
        for text in ("radishes", "cats", "_under_score"):
            token = scanner.scan_token()
            self.assertEqual(token.type, TokenType.IDENT)
            self.assertEqual(token.text, text)

    def test_identifier_stops_at_digit(self):
        tokens = Scanner("abc123").tokenize()
        self.assertEqual([t.type for t in tokens],
                         [TokenType.IDENT, TokenType.NUMBER, TokenType.EOF])
        self.assertEqual(tokens[0].text, "abc")
        self.assertEqual(tokens[1].text, "123")

    def test_parentheses(self):
        scanner = Scanner("123 (456 789)")
        self.assertEqual(scanner.scan_token().type, TokenType.NUMBER)
        token = scanner.scan_token()
        self.assertEqual(token.type, TokenType.LEFT_PAREN)
        self.assertEqual(token.text, "(")
        self.assertEqual(scanner.scan_token().type, TokenType.NUMBER)
        self.assertEqual(scanner.scan_token().type, TokenType.NUMBER)
        token = scanner.scan_token()
        self.assertEqual(token.type, TokenType.RIGHT_PAREN)
        self.assertEqual(token.text, ")")
        self.assertEqual(scanner.scan_token().type, TokenType.EOF)

    def test_token_predicates(self):
        tokens = list(Scanner("1 + true"))
        self.assertTrue(tokens[0].is_literal)
        self.assertTrue(tokens[1].is_operator)
        self.assertFalse(tokens[1].is_literal)
        self.assertTrue(tokens[2].is_literal)
        self.assertEqual(tokens[3].type, TokenType.EOF)
        self.assertEqual(tokens[3].type.description, "end of input")
        self.assertEqual(TokenType.PLUS.description, "PLUS")

    def test_multiple_tokens(self):
        self.assertEqual(kinds("1 + 23 + 456"), [
            TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER,
            TokenType.PLUS, TokenType.NUMBER, TokenType.EOF,
        ])


class TestScannerWhitespace(unittest.TestCase):
    """The whitespace allow-list."""

    def test_only_whitespace(self):
        self.assertEqual(kinds("    "), [TokenType.EOF])
        self.assertEqual(kinds("\r\r\t"), [TokenType.EOF])

    def test_whitespace_between_tokens(self):
        self.assertEqual(kinds("  123    + 45  "), [
            TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER, TokenType.EOF,
        ])

    def test_unicode_allow_list(self):
        text = "1\u0085\u200e\u200f\u2028\u2029\u000b\u000c+2"
        self.assertEqual(kinds(text), [
            TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER, TokenType.EOF,
        ])

    def test_other_unicode_spaces_are_errors(self):
        # NO-BREAK SPACE has the White_Space property but is not allowed
        tokens = Scanner("1\u00a02").tokenize()
        self.assertEqual([t.type for t in tokens], [
            TokenType.NUMBER, TokenType.ERROR, TokenType.NUMBER, TokenType.EOF,
        ])

    def test_newline_is_not_whitespace(self):
        tokens = Scanner("1\n2").tokenize()
        self.assertEqual(tokens[1].type, TokenType.ERROR)


class TestScannerSpans(unittest.TestCase):
    """Grapheme-indexed spans."""

    def test_token_spans(self):
        scanner = Scanner("789 102 猫")
        token = scanner.scan_token()
        self.assertEqual((token.span.start, token.span.end), (0, 3))
        token = scanner.scan_token()
        self.assertEqual((token.span.start, token.span.end), (4, 7))
        token = scanner.scan_token()
        self.assertEqual(token.type, TokenType.ERROR)
        self.assertEqual((token.span.start, token.span.end), (8, 9))
        token = scanner.scan_token()
        self.assertEqual(token.type, TokenType.EOF)
        self.assertEqual((token.span.start, token.span.end), (9, 9))

    def test_combining_mark_is_one_position(self):
        # e + COMBINING ACUTE ACCENT is a single grapheme cluster
        scanner = Scanner("e\u0301 + 1")
        token = scanner.scan_token()
        self.assertEqual(token.type, TokenType.ERROR)
        self.assertEqual((token.span.start, token.span.end), (0, 1))
        self.assertIn("e\u0301", token.text)

        token = scanner.scan_token()
        self.assertEqual(token.type, TokenType.PLUS)
        self.assertEqual((token.span.start, token.span.end), (2, 3))

        token = scanner.scan_token()
        self.assertEqual(token.type, TokenType.NUMBER)
        self.assertEqual((token.span.start, token.span.end), (4, 5))

    def test_digit_with_combining_mark_is_not_a_digit(self):
        tokens = Scanner("1\u0301").tokenize()
        self.assertEqual(tokens[0].type, TokenType.ERROR)
        self.assertEqual(len(tokens[0].span), 1)

    def test_emoji_sequence_is_one_position(self):
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        tokens = Scanner(family + "1").tokenize()
        self.assertEqual(tokens[0].type, TokenType.ERROR)
        self.assertEqual((tokens[0].span.start, tokens[0].span.end), (0, 1))
        self.assertEqual((tokens[1].span.start, tokens[1].span.end), (1, 2))

    def test_spans_share_the_source(self):
        source = Source("1 + 2")
        tokens = Scanner(source).tokenize()
        for token in tokens:
            self.assertIs(token.span.source, source)

    def test_empty_source(self):
        token = Scanner("").scan_token()
        self.assertEqual(token.type, TokenType.EOF)
        self.assertEqual((token.span.start, token.span.end), (0, 0))

    def test_eof_repeats(self):
        scanner = Scanner("1")
        scanner.scan_token()
        first = scanner.scan_token()
        second = scanner.scan_token()
        self.assertEqual(first.type, TokenType.EOF)
        self.assertEqual(second.type, TokenType.EOF)
        self.assertEqual(first.span, second.span)


class TestScannerErrors(unittest.TestCase):
    """ERROR tokens and recovery."""

    def test_unexpected_character(self):
        scanner = Scanner("猫")
        token = scanner.scan_token()
        self.assertEqual(token.type, TokenType.ERROR)
        self.assertEqual(token.text, "Unexpected character: '猫'")
        self.assertEqual(token.diagnostic.code, "L001")
        self.assertEqual(token.diagnostic.span, token.span)
        self.assertEqual(scanner.scan_token().type, TokenType.EOF)

    def test_scanning_continues_after_error(self):
        tokens = Scanner("1 猫 2 ? 3").tokenize()
        self.assertEqual([t.type for t in tokens], [
            TokenType.NUMBER, TokenType.ERROR, TokenType.NUMBER,
            TokenType.ERROR, TokenType.NUMBER, TokenType.EOF,
        ])
        self.assertEqual(tokens[2].text, "2")

    def test_errors_are_collected(self):
        scanner = Scanner("猫 ?")
        scanner.tokenize()
        self.assertTrue(scanner.has_errors())
        self.assertEqual(len(scanner.errors), 2)
        self.assertIn("'?'", scanner.errors[1].diagnostic.message)

    def test_tokenize_resets(self):
        scanner = Scanner("猫")
        scanner.tokenize()
        tokens = scanner.tokenize()
        self.assertEqual(len(scanner.errors), 1)
        self.assertEqual(len(tokens), 2)

    def test_lookalike_suggestion(self):
        token = Scanner("\u2212").scan_token()
        self.assertEqual(token.type, TokenType.ERROR)
        self.assertEqual(token.diagnostic.suggestions, ["-"])

    def test_tokenize_string_raises_first_error(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("1 + 猫 + ?")
        self.assertIn("猫", ctx.exception.diagnostic.message)
        self.assertEqual(ctx.exception.span.start, 4)

    def test_tokenize_string_clean_input(self):
        tokens = tokenize_string("(1)")
        self.assertEqual([t.type for t in tokens], [
            TokenType.LEFT_PAREN, TokenType.NUMBER, TokenType.RIGHT_PAREN, TokenType.EOF,
        ])


if __name__ == "__main__":
    unittest.main()
