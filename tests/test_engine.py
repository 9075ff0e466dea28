"""
Tests for the URL rewriting engine.
"""

import unittest
from pathlib import Path

from css_url_rewrite.errors import ConfigurationError, ReplacerError, TokenizeError
from css_url_rewrite.rewrite.engine import URLRewriter, bare_url, rewrite_css

FIXTURES = Path(__file__).parent / "fixtures"

BIG = (
    "abcdefghijklmnopqrstuvwxyz-123456789-abcdefghijklmnopqrstuvwxyz-123456789-"
    "abcdefghijklmnopqrstuvwxyz-123456789.css"
)


def fixture(name: str) -> str:
    return (FIXTURES / name).read_bytes().decode("utf-8")


def to_bar(url):
    return "bar.css"


class TestConstruction(unittest.TestCase):
    def test_missing_replacer(self):
        with self.assertRaisesRegex(ConfigurationError, "expects a function"):
            URLRewriter(None)

    def test_non_callable_replacer(self):
        with self.assertRaisesRegex(ConfigurationError, "expects a function"):
            URLRewriter("hallo")

    def test_configuration_error_is_type_error(self):
        with self.assertRaises(TypeError):
            URLRewriter(42)

    def test_invalid_quote_style(self):
        rewriter = URLRewriter(to_bar)
        with self.assertRaises(ConfigurationError):
            rewriter.rewrite("a{b:url(x)}", "`")


class TestBareUrl(unittest.TestCase):
    def test_unquoted(self):
        self.assertEqual(bare_url("url(foo.css)"), "foo.css")

    def test_double_quoted(self):
        self.assertEqual(bare_url('url("foo.css")'), "foo.css")

    def test_single_quoted(self):
        self.assertEqual(bare_url("url('foo.css')"), "foo.css")

    def test_padding(self):
        self.assertEqual(bare_url("url( foo.css )"), "foo.css")
        self.assertEqual(bare_url('url( "foo.css" )'), "foo.css")

    def test_uppercase_wrapper(self):
        self.assertEqual(bare_url("URL(foo.css)"), "foo.css")


class TestReplacerArgument(unittest.TestCase):
    def _seen(self, css):
        seen = []

        def replacer(url):
            seen.append(url)
            return "bar.css"

        result = URLRewriter(replacer).rewrite(css)
        return seen, result

    def test_double_quotes(self):
        seen, result = self._seen('@import url("foo.css") screen;')
        self.assertEqual(seen, ["foo.css"])
        self.assertEqual(result, "@import url(bar.css) screen;")

    def test_single_quotes(self):
        seen, result = self._seen("@import url('foo.css') screen;")
        self.assertEqual(seen, ["foo.css"])
        self.assertEqual(result, "@import url(bar.css) screen;")

    def test_no_quotes(self):
        seen, result = self._seen("@import url(foo.css) screen;")
        self.assertEqual(seen, ["foo.css"])
        self.assertEqual(result, "@import url(bar.css) screen;")

    def test_whitespace(self):
        seen, result = self._seen("@import url( foo.css ) screen;")
        self.assertEqual(seen, ["foo.css"])
        self.assertEqual(result, "@import url(bar.css) screen;")

    def test_urls_seen_in_source_order(self):
        seen, _ = self._seen("a{b:url(1.png)}\nc{d:url(2.png) url(3.png)}")
        self.assertEqual(seen, ["1.png", "2.png", "3.png"])


class TestRewrite(unittest.TestCase):
    def test_lf_line_endings(self):
        result = rewrite_css("@import url(foo.css) screen;\n@import url(foo2.css);", to_bar)
        self.assertEqual(result, "@import url(bar.css) screen;\n@import url(bar.css);")

    def test_crlf_line_endings(self):
        result = rewrite_css("@import url(foo.css) screen;\r\n@import url(foo2.css);", to_bar)
        self.assertEqual(result, "@import url(bar.css) screen;\r\n@import url(bar.css);")

    def test_crlf_kept_without_urls(self):
        css = "a {\r\n  color: red;\r\n}\r\n"
        self.assertEqual(rewrite_css(css, to_bar), css)

    def test_comments_preserved(self):
        result = rewrite_css("/*import something*/\n@import url(foo.css) screen;", to_bar)
        self.assertEqual(result, "/*import something*/\n@import url(bar.css) screen;")

    def test_url_inside_comment_untouched(self):
        css = "/* url(old.png) */ a { background: url(x.png) }"
        self.assertEqual(
            rewrite_css(css, to_bar),
            "/* url(old.png) */ a { background: url(bar.css) }",
        )

    def test_url_inside_string_untouched(self):
        css = 'a::after { content: "url(x.png)"; }'
        self.assertEqual(rewrite_css(css, to_bar), css)

    def test_no_urls(self):
        css = "body {\n    color: #333;\n}\n"
        self.assertEqual(rewrite_css(css, to_bar), css)

    def test_empty_input(self):
        self.assertEqual(rewrite_css("", to_bar), "")

    def test_identity_replacer_is_byte_identical(self):
        css = (
            "/* header */\n"
            "@import url(base.css);\n"
            ".a{background:url(a.png) no-repeat}.b{background:url(img/b.png)}\n"
            "\n"
            "   .c { cursor: url(c.cur), auto; }\n"
        )
        self.assertEqual(rewrite_css(css, lambda url: url), css)

    def test_nested_functions(self):
        css = "a { background: image-set(url(a.png) 1x, url('b.png') 2x); }"
        result = rewrite_css(css, lambda url: "x/" + url)
        self.assertEqual(
            result, "a { background: image-set(url(x/a.png) 1x, url(x/b.png) 2x); }"
        )

    def test_uppercase_url(self):
        self.assertEqual(rewrite_css("a{b:URL(foo.png)}", to_bar), "a{b:url(bar.css)}")

    def test_more_than_one_url_in_file(self):
        self.assertEqual(rewrite_css(fixture("before.css"), to_bar), fixture("after.css"))

    def test_two_urls_on_same_line(self):
        self.assertEqual(
            rewrite_css(fixture("minified-before.css"), to_bar),
            fixture("minified-after.css"),
        )

    def test_bytes_in_bytes_out(self):
        result = rewrite_css("a{b:url(é.png)}".encode("utf-8"), lambda url: url.upper())
        self.assertEqual(result, "a{b:url(É.PNG)}".encode("utf-8"))


class TestQuoteStyle(unittest.TestCase):
    def test_single_quotes_file(self):
        self.assertEqual(
            rewrite_css(fixture("before.css"), to_bar, "'"),
            fixture("after-single-quotes.css"),
        )

    def test_double_quotes_file(self):
        self.assertEqual(
            rewrite_css(fixture("before.css"), to_bar, '"'),
            fixture("after-double-quotes.css"),
        )

    def test_single_quotes_same_line(self):
        self.assertEqual(
            rewrite_css(fixture("minified-before.css"), to_bar, "'"),
            fixture("minified-after-single-quotes.css"),
        )

    def test_double_quotes_same_line(self):
        self.assertEqual(
            rewrite_css(fixture("minified-before.css"), to_bar, '"'),
            fixture("minified-after-double-quotes.css"),
        )


class TestColumnAdjustment(unittest.TestCase):
    def test_replace_with_smaller_link(self):
        self.assertEqual(
            rewrite_css(fixture("font-before.css"), to_bar),
            fixture("font-after.css"),
        )

    def test_replace_with_bigger_link(self):
        self.assertEqual(
            rewrite_css(fixture("font-before.css"), lambda url: BIG, '"'),
            fixture("font-big-after.css"),
        )

    def test_mixed_growth_and_shrink_on_one_line(self):
        css = "a{b:url(aaaaaaaaaa.png) url(b.png) url('cccccccccc.png')}"
        names = iter(["1", "a-much-longer-name.png", "3"])
        result = rewrite_css(css, lambda url: next(names))
        self.assertEqual(result, "a{b:url(1) url(a-much-longer-name.png) url(3)}")

    def test_adjustment_resets_on_new_line(self):
        css = "a{b:url(aaaaaaaaaaaaaaaa.png) url(b.png)}\nc{d:url(c.png)}"
        result = rewrite_css(css, lambda url: "z")
        self.assertEqual(result, "a{b:url(z) url(z)}\nc{d:url(z)}")


class TestFailures(unittest.TestCase):
    def test_replacer_error_propagates(self):
        def boom(url):
            raise ValueError("This is bad")

        with self.assertRaises(ReplacerError) as ctx:
            rewrite_css("a{b:url(foo.png)}", boom)
        self.assertEqual(ctx.exception.url, "foo.png")
        self.assertIsInstance(ctx.exception.__cause__, ValueError)

    def test_replacer_must_return_string(self):
        with self.assertRaises(ReplacerError):
            rewrite_css("a{b:url(foo.png)}", lambda url: None)

    def test_bad_url_raises_tokenize_error(self):
        with self.assertRaises(TokenizeError) as ctx:
            rewrite_css("a {}\nb { c: url(foo bar.png) }", to_bar)
        self.assertEqual(ctx.exception.line, 2)


if __name__ == "__main__":
    unittest.main()
