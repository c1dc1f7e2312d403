"""Tests for template scanning and directive parsing."""

import pytest

from localized_format.directives import (
    ConversionSpec,
    InlinePlural,
    NamedFormat,
    NamedValue,
    PluralReference,
    PositionalFormat,
    Template,
    parse_segments,
)
from localized_format.errors import MalformedInlinePluralError
from localized_format.scanner import Literal, TokenKind, scan


# =============================================================================
# Scanner
# =============================================================================


class TestScan:
    def test_plain_text_is_one_literal(self):
        assert list(scan("no placeholders here")) == [Literal("no placeholders here")]

    def test_empty_template(self):
        assert list(scan("")) == []

    def test_double_percent_is_unescaped(self):
        assert list(scan("100%%")) == [Literal("100%")]

    def test_unknown_percent_sequence_is_literal(self):
        assert list(scan("50%! %")) == [Literal("50%! %")]

    @pytest.mark.parametrize("text", ["50%right", "%a", "%r", "%b"])
    def test_non_c_conversions_are_literal(self, text):
        assert list(scan(text)) == [Literal(text)]

    def test_positional_conversion(self):
        segments = list(scan("%d is an integer"))

        assert segments[0].kind is TokenKind.POSITIONAL
        assert segments[0].source == "%d"
        assert segments[1] == Literal(" is an integer")

    def test_positional_flags_and_width(self):
        token = next(iter(scan("% 04d")))

        assert token.source == "% 04d"
        assert token.group("flags") == " 0"
        assert token.group("width") == "4"
        assert token.group("conversion") == "d"

    def test_named_format_with_tail(self):
        token = next(iter(scan("%<num>.2f")))

        assert token.kind is TokenKind.NAMED_FORMAT
        assert token.group("key") == "num"
        assert token.group("precision") == "2"

    def test_named_value_and_plural_reference(self):
        tokens = [s for s in scan("%{msg}: %{horses_count:horses}") if not isinstance(s, Literal)]

        assert [t.kind for t in tokens] == [TokenKind.NAMED_VALUE, TokenKind.NAMED_VALUE]
        assert tokens[0].group("rules") is None
        assert tokens[1].group("key") == "horses_count"
        assert tokens[1].group("rules") == "horses"

    def test_inline_plural_tracks_nested_braces(self):
        text = '%<{"n": {"other": "%{n} items"}}>!'
        segments = list(scan(text))

        assert segments[0].kind is TokenKind.INLINE_PLURAL
        assert segments[0].source == text[:-1]
        assert segments[1] == Literal("!")

    def test_inline_plural_ignores_braces_in_strings(self):
        text = '%<{"n": {"other": "} and { \\" }"}}>'
        token = next(iter(scan(text)))

        assert token.kind is TokenKind.INLINE_PLURAL
        assert token.source == text

    def test_unbalanced_inline_plural_is_literal(self):
        text = '%<{"n": {"other": "x"}'
        assert list(scan(text)) == [Literal(text)]

    def test_inline_plural_without_closing_angle_is_literal(self):
        text = '%<{"n": {"other": "x"}}'
        assert list(scan(text)) == [Literal(text)]

    def test_scan_is_lazy(self):
        iterator = scan("%s %s")
        assert next(iterator).source == "%s"


# =============================================================================
# Parser
# =============================================================================


class TestParseSegments:
    def test_positional_format(self):
        (directive,) = parse_segments("%- 04d")

        assert directive == PositionalFormat(ConversionSpec("- 0", "4", None, "d"), "%- 04d")
        assert str(directive.spec) == "%- 04d"

    def test_named_format(self):
        (directive,) = parse_segments("%<num>.2f")

        assert isinstance(directive, NamedFormat)
        assert directive.key == "num"
        assert str(directive.spec) == "%.2f"

    def test_named_format_without_tail_defaults_to_string(self):
        (directive,) = parse_segments("%<name>")

        assert str(directive.spec) == "%s"

    def test_named_value(self):
        (directive,) = parse_segments("%{noun}")
        assert directive == NamedValue("noun", "%{noun}")

    def test_plural_reference(self):
        (directive,) = parse_segments("%{horses_count:horses}")
        assert directive == PluralReference("horses_count", "horses", "%{horses_count:horses}")

    def test_inline_plural(self):
        source = '%<{ "horses_count": { "one": "a horse", "other": "%{horses_count} horses" } }>'
        (directive,) = parse_segments(source)

        assert isinstance(directive, InlinePlural)
        assert directive.count_key == "horses_count"
        assert dict(directive.categories) == {"one": "a horse", "other": "%{horses_count} horses"}
        assert directive.source == source

    def test_malformed_inline_plural_raises(self):
        with pytest.raises(MalformedInlinePluralError):
            list(parse_segments('%<{"n" {"one": "x"}}>'))


class TestTemplate:
    def test_iteration_is_restartable(self):
        template = Template.parse("%s: %{a:b}")

        assert list(template) == list(template)
        assert len(template) == 3

    def test_is_literal(self):
        assert Template.parse("just text").is_literal
        assert not Template.parse("%s").is_literal

    def test_source_is_kept(self):
        assert Template.parse("%{a}").source == "%{a}"
