import dataclasses
from textwrap import dedent

import pytest

from stringdoc.docstring import DocstringParser, parse_docstring, split_argument_spec
from stringdoc.spec import FormatError, MissingValueError, Preset


@pytest.fixture
def parser() -> DocstringParser:
    return DocstringParser()


def test_plain_paragraphs_are_joined_by_one_blank_line(parser):
    doc = """First paragraph
    spans two lines.


    Second paragraph.
    """

    record = parser.parse(doc)

    assert record.body_text == "First paragraph\nspans two lines.\n\nSecond paragraph."
    assert record.defaults == ()
    assert record.argdocs == ()
    assert record.presets == ()


def test_arguments_block(parser):
    doc = """Summary line.

    More text.

    .. arguments::

       foo [bar]
         description here
       baz
         other
    """

    record = parser.parse(doc)

    assert record.body_text == "Summary line.\n\nMore text."
    assert record.defaults_map() == {"foo": "bar"}
    assert record.argdocs_map() == {"foo": "description here", "baz": "other"}


def test_full_text_is_the_dedented_docstring(parser):
    doc = """Summary.

    .. arguments::

       x [1]
         the x
    """

    record = parser.parse(doc)

    assert record.full_text == dedent(
        """\
        Summary.

        .. arguments::

           x [1]
             the x

        """
    )


def test_argument_descriptions_keep_blank_lines_and_relative_indent(parser):
    doc = """Summary.

    .. arguments::

       foo
         line one

         line two
           indented
       bar
    """

    record = parser.parse(doc)

    assert record.argdocs == (
        ("foo", "line one\n\nline two\n  indented"),
        ("bar", ""),
    )


def test_argument_order_is_preserved_and_later_entries_win(parser):
    doc = """Summary.

    .. arguments::

       b [2]
         first b
       a [1]
         an a
       b [3]
         second b
    """

    record = parser.parse(doc)

    assert [name for name, _ in record.argdocs] == ["b", "a", "b"]
    assert record.defaults_map() == {"b": "3", "a": "1"}
    assert record.argdocs_map()["b"] == "second b"


def test_presets_block(parser):
    doc = """Summary.

    .. presets::

       fast
         x=1,y=2
       labeled
         labels={a,b}
    """

    record = parser.parse(doc)

    assert record.presets == (
        Preset(name="fast", parameters=(("x", "1"), ("y", "2"))),
        Preset(name="labeled", parameters=(("labels", "a,b"),)),
    )
    assert record.presets_map() == {
        "fast": {"x": "1", "y": "2"},
        "labeled": {"labels": "a,b"},
    }


def test_pretty_printed_presets(parser):
    doc = """Summary.

    .. presets::

       nested
         a=1
         b=
           c=2
           d=3
         {odd=key}=v
    """

    record = parser.parse(doc)

    assert record.presets_map() == {
        "nested": {"a": "1", "b": "c=2,d=3", "odd=key": "v"}
    }


def test_preset_without_parameters(parser):
    doc = """Summary.

    .. presets::

       empty
       other
         x=1
    """

    record = parser.parse(doc)

    assert record.presets_map() == {"empty": {}, "other": {"x": "1"}}


def test_preset_item_without_value_is_an_error(parser):
    doc = """Summary.

    .. presets::

       slow
         x=1,y
    """

    with pytest.raises(MissingValueError) as excinfo:
        parser.parse(doc)

    assert excinfo.value.preset == "slow"
    assert excinfo.value.item == "y"
    assert str(excinfo.value) == "preset slow has no value for argument y"


def test_badly_indented_preset_names_the_preset(parser):
    doc = """Summary.

    .. presets::

       broken
         a=1
             b=2
           c=3
    """

    with pytest.raises(FormatError) as excinfo:
        parser.parse(doc)

    assert excinfo.value.preset == "broken"
    assert excinfo.value.lineno == 3
    assert "broken" in str(excinfo.value)


def test_underindented_block_is_empty_and_lines_become_text(parser):
    doc = """Summary.

    .. arguments::

      foo
        desc
    """

    record = parser.parse(doc)

    assert record.argdocs == ()
    assert record.body_text == "Summary.\n\n  foo\n    desc"


def test_markers_must_match_the_whole_line(parser):
    doc = """Summary.

    .. arguments:: extra

       foo [1]
    """

    record = parser.parse(doc)

    assert record.defaults == ()
    assert ".. arguments:: extra" in record.body_text


def test_text_around_blocks_is_kept(parser):
    doc = """Intro.

    .. arguments::

       x [1]
         the x

    Outro.
    """

    record = parser.parse(doc)

    assert record.body_text == "Intro.\n\nOutro."
    assert record.argdocs_map() == {"x": "the x"}


def test_blocks_may_follow_each_other(parser):
    doc = """Summary.

    .. arguments::

       x [1]
         the x
    .. presets::

       small
         x=0
    """

    record = parser.parse(doc)

    assert record.defaults_map() == {"x": "1"}
    assert record.presets_map() == {"small": {"x": "0"}}


def test_empty_docstring():
    record = parse_docstring("")

    assert record.full_text == "\n"
    assert record.body_text == ""
    assert record.is_empty()
    assert record.to_data() == {"text": ""}


def test_record_is_frozen():
    record = parse_docstring("Summary.")

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.body_text = "changed"  # type: ignore[misc]


def test_record_to_data_includes_only_present_sections():
    record = parse_docstring(
        """Summary.

        .. arguments::

           x [1]
        """
    )

    assert record.to_data() == {
        "text": "Summary.",
        "defaults": {"x": "1"},
        "argdocs": {"x": ""},
    }


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("foo [bar]", ("foo", "bar")),
        ("foo", ("foo", None)),
        ("foo []", ("foo", "")),
        ("foo [a [b]]", ("foo", "a [b]")),
        ("foo[bar]", ("foo[bar]", None)),
        ("foo [bar", ("foo [bar", None)),
    ],
)
def test_split_argument_spec(spec, expected):
    assert split_argument_spec(spec) == expected


def test_blank_line_between_arguments_records_an_unnamed_entry(parser):
    doc = """Summary.

    .. arguments::

       a [1]
         first

       b [2]
         second
    """

    record = parser.parse(doc)

    assert record.argdocs == (("a", "first"), ("", ""), ("b", "second"))
    assert record.defaults == (("a", "1"), ("b", "2"))


def test_whitespace_only_line_deeper_than_text_keeps_docstring_undedented():
    record = parse_docstring("Summary.\n    \n  Body")

    assert record.full_text == "Summary.\n\n  Body\n"
    assert record.body_text == "Summary.\n\n  Body"
