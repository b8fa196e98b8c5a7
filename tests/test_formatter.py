from unittest.mock import patch

from scss_lint_formatter.colors import Colorizer
from scss_lint_formatter.formatter import ResultFormatter, format_results
from scss_lint_formatter.types import FileResult, Message

FOO = {
    "message": "Unexpected foo.",
    "severity": 2,
    "line": 5,
    "column": 10,
    "ruleId": "foo",
}
BAR = {
    "message": "Unexpected bar.",
    "severity": 1,
    "line": 6,
    "column": 11,
    "ruleId": "bar",
}


def make_spied_formatter():
    """Build a color-disabled formatter whose color methods are spies."""
    colorizer = Colorizer(enabled=False)
    spies = {}
    for name in ("cyan", "magenta", "red", "yellow", "green"):
        spy = patch.object(colorizer, name, wraps=getattr(colorizer, name)).start()
        spies[name] = spy
    return ResultFormatter(colorizer=colorizer), spies


def call_counts(spies):
    return {name: spy.call_count for name, spy in spies.items()}


def teardown_function():
    patch.stopall()


def test_format_empty_results():
    """Test that no results produce an empty string."""
    assert format_results([]) == ""
    assert format_results([], color_enabled=False) == ""


def test_format_file_without_messages():
    """Test that a file with no messages produces nothing and no color calls."""
    formatter, spies = make_spied_formatter()

    result = formatter.format([{"filePath": "foo.scss", "messages": []}])

    assert result == ""
    assert call_counts(spies) == {"cyan": 0, "magenta": 0, "red": 0, "yellow": 0, "green": 0}


def test_format_single_error():
    """Test format filename:line:column [E] ruleId: message."""
    formatter, spies = make_spied_formatter()

    result = formatter.format([{"filePath": "foo.scss", "messages": [FOO]}])

    assert result == "foo.scss:5:10 [E] foo: Unexpected foo.\n"
    assert call_counts(spies) == {"cyan": 1, "magenta": 2, "red": 1, "yellow": 0, "green": 1}


def test_format_single_warning():
    """Test that severity 1 is rendered as a warning."""
    formatter, spies = make_spied_formatter()

    result = formatter.format([{"filePath": "foo.scss", "messages": [{**FOO, "severity": 1}]}])

    assert result == "foo.scss:5:10 [W] foo: Unexpected foo.\n"
    assert call_counts(spies) == {"cyan": 1, "magenta": 2, "red": 0, "yellow": 1, "green": 1}


def test_format_unknown_severity_is_warning():
    """Test that any severity other than exactly 2 is rendered as a warning."""
    for severity in (0, 3, -1, 10, "2", "error", 1.5, None, True):
        result = format_results(
            [{"filePath": "foo.scss", "messages": [{**FOO, "severity": severity}]}],
            color_enabled=False,
        )
        assert "[W]" in result
        assert "[E]" not in result


def test_format_multiple_messages():
    """Test multiple messages in one file."""
    formatter, spies = make_spied_formatter()

    result = formatter.format([{"filePath": "foo.scss", "messages": [FOO, BAR]}])

    assert result == (
        "foo.scss:5:10 [E] foo: Unexpected foo.\n" "foo.scss:6:11 [W] bar: Unexpected bar.\n"
    )
    assert call_counts(spies) == {"cyan": 2, "magenta": 4, "red": 1, "yellow": 1, "green": 2}


def test_format_multiple_files():
    """Test multiple files with one message each."""
    formatter, spies = make_spied_formatter()

    result = formatter.format(
        [
            {"filePath": "foo.scss", "messages": [FOO]},
            {"filePath": "bar.scss", "messages": [BAR]},
        ]
    )

    assert result == (
        "foo.scss:5:10 [E] foo: Unexpected foo.\n" "bar.scss:6:11 [W] bar: Unexpected bar.\n"
    )
    assert call_counts(spies) == {"cyan": 2, "magenta": 4, "red": 1, "yellow": 1, "green": 2}


def test_format_preserves_order_and_line_count():
    """Test that output follows file order, then message order."""
    results = [
        FileResult(
            file_path=f"file{i}.scss",
            messages=[
                Message(line=j + 1, column=1, severity=1, rule_id=f"rule{j}", message="m")
                for j in range(i)
            ],
        )
        for i in range(4)
    ]

    lines = format_results(results, color_enabled=False).splitlines()

    assert len(lines) == 0 + 1 + 2 + 3
    assert lines == [
        f"file{i}.scss:{j + 1}:1 [W] rule{j}: m" for i in range(4) for j in range(i)
    ]


def test_format_with_colors():
    """Test that colors wrap fields but not the message or punctuation."""
    result = format_results([{"filePath": "foo.scss", "messages": [FOO]}], color_enabled=True)

    assert "\x1b[" in result
    assert "\x1b[36mfoo.scss\x1b[0m" in result
    assert "\x1b[35m5\x1b[0m" in result
    assert "\x1b[31m[E]\x1b[0m" in result
    assert "\x1b[32mfoo\x1b[0m: Unexpected foo.\n" in result


def test_format_colors_disabled_has_no_escapes():
    """Test that disabling colors yields identical text without escapes."""
    results = [{"filePath": "foo.scss", "messages": [FOO, BAR]}]

    plain = format_results(results, color_enabled=False)

    assert "\x1b" not in plain
    assert plain == (
        "foo.scss:5:10 [E] foo: Unexpected foo.\n" "foo.scss:6:11 [W] bar: Unexpected bar.\n"
    )


def test_format_does_not_mutate_input():
    """Test that the input results are left untouched."""
    results = [{"filePath": "foo.scss", "messages": [dict(FOO)]}]

    format_results(results, color_enabled=False)

    assert results == [{"filePath": "foo.scss", "messages": [FOO]}]


def test_format_accepts_generator():
    """Test that any iterable of results is accepted."""
    results = (FileResult(file_path=p, messages=[Message(**FOO)]) for p in ["a.scss", "b.scss"])

    result = format_results(results, color_enabled=False)

    assert result == "a.scss:5:10 [E] foo: Unexpected foo.\nb.scss:5:10 [E] foo: Unexpected foo.\n"


def test_format_float_two_is_error():
    """Test that a severity equal to 2 is an error regardless of numeric type."""
    result = format_results(
        [{"filePath": "foo.scss", "messages": [{**FOO, "severity": 2.0}]}],
        color_enabled=False,
    )

    assert result == "foo.scss:5:10 [E] foo: Unexpected foo.\n"
