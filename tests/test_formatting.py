from deepdelta.differ import (
    MISSING,
    DiffResult,
    Difference,
    diff_documents,
    render_diff_summary,
    render_difference,
    render_differences,
    render_value,
)


def test_render_value_is_compact_sorted_json() -> None:
    assert render_value({"b": 1, "a": [True, None]}) == '{"a":[true,null],"b":1}'
    assert render_value("café") == '"caf\\u00e9"'
    assert render_value(MISSING) == "<MISSING>"


def test_render_difference_markers_and_root_path() -> None:
    assert render_difference(Difference(path="", before="a", after="b")) == '~ <root>: "a" -> "b"'
    assert render_difference(Difference(path="x", before=1, after="1")) == '! x: 1 -> "1"'
    assert render_difference(Difference(path="y", before=1)) == "- y: 1 -> <MISSING>"
    assert render_difference(Difference(path="z.w", after=None)) == "+ z.w: <MISSING> -> null"


def test_render_summary() -> None:
    result = diff_documents({"a": 1, "b": 2}, {"a": 2, "c": 3})

    assert render_diff_summary(result) == (
        "differences=3 changed=1 type_changed=0 removed=1 added=1"
    )


def test_render_differences_identical() -> None:
    assert render_differences(DiffResult()) == "no differences detected"


def test_render_differences_truncates() -> None:
    result = diff_documents(list(range(5)), list(range(10, 15)))

    rendered = render_differences(result, max_changes=2)

    assert rendered.splitlines() == [
        "~ [0]: 0 -> 10",
        "~ [1]: 1 -> 11",
        "... 3 additional difference(s) omitted",
    ]
