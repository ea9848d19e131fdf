# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import pytest

from batchelor_lib.properties.convention import ConventionKind, InputConvention


@pytest.mark.parametrize(
    "string,kind",
    [
        ("--input", ConventionKind.NAMED_FLAG),
        ("--foo", ConventionKind.NAMED_FLAG),
        ("-i", ConventionKind.NAMED_FLAG),
        ("", ConventionKind.NAMED_FLAG),
        ("$0", ConventionKind.NAMED_FLAG),
        ("$", ConventionKind.NAMED_FLAG),
        ("$2x", ConventionKind.NAMED_FLAG),
        ("$1", ConventionKind.POSITIONAL_SLOT),
        ("$2", ConventionKind.POSITIONAL_SLOT),
        ("$10", ConventionKind.POSITIONAL_SLOT),
        ("echo $1 done", ConventionKind.TOKEN_TEMPLATE),
        ("-i $1 -o out/$1.done", ConventionKind.TOKEN_TEMPLATE),
        ("$1.txt", ConventionKind.TOKEN_TEMPLATE),
        ("--in=$1", ConventionKind.TOKEN_TEMPLATE),
        ("'unterminated $1", ConventionKind.TOKEN_TEMPLATE),
    ],
)
def test_from_str_classification(string, kind):
    assert InputConvention.fromStr(string).kind == kind


def test_from_str_positional_slot_value():
    convention = InputConvention.fromStr("$3")

    assert convention.slot == 3
    assert convention.flag is None
    assert convention.template == ()


def test_from_str_slot_containing_placeholder_is_not_template():
    convention = InputConvention.fromStr("$1")

    assert convention.kind == ConventionKind.POSITIONAL_SLOT
    assert convention.slot == 1
    assert convention.template == ()


def test_from_str_template_tokens():
    convention = InputConvention.fromStr("'-i $1' '-o out/$1.done'")

    assert convention.template == ("-i $1", "-o out/$1.done")


def test_from_str_unparsable_template_is_single_token():
    convention = InputConvention.fromStr("'unterminated $1")

    assert convention.template == ("'unterminated $1",)


def test_from_str_named_flag_value():
    convention = InputConvention.fromStr("--file")

    assert convention.flag == "--file"
    assert convention.slot is None


def test_format_named_flag():
    convention = InputConvention.fromStr("--input")

    assert convention.formatArgs("/data/a.txt", []) == ["--input", "/data/a.txt"]
    assert convention.formatArgs("/data/a b.txt", ["x", "'y z'"]) == [
        "--input",
        "'/data/a b.txt'",
        "x",
        "'y z'",
    ]


def test_format_named_flag_is_quoted():
    convention = InputConvention.fromStr("--in put")

    assert convention.formatArgs("a", []) == ["'--in put'", "a"]


def test_format_empty_named_flag():
    assert InputConvention.fromStr("").formatArgs("a", []) == ["''", "a"]


@pytest.mark.parametrize(
    "slot,args,expected",
    [
        ("$1", [], ["x.dat"]),
        ("$1", ["foo", "bar"], ["x.dat", "foo", "bar"]),
        ("$2", ["foo", "bar"], ["foo", "x.dat", "bar"]),
        ("$3", ["foo", "bar"], ["foo", "bar", "x.dat"]),
        ("$9", ["foo", "bar"], ["foo", "bar", "x.dat"]),
        ("$5", [], ["x.dat"]),
    ],
)
def test_format_positional_slot(slot, args, expected):
    convention = InputConvention.fromStr(slot)

    assert convention.formatArgs("x.dat", args) == expected


def test_format_positional_slot_does_not_modify_args():
    args = ["foo", "bar"]
    InputConvention.fromStr("$1").formatArgs("x", args)

    assert args == ["foo", "bar"]


def test_format_template_each_word_is_one_token():
    convention = InputConvention.fromStr("-i $1 -o out/$1.done")

    assert convention.formatArgs("one", []) == ["-i", "one", "-o", "out/one.done"]


def test_format_template_quoted_words():
    convention = InputConvention.fromStr("'-i $1' '-o out/$1.done'")

    assert convention.formatArgs("one", ["extra"]) == [
        "'-i one'",
        "'-o out/one.done'",
        "extra",
    ]


def test_format_template_replaces_all_occurrences():
    convention = InputConvention.fromStr("$1:$1")

    assert convention.formatArgs("ab", []) == ["ab:ab"]


def test_format_template_input_with_special_characters_is_quoted():
    convention = InputConvention.fromStr("--in=$1")

    assert convention.formatArgs("it's $HOME", []) == ["'--in=it'\\''s $HOME'"]
