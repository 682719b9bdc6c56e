import pytest

from gconvkit import strutil


def test_remove_symbols():
    assert strutil.remove_symbols("-a-b._a c1!@#$%^&*()_+:\";'.,'01") == "abac101"


def test_remove_symbols_drops_non_ascii():
    assert strutil.remove_symbols("a中b") == "ab"


def test_str_to_bytes():
    s = "I love 中文"
    assert strutil.str_to_bytes(s) == s.encode("utf-8")


def test_bytes_to_str():
    b = "I love 中文".encode("utf-8")
    assert strutil.bytes_to_str(b) == "I love 中文"


def test_bytes_round_trip():
    s = "mixed ünïcode ✓"
    assert strutil.bytes_to_str(strutil.str_to_bytes(s)) == s


@pytest.mark.parametrize(
    "value,upper,lower",
    [("A", True, False), ("z", False, True), ("1", False, False), (ord("Q"), True, False)],
)
def test_letter_checks(value, upper, lower):
    assert strutil.is_letter_upper(value) is upper
    assert strutil.is_letter_lower(value) is lower
    assert strutil.is_letter(value) is (upper or lower)


def test_letter_check_rejects_long_string():
    with pytest.raises(ValueError):
        strutil.is_letter("ab")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("123", True),
        ("123.456", True),
        ("-12", True),
        ("", False),
        (".5", False),
        ("5.", False),
        ("1a", False),
        ("1-2", False),
    ],
)
def test_is_numeric(value, expected):
    assert strutil.is_numeric(value) is expected


@pytest.mark.parametrize("value,expected", [("abc", "Abc"), ("", ""), ("1a", "1a"), ("Abc", "Abc")])
def test_uc_first(value, expected):
    assert strutil.uc_first(value) == expected


def test_replace_by_map():
    assert strutil.replace_by_map("a-b-a", {"a": "x", "-": "+"}) == "x+b+x"


def test_equal_fold_without_chars():
    assert strutil.equal_fold_without_chars("User_Name", "username")
    assert strutil.equal_fold_without_chars("user-name", "USER NAME")
    assert not strutil.equal_fold_without_chars("user", "users")


def test_trim_default_chars():
    assert strutil.trim("\t\n abc \x00\r") == "abc"


def test_trim_with_mask():
    assert strutil.trim(" --a-- ", "-") == "a"


def test_split_and_trim():
    assert strutil.split_and_trim(" a , b,, c ", ",") == ["a", "b", "c"]


def test_split_and_trim_with_mask():
    assert strutil.split_and_trim("*a*|b|**", "|", "*") == ["a", "b"]


def test_split_and_trim_empty():
    assert strutil.split_and_trim("", ",") == []