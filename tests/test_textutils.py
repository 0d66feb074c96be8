import io

import pytest

from cubmap.charclass import to_upper
from cubmap.textutils import (
    atoi,
    itoa,
    put_endl,
    put_nbr,
    put_str,
    split,
    strmapi,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("n", [0, 7, -7, 42, 2147483647, -2147483648, 123456789])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_matches_decimal_text():
    assert itoa(2147483647) == "2147483647"
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi(" \t\n\v\f\r-42") == -42
    assert atoi("+42") == 42


def test_atoi_stops_at_non_digit():
    assert atoi("255,0,0") == 255
    assert atoi("12abc34") == 12


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0
    assert atoi("+-5") == 0


def test_split_simple():
    assert split("123 456", " ") == ["123", "456"]


def test_split_drops_empty_pieces():
    parts = split("  a  b   c ", " ")
    assert parts == ["a", "b", "c"]
    assert all(part for part in parts)


def test_split_only_separators():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_rejoin_invariant():
    text = "NO ./a.xpm\n\nSO ./b.xpm\n"
    parts = split(text, "\n")
    assert "\n".join(parts) == text.replace("\n\n", "\n").strip("\n")


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",;")


def test_strtrim_invariants():
    text = "ruicui"
    charset = "rui"
    result = strtrim(text, charset)
    assert result in text
    assert result == "c"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  x  ", "") == "  x  "


def test_strtrim_keeps_inner_characters():
    assert strtrim("xxhelloxworldxx", "x") == "helloxworld"


def test_substr_basic():
    assert substr("ruicampos", 6, 2) == "po"


def test_substr_start_past_end():
    assert substr("abc", 3, 5) == ""
    assert substr("abc", 10, 1) == ""


def test_substr_length_clipped():
    assert substr("ruicampos", 3, 100) == "campos"


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strnstr_match_must_fit_in_length():
    assert strnstr("42porto", "rt", 4) is None


def test_strnstr_empty_needle():
    assert strnstr("42porto", "", 0) == 0


def test_strnstr_not_found():
    assert strnstr("42porto", "xyz", 7) is None


def test_strncmp_equal_prefix():
    assert strncmp("Rui der", "Ru", 2) == 0


def test_strncmp_difference_sign_and_value():
    assert strncmp("Rui der", "Ru", 3) == ord("i")
    assert strncmp("Ru", "Rui der", 3) == -ord("i")


def test_strncmp_zero_count():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_antisymmetric():
    assert strncmp("map.cub", "map.ber", 7) == -strncmp("map.ber", "map.cub", 7)


def test_strncmp_identical_short_strings():
    assert strncmp(".cub", ".cub", 10) == 0


def test_strmapi_upper_on_even_indexes():
    def upper_even(index, char):
        return to_upper(char) if index % 2 == 0 else char

    result = strmapi("rui campos", upper_even)
    assert len(result) == len("rui campos")
    assert result.lower() == "rui campos"
    assert result[0::2] == "rui campos"[0::2].upper()


def test_strmapi_identity():
    assert strmapi("42porto", lambda _i, c: c) == "42porto"


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("rui campos", out)
    assert out.getvalue() == "rui campos"


def test_put_endl_adds_newline():
    out = io.StringIO()
    put_endl("42porto", out)
    assert out.getvalue() == "42porto\n"


def test_put_nbr_writes_decimal():
    out = io.StringIO()
    put_nbr(-2147483647, out)
    assert out.getvalue() == "-2147483647"


def test_put_str_defaults_to_stdout(capsys):
    put_str("N Text")
    assert capsys.readouterr().out == "N Text"