import io

import pytest

from pushswap.libft.output import put_char, put_endl, put_nbr, put_str


def test_put_char_string():
    buf = io.StringIO()
    put_char("x", buf)
    put_char("y", buf)
    assert buf.getvalue() == "xy"


def test_put_char_code():
    buf = io.StringIO()
    put_char(ord("A"), buf)
    assert buf.getvalue() == "A"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("hello", buf)
    put_str(" world", buf)
    assert buf.getvalue() == "hello world"


def test_put_str_none_writes_nothing():
    buf = io.StringIO()
    put_str(None, buf)
    assert buf.getvalue() == ""


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("Error", buf)
    assert buf.getvalue() == "Error\n"


def test_put_endl_none_writes_nothing():
    buf = io.StringIO()
    put_endl(None, buf)
    assert buf.getvalue() == ""


@pytest.mark.parametrize(
    "n, text",
    [
        (0, "0"),
        (-42, "-42"),
        (2147483647, "2147483647"),
        (-2147483648, "-2147483648"),
    ],
)
def test_put_nbr(n, text):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert buf.getvalue() == text


def test_put_nbr_round_trip():
    for n in range(-1000, 1001, 37):
        buf = io.StringIO()
        put_nbr(n, buf)
        assert int(buf.getvalue()) == n


def test_default_stream_is_stdout(capsys):
    put_endl("ok")
    assert capsys.readouterr().out == "ok\n"