import io

import pytest

from estudos.text import Text, main


def test_empty_text():
    empty = Text()
    assert len(empty) == 0
    assert str(empty) == ""
    assert not empty


def test_non_empty_is_truthy():
    assert Text("a")
    assert len(Text("abacate")) == len("abacate")


def test_constructor_rejects_other_types():
    with pytest.raises(TypeError):
        Text(42)


def test_comparisons_follow_string_order():
    s1, s2, s3, s4, s5 = (Text(v) for v in ("aa", "bb", "cc", "ab", "cc"))
    assert not (s1 > s2)
    assert s3 == s5 and s3 <= s5 and s3 >= s5
    assert s4 < s5
    assert s2 >= s1
    assert s2 != s4


def test_equality_with_plain_str():
    assert Text("cc") == "cc"
    assert Text("cc") != "cd"


def test_text_is_unhashable():
    with pytest.raises(TypeError):
        hash(Text("aa"))


def test_indexing_yields_characters():
    word = Text("abacate")
    assert list(word) == list("abacate")
    assert word[0] == "a"


@pytest.mark.parametrize("index", [-1, 7, 100])
def test_out_of_range_index_raises(index):
    with pytest.raises(IndexError):
        Text("abacate")[index]


def test_setitem_replaces_character():
    word = Text("abacate")
    word[6] = "o"
    assert str(word) == "abacato"


def test_setitem_requires_single_character():
    word = Text("abc")
    with pytest.raises(ValueError):
        word[0] = "xy"
    with pytest.raises(IndexError):
        word[3] = "x"
    assert str(word) == "abc"
    assert len(word) == 3


def test_add_with_str_and_text():
    left = Text("abacate")
    assert str(left + "cereja") == "abacate" + "cereja"
    assert str(left + Text("maracuja")) == "abacate" + "maracuja"
    assert str(left) == "abacate"


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        Text("a") + 3


def test_iadd_mutates_in_place():
    word = Text("maracuja")
    alias = word
    word += Text("coca-cola")
    assert alias is word
    assert str(alias) == "maracuja" + "coca-cola"
    word += "caramelo"
    assert str(alias) == "maracuja" + "coca-cola" + "caramelo"


def test_copy_is_independent():
    original = Text("maracuja")
    copy = Text(original)
    copy[0] = "z"
    assert str(original) == "maracuja"
    assert copy[0] == "z"


def test_read_words_from_stream():
    stream = io.StringIO("  hello\n world ")
    assert Text.read(stream) == "hello"
    assert Text.read(stream) == "world"
    with pytest.raises(EOFError):
        Text.read(stream)


def test_read_truncates_long_words():
    stream = io.StringIO("x" * 150)
    first = Text.read(stream)
    second = Text.read(stream)
    assert len(first) == 99
    assert len(first) + len(second) == 150
    assert set(str(second)) == {"x"}


def test_read_empty_stream_raises():
    with pytest.raises(EOFError):
        Text.read(io.StringIO("   \n"))


def test_main_demo_echoes_word(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("pera uva\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == ""
    assert lines[1] == "teste de STRING vazia^"
    assert "STRING vazia" in lines
    assert lines[-2] == "Insira um valor para t4"
    assert lines[-1] == "pera"


def test_main_without_input_fails(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main() == 1
    assert "Insira um valor para t4" in capsys.readouterr().out