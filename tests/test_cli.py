import json

from chariter.cli import main, parse_scalar

def test_parse_scalar_forms():
    assert parse_scalar("a") == 97
    assert parse_scalar("U+D7FF") == 0xD7FF
    assert parse_scalar("0xE000") == 0xE000
    assert parse_scalar("65") == 65
    # a lone digit is the character itself
    assert parse_scalar("0") == 48

def test_list(capsys):
    assert main(["list", "a", "c"]) == 0
    assert capsys.readouterr().out.split() == ["a", "b", "c"]

def test_list_reverse_hex_across_gap(capsys):
    assert main(["list", "U+D7FF", "U+E000", "--reverse", "--format", "hex"]) == 0
    assert capsys.readouterr().out.split() == ["U+E000", "U+D7FF"]

def test_list_limit(capsys):
    assert main(["list", "U+0000", "1000", "--format", "int", "--limit", "3"]) == 0
    assert capsys.readouterr().out.split() == ["0", "1", "2"]

def test_count(capsys):
    assert main(["count", "U+0000", "0x10FFFF"]) == 0
    assert capsys.readouterr().out.strip() == "1112064"

def test_split(capsys):
    assert main(["split", "a", "d", "2"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [(d["start"], d["end"]) for d in data] == [(97, 98), (99, 100)]

def test_split_warns_when_short(capsys):
    assert main(["split", "a", "b", "5"]) == 0
    assert "Warning" in capsys.readouterr().err

def test_bad_range_exit_code(capsys):
    assert main(["count", "b", "a"]) == 2
    assert "error" in capsys.readouterr().err

def test_surrogate_rejected(capsys):
    assert main(["list", "0xD800", "0xD801"]) == 2
