import pytest

from sueca.netcommon import Command, CommandReader, encode_line, valid_name

COMMANDS = {"play": 1, "name": 2, "game": 3}


def test_single_complete_line():
    reader = CommandReader(COMMANDS)
    commands = reader.feed(b"play:P1:AH\n")
    assert commands == [Command(1, ("play", "P1", "AH"))]
    assert reader.pending == ""


def test_command_without_arguments():
    commands = CommandReader(COMMANDS).feed("play\n")
    assert commands[0].name == "play"
    assert commands[0].params == ()


def test_unknown_commands_are_dropped():
    commands = CommandReader(COMMANDS).feed(b"bogus:1\nname:a:b\n")
    assert [c.code for c in commands] == [2]


def test_partial_line_is_kept_until_completed():
    reader = CommandReader(COMMANDS)
    assert reader.feed(b"name:ol") == []
    assert reader.pending == "name:ol"
    commands = reader.feed(b"d:new\n")
    assert commands == [Command(2, ("name", "old", "new"))]
    assert reader.pending == ""


def test_complete_lines_before_partial_are_returned():
    reader = CommandReader(COMMANDS)
    commands = reader.feed(b"play\ngame:x")
    assert [c.name for c in commands] == ["play"]
    assert reader.pending == "game:x"


def test_crlf_and_empty_lines():
    commands = CommandReader(COMMANDS).feed(b"play\r\n\r\nname:x:y\r\n")
    assert [c.name for c in commands] == ["play", "name"]


def test_empty_middle_field_kept():
    commands = CommandReader(COMMANDS).feed(b"name::b\n")
    assert commands[0].params == ("", "b")


def test_multibyte_character_split_across_feeds():
    reader = CommandReader(COMMANDS)
    data = "name:P1:João\n".encode("utf-8")
    cut = data.index("ã".encode("utf-8")) + 1
    assert reader.feed(data[:cut]) == []
    commands = reader.feed(data[cut:])
    assert commands[0].params == ("P1", "João")


def test_encode_line_appends_newline():
    assert encode_line("play") == b"play\n"


def test_encode_then_read_round_trip():
    reader = CommandReader(COMMANDS)
    commands = reader.feed(encode_line("game:P2:Ana:P3"))
    assert commands[0].args == ("game", "P2", "Ana", "P3")


def test_valid_name_strips_whitespace():
    assert valid_name("  Ana \t", 10) == "Ana"


def test_valid_name_truncates():
    result = valid_name("abcdefghij", 4)
    assert result == "abcdefghij"[:4]
    assert len(result) == 4


@pytest.mark.parametrize("name", ["", "   ", "a:b"])
def test_valid_name_rejects(name):
    with pytest.raises(ValueError):
        valid_name(name, 20)