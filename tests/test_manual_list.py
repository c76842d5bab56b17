import os

import pytest

from event_repeater.errors import ManualListFormatError
from event_repeater.host import Player
from event_repeater.manual_list import ManualRepeater, read_manual_file


def test_add_without_args_moves_last_seen(tmp_path):
    player = Player(events_seen=[1, 2, 3])
    manual = ManualRepeater(str(tmp_path))

    manual.add(player, [])

    assert player.events_seen == [1, 2]
    assert manual.entries == [3]


def test_add_without_args_on_empty_list_warns(tmp_path, debug_logs):
    player = Player()
    manual = ManualRepeater(str(tmp_path))

    manual.add(player, [])

    assert manual.entries == []
    assert "empty" in debug_logs.text


def test_add_ids_partial_success(tmp_path, debug_logs):
    player = Player(events_seen=[5, 6, 7])
    manual = ManualRepeater(str(tmp_path))

    manual.add(player, ["6", "abc", "42"])

    assert manual.entries == [6, 42]
    assert player.events_seen == [5, 7]
    assert "abc was not a valid event!" in debug_logs.text


def test_save_then_load_round_trip(tmp_path):
    saver = ManualRepeater(str(tmp_path))
    saver.entries = [7, 9, 12]
    path = saver.save("test")

    assert path == os.path.join(str(tmp_path), "ManualRepeaterFiles", "test.txt")
    with open(path, encoding="utf-8") as f:
        assert f.read() == "7\n9\n12\n"

    player = Player(events_seen=[1, 9, 12])
    loader = ManualRepeater(str(tmp_path))
    loader.entries = [100]
    loader.load(player, "test")

    assert loader.entries == [100, 7, 9, 12]
    assert player.events_seen == [1]


def test_save_overwrites(tmp_path):
    manual = ManualRepeater(str(tmp_path))
    manual.entries = [1, 2, 3]
    manual.save("x")
    manual.entries = [4]
    manual.save("x")
    assert read_manual_file(manual.path_for("x")) == [4]


def test_load_without_directory_is_noop(tmp_path):
    player = Player(events_seen=[1])
    manual = ManualRepeater(str(tmp_path))

    assert manual.load(player, "anything") == []
    assert manual.entries == []


def test_load_bad_line_fails_loudly_and_changes_nothing(tmp_path):
    manual = ManualRepeater(str(tmp_path))
    os.makedirs(manual.directory)
    with open(manual.path_for("bad"), "w", encoding="utf-8") as f:
        f.write("7\nabc\n9\n")
    player = Player(events_seen=[7])

    with pytest.raises(ManualListFormatError) as exc:
        manual.load(player, "bad")

    assert exc.value.line_no == 2
    assert isinstance(exc.value, ValueError)
    assert manual.entries == []
    assert player.events_seen == [7]


def test_load_missing_file_in_existing_directory_raises(tmp_path):
    manual = ManualRepeater(str(tmp_path))
    os.makedirs(manual.directory)
    with pytest.raises(FileNotFoundError):
        manual.load(Player(), "nope")


def test_load_rejects_underscore_digits(tmp_path):
    manual = ManualRepeater(str(tmp_path))
    os.makedirs(manual.directory)
    with open(manual.path_for("odd"), "w", encoding="utf-8") as f:
        f.write("1_0\n")
    player = Player(events_seen=[10])

    with pytest.raises(ManualListFormatError):
        manual.load(player, "odd")

    assert player.events_seen == [10]


def test_add_rejects_underscore_digits(tmp_path):
    player = Player(events_seen=[10])
    manual = ManualRepeater(str(tmp_path))

    manual.add(player, ["1_0"])

    assert manual.entries == []
    assert player.events_seen == [10]
