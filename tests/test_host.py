import pytest

from event_repeater.host import Host, Player, load_packs_from_dir


def test_hooks_run_by_priority_then_registration_order(host):
    order = []
    host.on("day_started", lambda: order.append("low"), priority=-5)
    host.on("day_started", lambda: order.append("first"))
    host.on("day_started", lambda: order.append("high"), priority=5)
    host.on("day_started", lambda: order.append("second"))

    host.fire("day_started")

    assert order == ["high", "first", "second", "low"]


def test_unknown_hook_is_rejected(host):
    with pytest.raises(ValueError):
        host.on("night_started", lambda: None)


def test_unknown_command_returns_false(host, debug_logs):
    assert host.run_command("does-not-exist") is False
    assert host.run_command("   ") is False
    assert "Unknown command 'does-not-exist'" in debug_logs.text


def test_duplicate_command_rejected(host):
    host.add_command("x", "usage: x", lambda c, a: None)
    with pytest.raises(ValueError):
        host.add_command("X", "usage: x", lambda c, a: None)


def test_commands_are_case_insensitive(host):
    seen = []
    host.add_command("show-events", "usage", lambda c, a: seen.append((c, a)))
    host.run_command("SHOW-EVENTS  a  b")
    assert seen == [("SHOW-EVENTS", ["a", "b"])]


def test_snapshot_round_trip_keeps_list_objects(tmp_path):
    host = Host(player=Player(events_seen=[1], mail_received=["m"], responses_answered=[2]))
    host.add_mail_for_tomorrow("next")
    path = tmp_path / "player.json"
    host.save_state(str(path))

    other = Host()
    events = other.player.events_seen
    other.load_state(str(path))

    assert other.player.events_seen is events
    assert other.snapshot() == {
        "events_seen": [1],
        "mail_received": ["m"],
        "responses_answered": [2],
        "mail_for_tomorrow": ["next"],
    }


def test_load_packs_from_dir(tmp_path, make_pack):
    make_pack("Good.Pack", {"RepeatEvents": [1]})
    bad = tmp_path / "Mods" / "Bad.Pack"
    bad.mkdir()
    (bad / "manifest.json").write_text("{}", encoding="utf-8")
    (tmp_path / "Mods" / "NoManifest").mkdir()

    packs = load_packs_from_dir(str(tmp_path / "Mods"))

    assert [p.unique_id for p in packs] == ["Good.Pack"]
    assert packs[0].content_pack_for == "Pathoschild.ContentPatcher"
    assert packs[0].dependencies == ["misscoriel.eventrepeater"]
    assert packs[0].directory.endswith("Good.Pack")


def test_load_packs_from_missing_dir():
    assert load_packs_from_dir("/definitely/not/here") == []


def test_mail_for_tomorrow_deduplicates(host):
    host.add_mail_for_tomorrow("a")
    host.add_mail_for_tomorrow("a")
    assert host.mail_for_tomorrow == ["a"]
