import json
import logging

import pytest

from event_repeater.host import Host, PackInfo, Player
from event_repeater.mod import entry

CP = "Pathoschild.ContentPatcher"


@pytest.fixture
def host(tmp_path):
    return Host(player=Player(), working_dir=str(tmp_path))


@pytest.fixture
def mod(host):
    return entry(host)


@pytest.fixture
def debug_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="event_repeater")
    return caplog


@pytest.fixture
def make_pack(tmp_path):
    """Create a content pack folder; returns its PackInfo."""

    def _make(unique_id, content=None, dependencies=("misscoriel.eventrepeater",), content_pack_for=CP):
        folder = tmp_path / "Mods" / unique_id
        folder.mkdir(parents=True)
        manifest = {
            "Name": unique_id,
            "UniqueID": unique_id,
            "ContentPackFor": {"UniqueID": content_pack_for},
            "Dependencies": [{"UniqueID": d} for d in dependencies],
        }
        (folder / "manifest.json").write_text(json.dumps(manifest), encoding="utf-8")
        if content is not None:
            text = content if isinstance(content, str) else json.dumps(content)
            (folder / "content.json").write_text(text, encoding="utf-8")
        return PackInfo(
            unique_id=unique_id,
            name=unique_id,
            content_pack_for=content_pack_for,
            dependencies=list(dependencies),
            directory=str(folder),
        )

    return _make
