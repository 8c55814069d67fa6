import configparser
import os

import pytest

from party.config import ConfigManager, PartyModeConfig, parse_config
from party.errors import ConfigError

VALID = """
[PartyMode]
enabled = true
max_share_age_secs = 120
verbose_logging = yes

[Friend 1001]
summoner_name = Alice
display_name = Alice#EUW
paired_at = 1700000000

[Friend 1002]
summoner_name = Bob
share_enabled = false

[Skin 89]
skin_id = 89001
skin_name = Leona skin
chroma_id = 89010
"""


def _parser(text):
    parser = configparser.ConfigParser()
    parser.read_string(text)
    return parser


def test_parse_full_config():
    cfg = parse_config(_parser(VALID))

    assert cfg.max_share_age_secs == 120
    assert cfg.verbose_logging
    assert [f.summoner_id for f in cfg.paired_friends] == ["1001", "1002"]
    assert cfg.friend("1001").label == "Alice#EUW"
    assert cfg.sharing_friend_ids() == {"1001"}
    assert cfg.skin_for(89).chroma_id == 89010
    assert cfg.skin_for(90) is None


@pytest.mark.parametrize("text", [
    "[PartyMode]\nmax_share_age_secs = soon\n",
    "[PartyMode]\nmax_share_age_secs = 0\n",
    "[Skin abc]\nskin_id = 1\n",
    "[Skin 89]\nskin_name = missing id\n",
])
def test_malformed_values_raise(text):
    with pytest.raises(ConfigError):
        parse_config(_parser(text))


def test_missing_file_gives_defaults(tmp_path):
    cfg = ConfigManager(tmp_path / "config.ini").load()
    assert cfg == PartyModeConfig()


def test_malformed_file_gives_defaults(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("this is [not an ini", encoding="utf-8")

    assert ConfigManager(path).load() == PartyModeConfig()


def test_get_reloads_when_file_changes(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[PartyMode]\nmax_share_age_secs = 100\n", encoding="utf-8")
    manager = ConfigManager(path)
    assert manager.get().max_share_age_secs == 100
    assert manager.get() is manager.get()

    path.write_text("[PartyMode]\nmax_share_age_secs = 200\n", encoding="utf-8")
    stat = path.stat()
    os.utime(path, (stat.st_atime, stat.st_mtime + 10))

    assert manager.get().max_share_age_secs == 200
