import pytest

from walletsvc.config import Config, ConfigError, DatabaseConfig, RepositoryConfig, ServerConfig, load


def test_defaults_without_file_or_env(tmp_path):
    config = load(search_paths=[tmp_path], environ={})
    assert config.server.port == 8080
    assert config.repository.type == "memory"
    assert config.repository.segment_count == 64
    assert config.database.host == "localhost"
    assert config.database.port == 3306
    assert config.database.user == "root"
    assert config.database.dbname == "wallet"
    assert config == Config()


def test_file_overrides_defaults(tmp_path):
    (tmp_path / "config.yaml").write_text(
        "server:\n  port: 9000\n"
        "repository:\n  type: mysql\n  segment_count: 16\n"
        "database:\n  host: db.example.com\n  dbname: ledger\n"
    )
    config = load(search_paths=[tmp_path], environ={})
    assert config.server == ServerConfig(port=9000)
    assert config.repository == RepositoryConfig(type="mysql", segment_count=16)
    assert config.database.host == "db.example.com"
    assert config.database.dbname == "ledger"
    assert config.database.port == DatabaseConfig().port


def test_environment_overrides_file(tmp_path):
    (tmp_path / "config.yaml").write_text("server:\n  port: 9000\n")
    config = load(
        search_paths=[tmp_path],
        environ={"PORT": "9100", "WALLET_REPOSITORY_TYPE": "mysql"},
    )
    assert config.server.port == 9100
    assert config.repository.type == "mysql"


def test_empty_environment_value_is_ignored(tmp_path):
    config = load(search_paths=[tmp_path], environ={"PORT": ""})
    assert config.server.port == ServerConfig().port


def test_first_search_path_wins(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (first / "config.yaml").write_text("database:\n  user: alice\n")
    (second / "config.yaml").write_text("database:\n  user: bob\n")
    config = load(search_paths=[first, second], environ={})
    assert config.database.user == "alice"


def test_malformed_yaml_raises(tmp_path):
    (tmp_path / "config.yaml").write_text("server: [unclosed\n")
    with pytest.raises(ConfigError, match="failed to read config"):
        load(search_paths=[tmp_path], environ={})


def test_non_integer_port_raises(tmp_path):
    with pytest.raises(ConfigError, match="failed to unmarshal config"):
        load(search_paths=[tmp_path], environ={"PORT": "abc"})


def test_string_numbers_in_file_are_converted(tmp_path):
    (tmp_path / "config.yaml").write_text("repository:\n  segment_count: '8'\n")
    config = load(search_paths=[tmp_path], environ={})
    assert config.repository.segment_count == 8