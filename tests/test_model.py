import pytest

from pgconf_codec.config_model import Config
from pgconf_codec.grammar import InvalidKeyError


def test_lookup_is_case_insensitive() -> None:
    config = Config({"listen_addresses": "localhost"})

    assert config.get("Listen_Addresses") == "localhost"
    assert "LISTEN_ADDRESSES" in config
    assert config.get("port") is None
    assert config.get("port", "5432") == "5432"


def test_set_lowercases_and_stringifies() -> None:
    config = Config()
    config.set("Port", 5433)
    config.update({"unix_socket_directories": "/tmp", "listen_addresses": ""})

    assert config.as_dict() == {"port": "5433", "unix_socket_directories": "/tmp", "listen_addresses": ""}
    assert len(config) == 3


def test_set_rejects_invalid_names() -> None:
    config = Config()

    with pytest.raises(InvalidKeyError):
        config.set("not valid", "x")
    assert len(config) == 0


def test_remove_and_missing() -> None:
    config = Config({"port": "5432"})

    assert config.remove("PORT") is True
    assert config.remove("port") is False
    assert list(config.missing("port", "listen_addresses")) == ["port", "listen_addresses"]


def test_constructor_normalizes_keys() -> None:
    config = Config({"Port": "5432"})

    assert config.get("port") == "5432"
    assert "PORT" in config
    assert config.remove("port") is True
    assert len(config) == 0
