import json

import pytest
from pydantic import ValidationError

from spooler.config import Config, load_config
from spooler.errors import ConfigError


def write_config(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data))
    return path


def test_defaults_when_keys_missing(tmp_path):
    config = load_config(write_config(tmp_path, {}))

    assert config == Config()
    assert config.https is False
    assert config.printer_name == ""
    assert config.debug is False
    assert config.print_dir == "temp-files"
    assert config.port == 49155
    assert config.retention_seconds == 3600


def test_all_recognized_options_are_read(tmp_path):
    config = load_config(write_config(tmp_path, {
        "https": False,
        "printer_name": "LabelPrinter",
        "debug": True,
        "print_dir": "spool",
        "port": 8080,
    }))

    assert config.printer_name == "LabelPrinter"
    assert config.printer_label == "LabelPrinter"
    assert config.debug is True
    assert config.spool_dir.name == "spool"
    assert config.port == 8080


def test_unknown_keys_are_ignored(tmp_path):
    config = load_config(write_config(tmp_path, {"colour": "blue", "port": 9000}))
    assert config.port == 9000


def test_empty_printer_name_means_default_printer():
    assert Config().printer_label == "Default Printer"


def test_config_is_immutable():
    config = Config()
    with pytest.raises(ValidationError):
        config.port = 8080


def test_missing_file_raises_config_error(tmp_path):
    with pytest.raises(ConfigError, match="Error reading config file"):
        load_config(tmp_path / "missing.json")


def test_invalid_json_raises_config_error(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    with pytest.raises(ConfigError, match="Invalid config file"):
        load_config(path)


def test_non_object_document_raises_config_error(tmp_path):
    with pytest.raises(ConfigError, match="Invalid config file"):
        load_config(write_config(tmp_path, [1, 2, 3]))


@pytest.mark.parametrize(
    "data, field",
    [
        ({"port": "49155"}, "port"),
        ({"port": True}, "port"),
        ({"https": "yes"}, "https"),
        ({"printer_name": 7}, "printer_name"),
        ({"retention_seconds": "soon"}, "retention_seconds"),
    ],
)
def test_wrongly_typed_values_raise_config_error(tmp_path, data, field):
    with pytest.raises(ConfigError, match=field):
        load_config(write_config(tmp_path, data))


@pytest.mark.parametrize(
    "data, field",
    [
        ({"port": 70000}, "port"),
        ({"port": 0}, "port"),
        ({"retention_seconds": -1}, "retention_seconds"),
        ({"print_dir": ""}, "print_dir"),
    ],
)
def test_out_of_range_values_raise_config_error(tmp_path, data, field):
    with pytest.raises(ConfigError, match=field):
        load_config(write_config(tmp_path, data))


def test_integer_retention_is_accepted(tmp_path):
    config = load_config(write_config(tmp_path, {"retention_seconds": 60}))
    assert config.retention_seconds == 60


def test_check_certificates_is_noop_without_https(tmp_path):
    Config(cert_file=str(tmp_path / "nope.crt")).check_certificates()


def test_check_certificates_requires_key_material(tmp_path):
    cert = tmp_path / "server.crt"
    cert.write_text("cert")
    config = Config(https=True, cert_file=str(cert), key_file=str(tmp_path / "server.key"))

    with pytest.raises(ConfigError, match="key file not found"):
        config.check_certificates()


def test_check_certificates_ok_when_both_present(tmp_path):
    cert = tmp_path / "server.crt"
    key = tmp_path / "server.key"
    cert.write_text("cert")
    key.write_text("key")

    Config(https=True, cert_file=str(cert), key_file=str(key)).check_certificates()
