import pytest

from keyedsiphash.errors import ConfigurationError
from keyedsiphash.options import SipHashOptions


def test_from_mapping_parses_hex_and_decimal():
    options = SipHashOptions.from_mapping({"K0": "0x0706050403020100", "K1": "42"})
    assert options.validate() == (0x0706050403020100, 42)


def test_from_env_uses_prefix():
    environ = {"SIPHASH_K0": "1", "SIPHASH_K1": "0xff", "K0": "9"}
    options = SipHashOptions.from_env(environ=environ)
    assert (options.k0, options.k1) == (1, 255)


def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("APP_K0", "3")
    monkeypatch.setenv("APP_K1", "4")
    assert SipHashOptions.from_env(prefix="APP_").validate() == (3, 4)


def test_missing_words_fail_validation():
    with pytest.raises(ConfigurationError):
        SipHashOptions(k0=1).validate()
    with pytest.raises(ConfigurationError):
        SipHashOptions.from_mapping({"K0": "1", "K1": ""}).validate()


@pytest.mark.parametrize("raw", ["zz", "0x1" + "0" * 16, "-1", True, 1.5])
def test_malformed_words_raise(raw):
    with pytest.raises(ConfigurationError):
        SipHashOptions.from_mapping({"K0": raw, "K1": "0"})


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        SipHashOptions(k0=None, k1=2).validate()
    with pytest.raises(ConfigurationError):
        SipHashOptions(k0=1 << 64, k1=2).validate()


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_words_count_as_missing(blank):
    with pytest.raises(ConfigurationError):
        SipHashOptions(k0=blank, k1=1).validate()
    with pytest.raises(ConfigurationError):
        SipHashOptions(k0=1, k1=blank).validate()
