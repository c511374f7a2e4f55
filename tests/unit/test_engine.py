import ssl

import pytest

from src.workspace_authority.core.db.engine import ssl_connect_args

pytestmark = pytest.mark.unit


def test_disable_passes_no_ssl_context():
    assert ssl_connect_args("disable") == {}


@pytest.mark.parametrize("mode", ["prefer", "require"])
def test_unverified_modes_skip_certificate_checks(mode: str):
    context = ssl_connect_args(mode)["ssl"]

    assert context.verify_mode == ssl.CERT_NONE
    assert context.check_hostname is False


def test_verify_full_checks_hostname():
    context = ssl_connect_args("verify-full")["ssl"]

    assert context.verify_mode == ssl.CERT_REQUIRED
    assert context.check_hostname is True


def test_verify_ca_requires_certificate_only():
    context = ssl_connect_args("verify-ca")["ssl"]

    assert context.verify_mode == ssl.CERT_REQUIRED
    assert context.check_hostname is False


def test_unknown_mode_rejected():
    with pytest.raises(ValueError, match="Unknown database ssl mode"):
        ssl_connect_args("sometimes")
