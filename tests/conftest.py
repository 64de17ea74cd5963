"""
Pytest configuration and shared fixtures for authproxy tests.

Every test runs with a private HOME and working directory and without any
proxy-related environment variables, so the developer's real ACP/GAP setup
never leaks in.
"""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from authproxy import acp, gap

TEST_CA_COMMON_NAME = "authproxy test CA"

PROXY_ENV_VARS = (
    "ACP_TOKEN",
    "ACP_PROXY_URL",
    "GAP_TOKEN",
    "GAP_PROXY_URL",
    "HTTP_PROXY",
    "HTTPS_PROXY",
    "ALL_PROXY",
    "NO_PROXY",
)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Clear proxy variables, point HOME and cwd at temporary directories."""
    for var in PROXY_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
        monkeypatch.delenv(var.lower(), raising=False)

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))

    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)

    yield

    acp.factory.clear_cache()
    gap.factory.clear_cache()


@pytest.fixture
def home_dir(tmp_path) -> Path:
    return tmp_path / "home"


@pytest.fixture
def work_dir(tmp_path) -> Path:
    return tmp_path / "work"


@pytest.fixture(scope="session")
def ca_pem() -> str:
    """A self-signed CA certificate in PEM form."""
    key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, TEST_CA_COMMON_NAME)])
    now = datetime.now(timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=30))
        .add_extension(x509.BasicConstraints(ca=True, path_length=None), critical=True)
        .sign(key, hashes.SHA256())
    )
    return cert.public_bytes(serialization.Encoding.PEM).decode("ascii")


@pytest.fixture
def install_ca(home_dir, ca_pem):
    """Install the test CA where the given product expects it."""
    def _install(product: str = "acp") -> Path:
        path = home_dir / ".config" / product / "ca.crt"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(ca_pem)
        return path
    return _install


@pytest.fixture
def write_env_file(work_dir):
    """Write a .env file in the working directory."""
    def _write(**values) -> Path:
        path = work_dir / ".env"
        path.write_text("".join(f"{key}={value}\n" for key, value in values.items()))
        return path
    return _write


@pytest.fixture
def trusts_test_ca():
    """Check whether an SSL context trusts the test CA."""
    def _check(context) -> bool:
        for cert in context.get_ca_certs():
            for rdn in cert.get("subject", ()):
                if ("commonName", TEST_CA_COMMON_NAME) in rdn:
                    return True
        return False
    return _check


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
