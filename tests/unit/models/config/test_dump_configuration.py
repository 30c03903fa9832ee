"""Unit tests checking ability to dump configuration."""

import json

from pathlib import Path


from models.config import (
    CORSConfiguration,
    Configuration,
    CredentialStoreConfiguration,
    PostgreSQLDatabaseConfiguration,
    QuotaSchedulerConfiguration,
    ServiceConfiguration,
    TLSConfiguration,
)


def test_dump_configuration(tmp_path) -> None:
    """
    Test that the Configuration object can be serialized to a JSON file and
    that the resulting file contains all expected sections and values.

    Secret values have to be masked in the dump.
    """
    cfg = Configuration(
        name="test_name",
        service=ServiceConfiguration(
            tls_config=TLSConfiguration(
                tls_certificate_path=Path("tests/configuration/server.crt"),
                tls_key_path=Path("tests/configuration/server.key"),
                tls_key_password=Path("tests/configuration/password"),
            ),
            cors=CORSConfiguration(
                allow_origins=["foo_origin", "bar_origin", "baz_origin"],
                allow_credentials=False,
                allow_methods=["foo_method", "bar_method", "baz_method"],
                allow_headers=["foo_header", "bar_header", "baz_header"],
            ),
        ),
        credential_store=CredentialStoreConfiguration(
            encryption_key="encryption-key",
            postgres=PostgreSQLDatabaseConfiguration(
                db="quota_gate",
                user="qg_user",
                password="qg_password",
                port=5432,
                ca_cert_path=None,
                ssl_mode="require",
                gss_encmode="disable",
            ),
        ),
        quota_scheduler=QuotaSchedulerConfiguration(enabled=False),
    )
    assert cfg is not None
    dump_file = tmp_path / "test.json"
    cfg.dump(dump_file)

    with open(dump_file, "r", encoding="utf-8") as fin:
        content = json.load(fin)
        # content should be loaded
        assert content is not None

        # all sections must exists
        assert "name" in content
        assert "service" in content
        assert "credential_store" in content
        assert "quota_scheduler" in content

        # check the whole deserialized JSON file content
        assert content == {
            "name": "test_name",
            "service": {
                "host": "localhost",
                "port": 8080,
                "workers": 1,
                "color_log": True,
                "access_log": True,
                "tls_config": {
                    "tls_certificate_path": "tests/configuration/server.crt",
                    "tls_key_path": "tests/configuration/server.key",
                    "tls_key_password": "tests/configuration/password",
                },
                "cors": {
                    "allow_origins": ["foo_origin", "bar_origin", "baz_origin"],
                    "allow_credentials": False,
                    "allow_methods": ["foo_method", "bar_method", "baz_method"],
                    "allow_headers": ["foo_header", "bar_header", "baz_header"],
                },
            },
            "credential_store": {
                "encryption_key": "**********",
                "sqlite": None,
                "postgres": {
                    "host": "localhost",
                    "port": 5432,
                    "db": "quota_gate",
                    "user": "qg_user",
                    "password": "**********",
                    "namespace": None,
                    "ssl_mode": "require",
                    "gss_encmode": "disable",
                    "ca_cert_path": None,
                    "pool_min_size": 1,
                    "pool_max_size": 25,
                },
            },
            "quota_scheduler": {"enabled": False},
        }


def test_dump_configuration_does_not_leak_secrets(tmp_path) -> None:
    """Test that plaintext secrets are never written into the dump."""
    cfg = Configuration(
        credential_store=CredentialStoreConfiguration(
            encryption_key="encryption-key",
            postgres=PostgreSQLDatabaseConfiguration(
                db="quota_gate", user="qg_user", password="qg_password"
            ),
        ),
    )
    dump_file = tmp_path / "test.json"
    cfg.dump(dump_file)

    text = dump_file.read_text(encoding="utf-8")
    assert "encryption-key" not in text
    assert "qg_password" not in text
