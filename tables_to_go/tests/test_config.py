from pathlib import Path

import pytest

from tables_to_go.config import DEFAULT_PORTS, Settings, resolve_output_dir, resolve_settings
from tables_to_go.shared import ConfigurationError, Dialect, OutputFormat


class TestResolveOutputDir:
    def test_existing_directory_is_made_absolute(self, tmp_path, monkeypatch):
        (tmp_path / "out").mkdir()
        monkeypatch.chdir(tmp_path)

        resolved = resolve_output_dir("out")

        assert resolved.is_absolute()
        assert resolved == (tmp_path / "out").resolve()

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ConfigurationError, match="does not exist"):
            resolve_output_dir(tmp_path / "missing")

    def test_file_instead_of_directory(self, tmp_path):
        path = tmp_path / "file.txt"
        path.write_text("x")
        with pytest.raises(ConfigurationError, match="is not a directory"):
            resolve_output_dir(path)


class TestResolveSettings:
    def test_defaults(self, tmp_path):
        settings = resolve_settings(output_dir=tmp_path)

        assert settings.dialect is Dialect.POSTGRES
        assert settings.port == 5432
        assert settings.output_format is OutputFormat.CAMEL
        assert settings.package_name == "dto"
        assert settings.scope == "public"
        assert settings.schema_file is None

    def test_mysql_default_port_and_scope(self, tmp_path):
        settings = resolve_settings(dialect="mysql", database="shop", output_dir=tmp_path)

        assert settings.dialect is Dialect.MYSQL
        assert settings.port == DEFAULT_PORTS[Dialect.MYSQL] == 3306
        assert settings.scope == "shop"

    def test_explicit_port(self, tmp_path):
        assert resolve_settings(port="15432", output_dir=tmp_path).port == 15432

    def test_invalid_port(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not a valid port"):
            resolve_settings(port="pg", output_dir=tmp_path)

    def test_unsupported_dialect(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_settings(dialect="oracle", output_dir=tmp_path)
        assert exc_info.value.option == "type"
        assert "['pg', 'mysql']" in str(exc_info.value)

    def test_unsupported_format(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_settings(output_format="x", output_dir=tmp_path)
        assert exc_info.value.option == "format"

    def test_empty_package_name(self, tmp_path):
        with pytest.raises(ConfigurationError, match="name of package can not be empty"):
            resolve_settings(package_name="", output_dir=tmp_path)

    def test_snapshot_paths(self, tmp_path):
        settings = resolve_settings(
            output_dir=tmp_path,
            schema_file="schema.yaml",
            dump_schema=str(tmp_path / "dump.yaml"),
        )
        assert settings.schema_file == Path("schema.yaml")
        assert settings.dump_schema == tmp_path / "dump.yaml"


class TestSettings:
    def test_is_immutable(self):
        settings = Settings()
        with pytest.raises(AttributeError):
            settings.prefix = "x"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "structable,structable_only,recorder,enabled,recorder_enabled",
        [
            (False, False, False, False, False),
            (True, False, False, True, False),
            (False, True, False, True, False),
            (False, False, True, False, False),
            (True, False, True, True, True),
            (False, True, True, True, True),
        ],
    )
    def test_structable_flags(self, structable, structable_only, recorder, enabled, recorder_enabled):
        settings = Settings(
            structable=structable,
            structable_only=structable_only,
            structable_recorder=recorder,
        )
        assert settings.structable_enabled is enabled
        assert settings.recorder_enabled is recorder_enabled
