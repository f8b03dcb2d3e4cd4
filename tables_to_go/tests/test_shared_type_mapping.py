import pytest

from tables_to_go.shared.models import Dialect
from tables_to_go.shared.type_mapping import (
    BOOLEAN_TYPES,
    FLOAT_TYPES,
    INTEGER_TYPES,
    STRING_TYPES,
    TIME_TYPES,
    GoType,
    map_column_type,
)


class TestMapColumnType:
    @pytest.mark.parametrize(
        "family,plain,nullable",
        [
            (INTEGER_TYPES, "int", "sql.NullInt64"),
            (FLOAT_TYPES, "float64", "sql.NullFloat64"),
            (STRING_TYPES, "string", "sql.NullString"),
            (BOOLEAN_TYPES, "bool", "sql.NullBool"),
        ],
    )
    def test_non_temporal_families(self, family, plain, nullable):
        for data_type in family:
            assert map_column_type(data_type, False) == GoType(plain, is_time=False)
            assert map_column_type(data_type, True) == GoType(nullable, is_time=False)

    def test_temporal_family(self):
        for data_type in TIME_TYPES:
            assert map_column_type(data_type, False) == GoType("time.Time", is_time=True)

    def test_nullable_temporal_is_dialect_specific(self):
        assert map_column_type("timestamp", True, Dialect.POSTGRES) == GoType(
            "pq.NullTime", is_time=True
        )
        assert map_column_type("datetime", True, Dialect.MYSQL) == GoType(
            "mysql.NullTime", is_time=True
        )

    def test_family_membership(self):
        assert INTEGER_TYPES == {
            "integer", "bigint", "bigserial", "smallint", "smallserial",
            "serial", "int", "tinyint", "mediumint",
        }
        assert "year" in TIME_TYPES
        assert "blob" in STRING_TYPES
        assert "double precision" in FLOAT_TYPES

    @pytest.mark.parametrize("data_type", ["json", "uuid", "enum", "bit", "jsonb", "money"])
    @pytest.mark.parametrize("is_nullable", [True, False])
    def test_unknown_types_fall_back_to_null_string(self, data_type, is_nullable):
        assert map_column_type(data_type, is_nullable) == GoType("sql.NullString", is_time=False)

    def test_input_is_lower_cased(self):
        assert map_column_type("INTEGER", False).name == "int"
        assert map_column_type("Timestamp Without Time Zone", False).is_time


class TestGoType:
    def test_package_of_qualified_type(self):
        assert GoType("sql.NullInt64").package == "sql"
        assert GoType("sql.NullInt64").import_path == "database/sql"

    def test_builtin_type_has_no_package(self):
        assert GoType("int").package is None
        assert GoType("int").import_path is None

    def test_null_time_import_paths(self):
        assert GoType("pq.NullTime", True).import_path == "github.com/lib/pq"
        assert GoType("mysql.NullTime", True).import_path == "github.com/go-sql-driver/mysql"
        assert GoType("time.Time", True).import_path == "time"
