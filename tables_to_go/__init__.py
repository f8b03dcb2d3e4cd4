"""Generate Go structs from the tables of a PostgreSQL or MySQL database."""

__version__ = "1.0.0"
