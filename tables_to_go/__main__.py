#!/usr/bin/env python3
"""
Command line entry point.

Usage:
    python -m tables_to_go [options]
    tables-to-go [options]

Examples:
    tables-to-go -t pg -u postgres -d shop -s public -of ./dto
    tables-to-go -t mysql -u root -p secret -d shop -of ./dto -st -str
    tables-to-go --schema-file shop.yaml -of ./dto -format o
"""

from __future__ import annotations

from tables_to_go.struct_codegen.main import main

if __name__ == "__main__":
    main()
