import subprocess
from unittest.mock import patch

import pytest

from tables_to_go.struct_codegen.formatting import GoFormatter, SourceFormatError


class TestGoFormatter:
    @patch("tables_to_go.struct_codegen.formatting.shutil.which", return_value=None)
    def test_missing_gofmt_returns_source(self, mock_which):
        formatter = GoFormatter()

        assert not formatter.available
        assert formatter.format("package dto\n") == "package dto\n"
        mock_which.assert_called_once_with("gofmt")

    @patch("tables_to_go.struct_codegen.formatting.subprocess.run")
    def test_runs_gofmt_on_stdin(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(
            ["gofmt"], 0, stdout="package dto\n", stderr=""
        )
        formatter = GoFormatter("/usr/bin/gofmt")

        assert formatter.format("package  dto\n") == "package dto\n"
        mock_run.assert_called_once_with(
            ["/usr/bin/gofmt"],
            input="package  dto\n",
            capture_output=True,
            text=True,
            check=False,
        )

    @patch("tables_to_go.struct_codegen.formatting.subprocess.run")
    def test_gofmt_error(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(
            ["gofmt"], 2, stdout="", stderr="<standard input>:3:1: expected declaration"
        )

        with pytest.raises(SourceFormatError, match="expected declaration"):
            GoFormatter("gofmt").format("package dto\n}")

    @patch("tables_to_go.struct_codegen.formatting.subprocess.run")
    def test_gofmt_not_executable(self, mock_run):
        mock_run.side_effect = PermissionError("permission denied")

        with pytest.raises(SourceFormatError, match="could not run"):
            GoFormatter("/opt/go/bin/gofmt").format("package dto\n")
