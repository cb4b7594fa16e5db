# =============================================================================
# test_loader.py - Source Loader Tests
# =============================================================================

import logging

import pytest

from lexscan.errors import SourceLoadError, SourceTooLargeError
from lexscan.loader import DEFAULT_MAX_SOURCE_SIZE, load_source


class TestLoadSource:
    """Reading the input buffer."""

    def test_reads_whole_file(self, tmp_path):
        path = tmp_path / "prog.c"
        path.write_text("int main() {\n    return 0;\n}\n")
        assert load_source(path) == "int main() {\n    return 0;\n}\n"

    def test_accepts_string_path(self, tmp_path):
        path = tmp_path / "prog.c"
        path.write_text("x")
        assert load_source(str(path)) == "x"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceLoadError) as exc_info:
            load_source(tmp_path / "missing.c")
        assert "missing.c" in str(exc_info.value)

    def test_directory(self, tmp_path):
        with pytest.raises(SourceLoadError):
            load_source(tmp_path)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "binary.c"
        path.write_bytes(b"int \xff\xfe;")
        with pytest.raises(SourceLoadError, match="not valid utf-8"):
            load_source(path)

    def test_default_bound(self, tmp_path):
        path = tmp_path / "big.c"
        path.write_text("x" * (DEFAULT_MAX_SOURCE_SIZE + 10))
        assert len(load_source(path)) == DEFAULT_MAX_SOURCE_SIZE

    def test_truncation_is_logged(self, tmp_path, caplog):
        path = tmp_path / "big.c"
        path.write_text("abcdefgh")
        with caplog.at_level(logging.WARNING, logger="lexscan.loader"):
            assert load_source(path, max_size=5) == "abcde"
        assert "truncating" in caplog.text

    def test_strict_rejects_oversized(self, tmp_path):
        path = tmp_path / "big.c"
        path.write_text("abcdefgh")
        with pytest.raises(SourceTooLargeError) as exc_info:
            load_source(path, max_size=5, strict=True)
        assert exc_info.value.size == 8
        assert exc_info.value.limit == 5
