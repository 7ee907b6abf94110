import json

import pytest

from provenance.static_source import read_static_descriptor
from provenance.tests.helpers import write_static_descriptor
from provenance.types import UNRESOLVED, Resolved, StaticDescriptor


class TestReadStaticDescriptor:
    def test_reads_hash_and_source(self, tmp_path):
        path = write_static_descriptor(tmp_path, "abc123", "https://example/repo")
        assert read_static_descriptor(path) == Resolved(
            StaticDescriptor(commit_hash="abc123", source="https://example/repo"),
        )

    def test_missing_file_is_unresolved(self, tmp_path):
        assert read_static_descriptor(tmp_path / "config" / "version.json") is UNRESOLVED

    def test_invalid_json_is_unresolved(self, tmp_path):
        path = tmp_path / "version.json"
        path.write_text("{not json")
        assert read_static_descriptor(path) is UNRESOLVED

    @pytest.mark.parametrize(
        "document",
        [
            [],
            {},
            {"version": "1.0.0"},
            {"version": {"hash": "abc123"}},
            {"version": {"source": "https://example/repo"}},
            {"version": {"hash": "", "source": "https://example/repo"}},
            {"version": {"hash": 123, "source": "https://example/repo"}},
        ],
    )
    def test_shape_mismatch_is_unresolved(self, tmp_path, document):
        path = tmp_path / "version.json"
        path.write_text(json.dumps(document))
        assert read_static_descriptor(path) is UNRESOLVED

    def test_directory_in_place_of_file_is_unresolved(self, tmp_path):
        (tmp_path / "version.json").mkdir()
        assert read_static_descriptor(tmp_path / "version.json") is UNRESOLVED

    def test_oversized_integer_is_unresolved(self, tmp_path):
        path = tmp_path / "version.json"
        path.write_text('{"version": {"hash": ' + "9" * 5000 + ', "source": "https://example/repo"}}')
        assert read_static_descriptor(path) is UNRESOLVED

    def test_deeply_nested_document_is_unresolved(self, tmp_path):
        path = tmp_path / "version.json"
        path.write_text("[" * 100_000 + "]" * 100_000)
        assert read_static_descriptor(path) is UNRESOLVED
