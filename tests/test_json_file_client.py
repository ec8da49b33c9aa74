"""Tests for the JSON file client."""

import json
import os
import tempfile

import pytest

from product_manager.clients import CorruptStorageError, JsonFileClient


class TestJsonFileClient:
    """Test JsonFileClient read and write behaviour."""

    @pytest.fixture
    def temp_file_path(self):
        """Create a temporary JSON file for testing."""
        fd, path = tempfile.mkstemp(suffix=".json")
        os.close(fd)
        yield path
        # Cleanup
        if os.path.exists(path):
            os.remove(path)

    def test_read_missing_file(self, temp_file_path):
        """Test that a missing file raises FileNotFoundError."""
        os.remove(temp_file_path)
        client = JsonFileClient(temp_file_path)

        assert client.exists() is False
        with pytest.raises(FileNotFoundError):
            client.read()

    def test_write_then_read(self, temp_file_path):
        """Test that written data reads back unchanged."""
        client = JsonFileClient(temp_file_path)
        data = [{"id": 1, "title": "Mate", "price": 12.5}, {"id": 2, "title": "Bombilla"}]

        client.write(data)

        assert client.exists() is True
        assert client.read() == data

    def test_write_overwrites_whole_file(self, temp_file_path):
        """Test that each write replaces the previous content."""
        client = JsonFileClient(temp_file_path)
        client.write([{"id": 1}, {"id": 2}])

        client.write([])

        with open(temp_file_path, "r", encoding="utf-8") as f:
            assert f.read() == "[]\n"

    def test_write_uses_indent_and_keeps_unicode(self, temp_file_path):
        """Test formatting: configured indentation, non-ASCII written as is."""
        client = JsonFileClient(temp_file_path, indent=4)

        client.write([{"title": "Café"}])

        with open(temp_file_path, "r", encoding="utf-8") as f:
            text = f.read()
        assert text == '[\n    {\n        "title": "Café"\n    }\n]\n'

    def test_read_invalid_json(self, temp_file_path):
        """Test that malformed JSON raises CorruptStorageError."""
        with open(temp_file_path, "w", encoding="utf-8") as f:
            f.write("[{")

        with pytest.raises(CorruptStorageError) as exc_info:
            JsonFileClient(temp_file_path).read()

        assert str(exc_info.value.path) == temp_file_path
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_read_non_array(self, temp_file_path):
        """Test that a JSON document that is not an array is rejected."""
        with open(temp_file_path, "w", encoding="utf-8") as f:
            json.dump({"products": []}, f)

        with pytest.raises(CorruptStorageError, match="expected a JSON array"):
            JsonFileClient(temp_file_path).read()
