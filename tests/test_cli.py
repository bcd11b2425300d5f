"""Tests for the analyze_file command line entry point."""

import orjson

from cli.analyze_file import analyze_file, main


def _write(tmp_path, text):
    path = tmp_path / "docs.json"
    path.write_text(text)
    return path


class TestAnalyzeFile:
    def test_prints_schema(self, tmp_path):
        path = _write(tmp_path, '{"a": 1, "b": {"c": "x"}}\n{"a": {"$numberLong": "9"}}\n')
        schema = orjson.loads(analyze_file(path))
        assert schema["x-documentsInspected"] == 2
        assert [e["x-bsonType"] for e in schema["properties"]["a"]["anyOf"]] == ["int32", "long"]

    def test_prints_level(self, tmp_path):
        path = _write(tmp_path, '[{"_id": 1, "b": {"d": 1, "c": 2}}]')
        assert analyze_file(path, "b") == "c\nd"
        assert analyze_file(path, "") == "_id\nb"

    def test_exit_codes(self, tmp_path, capsys):
        assert main(["analyze_file.py"]) == 2
        assert main(["analyze_file.py", str(_write(tmp_path, "{oops"))]) == 1
        path = _write(tmp_path, '{"a": 1}')
        assert main(["analyze_file.py", str(path), "missing"]) == 1
        assert "missing" in capsys.readouterr().out
        assert main(["analyze_file.py", str(path)]) == 0
