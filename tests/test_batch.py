"""
Batch Scoring Tests
"""
import csv
import json

import pytest

from pwstrength.batch import (
    aggregate_results, build_rows, export_csv, export_json, read_passwords, score_many,
)
from pwstrength.exceptions import PasswordFileError
from pwstrength.scoring import score_password


PASSWORDS = ["", "alllowercase", "12345678", "Passw0rd!", "Str0ng!Pass99"]


class TestScoreMany:

    def test_preserves_input_order(self):
        results = score_many(PASSWORDS, max_workers=3)
        assert [r.score for r in results] == [0, 8, 36, 70, 100]

    def test_matches_sequential_scoring(self):
        assert score_many(PASSWORDS * 20, max_workers=8) == [score_password(p) for p in PASSWORDS * 20]

    def test_empty_batch(self):
        assert score_many([]) == []


class TestAggregate:

    def test_summary(self):
        summary = aggregate_results(score_many(PASSWORDS))
        assert summary["total"] == 5
        assert summary["average_score"] == 42.8
        assert summary["min_score"] == 0
        assert summary["max_score"] == 100
        assert summary["labels"] == {"weak": 2, "medium": 1, "good": 1, "strong": 1}

    def test_empty(self):
        summary = aggregate_results([])
        assert summary["total"] == 0
        assert summary["average_score"] == 0.0


class TestReadPasswords:

    def test_skips_blank_lines(self, tmp_path):
        path = tmp_path / "passwords.txt"
        path.write_text("Passw0rd!\n\n  spaced  \r\nlast", encoding="utf-8")
        assert read_passwords(path) == ["Passw0rd!", "  spaced  ", "last"]

    def test_drops_byte_order_mark(self, tmp_path):
        path = tmp_path / "passwords.txt"
        path.write_text("Passw0rd!\n", encoding="utf-8-sig")
        assert read_passwords(path) == ["Passw0rd!"]

    def test_bare_carriage_return_is_part_of_the_line(self, tmp_path):
        path = tmp_path / "passwords.txt"
        path.write_bytes(b"pa\rssword1!\n")
        assert read_passwords(path) == ["pa\rssword1!"]

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "passwords.txt"
        path.write_bytes("contraseña1!\n".encode("latin-1"))
        with pytest.raises(PasswordFileError, match="not valid UTF-8"):
            read_passwords(path)


class TestExport:

    def test_json_report(self, tmp_path):
        results = score_many(PASSWORDS)
        rows = build_rows(results, "pt")
        path = tmp_path / "report.json"
        export_json(rows, path, summary=aggregate_results(results))

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["summary"]["total"] == 5
        assert data["results"][3]["line"] == 4
        assert data["results"][3]["label_text"] == "Boa"
        assert data["results"][4]["raw_score"] == 106
        assert "Passw0rd!" not in path.read_text(encoding="utf-8")

    def test_csv_report(self, tmp_path):
        rows = build_rows(score_many(PASSWORDS))
        path = tmp_path / "report.csv"
        export_csv(rows, path)

        with open(path, newline="", encoding="utf-8") as f:
            records = list(csv.DictReader(f))

        assert len(records) == 5
        assert records[2] == {
            "line": "3", "score": "36", "label": "medium",
            "label_text": "Medium", "raw_score": "36",
        }
