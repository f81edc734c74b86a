"""
CLI Tests
"""
import json

from click.testing import CliRunner

from pwstrength.cli import main


def invoke(*args, **kwargs):
    return CliRunner().invoke(main, list(args), **kwargs)


class TestScoreCommand:

    def test_text_output(self):
        result = invoke("score", "Str0ng!Pass99")
        assert result.exit_code == 0
        assert "Strength: 100/100  Strong" in result.output

    def test_portuguese(self):
        result = invoke("score", "alllowercase", "--locale", "pt")
        assert result.exit_code == 0
        assert "Fraca" in result.output

    def test_json_output(self):
        result = invoke("score", "12345678", "--format", "json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["score"] == 36
        assert data["label"] == "medium"
        assert data["text"] == "Password strength Medium 36%"
        assert "additions" not in data

    def test_json_breakdown(self):
        result = invoke("score", "12345678", "--format", "json", "--breakdown")
        data = json.loads(result.output)
        assert data["deductions"]["sequential_characters"] == 18

    def test_prompt_when_password_omitted(self):
        result = invoke("score", input="Passw0rd!\n")
        assert result.exit_code == 0
        assert "70/100" in result.output
        assert "Passw0rd!" not in result.output

    def test_minimum_rejects_weak_password(self):
        result = invoke("score", "alllowercase", "--minimum", "50")
        assert result.exit_code == 1
        assert "[ERROR] Password strength is too weak." in result.output

    def test_minimum_accepts(self):
        result = invoke("score", "Passw0rd!", "--minimum", "50")
        assert result.exit_code == 0

    def test_check_uses_default_minimum(self):
        assert invoke("score", "short", "--check").exit_code == 1
        assert invoke("score", "12345678", "--check").exit_code == 0

    def test_check_uses_configured_minimum(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("minimum_score: 50\n", encoding="utf-8")
        result = invoke("--config", str(path), "score", "12345678", "--check")
        assert result.exit_code == 1
        assert "(score 36 < 50)" in result.output


class TestBatchCommand:

    def test_summary_and_csv(self, tmp_path):
        source = tmp_path / "passwords.txt"
        source.write_text("alllowercase\n12345678\nPassw0rd!\nStr0ng!Pass99\n", encoding="utf-8")
        report = tmp_path / "report.csv"

        result = invoke("batch", str(source), "--output", str(report), "--workers", "2")

        assert result.exit_code == 0
        assert "Scored 4 passwords" in result.output
        assert "Average: 53.50" in result.output
        assert report.exists()
        assert "Passw0rd!" not in report.read_text(encoding="utf-8")

    def test_json_report(self, tmp_path):
        source = tmp_path / "passwords.txt"
        source.write_text("Passw0rd!\n", encoding="utf-8")
        report = tmp_path / "report.json"

        result = invoke("batch", str(source), "--output", str(report))

        assert result.exit_code == 0
        data = json.loads(report.read_text(encoding="utf-8"))
        assert data["results"][0]["score"] == 70

    def test_non_utf8_file(self, tmp_path):
        source = tmp_path / "passwords.txt"
        source.write_bytes("contraseña1!\n".encode("latin-1"))

        result = invoke("batch", str(source))

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "[ERROR]" in result.output
        assert "not valid UTF-8" in result.output
        assert "Traceback" not in result.output


class TestBandsCommand:

    def test_english(self):
        result = invoke("bands")
        assert result.exit_code == 0
        assert "Weak" in result.output
        assert "0-15" in result.output
        assert "86-100" in result.output

    def test_locale_from_config(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("locale: pt\n", encoding="utf-8")
        result = invoke("--config", str(path), "bands")
        assert result.exit_code == 0
        assert "Mediana" in result.output


def test_bad_config_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("unknown_key: 1\n", encoding="utf-8")
    result = invoke("--config", str(path), "bands")
    assert result.exit_code != 0
    assert "Invalid settings" in result.output
