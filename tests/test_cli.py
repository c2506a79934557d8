import json

from typer.testing import CliRunner
from ibanray.__main__ import main
from ibanray.cli import app

runner = CliRunner()

VALID = "FR2730003000309332627391239"
BAD_CHECKSUM = "FR2830003000309332627391239"

def test_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "IBAN validator" in result.stdout

def test_main_is_callable():
    assert callable(main)

def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "ibanray 0.1.0" in result.stdout

def test_check_valid():
    result = runner.invoke(app, ["check", VALID])
    assert result.exit_code == 0
    assert "FR27 3000 3000 3093 3262 7391 239" in result.stdout

def test_check_invalid_exits_1_and_lists_violations():
    result = runner.invoke(app, ["check", "ZZ1730003000309332627391239", BAD_CHECKSUM])
    assert result.exit_code == 1
    assert "unknown country code 'ZZ'" in result.stdout
    assert "checksum does not match" in result.stdout

def test_check_no_strict():
    result = runner.invoke(app, ["check", "--no-strict", BAD_CHECKSUM])
    assert result.exit_code == 0

def test_check_requires_input():
    result = runner.invoke(app, ["check"])
    assert result.exit_code != 0

def test_check_json():
    result = runner.invoke(app, ["check", "--json", "--no-strict", VALID, "FR71300030003093326273912390"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload[0]["valid"] is True
    assert payload[0]["country"] == "FR"
    assert payload[0]["formatted"] == "FR27 3000 3000 3093 3262 7391 239"
    assert payload[1]["valid"] is False
    assert {"kind": "exceeds_country_length_specification", "expected": 27, "got": 28} in payload[1]["violations"]

def test_check_from_file(tmp_path):
    src = tmp_path / "ibans.txt"
    src.write_text(f"# accounts\n{VALID}\n\nDE89 3704 0044 0532 0130 00\n")
    result = runner.invoke(app, ["check", "--file", str(src)])
    assert result.exit_code == 0
    assert "DE89 3704 0044 0532 0130 00" in result.stdout

def test_check_writes_report(tmp_path):
    out = tmp_path / "report" / "ibans.html"
    result = runner.invoke(app, ["check", "--no-strict", "--report", str(out), VALID, BAD_CHECKSUM])
    assert result.exit_code == 0
    html = out.read_text()
    assert "2 checked, 1 invalid" in html

def test_config_selects_json_and_lenient_mode(tmp_path):
    cfg = tmp_path / ".ibanray.yaml"
    cfg.write_text("strict: false\nreport:\n  format: json\n")
    result = runner.invoke(app, ["--config", str(cfg), "check", BAD_CHECKSUM])
    assert result.exit_code == 0
    assert json.loads(result.stdout)[0]["violations"] == [{"kind": "invalid_checksum"}]

def test_invalid_config_exits_2(tmp_path):
    cfg = tmp_path / ".ibanray.yaml"
    cfg.write_text("report:\n  format: xml\n")
    result = runner.invoke(app, ["--config", str(cfg), "check", VALID])
    assert result.exit_code == 2

def test_format_command():
    result = runner.invoke(app, ["format", "sc00111122334444555566667777888"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "SC00 1111 22 33 4444 5555 6666 7777 888"

def test_format_unknown_country():
    result = runner.invoke(app, ["format", "ZZ17"])
    assert result.exit_code == 1

def test_countries_command():
    result = runner.invoke(app, ["countries"])
    assert result.exit_code == 0
    assert "SC" in result.stdout
    assert "**** **** ** ** **** **** **** **** ***" in result.stdout

def test_non_mapping_config_exits_2(tmp_path):
    cfg = tmp_path / ".ibanray.yaml"
    cfg.write_text("- strict\n")
    result = runner.invoke(app, ["--config", str(cfg), "check", VALID])
    assert result.exit_code == 2
    assert not isinstance(result.exception, TypeError)

def test_check_reads_strict_mode_from_config(tmp_path):
    cfg = tmp_path / ".ibanray.yaml"
    cfg.write_text("strict: false\n")
    result = runner.invoke(app, ["--config", str(cfg), "check", BAD_CHECKSUM])
    assert result.exit_code == 0
    assert result.exception is None
    assert "checksum does not match" in result.stdout
