from ibanray import check_many
from ibanray.reporting.html import render_report, write_report


def test_report_lists_results():
    results = check_many(["DE89370400440532013000", "ZZ1730003000309332627391239"])
    html = render_report(results)
    assert "2 checked, 1 invalid" in html
    assert "DE89 3704 0044 0532 0130 00" in html
    assert "unknown country code" in html

def test_report_escapes_input():
    html = render_report(check_many(["<b>FR</b>"]))
    assert "&lt;b&gt;FR&lt;/b&gt;" in html
    assert "<b>FR</b>" not in html

def test_write_report_creates_parent_dirs(tmp_path):
    out = tmp_path / "nested" / "report.html"
    write_report(check_many(["DE89370400440532013000"]), out)
    assert out.exists()
