from src.flexwork_payroll.flexwork_payroll.common.formatters import format_krw, format_minutes_hm


def test_format_minutes_hm():
    assert format_minutes_hm(0) == "0h"
    assert format_minutes_hm(480) == "8h"
    assert format_minutes_hm(510) == "8h 30m"
    assert format_minutes_hm(59) == "0h 59m"


def test_format_krw():
    assert format_krw(0) == "₩0"
    assert format_krw(4667) == "₩4,667"
    assert format_krw(1234567) == "₩1,234,567"
