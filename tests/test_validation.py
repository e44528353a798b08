from conference.utils.validation import normalize_string, parse_positive_int


def test_normalize_string():
    assert normalize_string("  Ada@Example.COM ") == "ada@example.com"
    assert normalize_string("   ") is None
    assert normalize_string(None) is None
    assert normalize_string(12) is None


def test_parse_positive_int():
    assert parse_positive_int("42") == 42
    assert parse_positive_int(7) == 7
    assert parse_positive_int("0") is None
    assert parse_positive_int("-3") is None
    assert parse_positive_int("abc") is None
    assert parse_positive_int(None) is None
    assert parse_positive_int(True) is None


def test_parse_positive_int_reads_leading_digits():
    assert parse_positive_int("7.5") == 7
    assert parse_positive_int(" 12abc") == 12
    assert parse_positive_int(3.9) == 3
    assert parse_positive_int("0.9") is None
    assert parse_positive_int("x12") is None
    assert parse_positive_int(float("inf")) is None
    assert parse_positive_int(float("nan")) is None
