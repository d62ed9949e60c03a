from receiptscan.receipt.text_parser import extract_receipt_date


def test_first_line_match_wins_over_pattern_order() -> None:
    assert extract_receipt_date(["03/14/2024", "2024-03-15"]) == "03/14/2024"
    assert extract_receipt_date(["Printed 2024-03-15", "03/14/2024"]) == "24-03-15"


def test_pattern_order_within_a_line() -> None:
    assert extract_receipt_date(["2024-03-15 paid 03/14/2024"]) == "03/14/2024"


def test_date_is_stored_verbatim_without_validation() -> None:
    assert extract_receipt_date(["Date: 99/99/99 10:15"]) == "99/99/99"
    assert extract_receipt_date(["14-3-24"]) == "14-3-24"


def test_day_month_name_year() -> None:
    assert extract_receipt_date(["BIG MART", "Visited 14 March 2024"]) == "14 March 2024"


def test_no_date_yields_empty_string() -> None:
    assert extract_receipt_date(["BIG MART", "Burger $12.99"]) == ""
    assert extract_receipt_date([]) == ""


def test_unanchored_match_takes_substring_of_longer_digit_runs() -> None:
    assert extract_receipt_date(["Date 2024-03-15"]) == "24-03-15"
    assert extract_receipt_date(["Ref 123/4/2024"]) == "23/4/2024"
    assert extract_receipt_date(["03/14/20245"]) == "03/14/2024"
