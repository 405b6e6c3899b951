from storefront.common.strings.splitters import csv_to_list


def test_csv_to_list_none():
    assert csv_to_list(None) == []


def test_csv_to_list_strips_list_items():
    assert csv_to_list([" GET ", "POST", "", "  "]) == ["GET", "POST"]


def test_csv_to_list_comma_string():
    assert csv_to_list("http://a.test, http://b.test ,,") == ["http://a.test", "http://b.test"]


def test_csv_to_list_json_style_string():
    assert csv_to_list('["GET", "PUT"]') == ["GET", "PUT"]
