from geotargets.tokenizer import tokenize


def test_quoted_fields_keep_inner_commas():
    line = '"1006004","Paris","Paris,Texas,United States","21176","US","City","Active"'
    assert tokenize(line) == [
        "1006004",
        "Paris",
        "Paris,Texas,United States",
        "21176",
        "US",
        "City",
        "Active",
    ]


def test_empty_quoted_field_is_kept():
    line = '"2840","United States","United States","","US","Country","Active"'
    fields = tokenize(line)
    assert len(fields) == 7
    assert fields[3] == ""


def test_inner_quotes_are_literal_unless_before_comma_or_end():
    line = '"1","Say "Hi" Bay","Say "Hi" Bay,Alaska,United States"'
    assert tokenize(line) == [
        "1",
        'Say "Hi" Bay',
        'Say "Hi" Bay,Alaska,United States',
    ]


def test_quoted_fields_round_trip():
    fields = ['a,b', 'quote "inside" here', "trailing space ", " lead", "x,y,z"]
    line = ",".join(f'"{field}"' for field in fields)
    assert tokenize(line) == fields


def test_spaces_outside_quotes_are_dropped():
    assert tokenize(' "a", "b c"') == ["a", "b c"]


def test_unquoted_fields():
    assert tokenize("12,abc,d e") == ["12", "abc", "de"]


def test_unterminated_value_is_kept():
    assert tokenize('"a","unterminated') == ["a", "unterminated"]


def test_empty_line():
    assert tokenize("") == []


def test_short_row_is_returned_as_is():
    assert tokenize('"1","Paris","Paris,France","FR"') == ["1", "Paris", "Paris,France", "FR"]


def test_empty_unquoted_field_keeps_its_position():
    fields = tokenize("1,France,France,,FR,Country,Active")
    assert len(fields) == 7
    assert fields[3] == ""
    assert fields[5] == "Country"


def test_mixed_quoted_and_empty_unquoted_fields():
    assert tokenize('"a",,"b"') == ["a", "", "b"]
