import pytest

from src.airtable import formula


def test_quote_escapes_quotes_and_backslashes():
    assert formula.quote('say "hi"') == '"say \\"hi\\""'
    assert formula.quote("a\\b") == '"a\\\\b"'


def test_case_insensitive_name_match():
    expression = formula.eq(formula.lower(formula.field("Name")), formula.quote("kovács anna"))

    assert expression == 'LOWER({Name}) = "kovács anna"'


def test_or_of_record_ids():
    expression = formula.or_(
        *(formula.eq(formula.record_id(), formula.quote(i)) for i in ["rec1", "rec2"])
    )

    assert expression == 'OR(RECORD_ID() = "rec1", RECORD_ID() = "rec2")'


def test_or_with_single_expression_is_unwrapped():
    assert formula.or_('{Family} = "x"') == '{Family} = "x"'


def test_or_needs_an_expression():
    with pytest.raises(ValueError):
        formula.or_()
