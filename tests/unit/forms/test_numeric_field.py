from decimal import Decimal

import pytest

from py_moneyfield.forms import NumericField, NumericReadonlyField, Validator, to_number


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (10, 10),
        (12.5, 12.5),
        (Decimal("3.10"), Decimal("3.10")),
        ("12.50", Decimal("12.50")),
        (" 7 ", Decimal("7")),
        ("", None),
        (None, None),
        ("abc", None),
        ("NaN", None),
        ("inf", None),
        (float("nan"), None),
        (float("inf"), None),
        (Decimal("Infinity"), None),
        (True, None),
    ],
)
def test_to_number(raw, expected):
    assert to_number(raw) == expected


def test_string_keeps_entered_precision():
    field = NumericField("Amount", value="1.000")
    assert str(field.data_value()) == "1.000"


def test_validate_reports_non_numeric_value():
    validator = Validator()
    field = NumericField("Price[Amount]", value="ten")
    assert field.validate(validator) is False
    assert validator.errors == [
        {
            "field": "Price[Amount]",
            "message": "'ten' is not a number, only numbers can be accepted for this field",
            "type": "numeric",
        }
    ]


def test_validate_accepts_blank_and_numbers():
    validator = Validator()
    assert NumericField("A", value="").validate(validator)
    assert NumericField("A", value=None).validate(validator)
    assert NumericField("A", value="4.2").validate(validator)
    assert validator.errors == []


def test_readonly_transformation_keeps_numeric_data_value():
    field = NumericField("Amount", "Amount", "99.95")
    readonly = field.perform_readonly_transformation()
    assert isinstance(readonly, NumericReadonlyField)
    assert readonly.is_readonly()
    assert readonly.data_value() == Decimal("99.95")
    assert readonly.schema_data()["type"] == "Readonly"
