from decimal import Decimal

from py_moneyfield.forms import (
    DropdownField,
    Form,
    LookupField,
    MoneyField,
    NumericField,
    NumericReadonlyField,
    ReadonlyField,
)


def _configured() -> MoneyField:
    return (
        MoneyField("Price", "Price")
        .set_allowed_currencies({"USD": "US Dollar", "EUR": "Euro"})
        .set_value({"Amount": Decimal("10"), "Currency": "USD"})
    )


def test_clone_owns_independent_sub_fields():
    original = _configured()
    duplicate = original.clone()
    assert duplicate.amount_field is not original.amount_field
    assert duplicate.currency_field is not original.currency_field

    duplicate.amount_field.set_value(Decimal("99"))
    duplicate.currency_field.set_value("EUR")
    assert original.amount_field.data_value() == Decimal("10")
    assert original.currency_field.data_value() == "USD"


def test_clone_reconfiguration_does_not_touch_original():
    original = _configured()
    duplicate = original.clone()
    duplicate.set_allowed_currencies(None)
    duplicate.set_readonly(True)
    assert isinstance(original.currency_field, DropdownField)
    assert original.allowed_currencies == {"USD": "US Dollar", "EUR": "Euro"}
    assert not original.is_readonly()
    assert not original.amount_field.is_readonly()


def test_readonly_transformation_transforms_each_sub_field():
    original = _configured()
    form = Form("Checkout", [original])
    readonly = original.perform_readonly_transformation()

    assert readonly is not original
    assert readonly.is_readonly()
    assert isinstance(readonly.amount_field, NumericReadonlyField)
    assert isinstance(readonly.currency_field, LookupField)
    assert readonly.currency_field.display_value() == "US Dollar"
    assert readonly.amount_field.form is form
    assert readonly.currency_field.form is form

    assert not original.is_readonly()
    assert isinstance(original.amount_field, NumericField)
    assert isinstance(original.currency_field, DropdownField)


def test_readonly_transformation_of_free_text_currency():
    readonly = MoneyField("Price").set_value({"Amount": 1, "Currency": "XBT"}).perform_readonly_transformation()
    assert type(readonly.currency_field) is ReadonlyField
    assert readonly.currency_field.data_value() == "XBT"
    assert readonly.amount_field.is_readonly()


def test_clone_of_single_code_restriction():
    duplicate = MoneyField("Price").set_allowed_currencies("USD").clone()
    assert duplicate.allowed_currencies == "USD"
    assert duplicate.currency_field.source == {"USD": "USD"}
    assert duplicate.schema_data()["allowed_currencies"] == {"USD": "USD"}


def test_iterator_restriction_is_kept_as_snapshot():
    field = MoneyField("Price").set_allowed_currencies(code for code in ["USD", "EUR"])
    assert field.allowed_currencies == ("USD", "EUR")
    assert field.currency_field.source == {"USD": "USD", "EUR": "EUR"}
    assert field.schema_data()["allowed_currencies"] == {"USD": "USD", "EUR": "EUR"}
    assert field.clone().schema_data()["allowed_currencies"] == {"USD": "USD", "EUR": "EUR"}


def test_clone_copies_mapping_restriction():
    original = _configured()
    duplicate = original.clone()
    assert duplicate.allowed_currencies == original.allowed_currencies
    assert duplicate.allowed_currencies is not original.allowed_currencies


def test_restriction_does_not_alias_callers_mapping():
    options = {"USD": "US Dollar"}
    field = MoneyField("Price").set_allowed_currencies(options)
    options["EUR"] = "Euro"
    assert field.allowed_currencies == {"USD": "US Dollar"}
