from decimal import Decimal
from types import SimpleNamespace

from py_moneyfield.domain import Money
from py_moneyfield.forms import Form, MoneyField


class StructuredTarget:
    def __init__(self) -> None:
        self.calls: list[tuple[str, Money]] = []

    def set_money(self, field_name: str, money: Money) -> None:
        self.calls.append((field_name, money))


def _field() -> MoneyField:
    return MoneyField("Foo").set_value({"Amount": Decimal("12.345"), "Currency": "EUR"})


def test_structured_target_receives_single_money():
    target = StructuredTarget()
    _field().save_into(target)
    assert target.calls == [("Foo", Money(Decimal("12.345"), "EUR"))]
    assert not hasattr(target, "FooAmount")


def test_flat_target_gets_two_attributes():
    target = SimpleNamespace()
    _field().save_into(target)
    assert target.FooCurrency == "EUR"
    assert target.FooAmount == Decimal("12.345")
    assert not hasattr(target, "Foo")


def test_flat_values_equal_sub_field_data_values():
    field = MoneyField("Foo").set_value({"Amount": "", "Currency": ""})
    target = SimpleNamespace()
    field.save_into(target)
    assert target.FooAmount == field.amount_field.data_value() is None
    assert target.FooCurrency == field.currency_field.data_value() == ""


def test_form_save_into_uses_same_paths():
    form = Form("Checkout", [_field(), MoneyField("Shipping").set_value({"Amount": 4, "Currency": "EUR"})])
    target = SimpleNamespace()
    form.save_into(target)
    assert (target.FooAmount, target.FooCurrency) == (Decimal("12.345"), "EUR")
    assert (target.ShippingAmount, target.ShippingCurrency) == (4, "EUR")


def test_readonly_clone_still_saves_values():
    target = SimpleNamespace()
    _field().set_allowed_currencies(["EUR"]).perform_readonly_transformation().save_into(target)
    assert target.FooAmount == Decimal("12.345")
    assert target.FooCurrency == "EUR"
