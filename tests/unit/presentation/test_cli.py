from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any

import pytest

from py_moneyfield import __version__
from py_moneyfield.presentation.cli.main import cli


@pytest.fixture(autouse=True)
def drop_log_handlers() -> Iterator[None]:
    # cli() binds a handler to the captured stderr of the running test
    yield
    logging.getLogger().handlers.clear()


def _stdout_json(capsys: Any) -> dict[str, Any]:
    return json.loads(capsys.readouterr().out.strip().splitlines()[-1])


def test_version(capsys: Any) -> None:
    assert cli(["version"]) == 0
    assert capsys.readouterr().out.strip() == __version__


def test_bind_flat_record(capsys: Any) -> None:
    rc = cli(["bind", "Price", "Price[Amount]=10.50", "Price[Currency]=EUR", "--allowed", "USD", "--allowed", "EUR"])
    assert rc == 0
    out = _stdout_json(capsys)
    assert out == {
        "errors": [],
        "field": "Price",
        "record": {"PriceAmount": "10.50", "PriceCurrency": "EUR"},
        "valid": True,
    }


def test_bind_structured_record(capsys: Any) -> None:
    rc = cli(["bind", "Price", "Price[Amount]=3", "Price[Currency]=GBP", "--structured"])
    assert rc == 0
    out = _stdout_json(capsys)
    assert out["record"] == {"values": {"Price": {"amount": "3", "currency": "GBP"}}}


def test_bind_reports_currency_outside_allowed_set(capsys: Any) -> None:
    rc = cli(["bind", "Price", "Price[Amount]=1", "Price[Currency]=JPY", "--allowed", "USD"])
    assert rc == 2
    out = _stdout_json(capsys)
    assert out["valid"] is False
    assert [e["field"] for e in out["errors"]] == ["Price[Currency]"]
    # value is still written; validation result is reported alongside
    assert out["record"]["PriceCurrency"] == "JPY"


def test_bind_reports_non_numeric_amount(capsys: Any) -> None:
    rc = cli(["bind", "Price", "Price[Amount]=ten", "Price[Currency]=USD"])
    assert rc == 2
    out = _stdout_json(capsys)
    assert out["errors"][0]["type"] == "numeric"
    assert out["record"]["PriceAmount"] is None


def test_bind_without_pairs_leaves_values_empty(capsys: Any) -> None:
    assert cli(["bind", "Price"]) == 0
    out = _stdout_json(capsys)
    assert out["record"] == {"PriceAmount": None, "PriceCurrency": None}


def test_bind_malformed_pair_is_input_error(capsys: Any) -> None:
    rc = cli(["bind", "Price", "Price[Amount]"])
    assert rc == 2
    assert "[ERROR]" in capsys.readouterr().err


def test_schema_with_labelled_currencies(capsys: Any) -> None:
    assert cli(["schema", "Price", "--allowed", "USD=US Dollar", "--allowed", "EUR"]) == 0
    out = _stdout_json(capsys)
    assert out["type"] == "MoneyField"
    assert out["allowed_currencies"] == {"USD": "US Dollar", "EUR": "EUR"}
    currency = out["children"][1]
    assert currency["name"] == "Price[Currency]"
    assert currency["source"] == [{"value": "USD", "title": "US Dollar"}, {"value": "EUR", "title": "EUR"}]


def test_schema_readonly(capsys: Any) -> None:
    assert cli(["schema", "Price", "--readonly"]) == 0
    out = _stdout_json(capsys)
    assert out["readonly"] is True
    assert all(child["readonly"] for child in out["children"])
    assert {child["type"] for child in out["children"]} == {"Readonly"}


def test_schema_titles_come_from_settings(monkeypatch: pytest.MonkeyPatch, capsys: Any) -> None:
    monkeypatch.setenv("AMOUNT_LABEL", "Betrag")
    monkeypatch.setenv("PYMF__CURRENCY_LABEL", "Waehrung")
    assert cli(["schema", "Price"]) == 0
    out = _stdout_json(capsys)
    assert [child["title"] for child in out["children"]] == ["Betrag", "Waehrung"]


def test_invalid_settings_are_input_errors(monkeypatch: pytest.MonkeyPatch, capsys: Any) -> None:
    monkeypatch.setenv("LOG_ROTATION", "weekly")
    assert cli(["schema", "Price"]) == 2
    assert "[ERROR]" in capsys.readouterr().err
