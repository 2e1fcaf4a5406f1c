"""Command line entry point for py_moneyfield.

Commands:
- version: print the package version
- bind: load form-post pairs into a MoneyField, validate and save into a record
- schema: print the schema description of a configured MoneyField

Output is JSON on stdout; logs go to stderr. Input errors exit with code 2,
unexpected failures with code 1.
"""
from __future__ import annotations

import sys
from typing import Any

from typer import Argument, Exit, Option, Typer

from py_moneyfield import __version__
from py_moneyfield.domain.errors import ValidationError
from py_moneyfield.forms import Form, MoneyField, Validator, parse_form_post
from py_moneyfield.infrastructure.config import get_settings
from py_moneyfield.infrastructure.logging import configure_logging, get_logger
from py_moneyfield.sdk.errors import UserInputError, map_exception
from py_moneyfield.sdk.json import to_dict, to_json

from .records import FlatRecord, StructuredRecord

app: Typer = Typer(help="Bind amount + currency form data through a MoneyField.", add_completion=False)


def _parse_pairs(pairs: list[str]) -> list[tuple[str, str]]:
    parsed: list[tuple[str, str]] = []
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValidationError(f"Expected KEY=VALUE, got {pair!r}")
        parsed.append((key, value))
    return parsed


def _parse_allowed(options: list[str] | None) -> list[str] | dict[str, str] | None:
    """``USD`` entries give a code list; any ``USD=US Dollar`` entry switches to a code -> label map."""
    if not options:
        return None
    if not any("=" in option for option in options):
        return list(options)
    labelled: dict[str, str] = {}
    for option in options:
        code, _, label = option.partition("=")
        if not code:
            raise ValidationError(f"Invalid currency option: {option!r}")
        labelled[code] = label or code
    return labelled


def _build_field(name: str, allowed: list[str] | None, readonly: bool) -> MoneyField:
    settings = get_settings()
    field = MoneyField(name, amount_title=settings.amount_label, currency_title=settings.currency_label)
    field.set_allowed_currencies(_parse_allowed(allowed))
    if readonly:
        field.set_readonly(True)
    return field


@app.command("version")
def version_cmd() -> None:
    """Print package version."""
    print(__version__)


@app.command("bind")
def bind_cmd(
    name: str = Argument(..., help="Field name, e.g. Price."),
    pairs: list[str] | None = Argument(None, help="Form post pairs such as 'Price[Amount]=10'."),
    allowed: list[str] | None = Option(None, "--allowed", help="Allowed currency code, optionally CODE=LABEL."),
    structured: bool = Option(False, "--structured", help="Save through set_money() instead of flat attributes."),
    readonly: bool = Option(False, "--readonly", help="Mark the field readonly before binding."),
) -> None:
    """Load form data into a MoneyField and save it into a record.

    Prints {field, valid, errors, record}. Exits with code 2 when validation fails.
    """
    log = get_logger("py_moneyfield.cli")
    field = _build_field(name, allowed, readonly)
    form = Form("CliForm", [field])
    form.load_data_from(parse_form_post(_parse_pairs(pairs or [])))

    validator = Validator()
    valid = form.validate(validator)
    # the composite check is structural only; report bad amounts/currencies too
    valid = field.amount_field.validate(validator) and valid
    valid = field.currency_field.validate(validator) and valid

    record: Any = StructuredRecord() if structured else FlatRecord()
    form.save_into(record)
    log.info("form bound", field=name, valid=valid, structured=structured)

    print(to_json({"field": name, "valid": valid, "errors": validator.errors, "record": to_dict(record)}))
    if not valid:
        raise Exit(code=2)


@app.command("schema")
def schema_cmd(
    name: str = Argument(..., help="Field name, e.g. Price."),
    allowed: list[str] | None = Option(None, "--allowed", help="Allowed currency code, optionally CODE=LABEL."),
    readonly: bool = Option(False, "--readonly", help="Describe the readonly rendition of the field."),
) -> None:
    """Print the schema description of a MoneyField."""
    field = _build_field(name, allowed, False)
    if readonly:
        field = field.perform_readonly_transformation()
    print(to_json(field.schema_data()))


def cli(argv: list[str] | None = None) -> int:
    """Run the Typer application with top-level error handling.

    Returns a process exit code: 0 success, 2 input/validation errors,
    1 unexpected errors. Accepts argv for programmatic use in tests.
    """
    args = argv if argv is not None else sys.argv[1:]
    try:
        configure_logging(stream=sys.stderr)
        app(args=args, prog_name="py-moneyfield")
        return 0
    except SystemExit as se:
        return int(se.code) if isinstance(se.code, int) else 0
    except Exception as exc:
        public = map_exception(exc)
        if isinstance(public, UserInputError):
            print(f"[ERROR] {public}", file=sys.stderr)
            return 2
        print(f"[ERROR] unexpected: {public}", file=sys.stderr)
        return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(cli())


if __name__ == "__main__":  # pragma: no cover
    run()
