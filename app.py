#!/usr/bin/env python3

import sys

import click
from dotenv import load_dotenv

from string_input_validator.error_details import get_error_human_message
from string_input_validator.utils.logging import setup_logging
from string_input_validator.validation import (
    ALPHANUMERIC,
    NUMERIC,
    CompositeValidator,
    LengthPolicy,
    LengthValidator,
    NotEmptyValidator,
    PatternValidator,
    PhoneNumberValidator,
    ValidatorConfigurationError,
)


def build_validator(
    length=None,
    lenient_length=False,
    not_empty=False,
    numeric=False,
    alphanumeric=False,
    patterns=(),
    phone=False,
    region=None,
) -> CompositeValidator:
    """Assemble a CompositeValidator from command line options.

    Falls back to a NotEmptyValidator when no check is selected.
    """
    validators = []
    if length is not None:
        policy = LengthPolicy.LENIENT if lenient_length else LengthPolicy.STRICT
        validators.append(LengthValidator(length, policy))
    if not_empty:
        validators.append(NotEmptyValidator())
    if numeric:
        validators.append(NUMERIC)
    if alphanumeric:
        validators.append(ALPHANUMERIC)
    validators.extend(PatternValidator(p) for p in patterns)
    if phone:
        validators.append(PhoneNumberValidator(region=region))

    if not validators:
        validators.append(NotEmptyValidator())
    return CompositeValidator(validators)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx) -> None:
    """String Input Validator - validate strings with composable checks"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("value")
@click.option("--length", type=click.IntRange(min=0), help="Exact expected length")
@click.option(
    "--lenient-length",
    is_flag=True,
    default=False,
    help="Report strings shorter than --length as a warning instead of an error",
)
@click.option("--not-empty", is_flag=True, default=False, help="Reject empty input")
@click.option("--numeric", is_flag=True, default=False, help="Digits only")
@click.option(
    "--alphanumeric", is_flag=True, default=False, help="Digits and ASCII letters only"
)
@click.option(
    "--pattern",
    "patterns",
    multiple=True,
    help="Regular expression the whole value has to match (repeatable)",
)
@click.option("--phone", is_flag=True, default=False, help="Value must be a phone number")
@click.option(
    "--region",
    help="Default region for phone numbers without country code (default: PHONE_DEFAULT_REGION)",
)
def validate(
    value,
    length,
    lenient_length,
    not_empty,
    numeric,
    alphanumeric,
    patterns,
    phone,
    region,
) -> None:
    """Validate VALUE and print the outcome.

    Exits with status 1 if the value is invalid.
    """
    try:
        validator = build_validator(
            length=length,
            lenient_length=lenient_length,
            not_empty=not_empty,
            numeric=numeric,
            alphanumeric=alphanumeric,
            patterns=patterns,
            phone=phone,
            region=region,
        )
    except ValidatorConfigurationError as e:
        raise click.ClickException(get_error_human_message(e)) from e

    outcome = validator.validate(value)
    click.echo(validator.description)
    click.echo(outcome.description)
    if not outcome.is_valid:
        sys.exit(1)


def main() -> None:
    load_dotenv()
    setup_logging()
    cli()


if __name__ == "__main__":
    main()
