"""Employees command group - directory listing and maintenance."""

import json
import uuid

import click
from rich.console import Console

from benefitscalc.sdk import (
    BenefitsError,
    EmployeeInfo,
    NameInfo,
    get_employee_api,
)
from .renderers.benefits_renderer import render_employees, sort_employees


def _name_from_options(first, last, prefix, middle, suffix) -> NameInfo:
    return NameInfo(prefix=prefix, first=first, middle=middle, last=last, suffix=suffix)


def name_options(f):
    """Shared optional name-part options."""
    f = click.option("--suffix", help="Name suffix, e.g. 'Jr.'")(f)
    f = click.option("--middle", help="Middle name")(f)
    f = click.option("--prefix", help="Name prefix, e.g. 'Dr.'")(f)
    return f


@click.group()
def employees():
    """Manage the company's employees.

    Employees are stored in insertion order; 'list' sorts by last name,
    then first name, for display.
    """
    pass


@employees.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON (storage order).")
def employees_list(as_json):
    """List employees."""
    api = get_employee_api()
    try:
        result = api.list_employees(api.company_id)
    except BenefitsError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps([e.to_record() for e in result], indent=2))
        return

    render_employees(Console(), sort_employees(result))


@employees.command("add")
@click.argument("first")
@click.argument("last")
@name_options
@click.option("--id", "employee_id", help="Employee id (default: generated)")
def employees_add(first, last, prefix, middle, suffix, employee_id):
    """Add an employee named FIRST LAST.

    Prints the new employee's id.
    """
    api = get_employee_api()
    info = EmployeeInfo(
        employee_id=employee_id or str(uuid.uuid4()),
        legal_name=_name_from_options(first, last, prefix, middle, suffix),
    )
    try:
        api.upsert_employee(api.company_id, info)
    except BenefitsError as e:
        raise click.ClickException(str(e))

    click.echo(info.employee_id)


@employees.command("rename")
@click.argument("employee_id")
@click.argument("first")
@click.argument("last")
@name_options
def employees_rename(employee_id, first, last, prefix, middle, suffix):
    """Replace the legal name of EMPLOYEE_ID."""
    api = get_employee_api()
    try:
        api.get_employee(api.company_id, employee_id)
        api.upsert_employee(
            api.company_id,
            EmployeeInfo(
                employee_id=employee_id,
                legal_name=_name_from_options(first, last, prefix, middle, suffix),
            ),
        )
    except BenefitsError as e:
        raise click.ClickException(str(e))

    click.echo(f"Renamed {employee_id}")


@employees.command("remove")
@click.argument("employee_id")
def employees_remove(employee_id):
    """Remove EMPLOYEE_ID from the directory.

    Benefits and payroll records for the employee are kept.
    """
    api = get_employee_api()
    try:
        info = api.get_employee(api.company_id, employee_id)
        api.remove_employee(api.company_id, info)
    except BenefitsError as e:
        raise click.ClickException(str(e))

    click.echo(f"Removed {employee_id}")
