"""Benefits and payroll command groups."""

import json
import uuid

import click
from rich.console import Console

from benefitscalc.sdk import (
    BenefitsError,
    BenefitsInfo,
    DependentInfo,
    DependentType,
    NameInfo,
    get_employee_api,
)
from .renderers.benefits_renderer import render_benefits, render_payroll


DEPENDENT_TYPES = [t.value for t in DependentType]


@click.group()
def benefits():
    """Manage an employee's dependents and benefits cost.

    The employee's own coverage is a dependent of type 'self'.
    """
    pass


@benefits.command("show")
@click.argument("employee_id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def benefits_show(employee_id, as_json):
    """Show dependents for EMPLOYEE_ID."""
    api = get_employee_api()
    try:
        info = api.get_benefits_info(api.company_id, employee_id)
    except BenefitsError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps(info.to_record(), indent=2))
        return

    render_benefits(Console(), employee_id, info)


@benefits.command("add-dependent")
@click.argument("employee_id")
@click.argument("first")
@click.argument("last")
@click.option("--type", "dep_type", type=click.Choice(DEPENDENT_TYPES),
              default=DependentType.UNKNOWN.value, show_default=True,
              help="Relationship to the employee.")
@click.option("--prefix", help="Name prefix")
@click.option("--middle", help="Middle name")
@click.option("--suffix", help="Name suffix")
def benefits_add_dependent(employee_id, first, last, dep_type, prefix, middle, suffix):
    """Add a dependent named FIRST LAST to EMPLOYEE_ID.

    Prints the new dependent's id.
    """
    api = get_employee_api()
    dependent = DependentInfo(
        dependent_id=str(uuid.uuid4()),
        legal_name=NameInfo(prefix=prefix, first=first, middle=middle, last=last, suffix=suffix),
        type=DependentType(dep_type),
    )
    try:
        info = api.get_benefits_info(api.company_id, employee_id)
        updated = BenefitsInfo(
            dependents=[*info.dependents, dependent],
            package_id=info.package_id,
        )
        api.update_benefits_info(api.company_id, employee_id, updated)
    except BenefitsError as e:
        raise click.ClickException(str(e))

    click.echo(dependent.dependent_id)


@benefits.command("remove-dependent")
@click.argument("employee_id")
@click.argument("dependent_id")
def benefits_remove_dependent(employee_id, dependent_id):
    """Remove DEPENDENT_ID from EMPLOYEE_ID's benefits."""
    api = get_employee_api()
    try:
        info = api.get_benefits_info(api.company_id, employee_id)
        remaining = [d for d in info.dependents if d.dependent_id != dependent_id]
        if len(remaining) == len(info.dependents):
            raise click.ClickException(f"Dependent not found: {dependent_id}")
        api.update_benefits_info(
            api.company_id,
            employee_id,
            BenefitsInfo(dependents=remaining, package_id=info.package_id),
        )
    except BenefitsError as e:
        raise click.ClickException(str(e))

    click.echo(f"Removed {dependent_id}")


@benefits.command("edit-dependent")
@click.argument("employee_id")
@click.argument("dependent_id")
@click.option("--first", help="First name")
@click.option("--last", help="Last name")
@click.option("--type", "dep_type", type=click.Choice(DEPENDENT_TYPES),
              help="Relationship to the employee.")
@click.option("--prefix", help="Name prefix")
@click.option("--middle", help="Middle name")
@click.option("--suffix", help="Name suffix")
def benefits_edit_dependent(employee_id, dependent_id, first, last, dep_type, prefix, middle, suffix):
    """Change the name or type of DEPENDENT_ID on EMPLOYEE_ID's benefits.

    Only the options given are changed; the dependent keeps its id and
    its position in the list.

    Examples:
        benefits-calc benefits edit-dependent E1 D1 --type spouse
        benefits-calc benefits edit-dependent E1 D1 --last Bouvier --middle Jacqueline
    """
    name_changes = {
        k: v for k, v in
        {"prefix": prefix, "first": first, "middle": middle, "last": last, "suffix": suffix}.items()
        if v is not None
    }
    if not name_changes and dep_type is None:
        raise click.UsageError("Nothing to change. Pass at least one name option or --type.")

    api = get_employee_api()
    try:
        info = api.get_benefits_info(api.company_id, employee_id)
        matches = [d for d in info.dependents if d.dependent_id == dependent_id]
        if not matches:
            raise click.ClickException(f"Dependent not found: {dependent_id}")

        current = matches[0]
        edited = DependentInfo(
            dependent_id=current.dependent_id,
            legal_name=NameInfo(**{**current.legal_name.model_dump(), **name_changes}),
            type=DependentType(dep_type) if dep_type else current.type,
        )
        dependents = [edited if d.dependent_id == dependent_id else d for d in info.dependents]
        api.update_benefits_info(
            api.company_id,
            employee_id,
            BenefitsInfo(dependents=dependents, package_id=info.package_id),
        )
    except BenefitsError as e:
        raise click.ClickException(str(e))

    click.echo(f"Updated {dependent_id}")


@benefits.command("cost")
@click.argument("employee_id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def benefits_cost(employee_id, as_json):
    """Show the benefits cost for EMPLOYEE_ID.

    Per-paycheck cost is the annual total over 26 paychecks, rounded up
    to the cent.
    """
    api = get_employee_api()
    try:
        info = api.get_benefits_info(api.company_id, employee_id)
        breakdown = api.benefits_cost_breakdown(api.company_id, info.package_id, info.dependents)
    except BenefitsError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps(breakdown.to_record(), indent=2))
        return

    render_benefits(Console(), employee_id, info, breakdown)


@click.group()
def payroll():
    """Show payroll snapshots."""
    pass


@payroll.command("show")
@click.argument("employee_id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def payroll_show(employee_id, as_json):
    """Show the payroll snapshot for EMPLOYEE_ID."""
    api = get_employee_api()
    try:
        info = api.get_payroll_info(api.company_id, employee_id)
    except BenefitsError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps(info.to_record(), indent=2))
        return

    render_payroll(Console(), employee_id, info)
