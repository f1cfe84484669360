"""Settings CLI commands for Benefits Calc.

Manages where employee, benefits and payroll records live (settings.json).
"""

import click

from benefitscalc.sdk import (
    BenefitsError,
    clear_data_dir,
    get_data_path,
    get_employee_api,
    get_profile_path,
    get_records_dir,
    get_settings_path,
    set_data_dir,
)


@click.group()
def settings():
    """Manage where records are stored (settings.json).

    Available settings:
    - data_dir: directory holding the records/ folder
    - profile: path to profile.yaml, if not in the config directory
    """
    pass


@settings.command("show")
def settings_show():
    """Show config locations and what is stored in the records directory."""
    settings_path = get_settings_path()
    api = get_employee_api()
    try:
        counts = api.record_counts()
    except BenefitsError as e:
        raise click.ClickException(str(e))

    click.echo(f"Settings file: {settings_path}" + ("" if settings_path.exists() else " (not created)"))
    click.echo(f"Profile: {get_profile_path(require_exists=False)}")
    click.echo(f"Data directory: {get_data_path()}")
    click.echo(f"Records: {get_records_dir()}")
    click.echo()
    click.echo(f"Company {api.company_id}, package {api.package_id}:")
    click.echo(f"  employees:           {counts['employees']}")
    click.echo(f"  benefits elections:  {counts['benefits']}")
    click.echo(f"  payroll snapshots:   {counts['payroll']}")


@settings.command("data-dir")
@click.argument("path", required=False, type=click.Path())
@click.option("--clear", is_flag=True, help="Clear custom data_dir, revert to default")
def settings_data_dir(path, clear):
    """Set or clear the directory where records are stored.

    Records already written under the old directory are not moved.

    Examples:
        benefits-calc settings data-dir ~/benefits-data
        benefits-calc settings data-dir --clear
    """
    if clear:
        if clear_data_dir():
            click.echo("Cleared data_dir setting.")
        else:
            click.echo("data_dir was not set.")
        click.echo(f"Data directory is now: {get_data_path()} (default)")
        return

    if not path:
        click.echo(f"Data directory: {get_data_path()}")
        return

    try:
        data_path = set_data_dir(path)
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set data_dir: {data_path}")
    click.echo(f"Saved to: {get_settings_path()}")
