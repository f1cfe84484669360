"""Profile CLI commands for Benefits Calc.

Manages profile.yaml - the recognized company and benefits package ids.
"""

import click
import yaml

from benefitscalc.sdk import (
    get_profile_path,
    load_profile,
    set_profile_value,
    get_recognized_ids,
    PROFILE_KEYS,
)


@click.group()
def profile():
    """Manage the company profile (profile.yaml).

    The profile names the one company and the one benefits package
    this installation recognizes. Built-in demo ids are used for any
    key that is not set.
    """
    pass


@profile.command("show")
def profile_show():
    """Show the profile location and the effective ids."""
    profile_path = get_profile_path(require_exists=False)
    company_id, package_id = get_recognized_ids()

    click.echo(f"Profile: {profile_path}")
    click.echo(f"File exists: {profile_path.exists()}")
    click.echo()
    click.echo("Effective ids:")
    click.echo(f"  company_id: {company_id}")
    click.echo(f"  package_id: {package_id}")

    current = load_profile(require_exists=False)
    if current:
        click.echo()
        click.echo("---")
        click.echo(yaml.dump(current, default_flow_style=False, sort_keys=False))


@profile.command("set")
@click.argument("key", type=click.Choice(PROFILE_KEYS))
@click.argument("value")
def profile_set(key, value):
    """Set a profile value.

    Changing company_id or package_id does not migrate existing records.
    """
    try:
        path = set_profile_value(key, value)
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set {key}: {value}")
    click.echo(f"Saved to: {path}")
