"""Benefits Calc CLI - Command-line interface for benefits administration."""

import click

from benefitscalc import __version__

from .employees_commands import employees as employees_group
from .benefits_commands import benefits as benefits_group, payroll as payroll_group
from .profile_commands import profile as profile_group
from .settings_commands import settings as settings_group


@click.group()
@click.version_option(version=__version__, prog_name="benefits-calc")
def cli():
    """Benefits Calc - Employee benefits administration.

    Commands for maintaining employees and their dependents, and for
    projecting per-paycheck benefits cost.

    Configuration is loaded from (in order):

    \b
    1. BENEFITS_CALC_CONFIG_PATH environment variable
    2. ~/.config/benefits-calc/ (XDG default)

    Run 'benefits-calc profile show' to see the recognized company and package.
    """
    pass


cli.add_command(employees_group)
cli.add_command(benefits_group)
cli.add_command(payroll_group)
cli.add_command(profile_group)
cli.add_command(settings_group)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
