"""Rich renderers for employees and benefits.

Display ordering lives here, not in the SDK: the SDK returns records in
storage order.
"""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from benefitscalc.sdk import (
    BenefitsCostBreakdown,
    BenefitsInfo,
    DependentInfo,
    DependentType,
    EmployeeInfo,
    NameInfo,
    PayrollInfo,
)

DEPENDENT_TYPE_ORDER = {
    DependentType.SELF: 1,
    DependentType.SPOUSE: 2,
    DependentType.CHILD: 3,
    DependentType.UNKNOWN: 4,
}


def format_name(name: NameInfo) -> str:
    """Full display name, skipping empty parts."""
    parts = [name.prefix, name.first, name.middle, name.last, name.suffix]
    return " ".join(p for p in parts if p)


def sort_employees(employees: List[EmployeeInfo]) -> List[EmployeeInfo]:
    """Sort by last name, then first name."""
    return sorted(employees, key=lambda e: (e.legal_name.last, e.legal_name.first))


def sort_dependents(dependents: List[DependentInfo]) -> List[DependentInfo]:
    """Sort self, spouse, child, unknown; then by first name within a type."""
    return sorted(
        dependents,
        key=lambda d: (DEPENDENT_TYPE_ORDER.get(d.type, 0), d.legal_name.first),
    )


def render_employees(console: Console, employees: List[EmployeeInfo]) -> None:
    """Render the employee list as a table."""
    if not employees:
        console.print("No employees.")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("Employee ID", style="dim")
    table.add_column("Name")
    for employee in employees:
        table.add_row(employee.employee_id, format_name(employee.legal_name))
    console.print(table)


def render_benefits(
    console: Console,
    employee_id: str,
    benefits: BenefitsInfo,
    breakdown: Optional[BenefitsCostBreakdown] = None,
) -> None:
    """Render an employee's dependents, with costs when breakdown is given."""
    costs = {}
    if breakdown is not None:
        costs = {entry.dependent_id: entry for entry in breakdown.entries}

    table = Table(box=box.SIMPLE)
    table.add_column("Dependent ID", style="dim")
    table.add_column("Name")
    table.add_column("Type")
    if breakdown is not None:
        table.add_column("Annual", justify="right")

    for dependent in sort_dependents(benefits.dependents):
        row = [dependent.dependent_id, format_name(dependent.legal_name), dependent.type.value]
        if breakdown is not None:
            entry = costs.get(dependent.dependent_id)
            if entry is None:
                row.append("")
            elif entry.discounted:
                row.append(f"[cyan]${entry.annual_cost:,.2f}[/cyan]")
            else:
                row.append(f"${entry.annual_cost:,.2f}")
        table.add_row(*row)

    title = f"Benefits: {employee_id} (package {benefits.package_id})"
    if not benefits.dependents:
        console.print(Panel("No dependents.", title=title, border_style="dim"))
    else:
        console.print(Panel(table, title=title, border_style="dim"))

    if breakdown is not None:
        console.print(
            f"Total annual: ${breakdown.total_annual_cost:,.2f}   "
            f"Per paycheck ({breakdown.pay_periods}/yr): "
            f"[bold]${breakdown.per_paycheck_cost:,.2f}[/bold]"
        )


def render_payroll(console: Console, employee_id: str, payroll: PayrollInfo) -> None:
    """Render a payroll snapshot."""
    console.print(f"Payroll: {employee_id}")
    console.print(f"  Gross paycheck: ${payroll.gross_paycheck:,.2f}")
