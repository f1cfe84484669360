"""Benefits Calc MCP Server - FastMCP tools over the employee API."""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from benefitscalc.sdk import (
    BenefitsError,
    BenefitsInfo,
    DependentInfo,
    EmployeeInfo,
    get_employee_api,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("benefits-calc")


# --- Tools ---

@mcp.tool()
async def list_employees(
    company_id: str = Field(description="Company id"),
) -> dict[str, Any]:
    """List the company's employees in storage order."""
    try:
        employees = get_employee_api().list_employees(company_id)
        return {
            "employees": [e.to_record() for e in employees],
            "count": len(employees),
        }
    except BenefitsError as e:
        logger.error(f"Error listing employees: {e}")
        return {"error": str(e), "employees": [], "count": 0}


@mcp.tool()
async def upsert_employee(
    company_id: str = Field(description="Company id"),
    employee: dict[str, Any] = Field(description="EmployeeInfo: {employeeId, legalName: {first, last, ...}}"),
) -> dict[str, Any]:
    """Add an employee, or replace the legal name of an existing one."""
    try:
        info = EmployeeInfo.model_validate(employee)
        get_employee_api().upsert_employee(company_id, info)
        return {"success": True, "employeeId": info.employee_id}
    except (BenefitsError, ValueError) as e:
        logger.error(f"Error upserting employee: {e}")
        return {"error": str(e), "success": False}


@mcp.tool()
async def remove_employee(
    company_id: str = Field(description="Company id"),
    employee_id: str = Field(description="Employee id to remove"),
) -> dict[str, Any]:
    """Remove an employee. Their benefits and payroll records are kept."""
    try:
        api = get_employee_api()
        info = api.get_employee(company_id, employee_id)
        api.remove_employee(company_id, info)
        return {"success": True, "employeeId": employee_id}
    except BenefitsError as e:
        logger.error(f"Error removing employee: {e}")
        return {"error": str(e), "success": False}


@mcp.tool()
async def get_benefits_info(
    company_id: str = Field(description="Company id"),
    employee_id: str = Field(description="Employee id"),
) -> dict[str, Any]:
    """Get an employee's dependents and benefits package."""
    try:
        return {"benefits": get_employee_api().get_benefits_info(company_id, employee_id).to_record()}
    except BenefitsError as e:
        logger.error(f"Error getting benefits: {e}")
        return {"error": str(e), "benefits": None}


@mcp.tool()
async def update_benefits_info(
    company_id: str = Field(description="Company id"),
    employee_id: str = Field(description="Employee id"),
    benefits: dict[str, Any] = Field(description="BenefitsInfo: {dependents: [...], packageId}"),
) -> dict[str, Any]:
    """Replace an employee's dependents and package selection."""
    try:
        info = BenefitsInfo.model_validate(benefits)
        get_employee_api().update_benefits_info(company_id, employee_id, info)
        return {"success": True}
    except (BenefitsError, ValueError) as e:
        logger.error(f"Error updating benefits: {e}")
        return {"error": str(e), "success": False}


@mcp.tool()
async def get_payroll_info(
    company_id: str = Field(description="Company id"),
    employee_id: str = Field(description="Employee id"),
) -> dict[str, Any]:
    """Get an employee's payroll snapshot."""
    try:
        return {"payroll": get_employee_api().get_payroll_info(company_id, employee_id).to_record()}
    except BenefitsError as e:
        logger.error(f"Error getting payroll: {e}")
        return {"error": str(e), "payroll": None}


@mcp.tool()
async def calculate_benefits_cost(
    company_id: str = Field(description="Company id"),
    package_id: str = Field(description="Benefits package id"),
    dependents: list[dict[str, Any]] = Field(description="List of DependentInfo: {dependentId, legalName, type}"),
) -> dict[str, Any]:
    """Per-paycheck benefits cost (rounded up to the cent) for a dependent list."""
    try:
        parsed = [DependentInfo.model_validate(d) for d in dependents]
        breakdown = get_employee_api().benefits_cost_breakdown(company_id, package_id, parsed)
        return breakdown.to_record()
    except (BenefitsError, ValueError) as e:
        logger.error(f"Error calculating cost: {e}")
        return {"error": str(e)}


def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
