#!/usr/bin/env python3
"""MCP Server for the SBR Calculator.

This server exposes the SBR severance and outplacement calculations as MCP
tools, allowing AI assistants to answer questions about an exit package.
"""

import os
import sys
import json
import asyncio
import logging
from typing import Any

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from tools import MultiScenarioTools

logger = logging.getLogger(__name__)


# Create the MCP server
server = Server("sbr-calculator")

# Global tools instance (initialized on startup)
tools: MultiScenarioTools | None = None


def get_tools() -> MultiScenarioTools:
    """Get or initialize the tools instance."""
    global tools
    if tools is None:
        # Default scenario can be set via SBR_CALCULATOR_SCENARIO env var
        default_scenario = os.environ.get('SBR_CALCULATOR_SCENARIO')
        base_path = os.path.join(os.path.dirname(__file__), '..')
        tools = MultiScenarioTools(base_path, default_scenario)
    return tools


# Common scenario parameter schema
SCENARIO_PARAM = {
    "type": "string",
    "description": "The scenario name (folder in input-parameters). If not specified, uses the default scenario. Use list_scenarios to see available scenarios."
}

MONTH_PARAM_DESCRIPTION = "Month in YYYY-MM form, e.g. 2026-09"


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available SBR calculator tools."""
    return [
        Tool(
            name="list_scenarios",
            description="List all available employee scenarios with their role lapse month, exit month and salary.",
            inputSchema={
                "type": "object",
                "properties": {},
                "required": []
            }
        ),
        Tool(
            name="reload_scenarios",
            description="Reload all scenarios from disk. Use this after adding, modifying, or removing scenario spec.json files.",
            inputSchema={
                "type": "object",
                "properties": {},
                "required": []
            }
        ),
        Tool(
            name="get_scenario_overview",
            description="Get the parsed inputs of a scenario, its outplacement window and the scheme constants (age bands, cap, holiday allowance). Use this first to understand the scenario.",
            inputSchema={
                "type": "object",
                "properties": {
                    "scenario": SCENARIO_PARAM
                },
                "required": []
            }
        ),
        Tool(
            name="calculate_benefits",
            description="Calculate severance, unused outplacement compensation and total payout for leaving on the first day of a month. Exits before or on the role lapse date return a status instead of amounts.",
            inputSchema={
                "type": "object",
                "properties": {
                    "exit_month": {
                        "type": "string",
                        "description": MONTH_PARAM_DESCRIPTION + ". Defaults to the scenario's exit month."
                    },
                    "scenario": SCENARIO_PARAM
                },
                "required": []
            }
        ),
        Tool(
            name="get_outplacement_scheme",
            description="Get the outplacement entitlement (4 or 6 months) and the window start, end and last leave month for the scenario's role lapse month.",
            inputSchema={
                "type": "object",
                "properties": {
                    "scenario": SCENARIO_PARAM
                },
                "required": []
            }
        ),
        Tool(
            name="classify_exit",
            description="Classify an exit date as BEFORE_REFERENCE, ON_REFERENCE or NORMAL relative to the role lapse date.",
            inputSchema={
                "type": "object",
                "properties": {
                    "exit_date": {
                        "type": "string",
                        "description": "Exit date in YYYY-MM-DD form"
                    },
                    "scenario": SCENARIO_PARAM
                },
                "required": ["exit_date"]
            }
        ),
        Tool(
            name="get_exit_schedule",
            description="Get the payout for every exit month on the scenario's timeline, or on a given month range.",
            inputSchema={
                "type": "object",
                "properties": {
                    "start_month": {
                        "type": "string",
                        "description": "Optional: first exit month. " + MONTH_PARAM_DESCRIPTION
                    },
                    "end_month": {
                        "type": "string",
                        "description": "Optional: last exit month. " + MONTH_PARAM_DESCRIPTION
                    },
                    "scenario": SCENARIO_PARAM
                },
                "required": []
            }
        ),
        Tool(
            name="compare_exit_months",
            description="Compare the payout of leaving in two different months.",
            inputSchema={
                "type": "object",
                "properties": {
                    "month1": {
                        "type": "string",
                        "description": "First exit month. " + MONTH_PARAM_DESCRIPTION
                    },
                    "month2": {
                        "type": "string",
                        "description": "Second exit month. " + MONTH_PARAM_DESCRIPTION
                    },
                    "scenario": SCENARIO_PARAM
                },
                "required": ["month1", "month2"]
            }
        ),
        Tool(
            name="compare_scenarios",
            description="Compare the payout of two scenarios for the same exit month, or each scenario's own exit month when none is given.",
            inputSchema={
                "type": "object",
                "properties": {
                    "scenario1": {
                        "type": "string",
                        "description": "First scenario name to compare"
                    },
                    "scenario2": {
                        "type": "string",
                        "description": "Second scenario name to compare"
                    },
                    "exit_month": {
                        "type": "string",
                        "description": "Optional: exit month for both scenarios. " + MONTH_PARAM_DESCRIPTION
                    }
                },
                "required": ["scenario1", "scenario2"]
            }
        ),
        Tool(
            name="calculate_custom",
            description="Run the benefit calculation on ad-hoc inputs without a scenario file.",
            inputSchema={
                "type": "object",
                "properties": {
                    "start_of_employment": {
                        "type": "string",
                        "description": "Start of employment as MM / YYYY"
                    },
                    "birthday": {
                        "type": "string",
                        "description": "Optional: date of birth as DD / MM / YYYY"
                    },
                    "yearly_salary": {
                        "type": "number",
                        "description": "Yearly salary including the 8% holiday allowance"
                    },
                    "exit_date": {
                        "type": "string",
                        "description": "Exit date in YYYY-MM-DD form"
                    },
                    "reference_date": {
                        "type": "string",
                        "description": "Optional: role lapse date in YYYY-MM-DD form (defaults to July 1 of the exit year)"
                    }
                },
                "required": ["start_of_employment", "yearly_salary", "exit_date"]
            }
        )
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        sbr_tools = get_tools()
        scenario = arguments.get("scenario")

        if name == "list_scenarios":
            result = sbr_tools.list_scenarios()
        elif name == "reload_scenarios":
            result = sbr_tools.reload_scenarios()
        elif name == "get_scenario_overview":
            result = sbr_tools.get_scenario_overview(scenario)
        elif name == "calculate_benefits":
            result = sbr_tools.calculate_benefits(arguments.get("exit_month"), scenario)
        elif name == "get_outplacement_scheme":
            result = sbr_tools.get_outplacement_scheme(scenario)
        elif name == "classify_exit":
            result = sbr_tools.classify_exit(arguments["exit_date"], scenario)
        elif name == "get_exit_schedule":
            result = sbr_tools.get_exit_schedule(
                arguments.get("start_month"),
                arguments.get("end_month"),
                scenario
            )
        elif name == "compare_exit_months":
            result = sbr_tools.compare_exit_months(arguments["month1"], arguments["month2"], scenario)
        elif name == "compare_scenarios":
            result = sbr_tools.compare_scenarios(
                arguments["scenario1"],
                arguments["scenario2"],
                arguments.get("exit_month")
            )
        elif name == "calculate_custom":
            result = sbr_tools.calculate_custom(
                arguments["start_of_employment"],
                arguments["exit_date"],
                arguments["yearly_salary"],
                arguments.get("birthday"),
                arguments.get("reference_date")
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(
            type="text",
            text=json.dumps(result, indent=2, default=str)
        )]
    except (KeyError, ValueError) as e:
        logger.warning("Tool %s failed: %s", name, e)
        return [TextContent(
            type="text",
            text=json.dumps({"error": str(e)}, indent=2)
        )]


async def main():
    """Run the MCP server."""
    # stdout carries the protocol, so log to stderr
    logging.basicConfig(level=logging.INFO, stream=sys.stderr,
                        format="%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


if __name__ == "__main__":
    asyncio.run(main())
