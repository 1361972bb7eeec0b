"""SBR Calculator Tools for MCP Server.

This module provides the tool implementations that wrap the SBR
calculators and expose their results through MCP.
"""

import os
import sys
import json
import logging
from datetime import date
from typing import Any, Dict, Optional

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from calc.benefit_calculator import BenefitCalculator
from calc.exit_classifier import classify_exit_relative_to_reference
from calc.exit_evaluator import build_exit_schedule, evaluate_exit
from calc.scheme_calculator import derive_outplacement_scheme
from model.CalculationInput import CalculationInput
from model.ExitEvaluation import EvaluationStatus
from model.MonthId import MonthId
from parse.input_parser import (
    InputParseError,
    load_scenario,
    parse_birthday,
    parse_month_id,
    parse_salary,
    parse_start_of_employment,
)
from rules.SBRDetails import SBRDetails

logger = logging.getLogger(__name__)


def _parse_month_arg(value: str, field: str) -> MonthId:
    month = parse_month_id(value)
    if month is None:
        raise InputParseError(field, value)
    return month


def _parse_date_arg(value: str, field: str) -> date:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise InputParseError(field, value)


class SBRCalculatorTools:
    """Tools that wrap the SBR calculators for one scenario."""

    def __init__(self, base_path: str, scenario_name: str):
        """Initialize with paths and load the scenario.

        Args:
            base_path: Path to the sbr-calculator root directory
            scenario_name: Name of the scenario folder in input-parameters
        """
        self.base_path = base_path
        self.scenario_name = scenario_name
        self.spec = self._load_spec()
        self.details = SBRDetails.from_reference_file(
            os.path.join(self.base_path, 'reference', 'sbr-details.json'))
        self.calculator = BenefitCalculator(self.details)
        self.inputs = load_scenario(self.spec, scenario_name)

    def _load_spec(self) -> dict:
        """Load the scenario spec.json file."""
        spec_path = os.path.join(
            self.base_path, 'input-parameters', self.scenario_name, 'spec.json'
        )
        with open(spec_path, 'r') as f:
            return json.load(f)

    def _default_exit_month(self) -> MonthId:
        return self.inputs.exit_month or self.inputs.role_lapse.plus(1)

    def get_scenario_overview(self) -> dict:
        """Get the parsed inputs and outplacement window of the scenario."""
        scheme = derive_outplacement_scheme(
            self.inputs.role_lapse, self.inputs.birth_date, self.inputs.employment_start_date, self.details)
        return {
            "scenario_name": self.scenario_name,
            "inputs": {
                "start_of_employment": self.inputs.employment_start_date.isoformat()
                if self.inputs.employment_start_date else None,
                "birth_date": self.inputs.birth_date.isoformat() if self.inputs.birth_date else None,
                "yearly_salary_with_holiday": self.inputs.yearly_salary,
                "role_lapse": str(self.inputs.role_lapse),
                "exit_month": str(self.inputs.exit_month) if self.inputs.exit_month else None,
            },
            "outplacement_scheme": scheme.to_dict(),
            "scheme_constants": self.details.to_dict(),
        }

    def calculate_benefits(self, exit_month: Optional[str] = None) -> dict:
        """Evaluate leaving on the first day of exit_month ("YYYY-MM")."""
        month = _parse_month_arg(exit_month, 'exit_month') if exit_month else self._default_exit_month()
        evaluation = evaluate_exit(self.inputs, month.first_day(), self.calculator)
        return evaluation.to_dict()

    def get_outplacement_scheme(self) -> dict:
        """Get the outplacement window for the scenario's role lapse month."""
        scheme = derive_outplacement_scheme(
            self.inputs.role_lapse, self.inputs.birth_date, self.inputs.employment_start_date, self.details)
        result = scheme.to_dict()
        result["months"] = [str(m) for m in scheme.months()]
        return result

    def classify_exit(self, exit_date: str) -> dict:
        """Classify an exit date ("YYYY-MM-DD") against the role lapse date."""
        exit_day = _parse_date_arg(exit_date, 'exit_date')
        position = classify_exit_relative_to_reference(exit_day, self.inputs.role_lapse_date)
        return {
            "exit_date": exit_day.isoformat(),
            "role_lapse_date": self.inputs.role_lapse_date.isoformat(),
            "position": position.name,
        }

    def get_exit_schedule(self, start_month: Optional[str] = None, end_month: Optional[str] = None) -> dict:
        """Get the payout for each exit month on the timeline."""
        months = None
        if start_month or end_month:
            start = _parse_month_arg(start_month, 'start_month') if start_month else self.inputs.role_lapse
            end = _parse_month_arg(end_month, 'end_month') if end_month else start.plus(12)
            months = [start.plus(i) for i in range(start.months_until(end) + 1)]
        schedule = build_exit_schedule(self.inputs, months, self.calculator)
        return {
            "scenario_name": self.scenario_name,
            "schedule": [
                {
                    "exit_month": ev.exit_date.strftime('%Y-%m'),
                    "status": ev.status.value,
                    "base_severance": ev.details.base_severance if ev.details else None,
                    "remaining_outplacement_months": ev.details.remaining_full_outplacement_months if ev.details else None,
                    "additional_comp": ev.details.additional_comp if ev.details else None,
                    "total_payout": ev.total_payout,
                }
                for ev in schedule
            ],
        }

    def compare_exit_months(self, month1: str, month2: str) -> dict:
        """Compare the payout of two exit months."""
        ev1 = evaluate_exit(self.inputs, _parse_month_arg(month1, 'month1').first_day(), self.calculator)
        ev2 = evaluate_exit(self.inputs, _parse_month_arg(month2, 'month2').first_day(), self.calculator)
        comparison = {
            month1: ev1.to_dict(),
            month2: ev2.to_dict(),
        }
        if ev1.status == EvaluationStatus.CALCULATED and ev2.status == EvaluationStatus.CALCULATED:
            comparison["difference"] = {
                "base_severance": ev2.details.base_severance - ev1.details.base_severance,
                "additional_comp": ev2.details.additional_comp - ev1.details.additional_comp,
                "total_payout": ev2.details.total_payout - ev1.details.total_payout,
            }
        return comparison


class MultiScenarioTools:
    """Manager for multiple SBR scenarios.

    Discovers all available scenarios and keeps their tools loaded,
    allowing queries to specify which scenario to use.
    """

    def __init__(self, base_path: str, default_scenario: Optional[str] = None):
        """Initialize and discover all available scenarios.

        Args:
            base_path: Path to the sbr-calculator root directory
            default_scenario: Default scenario to use when none specified
        """
        self.base_path = base_path
        self.scenarios: Dict[str, SBRCalculatorTools] = {}
        self.default_scenario = default_scenario
        self._discover_scenarios()

    def _discover_scenarios(self):
        """Discover and load all available scenarios."""
        input_params_path = os.path.join(self.base_path, 'input-parameters')

        if not os.path.exists(input_params_path):
            return

        for name in sorted(os.listdir(input_params_path)):
            scenario_dir = os.path.join(input_params_path, name)
            spec_path = os.path.join(scenario_dir, 'spec.json')

            if os.path.isdir(scenario_dir) and os.path.exists(spec_path):
                try:
                    self.scenarios[name] = SBRCalculatorTools(self.base_path, name)
                except (OSError, ValueError) as e:
                    # Log but don't fail on individual scenario errors
                    logger.warning("Failed to load scenario '%s': %s", name, e)

        # Set default if not specified
        if self.default_scenario is None and self.scenarios:
            self.default_scenario = list(self.scenarios.keys())[0]

    def _get_scenario(self, scenario: Optional[str] = None) -> SBRCalculatorTools:
        """Get the specified scenario or the default."""
        scenario_name = scenario or self.default_scenario

        if scenario_name not in self.scenarios:
            available = list(self.scenarios.keys())
            raise ValueError(
                f"Scenario '{scenario_name}' not found. Available scenarios: {available}"
            )

        return self.scenarios[scenario_name]

    def list_scenarios(self) -> dict:
        """List all available scenarios."""
        scenarios_info = {}
        for name, tools in self.scenarios.items():
            scenarios_info[name] = {
                "role_lapse": str(tools.inputs.role_lapse),
                "exit_month": str(tools.inputs.exit_month) if tools.inputs.exit_month else None,
                "yearly_salary_with_holiday": tools.inputs.yearly_salary,
            }

        return {
            "available_scenarios": list(self.scenarios.keys()),
            "default_scenario": self.default_scenario,
            "scenarios_info": scenarios_info
        }

    def reload_scenarios(self) -> dict:
        """Reload all scenarios from disk."""
        previous = set(self.scenarios.keys())
        self.scenarios = {}
        default = self.default_scenario if self.default_scenario in previous else None
        self.default_scenario = default
        self._discover_scenarios()
        current = set(self.scenarios.keys())
        return {
            "reloaded": sorted(current),
            "added": sorted(current - previous),
            "removed": sorted(previous - current),
            "default_scenario": self.default_scenario,
        }

    def get_scenario_overview(self, scenario: Optional[str] = None) -> dict:
        return self._get_scenario(scenario).get_scenario_overview()

    def calculate_benefits(self, exit_month: Optional[str] = None, scenario: Optional[str] = None) -> dict:
        return self._get_scenario(scenario).calculate_benefits(exit_month)

    def get_outplacement_scheme(self, scenario: Optional[str] = None) -> dict:
        return self._get_scenario(scenario).get_outplacement_scheme()

    def classify_exit(self, exit_date: str, scenario: Optional[str] = None) -> dict:
        return self._get_scenario(scenario).classify_exit(exit_date)

    def get_exit_schedule(self, start_month: Optional[str] = None, end_month: Optional[str] = None,
                          scenario: Optional[str] = None) -> dict:
        return self._get_scenario(scenario).get_exit_schedule(start_month, end_month)

    def compare_exit_months(self, month1: str, month2: str, scenario: Optional[str] = None) -> dict:
        return self._get_scenario(scenario).compare_exit_months(month1, month2)

    def compare_scenarios(self, scenario1: str, scenario2: str, exit_month: Optional[str] = None) -> dict:
        """Compare the payout of two scenarios for the same exit month (or each scenario's own)."""
        result1 = self._get_scenario(scenario1).calculate_benefits(exit_month)
        result2 = self._get_scenario(scenario2).calculate_benefits(exit_month)
        comparison = {
            scenario1: result1,
            scenario2: result2,
        }
        total1 = (result1.get("details") or {}).get("total_payout")
        total2 = (result2.get("details") or {}).get("total_payout")
        if total1 is not None and total2 is not None:
            comparison["higher_total_payout"] = scenario1 if total1 >= total2 else scenario2
            comparison["total_payout_difference"] = abs(total1 - total2)
        return comparison

    def calculate_custom(self, start_of_employment: str, exit_date: str, yearly_salary: Any,
                         birthday: Optional[str] = None, reference_date: Optional[str] = None) -> dict:
        """Run the benefit calculation on ad-hoc inputs without a scenario file.

        Args:
            start_of_employment: "MM / YYYY"
            exit_date: "YYYY-MM-DD"
            yearly_salary: Yearly salary with holiday allowance, number or "60,000"
            birthday: "DD / MM / YYYY", optional
            reference_date: Role lapse date "YYYY-MM-DD", optional (July 1 of exit year)
        """
        start = parse_start_of_employment(start_of_employment)
        if start is None:
            raise InputParseError('start_of_employment', start_of_employment)
        birth = None
        if birthday:
            birth = parse_birthday(birthday)
            if birth is None:
                raise InputParseError('birthday', birthday)
        salary = parse_salary(yearly_salary)
        if salary is None or salary <= 0:
            raise InputParseError('yearly_salary', yearly_salary)
        exit_day = _parse_date_arg(exit_date, 'exit_date')
        if exit_day <= start:
            raise ValueError("Exit date must be after the start of employment")
        reference = _parse_date_arg(reference_date, 'reference_date') if reference_date else None

        calculator = BenefitCalculator(self._details())
        details = calculator.calculate(CalculationInput(
            employment_start_date=start,
            birth_date=birth,
            exit_date=exit_day,
            yearly_salary_with_holiday=salary,
            outplacement_reference_date=reference,
        ))
        result = details.to_dict()
        ref = details.outplacement_start_date
        result["exit_position"] = classify_exit_relative_to_reference(exit_day, ref).name
        return result

    def _details(self) -> SBRDetails:
        if self.scenarios:
            return next(iter(self.scenarios.values())).details
        return SBRDetails.from_reference_file(os.path.join(self.base_path, 'reference', 'sbr-details.json'))
