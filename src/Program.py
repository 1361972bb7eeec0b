import sys
import os
import json
import logging
import argparse
from calc.benefit_calculator import BenefitCalculator
from calc.exit_evaluator import evaluate_exit, build_exit_schedule
from calc.scheme_calculator import derive_outplacement_scheme
from parse.input_parser import InputParseError, load_scenario, parse_start_of_employment
from model.MonthId import MonthId
from model.ScenarioInputs import ScenarioInputs
from rules.SBRDetails import SBRDetails
from render.renderers import BenefitSummaryRenderer, ExitScheduleRenderer, SchemeRenderer, RENDERER_REGISTRY


LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"


def resolve_exit_month(inputs: ScenarioInputs, exit_arg: str = None) -> MonthId:
    """Pick the exit month: --exit argument, then the scenario's exitMonth,
    then the month after the role lapse (the first month with a numeric estimate).

    Args:
        inputs: Parsed scenario inputs
        exit_arg: Value of --exit in "MM / YYYY" form, if given

    Returns:
        The exit month to evaluate
    """
    if exit_arg:
        exit_date = parse_start_of_employment(exit_arg)
        if exit_date is None:
            raise InputParseError('--exit', exit_arg)
        return MonthId.from_date(exit_date)
    if inputs.exit_month is not None:
        return inputs.exit_month
    return inputs.role_lapse.plus(1)


def main():
    parser = argparse.ArgumentParser(
        description='SBR severance and outplacement calculator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  Summary   Print the payout breakdown for one exit month (default)
  Schedule  Print the payout for every exit month on the scenario's timeline
  Scheme    Print the outplacement window derived from the role lapse month

Examples:
  python src/Program.py example
  python src/Program.py example --mode Schedule
  python src/Program.py example --exit "09 / 2026"
        """
    )
    parser.add_argument('scenario_name', help='Name of the scenario (folder in input-parameters)')
    parser.add_argument('--mode', '-m',
                        choices=list(RENDERER_REGISTRY.keys()),
                        default='Summary',
                        help='Output mode: Summary (default), Schedule or Scheme')
    parser.add_argument('--exit', '-e',
                        help='Exit month as "MM / YYYY" (Summary mode only)')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Log intermediate calculation values')

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    scenario_name = args.scenario_name
    # Build path to spec.json
    spec_path = os.path.join(os.path.dirname(__file__), '../input-parameters', scenario_name, 'spec.json')
    if not os.path.exists(spec_path):
        print(f"Spec file not found: {spec_path}")
        sys.exit(1)
    with open(spec_path, 'r') as f:
        spec = json.load(f)

    # Scheme constants come from the reference file and are injected into the calculator
    details = SBRDetails.from_reference_file()
    calculator = BenefitCalculator(details)

    try:
        inputs = load_scenario(spec, scenario_name)
        exit_month = resolve_exit_month(inputs, args.exit)
    except InputParseError as e:
        print(f"Invalid scenario '{scenario_name}': {e}")
        sys.exit(1)

    if args.mode == 'Summary':
        evaluation = evaluate_exit(inputs, exit_month.first_day(), calculator)
        BenefitSummaryRenderer().render(evaluation)
    elif args.mode == 'Schedule':
        schedule = build_exit_schedule(inputs, calculator=calculator)
        ExitScheduleRenderer().render(schedule)
    elif args.mode == 'Scheme':
        scheme = derive_outplacement_scheme(inputs.role_lapse, inputs.birth_date,
                                            inputs.employment_start_date, details)
        SchemeRenderer().render(scheme)

if __name__ == "__main__":
    main()
