import os
import sys
from dataclasses import replace
from datetime import date
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))
import pytest
from calc.exit_classifier import classify_exit_relative_to_reference
from calc.exit_evaluator import evaluate_exit, default_timeline, build_exit_schedule
from model.ExitEvaluation import EvaluationStatus, ExitPosition
from model.MonthId import MonthId
from model.ScenarioInputs import ScenarioInputs


@pytest.fixture
def inputs():
    return ScenarioInputs(
        name='test',
        employment_start_date=date(2022, 6, 1),
        birth_date=date(1992, 1, 1),
        yearly_salary=60000,
        role_lapse=MonthId(2025, 7),
    )


def test_classify_exit():
    reference = date(2026, 7, 1)
    assert classify_exit_relative_to_reference(date(2026, 6, 30), reference) == ExitPosition.BEFORE_REFERENCE
    assert classify_exit_relative_to_reference(date(2026, 7, 1), reference) == ExitPosition.ON_REFERENCE
    assert classify_exit_relative_to_reference(date(2026, 7, 2), reference) == ExitPosition.NORMAL


def test_exit_after_role_lapse_is_calculated(inputs):
    result = evaluate_exit(inputs, date(2025, 8, 1))
    assert result.status == EvaluationStatus.CALCULATED
    assert result.reason is None
    assert result.total_payout == 14444
    assert result.details.outplacement_start_date == date(2025, 7, 1)


def test_exit_on_role_lapse_is_not_estimated(inputs):
    result = evaluate_exit(inputs, date(2025, 7, 1))
    assert result.status == EvaluationStatus.ON_REFERENCE
    assert result.details is None
    assert result.total_payout is None
    assert 'role lapse' in result.reason


def test_exit_before_role_lapse_is_not_estimated(inputs):
    result = evaluate_exit(inputs, date(2025, 6, 1))
    assert result.status == EvaluationStatus.BEFORE_REFERENCE
    assert result.details is None


@pytest.mark.parametrize('salary', [None, 0, -100])
def test_missing_salary_is_insufficient(inputs, salary):
    result = evaluate_exit(replace(inputs, yearly_salary=salary), date(2025, 8, 1))
    assert result.status == EvaluationStatus.INSUFFICIENT_DATA
    assert 'salary' in result.reason


def test_missing_start_is_insufficient(inputs):
    result = evaluate_exit(replace(inputs, employment_start_date=None), date(2025, 8, 1))
    assert result.status == EvaluationStatus.INSUFFICIENT_DATA


def test_exit_not_after_start_is_insufficient(inputs):
    assert evaluate_exit(inputs, date(2022, 6, 1)).status == EvaluationStatus.INSUFFICIENT_DATA
    assert evaluate_exit(inputs, date(2021, 1, 1)).status == EvaluationStatus.INSUFFICIENT_DATA


def test_evaluation_to_dict(inputs):
    data = evaluate_exit(inputs, date(2025, 7, 1)).to_dict()
    assert data['exit_date'] == '2025-07-01'
    assert data['status'] == 'on_reference'
    assert data['details'] is None


def test_default_timeline_runs_to_last_leave_month(inputs):
    months = default_timeline(inputs)
    assert str(months[0]) == '2024-11'
    assert str(months[-1]) == '2025-11'
    assert len(months) == 13


def test_timeline_from_scenario(inputs):
    months = default_timeline(replace(inputs, timeline_start=MonthId(2025, 5), timeline_end=MonthId(2025, 9)))
    assert [str(m) for m in months] == ['2025-05', '2025-06', '2025-07', '2025-08', '2025-09']


def test_exit_schedule(inputs):
    months = [MonthId(2025, m) for m in range(5, 13)]
    schedule = build_exit_schedule(inputs, months)
    assert [e.status for e in schedule] == [
        EvaluationStatus.BEFORE_REFERENCE,
        EvaluationStatus.BEFORE_REFERENCE,
        EvaluationStatus.ON_REFERENCE,
        EvaluationStatus.CALCULATED,
        EvaluationStatus.CALCULATED,
        EvaluationStatus.CALCULATED,
        EvaluationStatus.CALCULATED,
        EvaluationStatus.CALCULATED,
    ]
    assert [e.total_payout for e in schedule[3:]] == [14444, 12130, 7500, 7500, 7500]
    assert [e.details.remaining_full_outplacement_months for e in schedule[3:]] == [3, 2, 0, 0, 0]


def test_exit_schedule_uses_default_timeline(inputs):
    schedule = build_exit_schedule(inputs)
    assert len(schedule) == 13
    assert schedule[0].exit_date == date(2024, 11, 1)
    assert schedule[-1].exit_date == date(2025, 11, 1)


def test_schedule_payout_never_negative(inputs):
    schedule = build_exit_schedule(inputs, [MonthId(2025, 7).plus(i) for i in range(1, 24)])
    for evaluation in schedule:
        assert evaluation.details.additional_comp >= 0
        assert evaluation.details.remaining_full_outplacement_months <= evaluation.details.outplacement_entitlement_months
