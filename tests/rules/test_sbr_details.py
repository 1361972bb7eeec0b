import os
import sys
import json
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))
import pytest
from rules.AgeBand import AgeBand
from rules.SBRDetails import SBRDetails, DEFAULT_AGE_BANDS


def test_defaults():
    details = SBRDetails()
    assert details.age_bands == DEFAULT_AGE_BANDS
    assert details.severance_cap == 300000
    assert details.holiday_allowance_fraction == 0.08
    assert details.unused_outplacement_fraction == 0.5
    assert details.standard_outplacement_months == 4
    assert details.extended_outplacement_months == 6
    assert details.default_role_lapse_month == 7
    assert details.lowest_band_weight == 0.5


def test_reference_file_matches_defaults():
    details = SBRDetails.from_reference_file()
    assert details.to_dict() == SBRDetails().to_dict()


def test_from_reference_file_custom_path(tmp_path):
    data = SBRDetails().to_dict()
    data['severanceCap'] = 150000
    data['outplacement']['standardMonths'] = 3
    path = tmp_path / 'sbr-details.json'
    path.write_text(json.dumps(data))
    details = SBRDetails.from_reference_file(str(path))
    assert details.severance_cap == 150000
    assert details.standard_outplacement_months == 3
    assert details.extended_outplacement_months == 6


def test_from_dict_sorts_bands():
    details = SBRDetails.from_dict({'ageBands': [
        {'minAge': 40, 'maxAge': None, 'weight': 1},
        {'minAge': 0, 'maxAge': 40, 'weight': 0.5},
    ]})
    assert [b.min_age for b in details.age_bands] == [0, 40]
    assert details.age_bands[1].is_unbounded
    assert details.severance_cap == 300000


def test_from_dict_requires_age_bands():
    with pytest.raises(ValueError, match='ageBands'):
        SBRDetails.from_dict({'severanceCap': 100000})


def test_unbounded_band_must_be_last():
    with pytest.raises(ValueError, match='unbounded'):
        SBRDetails(age_bands=[AgeBand(0, None, 0.5), AgeBand(35, 45, 1.0)])


def test_bands_must_be_contiguous():
    with pytest.raises(ValueError, match='contiguous'):
        SBRDetails(age_bands=[AgeBand(0, 35, 0.5), AgeBand(40, None, 1.0)])


def test_band_must_not_be_empty():
    with pytest.raises(ValueError, match='empty'):
        SBRDetails(age_bands=[AgeBand(0, 0, 0.5), AgeBand(0, None, 1.0)])


def test_at_least_one_band():
    with pytest.raises(ValueError):
        SBRDetails(age_bands=[])
