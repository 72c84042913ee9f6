from dataclasses import replace

import pytest

from src.workforce_system.workforce_system.attendance.model import Punch
from src.workforce_system.workforce_system.core.enums import PunchDirection
from src.workforce_system.workforce_system.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.workforce_system.workforce_system.schedules.model import ActiveSchedule, BreakInterval


def _punches(*pairs):
    return [
        Punch(minutes=h * 60 + m, original_time=f"{h}:{m:02d}", direction=PunchDirection(d) if d else None)
        for h, m, d in pairs
    ]


def _calculator(options, **kwargs):
    return StandardPayrollCalculator(
        ActiveSchedule.resolve(options), permission_time_minutes=options.permission_time_minutes, **kwargs
    )


def test_full_day_minus_lunch(full_time_options):
    calc = _calculator(full_time_options)
    result = calc.calculate_working_time_detailed(_punches((9, 0, "IN"), (19, 0, "OUT")))

    assert result.total_working_minutes == 540
    assert [d.type for d in result.deductions] == ["Lunch"]
    assert result.intervals[0].raw_minutes == 600
    assert result.intervals[0].total_deducted == 60


def test_work_outside_shift_is_clipped(full_time_options):
    calc = _calculator(full_time_options)
    result = calc.calculate_working_time_detailed(_punches((7, 0, "IN"), (8, 30, "OUT"), (18, 0, "IN"), (21, 0, "OUT")))

    assert len(result.intervals) == 1
    assert result.intervals[0].raw_minutes == 60
    assert result.total_working_minutes == 60


def test_counted_lunch_is_paid(full_time_options):
    options = replace(full_time_options, is_lunch_consider=True)
    calc = _calculator(options)
    assert calc.schedule.standard_working_minutes == 600
    assert calc.calculate_working_time_detailed(_punches((9, 0, "IN"), (19, 0, "OUT"))).total_working_minutes == 600


def test_unpaid_break_is_labelled_by_position(full_time_options):
    options = replace(
        full_time_options,
        intervals=(BreakInterval("Tea", "16:00", "16:15", False), BreakInterval("Snack", "17:00", "17:10", True)),
    )
    calc = _calculator(options)
    result = calc.calculate_working_time_detailed(_punches((9, 0, "IN"), (19, 0, "OUT")))

    assert [d.type for d in result.deductions] == ["Lunch", "Break 1"]
    assert result.deductions[1].reason == "Break interval 16:00 - 16:15"
    assert result.total_working_minutes == 525


def test_overtime_exclusion_caps_at_standard_day(full_time_options):
    # A break outside the shift shortens the standard day but never overlaps work.
    options = replace(full_time_options, intervals=(BreakInterval("Late tea", "20:00", "20:15", False),))
    punches = _punches((9, 0, "IN"), (19, 0, "OUT"))

    capped = _calculator(options).calculate_working_time_detailed(punches)
    assert capped.total_working_minutes == 525
    assert capped.deductions[-1].type == "Overtime Exclusion"
    assert capped.deductions[-1].deducted_minutes == 15

    uncapped = _calculator(options, consider_overtime=True).calculate_working_time_detailed(punches)
    assert uncapped.total_working_minutes == 540


def test_out_in_pair_is_not_working_time(full_time_options):
    calc = _calculator(full_time_options)
    result = calc.calculate_working_time_detailed(_punches((9, 0, "OUT"), (10, 0, "IN")))
    assert result.total_working_minutes == 0
    assert result.intervals == ()


@pytest.mark.parametrize("late, excess", [(15, 0), (16, 1)])
def test_permission_split_at_threshold(full_time_options, late, excess):
    calc = _calculator(full_time_options)
    result = calc.calculate_permission_time_detailed(_punches((9, late, "IN"), (19, 0, "OUT")))

    detail = result.details[0]
    assert detail.type == "Late Arrival"
    assert detail.permission_used == 15
    assert detail.excess_minutes == excess
    assert calc.is_violation(detail.total_minutes) is (excess > 0)


def test_single_punch_has_no_early_departure(full_time_options):
    calc = _calculator(full_time_options)
    result = calc.calculate_permission_time_detailed(_punches((9, 0, "IN")))
    assert result.details == ()
    assert result.total_permission_minutes == 0


def test_early_departure(full_time_options):
    calc = _calculator(full_time_options)
    result = calc.calculate_permission_time_detailed(_punches((9, 0, "IN"), (18, 30, "OUT")))
    assert result.total_permission_minutes == 30
    assert result.details[0].description == "Left 30 minutes early"


def test_long_lunch_is_a_lunch_delay(full_time_options):
    calc = _calculator(full_time_options)
    delays = calc.gap_delays(_punches((9, 0, "IN"), (12, 0, "OUT"), (13, 30, "IN"), (19, 0, "OUT")))

    assert len(delays) == 1
    assert delays[0].delay_type == "Lunch Delay"
    assert delays[0].delay_minutes == 30


def test_gap_over_defined_break_is_a_break_delay(full_time_options):
    options = replace(full_time_options, intervals=(BreakInterval("Tea", "16:00", "16:15", False),))
    calc = _calculator(options)
    delays = calc.gap_delays(_punches((9, 0, "IN"), (16, 0, "OUT"), (16, 30, "IN"), (19, 0, "OUT")))

    assert [(d.delay_type, d.delay_minutes) for d in delays] == [("Break Delay", 15)]


def test_gap_within_lunch_is_not_a_delay(full_time_options):
    calc = _calculator(full_time_options)
    assert calc.gap_delays(_punches((9, 0, "IN"), (12, 0, "OUT"), (13, 0, "IN"), (19, 0, "OUT"))) == []


def test_half_labelled_pair_is_read_by_position(full_time_options):
    calc = _calculator(full_time_options)
    result = calc.calculate_working_time_detailed(_punches((9, 0, "OUT"), (19, 0, None)))

    assert result.total_working_minutes == 540
    assert (result.intervals[0].in_time, result.intervals[0].out_time) == ("9:00 AM", "7:00 PM")


def test_gap_walk_uses_position_for_half_labelled_pair(full_time_options):
    calc = _calculator(full_time_options)
    delays = calc.gap_delays(_punches((9, 0, "IN"), (12, 0, None), (13, 30, "OUT"), (19, 0, "OUT")))

    assert [(d.delay_type, d.delay_minutes) for d in delays] == [("Lunch Delay", 30)]
