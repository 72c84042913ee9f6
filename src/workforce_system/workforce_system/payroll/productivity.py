"""Attendance-to-payroll reconciliation for one worker over a date range.

``calculate_worker_productivity`` is pure: it reads only its arguments, never
raises on malformed punches, and returns the same result for the same input.
Data-quality problems are logged and echoed in ``ProductivityResult.warnings``.
"""
from __future__ import annotations

import logging
from datetime import date
from functools import reduce
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendancePunch
from ..attendance.normalizer import group_by_day, normalize_day
from ..core.enums import DelayType, ReportStatus
from ..holidays.calendar import count_holidays_in_range, count_sundays_in_range, find_holiday, generate_date_range
from ..schedules.model import ActiveSchedule, ProductivityOptions
from ..workers.model import WorkerInfo
from .calculator.standard_calculator import StandardPayrollCalculator
from .days.base import DayContext
from .days.factory import DayStrategyFactory
from .model import AdvanceDeduction, Configuration, PeriodSummary, ProductivityResult, ReportRow
from .totals import PeriodTotals

logger = logging.getLogger(__name__)


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


def empty_result(warnings: Sequence[str] = ()) -> ProductivityResult:
    """Zeroed result for a single-day range without any punches."""
    return ProductivityResult(warnings=tuple(warnings))


def _salary_working_days(options: ProductivityOptions, from_date: date, to_date: date, computed: int) -> int:
    """Configured working days of the month when the period sits inside one month."""
    if (from_date.year, from_date.month) == (to_date.year, to_date.month):
        configured = options.working_days_for_month(from_date.year, from_date.month)
        if configured > 0:
            return configured
    return computed


def _first_worker(attendance: Iterable[AttendancePunch], from_date: date, to_date: date) -> WorkerInfo:
    for p in attendance:
        if p.date is not None and from_date <= p.date <= to_date:
            return p.worker
    return WorkerInfo()


def calculate_worker_productivity(
    *,
    attendance: Sequence[AttendancePunch],
    from_date: date,
    to_date: date,
    options: Optional[ProductivityOptions] = None,
    advance_deductions: Sequence[AdvanceDeduction] = (),
) -> ProductivityResult:
    options = options or ProductivityOptions()
    warnings: list[str] = []

    if from_date > to_date:
        msg = f"Date range is reversed ({from_date} > {to_date}); no days to settle"
        logger.warning(msg)
        warnings.append(msg)

    schedule = ActiveSchedule.resolve(options)
    if not schedule.batch_found:
        msg = (
            f"Batch {options.filtered_batch!r} not configured; "
            f"using {schedule.work_start_time}-{schedule.work_end_time}"
        )
        logger.warning(msg)
        warnings.append(msg)

    grouped = group_by_day(attendance, from_date=from_date, to_date=to_date, warnings=warnings)
    if not grouped and from_date == to_date:
        return empty_result(warnings)

    worker = _first_worker(attendance, from_date, to_date)
    original_salary = worker.salary

    all_dates = generate_date_range(from_date, to_date)
    total_days_in_period = len(all_dates)
    total_sundays = count_sundays_in_range(from_date, to_date)
    total_holidays = count_holidays_in_range(from_date, to_date, options.holidays)
    working_days_in_period = total_days_in_period - total_sundays - total_holidays

    salary_days = _salary_working_days(options, from_date, to_date, working_days_in_period)
    standard_minutes = schedule.standard_working_minutes
    per_day_salary = _ratio(original_salary, salary_days)
    per_minute_salary = _ratio(per_day_salary, standard_minutes)
    total_expected_minutes = working_days_in_period * standard_minutes

    calculator = StandardPayrollCalculator(
        schedule,
        permission_time_minutes=options.permission_time_minutes,
        consider_overtime=options.consider_overtime,
    )
    ctx = DayContext(calculator=calculator, per_day_salary=per_day_salary, per_minute_salary=per_minute_salary)
    factory = DayStrategyFactory()

    def settle(totals: PeriodTotals, day: date) -> PeriodTotals:
        records = grouped.get(day, [])
        punches = normalize_day(records, warnings=warnings) if records else []
        strategy = factory.for_day(day=day, punches=punches, holiday=find_holiday(day, options.holidays))
        return totals.absorb(strategy.evaluate(day, punches, ctx))

    totals = reduce(settle, all_dates, PeriodTotals())

    actual_working_days = working_days_in_period - totals.absent_days
    total_working_minutes = totals.working_minutes
    total_permission_minutes = totals.permission_minutes

    absent_deduction = totals.absent_days * per_day_salary
    permission_deduction = total_permission_minutes * per_minute_salary
    advance_deduction = sum(d.amount for d in advance_deductions)
    total_deduction = absent_deduction + permission_deduction + advance_deduction
    final_salary = max(0.0, original_salary - total_deduction)

    advance_rows = tuple(
        ReportRow(
            date=d.date,
            out_time="-",
            in_time="-",
            delay_time="-",
            delay_type=DelayType.ADVANCE_DEDUCTION.value,
            deduction_amount=d.amount,
            status=ReportStatus.DEDUCTION,
            description=d.description,
        )
        for d in advance_deductions
    )
    report = tuple(sorted(totals.rows + advance_rows, key=lambda r: r.date))

    summary = PeriodSummary(
        punctuality_score=_ratio(actual_working_days - totals.punctuality_violations, actual_working_days) * 100,
        attendance_rate=_ratio(actual_working_days, working_days_in_period) * 100,
        final_salary=final_salary,
        original_salary=original_salary,
        salary_from_working_minutes=total_working_minutes * per_minute_salary,
        per_minute_salary=per_minute_salary,
        per_day_salary=per_day_salary,
        salary_working_days=salary_days,
        total_working_days_in_period=working_days_in_period,
        total_days_in_period=total_days_in_period,
        total_sundays_in_period=total_sundays,
        total_holidays_in_period=total_holidays,
        total_absent_days=totals.absent_days,
        actual_working_days=actual_working_days,
        total_working_minutes=total_working_minutes,
        total_permission_minutes=total_permission_minutes,
        absent_deduction=absent_deduction,
        permission_deduction=permission_deduction,
        advance_deduction=advance_deduction,
        total_deduction=total_deduction,
        worker=worker,
    )
    configuration = Configuration(
        consider_overtime=options.consider_overtime,
        deduct_salary=options.deduct_salary,
        work_start_time=schedule.work_start_time,
        work_end_time=schedule.work_end_time,
        lunch_start_time=schedule.lunch_from,
        lunch_end_time=schedule.lunch_to,
        permission_time_minutes=options.permission_time_minutes,
        salary_deduction_per_break=options.salary_deduction_per_break,
        standard_working_minutes_per_day=standard_minutes,
    )

    logger.debug(
        "Settled %s..%s for %r: %d days, %d absent, final salary %.2f",
        from_date,
        to_date,
        worker.name,
        total_days_in_period,
        totals.absent_days,
        final_salary,
    )

    return ProductivityResult(
        total_days=len(totals.daily),
        working_days=actual_working_days,
        total_working_hours=total_working_minutes / 60,
        average_working_hours=_ratio(total_working_minutes, actual_working_days) / 60,
        total_permission_time=total_permission_minutes,
        total_salary_deduction=total_deduction,
        total_advance_deduction=advance_deduction,
        total_absent_days=totals.absent_days,
        total_sunday_count=total_sundays,
        total_holiday_count=totals.holiday_days,
        productivity_percentage=_ratio(total_working_minutes, total_expected_minutes) * 100,
        daily_breakdown=totals.daily,
        summary=summary,
        configuration=configuration,
        report=report,
        warnings=tuple(warnings),
    )
