"""
Unit tests for production step progress and completion figures.
"""

import pytest

from conftest import ALL_STEPS_DONE, make_schedule
from shopfloor.services.progress import (
    JOB_STATUS_STEP_COUNT,
    STEP_DEFINITIONS,
    compute_completion_percentage,
    compute_job_completion_percentage,
    compute_step_progress,
    is_step_completed,
    round_percentage,
    summarize_completion,
)


class TestStepProgress:
    """Per-step flags of a single schedule."""

    def test_canonical_order_and_labels(self, empty_schedule):
        steps = compute_step_progress(empty_schedule)

        assert [step.key for step in steps] == [
            "in_plant",
            "doors",
            "cut_finish",
            "custom_finish",
            "drawer",
            "cut_melamine",
            "paint",
            "assembly",
        ]
        assert steps[0].label == "In Plant"
        assert steps[-1].label == "Assembly"

    def test_all_null_fields_are_pending(self, empty_schedule):
        steps = compute_step_progress(empty_schedule)

        assert len(steps) == len(STEP_DEFINITIONS)
        assert not any(step.is_completed for step in steps)
        assert all(step.completed_at is None for step in steps)

    def test_completed_steps_carry_timestamp(self):
        record = make_schedule(
            in_plant_actual="2024-01-02T08:00:00Z",
            paint_completed_actual="2024-01-08T11:00:00Z",
        )

        steps = {step.key: step for step in compute_step_progress(record)}

        assert steps["in_plant"].is_completed
        assert steps["in_plant"].completed_at == "2024-01-02T08:00:00Z"
        assert steps["paint"].is_completed
        assert not steps["doors"].is_completed
        assert steps["doors"].completed_at is None

    def test_empty_string_is_not_completed(self):
        record = make_schedule(doors_completed_actual="")

        steps = {step.key: step for step in compute_step_progress(record)}

        assert not steps["doors"].is_completed
        assert steps["doors"].completed_at is None

    def test_idempotent(self, finished_schedule):
        first = compute_step_progress(finished_schedule)
        second = compute_step_progress(finished_schedule)

        assert first == second
        assert finished_schedule == make_schedule(**ALL_STEPS_DONE)

    def test_rush_does_not_change_steps(self):
        normal = make_schedule(doors_completed_actual="2024-01-03T10:00:00Z")
        rush = make_schedule(doors_completed_actual="2024-01-03T10:00:00Z", rush=True)

        assert compute_step_progress(normal) == compute_step_progress(rush)


class TestCompletionPercentage:
    """Share of jobs with assembly done."""

    def test_single_empty_record_is_zero(self, empty_schedule):
        assert compute_completion_percentage([empty_schedule]) == 0

    def test_no_records_is_zero(self):
        assert compute_completion_percentage([]) == 0

    def test_assembly_alone_counts_as_finished(self):
        record = make_schedule(assembly_completed_actual="2024-01-09T16:00:00Z")

        assert compute_completion_percentage([record]) == 100

    def test_other_steps_do_not_count(self):
        fields = {k: v for k, v in ALL_STEPS_DONE.items() if k != "assembly_completed_actual"}
        record = make_schedule(**fields)

        assert compute_completion_percentage([record]) == 0

    def test_empty_jobs_stay_in_denominator(self, finished_schedule, empty_schedule):
        assert compute_completion_percentage([finished_schedule, empty_schedule]) == 50

    @pytest.mark.parametrize(
        "finished, total, expected",
        [(1, 3, 33), (2, 3, 67), (1, 8, 13), (3, 8, 38), (5, 5, 100)],
    )
    def test_rounding(self, finished, total, expected):
        done = make_schedule(assembly_completed_actual="2024-01-09T16:00:00Z")
        records = [done] * finished + [make_schedule()] * (total - finished)

        assert compute_completion_percentage(records) == expected

    def test_accepts_generators(self, finished_schedule):
        assert compute_completion_percentage(r for r in [finished_schedule]) == 100

    def test_summary_counts(self, finished_schedule, empty_schedule):
        summary = summarize_completion([finished_schedule, empty_schedule, empty_schedule])

        assert summary.total == 3
        assert summary.finished == 1
        assert summary.incomplete == 2
        assert summary.percentage == 33


class TestJobCompletionPercentage:
    """Single-job progress over the report steps plus wrap."""

    def test_nothing_done(self, empty_schedule):
        assert compute_job_completion_percentage(empty_schedule) == 0

    def test_everything_done_with_wrap(self, finished_schedule):
        assert (
            compute_job_completion_percentage(finished_schedule, "2024-01-10T10:00:00Z")
            == 100
        )

    def test_without_wrap(self, finished_schedule):
        # 7 of 8 steps
        assert compute_job_completion_percentage(finished_schedule) == 88

    def test_half_done(self):
        record = make_schedule(
            cut_melamine_completed_actual="2024-01-05T09:30:00Z",
            cut_finish_completed_actual="2024-01-03T12:00:00Z",
            doors_completed_actual="2024-01-03T10:00:00Z",
            drawer_completed_actual="2024-01-04T15:00:00Z",
        )

        assert compute_job_completion_percentage(record) == 50

    def test_in_plant_is_not_a_report_step(self):
        record = make_schedule(in_plant_actual="2024-01-02T08:00:00Z")

        assert compute_job_completion_percentage(record) == 0

    def test_wrap_only(self, empty_schedule):
        assert JOB_STATUS_STEP_COUNT == 8
        assert compute_job_completion_percentage(empty_schedule, "2024-01-10") == 13


def test_is_step_completed():
    assert is_step_completed("2024-01-02T08:00:00Z")
    assert not is_step_completed(None)
    assert not is_step_completed("")


def test_round_percentage_handles_zero_whole():
    assert round_percentage(0, 0) == 0
    assert round_percentage(1, 2) == 50
