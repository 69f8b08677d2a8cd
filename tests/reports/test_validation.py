from src.site_pulse.site_pulse.reports.model import HourlyEntry
from src.site_pulse.site_pulse.reports.validation import validate_entry


def entry(**kwargs) -> HourlyEntry:
    kwargs.setdefault("hourly_activity", "Replaced relay")
    return HourlyEntry(time_period="9am-12pm", **kwargs)


def test_blank_activity_skips_validation():
    assert validate_entry(entry(hourly_activity="  ", problem_resolved_or_not="Yes")) == []


def test_resolved_problem_missing_start_time_only():
    violations = validate_entry(entry(problem_resolved_or_not="Yes", problem_resolved_end_time="10:40"))

    assert [v.field for v in violations] == ["problem_occur_start_time"]


def test_resolved_problem_missing_both_times():
    violations = validate_entry(entry(problem_resolved_or_not="Yes"))

    assert [v.field for v in violations] == ["problem_occur_start_time", "problem_resolved_end_time"]


def test_online_support_requires_all_details():
    violations = validate_entry(
        entry(
            problem_resolved_or_not="Yes",
            problem_occur_start_time="10:00",
            problem_resolved_end_time="10:40",
            online_support_required_for_which_problem="PLC firmware",
            online_support_time="10:05",
        )
    )

    assert len(violations) == 1
    assert violations[0].field == "online_support"
    assert "Online support end time" in violations[0].message
    assert "Engineer who gave online support" in violations[0].message


def test_complete_online_support_passes():
    assert (
        validate_entry(
            entry(
                problem_resolved_or_not="Yes",
                problem_occur_start_time="10:00",
                problem_resolved_end_time="10:40",
                online_support_required_for_which_problem="PLC firmware",
                online_support_time="10:05",
                online_support_end_time="10:30",
                engineer_name_who_gives_online_support="R. Mehta",
            )
        )
        == []
    )


def test_unresolved_problem_needs_reason():
    violations = validate_entry(entry(problem_resolved_or_not="No"))

    assert [v.field for v in violations] == ["reason_if_not_resolved"]
    assert validate_entry(entry(problem_resolved_or_not="No", reason_if_not_resolved="Spare part missing")) == []


def test_problem_faced_needs_resolution_choice():
    violations = validate_entry(entry(problem_faced="Yes"))

    assert [v.field for v in violations] == ["problem_resolved_or_not"]


def test_blank_draft_for_period_is_valid_and_empty():
    from src.site_pulse.site_pulse.sessions.model import DEFAULT_PERIODS

    draft = HourlyEntry.blank(DEFAULT_PERIODS[1])

    assert draft.time_period == "12pm-3pm"
    assert draft.has_activity is False
    assert validate_entry(draft) == []
