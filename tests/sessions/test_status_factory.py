from datetime import datetime

from src.site_pulse.site_pulse.sessions.factory import SessionStatusFactory
from src.site_pulse.site_pulse.sessions.model import ReportPeriod
from src.site_pulse.site_pulse.sessions.strategies.active_strategy import ActiveStrategy
from src.site_pulse.site_pulse.sessions.strategies.missed_strategy import MissedStrategy
from src.site_pulse.site_pulse.sessions.strategies.pending_strategy import PendingStrategy
from src.site_pulse.site_pulse.sessions.strategies.submitted_strategy import SubmittedStrategy

MORNING = ReportPeriod(label="9am-12pm", name="Morning Session", start_hour=9, end_hour=12)


def test_factory_prefers_submitted_over_time_rules():
    factory = SessionStatusFactory()
    strategy = factory.for_period(period=MORNING, now=datetime(2026, 2, 2, 8, 0), submitted=True)

    assert isinstance(strategy, SubmittedStrategy)


def test_factory_time_rules_without_submission():
    factory = SessionStatusFactory()

    assert isinstance(factory.for_period(period=MORNING, now=datetime(2026, 2, 2, 8, 59), submitted=False), PendingStrategy)
    assert isinstance(factory.for_period(period=MORNING, now=datetime(2026, 2, 2, 12, 30), submitted=False), ActiveStrategy)
    assert isinstance(factory.for_period(period=MORNING, now=datetime(2026, 2, 2, 12, 31), submitted=False), MissedStrategy)


def test_submitted_strategy_closes_editing_after_grace():
    strategy = SubmittedStrategy()

    assert strategy.decide(period=MORNING, now=datetime(2026, 2, 2, 12, 30)).can_edit is True
    assert strategy.decide(period=MORNING, now=datetime(2026, 2, 2, 12, 31)).can_edit is False
