from datetime import time

from hronline.attendance.factory import AttendanceStrategyFactory
from hronline.attendance.policy import WorkdayPolicy
from hronline.attendance.strategies.early_strategy import EarlyLeaveStrategy
from hronline.attendance.strategies.late_strategy import LateStrategy
from hronline.attendance.strategies.normal_strategy import NormalStrategy
from hronline.core.enums import AttendanceType, PunchStatus


def test_factory_checkin_on_time_at_eight():
    factory = AttendanceStrategyFactory()

    assert isinstance(factory.for_checkin(hour=8, minute=0), NormalStrategy)
    assert isinstance(factory.for_checkin(hour=7, minute=59), NormalStrategy)


def test_factory_checkin_late_after_eight():
    factory = AttendanceStrategyFactory()

    assert isinstance(factory.for_checkin(hour=8, minute=1), LateStrategy)
    assert isinstance(factory.for_checkin(hour=9, minute=0), LateStrategy)


def test_factory_checkout_early_before_five():
    factory = AttendanceStrategyFactory()

    assert isinstance(factory.for_checkout(hour=16, minute=59), EarlyLeaveStrategy)
    assert isinstance(factory.for_checkout(hour=17, minute=0), NormalStrategy)


def test_late_decision_carries_minutes_note():
    decision = AttendanceStrategyFactory().decide(AttendanceType.CHECK_IN, hour=8, minute=25)

    assert decision.status == PunchStatus.LATE
    assert decision.note == "Terlambat 25 menit"


def test_custom_policy_shifts_thresholds():
    policy = WorkdayPolicy(work_start=time(9, 30), work_end=time(18, 0))
    factory = AttendanceStrategyFactory(policy)

    assert factory.decide(AttendanceType.CHECK_IN, hour=9, minute=30).status == PunchStatus.ON_TIME
    assert factory.decide(AttendanceType.CHECK_IN, hour=9, minute=31).status == PunchStatus.LATE
    assert factory.decide(AttendanceType.CHECK_OUT, hour=17, minute=45).status == PunchStatus.EARLY_LEAVE


def test_policy_from_strings():
    policy = WorkdayPolicy.from_strings("07:45", "16:30")

    assert policy.work_start == time(7, 45)
    assert policy.work_end == time(16, 30)
    assert policy.check_out_allowed(16, 0) is True
    assert policy.check_out_allowed(15, 59) is False
