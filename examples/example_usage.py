"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the shift/break rules live in the services.
"""

from src.time_clock.time_clock.container import build_container
from src.time_clock.time_clock.core.enums import BreakType
from src.time_clock.time_clock.reports.model import ReportDataFilters


def main():
    container = build_container(store_config={"backend": "memory", "seed_default_users": True})

    svc = container.time_clock_service
    svc.start_shift("123")
    svc.start_break("123", BreakType.LUNCH)
    svc.end_break("123")
    svc.end_shift("123")

    report = container.activity_report_service.find_user_activity(
        "1234", ReportDataFilters(prior_work_shifts_threshold=1)
    )
    for user_id, user in report.items():
        print(user_id, user.name, len(user.prior_work_shifts), len(user.prior_breaks))


if __name__ == "__main__":
    main()
