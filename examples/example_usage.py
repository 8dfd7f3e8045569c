"""Example: compute a biweekly payroll through the service layer (no Flask).

Controllers are only a thin layer; the calculation lives in the services.
"""

from datetime import date, datetime, timedelta

from src.flexwork_payroll.flexwork_payroll.attendance.model import DailyWorkRecord
from src.flexwork_payroll.flexwork_payroll.container import build_container


def main():
    container = build_container()
    start = date(2024, 1, 1)

    records = []
    for offset in range(12):
        day = start + timedelta(days=offset)
        check_in = datetime.combine(day, datetime.min.time()) + timedelta(hours=13)
        records.append(
            DailyWorkRecord(
                date=day,
                check_in=check_in,
                check_out=check_in + timedelta(hours=10),
                break_minutes=60,
                is_holiday=day.weekday() == 6,
                substitute_leave_granted=day.weekday() == 6,
            )
        )

    service = container.payroll_service
    payroll = service.calculate_payroll(records, "2024-01-01", "2024-01-14", hourly_wage=10030)
    print(payroll.to_dict())
    print(service.build_summary(payroll))


if __name__ == "__main__":
    main()
