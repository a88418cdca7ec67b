from __future__ import annotations


def _slip(container, employee_id, month, year, net=4000):
    container.salaries_repo.create(
        employee_id=employee_id,
        month=month,
        year=year,
        basic=net,
        allowances=0,
        deductions=0,
        net_salary=net,
    )


def test_recent_orders_by_year_then_calendar_month(container):
    _slip(container, 7, "January", 2024)
    _slip(container, 7, "December", 2023)
    _slip(container, 7, "March", 2024)
    _slip(container, 8, "April", 2024)

    recent = container.salary_service.recent_for_employee(7, 2)

    assert [(s.month, s.year) for s in recent] == [("March", 2024), ("January", 2024)]


def test_lists_are_scoped_per_employee(container):
    _slip(container, 7, "January", 2024)
    _slip(container, 8, "January", 2024, net=3000)

    assert [s.net_salary for s in container.salary_service.list_for_employee(8)] == [3000.0]
    assert len(container.salary_service.list_all()) == 2


def test_salary_endpoints(client):
    jane = client.get("/api/employees/2/salaries").get_json()
    assert [s["month"] for s in jane] == ["April", "May"]
    assert jane[0]["netSalary"] == 4800

    everyone = client.get("/api/admin/salaries").get_json()
    assert len(everyone) == 3
    assert {s["employeeId"] for s in everyone} == {2, 3}
