from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.http import api_view, json_body
from ..common.validators import as_number
from ..container import Container
from ..core.constants import MAX_OVERTIME_HOURS, OVERTIME_STEP_HOURS
from ..core.exceptions import ValidationError
from .model import DayMark
from .service import coerce_status


def nudge_overtime(value) -> float:
    """Clamp form input to 0-12 hours in half-hour steps."""
    hours = min(max(as_number(value), 0.0), float(MAX_OVERTIME_HOURS))
    steps = int(hours / OVERTIME_STEP_HOURS + 0.5)
    return steps * OVERTIME_STEP_HOURS


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @api_view
    def list_attendance():
        records = service.history(
            employee_id=request.args.get("employee_id") or None,
            start=request.args.get("start") or None,
            end=request.args.get("end") or None,
        )
        return jsonify({"success": True, "data": [r.to_dict() for r in records]})

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    @api_view
    def mark_attendance():
        data = json_body()
        employee_id = str(data.get("employeeId") or "").strip()
        if not employee_id:
            raise ValidationError("employeeId is required")
        container.employee_service.get(employee_id)

        record = service.mark(
            employee_id,
            data.get("date") or today_local().isoformat(),
            data.get("status"),
            overtime_hours=nudge_overtime(data.get("overtimeHours")),
            notes=data.get("notes"),
        )
        return jsonify({"success": True, "data": record.to_dict()})

    @app.route("/api/attendance/day", methods=["GET"], endpoint="attendance_day_sheet")
    @api_view
    def attendance_day_sheet():
        work_date = request.args.get("date") or today_local().isoformat()
        rows = service.day_sheet(work_date)
        stats = service.day_stats(work_date)
        return jsonify(
            {
                "success": True,
                "date": work_date,
                "data": [
                    {
                        "employeeId": r.employee_id,
                        "employeeName": r.employee_name,
                        "status": r.status.value if r.status else None,
                        "overtimeHours": r.overtime_hours,
                        "notes": r.notes,
                    }
                    for r in rows
                ],
                "stats": {"present": stats.present, "absent": stats.absent, "half": stats.half},
            }
        )

    @app.route("/api/attendance/day", methods=["POST"], endpoint="save_attendance_day")
    @api_view
    def save_attendance_day():
        data = json_body()
        work_date = data.get("date") or today_local().isoformat()
        items = data.get("marks")
        if not isinstance(items, list):
            raise ValidationError("marks must be a list")

        marks = []
        for item in items:
            if not isinstance(item, dict) or not item.get("employeeId"):
                raise ValidationError("Each mark needs an employeeId")
            marks.append(
                DayMark(
                    employee_id=str(item["employeeId"]),
                    status=coerce_status(item.get("status")),
                    overtime_hours=nudge_overtime(item.get("overtimeHours")),
                    notes=item.get("notes"),
                )
            )
        container.employee_service.require_known([m.employee_id for m in marks])

        saved = service.save_day(work_date, marks)
        return jsonify({"success": True, "message": "Attendance saved successfully!", "saved": len(saved)})

    @app.route("/api/attendance/bulk", methods=["POST"], endpoint="bulk_mark_attendance")
    @api_view
    def bulk_mark_attendance():
        data = json_body()
        employee_ids = data.get("employeeIds")
        if employee_ids is not None:
            if not isinstance(employee_ids, list):
                raise ValidationError("employeeIds must be a list")
            employee_ids = container.employee_service.require_known([str(i) for i in employee_ids])

        records = service.mark_all(
            data.get("date") or today_local().isoformat(),
            data.get("status"),
            employee_ids=employee_ids,
        )
        return jsonify({"success": True, "data": [r.to_dict() for r in records]})
