from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import today_local
from ..common.http import api_view
from ..container import Container
from .export import export_filename, report_to_csv


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    def _requested_month() -> str:
        return request.args.get("month") or today_local().strftime("%Y-%m")

    @app.route("/api/payroll", methods=["GET"], endpoint="payroll")
    @api_view
    def payroll():
        report = service.generate_for(_requested_month())
        return jsonify(
            {
                "success": True,
                "month": report.period,
                "data": [e.to_dict() for e in report.entries],
                "totals": {
                    "payout": report.total_payout,
                    "overtimePay": report.total_overtime_pay,
                    "deductions": report.total_deductions,
                },
            }
        )

    @app.route("/api/payroll/export", methods=["GET"], endpoint="payroll_export")
    @api_view
    def payroll_export():
        report = service.generate_for(_requested_month())
        payload = io.BytesIO(report_to_csv(report).encode("utf-8"))
        return send_file(
            payload,
            mimetype="text/csv",
            as_attachment=True,
            download_name=export_filename(report),
        )
