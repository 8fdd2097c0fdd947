from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import api_view
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @api_view
    def dashboard():
        today = None
        if request.args.get("today"):
            try:
                today = parse_iso_date(request.args["today"])
            except ValueError:
                raise ValidationError("today must be a date in YYYY-MM-DD form") from None
        stats = container.dashboard_service.summary(today=today)
        return jsonify({"success": True, "data": stats.to_dict()})
