from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_view, json_body, json_error
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/assistant", methods=["POST"], endpoint="assistant")
    @api_view
    def assistant():
        query = str(json_body().get("query") or "").strip()
        if not query:
            return json_error("Query must not be empty", 400)

        answer = container.assistant_service.ask(
            query,
            container.employee_service.list_employees(),
            container.attendance_repo.list_all(),
        )
        return jsonify({"success": True, "answer": answer})
