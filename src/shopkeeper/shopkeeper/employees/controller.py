from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_view, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @api_view
    def list_employees():
        term = request.args.get("q", "")
        active_only = request.args.get("active") in {"1", "true", "yes"}
        employees = service.search(term) if term else service.list_employees()
        if active_only:
            employees = [e for e in employees if e.is_active]
        return jsonify({"success": True, "data": [e.to_dict() for e in employees]})

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @api_view
    def create_employee():
        data = json_body()
        emp = service.create(
            name=data.get("name", ""),
            role=data.get("role", ""),
            phone=data.get("phone", ""),
            base_salary=data.get("baseSalary"),
            joining_date=data.get("joiningDate"),
        )
        return jsonify({"success": True, "data": emp.to_dict()}), 201

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @api_view
    def get_employee(employee_id: str):
        return jsonify({"success": True, "data": service.get(employee_id).to_dict()})

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @api_view
    def update_employee(employee_id: str):
        data = json_body()
        emp = service.update(
            employee_id,
            name=data.get("name"),
            role=data.get("role"),
            phone=data.get("phone"),
            base_salary=data.get("baseSalary"),
            joining_date=data.get("joiningDate"),
            is_active=data.get("isActive"),
        )
        return jsonify({"success": True, "data": emp.to_dict()})

    @app.route("/api/employees/<employee_id>/active", methods=["POST"], endpoint="set_employee_active")
    @api_view
    def set_employee_active(employee_id: str):
        data = json_body()
        emp = service.set_active(employee_id, is_active=bool(data.get("isActive", True)))
        return jsonify({"success": True, "data": emp.to_dict()})

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @api_view
    def delete_employee(employee_id: str):
        service.delete(employee_id)
        return jsonify({"success": True})
