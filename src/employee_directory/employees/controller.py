from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from flask import Flask, flash, jsonify, redirect, render_template, request, session, url_for

from ..common.validators import parse_int
from ..container import Container
from ..core.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    NO_RESULTS_MESSAGE,
    UPDATE_SUCCESS_MESSAGE,
)
from ..core.exceptions import ValidationError
from .forms import UpdateEmployeeForm, validate_update_form
from .model import Employee

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    def _int_arg(name: str, default: int) -> int:
        raw = request.args.get(name)
        if raw is None or not raw.strip():
            return default
        return parse_int(raw, name)

    def _page_size() -> int:
        return _int_arg("size", int(app.config.get("DEFAULT_PAGE_SIZE", DEFAULT_PAGE_SIZE)))

    def _unfiltered(paginate: bool, page: int, size: int) -> Tuple[Sequence[Employee], Optional[int]]:
        if not paginate:
            return service.show_list(), None
        return service.show_list(page, size), service.get_total_pages(size)

    def _render_detail(employee: Employee, *, errors=None, form: Optional[UpdateEmployeeForm] = None):
        form = form or UpdateEmployeeForm(id=str(employee.id), dependents_count=str(employee.dependents_count))
        return render_template(
            "employee/detail.html",
            employee=employee,
            form=form,
            errors=errors or {},
            username=session.get("username"),
        )

    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for("employee_list"))

    @app.route("/employee/showList", endpoint="employee_list")
    def show_list():
        page = max(_int_arg("page", DEFAULT_PAGE), 1)
        size = _page_size()

        employees = service.show_list(page, size)
        total_pages = service.get_total_pages(size)

        return render_template(
            "employee/list.html",
            employee_list=employees,
            current_page=page,
            total_pages=total_pages,
            size=size,
            search_name="",
            page_name="",
            message=None,
            username=session.get("username"),
        )

    @app.route("/employee/search", endpoint="employee_search")
    def search():
        # Only a missing or blank term means "no filter"; a non-blank term is searched as typed.
        name = request.args.get("name") or ""
        filtered = bool(name.strip())
        paginate = bool((request.args.get("page") or "").strip())
        page = max(_int_arg("page", DEFAULT_PAGE), 1)
        size = _page_size()
        message = None

        if not filtered:
            employees, total_pages = _unfiltered(paginate, page, size)
        elif paginate:
            total_pages = service.get_total_pages_for_name(name, size)
            employees = service.search_page(name, page, size) if total_pages else []
        else:
            employees = service.find_by_name_containing(name)
            total_pages = None

        if filtered and not employees and not (paginate and total_pages):
            logger.info("Search for %r matched no employees", name)
            message = NO_RESULTS_MESSAGE
            filtered = False
            page = DEFAULT_PAGE
            employees, total_pages = _unfiltered(paginate, page, size)

        return render_template(
            "employee/list.html",
            employee_list=employees,
            current_page=page if paginate else None,
            total_pages=total_pages,
            size=size,
            search_name=name,
            page_name=name if filtered else "",
            message=message,
            username=session.get("username"),
        )

    @app.route("/employee/autocomplete", endpoint="employee_autocomplete")
    def autocomplete():
        term = request.args.get("term") or ""
        if not term.strip():
            return jsonify([])

        names = [e.name for e in service.find_by_name_containing(term)]
        if (request.args.get("limit") or "").strip():
            names = names[: max(_int_arg("limit", len(names)), 0)]
        return jsonify(names)

    @app.route("/employee/showDetail", endpoint="employee_detail")
    def show_detail():
        employee_id = parse_int(request.args.get("id"), "id")
        employee = service.show_detail(employee_id)
        return _render_detail(employee)

    @app.route("/employee/update", methods=["POST"], endpoint="employee_update")
    def update():
        form = UpdateEmployeeForm.from_form(request.form)
        result = validate_update_form(form)

        if "id" in result.errors:
            raise ValidationError(result.errors["id"], field="id")

        if not result.ok:
            logger.info("Rejected update for employee %s: %s", result.employee_id, result.errors)
            employee = service.show_detail(result.employee_id)
            return _render_detail(employee, errors=result.errors, form=form)

        service.update_dependents_count(result.employee_id, result.dependents_count)
        flash(UPDATE_SUCCESS_MESSAGE, "success")
        return redirect(url_for("employee_list"))
