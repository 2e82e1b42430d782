from __future__ import annotations

import csv
import io
import re

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_month_anchor
from ..core.exceptions import NotConfiguredError, NotFoundError, UpstreamError, ValidationError
from ..container import Container

EXPORT_FIELDS = [
    "work_date",
    "card_no",
    "name",
    "status",
    "label",
    "time_in",
    "time_out",
    "remarks",
    "correction_reason",
]


def register(app: Flask, container: Container) -> None:
    service = container.calendar_service

    def _error(message: str, code: int):
        return jsonify({"success": False, "message": message}), code

    def _no_store(response):
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, private"
        response.headers["Expires"] = "0"
        response.headers["Pragma"] = "no-cache"
        return response

    def _requested_month() -> tuple[int, int]:
        month_s = request.args.get("month")
        if not month_s:
            today = now_local().date()
            return today.year, today.month
        return parse_month_anchor(month_s)

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        return _error(str(e), 400)

    @app.errorhandler(NotFoundError)
    def handle_not_found(e):
        return _error(str(e), 404)

    @app.errorhandler(NotConfiguredError)
    def handle_not_configured(e):
        return _error(str(e), 503)

    @app.errorhandler(UpstreamError)
    def handle_upstream_error(e):
        app.logger.error("Attendance history error: %s", e)
        return _error("Failed to fetch attendance history", 502)

    @app.route("/api/attendance/history/config", methods=["GET"], endpoint="attendance_history_config")
    def attendance_history_config():
        return jsonify({"configured": service.is_configured()})

    @app.route("/api/attendance/legend", methods=["GET"], endpoint="attendance_legend")
    def attendance_legend():
        return jsonify(service.legend())

    @app.route("/api/attendance/history/<card_no>", methods=["GET"], endpoint="attendance_history")
    def attendance_history(card_no: str):
        year, month = _requested_month()
        view = service.get_month_view(card_no, year, month)
        return _no_store(jsonify(view.to_dict()))

    @app.route(
        "/api/attendance/history/<card_no>/records/<work_date>",
        methods=["GET"],
        endpoint="attendance_record_detail",
    )
    def attendance_record_detail(card_no: str, work_date: str):
        return _no_store(jsonify(service.get_record_detail(card_no, work_date)))

    @app.route("/attendance/history/<card_no>.csv", methods=["GET"], endpoint="attendance_history_csv")
    def attendance_history_csv(card_no: str):
        """CSV export of one member's month, same columns as the detail dialog."""

        year, month = _requested_month()
        rows = service.export_month_rows(card_no, year, month)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=EXPORT_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        safe_card = re.sub(r"[^A-Za-z0-9._-]", "_", card_no.strip())
        filename = f"attendance_{safe_card}_{year:04d}{month:02d}.csv"
        return _no_store(
            app.response_class(
                csv_bytes,
                mimetype="text/csv",
                headers={"Content-Disposition": f'attachment; filename="{filename}"'},
            )
        )
