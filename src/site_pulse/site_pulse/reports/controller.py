from __future__ import annotations

import logging
from functools import wraps

from flask import Blueprint, Flask, jsonify, request, session

from ..common.datetime_utils import coerce_date
from ..core.enums import RejectionReason
from ..core.exceptions import AuthorizationError, NotFoundError, SubmissionRejected, ValidationError
from ..container import Container
from ..plans.model import PlanLink
from ..plans.service import apply_links, parse_daily_plans, plan_progress
from .normalize import normalize_entry, pick

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("hourly_report", __name__, url_prefix="/api/hourly-report")
    service = container.hourly_report_service

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"message": "Authentication required"}), 401
            return view(*args, **kwargs)

        return wrapper

    def current_user_id() -> int:
        return int(session["user_id"])

    def _parse_date(value):
        try:
            return coerce_date(value)
        except ValueError as e:
            raise ValidationError("Invalid report date") from e

    @bp.errorhandler(ValidationError)
    def _validation_error(e):
        return jsonify({"message": str(e)}), 400

    @bp.errorhandler(SubmissionRejected)
    def _rejected(e):
        return jsonify({"message": str(e), "rejections": [r.to_dict() for r in e.rejections]}), 400

    @bp.errorhandler(NotFoundError)
    def _not_found(e):
        return jsonify({"message": str(e)}), 404

    @bp.errorhandler(AuthorizationError)
    def _forbidden(e):
        return jsonify({"message": str(e)}), 403

    @bp.errorhandler(Exception)
    def _unexpected(e):
        logger.exception("Hourly report request failed: %s %s", request.method, request.path)
        return jsonify({"message": "Unable to process hourly report request"}), 500

    @bp.route("/status", methods=["GET"], endpoint="status")
    @login_required
    def status():
        now = container.clock()
        report_date = _parse_date(request.args.get("date") or now.date())
        status_map = service.status_for(current_user_id(), report_date, now=now)
        active = service.active_period(now=now)
        return jsonify(
            {
                "reportDate": report_date.strftime("%Y-%m-%d"),
                "activePeriod": active.label if active else None,
                "sessions": {
                    p.key: {"timePeriod": p.label, "name": p.name, **status_map[p.label].to_dict()}
                    for p in service.periods
                },
            }
        )

    @bp.route("", methods=["POST"], endpoint="submit")
    @login_required
    def submit():
        data = request.get_json(silent=True) or {}
        entries = [normalize_entry(e) for e in data.get("hourlyEntries") or data.get("hourly_entries") or []]
        if not entries:
            # Single-entry payloads from older clients.
            entries = [normalize_entry(data)]

        result = service.submit_day(
            current_user_id(),
            report_date=_parse_date(pick(data, "reportDate", "report_date", "date", default=None)),
            project_name=pick(data, "projectName", "project_name"),
            daily_target=pick(data, "dailyTarget", "daily_target", "dailyTargetPlanned"),
            employee_name=session.get("name") or "",
            entries=entries,
        )

        if result.accepted:
            status_code = 201
        elif all(r.reason == RejectionReason.ALREADY_EXISTS for r in result.rejections):
            status_code = 409
        else:
            status_code = 400
        return jsonify(result.to_dict()), status_code

    @bp.route("/<int:report_id>", methods=["PUT"], endpoint="update")
    @login_required
    def update(report_id: int):
        data = request.get_json(silent=True) or {}
        report = service.edit(current_user_id(), report_id, normalize_entry(data))
        return jsonify({"message": "Hourly report updated successfully", "report": report.to_dict()})

    @bp.route("/<int:report_id>/draft", methods=["GET"], endpoint="draft")
    @login_required
    def draft(report_id: int):
        return jsonify(service.draft_for_edit(current_user_id(), report_id).to_dict())

    @bp.route("/<int:report_id>", methods=["DELETE"], endpoint="delete")
    @login_required
    def delete(report_id: int):
        service.delete(current_user_id(), report_id)
        return jsonify({"success": True, "message": "Hourly report deleted"})

    @bp.route("/<date_str>", methods=["GET"], endpoint="list_for_day")
    @login_required
    def list_for_day(date_str: str):
        reports = service.list_for_day(current_user_id(), _parse_date(date_str))
        return jsonify([r.to_dict() for r in reports])

    @bp.route("/consolidated/<date_str>", methods=["GET"], endpoint="consolidated")
    @login_required
    def consolidated(date_str: str):
        return jsonify(service.consolidated(current_user_id(), _parse_date(date_str)).to_dict())

    @bp.route("/daily-summary", methods=["POST"], endpoint="daily_summary")
    @login_required
    def daily_summary():
        data = request.get_json(silent=True) or {}
        entries = [normalize_entry(e) for e in data.get("hourlyEntries") or []]
        return jsonify({"dailyTargetAchieved": service.daily_summary(entries)})

    @bp.route("/plans/progress", methods=["POST"], endpoint="plan_progress")
    @login_required
    def plans_progress():
        data = request.get_json(silent=True) or {}
        plans = parse_daily_plans(pick(data, "dailyTargetPlanned", "dailyTarget", "daily_target"))
        links = [
            PlanLink(
                plan_id=int(l.get("planId", 0)),
                session_index=int(l.get("sessionIndex", 0)),
                activity_index=int(l.get("activityIndex", 0)),
                activity=str(l.get("activity") or ""),
                achieved=str(l.get("achieved") or "No") == "Yes",
            )
            for l in data.get("links") or []
        ]
        return jsonify(
            [
                {
                    "id": plan.plan_id,
                    "text": plan.text,
                    "activities": plan.activities,
                    "completed": plan.completed,
                    "progress": plan_progress(plan.plan_id, links).to_dict(),
                }
                for plan in apply_links(plans, links)
            ]
        )

    app.register_blueprint(bp)
