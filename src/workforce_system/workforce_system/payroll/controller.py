from __future__ import annotations

import logging
from datetime import date

from flask import Flask, jsonify, request

from ..common.validators import require_iso_date
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .request import ProductivityRequest

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/productivity", methods=["POST"], endpoint="api_productivity")
    def api_productivity():
        """Run the calculation on a posted attendance export."""
        try:
            req = ProductivityRequest.from_mapping(request.get_json(silent=True) or {})
            return jsonify(req.run().to_dict()), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Productivity calculation failed")
            return jsonify({"success": False, "message": "Error calculating productivity"}), 500

    @app.route("/api/workers/<worker_id>/productivity", methods=["GET"], endpoint="api_worker_productivity")
    def api_worker_productivity(worker_id: str):
        today = date.today()
        try:
            start = require_iso_date(request.args.get("from") or today.replace(day=1).isoformat(), "from")
            end = require_iso_date(request.args.get("to") or today.isoformat(), "to")
            result = container.productivity_service.worker_productivity(
                worker_id,
                start=start,
                end=end,
                batch_name=request.args.get("batch") or None,
            )
            return jsonify(result.to_dict()), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            logger.exception("Worker productivity failed for %s", worker_id)
            return jsonify({"success": False, "message": "Error calculating productivity"}), 500

    @app.route("/api/salary-report/<year>/<month>", methods=["GET"], endpoint="api_salary_report")
    def api_salary_report(year: str, month: str):
        try:
            report = container.salary_report_service.generate(year, month)
            return jsonify(
                {"success": True, "message": "Salary report generated successfully", "data": report.to_dict()}
            ), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            logger.exception("Salary report failed for %s-%s", year, month)
            return jsonify({"success": False, "message": "Error generating salary report"}), 500
