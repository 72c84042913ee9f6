from __future__ import annotations

import logging
from datetime import date

from flask import Flask, jsonify, request

from ..core.constants import CURRENCY_SYMBOL
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/advances/<advance_id>/deduct", methods=["POST"], endpoint="api_advance_deduct")
    def api_advance_deduct(advance_id: str):
        data = request.get_json(silent=True) or {}
        try:
            if data.get("amount") in (None, ""):
                raise ValidationError("Deduction amount is required")
            advance = container.advance_service.deduct(
                advance_id,
                amount=data.get("amount"),
                on=date.today(),
                description=data.get("description") or None,
            )
            amount = advance.deductions[-1].amount
            return jsonify(
                {"message": f"{CURRENCY_SYMBOL}{amount:g} deducted successfully from advance", "advance": advance.to_dict()}
            ), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            logger.exception("Advance deduction failed for %s", advance_id)
            return jsonify({"success": False, "message": "Error deducting advance"}), 500
