from __future__ import annotations

import json

from flask import Flask

from ..common.http import json_body, ok
from ..common.validators import require_fields, require_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/verify-qr", methods=["POST"], endpoint="verify_qr")
    def verify_qr():
        data = json_body()
        require_fields(data, "qrData", "eventId", message="Missing QR data or event ID")

        qr_data = data["qrData"]
        if isinstance(qr_data, dict):
            # Scanners that already parsed the code send the object itself
            qr_data = json.dumps(qr_data)

        info = container.attendance_service.verify(qr_data, require_int(data["eventId"], "Event ID"))
        return ok(attendanceInfo=info)
