"""
VSDC Sandbox Mock — stands in for the RRA EBM server during local development.
Run: python vsdc_server.py
Listens on port 8001 (settings_dev RRA_TEST_URL).
"""

import json
from datetime import datetime, timezone
from http.server import BaseHTTPRequestHandler, HTTPServer


def _envelope(data=None):
    return {
        "resultCd":  "000",
        "resultMsg": "It is succeeded",
        "resultDt":  datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S"),
        "data":      data,
    }


class VSDCHandler(BaseHTTPRequestHandler):
    def do_POST(self):
        length = int(self.headers.get("Content-Length", 0))
        try:
            body = json.loads(self.rfile.read(length) or b"{}")
        except json.JSONDecodeError:
            self._respond(400, {"resultCd": "910", "resultMsg": "Request parameter error"})
            return

        if self.path == "/items/saveItems":
            if not body.get("itemCd"):
                self._respond(400, {"resultCd": "910", "resultMsg": "itemCd is required"})
                return
            self._respond(200, _envelope())
        elif self.path == "/initializer/selectInitInfo":
            self._respond(200, _envelope({"info": {
                "tin":   body.get("tin"),
                "bhfId": body.get("bhfId"),
                "dvcId": f"{body.get('tin')}7006310",
            }}))
        else:
            self._respond(404, {"resultCd": "995", "resultMsg": "Not found"})

    def _respond(self, code, data):
        self.send_response(code)
        self.send_header("Content-Type", "application/json")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def log_message(self, *_):
        pass


if __name__ == "__main__":
    server = HTTPServer(("0.0.0.0", 8001), VSDCHandler)
    print("VSDC Mock running on :8001")
    server.serve_forever()
