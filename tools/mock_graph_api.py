"""
Lightweight mock Meta Graph API for local development and live e2e testing.

Endpoints:
- GET /<version>/<ad_id>?fields=adset_id           -> {"adset_id": "adset-<ad_id>"}
- GET /<version>/adset-<x>?fields=campaign_id      -> {"campaign_id": "campaign-<x>"}
- GET /<version>/campaign-<x>?fields=name          -> {"name": "Campaign <x>"}
- GET /_health                                     -> returns 200

Ad ids starting with "bad" return a Graph-style 400 error on the first hop.
"""
import json
from http.server import BaseHTTPRequestHandler, HTTPServer
from urllib.parse import parse_qs, urlsplit


def lookup(node_id: str, field: str):
    """Return (status, body) for a Graph node/field request."""
    if node_id.startswith('bad'):
        return 400, {'error': {'message': f'Unsupported get request. Object {node_id} does not exist',
                               'type': 'GraphMethodException', 'code': 100}}
    if field == 'adset_id':
        return 200, {'adset_id': f'adset-{node_id}', 'id': node_id}
    if field == 'campaign_id' and node_id.startswith('adset-'):
        return 200, {'campaign_id': f"campaign-{node_id[len('adset-'):]}", 'id': node_id}
    if field == 'name' and node_id.startswith('campaign-'):
        return 200, {'name': f"Campaign {node_id[len('campaign-'):]}", 'id': node_id}
    return 400, {'error': {'message': f'Tried accessing nonexisting field ({field})', 'code': 100}}


class Handler(BaseHTTPRequestHandler):
    def _send_json(self, status_code: int, payload: dict) -> None:
        body = json.dumps(payload).encode("utf-8")
        self.send_response(status_code)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self):  # noqa: N802
        parts = urlsplit(self.path)
        if parts.path == "/_health":
            return self._send_json(200, {"status": "ok"})

        query = parse_qs(parts.query)
        segments = [s for s in parts.path.split("/") if s]
        if len(segments) != 2 or not query.get("access_token"):
            return self._send_json(400, {"error": {"message": "An access token is required", "code": 104}})

        field = query.get("fields", [""])[0]
        status_code, payload = lookup(segments[1], field)
        return self._send_json(status_code, payload)

    def log_message(self, format, *args):  # noqa: A003
        # Silence default logging to keep test output clean.
        return


def make_server(host: str = "0.0.0.0", port: int = 8080) -> HTTPServer:
    return HTTPServer((host, port), Handler)


def main() -> None:
    server = make_server()
    server.serve_forever()


if __name__ == "__main__":
    main()
