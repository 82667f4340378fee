#!/usr/bin/env python3
"""
Simple HTTP logging server. Receives POST requests and prints the body to
stdout. Point UNITHARNESS_LOG_URL at it to watch registrations and test
outcomes from a test program whose own stdout carries the pass/fail protocol.

Listens on http://localhost:8080 (UNITHARNESS_LOG_PORT overrides the port).
"""

import os
from http.server import BaseHTTPRequestHandler, HTTPServer


class LogHandler(BaseHTTPRequestHandler):
    def do_POST(self):
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length).decode("utf-8", errors="replace")
        self.server.on_message(body)
        self.send_response(200)
        self.end_headers()

    def log_message(self, format, *args):  # noqa: A002
        # Suppress the default per-request access log lines
        pass


def _print_message(body: str) -> None:
    print(body, flush=True)


def make_server(host="localhost", port=8080, on_message=_print_message) -> HTTPServer:
    server = HTTPServer((host, port), LogHandler)
    server.on_message = on_message
    return server


if __name__ == "__main__":
    port = int(os.environ.get("UNITHARNESS_LOG_PORT", 8080))
    server = make_server(port=port)
    print(f"[logging_server] Listening on http://localhost:{port}", flush=True)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
