"""A small web form that computes greatest common divisors."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from flask import Flask, Response, request

from workbench.gcd import gcd

_U64_MAX = 2**64 - 1
_U64_PATTERN = re.compile(r"\+?[0-9]+")

INDEX_PAGE = """
                <title>GCD Calculator</title>
                <form action="/gcd" method="post">
                <input type="text" name="n" />
                <input type="text" name="m" />
                <button type="submit">Compute GCD</button>
                </form>
            """

HOST = "127.0.0.1"
PORT = 3000


def _form_u64(name: str) -> int | None:
    raw = request.form.get(name)
    if raw is None or not _U64_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    return value if value <= _U64_MAX else None


def _html(body: str, status: int = 200) -> Response:
    return Response(body, status=status, content_type="text/html")


def create_app() -> Flask:
    """Build the application serving the form and the computation."""
    app = Flask(__name__)

    @app.get("/")
    def get_index() -> Response:
        return _html(INDEX_PAGE)

    @app.post("/gcd")
    def post_gcd() -> Response:
        n = _form_u64("n")
        m = _form_u64("m")
        if n is None or m is None:
            return Response(
                "Parse error: fields n and m must be unsigned integers.",
                status=400,
                content_type="text/plain",
            )
        if n == 0 or m == 0:
            return _html("Computing the GCD with 0 is boring.", status=400)
        return _html(
            f"The greatest common divisor of the numbers {n} and {m} "
            f"is <b>{gcd(n, m)}</b>\n"
        )

    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the application on the local port."""
    del argv
    app = create_app()
    print(f"Serving potatos on port {PORT}")
    app.run(host=HOST, port=PORT)
    return 0


if __name__ == "__main__":
    sys.exit(main())