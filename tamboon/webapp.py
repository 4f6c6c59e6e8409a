"""HTTP API for ROT128 encoding/decoding and bulk donation uploads."""

from __future__ import annotations

import argparse
import csv
import io
import logging
import random
import shutil
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass
from typing import Any, BinaryIO

from flask import Flask, Response, request

from tamboon.rot128 import Rot128Reader, Rot128Writer

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3001

EXPECTED_HEADERS = ("Name", "AmountSubunits", "CCNumber", "CVV", "ExpMonth", "ExpYear")


@dataclass(frozen=True)
class ErrorPayload:
    """Machine-readable error code with a human-readable message."""

    code: str
    message: str


INVALID_FORM = ErrorPayload("INVALID_FORM", "Multipart form named `file` missing")
INVALID_IMPORT = ErrorPayload("INVALID_IMPORT", "Import file missing or exceeded")
INVALID_FILE = ErrorPayload("INVALID_FILE", "Unable to read the uploaded file")
INVALID_INPUT = ErrorPayload(
    "INVALID_INPUT", "Input file is not readable in rot128 or csv format"
)


def success(data: Any) -> tuple[dict[str, Any], int]:
    """Build a successful JSON response body with status 200."""
    return {"status": True, "data": data}, 200


def error(code: int, payload: ErrorPayload) -> tuple[dict[str, Any], int]:
    """Build an error JSON response body with the given HTTP status."""
    return {"status": False, "data": None, **asdict(payload)}, code


def validate_csv_header(headers: Sequence[str]) -> bool:
    """Whether every given header matches the expected header at its position."""
    headers = tuple(headers)
    return headers == EXPECTED_HEADERS[: len(headers)] and len(headers) <= len(
        EXPECTED_HEADERS
    )


def _decoded_text(stream: BinaryIO) -> io.TextIOWrapper:
    reader = io.BufferedReader(Rot128Reader(stream))
    return io.TextIOWrapper(reader, encoding="utf-8", errors="replace", newline="")


def _read_rows(text: io.TextIOBase) -> list[list[str]]:
    """Read the header and data rows; raise ValueError on unreadable input."""
    reader = csv.reader(text, strict=True)
    try:
        header = next(reader, [])
        if not validate_csv_header(header):
            raise ValueError("unexpected csv headers")
        field_count = len(header) or None
        rows = []
        for row in reader:
            if not row:
                continue
            if field_count is None:
                field_count = len(row)
            elif len(row) != field_count:
                raise ValueError("wrong number of fields")
            rows.append(row)
    except csv.Error as exc:
        raise ValueError(str(exc)) from exc
    return rows


def _log_row(row: Sequence[str]) -> None:
    time.sleep(random.randrange(1000) / 1_000_000)
    logger.info("%s", list(row))


def _missing_file() -> tuple[dict[str, str], int]:
    return {"message": "http: no such file"}, 400


def _encode_rot128():
    upload = request.files.get("file")
    if upload is None:
        return _missing_file()
    buffer = io.BytesIO()
    try:
        shutil.copyfileobj(upload.stream, Rot128Writer(buffer))
    except OSError as exc:
        return {"message": str(exc)}, 400
    return Response(buffer.getvalue(), status=200, content_type="text/plain")


def _decode_rot128():
    upload = request.files.get("file")
    if upload is None:
        return _missing_file()
    try:
        with Rot128Reader(upload.stream) as reader:
            data = reader.read()
    except OSError as exc:
        return {"message": str(exc)}, 400
    return Response(data, status=200, content_type="application/octet-stream")


def _bulk_fry_pahpa():
    uploads = request.files.getlist("file")
    if not uploads:
        return error(400, INVALID_FORM)
    if len(uploads) != 1:
        return error(400, INVALID_IMPORT)

    try:
        text = _decoded_text(uploads[0].stream)
    except OSError:
        return error(400, INVALID_FILE)

    with text:
        try:
            rows = _read_rows(text)
        except ValueError:
            return error(400, INVALID_INPUT)

    with ThreadPoolExecutor() as executor:
        for row in rows:
            executor.submit(_log_row, row)

    return success({"tasks": len(rows)})


def create_app() -> Flask:
    """Build the application with the /pahpa and /file/rot128 routes."""
    app = Flask(__name__)
    app.add_url_rule("/pahpa/bulk", "bulk_fry_pahpa", _bulk_fry_pahpa, methods=["POST"])
    app.add_url_rule("/file/rot128/encode", "encode_rot128", _encode_rot128, methods=["POST"])
    app.add_url_rule("/file/rot128/decode", "decode_rot128", _decode_rot128, methods=["POST"])
    return app


def main(argv: Sequence[str] | None = None) -> None:
    """Serve the API."""
    parser = argparse.ArgumentParser(description="Donation HTTP API")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)