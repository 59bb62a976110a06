import logging

from flask import Blueprint, current_app, redirect, render_template, request

bp = Blueprint('appointments', __name__)

logger = logging.getLogger(__name__)

# Sheet column order; changing it breaks rows already in the sheet
COLUMNS = ("Date", "Time", "Dog Name", "Address", "First Time", "Payment", "Notes")

# Values sent by a checked checkbox, or typed by hand
AFFIRMATIVE = ("on", "Yes")

PLAIN_TEXT = {"Content-Type": "text/plain; charset=utf-8"}


def normalize_first_time(value) -> str:
    return "Yes" if value in AFFIRMATIVE else "No"


def _text(value) -> str:
    return str(value) if value else ""


def build_row(form) -> list:
    """Shape submitted fields into the seven-cell sheet row.

    Nothing is validated: values are written as submitted (as text), and
    any missing field becomes an empty cell.
    """
    return [
        _text(form.get("date")),
        _text(form.get("time")),
        _text(form.get("dogName")),
        _text(form.get("address")),
        normalize_first_time(form.get("firstTime")),
        _text(form.get("paymentMethod")),
        _text(form.get("notes")),
    ]


def pad_row(row) -> list:
    cells = [cell if cell is not None else "" for cell in row[:len(COLUMNS)]]
    return cells + [""] * (len(COLUMNS) - len(cells))


def get_store():
    return current_app.extensions["appointment_store"]


@bp.route("/submit", methods=["POST"])
def submit_appointment():
    # The form posts urlencoded data, but JSON bodies are accepted too
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = request.form
    try:
        row = build_row(data)
        get_store().append_row(row)
    except Exception:
        logger.exception("Error appending row")
        return "There was an error saving your appointment.", 500, PLAIN_TEXT

    return redirect("/thankyou.html")


@bp.route("/appointments", methods=["GET"])
def list_appointments():
    try:
        rows = get_store().list_rows()
    except Exception:
        logger.exception("Error retrieving appointments")
        return "Unable to fetch appointments.", 500, PLAIN_TEXT

    return render_template(
        "appointments.html",
        columns=COLUMNS,
        rows=[pad_row(row) for row in rows],
    )


@bp.route("/", methods=["GET"])
def index():
    return current_app.send_static_file("index.html")
