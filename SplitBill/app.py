import logging

from flask import Flask, abort, redirect, render_template, request, url_for

from bill_input import FIELD_NAMES
from config.app_config import CURRENCY_CODE, LOG_LEVEL, WEB_HOST, WEB_PORT
from session import TIP_PRESETS, BillSession
from utils import build_breakdown, format_currency, people_label

logger = logging.getLogger(__name__)

app = Flask(__name__)

# One calculator session per process (NO persistence)
ACTIVE_SESSION = BillSession()


@app.template_filter("currency")
def currency_filter(amount):
    return format_currency(amount)


# ------------------ HELPERS ------------------

def apply_form(session, form):
    """
    Route submitted field values through the input-change path.

    Only fields whose text actually changed are applied, so untouched
    fields keep their current messages.
    """
    for name in FIELD_NAMES:
        if name in form and form[name] != session.bill_input.get(name):
            session.handle_input_change(name, form[name])


# ------------------ ROUTES ------------------

@app.route("/")
def index():
    session = ACTIVE_SESSION

    return render_template(
        "index.html",
        bill=session.bill_input,
        errors=session.errors,
        result=session.result,
        breakdown=build_breakdown(session.result, session.bill_input),
        people=people_label(session.bill_input),
        tip_presets=TIP_PRESETS,
        active_tip=session.active_tip_preset,
        currency_code=CURRENCY_CODE
    )

# ------------------ INPUT CHANGES ------------------
# The +/- and tip buttons submit the whole form, so pending edits are
# applied before the button action.

@app.route("/update", methods=["POST"])
def update():
    apply_form(ACTIVE_SESSION, request.form)

    return redirect(url_for("index"))


@app.route("/adjust/<field>/<int(signed=True):delta>", methods=["POST"])
def adjust(field, delta):
    apply_form(ACTIVE_SESSION, request.form)
    try:
        ACTIVE_SESSION.adjust(field, delta)
    except ValueError as e:
        logger.warning("Rejected adjustment: %s", e)
        abort(400, description=str(e))

    return redirect(url_for("index"))


@app.route("/tip/<int:percent>", methods=["POST"])
def tip_preset(percent):
    apply_form(ACTIVE_SESSION, request.form)
    try:
        ACTIVE_SESSION.apply_tip_preset(percent)
    except ValueError as e:
        logger.warning("Rejected tip preset: %s", e)
        abort(404, description=str(e))

    return redirect(url_for("index"))

# ------------------ RESET ------------------

@app.route("/reset", methods=["POST"])
def reset():
    ACTIVE_SESSION.reset()
    return redirect(url_for("index"))


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    logger.info("Starting Split Bill page on %s:%s", WEB_HOST, WEB_PORT)
    app.run(host=WEB_HOST, port=WEB_PORT)
