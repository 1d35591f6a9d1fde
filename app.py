from flask import Flask, render_template, request, redirect, url_for, flash, session, jsonify

from feelslike.config import SECRET_KEY
from feelslike.services import (
    NominatimService,
    OpenMeteoService,
    BrowserGeolocation,
    LocationResolver,
)
from feelslike.state import WeatherState

app = Flask(__name__)
# Needed for flashing messages and the session‑scoped weather state
app.secret_key = SECRET_KEY

STATE_KEY = "weather_state"


def load_state() -> WeatherState:
    return WeatherState.from_dict(session.get(STATE_KEY))


def save_state(state: WeatherState) -> None:
    session[STATE_KEY] = state.to_dict()


def make_resolver(state: WeatherState) -> LocationResolver:
    return LocationResolver(state, geocoder=NominatimService(), weather=OpenMeteoService())


def parse_number(raw: str):
    """Return a float, or None for a blank field. Raises ValueError for anything else."""
    raw = (raw or "").strip()
    if not raw:
        return None
    return float(raw)


@app.route("/", methods=["GET"])
def index():
    state = load_state()
    return render_template("index.html", conditions=state.summary())


@app.route("/api/conditions", methods=["GET"])
def api_conditions():
    return jsonify(load_state().summary())


@app.route("/search", methods=["POST"])
def search():
    query = request.form.get("location", "")
    if not query.strip():
        return redirect(url_for("index"))

    state = load_state()
    resolver = make_resolver(state)
    app.logger.info("Resolving location %r...", query.strip())
    if resolver.search(query):
        save_state(state)
    else:
        flash(resolver.error_message, "error")
    return redirect(url_for("index"))


@app.route("/locate", methods=["POST"])
def locate():
    state = load_state()
    resolver = make_resolver(state)
    app.logger.info("Resolving device position...")
    if resolver.locate(BrowserGeolocation.from_form(request.form)):
        save_state(state)
    else:
        flash(resolver.error_message, "error")
    return redirect(url_for("index"))


@app.route("/conditions", methods=["POST"])
def conditions():
    """Manual override of air temperature, humidity and wind, in the active units."""
    try:
        temperature = parse_number(request.form.get("temperature"))
        humidity = parse_number(request.form.get("humidity"))
        wind = parse_number(request.form.get("wind"))
    except ValueError:
        flash("Temperature, humidity and wind must be numbers.", "error")
        return redirect(url_for("index"))

    state = load_state()
    # The form re-posts every field; only the edited ones are written back
    if temperature is not None and temperature != state.air_temperature:
        state.set_temperature(temperature)
    if humidity is not None and humidity != state.humidity:
        state.set_humidity(humidity)
    if wind is not None and wind != state.wind_speed:
        state.set_wind(wind)
    save_state(state)
    return redirect(url_for("index"))


@app.route("/units", methods=["POST"])
def units():
    state = load_state()
    choice = request.form.get("units", "")
    try:
        state.set_unit_system(choice)
    except ValueError:
        flash(f"Unknown unit system '{choice}'.", "error")
        return redirect(url_for("index"))
    save_state(state)
    return redirect(url_for("index"))


if __name__ == "__main__":
    # For development only – use a proper WSGI server in production
    app.run(debug=True, host="0.0.0.0", port=5000)
