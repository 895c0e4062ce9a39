from flask import Flask, jsonify, redirect, render_template, request, url_for

from typegallery import logger as app_logger
from typegallery.controller import FetchController, Failed, Success, state_to_dict
from typegallery.errors import UnknownType
from typegallery.pokeapi import fetch_by_type
from typegallery.theme import badge_color, card_gradient, image_or_placeholder, theme_for
from typegallery.types import TYPES, type_color, type_label

app = Flask(__name__)

# one gallery, one owner of the fetch state
controller = FetchController(fetcher=fetch_by_type)

app.jinja_env.filters['labelize'] = type_label
app.jinja_env.filters['badge_color'] = badge_color
app.jinja_env.filters['or_placeholder'] = image_or_placeholder


@app.route('/toggle_logging')
def toggle_logging():
    app_logger.set_verbose(not app_logger.ENABLE_VERBOSE_LOGGING)
    state = "enabled" if app_logger.ENABLE_VERBOSE_LOGGING else "disabled"
    app_logger.log_action(f"Verbose logging {state}")
    return redirect(url_for('gallery', type=controller.selected_type or None))


@app.route('/')
@app.route('/gallery')
def gallery():
    # no ?type= just shows the current state; ?type= (even empty) is a selection
    if 'type' in request.args:
        controller.select(request.args.get('type', ''))

    state = controller.state
    records = state.records if isinstance(state, Success) else ()
    cards = [{"pokemon": r, "gradient": card_gradient(r.primary_type)} for r in records]

    return render_template(
        "gallery.html",
        all_types=TYPES,
        current_type=controller.selected_type,
        theme=controller.theme,
        state=state_to_dict(state),
        cards=cards,
        logging_enabled=app_logger.ENABLE_VERBOSE_LOGGING,
    )


@app.route('/api/types')
def api_types():
    return jsonify([{"name": t, "label": type_label(t), "color": type_color(t)} for t in TYPES])


@app.route('/api/theme')
def api_theme():
    return jsonify(theme_for(request.args.get('type')).to_dict())


@app.route('/api/pokemon/<type_name>')
def api_pokemon(type_name):
    """Run the same selection the gallery does and return it as JSON."""
    state = controller.select(type_name)
    payload = state_to_dict(state)
    if isinstance(state, Failed):
        return jsonify(payload), (400 if state.kind == UnknownType.kind else 502)
    if isinstance(state, Success):
        payload["cards"] = [card_gradient(r.primary_type).to_dict() for r in state.records]
    return jsonify(payload)


@app.route('/api/state')
def api_state():
    payload = state_to_dict(controller.state)
    payload["theme"] = controller.theme.to_dict()
    return jsonify(payload)


if __name__ == '__main__':
    app.run(debug=True)
