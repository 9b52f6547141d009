from flask import Flask, jsonify, request

from passcheck.config import ConfigError, load_config, validate_policy
from passcheck.criteria import evaluate
from passcheck.messages import describe_session, headline
from passcheck.status import new_session, on_focus_lost, on_text_changed, reset, validate

app = Flask(__name__)

EVENT_TYPES = ("text", "focus_lost", "validate", "reset")


class BadRequest(Exception):
    pass


def _policy():
    return validate_policy(load_config())


def _payload():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BadRequest("request body must be a JSON object")
    return data


def _password(data):
    password = data.get('password')
    if not isinstance(password, str):
        raise BadRequest("'password' must be a string")
    return password


def _events(data):
    if 'events' not in data:
        return [{'type': 'text', 'text': _password(data)}, {'type': 'focus_lost'}]
    events = data['events']
    if not isinstance(events, list):
        raise BadRequest("'events' must be a list")
    for i, event in enumerate(events):
        if not isinstance(event, dict) or event.get('type') not in EVENT_TYPES:
            raise BadRequest(f"event #{i}: 'type' must be one of {', '.join(EVENT_TYPES)}")
        if event['type'] == 'text' and not isinstance(event.get('text'), str):
            raise BadRequest(f"event #{i}: 'text' must be a string")
    return events


def _replay(events, policy):
    session = new_session(policy)
    valid = None
    for event in events:
        kind = event['type']
        if kind == 'text':
            on_text_changed(session, event['text'])
        elif kind == 'focus_lost':
            valid = on_focus_lost(session)
        elif kind == 'validate':
            valid = validate(session)
        else:
            reset(session)
    return session, valid


@app.errorhandler(BadRequest)
def bad_request(e):
    return jsonify({'error': str(e)}), 400


@app.errorhandler(ConfigError)
def bad_config(e):
    app.logger.error("Invalid password policy: %s", e)
    return jsonify({'error': 'server password policy is invalid'}), 500


@app.route('/')
def home():
    return jsonify({
        "message": "PassCheck API is running"
    })


@app.route('/criteria', methods=['POST'])
def criteria_route():
    data = _payload()
    results = evaluate(_password(data), _policy())
    return jsonify({c.value: met for c, met in results.items()})


@app.route('/validate', methods=['POST'])
def validate_route():
    data = _payload()
    session, valid = _replay(_events(data), _policy())
    return jsonify({
        'live': session.live,
        'valid': valid,
        'headline': headline(session.policy),
        'criteria': [
            {
                'criterion': line['criterion'].value,
                'label': line['label'],
                'status': line['status'].value,
                'marker': line['marker'],
            }
            for line in describe_session(session)
        ],
    })


if __name__ == "__main__":
    app.run(debug=True)
