import logging

from flask import Flask, jsonify, request
from passgauge.config import DEFAULTS, load_config
from passgauge.charsets import CharacterClass
from passgauge.evaluator import analyze
from passgauge.generator import GenerationPolicy, InvalidPolicy, generate

logger = logging.getLogger(__name__)

app = Flask(__name__)

@app.route('/')
def home():
    return jsonify({
        "message": "PassGauge API is running"
    })

@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True) or {}
    cfg = load_config()
    length = data.get('length', cfg.get('length', DEFAULTS['length']))
    if isinstance(length, bool) or not isinstance(length, int):
        return jsonify({'error': 'length must be an integer'}), 400
    options = {
        CharacterClass.UPPERCASE: data.get('upper', cfg.get('upper', True)),
        CharacterClass.LOWERCASE: data.get('lower', cfg.get('lower', True)),
        CharacterClass.DIGIT: data.get('digits', cfg.get('digits', True)),
        CharacterClass.SYMBOL: data.get('symbols', cfg.get('symbols', True)),
    }
    policy = GenerationPolicy.of(
        length=length,
        classes=[cc for cc, enabled in options.items() if enabled],
        exclude_similar=bool(data.get('exclude_similar', cfg.get('exclude_similar', False))),
    )
    try:
        password = generate(policy)
    except InvalidPolicy as e:
        logger.info("rejected generation request: %s", e)
        return jsonify({'error': str(e)}), 400
    return jsonify({'password': password})

@app.route('/analyze', methods=['POST'])
def analyze_route():
    data = request.get_json(silent=True) or {}
    password = data.get('password', '')
    if not isinstance(password, str):
        return jsonify({'error': 'password must be a string'}), 400
    return jsonify(analyze(password).to_dict())

if __name__ == "__main__":
    app.run(debug=True)
