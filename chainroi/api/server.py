from __future__ import annotations
from typing import Any, Dict, Tuple
from flask import Flask, request, jsonify, Response
from chainroi.api.orchestrator import ARTIFACT_NAMES, build_artifacts, evaluate
from chainroi.config.env import SUPPORTED_CURRENCIES, ConfigError, get_api_config, get_report_config
from chainroi.inputs.assumptions import DEFAULT_INPUTS, InputSet
from chainroi.inputs.boundary import parse_inputs, to_percent_units

import io
import logging
import zipfile

import time
from collections import deque, defaultdict

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Configuration helpers (overridable via app.config in tests)

def _get_api_key() -> str | None:
    if 'API_KEY' in app.config:
        return app.config.get('API_KEY')
    return get_api_config().api_key


def _get_rate_limit() -> tuple[int, float]:
    cfg = get_api_config()
    n = app.config.get('RATE_LIMIT_N')
    w = app.config.get('RATE_LIMIT_WINDOW_SEC')
    if n is None:
        n = cfg.rate_limit_n
    if w is None:
        w = cfg.rate_limit_window_sec
    return int(n), float(w)


def _get_currency() -> str:
    cur = request.args.get('currency') or app.config.get('CURRENCY')
    if cur is None:
        return get_report_config().currency
    cur = str(cur).upper()
    if cur not in SUPPORTED_CURRENCIES:
        raise ValueError(f"unsupported currency: {cur}")
    return cur

_recent: dict[str, deque[float]] = defaultdict(lambda: deque(maxlen=100))


def _client_ip() -> str:
    xff = request.headers.get('X-Forwarded-For')
    if xff:
        return xff.split(',')[0].strip()
    return request.remote_addr or 'anon'


def _check_api_key():
    api_key = _get_api_key()
    if api_key:
        provided = request.headers.get('X-API-Key')
        if provided != api_key:
            return jsonify({'error': 'unauthorized'}), 401
    return None


def _evict_idle(now: float, window: float) -> None:
    # Forget clients whose newest request is outside the window
    for key in [k for k, dq in _recent.items() if not dq or now - dq[-1] > window]:
        del _recent[key]


def _check_rate_limit(ip: str):
    # Allow if rate limiting disabled or N <= 0
    n, window = _get_rate_limit()
    if n <= 0:
        return None
    now = time.time()
    _evict_idle(now, window)
    dq = _recent[ip]
    # Drop old entries outside window
    while dq and now - dq[0] > window:
        dq.popleft()
    if len(dq) >= n:
        retry = max(0.0, window - (now - dq[0]))
        logger.warning("rate limited %s (retry in %.2fs)", ip, retry)
        resp = jsonify({'error': 'rate_limited'})
        resp.status_code = 429
        resp.headers['Retry-After'] = f"{retry:.2f}"
        return resp
    dq.append(now)
    return None

@app.before_request
def _auth_and_rate_limit():
    # Only enforce for evaluation routes; /defaults stays open
    if request.path.startswith('/evaluate'):
        unauthorized = _check_api_key()
        if unauthorized is not None:
            return unauthorized
        if request.method == 'POST':
            rl = _check_rate_limit(_client_ip())
            if rl is not None:
                return rl
    return None


@app.errorhandler(ConfigError)
def _misconfigured(e: ConfigError):
    logger.error("server misconfigured: %s", e)
    return jsonify({'error': 'server_misconfigured', 'detail': str(e)}), 500


@app.errorhandler(ValueError)
def _bad_request(e: ValueError):
    logger.info("rejected payload on %s: %s", request.path, e)
    return jsonify({'error': str(e)}), 400


def _inputs_from_request() -> InputSet:
    payload = request.get_json(force=True, silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValueError("body must be a JSON object")
    units = payload.get('units', 'percent')
    raw: Dict[str, Any] = payload.get('inputs', {k: v for k, v in payload.items() if k != 'units'})
    if not isinstance(raw, dict):
        raise ValueError("inputs must be a JSON object")
    return parse_inputs(raw, units=units)


def _evaluate_request() -> Tuple[InputSet, Dict[str, str]]:
    inputs = _inputs_from_request()
    currency = _get_currency()
    return inputs, build_artifacts(inputs, evaluate(inputs), currency)


@app.get('/defaults')
def get_defaults():
    return jsonify({
        'inputs': to_percent_units(DEFAULT_INPUTS),
        'units': 'percent',
        'currencies': list(SUPPORTED_CURRENCIES),
        'currency': get_report_config().currency,
    })


@app.post('/evaluate')
def post_evaluate():
    inputs = _inputs_from_request()
    result = evaluate(inputs)
    logger.debug("evaluated %d stores: npv=%.2f payback=%s", inputs.store_count, result.npv, result.payback_years)
    return jsonify({**result.to_dict(), 'inputs': to_percent_units(inputs)})


@app.post('/evaluate/artifacts/<name>')
def post_artifact(name: str):
    if name not in ARTIFACT_NAMES:
        return jsonify({'error': 'artifact_not_found'}), 404
    _, artifacts = _evaluate_request()
    body = artifacts[name]
    if name.endswith('.csv'):
        mimetype = 'text/csv'
    elif name.endswith('.md'):
        mimetype = 'text/markdown'
    else:
        mimetype = 'application/octet-stream'
    return Response(body, mimetype=mimetype)


@app.post('/evaluate/download.zip')
def download_zip():
    _, artifacts = _evaluate_request()
    mem = io.BytesIO()
    with zipfile.ZipFile(mem, mode='w', compression=zipfile.ZIP_DEFLATED) as zf:
        for name, body in artifacts.items():
            zf.writestr(name, body)
    mem.seek(0)
    return Response(mem.getvalue(), mimetype='application/zip', headers={
        'Content-Disposition': 'attachment; filename="chain_roi.zip"'
    })


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    get_report_config()  # fail fast on a bad CHAINROI_CURRENCY
    app.run(host='0.0.0.0', port=8000)
