#!/usr/bin/env python3
"""
Web Playground API for Arith
Simple Flask server that evaluates terms via REST API.
"""

import os
import sys

# Add the python directory to path for arith imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
python_dir = os.path.join(project_root, "python")
if python_dir not in sys.path:
    sys.path.insert(0, python_dir)

from flask import Flask, request, jsonify, send_from_directory
from arith_cli import analyze, report_to_json
from arith_errors import ArithError, ParseError

web_dir = os.path.dirname(os.path.abspath(__file__))
app = Flask(__name__)

HOST = '0.0.0.0'
PORT = 5050


@app.route('/')
def index():
    """Serve the main playground HTML page."""
    return send_from_directory(web_dir, 'index.html')


@app.route('/api/eval', methods=['POST'])
def eval_term():
    """
    Evaluate a term and return the result.

    Request body: { "code": "pred succ succ 0" }

    Response: {
        "ok": true/false,
        "status": "value" | "stuck" | "error",
        "message": "...",
        "input": {...}, "depth": 3, "size": 4,   // if parsed
        "output": {...}, "value": 1               // if evaluated
    }
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'code' not in data:
        return jsonify({
            'ok': False,
            'status': 'error',
            'message': 'Missing "code" in request body'
        }), 400

    code = str(data['code']).strip()

    try:
        report = analyze(code)
    except ParseError as e:
        return jsonify({
            'ok': False,
            'status': 'error',
            'message': f'Parse error: {e}'
        })
    except ArithError as e:
        return jsonify({
            'ok': False,
            'status': 'error',
            'message': repr(e)
        })
    except RecursionError:
        app.logger.warning("Term too deep to evaluate (%d chars)", len(code))
        return jsonify({
            'ok': False,
            'status': 'error',
            'message': 'Term is nested too deeply'
        }), 413
    except Exception as e:
        app.logger.exception("Unexpected failure evaluating term")
        return jsonify({
            'ok': False,
            'status': 'error',
            'message': f'Internal error: {e}'
        }), 500

    response = report_to_json(report)
    if report['error'] is None:
        response['ok'] = True
        response['status'] = 'value'
        response['message'] = f"Evaluated to {report['output']!r}"
    else:
        response['ok'] = False
        response['status'] = 'stuck'
        response['message'] = f"Stuck term: no rule applies to {report['error'].term!r}"

    return jsonify(response)


@app.route('/api/examples', methods=['GET'])
def get_examples():
    """Return a list of example terms."""
    examples = [
        {'name': 'Predecessor', 'code': 'pred pred succ succ succ 0'},
        {'name': 'Zero Test', 'code': 'if iszero succ 0 then true else false'},
        {'name': 'Nested Conditional',
         'code': 'if iszero succ 0 then if iszero pred 0 then true else succ 0 else false'},
        {'name': 'Predecessor of Zero', 'code': 'pred 0'},
        {'name': 'Stuck Term', 'code': 'pred true'},
        {'name': 'Stuck Guard', 'code': 'if 0 then true else false'},
    ]
    return jsonify(examples)


if __name__ == '__main__':
    print("Arith Playground")
    print(f"   Open http://localhost:{PORT} in your browser")
    print()
    app.run(host=HOST, port=PORT, debug=True)
