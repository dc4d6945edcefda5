"""Flask app exposing quick query generation and execution."""

from flask import Flask, request, jsonify, Response, g, current_app
from werkzeug.exceptions import HTTPException
from typing import Any, Dict
import logging

from config import DB_CONFIG
from quick_builder import ExecutionFailure, json_select, json_insert, json_update, json_delete
from quickdb import SqlCon

app = Flask(__name__)
app.config['DB_CONFIG'] = dict(DB_CONFIG)
logger = logging.getLogger(__name__)

def get_db() -> SqlCon:
    """Get or create SqlCon instance in Flask context."""
    if 'db' not in g:
        cfg = current_app.config['DB_CONFIG']
        g.db = SqlCon(
            cfg['conn_str'],
            pool_size=cfg.get('pool_size', 5),
            pool_timeout=cfg.get('pool_timeout', 30),
            echo=cfg.get('echo', False),
            log_queries=cfg.get('log_queries', False),
        )
    return g.db

def get_payload() -> Dict[str, Any]:
    """JSON body of the request; anything else is rejected."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValueError('Expected a JSON object body')
    return payload

@app.errorhandler(ValueError)
def handle_value_error(e: ValueError) -> Response:
    """Handle malformed queries with 400 response."""
    return jsonify({'error': str(e), 'type': type(e).__name__}), 400

@app.errorhandler(ExecutionFailure)
def handle_execution_failure(e: ExecutionFailure) -> Response:
    """Handle statements the database refused with 400 response."""
    return jsonify({'error': str(e), 'type': type(e).__name__}), 400

@app.errorhandler(Exception)
def handle_general_error(e: Exception) -> Response:
    """Handle unexpected errors with 500 response."""
    if isinstance(e, HTTPException):
        return e
    logger.error(f'Server error: {e}')
    return jsonify({'error': 'Internal server error'}), 500

@app.route('/query/select', methods=['POST'])
def select_query():
    """Generate or execute SELECT query from JSON payload."""
    payload = get_payload()
    con = get_db()
    query = json_select(payload, con.builder)
    if not payload.get('execute', False):
        return jsonify(con.builder.preview(query))
    return jsonify({'result': con.run(query)})

@app.route('/query/insert', methods=['POST'])
def insert_query():
    """Generate or execute INSERT query from JSON payload."""
    payload = get_payload()
    con = get_db()
    query = json_insert(payload, con.builder)
    if not payload.get('execute', False):
        return jsonify(con.builder.preview(query))
    return jsonify({'status': 'success', 'rows_affected': con.run(query)})

@app.route('/query/update', methods=['POST'])
def update_query():
    """Generate or execute UPDATE query from JSON payload."""
    payload = get_payload()
    con = get_db()
    query = json_update(payload, con.builder)
    if not payload.get('execute', False):
        return jsonify(con.builder.preview(query))
    return jsonify({'status': 'success', 'rows_affected': con.run(query)})

@app.route('/query/delete', methods=['POST'])
def delete_query():
    """Generate or execute DELETE query from JSON payload."""
    payload = get_payload()
    con = get_db()
    query = json_delete(payload, con.builder)
    if not payload.get('execute', False):
        return jsonify(con.builder.preview(query))
    return jsonify({'status': 'success', 'rows_affected': con.run(query)})

@app.teardown_appcontext
def close_db(error):
    """Close SqlCon instance on app context teardown."""
    if 'db' in g:
        g.pop('db').close()

if __name__ == '__main__':
    app.run(debug=True)
