#!/usr/bin/env python3
"""
Flask Web Application for Tab Trace Analyzer
Provides a REST API endpoint for extracting page lifecycle timings from Chrome traces.
"""

import logging
import re

from flask import Flask, request, jsonify
from werkzeug.utils import secure_filename

from tab_trace import TraceConfig, TraceOfTabError, compute_trace_of_tab
from tab_trace.processors import TraceFileProcessor
from tab_trace.web import prepare_results

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = 500 * 1024 * 1024

ALLOWED_EXTENSIONS = {'json'}

def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


@app.route('/api/analyze', methods=['POST'])
def analyze_api():
    """
    API endpoint to analyze a trace file.
    Accepts: multipart/form-data with fields:
      - 'file': Chrome trace JSON file
      - 'include_events': 'true'|'false' (optional, default: 'false')
      - 'navigation_url_pattern': regex for accepted navigation URLs (optional)
    Returns: JSON with timings, timestamps and marker events
    """
    if 'file' not in request.files:
        return jsonify({'error': 'No file provided'}), 400

    file = request.files['file']

    if not file.filename:
        return jsonify({'error': 'No file selected'}), 400

    if not allowed_file(file.filename):
        return jsonify({'error': 'Invalid file type. Only JSON files are allowed.'}), 400

    include_events = request.form.get('include_events', 'false').lower() == 'true'
    url_pattern = request.form.get('navigation_url_pattern')
    if url_pattern:
        try:
            re.compile(url_pattern)
        except re.error as e:
            return jsonify({'error': f'Invalid navigation_url_pattern: {e}'}), 400
    config = TraceConfig(acceptable_navigation_url=url_pattern) if url_pattern else TraceConfig()

    filename = secure_filename(file.filename)

    try:
        trace = TraceFileProcessor().process_stream(file.stream)
        trace_of_tab = compute_trace_of_tab(trace, config=config)
    except TraceOfTabError as e:
        logger.info('Trace %s cannot be analyzed: %s', filename, e)
        return jsonify({'error': str(e), 'code': e.code}), 422
    except Exception as e:
        logger.exception('Unexpected error analyzing %s', filename)
        return jsonify({'error': str(e)}), 500

    results = prepare_results(trace_of_tab, include_events=include_events)
    results['filename'] = filename

    return jsonify(results)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True, host='0.0.0.0', port=5001)
