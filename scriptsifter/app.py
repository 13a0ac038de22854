"""
ScriptSifter Web Interface
Flask-based UI for scanning an uploaded or remote script and downloading the results.
"""

import os
import asyncio

from flask import Flask, render_template_string, request, jsonify, send_from_directory, abort

from scriptsifter.core.config import get_default_config
from scriptsifter.models import ScanRecord
from scriptsifter.pipelines.scan import ScanRunner
from scriptsifter.services.datastore import DataStore

app = Flask(__name__)
app.secret_key = os.environ.get('SESSION_SECRET', 'scriptsifter-dev-key')
app.config['OUTPUT_DIR'] = get_default_config().output_dir
app.config['MAX_CONTENT_LENGTH'] = get_default_config().fetch.max_source_size

DOWNLOADS = {
    'json': (DataStore.JSON_RESULTS_FILE, 'application/json'),
    'txt': (DataStore.TEXT_RESULTS_FILE, 'text/plain'),
}

MAIN_TEMPLATE = r'''
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>ScriptSifter - Script Recon</title>
    <style>
        :root {
            --bg-primary: #050810;
            --bg-card: #0d1320;
            --text-primary: #f0f4f8;
            --text-secondary: #8b9cb3;
            --accent-blue: #90caf9;
            --accent-yellow: #ffcc80;
            --accent-red: #ef9a9a;
            --border-color: #1e293b;
        }
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: 'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: var(--bg-primary);
            color: var(--text-primary);
            padding: 2rem;
        }
        h1 { margin-bottom: 1rem; }
        .card {
            background: var(--bg-card);
            border: 1px solid var(--border-color);
            border-radius: 8px;
            padding: 1rem;
            margin-bottom: 1rem;
        }
        .row { display: flex; gap: 0.5rem; align-items: center; margin-bottom: 0.5rem; }
        input[type=text] { flex: 1; padding: 0.5rem; background: #111827; color: inherit; border: 1px solid var(--border-color); }
        button, a.button {
            padding: 0.5rem 1rem;
            background: #1e3a5f;
            color: var(--text-primary);
            border: none;
            border-radius: 4px;
            cursor: pointer;
            text-decoration: none;
        }
        a.button.disabled { pointer-events: none; opacity: 0.4; }
        #status { color: var(--accent-blue); min-height: 1.5rem; }
        .grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(320px, 1fr)); gap: 1rem; }
        ul { list-style: decimal inside; font-family: monospace; word-break: break-all; }
        li.none { list-style: none; opacity: 0.7; }
        .muted { color: var(--text-secondary); }
    </style>
</head>
<body>
    <h1>ScriptSifter</h1>
    <div class="card">
        <div class="row">
            <input type="file" id="fileInput" accept=".js,.mjs,.cjs,.ts,.txt">
            <button id="scanFileBtn">Scan file</button>
        </div>
        <div class="row">
            <input type="text" id="urlInput" placeholder="https://example.com/static/app.js">
            <button id="scanUrlBtn">Scan URL</button>
        </div>
        <div id="status"></div>
        <div class="row">
            <a class="button disabled" id="downloadJsonBtn" href="#">Download JSON</a>
            <a class="button disabled" id="downloadTextBtn" href="#">Download TXT</a>
        </div>
    </div>
    <div class="grid">
        {% for key, title in sections %}
        <div class="card">
            <h3>{{ title }} (<span id="{{ key }}Count">0</span>)</h3>
            <ul id="{{ key }}List"><li class="none">(none)</li></ul>
        </div>
        {% endfor %}
    </div>
    {% if scans %}
    <div class="card">
        <h3>Previous scans</h3>
        <ul>
        {% for scan in scans %}
            <li class="muted">{{ scan.analyzed_at }} [{{ scan.source_type.value }}] {{ scan.source }}
            {% if scan.result %}- <a href="/download/{{ scan.scan_id }}/txt">txt</a> <a href="/download/{{ scan.scan_id }}/json">json</a>{% endif %}</li>
        {% endfor %}
        </ul>
    </div>
    {% endif %}
    <script>
        const statusEl = document.getElementById('status');

        function setStatus(msg, type) {
            statusEl.textContent = msg;
            statusEl.style.color = type === 'error' ? '#ef9a9a' : type === 'warn' ? '#ffcc80' : '#90caf9';
        }

        function setList(key, items) {
            const ul = document.getElementById(key + 'List');
            ul.innerHTML = '';
            document.getElementById(key + 'Count').textContent = items.length;
            if (!items.length) {
                const li = document.createElement('li');
                li.textContent = '(none)';
                li.className = 'none';
                ul.appendChild(li);
                return;
            }
            for (const v of items) {
                const li = document.createElement('li');
                li.textContent = v;
                ul.appendChild(li);
            }
        }

        function setDownloads(scanId) {
            for (const [id, fmt] of [['downloadJsonBtn', 'json'], ['downloadTextBtn', 'txt']]) {
                const a = document.getElementById(id);
                a.href = '/download/' + scanId + '/' + fmt;
                a.classList.remove('disabled');
            }
        }

        async function handle(responsePromise) {
            try {
                const res = await responsePromise;
                const body = await res.json();
                if (!body.success) {
                    setStatus(body.error, 'error');
                    return;
                }
                const r = body.data.result;
                setList('secrets', r.secrets.map(s => s.value));
                setList('urls', r.urls);
                setList('domains', r.domains);
                setList('paths', r.paths);
                if (body.data.scan_id) setDownloads(body.data.scan_id);
                setStatus('Analysis complete.', 'info');
            } catch (err) {
                setStatus('Request failed: ' + err, 'error');
            }
        }

        document.getElementById('scanFileBtn').addEventListener('click', () => {
            const input = document.getElementById('fileInput');
            if (!input.files || !input.files[0]) {
                setStatus('Please choose a .js file first.', 'warn');
                return;
            }
            const form = new FormData();
            form.append('file', input.files[0]);
            setStatus('Reading file "' + input.files[0].name + '"...', 'info');
            handle(fetch('/api/analyze-file', { method: 'POST', body: form }));
        });

        document.getElementById('scanUrlBtn').addEventListener('click', () => {
            const url = document.getElementById('urlInput').value.trim();
            if (!url) {
                setStatus('Please enter a JS file URL.', 'warn');
                return;
            }
            setStatus('Fetching ' + url + ' ...', 'info');
            handle(fetch('/api/analyze-url', {
                method: 'POST',
                headers: { 'Content-Type': 'application/json' },
                body: JSON.stringify({ url })
            }));
        });
    </script>
</body>
</html>
'''

SECTIONS = [
    ('secrets', 'Secrets'),
    ('urls', 'URLs'),
    ('domains', 'Domains'),
    ('paths', 'Paths'),
]


def get_runner() -> ScanRunner:
    return ScanRunner(silent_mode=True, output_dir=app.config['OUTPUT_DIR'])


def record_response(record: ScanRecord):
    if not record.success:
        return jsonify({'success': False, 'error': record.error})

    return jsonify({
        'success': True,
        'data': record.to_dict()
    })


@app.route('/')
def index():
    scans = DataStore(app.config['OUTPUT_DIR']).get_all_scans()[:20]
    return render_template_string(MAIN_TEMPLATE, sections=SECTIONS, scans=scans)


@app.route('/api/analyze-file', methods=['POST'])
def api_analyze_file():
    upload = request.files.get('file')
    if upload is None or not upload.filename:
        return jsonify({'success': False, 'error': 'Please choose a .js file first.'})

    try:
        raw_content = upload.read()
    except OSError as e:
        return jsonify({'success': False, 'error': f'Error reading file: {e}'})

    code = raw_content.decode('utf-8', errors='replace')
    record = get_runner().run_text(code, label=upload.filename)

    return record_response(record)


@app.route('/api/analyze-url', methods=['POST'])
def api_analyze_url():
    data = request.get_json(silent=True) or {}
    url = str(data.get('url', '')).strip()

    if not url:
        return jsonify({'success': False, 'error': 'Please enter a JS file URL.'})

    runner = get_runner()
    loop = asyncio.new_event_loop()
    try:
        record = loop.run_until_complete(runner.run_async(url))
    finally:
        loop.close()

    return record_response(record)


@app.route('/api/analyze-text', methods=['POST'])
def api_analyze_text():
    data = request.get_json(silent=True) or {}
    code = data.get('code')

    if not isinstance(code, str):
        return jsonify({'success': False, 'error': 'No code specified'})

    record = get_runner().run_text(code, label=str(data.get('name') or 'inline'))

    return record_response(record)


@app.route('/api/scans/<scan_id>', methods=['GET'])
def api_scan(scan_id):
    record = DataStore(app.config['OUTPUT_DIR']).load_scan(scan_id)
    if record is None:
        return jsonify({'success': False, 'error': 'Scan not found'}), 404
    return jsonify({'success': True, 'data': record.to_dict()})


@app.route('/download/<scan_id>/<fmt>')
def download(scan_id, fmt):
    if fmt not in DOWNLOADS:
        abort(404)

    filename, mimetype = DOWNLOADS[fmt]
    path = DataStore(app.config['OUTPUT_DIR']).get_results_path(scan_id, filename)
    if path is None:
        abort(404)

    return send_from_directory(
        os.path.abspath(path.parent), filename,
        mimetype=mimetype, as_attachment=True, download_name=filename
    )


def main():
    app.run(host='127.0.0.1', port=int(os.environ.get('PORT', 6789)), debug=False)


if __name__ == '__main__':
    main()
