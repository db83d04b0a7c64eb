# app.py
import argparse
import json
import os
import sys
from datetime import datetime

from flask import Flask, request, jsonify

from content_optimizer.config import load_config, module_config
from content_optimizer.report import build_report
from content_optimizer.paste import html_to_markdown
from content_optimizer.improve import TextImprover, ImproverError, ImproverConfigError


def apply_env_overrides(config):
    """Fills improver credentials from the environment when the config leaves them unset."""
    improver_cfg = config.setdefault("TextImprover", {})
    env_key = os.environ.get("HUGGINGFACE_API_KEY")
    if env_key and not improver_cfg.get("api_key"):
        improver_cfg["api_key"] = env_key
    env_endpoint = os.environ.get("TEXT_IMPROVER_ENDPOINT")
    if env_endpoint and not improver_cfg.get("endpoint"):
        improver_cfg["endpoint"] = env_endpoint
    return config


# --- Flask App Setup ---
app = Flask(__name__)
# Replaced by run_cli once a --config file has been loaded
flask_app_config = apply_env_overrides(load_config())


class ContentOptimizer:
    def __init__(self, output_format="json", config=None):
        self.config = config if config else load_config()
        self.output_format = output_format
        self.report = {}
        self._improver = None

    def run_analysis(self, text, is_html=False):
        """
        Core analysis logic, callable by both CLI and API.
        is_html: convert pasted HTML to markdown before analyzing.
        """
        if is_html:
            text = html_to_markdown(text)
        self.report = build_report(text, self.config)
        self.report["source"] = {"characters": len(text), "convertedFromHtml": bool(is_html)}
        return self.report

    def improver(self):
        if self._improver is None:
            self._improver = TextImprover(config=module_config(self.config, "TextImprover"))
        return self._improver

    def improve_text(self, text):
        return self.improver().improve(text)

    def save_report_to_file(self, filename_prefix="content_report"):
        if not os.path.exists("reports"):
            os.makedirs("reports")
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"reports/{filename_prefix}_{timestamp}.{self.output_format}"
        try:
            with open(filename, "w") as f:
                if self.output_format == "json": json.dump(self.report, f, indent=4)
                else: f.write(format_summary(self.report))
            print(f"Report saved to {filename}")
            return filename
        except IOError as e:
            print(f"Error saving report: {e}")
            return None


def format_summary(report):
    summary = report.get("summary", {})
    lines = [
        "--- Analysis Summary ---",
        f"Timestamp: {report.get('analysisTimestamp')}",
        f"SEO Score: {summary.get('seoScore')}% ({summary.get('seoScoreBand')})",
        f"Readability: {summary.get('readabilityScore')} - {summary.get('readabilityVerdict')}",
        f"Grade: {summary.get('grade')} ({summary.get('gradeBand')})",
    ]
    lines.extend(summary.get("sentenceMessages", []))
    suggestions = report.get("SEOAnalyzer", {}).get("suggestions", [])
    if suggestions:
        lines.append("Suggestions:")
        lines.extend(f"  - {s}" for s in suggestions)
    return "\n".join(lines) + "\n"


def _request_payload():
    if request.method == 'GET':
        return request.args
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def _is_truthy(value):
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


# --- Flask Routes ---
@app.route('/analyze', methods=['POST', 'GET'])
def analyze_endpoint():
    data = _request_payload()
    if data is None:
        return jsonify({"error": "Invalid JSON payload"}), 400
    text = data.get('text')
    if text is None:
        return jsonify({"error": "text parameter is required"}), 400
    if not isinstance(text, str):
        return jsonify({"error": "text must be a string"}), 400

    optimizer = ContentOptimizer(config=flask_app_config)
    try:
        return jsonify(optimizer.run_analysis(text, is_html=_is_truthy(data.get('html', False))))
    except Exception as e:
        return jsonify({"error": f"An unexpected error occurred: {str(e)}"}), 500


@app.route('/improve', methods=['POST'])
def improve_endpoint():
    data = _request_payload()
    if data is None:
        return jsonify({"error": "Invalid JSON payload"}), 400
    text = data.get('text')
    if not isinstance(text, str) or not text.strip():
        return jsonify({"error": "text parameter is required"}), 400

    optimizer = ContentOptimizer(config=flask_app_config)
    try:
        return jsonify({"text": optimizer.improve_text(text)})
    except ImproverConfigError as ce:
        return jsonify({"error": str(ce)}), 503
    except ImproverError as ie:
        return jsonify({"error": str(ie)}), 502


def read_input(path):
    if path == "-" or path is None:
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def run_cli(argv=None):
    parser = argparse.ArgumentParser(description="SEO and readability analyzer for markdown content")
    parser.add_argument("file", nargs='?', default=None, help="Markdown file to analyze ('-' for stdin; omit to run in API/server mode).")
    parser.add_argument("--html", action="store_true", help="Treat the input as pasted HTML and convert it to markdown first.")
    parser.add_argument("--output", choices=["json", "txt"], default="json", help="Output format for the saved report.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file.")
    parser.add_argument("--save", action="store_true", help="Save the report under reports/.")
    parser.add_argument("--improve", action="store_true", help="Send the text to the improvement service and print the result.")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Host for API mode.")
    parser.add_argument("--port", type=int, default=5000, help="Port for API mode.")
    args = parser.parse_args(argv)

    global flask_app_config
    current_config = apply_env_overrides(load_config(args.config))
    flask_app_config = current_config

    # No input given: run the API server
    if args.file is None and sys.stdin.isatty():
        print(f"Starting Flask server on http://{args.host}:{args.port}/ (API mode)")
        app.run(host=args.host, port=args.port, debug=False)
        return 0

    try:
        text = read_input(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: could not read input: {e}")
        return 1

    optimizer = ContentOptimizer(output_format=args.output, config=current_config)
    if args.improve:
        try:
            print(optimizer.improve_text(html_to_markdown(text) if args.html else text))
            return 0
        except ImproverError as e:
            print(f"Error: {e}")
            return 1

    report = optimizer.run_analysis(text, is_html=args.html)
    print(format_summary(report))
    if args.save:
        optimizer.save_report_to_file()
    else:
        print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(run_cli())
