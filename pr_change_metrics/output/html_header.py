"""HTML header and footer generation for ChartPresenter."""

import html
from datetime import datetime

CHART_JS_URL = 'https://cdn.jsdelivr.net/npm/chart.js'


def _generate_html_header(self) -> str:
    """Generate HTML header with CSS styles and the Chart.js include."""
    timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    year_suffix = f' {self.year}' if self.year else ''

    return f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>PR Change Request Metrics{year_suffix}</title>
    <script src="{CHART_JS_URL}"></script>
    <style>
        * {{
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }}

        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
            line-height: 1.6;
            color: #333;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            padding: 20px;
            min-height: 100vh;
        }}

        .container {{
            max-width: 1400px;
            margin: 0 auto;
            background: white;
            border-radius: 12px;
            box-shadow: 0 20px 60px rgba(0, 0, 0, 0.3);
            padding: 40px;
        }}

        h1 {{
            color: #667eea;
            margin-bottom: 10px;
            font-size: 2.5em;
            text-align: center;
        }}

        .timestamp {{
            text-align: center;
            color: #666;
            font-size: 0.9em;
            margin-bottom: 30px;
        }}

        .charts-container {{
            display: flex;
            flex-direction: column;
            gap: 40px;
        }}

        .chart-card {{
            background: white;
            border-radius: 8px;
            box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
            padding: 20px;
        }}

        .chart-error {{
            color: red;
            padding: 20px;
        }}
    </style>
</head>
<body>
    <div class="container">
        <h1>PR Change Request Metrics{year_suffix}</h1>
        <div class="timestamp">Generated on {timestamp} from <strong>{html.escape(self.metrics_file)}</strong></div>
'''


def _generate_html_footer(self) -> str:
    """Generate closing HTML tags."""
    return '''    </div>
</body>
</html>
'''
