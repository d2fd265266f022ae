"""Browser-side chart rendering script for ChartPresenter."""

import json

from .presenter_base import CHART_COLORS, CHARTS


def _generate_chart_script(self) -> str:
    """Generate the script that fetches the artifact and draws the three charts.

    Any failure (missing canvas, failed fetch, invalid data) is reported as an
    inline error inside the charts container instead of breaking the page.
    """
    charts = [
        {
            'canvasId': canvas_id,
            'field': field_name,
            'title': title,
            'yAxisLabel': label,
            'color': CHART_COLORS[key],
        }
        for canvas_id, (key, (field_name, title, label)) in zip(self.canvas_ids, CHARTS.items())
    ]
    metrics_file_json = json.dumps(self.metrics_file)
    charts_json = json.dumps(charts, indent=4)

    return f'''    <script>
        const METRICS_FILE = {metrics_file_json};
        const CHARTS = {charts_json};

        async function loadJSON(file) {{
            console.log(`Attempting to load JSON from: ${{file}}`);
            const response = await fetch(file);
            if (!response.ok) {{
                throw new Error(`Could not load ${{file}}: ${{response.status}} ${{response.statusText}}`);
            }}
            const text = await response.text();
            return {{ data: JSON.parse(text), keys: topLevelKeys(text) }};
        }}

        // Object key order puts integer-like usernames first, so read the order from the file text
        function topLevelKeys(text) {{
            const keys = [];
            let depth = 0;
            for (let i = 0; i < text.length; i++) {{
                const ch = text[i];
                if (ch === '"') {{
                    let end = i + 1;
                    while (text[end] !== '"') {{
                        end += text[end] === '\\\\' ? 2 : 1;
                    }}
                    if (depth === 1 && /^\\s*:/.test(text.slice(end + 1))) {{
                        keys.push(JSON.parse(text.slice(i, end + 1)));
                    }}
                    i = end;
                }} else if (ch === '{{' || ch === '[') {{
                    depth++;
                }} else if (ch === '}}' || ch === ']') {{
                    depth--;
                }}
            }}
            return keys;
        }}

        function toNumber(value) {{
            const number = parseFloat(value);
            return isNaN(number) ? 0 : number;
        }}

        function renderBarChart(ctx, entries, title, yAxisLabel, color) {{
            // Sort [user, value] pairs in descending order; the sort is stable so ties keep file order
            const sortedData = entries.slice().sort(([, a], [, b]) => b - a);

            new Chart(ctx, {{
                type: 'bar',
                data: {{
                    labels: sortedData.map(([label]) => label),
                    datasets: [{{
                        data: sortedData.map(([, value]) => value),
                        backgroundColor: color.background,
                        borderColor: color.border,
                        borderWidth: 1
                    }}]
                }},
                options: {{
                    responsive: true,
                    plugins: {{
                        title: {{ display: true, text: title, font: {{ size: 16 }} }},
                        legend: {{ display: false }},
                        tooltip: {{
                            callbacks: {{
                                label: function (context) {{
                                    const value = context.parsed.y;
                                    return title.includes('%') ? `${{value}}%` : value.toString();
                                }}
                            }}
                        }}
                    }},
                    scales: {{
                        x: {{ title: {{ display: true, text: 'GitHub Username', font: {{ size: 14 }} }} }},
                        y: {{
                            beginAtZero: true,
                            title: {{ display: true, text: yAxisLabel, font: {{ size: 14 }} }}
                        }}
                    }}
                }}
            }});
        }}

        function showError(message) {{
            const container = document.querySelector('.charts-container');
            if (container) {{
                const errorBox = document.createElement('div');
                errorBox.className = 'chart-error';
                errorBox.textContent = `Error: ${{message}}`;
                container.appendChild(errorBox);
            }}
        }}

        document.addEventListener('DOMContentLoaded', async () => {{
            try {{
                const canvases = CHARTS.map(chart => document.getElementById(chart.canvasId));
                const missing = CHARTS.filter((chart, i) => !canvases[i]).map(chart => chart.canvasId);
                if (missing.length > 0) {{
                    throw new Error(`Missing canvas elements: ${{missing.join(' ')}}`);
                }}

                let metrics, users;
                try {{
                    const loaded = await loadJSON(METRICS_FILE);
                    metrics = loaded.data;
                    users = loaded.keys;
                }} catch (error) {{
                    throw new Error(`Failed to load data: ${{error.message}}`);
                }}

                if (!metrics || typeof metrics !== 'object' || Array.isArray(metrics)) {{
                    throw new Error(`Invalid data format in ${{METRICS_FILE}}`);
                }}

                CHARTS.forEach((chart, i) => {{
                    const entries = users
                        .filter(user => Object.prototype.hasOwnProperty.call(metrics, user))
                        .map(user => [user, toNumber((metrics[user] || {{}})[chart.field])]);
                    renderBarChart(canvases[i].getContext('2d'), entries, chart.title, chart.yAxisLabel, chart.color);
                }});
            }} catch (error) {{
                console.error('Error loading data or rendering charts:', error);
                showError(error.message);
            }}
        }});
    </script>
'''
