"""HTML page for the invite lookup view."""

from __future__ import annotations

from typing import Optional

from jinja2 import Template

from .highlight import format_payload, highlight_html
from .phase import Error, Loading, Phase, Success

_PAGE_TEMPLATE = Template(
    """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>Discord Invite Info</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
            background: #000;
            color: #0ff;
            min-height: 100vh;
            padding: 32px;
            position: relative;
            overflow-x: hidden;
        }
        .grid {
            position: absolute;
            inset: 0;
            opacity: 0.2;
            background-image: linear-gradient(#0ff 1px, transparent 1px), linear-gradient(90deg, #0ff 1px, transparent 1px);
            background-size: 30px 30px;
            transform: perspective(500px) rotateX(60deg);
            transform-origin: center 0;
        }
        main { position: relative; z-index: 10; max-width: 672px; margin: 0 auto; }
        h1 {
            font-size: 48px;
            margin-bottom: 32px;
            text-align: center;
            color: #ff00ff;
            letter-spacing: 0.05em;
            text-shadow: 0 0 10px #ff00ff;
        }
        h1 span { color: #0ff; }
        .mono { font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace; }
        form { display: flex; gap: 16px; margin-bottom: 32px; }
        input {
            flex: 1;
            height: 48px;
            padding: 0 16px;
            background: #000;
            border: 2px solid #0ff;
            color: #0ff;
        }
        input:focus { outline: none; border-color: #ff00ff; box-shadow: 0 0 10px #ff00ff; }
        button {
            height: 48px;
            padding: 0 24px;
            background: #ff00ff;
            border: 2px solid #ff00ff;
            color: #000;
            font-weight: bold;
            cursor: pointer;
        }
        button:hover { background: #0ff; border-color: #0ff; box-shadow: 0 0 20px #0ff; }
        button:disabled { opacity: 0.5; cursor: not-allowed; }
        .error { border: 2px solid #ef4444; padding: 16px; margin-bottom: 32px; background: rgba(0,0,0,0.5); }
        .error p { color: #ef4444; }
        .result { border: 2px solid #0ff; background: rgba(0,0,0,0.8); padding: 24px; box-shadow: 0 0 20px #0ff; }
        .result-header { display: flex; justify-content: space-between; margin-bottom: 16px; }
        .result-header .filename { color: #ff00ff; }
        pre.json { white-space: pre-wrap; word-break: break-word; font-size: 14px; color: #0ff; }
        .token.string { color: #ff00ff; }
        .token.number { color: #f92aad; }
        .token.boolean, .token.null { color: #0ff; }
        .token.property { color: #00ff9f; }
    </style>
</head>
<body>
    <div class="grid"></div>
    <main>
        <h1>DISCORD<span> INVITE INFO</span></h1>
        <form id="inviteForm" method="post" action="{{ form_action }}">
            <input class="mono" type="text" name="invite" value="{{ input_code }}" placeholder="ENTER_INVITE_KEY" required>
            <button class="mono" type="submit" id="fetchButton"{% if loading %} disabled{% endif %}>{{ "LOADING..." if loading else "FETCH" }}</button>
        </form>
        {% if error %}
        <div class="error" id="error">
            <p class="mono">ERROR: {{ error }}</p>
        </div>
        {% endif %}
        {% if result %}
        <div class="result" id="result">
            <div class="result-header mono">
                <span class="filename">INVITE_DATA.json</span>
                <span class="timestamp">{{ fetched_at }}</span>
            </div>
            <pre class="json mono">{{ result }}</pre>
        </div>
        {% endif %}
    </main>
    {% if pushed_address %}
    <script>window.history.pushState(null, "", {{ pushed_address|tojson }});</script>
    {% endif %}
    <script>
        document.getElementById('inviteForm').addEventListener('submit', function () {
            var button = document.getElementById('fetchButton');
            button.disabled = true;
            button.textContent = 'LOADING...';
        });
    </script>
</body>
</html>""",
    autoescape=True,
)


def render_page(
    phase: Phase,
    *,
    input_code: str = "",
    form_action: str = "/",
    pushed_address: Optional[str] = None,
) -> str:
    """Render the page for a phase. Only the phase decides what is shown."""
    result = None
    fetched_at = None
    if isinstance(phase, Success):
        result = highlight_html(format_payload(phase.payload))
        fetched_at = phase.fetched_at.strftime("%H:%M:%S")

    return _PAGE_TEMPLATE.render(
        input_code=input_code,
        form_action=form_action,
        loading=isinstance(phase, Loading),
        error=phase.message if isinstance(phase, Error) else None,
        result=result,
        fetched_at=fetched_at,
        pushed_address=pushed_address if isinstance(phase, Success) else None,
    )
