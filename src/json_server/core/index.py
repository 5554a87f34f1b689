from html import escape

from json_server.core.registry import Registry
from json_server.models import EndpointDescriptor

_HTML_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>json-server endpoints</title>
</head>
<body>
<h1>Endpoints</h1>
{body}
</body>
</html>
"""


def render_index(registry: Registry) -> list[EndpointDescriptor]:
    """Describe every route of ``registry``, sorted by route name."""
    return registry.descriptors()


def render_index_html(registry: Registry) -> str:
    descriptors = render_index(registry)
    if not descriptors:
        return _HTML_TEMPLATE.format(body="<p>No endpoints available.</p>")
    items = "\n".join(
        f'<li><a href="{escape(d.path)}">{escape(d.path)}</a></li>' for d in descriptors
    )
    return _HTML_TEMPLATE.format(body=f"<ul>\n{items}\n</ul>")
