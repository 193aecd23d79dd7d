from jinja2 import Template

REPORT_TEMPLATE = Template(
    """Products missing required tags:

{% for product_id in missing_ids -%}
{{ product_id }}
{% endfor %}
Store: {{ store_domain }}
Required tags (any of): {{ required_tags | join(", ") }}
Total: {{ missing_ids | length }}
""",
    keep_trailing_newline=True,
)


def build_report(missing_ids, store_domain, required_tags):
    """Render the plaintext email body, one product id per line."""
    return REPORT_TEMPLATE.render(
        missing_ids=missing_ids,
        store_domain=store_domain,
        required_tags=sorted(required_tags),
    )
