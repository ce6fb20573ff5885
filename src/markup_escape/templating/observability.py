"""OpenTelemetry tracing around template rendering."""

from collections.abc import Mapping
import hashlib
import time

from opentelemetry import trace

from markup_escape.templating.types import TemplateRenderer

tracer = trace.get_tracer(__name__)


def render_with_observability(
    template: object,
    variables: Mapping[str, object],
    renderer: TemplateRenderer,
) -> str:
    """Render template with OpenTelemetry tracing.

    Args:
        template: Template to render
        variables: Variable mapping
        renderer: Renderer instance

    Returns:
        Rendered string, as returned by the renderer

    """
    with tracer.start_as_current_span("markup.render") as span:
        start_time = time.perf_counter()

        span.set_attribute("markup.renderer", type(renderer).__name__)
        span.set_attribute("markup.escape_mode", renderer.escape_mode.value)
        span.set_attribute("markup.template_hash", _hash_template(template))
        span.set_attribute("markup.variable_count", len(variables) if variables else 0)

        result = renderer.render(template, variables)

        render_ms = (time.perf_counter() - start_time) * 1000
        span.set_attribute("markup.render_ms", render_ms)
        span.set_attribute("markup.result_length", len(result))

        return result


def _hash_template(template: object) -> str:
    """Generate hash of template for telemetry."""
    template_str = str(template)[:500]
    return hashlib.sha256(template_str.encode()).hexdigest()[:16]
