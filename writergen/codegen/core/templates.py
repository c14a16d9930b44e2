"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from typing import Any, Dict

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self):
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        self._env = Environment(
            loader=DictLoader({}),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

        self._env.filters["comment"] = self._comment_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        self._env.loader.mapping[name] = content

    # Template filters for code generation

    def _comment_filter(self, value: str, style: str = "#") -> str:
        """Add comment markers to each line."""
        lines = str(value).split("\n")
        return "\n".join(f"{style} {line}" if line.strip() else style for line in lines)


# Aggregate file with forward declarations of all writers and the statements
# that load them. Stubs and load statements share the same order.
RUBY_WRITERS_TEMPLATE = """\
##
{{ banner | comment }}
#
{% for segment in module_segments %}
{{ indent * loop.index0 }}module {{ segment }}
{% endfor %}

{{ body_indent }}class {{ base_class }} # :nodoc:
{{ body_indent }}end

{% for class_name in class_names %}
{{ body_indent }}class {{ class_name }} < {{ base_class }} # :nodoc:
{{ body_indent }}end

{% endfor %}
{% for segment in module_segments | reverse %}
{{ indent * ((module_segments | length) - loop.index) }}end
{% endfor %}

##
{{ "Load all the writers." | comment }}
#
{% for file_name in load_files %}
load '{{ file_name }}{{ extension }}'
{% endfor %}
"""

_default_engine = None


def get_default_template_engine() -> TemplateEngine:
    """Get the default template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()
        _default_engine.add_template("writers.rb", RUBY_WRITERS_TEMPLATE)
    return _default_engine
