"""Jinja2 templates for the generated Kotlin modules."""

from typing import Callable

from jinja2 import Environment

R_TEMPLATE = """{{ header }}
package {{ package }}
{% for kind, bindings in groups %}

{{ keyword }} object R{{ kind.value }} {
{% for binding in bindings %}
    {{ binding.source }}
{% endfor %}
}
{% endfor %}
{% if shared %}

interface Rinterface {
    val string: Rstring
    val plurals: Rplurals
    val drawable: Rdrawable
}

val R: Rinterface get() = object : Rinterface {
    override val string get() = Rstring
    override val plurals get() = Rplurals
    override val drawable get() = Rdrawable
}
{% endif %}
"""

PLURAL_RULES_TEMPLATE = """{{ header }}
package {{ package }}

internal val pluralRules: Map<String, List<Pair<String, String>>> = mapOf(
{% for locale, rules in locales %}
    "{{ locale|literal }}" to listOf(
{% for category, condition in rules %}
        "{{ category|literal }}" to "{{ condition|literal }}",
{% endfor %}
    ),
{% endfor %}
)
"""


def make_environment(literal: Callable[[str], str]) -> Environment:
    """Create the template environment.

    Args:
        literal: Escaper exposed to templates as the ``literal`` filter.
    """
    env = Environment(
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["literal"] = literal
    return env
