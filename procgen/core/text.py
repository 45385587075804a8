"""``{{token}}`` template substitution."""

from __future__ import annotations

import re
from typing import Any, Mapping

from procgen.core.errors import TemplateSubstitutionError

TOKEN_PATTERN = re.compile(r"\{\{(\w+)\}\}")
OPEN_DELIMITER = "{{"


def extract_template_variables(template: str) -> list[str]:
    """Return token names in order of first appearance, without duplicates."""
    seen: dict[str, None] = {}
    for match in TOKEN_PATTERN.finditer(template):
        seen.setdefault(match.group(1), None)
    return list(seen)


def substitute_template(template: str, variables: Mapping[str, Any]) -> str:
    """Replace every ``{{name}}`` in *template* with ``str(variables[name])``.

    Raises TemplateSubstitutionError if a token has no value or if the
    result still contains an opening delimiter.
    """
    missing = [name for name in extract_template_variables(template) if name not in variables]
    if missing:
        raise TemplateSubstitutionError(
            f"Unresolved template variables {missing} in {template!r}"
        )

    result = TOKEN_PATTERN.sub(lambda m: str(variables[m.group(1)]), template)
    if OPEN_DELIMITER in result:
        raise TemplateSubstitutionError(f"Residual delimiter after substitution: {result!r}")
    return result
