"""
URL template pattern matcher.

Compiles endpoint URL templates such as ``/api/v1/questions/:questionnaire_id``
or ``/api/v1/questions/{questionnaire_id}`` into anchored matchers.

A template is split on ``/`` into tagged segments. Literal segments match
themselves exactly (regex metacharacters are escaped); parameter segments
match one or more characters other than ``/``. The compiled pattern must match
the whole path, so ``/questions/:id`` matches ``/questions/42`` but neither
``/questions/42/options`` nor ``/questions``. Trailing slashes are significant:
``/roles`` and ``/roles/`` are different paths.
"""

import enum
import re
from dataclasses import dataclass, field

from questionnaire_api.domain.exceptions import MalformedTemplateError

_PARAM_VALUE = "[^/]+"


class SegmentKind(str, enum.Enum):
    LITERAL = "literal"
    PARAMETER = "parameter"


@dataclass(frozen=True)
class Segment:
    """One ``/``-delimited piece of a template."""

    kind: SegmentKind
    value: str

    def to_regex(self) -> str:
        if self.kind is SegmentKind.PARAMETER:
            return f"(?P<{self.value}>{_PARAM_VALUE})"
        return re.escape(self.value)


@dataclass(frozen=True)
class CompiledTemplate:
    """A template compiled into an anchored regular expression."""

    template: str
    segments: tuple[Segment, ...]
    pattern: re.Pattern[str] = field(repr=False, compare=False)

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(s.value for s in self.segments if s.kind is SegmentKind.PARAMETER)

    @property
    def shape(self) -> tuple[str | None, ...]:
        """
        The segments with parameter names erased.

        Templates with equal shapes match exactly the same paths, e.g.
        ``/x/:id`` and ``/x/{item_id}``.
        """
        return tuple(
            None if s.kind is SegmentKind.PARAMETER else s.value for s in self.segments
        )

    def match(self, path: str) -> dict[str, str] | None:
        """
        Match a concrete path against the template.

        Returns:
            The bound parameters (empty for a literal template), or None if the
            path does not match
        """
        m = self.pattern.fullmatch(path)
        if m is None:
            return None
        return m.groupdict()

    def matches(self, path: str) -> bool:
        return self.pattern.fullmatch(path) is not None


def _parse_segment(template: str, raw: str) -> Segment:
    if raw.startswith(":"):
        name = raw[1:]
        if not name.isidentifier():
            raise MalformedTemplateError(template, f"invalid parameter name {name!r}")
        return Segment(SegmentKind.PARAMETER, name)

    if raw.startswith("{"):
        if not raw.endswith("}") or raw.count("{") != 1 or raw.count("}") != 1:
            raise MalformedTemplateError(template, f"unbalanced braces in segment {raw!r}")
        name = raw[1:-1]
        if not name.isidentifier():
            raise MalformedTemplateError(template, f"invalid parameter name {name!r}")
        return Segment(SegmentKind.PARAMETER, name)

    if "{" in raw or "}" in raw:
        raise MalformedTemplateError(template, f"unbalanced braces in segment {raw!r}")
    if ":" in raw:
        raise MalformedTemplateError(
            template, f"parameter marker inside literal segment {raw!r}"
        )
    return Segment(SegmentKind.LITERAL, raw)


def parse_template(template: str) -> tuple[Segment, ...]:
    """
    Split a template into tagged segments.

    Raises:
        MalformedTemplateError: If the template cannot be parsed
    """
    if not template.startswith("/"):
        raise MalformedTemplateError(template, "template must start with '/'")

    segments = tuple(_parse_segment(template, raw) for raw in template[1:].split("/"))

    seen: set[str] = set()
    for segment in segments:
        if segment.kind is SegmentKind.PARAMETER:
            if segment.value in seen:
                raise MalformedTemplateError(
                    template, f"duplicate parameter name {segment.value!r}"
                )
            seen.add(segment.value)

    return segments


def compile_template(template: str) -> CompiledTemplate:
    """
    Compile a URL template into a matcher.

    Raises:
        MalformedTemplateError: If the template cannot be parsed
    """
    segments = parse_template(template)
    regex = "/" + "/".join(segment.to_regex() for segment in segments)
    return CompiledTemplate(template=template, segments=segments, pattern=re.compile(regex))
