"""Render rule resolution.

Label and value rendering is chosen from a table of :class:`RenderRule`
objects.  A formatter class declares its rules in a ``render_rules`` class
attribute; a rule matches on four dimensions:

* **formatter kind** -- the class that declared the rule, matched against
  the formatter's MRO;
* **field kind** -- a :class:`~rolodex.models.fields.ContactField` subclass
  matched against the subject's MRO, or :class:`FieldClass` for class-only
  subjects (labels of combined entries);
* **style** -- an exact :class:`~rolodex.models.entry.Style`, or ``None`` for
  any style (including no style);
* **record kind** -- a :class:`RecordKind` matched against the record's
  lineage, or ``None`` for any record.

Among matching rules the most specific wins, comparing the dimensions in
that order.  Equal rules keep declaration order.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

from rolodex.exceptions import DispatchError
from rolodex.models.entry import Style
from rolodex.models.fields import ContactField, FieldClass
from rolodex.models.records import Record, RecordKind

RuleTarget: TypeAlias = Literal["label", "value"]
Subject: TypeAlias = ContactField | FieldClass
RuleFn: TypeAlias = Callable[[Any, Any, Style | None, Record], str]
"""``fn(formatter, subject, style, record) -> str``"""

_Score: TypeAlias = tuple[int, int, int, int]


@dataclass(frozen=True, slots=True)
class RenderRule:
    """One label or value rendering rule."""

    target: RuleTarget
    fn: RuleFn
    field: type = ContactField
    style: Style | None = None
    record: RecordKind | None = None

    def specificity(
        self, subject_type: type, style: Style | None, kind: RecordKind
    ) -> tuple[int, int, int] | None:
        """Return the (field, style, record) distance, or ``None`` if the rule does not apply."""
        try:
            field_depth = subject_type.__mro__.index(self.field)
        except ValueError:
            return None

        if self.style is None:
            style_depth = 1
        elif self.style == style:
            style_depth = 0
        else:
            return None

        lineage = kind.lineage
        if self.record is None:
            record_depth = len(lineage)
        elif self.record in lineage:
            record_depth = lineage.index(self.record)
        else:
            return None

        return field_depth, style_depth, record_depth


def label_rule(
    field: type = ContactField,
    style: Style | None = None,
    record: RecordKind | None = None,
) -> Callable[[RuleFn], RenderRule]:
    """Decorator turning a function into a label :class:`RenderRule`."""

    def _wrap(fn: RuleFn) -> RenderRule:
        return RenderRule("label", fn, field=field, style=style, record=record)

    return _wrap


def value_rule(
    field: type = ContactField,
    style: Style | None = None,
    record: RecordKind | None = None,
) -> Callable[[RuleFn], RenderRule]:
    """Decorator turning a function into a value :class:`RenderRule`."""

    def _wrap(fn: RuleFn) -> RenderRule:
        return RenderRule("value", fn, field=field, style=style, record=record)

    return _wrap


@functools.cache
def _resolve(
    formatter_type: type,
    target: RuleTarget,
    subject_type: type,
    style: Style | None,
    kind: RecordKind,
) -> RenderRule | None:
    # Rules only depend on types, so resolution is cached per combination.
    for depth, owner in enumerate(formatter_type.__mro__):
        best: RenderRule | None = None
        best_score: _Score | None = None
        for rule in owner.__dict__.get("render_rules", ()):
            if rule.target != target:
                continue
            distance = rule.specificity(subject_type, style, kind)
            if distance is None:
                continue
            score = (depth, *distance)
            if best_score is None or score < best_score:
                best, best_score = rule, score
        if best is not None:
            return best
    return None


def resolve_rule(
    formatter: object,
    target: RuleTarget,
    subject: Subject,
    style: Style | None,
    record: Record,
) -> RenderRule:
    """Find the most specific rule for rendering *subject*.

    Raises:
        DispatchError: When no rule in the formatter's class hierarchy
            applies.
    """
    rule = _resolve(type(formatter), target, type(subject), style, record.record_kind)
    if rule is None:
        subject_name = subject.value if isinstance(subject, FieldClass) else type(subject).__name__
        msg = (
            f"No {target} rule in {type(formatter).__name__} for "
            f"{subject_name} (style={style}, record={record.kind})"
        )
        raise DispatchError(msg, target=target, subject=subject, style=style)
    return rule
