from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from domain.models import FieldAnswer, FieldKind, FieldOption, FormDefaults, FormField

_EXPERIENCE_TOKENS = ("experience", "years")
_SALARY_TOKENS = ("salary",)
_PLACEHOLDER_OPTIONS = ("select an option", "choose an option", "sélectionnez une option")


class FieldPolicy:
    """
    Default answers for required inputs of the application dialog.

    Text and number inputs are filled only when required and still empty.
    Radio groups and dropdowns are answered when nothing is chosen yet.
    Matching is case-insensitive against label, placeholder and aria-label.
    """

    def __init__(
        self,
        *,
        defaults: FormDefaults | None = None,
        affirmative_tokens: Sequence[str] = ("yes",),
    ) -> None:
        self._defaults = defaults or FormDefaults()
        self._affirmative = tuple(t.lower() for t in affirmative_tokens if t)

    def answer_all(self, fields: Iterable[FormField]) -> list[FieldAnswer]:
        answers = []
        for item in fields:
            answer = self.answer(item)
            if answer is not None:
                answers.append(answer)
        return answers

    def answer(self, item: FormField) -> FieldAnswer | None:
        if item.kind is FieldKind.RADIO:
            return self._answer_radio(item)
        if item.kind is FieldKind.SELECT:
            return self._answer_select(item)
        if not item.required or item.current_value.strip():
            return None
        return FieldAnswer(key=item.key, kind=item.kind, value=self._text_value(item))

    def _text_value(self, item: FormField) -> str:
        descriptors = item.descriptors()
        if _mentions(descriptors, _EXPERIENCE_TOKENS):
            return str(self._defaults.experience_years)
        if _mentions(descriptors, _SALARY_TOKENS):
            return str(self._defaults.expected_salary)
        if item.kind is FieldKind.NUMBER:
            return str(self._defaults.numeric_fallback)
        return self._defaults.text_placeholder

    def _answer_radio(self, item: FormField) -> FieldAnswer | None:
        if any(option.selected for option in item.options):
            return None
        for option in item.options:
            if self._is_affirmative(option):
                return FieldAnswer(key=item.key, kind=FieldKind.RADIO, value=option.value)
        return None

    def _answer_select(self, item: FormField) -> FieldAnswer | None:
        real_options = [o for o in item.options if not _is_placeholder(o)]
        if any(o.selected and o.value == item.current_value for o in real_options):
            return None
        choice = next((o for o in real_options if self._is_affirmative(o)), None)
        if choice is None:
            choice = next(iter(real_options), None)
        if choice is None:
            return None
        return FieldAnswer(key=item.key, kind=FieldKind.SELECT, value=choice.value)

    def _is_affirmative(self, option: FieldOption) -> bool:
        label = option.label.lower()
        return any(token in label for token in self._affirmative)


def parse_form_fields(raw: Any) -> list[FormField]:
    """Turn the ``COLLECT_FORM_FIELDS`` script result into ``FormField``s."""
    fields: list[FormField] = []
    for entry in raw or ():
        if not isinstance(entry, Mapping):
            continue
        try:
            kind = FieldKind(entry.get("kind", ""))
        except ValueError:
            continue
        fields.append(
            FormField(
                key=str(entry.get("key", "")),
                kind=kind,
                label=str(entry.get("label") or ""),
                placeholder=str(entry.get("placeholder") or ""),
                aria_label=str(entry.get("ariaLabel") or ""),
                required=bool(entry.get("required")),
                current_value=str(entry.get("currentValue") or ""),
                options=tuple(
                    FieldOption(
                        value=str(opt.get("value") or ""),
                        label=str(opt.get("label") or ""),
                        selected=bool(opt.get("selected")),
                    )
                    for opt in entry.get("options") or ()
                ),
            )
        )
    return fields


def answers_to_payload(answers: Iterable[FieldAnswer]) -> list[dict[str, str]]:
    return [{"key": a.key, "kind": a.kind.value, "value": a.value} for a in answers]


def _mentions(descriptors: Sequence[str], tokens: Sequence[str]) -> bool:
    return any(token in text for text in descriptors for token in tokens)


def _is_placeholder(option: FieldOption) -> bool:
    return not option.value or option.label.strip().lower() in _PLACEHOLDER_OPTIONS
