"""In-page scripts the core evaluates through ``BrowserPagePort.evaluate``.

Each script is a JavaScript function expression taking a single argument.
Scripts are addressed by ``name`` so test doubles can answer them without
running JavaScript.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PageScript:
    name: str
    source: str


JOB_CARD_IDS = PageScript(
    name="job_card_ids",
    source="""() => Array.from(document.querySelectorAll('.job-card-container'))
        .map((card) => card.getAttribute('data-job-id'))
        .filter(Boolean)""",
)

SCROLL_JOB_LIST = PageScript(
    name="scroll_job_list",
    source="""() => {
        const list = document.querySelector('div.scaffold-layout__list > div > ul');
        if (!list) return false;
        list.scrollIntoView();
        return true;
    }""",
)

SCROLL_PAGINATION = PageScript(
    name="scroll_pagination",
    source="""() => {
        const pagination = document.querySelector('.artdeco-pagination');
        if (pagination) pagination.scrollIntoView({ behavior: 'smooth', block: 'center' });
        return Boolean(pagination);
    }""",
)

# Next page button next to the active numbered indicator.
NEXT_PAGE_BY_INDICATOR = PageScript(
    name="next_page_by_indicator",
    source="""() => {
        const items = document.querySelectorAll(
            '.artdeco-pagination__pages .artdeco-pagination__indicator');
        const active = Array.from(items).find((item) => item.classList.contains('active'));
        if (!active) return null;
        const next = active.nextElementSibling;
        if (!next || next.tagName !== 'LI') return null;
        const button = next.querySelector('button');
        if (!button || button.disabled) return null;
        return button.getAttribute('aria-label');
    }""",
)

# Looser lookup through the active indicator's parent sibling.
NEXT_PAGE_BY_SIBLING = PageScript(
    name="next_page_by_sibling",
    source="""() => {
        const active = document.querySelector('.artdeco-pagination__indicator--number.active');
        if (!active || !active.parentElement) return null;
        const sibling = active.parentElement.nextElementSibling;
        if (!sibling) return null;
        const button = sibling.querySelector('button');
        if (!button || button.disabled) return null;
        return button.getAttribute('aria-label');
    }""",
)

COLLECT_FORM_FIELDS = PageScript(
    name="collect_form_fields",
    source="""(rootSelector) => {
        const root = document.querySelector(rootSelector);
        if (!root) return [];
        let seq = 0;
        const keyOf = (el) => {
            if (!el.dataset.easyApplyKey) {
                el.dataset.easyApplyKey = `ea-${Date.now()}-${seq++}`;
            }
            return el.dataset.easyApplyKey;
        };
        const labelOf = (el) => ((el.labels && el.labels[0]) ? el.labels[0].textContent : '').trim();
        const isRequired = (el) => el.required || el.getAttribute('aria-required') === 'true';
        const fields = [];

        root.querySelectorAll('input[type="text"], input[type="number"]').forEach((input) => {
            fields.push({
                key: keyOf(input),
                kind: input.type === 'number' ? 'number' : 'text',
                label: labelOf(input),
                placeholder: input.placeholder || '',
                ariaLabel: input.getAttribute('aria-label') || '',
                required: isRequired(input),
                currentValue: input.value || '',
                options: [],
            });
        });

        const groups = new Map();
        root.querySelectorAll('input[type="radio"]').forEach((radio) => {
            const name = radio.name || keyOf(radio);
            if (!groups.has(name)) {
                const legend = radio.closest('fieldset') && radio.closest('fieldset').querySelector('legend');
                groups.set(name, {
                    key: name,
                    kind: 'radio',
                    label: legend ? legend.textContent.trim() : '',
                    placeholder: '',
                    ariaLabel: '',
                    required: false,
                    currentValue: '',
                    options: [],
                });
            }
            const group = groups.get(name);
            group.options.push({ value: keyOf(radio), label: labelOf(radio), selected: radio.checked });
            if (radio.checked) group.currentValue = keyOf(radio);
            if (isRequired(radio)) group.required = true;
        });
        groups.forEach((group) => fields.push(group));

        root.querySelectorAll('select').forEach((select) => {
            fields.push({
                key: keyOf(select),
                kind: 'select',
                label: labelOf(select),
                placeholder: '',
                ariaLabel: select.getAttribute('aria-label') || '',
                required: isRequired(select),
                currentValue: select.value || '',
                options: Array.from(select.options).map((option) => ({
                    value: option.value,
                    label: option.text.trim(),
                    selected: option.selected,
                })),
            });
        });
        return fields;
    }""",
)

APPLY_FORM_ANSWERS = PageScript(
    name="apply_form_answers",
    source="""(answers) => {
        const byKey = (key) => document.querySelector(`[data-easy-apply-key="${key}"]`);
        const setter = Object.getOwnPropertyDescriptor(window.HTMLInputElement.prototype, 'value').set;
        let applied = 0;
        for (const answer of answers) {
            if (answer.kind === 'radio') {
                const radio = byKey(answer.value);
                if (radio) { radio.click(); applied++; }
                continue;
            }
            const el = byKey(answer.key);
            if (!el) continue;
            if (answer.kind === 'select') {
                el.value = answer.value;
                el.dispatchEvent(new Event('change', { bubbles: true }));
            } else {
                setter.call(el, answer.value);
                el.dispatchEvent(new Event('input', { bubbles: true }));
                el.dispatchEvent(new Event('change', { bubbles: true }));
            }
            applied++;
        }
        return applied;
    }""",
)

DATE_FILTER_APPLIED = PageScript(
    name="date_filter_applied",
    source="""() => {
        const pills = Array.from(document.querySelectorAll('.search-reusables__filter-pill'))
            .map((pill) => pill.textContent.toLowerCase());
        const hasPill = pills.some((text) =>
            text.includes('24') || text.includes('past day') || text.includes('hour'));
        return hasPill || window.location.href.includes('f_TPR=r86400');
    }""",
)

__all__ = [
    "PageScript",
    "JOB_CARD_IDS",
    "SCROLL_JOB_LIST",
    "SCROLL_PAGINATION",
    "NEXT_PAGE_BY_INDICATOR",
    "NEXT_PAGE_BY_SIBLING",
    "COLLECT_FORM_FIELDS",
    "APPLY_FORM_ANSWERS",
    "DATE_FILTER_APPLIED",
]
