"""Ordered keyword rules mapping event titles to categories.

Rules are evaluated top to bottom over the lower-cased title and the first
matching rule wins, so broad rules (``work``) sit below the specific ones
they would otherwise swallow (``workout``). Matching is plain substring
containment: ``"date"`` also matches ``"update"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Callable, Optional, Union

from time_allocation import categories as cat


@dataclass(frozen=True)
class Contains:
    text: str

    def __call__(self, lower: str) -> bool:
        return self.text in lower

    def probes(self) -> tuple[str, ...]:
        return (self.text,)


@dataclass(frozen=True)
class AnyOf:
    terms: tuple

    def __call__(self, lower: str) -> bool:
        return any(term(lower) for term in self.terms)

    def probes(self) -> tuple[str, ...]:
        return tuple(probe for term in self.terms for probe in term.probes())


@dataclass(frozen=True)
class AllOf:
    terms: tuple

    def __call__(self, lower: str) -> bool:
        return all(term(lower) for term in self.terms)

    def probes(self) -> tuple[str, ...]:
        positive = [term.probes() for term in self.terms if term.probes()]
        if not positive:
            return ()
        return tuple(" ".join(parts) for parts in product(*positive))


@dataclass(frozen=True)
class Excluding:
    term: Callable[[str], bool]

    def __call__(self, lower: str) -> bool:
        return not self.term(lower)

    def probes(self) -> tuple[str, ...]:
        return ()


Term = Union[str, Contains, AnyOf, AllOf, Excluding]


def _coerce(term: Term):
    return Contains(term) if isinstance(term, str) else term


def contains(text: str) -> Contains:
    return Contains(text)


def any_of(*terms: Term) -> AnyOf:
    return AnyOf(tuple(_coerce(term) for term in terms))


def all_of(*terms: Term) -> AllOf:
    return AllOf(tuple(_coerce(term) for term in terms))


def excluding(term: Term) -> Excluding:
    return Excluding(_coerce(term))


@dataclass(frozen=True)
class Rule:
    """A category paired with the predicate that claims a title for it."""

    category: str
    predicate: Callable[[str], bool]

    def matches(self, lower: str) -> bool:
        return self.predicate(lower)


@dataclass(frozen=True)
class Shadow:
    """A rule keyword claimed by an earlier rule of another category."""

    category: str
    keyword: str
    claimed_by: str


class UnknownRuleSetError(KeyError):
    """Raised when a rule set name is not registered."""


FINAL_RULES = (
    Rule(
        cat.EXERCISE,
        any_of(
            "workout", "saturday stairs", "november project", "hike", "yoga", "sculpt",
            "vinyasa", "run", "walk to", "walk from", "weflowhard", "fitness:",
        ),
    ),
    Rule(
        cat.STAND_UP_PRODUCTION,
        any_of("coffee with david lee", "stand up", "hoopla", "open mic", "hype mic", "comedy"),
    ),
    Rule(
        cat.SOCIAL,
        any_of(
            "joel", "date", "dinner with kendall", "hang with", "church", "hannah", "alison",
            "philharmonic", "wicked", "harry potter", "funny games",
        ),
    ),
    Rule(
        cat.WIS_PRODUCTION,
        any_of("meet simone", "business plan", "wis", "post on linkedin", "women in stem"),
    ),
    Rule(
        cat.UCLA,
        any_of("ucla", "watch tms", "watch veep", "abbott elementary", "tv"),
    ),
    Rule(
        cat.FAMILY,
        any_of(
            "travel", "flight", "thanksgiving", "family time", "get nails done", "mm weekly",
            "fort lauderdale", "fll", "pool/sauna", "black friday", "drive rachel",
            "drive allie", "talk to mom",
        ),
    ),
    Rule(
        cat.JOB_SEARCH,
        any_of(
            "update linkedin", "job app", "resume", "job search", "kustomer",
            all_of("pro dev", "tyler"),
        ),
    ),
    Rule(
        cat.PERSONAL_WRITING,
        any_of("blog writing", "write: blog", all_of("write", excluding("ucla"))),
    ),
    Rule(cat.PERSONAL_DEVELOPMENT, any_of("journal")),
    Rule(
        cat.DECISION_STRESS,
        any_of("gift shopping", "plane ticket", "buy plane", "re-think"),
    ),
    Rule(
        cat.ERRANDS_CHORES,
        any_of(
            "grocery", "trader joe", "food pantry", all_of("shopping", excluding("gift")),
            "laundry", "clean room", "bargain basket", "lunch", "breakfast",
            all_of("dinner", excluding("kendall")), "cook", "meal", "doctor",
            "tia appointment", "appt",
        ),
    ),
    Rule(
        cat.PLAY,
        any_of("play:", "marten", "susan", "coaching session"),
    ),
    Rule(
        cat.WORK,
        any_of(
            all_of("work", excluding("walk"), excluding("workout")),
            all_of("meeting", excluding("play")),
            "touchpoint", "sync", "workshop", "prep for 1:1",
        ),
    ),
)

# Second revision: no decision stress, no meals or appointments under
# errands, and "workout" still falls through to work.
V2_RULES = (
    Rule(
        cat.EXERCISE,
        any_of(
            "saturday stairs", "november project", "hike", "yoga", "sculpt", "vinyasa",
            "run", "walk to", "walk from", "weflowhard", "fitness:",
        ),
    ),
    *FINAL_RULES[1:9],
    Rule(
        cat.ERRANDS_CHORES,
        any_of(
            "grocery", "trader joe", "food pantry", all_of("shopping", excluding("gift")),
            "laundry", "clean room", "bargain basket",
        ),
    ),
    FINAL_RULES[11],
    Rule(
        cat.WORK,
        any_of(
            all_of("work", excluding("walk")),
            all_of("meeting", excluding("play")),
            "touchpoint", "sync", "workshop",
        ),
    ),
)

# First revision: job hunting counted as work, no family or errands.
V1_RULES = (
    Rule(
        cat.WORK,
        any_of(
            all_of("work", excluding("walk")),
            all_of("meeting", excluding("play")),
            "touchpoint", "sync", "job app", "resume", "kustomer",
        ),
    ),
    Rule(cat.PLAY, any_of("play:", "marten", "susan")),
    Rule(cat.UCLA, any_of("ucla")),
    Rule(
        cat.EXERCISE,
        any_of("yoga", "sculpt", "vinyasa", "run", "walk to", "walk from", "weflowhard"),
    ),
    Rule(
        cat.SOCIAL,
        any_of("hang with", "coffee with", "church", "hannah", "alison", "david lee"),
    ),
    Rule(cat.BUSINESS_PLANNING, any_of("business plan", "wis")),
    Rule(cat.COMEDY, any_of("stand up", "hoopla", "open mic", "comedy")),
)

RULESETS = {
    "v1": V1_RULES,
    "v2": V2_RULES,
    "final": FINAL_RULES,
}

CANONICAL_RULESET = "final"


def get_ruleset(name: str) -> tuple[Rule, ...]:
    """Return the registered rule set called ``name``."""

    try:
        return RULESETS[name]
    except KeyError:
        raise UnknownRuleSetError(f"Unknown rule set '{name}', expected one of {sorted(RULESETS)}") from None


def categories_for(rules: tuple[Rule, ...]) -> list[str]:
    """List the categories a rule set can produce, in report order."""

    produced = {rule.category for rule in rules}
    ordered = [category for category in cat.CATEGORIES if category in produced]
    for rule in rules:
        if rule.category not in ordered:
            ordered.append(rule.category)
    ordered.append(cat.MISCELLANEOUS)
    return ordered


def categorize(title: Optional[str], rules: Optional[tuple[Rule, ...]] = None) -> str:
    """Return the category of the first rule matching ``title``."""

    if rules is None:
        rules = FINAL_RULES
    lower = (title or "").lower()
    if not lower:
        return cat.MISCELLANEOUS

    for rule in rules:
        if rule.matches(lower):
            return rule.category
    return cat.MISCELLANEOUS


def shadowed_keywords(rules: Optional[tuple[Rule, ...]] = None) -> list[Shadow]:
    """Probe every rule keyword through the chain and report the ones lost to earlier rules."""

    if rules is None:
        rules = FINAL_RULES

    shadows = []
    for rule in rules:
        for keyword in rule.predicate.probes():
            claimed_by = categorize(keyword, rules)
            if claimed_by != rule.category:
                shadows.append(Shadow(category=rule.category, keyword=keyword, claimed_by=claimed_by))
    return shadows


def dead_rules(rules: Optional[tuple[Rule, ...]] = None) -> list[str]:
    """Return categories whose every keyword is claimed by an earlier rule."""

    if rules is None:
        rules = FINAL_RULES

    shadowed = {}
    for shadow in shadowed_keywords(rules):
        shadowed.setdefault(shadow.category, set()).add(shadow.keyword)

    return [
        rule.category
        for rule in rules
        if rule.predicate.probes() and set(rule.predicate.probes()) <= shadowed.get(rule.category, set())
    ]
