"""Pattern rules that read a parameter score out of AI analysis text.

Each rule is a regex template with a fixed confidence tier. Rules are tried
in order and the first one that both matches and yields a valid SNI score
(an integer 1-9) wins. New AI output formats are supported by adding a rule
to ``DEFAULT_RULES``; nothing downstream needs to change.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional, Pattern

from loguru import logger

from analysis.models import HIGH, LOW, MEDIUM
from core.error_handler import handle_exceptions

# Condition words the inline rules accept next to a score.
CONDITION_KEYWORDS = (
    "segar", "jernih", "mengkilap", "merah", "cerah", "baik", "prima", "elastis",
    "halus", "lembut", "kusam", "keruh", "pucat", "kasar", "keras", "cembung",
    "rata", "cekung", "transparan", "abu", "coklat",
)

_KEYWORD_ALTERNATION = "|".join(CONDITION_KEYWORDS)


def is_valid_score(score: Optional[int]) -> bool:
    return score is not None and 1 <= score <= 9


@lru_cache(maxsize=None)
def _compile(template: str, param: str) -> Pattern[str]:
    regex = template.replace("{param}", re.escape(param)).replace("{keywords}", _KEYWORD_ALTERNATION)
    return re.compile(regex, re.IGNORECASE)


@dataclass(frozen=True)
class RuleMatch:
    """Values captured by a matching rule."""
    rule: str
    score: int
    condition: Optional[str]
    justification: Optional[str]
    confidence: str


@dataclass(frozen=True)
class PatternRule:
    """A regex template for one text layout.

    ``{param}`` in the template is replaced by the escaped parameter name and
    ``{keywords}`` by the condition keyword alternation. Group indexes point at
    the captured score, condition and justification.
    """
    name: str
    template: str
    score_group: int
    confidence: str
    condition_group: Optional[int] = None
    justification_group: Optional[int] = None

    def pattern(self, param: str) -> Pattern[str]:
        return _compile(self.template, param)

    def apply(self, text: str, param: str) -> Optional[RuleMatch]:
        """Match against ``text``; None unless a valid score was captured."""
        match = self.pattern(param).search(text)
        if not match:
            return None

        try:
            score = int(match.group(self.score_group))
        except (TypeError, ValueError):
            return None
        if not is_valid_score(score):
            logger.debug(f"Rule '{self.name}' found out-of-range score {score} for {param}")
            return None

        return RuleMatch(
            rule=self.name,
            score=score,
            condition=self._group_text(match, self.condition_group),
            justification=self._group_text(match, self.justification_group),
            confidence=self.confidence,
        )

    @staticmethod
    def _group_text(match: re.Match, group: Optional[int]) -> Optional[str]:
        if group is None:
            return None
        value = match.group(group)
        if value is None:
            return None
        value = value.strip().strip("*").strip()
        return value or None


DEFAULT_RULES = (
    # | **Mata** | Visual | jernih | 8 | High |
    PatternRule(
        name="bold_table_row",
        template=r"\*\*{param}\*\*.*?\|.*?\|(.*?)\|.*?(\d+).*?\|(.*?)\|",
        score_group=2,
        condition_group=1,
        justification_group=3,
        confidence=HIGH,
    ),
    # | Mata | jernih, cembung | 8 | segar |
    PatternRule(
        name="table_row",
        template=r"\|.*?{param}.*?\|(.*?)\|.*?(\d+).*?\|(.*?)\|",
        score_group=2,
        condition_group=1,
        justification_group=3,
        confidence=HIGH,
    ),
    # Mata: skor 8, jernih
    PatternRule(
        name="score_then_condition",
        template=r"{param}[^\d]{0,200}(\d+)[^\w]{0,20}({keywords})",
        score_group=1,
        condition_group=2,
        confidence=MEDIUM,
    ),
    # Mata jernih dengan skor 8
    PatternRule(
        name="condition_then_score",
        template=r"{param}[^\w]{0,20}({keywords})[^\d]{0,200}(\d+)",
        score_group=2,
        condition_group=1,
        confidence=MEDIUM,
    ),
    # Mata ... 8
    PatternRule(
        name="first_number",
        template=r"{param}[\s\S]{0,300}?(\d+)",
        score_group=1,
        confidence=LOW,
    ),
)


@handle_exceptions(default_return=None, message="Pattern rule failed")
def _apply_rule(rule: PatternRule, text: str, param: str) -> Optional[RuleMatch]:
    return rule.apply(text, param)


def match_parameter(text: str, param: str, rules: Iterable[PatternRule] = DEFAULT_RULES) -> Optional[RuleMatch]:
    """Run the rule cascade for one parameter; None when every rule fails."""
    for rule in rules:
        result = _apply_rule(rule, text, param)
        if result is not None:
            logger.debug(f"Found score {result.score} for {param} using rule '{rule.name}'")
            return result
    return None
