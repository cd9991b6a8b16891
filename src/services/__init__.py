"""Benkyou services module."""

from .forms import (
    CONJUGATABLE_TYPES,
    VERB_ONLY_FORMS,
    ConjugationForms,
    Form,
    Word,
    WordType,
    empty_forms,
)
from .paradigm import conjugate
from .rules import NO_RULE, explain_rule
from .drill import (
    DrillQuestion,
    build_distractors,
    build_drill_question,
    build_prompt_stem,
    pick_drill_form,
)
from .verb import GODAN_MAPPINGS, GodanMapping

__all__ = [
    # Forms and words
    "CONJUGATABLE_TYPES",
    "VERB_ONLY_FORMS",
    "ConjugationForms",
    "Form",
    "Word",
    "WordType",
    "empty_forms",
    # Engine
    "conjugate",
    "GODAN_MAPPINGS",
    "GodanMapping",
    # Rules
    "NO_RULE",
    "explain_rule",
    # Drills
    "DrillQuestion",
    "build_distractors",
    "build_drill_question",
    "build_prompt_stem",
    "pick_drill_form",
]
