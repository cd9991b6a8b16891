"""Helpers for building conjugation drill questions.

This is the only part of the package that uses randomness. Every helper
takes an optional ``rng`` (e.g. ``random.Random(42)``); the module-level
``random`` functions are used when none is given.
"""

import logging
import random
from dataclasses import dataclass, field, replace

import jaconv

from .forms import VERB_TYPES, Form, Word, WordType, coerce_word_type
from .paradigm import conjugate
from .rules import explain_rule
from .verb import GODAN_MAPPINGS

logger = logging.getLogger(__name__)


PROMPT_MARKER = "？"

COMMON_DRILL_FORMS: tuple[Form, ...] = (
    Form.PRESENT,
    Form.PAST,
    Form.NEGATIVE,
    Form.PAST_NEGATIVE,
    Form.POLITE,
    Form.POLITE_PAST,
    Form.TE_FORM,
)

VERB_DRILL_FORMS: tuple[Form, ...] = COMMON_DRILL_FORMS + (Form.POTENTIAL, Form.CONDITIONAL)

# Endings glued onto the bare reading to make wrong answers. Any result that
# is a real form of the word, in kana, is dropped.
DISTRACTOR_ENDINGS = (
    "る", "た", "ない", "ます", "て", "れば",
    "った", "んだ", "いた", "かった", "くない", "です",
)

# Real forms of the same word offered as wrong answers
MAX_REAL_DISTRACTORS = 3


@dataclass(frozen=True, slots=True)
class DrillQuestion:
    """A multiple-choice conjugation question."""

    word: Word
    target_form: Form
    stem: str
    correct_answer: str
    options: list[str] = field(default_factory=list)
    rule: str = ""


def drill_forms_for(word_type: WordType | str) -> tuple[Form, ...]:
    """Candidate forms for a word class."""
    if coerce_word_type(word_type) in VERB_TYPES:
        return VERB_DRILL_FORMS
    return COMMON_DRILL_FORMS


def pick_drill_form(word_type: WordType | str, rng: random.Random | None = None) -> Form:
    """Pick a form to drill, uniformly from the class's candidates.

    Examples:
        >>> pick_drill_form("Ichidan", random.Random(0)) in VERB_DRILL_FORMS
        True
    """
    rng = rng or random
    return rng.choice(drill_forms_for(word_type))


def build_prompt_stem(word: Word, form: Form | str) -> str:
    """Build the fill-in-the-blank cue for a word.

    The cue is the reading minus its inflecting ending, followed by
    :data:`PROMPT_MARKER`. ``form`` does not change the stem.

    Examples:
        >>> build_prompt_stem(Word("食べる", "たべる", "Ichidan"), "past")
        'たべ？'
        >>> build_prompt_stem(Word("綺麗", "きれい", "na-adjective"), "past")
        'きれい？'
    """
    kana = word.kana

    match coerce_word_type(word.type):
        case WordType.ICHIDAN | WordType.I_ADJECTIVE:
            stem = kana[:-1]
        case WordType.GODAN:
            stem = kana[:-1] if jaconv.kata2hira(kana[-1:]) in GODAN_MAPPINGS else kana
        case _:
            stem = kana

    return stem + PROMPT_MARKER


def build_distractors(
    word: Word,
    correct_answer: str,
    rng: random.Random | None = None,
    count: int = 5,
) -> list[str]:
    """Build wrong answers for a drill question.

    Up to :data:`MAX_REAL_DISTRACTORS` come from the word's own table, the
    rest are the bare reading plus a common ending. None equals
    ``correct_answer`` and none repeats. A made-up candidate that spells a
    real form in kana (たべた for 食べた) is never used. Fewer than
    ``count`` are returned when the candidates run out.
    """
    rng = rng or random

    real_forms = sorted({
        value for value in conjugate(word).values()
        if value and value != correct_answer
    })
    k = min(MAX_REAL_DISTRACTORS, count, len(real_forms))
    distractors = rng.sample(real_forms, k)

    kana_forms = set(conjugate(replace(word, kanji=word.kana)).values())
    base = word.kana[:-1]
    malformed = [base + ending for ending in DISTRACTOR_ENDINGS]
    rng.shuffle(malformed)
    for candidate in malformed:
        if len(distractors) >= count:
            break
        if candidate in kana_forms or candidate == correct_answer:
            continue
        if candidate not in distractors:
            distractors.append(candidate)

    return distractors


def build_drill_question(
    word: Word,
    form: Form | str | None = None,
    rng: random.Random | None = None,
) -> DrillQuestion:
    """Build a multiple-choice question for one form of a word.

    Args:
        word: The word to drill
        form: Target form; picked with :func:`pick_drill_form` when omitted
        rng: Random source for form choice, distractors and option order

    Returns:
        The question. If the target form is empty for this word, the
        present form is asked instead.

    Raises:
        ValueError: If the word has no conjugations at all, or ``form`` is
            not a known form name
    """
    rng = rng or random

    target = pick_drill_form(word.type, rng) if form is None else Form(form)
    forms = conjugate(word)
    if not forms[target]:
        logger.debug("%s has no %s form, asking present instead", word.kanji, target)
        target = Form.PRESENT
    correct_answer = forms[target]
    if not correct_answer:
        raise ValueError(f"Nothing to drill for {word.kanji or word.kana!r} ({word.type})")

    options = [correct_answer, *build_distractors(word, correct_answer, rng)]
    rng.shuffle(options)

    return DrillQuestion(
        word=word,
        target_form=target,
        stem=build_prompt_stem(word, target),
        correct_answer=correct_answer,
        options=options,
        rule=explain_rule(word.type, target),
    )
