"""Word classes, form names and the word record consumed by the engine.

Every conjugation table produced by :func:`services.paradigm.conjugate`
holds exactly the keys of :class:`Form`. A key that does not apply to the
word's class maps to the empty string instead of being left out.
"""

from dataclasses import dataclass
from enum import StrEnum


class WordType(StrEnum):
    """Morphological class of a dictionary entry."""

    ICHIDAN = "Ichidan"          # 一段 (る-verbs)
    GODAN = "Godan"              # 五段 (う-verbs)
    IRREGULAR = "Irregular"      # する / 来る
    I_ADJECTIVE = "i-adjective"  # 形容詞
    NA_ADJECTIVE = "na-adjective"  # 形容動詞
    NOUN = "noun"
    ADVERB = "adverb"
    PARTICLE = "particle"
    OTHER = "other"


CONJUGATABLE_TYPES = frozenset({
    WordType.ICHIDAN,
    WordType.GODAN,
    WordType.IRREGULAR,
    WordType.I_ADJECTIVE,
    WordType.NA_ADJECTIVE,
})

VERB_TYPES = frozenset({WordType.ICHIDAN, WordType.GODAN, WordType.IRREGULAR})


class Form(StrEnum):
    """Named surface forms of a conjugation table."""

    # Basic plain forms
    PRESENT = "present"
    PAST = "past"
    NEGATIVE = "negative"
    PAST_NEGATIVE = "pastNegative"
    VOLITIONAL = "volitional"

    # Polite forms
    POLITE = "polite"
    POLITE_PAST = "politePast"
    POLITE_NEGATIVE = "politeNegative"
    POLITE_PAST_NEGATIVE = "politePastNegative"
    POLITE_VOLITIONAL = "politeVolitional"

    # て-forms and stems
    TE_FORM = "teForm"
    NEGATIVE_TE_FORM = "negativeTeForm"
    MASU_STEM = "masuStem"
    NEGATIVE_STEM = "negativeStem"

    # Imperative
    IMPERATIVE_PLAIN = "imperativePlain"
    IMPERATIVE_POLITE = "imperativePolite"

    # Conditionals (ば and たら)
    PROVISIONAL = "provisional"
    PROVISIONAL_NEGATIVE = "provisionalNegative"
    CONDITIONAL = "conditional"
    CONDITIONAL_NEGATIVE = "conditionalNegative"

    # Potential
    POTENTIAL = "potential"
    POTENTIAL_NEGATIVE = "potentialNegative"
    POTENTIAL_PAST = "potentialPast"
    POTENTIAL_PAST_NEGATIVE = "potentialPastNegative"
    POTENTIAL_POLITE = "potentialPolite"
    POTENTIAL_POLITE_NEGATIVE = "potentialPoliteNegative"
    POTENTIAL_POLITE_PAST = "potentialPolitePast"
    POTENTIAL_POLITE_PAST_NEGATIVE = "potentialPolitePastNegative"

    # Passive
    PASSIVE = "passive"
    PASSIVE_NEGATIVE = "passiveNegative"
    PASSIVE_PAST = "passivePast"
    PASSIVE_PAST_NEGATIVE = "passivePastNegative"
    PASSIVE_POLITE = "passivePolite"
    PASSIVE_POLITE_NEGATIVE = "passivePoliteNegative"
    PASSIVE_POLITE_PAST = "passivePolitePast"
    PASSIVE_POLITE_PAST_NEGATIVE = "passivePolitePastNegative"

    # Causative
    CAUSATIVE = "causative"
    CAUSATIVE_NEGATIVE = "causativeNegative"
    CAUSATIVE_PAST = "causativePast"
    CAUSATIVE_PAST_NEGATIVE = "causativePastNegative"
    CAUSATIVE_POLITE = "causativePolite"
    CAUSATIVE_POLITE_NEGATIVE = "causativePoliteNegative"
    CAUSATIVE_POLITE_PAST = "causativePolitePast"
    CAUSATIVE_POLITE_PAST_NEGATIVE = "causativePolitePastNegative"

    # Causative-passive
    CAUSATIVE_PASSIVE = "causativePassive"
    CAUSATIVE_PASSIVE_NEGATIVE = "causativePassiveNegative"
    CAUSATIVE_PASSIVE_PAST = "causativePassivePast"
    CAUSATIVE_PASSIVE_PAST_NEGATIVE = "causativePassivePastNegative"
    CAUSATIVE_PASSIVE_POLITE = "causativePassivePolite"
    CAUSATIVE_PASSIVE_POLITE_NEGATIVE = "causativePassivePoliteNegative"
    CAUSATIVE_PASSIVE_POLITE_PAST = "causativePassivePolitePast"
    CAUSATIVE_PASSIVE_POLITE_PAST_NEGATIVE = "causativePassivePolitePastNegative"

    # たい (want to)
    TAI_FORM = "taiForm"
    TAI_FORM_NEGATIVE = "taiFormNegative"
    TAI_FORM_PAST = "taiFormPast"
    TAI_FORM_PAST_NEGATIVE = "taiFormPastNegative"

    ALTERNATIVE_FORM = "alternativeForm"      # たり
    ADVERBIAL_NEGATIVE = "adverbialNegative"  # なく

    # ている
    PROGRESSIVE = "progressive"
    PROGRESSIVE_POLITE = "progressivePolite"
    PROGRESSIVE_NEGATIVE = "progressiveNegative"
    PROGRESSIVE_POLITE_NEGATIVE = "progressivePoliteNegative"

    # てください
    REQUEST = "request"
    REQUEST_NEGATIVE = "requestNegative"

    VOLITIONAL_NEGATIVE = "volitionalNegative"  # まい

    # Colloquial and classical negatives
    COLLOQUIAL_NEGATIVE = "colloquialNegative"  # ん
    FORMAL_NEGATIVE = "formalNegative"          # ず
    CLASSICAL_NEGATIVE = "classicalNegative"    # ぬ


# Forms that only verbs have. Adjective tables always leave these empty.
VERB_ONLY_FORMS = frozenset({
    Form.VOLITIONAL,
    Form.POLITE_VOLITIONAL,
    Form.IMPERATIVE_PLAIN,
    Form.IMPERATIVE_POLITE,
    Form.POTENTIAL,
    Form.POTENTIAL_NEGATIVE,
    Form.POTENTIAL_PAST,
    Form.POTENTIAL_PAST_NEGATIVE,
    Form.POTENTIAL_POLITE,
    Form.POTENTIAL_POLITE_NEGATIVE,
    Form.POTENTIAL_POLITE_PAST,
    Form.POTENTIAL_POLITE_PAST_NEGATIVE,
    Form.PASSIVE,
    Form.PASSIVE_NEGATIVE,
    Form.PASSIVE_PAST,
    Form.PASSIVE_PAST_NEGATIVE,
    Form.PASSIVE_POLITE,
    Form.PASSIVE_POLITE_NEGATIVE,
    Form.PASSIVE_POLITE_PAST,
    Form.PASSIVE_POLITE_PAST_NEGATIVE,
    Form.CAUSATIVE,
    Form.CAUSATIVE_NEGATIVE,
    Form.CAUSATIVE_PAST,
    Form.CAUSATIVE_PAST_NEGATIVE,
    Form.CAUSATIVE_POLITE,
    Form.CAUSATIVE_POLITE_NEGATIVE,
    Form.CAUSATIVE_POLITE_PAST,
    Form.CAUSATIVE_POLITE_PAST_NEGATIVE,
    Form.CAUSATIVE_PASSIVE,
    Form.CAUSATIVE_PASSIVE_NEGATIVE,
    Form.CAUSATIVE_PASSIVE_PAST,
    Form.CAUSATIVE_PASSIVE_PAST_NEGATIVE,
    Form.CAUSATIVE_PASSIVE_POLITE,
    Form.CAUSATIVE_PASSIVE_POLITE_NEGATIVE,
    Form.CAUSATIVE_PASSIVE_POLITE_PAST,
    Form.CAUSATIVE_PASSIVE_POLITE_PAST_NEGATIVE,
    Form.TAI_FORM,
    Form.TAI_FORM_NEGATIVE,
    Form.TAI_FORM_PAST,
    Form.TAI_FORM_PAST_NEGATIVE,
    Form.ALTERNATIVE_FORM,
    Form.PROGRESSIVE,
    Form.PROGRESSIVE_POLITE,
    Form.PROGRESSIVE_NEGATIVE,
    Form.PROGRESSIVE_POLITE_NEGATIVE,
    Form.REQUEST,
    Form.REQUEST_NEGATIVE,
    Form.VOLITIONAL_NEGATIVE,
    Form.COLLOQUIAL_NEGATIVE,
    Form.FORMAL_NEGATIVE,
    Form.CLASSICAL_NEGATIVE,
})


ConjugationForms = dict[Form, str]


@dataclass(frozen=True, slots=True)
class Word:
    """Dictionary entry handed to the engine.

    Only ``kanji``, ``kana`` and ``type`` are read. The remaining fields
    travel with the record for the caller's benefit.
    """

    kanji: str
    kana: str
    type: WordType | str
    romaji: str = ""
    meaning: str = ""
    jlpt: str | None = None


def empty_forms() -> ConjugationForms:
    """Return a table with every form set to the empty string."""
    return {form: "" for form in Form}


def coerce_word_type(value: WordType | str) -> WordType:
    """Map a raw class name onto :class:`WordType`.

    Unknown names are treated as :attr:`WordType.OTHER`.
    """
    try:
        return WordType(value)
    except ValueError:
        return WordType.OTHER


def coerce_form(value: Form | str) -> Form | None:
    """Map a raw form name onto :class:`Form`, or None if it is unknown."""
    try:
        return Form(value)
    except ValueError:
        return None
