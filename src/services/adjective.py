"""Japanese adjective conjugation tables.

Supports both i-adjectives (形容詞) and na-adjectives (形容動詞).

Adjectives have no potential, passive, causative, volitional or imperative
forms. Those keys are left empty here and forced empty again by the engine.
"""

from .forms import ConjugationForms, Form, Word, empty_forms


# ============================================================================
# i-adjectives (形容詞)
# ============================================================================

# Suffixes appended to the stem (dictionary form minus い)
I_ADJECTIVE_SUFFIXES: dict[Form, str] = {
    Form.PAST: "かった",
    Form.NEGATIVE: "くない",
    Form.PAST_NEGATIVE: "くなかった",
    Form.POLITE_PAST: "かったです",
    Form.POLITE_NEGATIVE: "くないです",
    Form.POLITE_PAST_NEGATIVE: "くなかったです",
    Form.TE_FORM: "くて",
    Form.NEGATIVE_TE_FORM: "くなくて",
    Form.MASU_STEM: "",
    Form.NEGATIVE_STEM: "く",
    Form.PROVISIONAL: "ければ",
    Form.PROVISIONAL_NEGATIVE: "くなければ",
    Form.CONDITIONAL: "かったら",
    Form.CONDITIONAL_NEGATIVE: "くなかったら",
    Form.ADVERBIAL_NEGATIVE: "くなく",
}

# いい conjugates from the older よい
_II_FORMS = ("いい", "イイ")


def get_i_adjective_stem(adjective: str) -> str:
    """Get the stem of an i-adjective.

    Args:
        adjective: Dictionary form (e.g. 高い)

    Returns:
        The stem (e.g. 高). いい gives よ.
    """
    if adjective in _II_FORMS:
        return "よ"
    return adjective[:-1]


def conjugate_i_adjective(word: Word) -> ConjugationForms:
    """Conjugate an i-adjective.

    Politeness is です after the plain form, not a change of stem.

    Examples:
        >>> conjugate_i_adjective(Word("高い", "たかい", "i-adjective"))[Form.PAST]
        '高かった'
        >>> conjugate_i_adjective(Word("高い", "たかい", "i-adjective"))[Form.POLITE]
        '高いです'
    """
    stem = get_i_adjective_stem(word.kanji)
    forms = empty_forms()
    forms[Form.PRESENT] = word.kanji
    forms[Form.POLITE] = word.kanji + "です"
    for form, suffix in I_ADJECTIVE_SUFFIXES.items():
        forms[form] = stem + suffix
    return forms


# ============================================================================
# na-adjectives (形容動詞)
# ============================================================================

# Suffixes appended to the bare adjective (綺麗)
NA_ADJECTIVE_SUFFIXES: dict[Form, str] = {
    Form.PRESENT: "だ",
    Form.PAST: "だった",
    Form.NEGATIVE: "じゃない",
    Form.PAST_NEGATIVE: "じゃなかった",
    Form.POLITE: "です",
    Form.POLITE_PAST: "でした",
    Form.POLITE_NEGATIVE: "じゃないです",
    Form.POLITE_PAST_NEGATIVE: "じゃなかったです",
    Form.TE_FORM: "で",
    Form.NEGATIVE_TE_FORM: "じゃなくて",
    Form.MASU_STEM: "",
    Form.NEGATIVE_STEM: "じゃな",
    Form.PROVISIONAL: "なら",
    Form.PROVISIONAL_NEGATIVE: "じゃなければ",
    Form.CONDITIONAL: "だったら",
    Form.CONDITIONAL_NEGATIVE: "じゃなかったら",
    Form.ADVERBIAL_NEGATIVE: "じゃなく",
}


def conjugate_na_adjective(word: Word) -> ConjugationForms:
    """Conjugate a na-adjective.

    Nothing is stripped: the dictionary form is the stem, and the present
    form carries the copula (綺麗 -> 綺麗だ).
    """
    stem = word.kanji
    forms = empty_forms()
    for form, suffix in NA_ADJECTIVE_SUFFIXES.items():
        forms[form] = stem + suffix
    return forms
