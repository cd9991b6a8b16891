"""Short explanations of how each commonly taught form is built."""

from .forms import Form, WordType

NO_RULE = "No rule available for this combination"

_IRREGULAR = "Irregular - memorize the form"

CONJUGATION_RULES: dict[WordType, dict[Form, str]] = {
    WordType.ICHIDAN: {
        Form.PRESENT: "Dictionary form - no change",
        Form.PAST: "Remove る, add た",
        Form.NEGATIVE: "Remove る, add ない",
        Form.PAST_NEGATIVE: "Remove る, add なかった",
        Form.POLITE: "Remove る, add ます",
        Form.POLITE_PAST: "Remove る, add ました",
        Form.TE_FORM: "Remove る, add て",
        Form.POTENTIAL: "Remove る, add られる",
        Form.CONDITIONAL: "Remove る, add れば",
    },
    WordType.GODAN: {
        Form.PRESENT: "Dictionary form - no change",
        Form.PAST: "Change ending to う-column, add た/だ",
        Form.NEGATIVE: "Change ending to あ-column, add ない",
        Form.POLITE: "Change ending to い-column, add ます",
        Form.TE_FORM: "Change ending according to て-form rules",
        Form.POTENTIAL: "Change ending to え-column, add る",
        Form.CONDITIONAL: "Change ending to え-column, add ば",
    },
    WordType.IRREGULAR: {
        Form.PRESENT: _IRREGULAR,
        Form.PAST: _IRREGULAR,
        Form.NEGATIVE: _IRREGULAR,
        Form.POLITE: _IRREGULAR,
        Form.TE_FORM: _IRREGULAR,
    },
    WordType.I_ADJECTIVE: {
        Form.PRESENT: "Dictionary form - no change",
        Form.PAST: "Remove い, add かった",
        Form.NEGATIVE: "Remove い, add くない",
        Form.PAST_NEGATIVE: "Remove い, add くなかった",
        Form.POLITE: "Add です to dictionary form",
        Form.CONDITIONAL: "Remove い, add ければ",
    },
    WordType.NA_ADJECTIVE: {
        Form.PRESENT: "Add だ to stem",
        Form.PAST: "Add だった to stem",
        Form.NEGATIVE: "Add じゃない to stem",
        Form.PAST_NEGATIVE: "Add じゃなかった to stem",
        Form.POLITE: "Add です to stem",
        Form.CONDITIONAL: "Add なら to stem",
    },
    WordType.NOUN: {Form.PRESENT: "Nouns do not conjugate"},
    WordType.ADVERB: {Form.PRESENT: "Adverbs do not conjugate"},
    WordType.PARTICLE: {Form.PRESENT: "Particles do not conjugate"},
    WordType.OTHER: {Form.PRESENT: "This word type does not conjugate"},
}


def explain_rule(word_type: WordType | str, form: Form | str) -> str:
    """Describe the rule that builds ``form`` for ``word_type``.

    Returns:
        The explanation, or :data:`NO_RULE` for any pair that is not in the
        table (including unknown classes and form names)

    Examples:
        >>> explain_rule("Ichidan", "past")
        'Remove る, add た'
        >>> explain_rule("noun", "past")
        'No rule available for this combination'
    """
    # StrEnum keys also match plain strings
    try:
        return CONJUGATION_RULES.get(word_type, {}).get(form, NO_RULE)
    except TypeError:
        # unhashable input
        return NO_RULE
