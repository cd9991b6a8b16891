"""Japanese verb conjugation tables.

Supports:
- Ichidan (一段) verbs: 食べる, 見る, etc.
- Godan (五段) verbs: 書く, 飲む, 行く, etc.
- Irregular verbs: する (including compounds like 勉強する), くる/来る

Every generator is a pure function of (stem, suffix table). The derived
voices (potential, passive, causative, causative-passive) are themselves
ichidan verbs, so each of them is conjugated with the same eight endings.
"""

import logging
import re
from dataclasses import dataclass, replace

import jaconv

from .forms import ConjugationForms, Form, Word, empty_forms

logger = logging.getLogger(__name__)


# ============================================================================
# Derived Voice Families
# ============================================================================

# Endings of an ichidan verb once its final る is removed
_RU_VERB_ENDINGS = ("る", "ない", "た", "なかった", "ます", "ません", "ました", "ませんでした")

POTENTIAL_FORMS = (
    Form.POTENTIAL, Form.POTENTIAL_NEGATIVE, Form.POTENTIAL_PAST, Form.POTENTIAL_PAST_NEGATIVE,
    Form.POTENTIAL_POLITE, Form.POTENTIAL_POLITE_NEGATIVE,
    Form.POTENTIAL_POLITE_PAST, Form.POTENTIAL_POLITE_PAST_NEGATIVE,
)
PASSIVE_FORMS = (
    Form.PASSIVE, Form.PASSIVE_NEGATIVE, Form.PASSIVE_PAST, Form.PASSIVE_PAST_NEGATIVE,
    Form.PASSIVE_POLITE, Form.PASSIVE_POLITE_NEGATIVE,
    Form.PASSIVE_POLITE_PAST, Form.PASSIVE_POLITE_PAST_NEGATIVE,
)
CAUSATIVE_FORMS = (
    Form.CAUSATIVE, Form.CAUSATIVE_NEGATIVE, Form.CAUSATIVE_PAST, Form.CAUSATIVE_PAST_NEGATIVE,
    Form.CAUSATIVE_POLITE, Form.CAUSATIVE_POLITE_NEGATIVE,
    Form.CAUSATIVE_POLITE_PAST, Form.CAUSATIVE_POLITE_PAST_NEGATIVE,
)
CAUSATIVE_PASSIVE_FORMS = (
    Form.CAUSATIVE_PASSIVE, Form.CAUSATIVE_PASSIVE_NEGATIVE,
    Form.CAUSATIVE_PASSIVE_PAST, Form.CAUSATIVE_PASSIVE_PAST_NEGATIVE,
    Form.CAUSATIVE_PASSIVE_POLITE, Form.CAUSATIVE_PASSIVE_POLITE_NEGATIVE,
    Form.CAUSATIVE_PASSIVE_POLITE_PAST, Form.CAUSATIVE_PASSIVE_POLITE_PAST_NEGATIVE,
)


def _voice_family(forms: tuple[Form, ...], auxiliary_stem: str) -> dict[Form, str]:
    """Spread an ichidan auxiliary stem (e.g. られ) over a voice family."""
    return {form: auxiliary_stem + ending for form, ending in zip(forms, _RU_VERB_ENDINGS)}


# ============================================================================
# Ichidan (一段) Verbs
# ============================================================================

# Suffixes appended to the stem (dictionary form minus る)
ICHIDAN_SUFFIXES: dict[Form, str] = {
    Form.PAST: "た",
    Form.NEGATIVE: "ない",
    Form.PAST_NEGATIVE: "なかった",
    Form.VOLITIONAL: "よう",
    Form.POLITE: "ます",
    Form.POLITE_PAST: "ました",
    Form.POLITE_NEGATIVE: "ません",
    Form.POLITE_PAST_NEGATIVE: "ませんでした",
    Form.POLITE_VOLITIONAL: "ましょう",
    Form.TE_FORM: "て",
    Form.NEGATIVE_TE_FORM: "なくて",
    Form.MASU_STEM: "",
    Form.NEGATIVE_STEM: "",
    Form.IMPERATIVE_PLAIN: "ろ",
    Form.IMPERATIVE_POLITE: "なさい",
    Form.PROVISIONAL: "れば",
    Form.PROVISIONAL_NEGATIVE: "なければ",
    Form.CONDITIONAL: "たら",
    Form.CONDITIONAL_NEGATIVE: "なかったら",
    **_voice_family(POTENTIAL_FORMS, "られ"),
    **_voice_family(PASSIVE_FORMS, "られ"),
    **_voice_family(CAUSATIVE_FORMS, "させ"),
    **_voice_family(CAUSATIVE_PASSIVE_FORMS, "させられ"),
    Form.TAI_FORM: "たい",
    Form.TAI_FORM_NEGATIVE: "たくない",
    Form.TAI_FORM_PAST: "たかった",
    Form.TAI_FORM_PAST_NEGATIVE: "たくなかった",
    Form.ALTERNATIVE_FORM: "たり",
    Form.ADVERBIAL_NEGATIVE: "なく",
    Form.PROGRESSIVE: "ている",
    Form.PROGRESSIVE_POLITE: "ています",
    Form.PROGRESSIVE_NEGATIVE: "ていない",
    Form.PROGRESSIVE_POLITE_NEGATIVE: "ていません",
    Form.REQUEST: "てください",
    Form.REQUEST_NEGATIVE: "ないでください",
    Form.VOLITIONAL_NEGATIVE: "まい",
    Form.COLLOQUIAL_NEGATIVE: "ん",
    Form.FORMAL_NEGATIVE: "ず",
    Form.CLASSICAL_NEGATIVE: "ぬ",
}


def conjugate_ichidan(word: Word) -> ConjugationForms:
    """Conjugate an ichidan verb.

    Args:
        word: Word whose ``kanji`` is the dictionary form (e.g. 食べる)

    Returns:
        Full conjugation table

    Examples:
        >>> conjugate_ichidan(Word("食べる", "たべる", "Ichidan"))[Form.PAST]
        '食べた'
    """
    stem = word.kanji[:-1]  # Remove る
    forms = empty_forms()
    forms[Form.PRESENT] = word.kanji
    for form, suffix in ICHIDAN_SUFFIXES.items():
        forms[form] = stem + suffix
    return forms


# ============================================================================
# Godan (五段) Verbs
# ============================================================================


@dataclass(frozen=True, slots=True)
class GodanMapping:
    """Sound alternations of one godan ending.

    ``past`` and ``te_form`` already carry the euphonic change (音便),
    the other fields are the kana that replaces the ending before a suffix.
    """

    past: str
    negative: str      # あ段 (わ for う)
    polite: str        # い段
    te_form: str
    potential: str     # え段
    passive: str       # あ段
    causative: str     # あ段
    conditional: str   # え段
    volitional: str    # お段 + う
    imperative: str    # え段


GODAN_MAPPINGS: dict[str, GodanMapping] = {
    "う": GodanMapping(
        past="った", negative="わ", polite="い", te_form="って", potential="え",
        passive="わ", causative="わ", conditional="え", volitional="おう", imperative="え",
    ),
    "く": GodanMapping(
        past="いた", negative="か", polite="き", te_form="いて", potential="け",
        passive="か", causative="か", conditional="け", volitional="こう", imperative="け",
    ),
    "ぐ": GodanMapping(
        past="いだ", negative="が", polite="ぎ", te_form="いで", potential="げ",
        passive="が", causative="が", conditional="げ", volitional="ごう", imperative="げ",
    ),
    "す": GodanMapping(
        past="した", negative="さ", polite="し", te_form="して", potential="せ",
        passive="さ", causative="さ", conditional="せ", volitional="そう", imperative="せ",
    ),
    "つ": GodanMapping(
        past="った", negative="た", polite="ち", te_form="って", potential="て",
        passive="た", causative="た", conditional="て", volitional="とう", imperative="て",
    ),
    "ぬ": GodanMapping(
        past="んだ", negative="な", polite="に", te_form="んで", potential="ね",
        passive="な", causative="な", conditional="ね", volitional="のう", imperative="ね",
    ),
    "ぶ": GodanMapping(
        past="んだ", negative="ば", polite="び", te_form="んで", potential="べ",
        passive="ば", causative="ば", conditional="べ", volitional="ぼう", imperative="べ",
    ),
    "む": GodanMapping(
        past="んだ", negative="ま", polite="み", te_form="んで", potential="め",
        passive="ま", causative="ま", conditional="め", volitional="もう", imperative="め",
    ),
    "る": GodanMapping(
        past="った", negative="ら", polite="り", te_form="って", potential="れ",
        passive="ら", causative="ら", conditional="れ", volitional="ろう", imperative="れ",
    ),
}

# 行く uses 促音便 (っ) instead of the regular く-row イ音便
_IKU_MAPPING = replace(GODAN_MAPPINGS["く"], past="った", te_form="って")
_IKU_READINGS = ("いく", "ゆく")

# Form -> (GodanMapping field, literal suffix)
GODAN_SUFFIXES: dict[Form, tuple[str, str]] = {
    Form.PAST: ("past", ""),
    Form.NEGATIVE: ("negative", "ない"),
    Form.PAST_NEGATIVE: ("negative", "なかった"),
    Form.VOLITIONAL: ("volitional", ""),
    Form.POLITE: ("polite", "ます"),
    Form.POLITE_PAST: ("polite", "ました"),
    Form.POLITE_NEGATIVE: ("polite", "ません"),
    Form.POLITE_PAST_NEGATIVE: ("polite", "ませんでした"),
    Form.POLITE_VOLITIONAL: ("polite", "ましょう"),
    Form.TE_FORM: ("te_form", ""),
    Form.NEGATIVE_TE_FORM: ("negative", "なくて"),
    Form.MASU_STEM: ("polite", ""),
    Form.NEGATIVE_STEM: ("negative", ""),
    Form.IMPERATIVE_PLAIN: ("imperative", ""),
    Form.IMPERATIVE_POLITE: ("polite", "なさい"),
    Form.PROVISIONAL: ("conditional", "ば"),
    Form.PROVISIONAL_NEGATIVE: ("negative", "なければ"),
    Form.CONDITIONAL_NEGATIVE: ("negative", "なかったら"),
    **{form: ("potential", ending) for form, ending in _voice_family(POTENTIAL_FORMS, "").items()},
    **{form: ("passive", ending) for form, ending in _voice_family(PASSIVE_FORMS, "れ").items()},
    **{form: ("causative", ending) for form, ending in _voice_family(CAUSATIVE_FORMS, "せ").items()},
    **{
        form: ("causative", ending)
        for form, ending in _voice_family(CAUSATIVE_PASSIVE_FORMS, "され").items()
    },
    Form.TAI_FORM: ("polite", "たい"),
    Form.TAI_FORM_NEGATIVE: ("polite", "たくない"),
    Form.TAI_FORM_PAST: ("polite", "たかった"),
    Form.TAI_FORM_PAST_NEGATIVE: ("polite", "たくなかった"),
    Form.ADVERBIAL_NEGATIVE: ("negative", "なく"),
    Form.PROGRESSIVE: ("te_form", "いる"),
    Form.PROGRESSIVE_POLITE: ("te_form", "います"),
    Form.PROGRESSIVE_NEGATIVE: ("te_form", "いない"),
    Form.PROGRESSIVE_POLITE_NEGATIVE: ("te_form", "いません"),
    Form.REQUEST: ("te_form", "ください"),
    Form.REQUEST_NEGATIVE: ("negative", "ないでください"),
    Form.COLLOQUIAL_NEGATIVE: ("negative", "ん"),
    Form.FORMAL_NEGATIVE: ("negative", "ず"),
    Form.CLASSICAL_NEGATIVE: ("negative", "ぬ"),
}

_PAST_TAIL = re.compile(r"[ただ]$")


def _retail_past(past: str, tail: str) -> str:
    """Turn a past suffix into its たら/たり counterpart.

    The voicing of the final た/だ is kept: んだ -> んだら, いた -> いたら.
    """
    match = _PAST_TAIL.search(past)
    if match is None:
        return past
    return past[:match.start()] + match.group() + tail


def get_godan_mapping(word: Word) -> GodanMapping | None:
    """Look up the sound alternations for a godan verb's final kana.

    Katakana readings are normalised to hiragana first.

    Returns:
        The mapping, or None if the reading does not end in one of the
        nine godan endings
    """
    reading = jaconv.kata2hira(word.kana)
    if word.kanji.endswith("行く") or reading in _IKU_READINGS:
        return _IKU_MAPPING
    return GODAN_MAPPINGS.get(reading[-1:])


def conjugate_godan(word: Word) -> ConjugationForms:
    """Conjugate a godan verb.

    The ending is read from ``kana``; the output is spelled from ``kanji``.

    Args:
        word: Word such as 飲む / のむ

    Returns:
        Full conjugation table, or an empty table if the reading has no
        recognised godan ending

    Examples:
        >>> conjugate_godan(Word("飲む", "のむ", "Godan"))[Form.PAST]
        '飲んだ'
        >>> conjugate_godan(Word("飲む", "のむ", "Godan"))[Form.CONDITIONAL]
        '飲んだら'
    """
    mapping = get_godan_mapping(word)
    if mapping is None:
        logger.debug("No godan ending for %r (%r)", word.kanji, word.kana)
        return empty_forms()

    stem = word.kanji[:-1]
    forms = empty_forms()
    forms[Form.PRESENT] = word.kanji
    for form, (field, suffix) in GODAN_SUFFIXES.items():
        forms[form] = stem + getattr(mapping, field) + suffix

    forms[Form.CONDITIONAL] = stem + _retail_past(mapping.past, "ら")
    forms[Form.ALTERNATIVE_FORM] = stem + _retail_past(mapping.past, "り")
    forms[Form.VOLITIONAL_NEGATIVE] = word.kanji + "まい"
    return forms


# ============================================================================
# Irregular Verbs (する / 来る)
# ============================================================================

# Suffixes appended to whatever precedes する (empty for bare する)
SURU_SUFFIXES: dict[Form, str] = {
    Form.PAST: "した",
    Form.NEGATIVE: "しない",
    Form.PAST_NEGATIVE: "しなかった",
    Form.VOLITIONAL: "しよう",
    Form.POLITE: "します",
    Form.POLITE_PAST: "しました",
    Form.POLITE_NEGATIVE: "しません",
    Form.POLITE_PAST_NEGATIVE: "しませんでした",
    Form.POLITE_VOLITIONAL: "しましょう",
    Form.TE_FORM: "して",
    Form.NEGATIVE_TE_FORM: "しなくて",
    Form.MASU_STEM: "し",
    Form.NEGATIVE_STEM: "し",
    Form.IMPERATIVE_PLAIN: "しろ",
    Form.IMPERATIVE_POLITE: "しなさい",
    Form.PROVISIONAL: "すれば",
    Form.PROVISIONAL_NEGATIVE: "しなければ",
    Form.CONDITIONAL: "したら",
    Form.CONDITIONAL_NEGATIVE: "しなかったら",
    # The potential of する is the separate verb できる
    **_voice_family(POTENTIAL_FORMS, "でき"),
    **_voice_family(PASSIVE_FORMS, "され"),
    **_voice_family(CAUSATIVE_FORMS, "させ"),
    **_voice_family(CAUSATIVE_PASSIVE_FORMS, "させられ"),
    Form.TAI_FORM: "したい",
    Form.TAI_FORM_NEGATIVE: "したくない",
    Form.TAI_FORM_PAST: "したかった",
    Form.TAI_FORM_PAST_NEGATIVE: "したくなかった",
    Form.ALTERNATIVE_FORM: "したり",
    Form.ADVERBIAL_NEGATIVE: "しなく",
    Form.PROGRESSIVE: "している",
    Form.PROGRESSIVE_POLITE: "しています",
    Form.PROGRESSIVE_NEGATIVE: "していない",
    Form.PROGRESSIVE_POLITE_NEGATIVE: "していません",
    Form.REQUEST: "してください",
    Form.REQUEST_NEGATIVE: "しないでください",
    Form.VOLITIONAL_NEGATIVE: "すまい",
    Form.COLLOQUIAL_NEGATIVE: "しん",
    Form.FORMAL_NEGATIVE: "せず",
    Form.CLASSICAL_NEGATIVE: "せぬ",
}

# Form -> (kana of the 来 syllable, rest of the form)
KURU_FORMS: dict[Form, tuple[str, str]] = {
    Form.PRESENT: ("く", "る"),
    Form.PAST: ("き", "た"),
    Form.NEGATIVE: ("こ", "ない"),
    Form.PAST_NEGATIVE: ("こ", "なかった"),
    Form.VOLITIONAL: ("こ", "よう"),
    Form.POLITE: ("き", "ます"),
    Form.POLITE_PAST: ("き", "ました"),
    Form.POLITE_NEGATIVE: ("き", "ません"),
    Form.POLITE_PAST_NEGATIVE: ("き", "ませんでした"),
    Form.POLITE_VOLITIONAL: ("き", "ましょう"),
    Form.TE_FORM: ("き", "て"),
    Form.NEGATIVE_TE_FORM: ("こ", "なくて"),
    Form.MASU_STEM: ("き", ""),
    Form.NEGATIVE_STEM: ("こ", ""),
    Form.IMPERATIVE_PLAIN: ("こ", "い"),
    Form.IMPERATIVE_POLITE: ("き", "なさい"),
    Form.PROVISIONAL: ("く", "れば"),
    Form.PROVISIONAL_NEGATIVE: ("こ", "なければ"),
    Form.CONDITIONAL: ("き", "たら"),
    Form.CONDITIONAL_NEGATIVE: ("こ", "なかったら"),
    **{form: ("こ", tail) for form, tail in _voice_family(POTENTIAL_FORMS, "られ").items()},
    **{form: ("こ", tail) for form, tail in _voice_family(PASSIVE_FORMS, "られ").items()},
    **{form: ("こ", tail) for form, tail in _voice_family(CAUSATIVE_FORMS, "させ").items()},
    **{
        form: ("こ", tail)
        for form, tail in _voice_family(CAUSATIVE_PASSIVE_FORMS, "させられ").items()
    },
    Form.TAI_FORM: ("き", "たい"),
    Form.TAI_FORM_NEGATIVE: ("き", "たくない"),
    Form.TAI_FORM_PAST: ("き", "たかった"),
    Form.TAI_FORM_PAST_NEGATIVE: ("き", "たくなかった"),
    Form.ALTERNATIVE_FORM: ("き", "たり"),
    Form.ADVERBIAL_NEGATIVE: ("こ", "なく"),
    Form.PROGRESSIVE: ("き", "ている"),
    Form.PROGRESSIVE_POLITE: ("き", "ています"),
    Form.PROGRESSIVE_NEGATIVE: ("き", "ていない"),
    Form.PROGRESSIVE_POLITE_NEGATIVE: ("き", "ていません"),
    Form.REQUEST: ("き", "てください"),
    Form.REQUEST_NEGATIVE: ("こ", "ないでください"),
    Form.VOLITIONAL_NEGATIVE: ("く", "まい"),
    Form.COLLOQUIAL_NEGATIVE: ("こ", "ん"),
    Form.FORMAL_NEGATIVE: ("こ", "ず"),
    Form.CLASSICAL_NEGATIVE: ("こ", "ぬ"),
}


def _conjugate_suru(word: Word) -> ConjugationForms:
    """Conjugate する or a compound ending in する (勉強する)."""
    prefix = word.kanji[:-2]
    forms = empty_forms()
    forms[Form.PRESENT] = word.kanji
    for form, suffix in SURU_SUFFIXES.items():
        forms[form] = prefix + suffix
    return forms


def _conjugate_kuru(word: Word) -> ConjugationForms:
    """Conjugate くる/来る.

    The table is spelled with 来 throughout when the input is written
    with it, and in kana throughout otherwise.
    """
    use_kanji = "来" in word.kanji
    forms = empty_forms()
    for form, (head, tail) in KURU_FORMS.items():
        forms[form] = ("来" if use_kanji else head) + tail
    return forms


def conjugate_irregular(word: Word) -> ConjugationForms:
    """Conjugate an irregular verb.

    Only する (and compounds) and くる/来る are known. Any other word gets
    an empty table, including its present form.

    Examples:
        >>> conjugate_irregular(Word("勉強する", "べんきょうする", "Irregular"))[Form.POTENTIAL]
        '勉強できる'
        >>> conjugate_irregular(Word("来る", "くる", "Irregular"))[Form.NEGATIVE]
        '来ない'
    """
    reading = jaconv.kata2hira(word.kana)
    if reading.endswith("する"):
        return _conjugate_suru(word)
    if reading == "くる" or word.kanji == "来る":
        return _conjugate_kuru(word)

    logger.debug("Unrecognised irregular verb %r (%r)", word.kanji, word.kana)
    return empty_forms()
