"""Conjugation engine entry point.

``conjugate`` dispatches on the word class to one of the five generators
in :mod:`services.verb` and :mod:`services.adjective`. It never raises:
anything that cannot be derived comes back as an empty string.
"""

import logging

from .adjective import conjugate_i_adjective, conjugate_na_adjective
from .forms import (
    VERB_ONLY_FORMS,
    ConjugationForms,
    Word,
    WordType,
    coerce_word_type,
    empty_forms,
)
from .verb import conjugate_godan, conjugate_ichidan, conjugate_irregular

logger = logging.getLogger(__name__)


def _clear_verb_only_forms(forms: ConjugationForms) -> ConjugationForms:
    """Blank every verb-only key of an adjective table."""
    for form in VERB_ONLY_FORMS:
        forms[form] = ""
    return forms


def conjugate(word: Word) -> ConjugationForms:
    """Derive the full conjugation table of a word.

    Args:
        word: Dictionary entry with ``kanji``, ``kana`` and ``type``

    Returns:
        A table holding every :class:`~services.forms.Form` key. Keys that
        do not apply to the word's class are empty strings.

    Examples:
        >>> conjugate(Word("食べる", "たべる", "Ichidan"))["potential"]
        '食べられる'
        >>> conjugate(Word("本", "ほん", "noun"))["present"]
        ''
    """
    word_type = coerce_word_type(word.type)

    match word_type:
        case WordType.ICHIDAN:
            return conjugate_ichidan(word)
        case WordType.GODAN:
            return conjugate_godan(word)
        case WordType.IRREGULAR:
            return conjugate_irregular(word)
        case WordType.I_ADJECTIVE:
            return _clear_verb_only_forms(conjugate_i_adjective(word))
        case WordType.NA_ADJECTIVE:
            return _clear_verb_only_forms(conjugate_na_adjective(word))
        case WordType.NOUN | WordType.ADVERB | WordType.PARTICLE | WordType.OTHER:
            logger.debug("%s %r does not conjugate", word_type, word.kanji)
            return empty_forms()
