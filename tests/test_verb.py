"""
Tests for verb conjugation tables.

Tests cover:
- Ichidan (一段) verbs across the full table
- Godan (五段) verbs for every ending, including 音便 and 行く
- Irregular verbs (する, compound する, 来る/くる)
"""

import pytest

from services.forms import Form, Word, WordType
from services.verb import (
    GODAN_MAPPINGS,
    conjugate_godan,
    conjugate_ichidan,
    conjugate_irregular,
    get_godan_mapping,
)


def godan(kanji: str, kana: str) -> dict:
    return conjugate_godan(Word(kanji, kana, WordType.GODAN))


class TestIchidan:
    """食べる (to eat)."""

    @pytest.fixture(scope="class")
    def forms(self):
        return conjugate_ichidan(Word("食べる", "たべる", WordType.ICHIDAN))

    def test_plain_forms(self, forms):
        assert forms[Form.PRESENT] == "食べる"
        assert forms[Form.PAST] == "食べた"
        assert forms[Form.NEGATIVE] == "食べない"
        assert forms[Form.PAST_NEGATIVE] == "食べなかった"
        assert forms[Form.VOLITIONAL] == "食べよう"

    def test_polite_forms(self, forms):
        assert forms[Form.POLITE] == "食べます"
        assert forms[Form.POLITE_PAST] == "食べました"
        assert forms[Form.POLITE_NEGATIVE] == "食べません"
        assert forms[Form.POLITE_PAST_NEGATIVE] == "食べませんでした"
        assert forms[Form.POLITE_VOLITIONAL] == "食べましょう"

    def test_te_forms_and_stems(self, forms):
        assert forms[Form.TE_FORM] == "食べて"
        assert forms[Form.NEGATIVE_TE_FORM] == "食べなくて"
        assert forms[Form.MASU_STEM] == "食べ"
        assert forms[Form.NEGATIVE_STEM] == "食べ"

    def test_potential_and_passive_are_identical(self, forms):
        """られる is both potential and passive for 一段 verbs."""
        assert forms[Form.POTENTIAL] == "食べられる"
        assert forms[Form.PASSIVE] == "食べられる"
        assert forms[Form.POTENTIAL_NEGATIVE] == forms[Form.PASSIVE_NEGATIVE] == "食べられない"
        assert forms[Form.POTENTIAL_PAST] == "食べられた"
        assert forms[Form.POTENTIAL_PAST_NEGATIVE] == "食べられなかった"
        assert forms[Form.PASSIVE_POLITE_PAST_NEGATIVE] == "食べられませんでした"

    def test_causative_chain(self, forms):
        assert forms[Form.CAUSATIVE] == "食べさせる"
        assert forms[Form.CAUSATIVE_NEGATIVE] == "食べさせない"
        assert forms[Form.CAUSATIVE_PAST] == "食べさせた"
        assert forms[Form.CAUSATIVE_PAST_NEGATIVE] == "食べさせなかった"
        assert forms[Form.CAUSATIVE_PASSIVE] == "食べさせられる"
        assert forms[Form.CAUSATIVE_PASSIVE_POLITE] == "食べさせられます"

    def test_conditional_forms(self, forms):
        assert forms[Form.PROVISIONAL] == "食べれば"
        assert forms[Form.PROVISIONAL_NEGATIVE] == "食べなければ"
        assert forms[Form.CONDITIONAL] == "食べたら"
        assert forms[Form.CONDITIONAL_NEGATIVE] == "食べなかったら"

    def test_tai_forms(self, forms):
        assert forms[Form.TAI_FORM] == "食べたい"
        assert forms[Form.TAI_FORM_NEGATIVE] == "食べたくない"
        assert forms[Form.TAI_FORM_PAST] == "食べたかった"
        assert forms[Form.TAI_FORM_PAST_NEGATIVE] == "食べたくなかった"

    def test_other_forms(self, forms):
        assert forms[Form.IMPERATIVE_PLAIN] == "食べろ"
        assert forms[Form.IMPERATIVE_POLITE] == "食べなさい"
        assert forms[Form.ALTERNATIVE_FORM] == "食べたり"
        assert forms[Form.PROGRESSIVE] == "食べている"
        assert forms[Form.PROGRESSIVE_POLITE_NEGATIVE] == "食べていません"
        assert forms[Form.REQUEST] == "食べてください"
        assert forms[Form.REQUEST_NEGATIVE] == "食べないでください"
        assert forms[Form.VOLITIONAL_NEGATIVE] == "食べまい"
        assert forms[Form.COLLOQUIAL_NEGATIVE] == "食べん"
        assert forms[Form.FORMAL_NEGATIVE] == "食べず"
        assert forms[Form.CLASSICAL_NEGATIVE] == "食べぬ"


class TestGodanMappings:
    """The nine godan endings."""

    def test_nine_endings(self):
        assert set(GODAN_MAPPINGS) == set("うくぐすつぬぶむる")

    def test_u_ending_uses_wa_row(self):
        assert GODAN_MAPPINGS["う"].negative == "わ"

    def test_mu_ending(self):
        mapping = GODAN_MAPPINGS["む"]
        assert mapping.past == "んだ"
        assert mapping.te_form == "んで"
        assert mapping.volitional == "もう"
        assert mapping.imperative == "め"

    def test_katakana_reading_is_normalised(self):
        assert get_godan_mapping(Word("飲む", "ノム", WordType.GODAN)) is GODAN_MAPPINGS["む"]

    def test_unknown_ending(self):
        assert get_godan_mapping(Word("食べ", "たべ", WordType.GODAN)) is None
        assert get_godan_mapping(Word("", "", WordType.GODAN)) is None


class TestGodan:
    """飲む (to drink) and the other endings."""

    @pytest.fixture(scope="class")
    def forms(self):
        return godan("飲む", "のむ")

    def test_plain_forms(self, forms):
        assert forms[Form.PRESENT] == "飲む"
        assert forms[Form.PAST] == "飲んだ"
        assert forms[Form.NEGATIVE] == "飲まない"
        assert forms[Form.PAST_NEGATIVE] == "飲まなかった"
        assert forms[Form.VOLITIONAL] == "飲もう"

    def test_polite_forms(self, forms):
        assert forms[Form.POLITE] == "飲みます"
        assert forms[Form.POLITE_PAST] == "飲みました"
        assert forms[Form.POLITE_NEGATIVE] == "飲みません"
        assert forms[Form.POLITE_PAST_NEGATIVE] == "飲みませんでした"
        assert forms[Form.POLITE_VOLITIONAL] == "飲みましょう"

    def test_te_forms(self, forms):
        assert forms[Form.TE_FORM] == "飲んで"
        assert forms[Form.NEGATIVE_TE_FORM] == "飲まなくて"

    def test_voices(self, forms):
        assert forms[Form.POTENTIAL] == "飲める"
        assert forms[Form.POTENTIAL_NEGATIVE] == "飲めない"
        assert forms[Form.POTENTIAL_PAST] == "飲めた"
        assert forms[Form.POTENTIAL_PAST_NEGATIVE] == "飲めなかった"
        assert forms[Form.PASSIVE] == "飲まれる"
        assert forms[Form.PASSIVE_NEGATIVE] == "飲まれない"
        assert forms[Form.PASSIVE_PAST] == "飲まれた"
        assert forms[Form.PASSIVE_PAST_NEGATIVE] == "飲まれなかった"
        assert forms[Form.CAUSATIVE] == "飲ませる"
        assert forms[Form.CAUSATIVE_PASSIVE] == "飲まされる"
        assert forms[Form.CAUSATIVE_PASSIVE_POLITE_PAST] == "飲まされました"

    def test_conditionals_keep_voicing(self, forms):
        """んだ -> んだら / んだり, not a bare たら."""
        assert forms[Form.PROVISIONAL] == "飲めば"
        assert forms[Form.PROVISIONAL_NEGATIVE] == "飲まなければ"
        assert forms[Form.CONDITIONAL] == "飲んだら"
        assert forms[Form.CONDITIONAL_NEGATIVE] == "飲まなかったら"
        assert forms[Form.ALTERNATIVE_FORM] == "飲んだり"

    def test_te_based_forms(self, forms):
        assert forms[Form.PROGRESSIVE] == "飲んでいる"
        assert forms[Form.PROGRESSIVE_POLITE] == "飲んでいます"
        assert forms[Form.PROGRESSIVE_NEGATIVE] == "飲んでいない"
        assert forms[Form.REQUEST] == "飲んでください"
        assert forms[Form.REQUEST_NEGATIVE] == "飲まないでください"

    def test_other_forms(self, forms):
        assert forms[Form.MASU_STEM] == "飲み"
        assert forms[Form.NEGATIVE_STEM] == "飲ま"
        assert forms[Form.IMPERATIVE_PLAIN] == "飲め"
        assert forms[Form.IMPERATIVE_POLITE] == "飲みなさい"
        assert forms[Form.TAI_FORM] == "飲みたい"
        assert forms[Form.TAI_FORM_PAST_NEGATIVE] == "飲みたくなかった"
        assert forms[Form.ADVERBIAL_NEGATIVE] == "飲まなく"
        assert forms[Form.VOLITIONAL_NEGATIVE] == "飲むまい"
        assert forms[Form.COLLOQUIAL_NEGATIVE] == "飲まん"
        assert forms[Form.FORMAL_NEGATIVE] == "飲まず"
        assert forms[Form.CLASSICAL_NEGATIVE] == "飲まぬ"

    @pytest.mark.parametrize(
        "kanji, kana, past, negative, polite, te, potential",
        [
            ("買う", "かう", "買った", "買わない", "買います", "買って", "買える"),
            ("書く", "かく", "書いた", "書かない", "書きます", "書いて", "書ける"),
            ("泳ぐ", "およぐ", "泳いだ", "泳がない", "泳ぎます", "泳いで", "泳げる"),
            ("話す", "はなす", "話した", "話さない", "話します", "話して", "話せる"),
            ("待つ", "まつ", "待った", "待たない", "待ちます", "待って", "待てる"),
            ("死ぬ", "しぬ", "死んだ", "死なない", "死にます", "死んで", "死ねる"),
            ("遊ぶ", "あそぶ", "遊んだ", "遊ばない", "遊びます", "遊んで", "遊べる"),
            ("帰る", "かえる", "帰った", "帰らない", "帰ります", "帰って", "帰れる"),
        ],
    )
    def test_endings(self, kanji, kana, past, negative, polite, te, potential):
        forms = godan(kanji, kana)
        assert forms[Form.PAST] == past
        assert forms[Form.NEGATIVE] == negative
        assert forms[Form.POLITE] == polite
        assert forms[Form.TE_FORM] == te
        assert forms[Form.POTENTIAL] == potential

    @pytest.mark.parametrize(
        "kanji, kana, conditional, alternative",
        [
            ("書く", "かく", "書いたら", "書いたり"),
            ("泳ぐ", "およぐ", "泳いだら", "泳いだり"),
            ("買う", "かう", "買ったら", "買ったり"),
            ("話す", "はなす", "話したら", "話したり"),
        ],
    )
    def test_tara_and_tari(self, kanji, kana, conditional, alternative):
        forms = godan(kanji, kana)
        assert forms[Form.CONDITIONAL] == conditional
        assert forms[Form.ALTERNATIVE_FORM] == alternative

    def test_iku_uses_geminate(self):
        """行く: 行った / 行って, not 行いた."""
        forms = godan("行く", "いく")
        assert forms[Form.PAST] == "行った"
        assert forms[Form.TE_FORM] == "行って"
        assert forms[Form.CONDITIONAL] == "行ったら"
        assert forms[Form.PROGRESSIVE] == "行っている"
        assert forms[Form.NEGATIVE] == "行かない"
        assert forms[Form.POLITE] == "行きます"

    def test_kana_only_verb(self):
        forms = godan("のむ", "のむ")
        assert forms[Form.PAST] == "のんだ"
        assert forms[Form.NEGATIVE] == "のまない"

    def test_unknown_ending_gives_empty_table(self):
        forms = godan("食べ", "たべ")
        assert set(forms.values()) == {""}


class TestIrregular:
    """する, 勉強する, 来る."""

    def test_suru(self):
        forms = conjugate_irregular(Word("する", "する", WordType.IRREGULAR))
        assert forms[Form.PRESENT] == "する"
        assert forms[Form.PAST] == "した"
        assert forms[Form.NEGATIVE] == "しない"
        assert forms[Form.PAST_NEGATIVE] == "しなかった"
        assert forms[Form.POLITE] == "します"
        assert forms[Form.TE_FORM] == "して"
        assert forms[Form.PROVISIONAL] == "すれば"
        assert forms[Form.IMPERATIVE_PLAIN] == "しろ"
        assert forms[Form.FORMAL_NEGATIVE] == "せず"

    def test_suru_potential_is_dekiru(self):
        """The potential of する is できる, not される."""
        forms = conjugate_irregular(Word("する", "する", WordType.IRREGULAR))
        assert forms[Form.POTENTIAL] == "できる"
        assert forms[Form.POTENTIAL_NEGATIVE] == "できない"
        assert forms[Form.POTENTIAL_POLITE_PAST] == "できました"
        assert forms[Form.PASSIVE] == "される"
        assert forms[Form.CAUSATIVE] == "させる"
        assert forms[Form.CAUSATIVE_PASSIVE] == "させられる"

    def test_compound_suru(self):
        forms = conjugate_irregular(Word("勉強する", "べんきょうする", WordType.IRREGULAR))
        assert forms[Form.PRESENT] == "勉強する"
        assert forms[Form.PAST] == "勉強した"
        assert forms[Form.NEGATIVE] == "勉強しない"
        assert forms[Form.POLITE] == "勉強します"
        assert forms[Form.TE_FORM] == "勉強して"
        assert forms[Form.POTENTIAL] == "勉強できる"

    def test_kuru_with_kanji(self):
        forms = conjugate_irregular(Word("来る", "くる", WordType.IRREGULAR))
        assert forms[Form.PRESENT] == "来る"
        assert forms[Form.PAST] == "来た"
        assert forms[Form.NEGATIVE] == "来ない"
        assert forms[Form.PAST_NEGATIVE] == "来なかった"
        assert forms[Form.POLITE] == "来ます"
        assert forms[Form.TE_FORM] == "来て"
        assert forms[Form.POTENTIAL] == "来られる"
        assert forms[Form.IMPERATIVE_PLAIN] == "来い"
        assert forms[Form.CAUSATIVE] == "来させる"

    def test_kuru_in_kana(self):
        forms = conjugate_irregular(Word("くる", "くる", WordType.IRREGULAR))
        assert forms[Form.PRESENT] == "くる"
        assert forms[Form.PAST] == "きた"
        assert forms[Form.NEGATIVE] == "こない"
        assert forms[Form.POLITE] == "きます"
        assert forms[Form.TE_FORM] == "きて"
        assert forms[Form.POTENTIAL] == "こられる"
        assert forms[Form.IMPERATIVE_PLAIN] == "こい"
        assert forms[Form.PROVISIONAL] == "くれば"

    def test_kuru_table_is_not_mixed(self):
        forms = conjugate_irregular(Word("来る", "くる", WordType.IRREGULAR))
        assert all(value.startswith("来") for value in forms.values())

    def test_unknown_irregular_is_empty(self):
        forms = conjugate_irregular(Word("未知る", "みちる", WordType.IRREGULAR))
        assert forms[Form.PRESENT] == ""
        assert forms[Form.PAST] == ""
        assert set(forms.values()) == {""}
