from Normalizer import (
    PHONETIC_RULES,
    delimiter_variants,
    is_meaningful_keyword,
    phonetic_variants,
    title_case,
    tokenize,
)


def test_phonetic_rules_are_symmetric_pairs():
    assert len(PHONETIC_RULES) == 10
    for pattern, replacement in PHONETIC_RULES:
        assert (replacement, pattern) in PHONETIC_RULES


def test_phonetic_variants_one_rule_each():
    assert phonetic_variants("kaju") == ["kaju", "caju", "kazu"]


def test_phonetic_variants_replace_every_occurrence():
    assert phonetic_variants("kokum") == ["kokum", "cocum"]


def test_phonetic_variants_not_chained():
    assert phonetic_variants("shop") == ["shop", "shhop", "sop"]


def test_phonetic_variants_case_sensitive():
    assert phonetic_variants("Phosphate") == ["Phosphate", "Phosfate", "Phoshphate"]


def test_phonetic_variants_no_rule_applies():
    assert phonetic_variants("tomato") == ["tomato"]
    assert phonetic_variants("") == [""]


def test_delimiter_variants_hyphen():
    assert delimiter_variants("NPK-19-19-19") == ["NPK-19-19-19", "NPK 19 19 19", "NPK191919"]


def test_delimiter_variants_space():
    assert delimiter_variants("Tomato Seeds") == [
        "Tomato Seeds", "Tomato-Seeds", "Tomato_Seeds", "TomatoSeeds",
    ]


def test_delimiter_variants_both():
    assert delimiter_variants("a_b c") == ["a_b c", "a b c", "ab c", "a_b-c", "a_b_c", "a_bc"]


def test_delimiter_variants_plain_word():
    assert delimiter_variants("urea") == ["urea"]


def test_title_case():
    assert title_case("tOMATO seeds") == "Tomato Seeds"
    assert title_case("npk-19") == "Npk-19"


def test_tokenize():
    assert tokenize("Chilli  Mirchi-Seeds_X") == ["chilli", "mirchi", "seeds", "x"]
    assert tokenize("युरिया खत") == ["युरिया", "खत"]
    assert tokenize("") == []
    assert tokenize("  -_ ") == []


def test_is_meaningful_keyword():
    assert is_meaningful_keyword("ab")
    assert is_meaningful_keyword("1a")
    assert is_meaningful_keyword("खत")
    assert not is_meaningful_keyword("19")
    assert not is_meaningful_keyword("a")
    assert not is_meaningful_keyword(" x ")
    assert not is_meaningful_keyword("--")
    assert not is_meaningful_keyword(None)
