from __future__ import annotations

from charlockholmes.models import (
    TRIGRAM_MODEL_SIZE,
    build_trigram_model,
    extract_trigrams,
    guess_language,
    load_frequent_characters,
    load_language_models,
    normalize_text,
    score_best_language,
    score_multibyte,
    score_trigrams,
)


def test_normalize_text() -> None:
    assert normalize_text("Hello, World!") == " hello world "
    assert normalize_text("123 ...") == ""


def test_extract_trigrams() -> None:
    assert extract_trigrams("ab") == [" ab", "ab "]
    assert extract_trigrams("!!") == []


def test_build_trigram_model_orders_ties_lexically() -> None:
    # " aa", "aaa" and "aa " occur twice each; the space sorts first.
    assert build_trigram_model("aaa aaa", size=2) == frozenset({" aa", "aa "})


def test_score_trigrams() -> None:
    model = frozenset({"abc"})
    assert score_trigrams([], model) == 0
    assert score_trigrams(["abc"] * 4, model) == 98
    assert score_trigrams(["abc", "x", "y", "z"], model) == 75
    assert score_trigrams(["x", "y"], model) == 0


def test_score_best_language_prefers_earlier_on_tie() -> None:
    models = {"aa": frozenset({"abc"}), "bb": frozenset({"abc"})}
    assert score_best_language(["abc"], ["bb", "aa"], models) == (98, "bb")
    assert score_best_language(["abc"], ["zz"], models) == (0, None)


def test_score_multibyte() -> None:
    assert score_multibyte("", frozenset()) == 0
    assert score_multibyte("ascii only", frozenset()) == 0
    # One bad sequence outweighs fewer than twenty characters.
    assert score_multibyte("\ufffd日", frozenset("日")) == 0
    assert score_multibyte("日本", frozenset()) == 5
    assert score_multibyte("日本", frozenset("日")) == 40
    assert score_multibyte("日" * 40, frozenset("日")) == 100


def test_language_models_are_built_once() -> None:
    models = load_language_models()
    assert models is load_language_models()
    assert {"en", "de", "ru", "el", "tr"} <= set(models)
    for model in models.values():
        assert 0 < len(model) <= TRIGRAM_MODEL_SIZE


def test_frequent_characters() -> None:
    chars = load_frequent_characters()
    assert chars is load_frequent_characters()
    assert set(chars) == {"ja", "zh", "ko"}
    assert "の" in chars["ja"]


def test_guess_language() -> None:
    models = load_language_models()
    chars = load_frequent_characters()
    english = "The people of the town said that they would not be there."
    assert guess_language(english, models, chars) == "en"
    assert guess_language("これはテストです", models, chars) == "ja"
    assert guess_language("", models, chars) is None
    assert guess_language("12345", models, chars) is None
