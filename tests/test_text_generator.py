import random

import pytest

from app.catalog import SENTENCES, WORDS
from app.errors import ConfigError
from services.text_generator import (
    GeneratorKind,
    MixedCaseGenerator,
    RandomWordGenerator,
    SentenceGenerator,
    make_generator,
)

ALL_VARIANTS = [RandomWordGenerator, SentenceGenerator, MixedCaseGenerator]


@pytest.mark.parametrize("cls", ALL_VARIANTS)
@pytest.mark.parametrize("count", [0, -1, -25])
def test_non_positive_count_gives_empty_text(cls, count):
    assert cls().generate_text(count) == ""


@pytest.mark.parametrize("cls", ALL_VARIANTS)
@pytest.mark.parametrize("count", [None, "3", 2.5])
def test_non_integer_count_gives_empty_text(cls, count):
    assert cls().generate_text(count) == ""


@pytest.mark.parametrize("cls", ALL_VARIANTS)
def test_empty_catalog_gives_empty_text(cls):
    assert cls([]).generate_text(5) == ""


@pytest.mark.parametrize("count", [1, 7, 25])
def test_random_words_come_from_catalog(rng, count):
    tokens = RandomWordGenerator(rng=rng).generate_text(count).split(" ")
    assert len(tokens) == count
    assert all(t in WORDS for t in tokens)


def test_sentences_are_joined_catalog_entries(rng):
    gen = SentenceGenerator(rng=rng)
    text = gen.generate_text(3)
    # sentences contain spaces, so rebuild the text from catalog entries
    remaining = text
    for i in range(3):
        match = next(s for s in SENTENCES if remaining.startswith(s))
        remaining = remaining[len(match):]
        if i < 2:
            assert remaining.startswith(" ")
            remaining = remaining[1:]
    assert remaining == ""


def test_mixed_case_tokens_fold_to_catalog_words(rng):
    tokens = MixedCaseGenerator(rng=rng).generate_text(50).split(" ")
    assert len(tokens) == 50
    lowered = {w.lower() for w in WORDS}
    assert all(t.lower() in lowered for t in tokens)


def test_mixed_case_varies_across_calls():
    gen = MixedCaseGenerator(["typing"])
    seen = {gen.generate_text(1) for _ in range(200)}
    assert len(seen) > 10
    assert all(s.lower() == "typing" for s in seen)
    assert any(ch.isupper() for s in seen for ch in s)
    assert any(ch.islower() for s in seen for ch in s)


def test_mixed_case_ignores_original_case():
    gen = MixedCaseGenerator(["ABC"], rng=random.Random(7))
    outputs = {gen.generate_text(1) for _ in range(100)}
    assert any(ch.islower() for s in outputs for ch in s)


def test_same_seed_same_text():
    a = RandomWordGenerator(rng=random.Random(99)).generate_text(20)
    b = RandomWordGenerator(rng=random.Random(99)).generate_text(20)
    assert a == b


def test_draws_with_replacement():
    assert RandomWordGenerator(["only"]).generate_text(3) == "only only only"


def test_invalid_entries_are_dropped():
    gen = RandomWordGenerator(["ok", "", "toolongword"])
    assert gen.catalog == ("ok",)
    sentences = SentenceGenerator(["Fine.", "x" * 201])
    assert sentences.catalog == ("Fine.",)


def test_make_generator_variants():
    assert isinstance(make_generator(GeneratorKind.RANDOM_WORDS), RandomWordGenerator)
    assert isinstance(make_generator(1), SentenceGenerator)
    assert isinstance(make_generator("mixed-case"), MixedCaseGenerator)


def test_make_generator_unknown_falls_back():
    gen = make_generator(42)
    assert type(gen) is RandomWordGenerator
    assert gen.kind is GeneratorKind.RANDOM_WORDS


@pytest.mark.parametrize("value,expected", [
    (GeneratorKind.SENTENCES, GeneratorKind.SENTENCES),
    (2, GeneratorKind.MIXED_CASE),
    ("random_words", GeneratorKind.RANDOM_WORDS),
    ("Mixed Case", GeneratorKind.MIXED_CASE),
    (" sentences ", GeneratorKind.SENTENCES),
])
def test_parse_kind(value, expected):
    assert GeneratorKind.parse(value) is expected


@pytest.mark.parametrize("value", [3, -1, "words", None, True])
def test_parse_kind_rejects_unknown(value):
    with pytest.raises(ConfigError):
        GeneratorKind.parse(value)


def test_kind_labels():
    assert [k.label for k in GeneratorKind] == ["Random Words", "Sentences", "Mixed Case"]
