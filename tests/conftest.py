"""Shared test fixtures for simple_bayes tests."""

from __future__ import annotations

import pytest

import simple_bayes
from simple_bayes import Corpus

FRUIT_TRAININGS = [
    ("apple", "red sweet", 1),
    ("apple", "green", 0.5),
    ("apple", "round", 2),
    ("banana", "sweet", 1),
    ("banana", "green", 0.5),
    ("banana", "yellow long", 2),
    ("orange", "red", 1),
    ("orange", "yellow sweet", 0.5),
    ("orange", "round", 2),
]

# https://github.com/jekyll/classifier-reborn/tree/3488245735905187713823ea731fc353634d8763
SENTIMENT_TRAININGS = [
    ("interesting", "here are some good words. I hope you love them"),
    ("interesting", "all you need is love"),
    ("interesting", "the love boat, soon we will be taking another ride"),
    ("interesting", "ruby don't take your love to town"),
    ("uninteresting", "here are some bad words, I hate you"),
    ("uninteresting", "bad bad leroy brown badest man in the darn town"),
    ("uninteresting", "the good the bad and the ugly"),
    ("uninteresting", "java, javascript, css front-end html"),
]

PET_TRAININGS = [
    ("dog", "dog days of summer"),
    ("dog", "a man's best friend is his dog"),
    ("dog", "a good hunting dog is a fine thing"),
    ("dog", "man my dogs are tired"),
    ("dog", "dogs are better than cats in soooo many ways"),
    ("cat", "the fuzz ball spilt the milk"),
    ("cat", "got rats or mice get a cat to kill them"),
    ("cat", "cats never come when you call them"),
    ("cat", "That dang cat keeps scratching the furniture"),
]

FRUIT_QUESTION = "Maybe green maybe red but definitely round and sweet"


@pytest.fixture
def fruit_corpus() -> Corpus:
    """Three fruits trained with mixed weights."""
    corpus = simple_bayes.init()
    for category, text, weight in FRUIT_TRAININGS:
        corpus = simple_bayes.train(corpus, category, text, weight=weight)
    return corpus


@pytest.fixture
def sentiment_corpus() -> Corpus:
    corpus = simple_bayes.init()
    for category, text in SENTIMENT_TRAININGS:
        corpus = simple_bayes.train(corpus, category, text)
    return corpus


@pytest.fixture
def pet_corpus() -> Corpus:
    corpus = simple_bayes.init()
    for category, text in PET_TRAININGS:
        corpus = simple_bayes.train(corpus, category, text)
    return corpus


@pytest.fixture
def animal_view():
    """A small corpus view of two categories."""
    return (
        ("cat", {"nice": 1, "cute": 1, "cat": 1}),
        ("dog", {"nice": 2, "dog": 2}),
    )
