import numpy as np
import pytest

from lexvec.config import QueryConfig, Word2VecConfig
from lexvec.exceptions import MalformedHeaderError, ModelNotLoadedError, OutOfVocabularyError
from lexvec.model import Word2Vec
from lexvec.vocabulary import Vocabulary


def _random_model(write_vectors, count=40, dim=8, seed=3):
    rng = np.random.default_rng(seed)
    entries = [(f"w{i}", rng.normal(size=dim).tolist()) for i in range(count)]
    model = Word2Vec()
    model.load(write_vectors(entries))
    return model


def test_analogy_king_queen_man(royal_vectors):
    model = Word2Vec()
    model.load(royal_vectors)
    result = model.analogy("king", "queen", "man", n=1)
    assert result.ok
    assert result.words() == ["woman"]


def test_analogy_recovers_exact_vector(write_vectors):
    a, b, c = [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]
    d = [-1.0, 1.0, 1.0]
    model = Word2Vec()
    model.load(write_vectors([("a", a), ("b", b), ("c", c), ("d", d), ("e", [1.0, 1.0, 0.0])]))
    result = model.analogy("a", "b", "c", n=2)
    assert result[0].word == "d"
    assert result[0].score == pytest.approx(1.0, abs=1e-5)
    assert {"a", "b", "c"}.isdisjoint(result.words())


def test_distance_bound_and_exclusion(write_vectors):
    model = _random_model(write_vectors)
    result = model.distance(["w0", "w1"], n=5)
    assert len(result) == 5
    assert "w0" not in result.words()
    assert "w1" not in result.words()


def test_distance_scores_descending(write_vectors):
    model = _random_model(write_vectors)
    scores = [s for _, s in model.distance(["w3"], n=20)]
    assert scores == sorted(scores, reverse=True)
    analogy_scores = [s for _, s in model.analogy("w1", "w2", "w3", n=20)]
    assert analogy_scores == sorted(analogy_scores, reverse=True)


def test_distance_matches_full_sort(write_vectors):
    model = _random_model(write_vectors)
    query = model.vector("w5")
    expected = sorted(
        ((w, float(np.dot(query, model.vector(w)))) for w in model.vocab if w != "w5"),
        key=lambda x: x[1],
        reverse=True,
    )[:7]
    result = model.distance(["w5"], n=7)
    assert result.words() == [w for w, _ in expected]
    assert [s for _, s in result] == pytest.approx([s for _, s in expected], abs=1e-6)


def test_distance_fewer_candidates_than_n(royal_vectors):
    model = Word2Vec()
    model.load(royal_vectors)
    result = model.distance(["king"], n=10)
    assert sorted(result.words()) == ["man", "queen", "woman"]


def test_distance_default_n(write_vectors):
    model = _random_model(write_vectors, count=60)
    assert len(model.distance(["w0"])) == 40


def test_distance_out_of_vocabulary(royal_vectors):
    model = Word2Vec()
    model.load(royal_vectors)
    result = model.distance(["zzznotaword"], n=5)
    assert len(result) == 0
    assert result.missing == ("zzznotaword",)
    assert not result.ok


def test_distance_aborts_on_any_unknown_word(royal_vectors):
    model = Word2Vec()
    model.load(royal_vectors)
    result = model.distance(["king", "zzz"], n=5)
    assert list(result) == []
    assert result.missing == ("zzz",)


def test_out_of_vocabulary_raise_policy(royal_vectors):
    model = Word2Vec(Word2VecConfig(query=QueryConfig(oov_policy="raise")))
    model.load(royal_vectors)
    with pytest.raises(OutOfVocabularyError) as err:
        model.analogy("king", "queen", "prince")
    assert err.value.words == ("prince",)
    with pytest.raises(KeyError):
        model.distance(["zzz"])


def test_distance_empty_input(royal_vectors):
    model = Word2Vec()
    model.load(royal_vectors)
    result = model.distance([], n=3)
    assert len(result) == 0
    assert result.ok


def test_distance_rejects_non_positive_n(royal_vectors):
    model = Word2Vec()
    model.load(royal_vectors)
    with pytest.raises(ValueError):
        model.distance(["king"], n=0)


def test_cancelling_query_is_degenerate():
    vocab = Vocabulary({"up": np.array([0.0, 1.0]), "down": np.array([0.0, -1.0]), "side": np.array([1.0, 0.0])}, 2)
    model = Word2Vec.from_vocabulary(vocab)
    result = model.distance(["up", "down"], n=3)
    assert result.degenerate
    assert len(result) == 0


def test_rank_orders_candidates(royal_vectors):
    model = Word2Vec()
    model.load(royal_vectors)
    result = model.rank("king", ["man", "queen", "woman", "queen", "castle"])
    assert result.words() == ["queen", "woman", "man"]
    assert result.missing == ("castle",)
    assert result[0].score == pytest.approx(0.8, abs=1e-6)


def test_rank_unknown_term(royal_vectors):
    model = Word2Vec()
    model.load(royal_vectors)
    result = model.rank("castle", ["king"])
    assert len(result) == 0
    assert result.missing == ("castle",)


def test_cosine_between_words(royal_vectors):
    model = Word2Vec()
    model.load(royal_vectors)
    assert model.cosine("king", "queen") == pytest.approx(0.8, abs=1e-6)
    assert model.cosine("king", "king") == pytest.approx(1.0, abs=1e-6)
    with pytest.raises(OutOfVocabularyError):
        model.cosine("king", "castle")


def test_query_before_load():
    model = Word2Vec()
    with pytest.raises(ModelNotLoadedError):
        model.distance(["king"])


def test_load_from_config_path(royal_vectors):
    model = Word2Vec(Word2VecConfig(model_path=str(royal_vectors)))
    model.load()
    assert model.num_words == 4
    assert model.vec_size == 2
    assert model.contains("woman")


def test_failed_load_leaves_no_vocabulary(write_vectors):
    path = write_vectors([("a", [1.0, 0.0])], header=b"two 2\n")
    model = Word2Vec()
    with pytest.raises(MalformedHeaderError):
        model.load(path)
    with pytest.raises(ModelNotLoadedError):
        model.contains("a")


def test_rank_single_candidate_string(royal_vectors):
    model = Word2Vec()
    model.load(royal_vectors)
    result = model.rank("king", "queen")
    assert result.words() == ["queen"]
    assert result.missing == ()


def test_model_index_follows_protocol(royal_vectors):
    model = Word2Vec()
    model.load(royal_vectors)
    assert model.index.query(model.vector("king"), 1, exclude={"king"})[0].word == "queen"
