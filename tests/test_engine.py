import pytest
from packages.engine import CandidateEngine, DataSourceError, InvalidFeedbackError

SMALL = ["adieu", "audio", "route", "irate"]
EXTENDED = SMALL + ["burnt", "lumpy", "tulip"]


# --- construction ---
def test_construct_folds_case_and_dedupes():
    eng = CandidateEngine(["CRANE", "crane ", "raise"], N=5)
    assert eng.dictionary == {"crane", "raise"}
    assert eng.candidates == eng.dictionary
    assert len(eng) == 2 and "crane" in eng


@pytest.mark.parametrize("words", [[], ["crane", "cranes"], ["cr4ne"], ["   "]])
def test_construct_rejects_empty_or_malformed(words):
    with pytest.raises(DataSourceError):
        CandidateEngine(words, N=5)


@pytest.mark.parametrize("N", [0, -1, "5"])
def test_construct_rejects_bad_length(N):
    with pytest.raises(ValueError):
        CandidateEngine(["crane"], N=N)


def test_construct_rejects_unknown_absent_rule():
    with pytest.raises(ValueError):
        CandidateEngine(["crane"], absent_rule="sometimes")


def test_from_path_bundled_dictionary():
    eng = CandidateEngine.from_path()
    assert len(eng) == len(eng.dictionary) > 2000
    assert "crane" in eng.dictionary


# --- update ---
def test_adieu_scenario_small():
    # u present but not at position 4; a, d, i, e absent.
    # audio/irate/adieu hold 'a', route holds 'e' -> nothing survives.
    eng = CandidateEngine(SMALL)
    assert eng.update("adieu", "00001") == 0
    assert eng.candidates == frozenset()


def test_adieu_scenario_extended():
    eng = CandidateEngine(EXTENDED)
    # burnt, lumpy: 'u' at 1, no a/d/i/e. tulip has 'i'.
    assert eng.update("adieu", "00001") == 2
    assert eng.candidates == {"burnt", "lumpy"}


def test_update_accepts_symbol_sequences():
    a = CandidateEngine(EXTENDED)
    b = CandidateEngine(EXTENDED)
    a.update("ADIEU", "00001")
    b.update("adieu", [0, 0, 0, 0, 1])
    assert a.candidates == b.candidates


def test_exact_match_in_dictionary():
    eng = CandidateEngine(["crane", "raise", "stare"])
    assert eng.update("stare", "22222") == 1
    assert eng.candidates == {"stare"}


def test_exact_match_outside_dictionary():
    eng = CandidateEngine(["crane", "raise", "stare"])
    assert eng.update("slate", "22222") == 0


def test_contradictory_rounds_empty_not_error():
    eng = CandidateEngine(["xylem", "boxer", "fixed"])
    assert eng.update("xylem", "22222") == 1
    assert eng.update("boxer", "00000") == 0  # 'x' now absent
    assert eng.guess() == {}
    assert eng.update("fixed", "00000") == 0


ROUNDS = [("raise", "01002"), ("clone", "00102"), ("phone", "00022")]


def test_update_is_monotonic():
    eng = CandidateEngine.from_path()
    before = len(eng)
    for guess, fb in ROUNDS:
        after = eng.update(guess, fb)
        assert after <= before
        assert eng.candidates <= eng.dictionary
        before = after


@pytest.mark.parametrize("guess,fb", ROUNDS)
def test_update_is_idempotent(guess, fb):
    eng = CandidateEngine.from_path()
    n1 = eng.update(guess, fb)
    once = eng.candidates
    n2 = eng.update(guess, fb)
    assert n1 == n2 and eng.candidates == once


@pytest.mark.parametrize("guess,fb", [
    ("adieu", "0001"),      # short feedback
    ("adie", "00010"),      # short guess
    ("adi3u", "00010"),     # non-letter
    ("adieu", "00310"),     # bad symbol
    ("adieu", [0, 0, 0, 0, None]),
])
def test_invalid_feedback_leaves_state(guess, fb):
    eng = CandidateEngine(EXTENDED)
    eng.update("adieu", "00001")
    snapshot = (eng.candidates, dict(eng.scores))
    with pytest.raises(InvalidFeedbackError):
        eng.update(guess, fb)
    assert (eng.candidates, dict(eng.scores)) == snapshot


# --- scores / guess / reset ---
def test_scores_track_candidates():
    eng = CandidateEngine(EXTENDED)
    assert set(eng.scores) == eng.candidates
    eng.update("adieu", "00001")
    assert set(eng.scores) == {"burnt", "lumpy"}


@pytest.mark.parametrize("n", range(1, 8))
def test_guess_bound(n):
    eng = CandidateEngine(EXTENDED[:n])
    assert len(eng.guess()) == min(5, n)


def test_guess_order_after_update():
    eng = CandidateEngine(EXTENDED)
    eng.update("adieu", "00001")
    # equal frequency (6); burnt wins on positional rank (129 vs 127)
    assert list(eng.guess().items()) == [("burnt", 6), ("lumpy", 6)]


def test_guess_k():
    eng = CandidateEngine(EXTENDED)
    assert len(eng.guess(3)) == 3
    assert eng.guess(0) == {}


def test_reset_restores_dictionary():
    eng = CandidateEngine(EXTENDED)
    eng.update("adieu", "00001")
    eng.update("burnt", "22222")
    assert eng.reset() == len(EXTENDED)
    assert eng.candidates == eng.dictionary
    assert set(eng.scores) == set(EXTENDED)


def test_reset_scores_match_fresh_engine():
    eng = CandidateEngine(EXTENDED)
    fresh = dict(eng.scores)
    eng.update("adieu", "00001")
    eng.reset()
    assert dict(eng.scores) == fresh
