import random

import pytest

from kids_keyboard.kb_layout import Key
from kids_keyboard.key_types import Action
from kids_keyboard.session import EDITING, MATCH, NONE, History, SessionState
from kids_keyboard.suggest import (
    ghost_color,
    on_key_event,
    pick_suggestion,
    rank_candidates,
)
from kids_keyboard.vocabulary import VocabularyIndex


def press(keys, vocabulary, state=None, history=None, rng=None):
    """Feed ``keys`` through the engine and return every result."""
    state = state or SessionState()
    history = history if history is not None else History()
    results = []
    for k in keys:
        res = on_key_event(k, state, history, vocabulary, rng)
        state = res.state
        results.append(res)
    return results


def test_first_letter_prefers_shortest_word(vocab):
    res = press(["c"], vocab)[-1]
    assert res.state.text_input == "C"
    assert res.state.suggestion.lower() in {"cat", "car"}
    assert res.image_ref is None
    assert res.highlight == "a"
    assert res.display.typed == "C"
    assert res.display.ghost == res.state.suggestion[1:]


def test_second_letter_keeps_suggestion(vocab):
    first, second = press(["c", "a"], vocab)
    assert second.state.suggestion == first.state.suggestion
    assert second.highlight in {"t", "r"}
    assert second.highlight == second.state.suggestion[2].lower()


def test_typing_word_commits_it(vocab):
    history = History()
    res = press(["c", "a", "r"], vocab, history=history)[-1]
    assert res.entry is not None and res.entry.word == "car"
    assert res.image_ref == "a_car"
    assert res.highlight == MATCH
    assert res.state.suggestion == ""
    assert res.committed == "car"
    assert res.history_changed
    assert history.words == ["car"]
    assert history.index == 0
    assert res.pulses == (10, 100)


def test_match_display_follows_case(vocab):
    upper = press(["c", "a", "t"], vocab)[-1]
    assert upper.display.text == "CAT"
    lower = press(["C", "A", "T"], vocab, state=SessionState(is_upper_case=False))[-1]
    assert lower.display.text == "cat"


def test_history_words_are_not_suggested():
    vocabulary = VocabularyIndex.from_identifiers(["a_cat", "a_car"])
    res = press(["c"], vocabulary, history=History(["cat"]))[-1]
    assert res.state.suggestion.lower() == "car"


def test_exhausted_candidates_are_recycled():
    vocabulary = VocabularyIndex.from_identifiers(["a_cat", "a_car"])
    history = History(["cat", "car"])
    res = press(["c"], vocabulary, history=history, rng=random.Random(3))[-1]
    assert res.state.suggestion.lower() in {"cat", "car"}
    assert len(history) == 2


def test_prefixes_never_show_a_picture(animals):
    for entry in animals:
        history = History()
        state = SessionState(is_upper_case=False)
        for letter in entry.word[:-1]:
            res = on_key_event(letter, state, history, animals)
            state = res.state
            assert res.image_ref is None
            assert res.state.suggestion.lower().startswith(res.state.text_input.lower())


def test_every_word_can_be_typed(animals):
    for entry in animals:
        res = press(list(entry.word), animals)[-1]
        assert res.image_ref == entry.identifier
        assert res.display.text == entry.word.upper()


def test_clear_after_match(vocab):
    res = press(["c", "a", "t", Key("CLEAR", Action.clear)], vocab)[-1]
    assert res.state.text_input == ""
    assert res.state.suggestion == ""
    assert res.highlight == NONE


def test_delete_on_empty_is_noop(vocab):
    state = SessionState(highlight="q")
    res = on_key_event(Action.delete, state, History(), vocab)
    assert res.state == state
    assert res.highlight == "q"


def test_delete_reopens_suggestion(vocab):
    res = press(["c", "a", "r", "d", Action.delete], vocab)[-1]
    assert res.entry.word == "car"
    assert res.highlight == MATCH


def test_shift_only_toggles_case(vocab):
    before = press(["c"], vocab)[-1].state
    res = on_key_event(Action.shift, before, History(), vocab)
    assert res.state.is_upper_case is False
    assert res.state.text_input == before.text_input
    assert res.state.suggestion == before.suggestion
    assert res.highlight == before.highlight
    assert res.display.ghost == before.suggestion[1:].lower()
    assert res.display.typed == before.text_input


def test_history_navigation_wraps(animals):
    history = History(["cat", "dog", "fish"], index=0)
    state = SessionState(is_upper_case=False)
    back = on_key_event(Action.history_back, state, history, animals)
    assert history.index == 2
    assert back.state.text_input == "fish"
    assert back.image_ref == "a_fish"
    assert not back.history_changed

    fwd = on_key_event(Action.history_forward, back.state, history, animals)
    assert history.index == 0
    assert fwd.state.text_input == "cat"
    assert history.words == ["cat", "dog", "fish"]


def test_back_then_forward_returns_to_start(animals):
    history = History(["cat", "dog", "fish"])
    start = history.current()
    results = press([Action.history_back, Action.history_forward], animals, history=history)
    assert results[-1].state.text_input.lower() == start


def test_navigation_with_empty_history_keeps_text(vocab):
    state = press(["c"], vocab)[-1].state
    res = on_key_event(Action.history_back, state, History(), vocab)
    assert res.state.text_input == state.text_input


def test_typing_past_browsed_word_starts_new_word(vocab):
    # "zoo" is no longer illustrated, so browsing to it shows plain text
    history = History(["zoo"])
    browsed = on_key_event(Action.history_back, SessionState(), history, vocab)
    assert browsed.state.text_input == "zoo"
    assert browsed.highlight == EDITING
    assert browsed.image_ref is None

    res = on_key_event("c", browsed.state, history, vocab)
    assert res.state.text_input == "C"


def test_space_continues_multi_word_suggestion(animals):
    ice = press(list("ice"), animals)[-1]
    assert ice.display.ghost == " CREAM"
    assert ice.highlight == " "
    spaced = on_key_event(Key("SPACE", Action.space), ice.state, History(), animals)
    assert spaced.display.typed == "ICE "
    assert spaced.display.ghost == "CREAM"
    assert spaced.highlight == "c"


def test_leading_space_is_dropped(vocab):
    res = on_key_event(" ", SessionState(), History(), vocab)
    assert res.state.text_input == ""
    assert res.highlight == NONE


def test_unknown_prefix_highlights_delete(vocab):
    res = press(["x"], vocab)[-1]
    assert res.state.suggestion == ""
    assert res.highlight == EDITING
    assert res.display.text == "X"


@pytest.mark.parametrize("key", ["", "7", "NOPE", None])
def test_malformed_keys_are_ignored(vocab, key):
    state = SessionState(text_input="CA", suggestion="CAT", highlight="t")
    res = on_key_event(key, state, History(), vocab)
    assert res.state == state
    assert res.pulses == ()
    assert res.display.ghost == "T"


def test_rank_candidates_prefers_short_identifiers(vocab):
    ranked = rank_candidates(vocab.prefix_matches("ca"))
    assert ranked[-1].word == "card"


def test_pick_suggestion_without_matches(vocab):
    assert pick_suggestion("zz", History(), vocab) == ""


def test_ghost_color_depends_on_theme():
    assert ghost_color(True) != ghost_color(False)
