import random

from app.crud import vocabulary_crud
from tests.utils import create_entry


class _FixedRandom:
    def __init__(self, value: int):
        self.value = value
        self.calls = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self.value


def test_empty_table_has_no_random_entry(db_session):
    assert vocabulary_crud.count_entries(db_session) == 0
    assert vocabulary_crud.get_random_entry(db_session) is None


def test_single_row_is_always_returned(db_session):
    create_entry(db_session, id=1, english_word="cat", german_word="Katze")

    for _ in range(10):
        entry = vocabulary_crud.get_random_entry(db_session)
        assert (entry.id, entry.english_word, entry.german_word) == (1, "cat", "Katze")


def test_random_offset_spans_the_whole_table(db_session):
    for english, german in [("cat", "Katze"), ("dog", "Hund"), ("house", "Haus")]:
        create_entry(db_session, english_word=english, german_word=german)

    rng = _FixedRandom(2)
    entry = vocabulary_crud.get_random_entry(db_session, rng=rng)

    assert rng.calls == [3]
    assert entry.english_word == "house"


def test_every_entry_can_be_drawn(db_session):
    words = {"cat", "dog", "house", "tree"}
    for word in words:
        create_entry(db_session, english_word=word, german_word=word.upper())

    rng = random.Random(1234)
    drawn = {vocabulary_crud.get_random_entry(db_session, rng=rng).english_word for _ in range(200)}
    assert drawn == words


def test_offset_past_the_end_returns_none(db_session):
    create_entry(db_session)
    assert vocabulary_crud.get_entry_at(db_session, 5) is None


def test_find_and_create_entry(db_session):
    assert vocabulary_crud.find_entry(db_session, "book", "Buch") is None

    vocabulary_crud.create_entry(db_session, "book", "Buch")
    db_session.commit()

    found = vocabulary_crud.find_entry(db_session, "book", "Buch")
    assert found is not None
    assert found.id is not None
