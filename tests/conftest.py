import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from kids_keyboard.vocabulary import VocabularyIndex


@pytest.fixture
def vocab():
    return VocabularyIndex.from_identifiers(["a_cat", "a_car", "a_card"])


@pytest.fixture
def animals():
    return VocabularyIndex.from_identifiers(
        ["a_cat", "a_dog", "a_fish", "a_ice_cream", "a_teddy_bear"]
    )
